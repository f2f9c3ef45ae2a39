"""
# Filesystem collaborator implementation backed by the host operating system.

# [ Elements ]
# /system/
	# The &System instance used by &.types.Path when no collaborator is given.
"""
from collections.abc import Iterable
from typing import Optional
import os
import stat
import functools
import logging
import tempfile

from . import abstract

logger = logging.getLogger(__name__)

def _strip(path:str) -> str:
	# Remove the directory designation; the root directory keeps its separator.
	return path.rstrip('/') or path[:1]

class System(abstract.Filesystem):
	"""
	# &abstract.Filesystem implementation using &os and &tempfile.
	"""

	_write_mask = stat.S_IWUSR|stat.S_IWGRP|stat.S_IWOTH
	_fs_access = functools.partial(
		os.access,
		effective_ids=(os.access in os.supports_effective_ids)
	)
	_fs_access_map = {
		'r': os.R_OK,
		'w': os.W_OK,
		'x': os.X_OK,
	}

	def query_attributes(self, path:str, *, stat=os.stat, isdir=stat.S_ISDIR) -> abstract.Attributes:
		# Any failure to identify the file, including overlong names and
		# inaccessible containers, reports an absent file.
		try:
			st = stat(_strip(path))
		except OSError:
			return abstract.void

		return abstract.Attributes(
			True,
			read_only=(st.st_mode & self._write_mask) == 0,
			is_directory=isdir(st.st_mode),
		)

	def access(self, path:str, mode:str) -> bool:
		return self._fs_access(_strip(path), self._fs_access_map[mode])

	def create_directory(self, path:str, *, mkdir=os.mkdir):
		mkdir(_strip(path))

	def remove_directory(self, path:str, *, rmdir=os.rmdir):
		rmdir(_strip(path))

	def list_directory(self, path:str, *, scandir=os.scandir) -> Iterable[tuple[str, bool]]:
		with scandir(_strip(path)) as scan:
			return [(de.name, de.is_dir(follow_symlinks=False)) for de in scan]

	def create_file(self, path:str):
		# Exclusive creation; an existing file is an error.
		with open(path, 'xb'):
			pass

	def delete_file(self, path:str, *, remove=os.remove):
		remove(path)

	def clear_read_only(self, path:str, *, stat=os.stat, chmod=os.chmod, writable=stat.S_IWUSR):
		chmod(path, stat(path).st_mode | writable)

	def open_for_read(self, path:str):
		return open(path, 'rb')

	def get_temp_root(self, *, gettempdir=tempfile.gettempdir) -> str:
		return gettempdir()

	def get_env(self, name:str, *, environ=os.environ) -> Optional[str]:
		return environ.get(name)

	def get_process_id(self, *, getpid=os.getpid) -> int:
		return getpid()

def void(filesystem:abstract.Filesystem, directory:str):
	"""
	# Remove the &directory and everything it contains using the primitives
	# of &filesystem.

	# Files are removed as they are listed; directories are removed deepest first
	# once their contents are gone. Links to directories are removed, not followed.
	"""
	stack = [directory]
	visited = []

	while stack:
		current = stack.pop()
		visited.append(current)

		for name, is_directory in filesystem.list_directory(current):
			if is_directory:
				stack.append(current + name + '/')
			else:
				filesystem.delete_file(current + name)

	for d in reversed(visited):
		filesystem.remove_directory(d)

	logger.debug("removed %d directories under %s", len(visited), directory)

system = System()
