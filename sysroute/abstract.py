"""
# Interface descriptions for the filesystem collaborator used by &.types.Path.

# Paths are given to the collaborator as normalized strings; directory paths
# retain their trailing separator. Failures are reported by raising &OSError.

# [ Access Codes ]

# &Filesystem.access is given a single character identifying the permission
# being queried.

	# /`'r'`/
		# Readable.
	# /`'w'`/
		# Writable.
	# /`'x'`/
		# Executable or searchable.
"""
from abc import abstractmethod
from collections.abc import Iterable
from typing import Protocol, Optional, BinaryIO

from .tools import record

@record
class Attributes(object):
	"""
	# The subset of file status consulted by &.types.Path.

	# [ Properties ]
	# /exists/
		# Whether a file of any type is present at the path.
	# /read_only/
		# Whether the file lacks write permission for everyone.
	# /is_directory/
		# Whether the file is a directory.
	"""
	exists: bool
	read_only: bool = False
	is_directory: bool = False

void = Attributes(False)

class Filesystem(Protocol):
	"""
	# Primitive operations performed on behalf of &.types.Path.
	"""

	@abstractmethod
	def query_attributes(self, path:str) -> Attributes:
		"""
		# The &Attributes of the file at &path; &void when nothing is present.
		"""
		raise NotImplementedError

	@abstractmethod
	def access(self, path:str, mode:str) -> bool:
		"""
		# Whether the process has the permission identified by &mode.
		"""
		raise NotImplementedError

	@abstractmethod
	def create_directory(self, path:str) -> None:
		"""
		# Create a single directory; the leading directories must exist.
		"""
		raise NotImplementedError

	@abstractmethod
	def remove_directory(self, path:str) -> None:
		"""
		# Remove the empty directory at &path.
		"""
		raise NotImplementedError

	@abstractmethod
	def list_directory(self, path:str) -> Iterable[tuple[str, bool]]:
		"""
		# The names held by the directory paired with whether they are directories.
		# Links to directories are reported as non-directories.
		"""
		raise NotImplementedError

	@abstractmethod
	def create_file(self, path:str) -> None:
		"""
		# Create a new, empty file; fails if any file is already present.
		"""
		raise NotImplementedError

	@abstractmethod
	def delete_file(self, path:str) -> None:
		"""
		# Remove the non-directory file at &path.
		"""
		raise NotImplementedError

	@abstractmethod
	def clear_read_only(self, path:str) -> None:
		"""
		# Grant write permission to the owner of the file at &path.
		"""
		raise NotImplementedError

	@abstractmethod
	def open_for_read(self, path:str) -> BinaryIO:
		"""
		# Open the file for reading bytes. The returned object is a context manager.
		"""
		raise NotImplementedError

	@abstractmethod
	def get_temp_root(self) -> str:
		"""
		# The directory designated by the platform for temporary files.
		"""
		raise NotImplementedError

	@abstractmethod
	def get_env(self, name:str) -> Optional[str]:
		raise NotImplementedError

	@abstractmethod
	def get_process_id(self) -> int:
		raise NotImplementedError
