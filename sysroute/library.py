"""
# Well-known locations and library resolution.

# [ File System ]

# Paths are normally constructed from strings or built incrementally:

#!/pl/python
	from sysroute import library as libroute
	p = libroute.Path('/usr/lib/')
	p.append_file('libz')

# The location constructors return new &Path instances:

	# - &root_directory
	# - &temporary_directory
	# - &home_directory
	# - &configuration_directory
	# - &system_library_directories
	# - &library_path

# [ Elements ]
# /system_library_paths/
	# The directories searched by &library_path after those given by the caller.
# /library_suffixes/
	# The suffixes tried by &library_path following the platform's &dll_suffix.
"""
from collections.abc import Iterable
from typing import Optional
import sys
import logging

from .core import ConstructionError, OperationError, PathError
from .types import Path, archive_magic, bytecode_magics
from . import core
from . import abstract
from . import files
from . import tools
from . import project

logger = logging.getLogger(__name__)

system_library_paths = ('/usr/lib/', '/lib/')
configuration_path = '/etc/' + project.name + '/'
temporary_prefix = project.name + '_'
library_prefix = 'lib'
library_suffixes = ('a', 'o', 'bc')

_dll_suffixes = {
	'win32': 'dll',
	'cygwin': 'dll',
	'darwin': 'dylib',
}

def dll_suffix(platform:str=sys.platform) -> str:
	"""
	# The suffix used by shared libraries on &platform.
	"""
	return _dll_suffixes.get(platform, 'so')

def root_directory(*, filesystem:Optional[abstract.Filesystem]=None) -> Path:
	"""
	# The root directory of the filesystem.
	"""
	p = Path(filesystem=filesystem)
	p.set_directory('/')
	return p

def home_directory(*, filesystem:Optional[abstract.Filesystem]=None) -> Path:
	"""
	# The directory identified by (system/environ)`HOME`.
	# The root directory is returned when it is not set or is not a valid path.
	"""
	fs = filesystem or files.system
	home = fs.get_env('HOME')

	if home:
		p = Path(filesystem=fs)
		if p.set_directory(home):
			return p

	return root_directory(filesystem=fs)

def configuration_directory(*, filesystem:Optional[abstract.Filesystem]=None) -> Path:
	"""
	# The directory holding system-wide configuration for the project.
	"""
	return Path(configuration_path, filesystem=filesystem)

def system_library_directories(*, filesystem:Optional[abstract.Filesystem]=None) -> list[Path]:
	"""
	# The system library directories in the order searched by &library_path.
	"""
	return [Path(x, filesystem=filesystem) for x in system_library_paths]

def allocate_temporary(filesystem:abstract.Filesystem) -> Path:
	"""
	# Create an empty directory inside the platform's temporary directory named
	# after the current process.

	# A directory left by a former process with the same identifier is destroyed
	# and recreated. The returned path is not cached; &temporary_directory
	# is the cached form.
	"""
	root = filesystem.get_temp_root()

	result = Path(filesystem=filesystem)
	if not result.set_directory(root):
		raise ConstructionError(root, 'invalid', core.violation(core.directory(root)))

	name = temporary_prefix + str(filesystem.get_process_id())
	if not result.append_directory(name):
		candidate = result.string + core.directory(name)
		raise ConstructionError(candidate, 'invalid', core.violation(candidate))

	if result.exists():
		logger.warning("removing stale temporary directory %s", result)
		result.fs_destroy_directory(True)

	result.fs_create_directory(False)
	logger.debug("allocated temporary directory %s", result)
	return result

_temporary = tools.Once(lambda: allocate_temporary(files.system))

def temporary_directory() -> Path:
	"""
	# The process' temporary directory.

	# The directory is allocated by &allocate_temporary on first use; subsequent
	# calls return a copy of the same path without consulting the filesystem.
	"""
	return _temporary().copy()

def _identify_library(directory:Path, basename:str, dll:str) -> Optional[Path]:
	# Probe prefixed names across all suffixes before unprefixed names.
	suffixes = (dll,) + library_suffixes

	for name in (library_prefix + basename, basename):
		path = directory.copy()
		if not path.append_file(name):
			continue

		for suffix in suffixes:
			if not path.append_suffix(suffix):
				continue

			if path.exists() and path.fs_readable():
				logger.debug("library %r resolved to %s", basename, path)
				return path

			logger.debug("library candidate %s rejected", path)
			path.elide_suffix()

	return None

def library_path(basename:str, search_paths:Iterable[str]=(), *,
		filesystem:Optional[abstract.Filesystem]=None,
		suffix:Optional[str]=None,
	) -> Path:
	"""
	# Locate the library file identified by &basename.

	# The directories in &search_paths are searched first, followed by
	# &system_library_paths. Within each directory, `lib<basename>` is tried
	# with the &dll_suffix, then `a`, `o`, and `bc`; after which `<basename>`
	# is tried with the same suffixes. The first existing, readable file is returned.

	# [ Returns ]
	# The &Path of the library, or an empty &Path when no candidate matched.
	"""
	dll = suffix or dll_suffix()
	candidate = Path(filesystem=filesystem)

	for d in (*search_paths, *system_library_paths):
		if not candidate.set_directory(d):
			continue

		found = _identify_library(candidate, basename, dll)
		if found is not None:
			return found

	candidate.clear()
	return candidate
