"""
# The &Path value type.

# A &Path holds a single normalized path string whose trailing separator
# designates whether it identifies a directory or a file. Every mutation is
# validated as a whole: the candidate string replaces the current one only when
# it passes &core.is_valid, otherwise the method returns &False and the
# instance is left unchanged.

#!/pl/python
	p = Path()
	p.set_directory('/usr/lib')
	p.append_file('libz')
	p.append_suffix('so')
	assert str(p) == '/usr/lib/libz.so'

# Filesystem actions, the methods prefixed with `fs_`, are delegated to the
# &abstract.Filesystem collaborator associated with the instance.
"""
from typing import Optional
import logging

from . import core
from . import abstract
from . import files

logger = logging.getLogger(__name__)

archive_magic = b"!<arch>\n"
bytecode_magics = (b"llvc", b"llvm")

class Path(object):
	"""
	# Mutable, validated path string.

	# [ Properties ]
	# /string/
		# The normalized path; empty or valid.
	# /filesystem/
		# The collaborator used by filesystem actions.
	"""
	__slots__ = ('string', 'filesystem',)
	ConstructionError = core.ConstructionError
	OperationError = core.OperationError

	def __init__(self, string:str='', *, filesystem:Optional[abstract.Filesystem]=None):
		self.filesystem = filesystem or files.system
		self.string = ''

		if string:
			s = core.normalize(string)
			v = core.violation(s)
			if v is not None:
				raise core.ConstructionError(string, 'invalid', v)
			self.string = s

	@classmethod
	def from_string(Class, string:str, **kw):
		"""
		# Construct a &Path from &string requiring that it be non-empty.
		"""
		if not string:
			raise core.ConstructionError(string, 'empty', 'empty')
		return Class(string, **kw)

	def copy(self):
		"""
		# Create an independent instance with the same string and collaborator.
		"""
		p = self.__class__(filesystem=self.filesystem)
		p.string = self.string
		return p

	def __repr__(self):
		return "(path@%r)" %(self.string,)

	def __str__(self):
		return self.string

	def __fspath__(self) -> str:
		return self.string

	def __eq__(self, operand):
		if isinstance(operand, Path):
			return self.string == operand.string
		return NotImplemented

	def __ne__(self, operand):
		if isinstance(operand, Path):
			return self.string != operand.string
		return NotImplemented

	# Mutable; not hashable.
	__hash__ = None

	def __bool__(self):
		return bool(self.string)

	def _commit(self, candidate:Optional[str]) -> bool:
		# Replace the string iff the candidate is valid.
		if candidate is None or not core.is_valid(candidate):
			return False

		self.string = candidate
		return True

	# Mode queries.

	def is_valid(self) -> bool:
		return core.is_valid(self.string)

	def is_empty(self) -> bool:
		return not self.string

	def is_directory(self) -> bool:
		"""
		# Whether the path is valid and identifies a directory.
		"""
		return self.string[-1:] == '/' and self.is_valid()

	def is_file(self) -> bool:
		"""
		# Whether the path is valid and identifies a non-directory file.
		"""
		return self.string[-1:] not in ('/', '') and self.is_valid()

	# Setters.

	def clear(self):
		"""
		# Reset the path to the empty string.
		"""
		self.string = ''

	def set_directory(self, path:str) -> bool:
		"""
		# Replace the path with &path designated as a directory.
		"""
		if not path:
			return False
		return self._commit(core.directory(path))

	def set_file(self, path:str) -> bool:
		"""
		# Replace the path with &path designated as a file.
		# Fails if stripping the trailing separators leaves the root directory.
		"""
		if not path:
			return False

		candidate = core.file(path)
		if candidate[-1:] == '/':
			return False
		return self._commit(candidate)

	# Component algebra.

	def append_directory(self, name:str) -> bool:
		"""
		# Append the directory &name to a directory path.
		"""
		if not name or self.is_file():
			return False
		return self._commit(self.string + core.directory(name))

	def elide_directory(self) -> bool:
		"""
		# Remove the last directory of a directory path.
		# Fails when there is no containing directory, as with the root.
		"""
		if not self.is_directory():
			return False
		return self._commit(core.elide_directory(self.string))

	def append_file(self, name:str) -> bool:
		"""
		# Append the file &name to a directory path, changing it to a file path.
		"""
		if not name or not self.is_directory():
			return False
		return self._commit(self.string + core.normalize(name))

	def elide_file(self) -> bool:
		"""
		# Remove the file name, changing the path to its containing directory.
		"""
		if not self.is_file():
			return False
		return self._commit(core.elide_file(self.string))

	def append_suffix(self, suffix:str) -> bool:
		"""
		# Append a dot and &suffix to a file path.
		"""
		if not self.is_file():
			return False
		return self._commit(self.string + '.' + core.normalize(suffix))

	def elide_suffix(self) -> bool:
		"""
		# Remove the final suffix from a file path.
		# Dots occurring in directory names are not considered.
		"""
		if not self.is_file():
			return False

		dot = core.suffix_position(self.string)
		if dot == -1:
			return False
		return self._commit(self.string[:dot])

	# Decomposition.

	def get_last(self) -> str:
		"""
		# The last named component; the directory name for directory paths.
		"""
		return core.last(self.string)

	def get_basename(self) -> str:
		"""
		# The final segment without its suffix.
		"""
		return core.basename(self.string)

	def get_suffix(self) -> Optional[str]:
		return core.suffix(self.string)

	# Filesystem queries.

	def exists(self) -> bool:
		"""
		# Query the filesystem and return whether or not the file exists.
		# A file that cannot be identified by the collaborator does not exist.
		"""
		try:
			return self.filesystem.query_attributes(self.string).exists
		except OSError:
			return False

	def fs_readable(self) -> bool:
		return self.filesystem.access(self.string, 'r')

	def fs_writable(self) -> bool:
		return self.filesystem.access(self.string, 'w')

	def fs_executable(self) -> bool:
		return self.filesystem.access(self.string, 'x')

	def fs_read_signature(self, size:int) -> bytes:
		"""
		# Read at most &size bytes from the start of the file.

		# [ Exceptions ]
		# /&core.OperationError/
			# The file could not be opened or read.
		"""
		try:
			with self.filesystem.open_for_read(self.string) as f:
				return f.read(size)
		except OSError as err:
			raise core.OperationError(self.string, 'read') from err

	def fs_has_magic_number(self, signature) -> bool:
		"""
		# Whether the file begins with the bytes of &signature.
		# Files that cannot be read, directories included, or that are shorter
		# than &signature do not match.
		"""
		if isinstance(signature, str):
			signature = signature.encode('latin-1')

		try:
			with self.filesystem.open_for_read(self.string) as f:
				data = f.read(len(signature))
		except OSError as err:
			logger.debug("signature of %s not read: %s", self.string, err)
			return False

		return data == signature

	def fs_is_archive(self) -> bool:
		"""
		# Whether the file is a readable `ar` archive.
		"""
		if not self.fs_readable():
			return False
		return self.fs_has_magic_number(archive_magic)

	def fs_is_bytecode(self) -> bool:
		"""
		# Whether the file starts with one of the &bytecode_magics.
		"""
		return self.fs_read_signature(4) in bytecode_magics

	# Filesystem actions.

	def fs_create_directory(self, create_parents:bool=False) -> bool:
		"""
		# Create the directory identified by the path.

		# If &create_parents is &True, each missing directory leading to the path
		# is created as well. Otherwise, only the final directory is created and
		# the operation fails when its container is missing.

		# [ Returns ]
		# &False if the path is not a directory path; &True once the directory is created.

		# [ Exceptions ]
		# /&core.OperationError/
			# A directory could not be created, or a remote path is badly formed.
		"""
		if not self.is_directory():
			return False

		fs = self.filesystem
		path = self.string

		if create_parents:
			start = core.prefix_length(path)
			if start == -1:
				raise core.OperationError(path, 'create-directory', 'malformed')

			for d in core.parents(path, start):
				try:
					if fs.query_attributes(d).exists:
						continue
					fs.create_directory(d)
				except OSError as err:
					raise core.OperationError(d, 'create-directory') from err
				logger.debug("created directory %s", d)
		else:
			try:
				fs.create_directory(path)
			except OSError as err:
				raise core.OperationError(path, 'create-directory') from err
			logger.debug("created directory %s", path)

		return True

	def fs_create_file(self) -> bool:
		"""
		# Create a new, empty file at the path.

		# [ Exceptions ]
		# /&core.OperationError/
			# A file already exists or the platform rejected the creation.
		"""
		if not self.is_file():
			return False

		try:
			self.filesystem.create_file(self.string)
		except OSError as err:
			raise core.OperationError(self.string, 'create-file') from err

		logger.debug("created file %s", self.string)
		return True

	def fs_destroy_directory(self, recursive:bool=False) -> bool:
		"""
		# Remove the directory identified by the path.
		# Nothing is done when the directory does not exist.

		# If &recursive is &True, the directory's contents are removed first;
		# otherwise the directory must be empty.
		"""
		if not self.is_directory():
			return False

		fs = self.filesystem
		path = self.string

		try:
			if not fs.query_attributes(path).exists:
				return True

			if recursive:
				files.void(fs, path)
			else:
				fs.remove_directory(path)
		except OSError as err:
			raise core.OperationError(path, 'destroy-directory') from err

		logger.debug("destroyed directory %s", path)
		return True

	def fs_destroy_file(self) -> bool:
		"""
		# Remove the file identified by the path, clearing its read-only
		# attribute if necessary. Nothing is done when the file does not exist.
		"""
		if not self.is_file():
			return False

		fs = self.filesystem
		path = self.string

		try:
			attrs = fs.query_attributes(path)
			if not attrs.exists:
				return True

			if attrs.read_only:
				fs.clear_read_only(path)
			fs.delete_file(path)
		except OSError as err:
			raise core.OperationError(path, 'destroy-file') from err

		logger.debug("destroyed file %s", path)
		return True
