"""
# Path string primitives and the exceptions raised by &.types.Path.

# The functions here operate on plain &str instances and never consult the filesystem.
# &.types.Path composes them; a candidate string is only committed when &is_valid
# accepts it.

# [ Elements ]
# /separator/
	# The only separator retained by normalized path strings.
# /illegal_characters/
	# The characters that may not appear anywhere in a path string.
"""
from collections.abc import Iterable
from typing import Optional
import string as _string

separator = '/'
alternate_separator = '\\'

illegal_characters = frozenset('\\<>"|' + ''.join(map(chr, range(0x01, 0x20))))
drive_letters = frozenset(_string.ascii_letters)

class PathError(Exception):
	"""
	# Base class of the errors signalled by &.types.Path.

	# [ Properties ]
	# /p_path/
		# The path string that the failed operation was given or performed on.
	# /p_kind/
		# The subtype declaring the kind of failure.
		# /`'empty'`/
			# An empty string was given where a path was required.
		# /`'invalid'`/
			# The string failed validation.
		# /`'malformed'`/
			# The path could not be decomposed for the operation.
		# /`'platform'`/
			# The filesystem collaborator refused the operation.
	# /p_operation/
		# The attempted operation.
	"""

	def __init__(self, path, kind, operation):
		self.p_path = path
		self.p_kind = kind
		self.p_operation = operation

	def __str__(self):
		return f"{self.p_operation} failed ({self.p_kind})\nPATH: {self.p_path!r}"

class ConstructionError(PathError):
	"""
	# Raised when a &.types.Path cannot be constructed from a string.

	# [ Properties ]
	# /p_violation/
		# The rule identified by &violation, or `'empty'`.
	"""

	def __init__(self, path, kind, violation):
		super().__init__(path, kind, 'construct')
		self.p_violation = violation

	def __str__(self):
		v = self.p_violation

		if v == 'empty':
			desc = "path is empty"
		elif v == 'drive':
			desc = "colon is only permitted after a leading drive letter"
		elif v == 'character':
			desc = "path contains an illegal character"
		elif v == 'period':
			desc = "file or directory name ends in a period"
		elif v == 'space':
			desc = "file or directory name ends in a space"
		else:
			desc = v

		return f"{self.p_path!r}: path is not valid; {desc}"

class OperationError(PathError):
	"""
	# Raised when a filesystem action performed on a path fails.

	# The &OSError produced by the collaborator, if any, is the exception's cause.
	"""

	def __init__(self, path, operation, kind='platform'):
		super().__init__(path, kind, operation)

	def __str__(self):
		cause = self.__cause__
		if cause is not None and getattr(cause, 'strerror', None):
			reason = cause.strerror
		elif self.p_kind == 'malformed':
			reason = "badly formed remote directory"
		else:
			reason = self.p_kind

		return f"{self.p_path}: can't {self.p_operation.replace('-', ' ')}: {reason}"

def normalize(path:str) -> str:
	"""
	# Replace alternate separators with &separator.
	"""
	return path.replace(alternate_separator, separator)

def violation(path:str, *, len=len) -> Optional[str]:
	"""
	# Identify the first validity rule broken by &path.

	# [ Returns ]
	# &None when &path is valid, otherwise one of:
	# - `'empty'`
	# - `'drive'`
	# - `'character'`
	# - `'period'`
	# - `'space'`
	"""
	if not path:
		return 'empty'

	l = len(path)

	# A colon must be the second character, preceded by a letter, and followed by something.
	c = path.rfind(':')
	if c != -1:
		if c != 1 or path[0] not in drive_letters or l < 3:
			return 'drive'

	if not illegal_characters.isdisjoint(path):
		return 'character'

	# Names may not end in a period or a space.
	last = path[-1]
	if last == '/' and l >= 2:
		last = path[-2]

	if last == '.':
		return 'period'
	if last == ' ':
		return 'space'

	return None

def is_valid(path:str) -> bool:
	"""
	# Whether &path is a valid, non-empty path string.
	"""
	return violation(path) is None

def directory(path:str) -> str:
	"""
	# Normalize &path into a directory string by ensuring a trailing separator.
	"""
	path = normalize(path)
	if path[-1:] != separator:
		path += separator
	return path

def file(path:str) -> str:
	"""
	# Normalize &path into a file string by stripping trailing separators.
	# The leading character is always retained.
	"""
	path = normalize(path)
	return path[:1] + path[1:].rstrip(separator)

def elide_directory(path:str) -> Optional[str]:
	"""
	# Remove the last named component of the directory string, &path.
	# &None if there is no earlier separator to elide to.
	"""
	slash = path.rfind(separator)
	if slash <= 0:
		return None

	if slash == len(path) - 1:
		slash = path.rfind(separator, 0, slash)
		if slash == -1:
			return None

	return path[:slash+1]

def elide_file(path:str) -> Optional[str]:
	"""
	# The containing directory string of &path.
	# &None if &path has no separator.
	"""
	slash = path.rfind(separator)
	if slash == -1:
		return None

	return path[:slash+1]

def suffix_position(path:str) -> int:
	"""
	# The index of the dot that introduces the suffix of the final segment.
	# `-1` when the final segment has no suffix.

	# A dot leading the segment does not introduce a suffix.
	"""
	slash = path.rfind(separator)
	dot = path.rfind('.')

	if dot > slash + 1:
		return dot

	return -1

def last(path:str) -> str:
	"""
	# The last named segment of &path.
	"""
	slash = path.rfind(separator)
	if slash == -1:
		return path

	if slash == len(path) - 1:
		previous = path.rfind(separator, 0, slash)
		return path[previous+1:slash]

	return path[slash+1:]

def basename(path:str) -> str:
	"""
	# The segment following the last separator with its suffix removed.
	"""
	segment = path[path.rfind(separator)+1:]
	dot = suffix_position(segment)
	if dot == -1:
		return segment

	return segment[:dot]

def suffix(path:str) -> Optional[str]:
	"""
	# The text following the suffix dot of the final segment.
	# &None when there is no suffix.
	"""
	dot = suffix_position(path)
	if dot == -1:
		return None

	return path[dot+1:]

def prefix_length(path:str) -> int:
	"""
	# The length of the leading portion of &path that is not created by directory walks:
	# a drive designation and the root separator, or the host and share of a remote path.

	# `-1` when a remote path is missing its host, share, or a subsequent component.
	"""
	if path[:2] == '//':
		host = path.find(separator, 2)
		if host == -1:
			return -1

		share = path.find(separator, host+1)
		if share == -1 or share + 1 == len(path):
			return -1

		return share + 1

	i = 0
	if path[1:2] == ':':
		i = 2
	if path[i:i+1] == separator:
		i += 1

	return i

def parents(path:str, start:int) -> Iterable[str]:
	"""
	# Generate the directory strings leading to and including the directory &path,
	# beginning with the first component following &start.
	"""
	i = path.find(separator, start)
	while i != -1:
		yield path[:i+1]
		i = path.find(separator, i+1)
