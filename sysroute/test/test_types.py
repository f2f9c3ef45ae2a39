"""
# Check &.types.Path construction, the component algebra, and the filesystem actions
# performed through a collaborator.
"""
from .. import types as lib
from .. import core
from . import memory

def directory(s, fs=None):
	p = lib.Path(filesystem=fs)
	assert p.set_directory(s)
	return p

def test_Path_construction(test):
	p = lib.Path('/usr/lib/libz.so')
	test/str(p) == '/usr/lib/libz.so'
	test/p.is_file() == True

	test/str(lib.Path('C:\\Windows\\')) == 'C:/Windows/'
	test/lib.Path('C:/').is_valid() == True

	e = test/core.ConstructionError ^ (lambda: lib.Path('C:'))
	test/e.p_kind == 'invalid'
	test/e.p_violation == 'drive'

	e = test/core.ConstructionError ^ (lambda: lib.Path('foo.'))
	test/e.p_violation == 'period'
	test/core.ConstructionError ^ (lambda: lib.Path('foo./'))
	test/core.ConstructionError ^ (lambda: lib.Path('foo /'))

def test_Path_empty(test):
	p = lib.Path()
	test/p.is_empty() == True
	test/p.is_valid() == False
	test/p.is_file() == False
	test/p.is_directory() == False
	test/bool(p) == False
	test/lib.Path('').is_empty() == True

	e = test/core.ConstructionError ^ (lambda: lib.Path.from_string(''))
	test/e.p_kind == 'empty'

	test/lib.Path.from_string('/a') == lib.Path('/a')

def test_Path_modes(test):
	"""
	# - &lib.Path.is_directory
	# - &lib.Path.is_file
	"""
	for x in ['/', '/a/', 'a/', 'C:/', '/a', 'a', 'a.b', '/a/b.c']:
		p = lib.Path(x)
		test/(p.is_directory() != p.is_file()) == True

	test/lib.Path('/a/').is_directory() == True
	test/lib.Path('/a').is_file() == True

def test_Path_protocols(test):
	p = lib.Path('/a/b')
	test/repr(p) == "(path@'/a/b')"
	test/p.__fspath__() == '/a/b'
	test/(p == lib.Path('/a/b')) == True
	test/(p != lib.Path('/a/c')) == True
	test/TypeError ^ (lambda: hash(p))

	c = p.copy()
	c.append_suffix('txt')
	test/str(p) == '/a/b'
	test/c.filesystem % p.filesystem

def test_Path_set_directory(test):
	p = lib.Path()
	test/p.set_directory('/usr') == True
	test/str(p) == '/usr/'
	test/p.set_directory('/') == True
	test/str(p) == '/'
	test/p.set_directory('C:\\temp') == True
	test/str(p) == 'C:/temp/'

	# Rollback.
	test/p.set_directory('') == False
	test/p.set_directory('foo.') == False
	test/p.set_directory('a|b') == False
	test/str(p) == 'C:/temp/'

def test_Path_set_file(test):
	p = lib.Path()
	test/p.set_file('/usr/bin/') == True
	test/str(p) == '/usr/bin'
	test/p.is_file() == True

	test/p.set_file('') == False
	test/p.set_file('/') == False
	test/p.set_file('a ') == False
	test/str(p) == '/usr/bin'

def test_Path_clear(test):
	p = lib.Path('/a')
	p.clear()
	test/p.is_empty() == True

def test_Path_append_directory(test):
	p = directory('/usr')
	test/p.append_directory('lib') == True
	test/str(p) == '/usr/lib/'
	test/p.append_directory('x\\y') == True
	test/str(p) == '/usr/lib/x/y/'

	test/p.append_directory('') == False
	test/p.append_directory('bad.') == False
	test/p.append_directory('tail ') == False
	test/str(p) == '/usr/lib/x/y/'

	# An empty path is not a file.
	e = lib.Path()
	test/e.append_directory('rel') == True
	test/str(e) == 'rel/'

def test_Path_append_directory_on_file(test):
	"""
	# Appending a directory to a file path fails without mutation.
	"""
	for x in ['/a/b', 'b', 'C:/x.txt']:
		p = lib.Path(x)
		before = str(p)
		test/p.append_directory('n') == False
		test/str(p) == before

def test_Path_elide_directory(test):
	p = lib.Path('/a/b/')
	test/p.elide_directory() == True
	test/str(p) == '/a/'
	test/p.elide_directory() == True
	test/str(p) == '/'

	# Root is preserved.
	test/p.elide_directory() == False
	test/str(p) == '/'

	r = lib.Path('a/')
	test/r.elide_directory() == False
	test/str(r) == 'a/'

	f = lib.Path('/a/b')
	test/f.elide_directory() == False

	# The result must be valid as well.
	s = lib.Path('/a /b/')
	test/s.elide_directory() == False
	test/str(s) == '/a /b/'

def test_Path_directory_round_trip(test):
	for x in ['/', '/a/', 'C:/', 'rel/', '/a/b c/', '//host/share/']:
		p = lib.Path(x)
		for n in ['n', 'lib', 'x.y', '.hidden']:
			q = p.copy()
			test/q.append_directory(n) == True
			test/q.elide_directory() == True
			test/q == p

def test_Path_append_file(test):
	p = directory('/usr/lib')
	test/p.append_file('libz') == True
	test/str(p) == '/usr/lib/libz'
	test/p.is_file() == True

	# Not a directory anymore.
	test/p.append_file('other') == False

	d = directory('/usr')
	test/d.append_file('') == False
	test/d.append_file('bad.') == False
	test/str(d) == '/usr/'

	test/lib.Path().append_file('x') == False

def test_Path_elide_file(test):
	p = lib.Path('/usr/lib/libz.so')
	test/p.elide_file() == True
	test/str(p) == '/usr/lib/'
	test/p.elide_file() == False

	test/lib.Path('libz.so').elide_file() == False

	# Containing directory that would be invalid.
	s = lib.Path('/a /b')
	test/s.elide_file() == False
	test/str(s) == '/a /b'

def test_Path_append_suffix(test):
	p = lib.Path('/a/b')
	test/p.append_suffix('tar') == True
	test/p.append_suffix('gz') == True
	test/str(p) == '/a/b.tar.gz'

	test/p.append_suffix('') == False
	test/p.append_suffix('x ') == False
	test/str(p) == '/a/b.tar.gz'

	test/lib.Path('/a/').append_suffix('x') == False

def test_Path_elide_suffix(test):
	p = lib.Path('/a/b.c.txt')
	test/p.elide_suffix() == True
	test/str(p) == '/a/b.c'
	test/p.elide_suffix() == True
	test/str(p) == '/a/b'
	test/p.elide_suffix() == False

	# Dots in directories are not suffixes.
	d = lib.Path('/a.d/b')
	test/d.elide_suffix() == False
	test/str(d) == '/a.d/b'

	test/lib.Path('/a/.profile').elide_suffix() == False
	test/lib.Path('/a.d/').elide_suffix() == False

	n = lib.Path('b.txt')
	test/n.elide_suffix() == True
	test/str(n) == 'b'

	# Would leave a trailing period.
	t = lib.Path('/a/b..c')
	test/t.elide_suffix() == False
	test/str(t) == '/a/b..c'

def test_Path_suffix_round_trip(test):
	for x in ['/', '/usr/lib/', 'C:/x/']:
		p = lib.Path(x)
		q = p.copy()
		test/q.append_file('name') == True
		test/q.append_suffix('so') == True
		test/q.elide_suffix() == True
		test/q.elide_file() == True
		test/q == p

def test_Path_decomposition(test):
	"""
	# - &lib.Path.get_last
	# - &lib.Path.get_basename
	# - &lib.Path.get_suffix
	"""
	test/lib.Path('/a/b/').get_last() == 'b'
	test/lib.Path('/a/b').get_last() == 'b'
	test/lib.Path('b').get_last() == 'b'

	test/lib.Path('/a/b.c.txt').get_basename() == 'b.c'
	test/lib.Path('/a/archive.tar.gz').get_basename() == 'archive.tar'
	test/lib.Path('/a.d/b').get_basename() == 'b'
	test/lib.Path('/a/b.c.txt').get_suffix() == 'txt'
	test/lib.Path('/a/b').get_suffix() == None

def test_Path_magic_number(test):
	fs = memory.Memory()
	fs.store('/lib/libx.a', b'!<arch>\nmembers')
	fs.store('/lib/short', b'!<a')
	fs.store('/lib/x.bc', b'llvm\x00\x01')
	fs.store('/lib/y.bc', b'llvcdata')
	fs.store('/lib/z.o', b'\x7fELF')

	a = lib.Path('/lib/libx.a', filesystem=fs)
	test/a.fs_has_magic_number('!<arch>\n') == True
	test/a.fs_has_magic_number(b'!<arch>\n') == True
	test/a.fs_is_archive() == True
	test/a.fs_is_bytecode() == False

	s = lib.Path('/lib/short', filesystem=fs)
	test/s.fs_has_magic_number(lib.archive_magic) == False
	test/s.fs_is_archive() == False
	test/s.fs_is_bytecode() == False

	test/lib.Path('/lib/x.bc', filesystem=fs).fs_is_bytecode() == True
	test/lib.Path('/lib/y.bc', filesystem=fs).fs_is_bytecode() == True
	test/lib.Path('/lib/z.o', filesystem=fs).fs_is_archive() == False

	missing = lib.Path('/lib/missing', filesystem=fs)
	test/missing.fs_has_magic_number(b'x') == False
	test/missing.fs_is_archive() == False
	e = test/core.OperationError ^ missing.fs_is_bytecode
	test/e.p_operation == 'read'
	test.isinstance(e.__cause__, FileNotFoundError)

def test_Path_archive_unreadable(test):
	fs = memory.Memory()
	fs.store('/lib/libx.a', b'!<arch>\n')
	fs.denied.add('/lib/libx.a')

	p = lib.Path('/lib/libx.a', filesystem=fs)
	test/p.fs_is_archive() == False
	test/core.OperationError ^ p.fs_is_bytecode

def test_Path_archive_directory(test):
	fs = memory.Memory().mkdirs('/lib/dir')

	p = lib.Path('/lib/dir', filesystem=fs)
	test/p.fs_readable() == True
	test/p.fs_has_magic_number(lib.archive_magic) == False
	test/p.fs_is_archive() == False

	# Signatures are required to be read.
	e = test/core.OperationError ^ p.fs_is_bytecode
	test.isinstance(e.__cause__, IsADirectoryError)

def test_Path_probes(test):
	fs = memory.Memory()
	fs.store('/a/b', b'data')
	fs.denied.add('/a/c')
	fs.store('/a/c')

	b = lib.Path('/a/b', filesystem=fs)
	test/b.exists() == True
	test/b.fs_readable() == True
	test/b.fs_writable() == True
	test/b.fs_executable() == True
	test/lib.Path('/a/', filesystem=fs).exists() == True
	test/lib.Path('/nothing', filesystem=fs).exists() == False

	c = lib.Path('/a/c', filesystem=fs)
	test/c.exists() == True
	test/c.fs_readable() == False

	# Failure to identify the file is absence.
	fs.unreachable.add('/a/long')
	test/lib.Path('/a/long', filesystem=fs).exists() == False

def test_Path_actions_unreachable(test):
	"""
	# Failures to identify the subject of an action are operation errors.
	"""
	fs = memory.Memory()
	fs.store('/a/f')
	fs.mkdirs('/a/d')
	fs.unreachable.update(['/a/f', '/a/d', '/b'])

	e = test/core.OperationError ^ lib.Path('/a/f', filesystem=fs).fs_destroy_file
	test/e.p_operation == 'destroy-file'
	test.isinstance(e.__cause__, OSError)

	e = test/core.OperationError ^ lib.Path('/a/d/', filesystem=fs).fs_destroy_directory
	test/e.p_operation == 'destroy-directory'

	p = lib.Path('/b/c/', filesystem=fs)
	e = test/core.OperationError ^ (lambda: p.fs_create_directory(True))
	test/e.p_path == '/b/'
	test/e.p_operation == 'create-directory'
	test/('/b' in fs.directories) == False

def test_Path_create_directory(test):
	fs = memory.Memory()
	p = lib.Path('/a/b/c/', filesystem=fs)

	e = test/core.OperationError ^ (lambda: p.fs_create_directory(False))
	test/e.p_path == '/a/b/c/'
	test/e.p_operation == 'create-directory'
	test.isinstance(e.__cause__, FileNotFoundError)

	test/p.fs_create_directory(True) == True
	test/fs.directories >= {'/a', '/a/b', '/a/b/c'}

	# Existing parents are skipped.
	q = lib.Path('/a/b/d/', filesystem=fs)
	test/q.fs_create_directory(True) == True
	test/q.exists() == True

	r = lib.Path('/a/e/', filesystem=fs)
	test/r.fs_create_directory() == True
	test/core.OperationError ^ r.fs_create_directory

	test/lib.Path('/a/file', filesystem=fs).fs_create_directory() == False

def test_Path_create_directory_refused(test):
	fs = memory.Memory()
	fs.refused.add('/a/b')
	p = lib.Path('/a/b/c/', filesystem=fs)

	e = test/core.OperationError ^ (lambda: p.fs_create_directory(True))
	test/e.p_path == '/a/b/'
	test.isinstance(e.__cause__, PermissionError)
	test/fs.directories == {'/', '/a'}

def test_Path_create_directory_remote(test):
	fs = memory.Memory()
	fs.mkdirs('//host/share')

	p = lib.Path('//host/share/x/y/', filesystem=fs)
	test/p.fs_create_directory(True) == True
	test/('//host/share/x/y' in fs.directories) == True

	m = lib.Path('//host/share/', filesystem=fs)
	e = test/core.OperationError ^ (lambda: m.fs_create_directory(True))
	test/e.p_kind == 'malformed'

def test_Path_create_file(test):
	fs = memory.Memory().mkdirs('/a')
	p = lib.Path('/a/f', filesystem=fs)

	test/p.fs_create_file() == True
	test/fs.files['/a/f'] == b''

	e = test/core.OperationError ^ p.fs_create_file
	test/e.p_operation == 'create-file'
	test.isinstance(e.__cause__, FileExistsError)

	test/core.OperationError ^ lib.Path('/missing/f', filesystem=fs).fs_create_file
	test/lib.Path('/a/', filesystem=fs).fs_create_file() == False

def test_Path_destroy_directory(test):
	fs = memory.Memory()
	fs.store('/t/a/b/file', b'x')
	fs.store('/t/a/other', b'y')
	fs.mkdirs('/t/empty')

	test/lib.Path('/t/none/', filesystem=fs).fs_destroy_directory() == True

	e = lib.Path('/t/empty/', filesystem=fs)
	test/e.fs_destroy_directory() == True
	test/e.exists() == False

	a = lib.Path('/t/a/', filesystem=fs)
	x = test/core.OperationError ^ a.fs_destroy_directory
	test/x.p_operation == 'destroy-directory'
	test/a.exists() == True

	test/a.fs_destroy_directory(True) == True
	test/a.exists() == False
	test/fs.files == {}
	test/fs.directories == {'/', '/t'}

	test/lib.Path('/t/file', filesystem=fs).fs_destroy_directory() == False

def test_Path_destroy_file(test):
	fs = memory.Memory()
	fs.store('/a/f', b'x')
	fs.store('/a/ro', b'x')
	fs.read_only.add('/a/ro')

	test/lib.Path('/a/none', filesystem=fs).fs_destroy_file() == True

	f = lib.Path('/a/f', filesystem=fs)
	test/f.fs_destroy_file() == True
	test/f.exists() == False

	ro = lib.Path('/a/ro', filesystem=fs)
	test/ro.fs_destroy_file() == True
	test/ro.exists() == False

	fs.store('/a/locked', b'x')
	fs.refused.add('/a/locked')
	e = test/core.OperationError ^ lib.Path('/a/locked', filesystem=fs).fs_destroy_file
	test/e.p_operation == 'destroy-file'

	test/lib.Path('/a/', filesystem=fs).fs_destroy_file() == False

if __name__ == '__main__':
	import sys; from .. import harness
	harness.execute(sys.modules[__name__])
