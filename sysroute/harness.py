"""
# Contention primitives for the project's tests.

# Test subjects are functions named with a `test_` prefix that accept a &Test instance
# and use the true division operator to form contentions:

#!/pl/python
	def test_feature(test):
		test/featurelib.functionality() == expectation
		test/ValueError ^ (lambda: featurelib.functionality(None))

# &execute runs the subjects of a module directly; the project's `conftest.py`
# provides &Test instances to subjects collected by pytest.
"""
import builtins
import operator
import contextlib

def gather(module, prefix='test_'):
	"""
	# The identifier-subject pairs of the functions in &module whose name starts
	# with &prefix, in the order they are defined.
	"""
	subjects = [
		(module.__name__ + '#' + name, getattr(module, name))
		for name in dir(module)
		if name.startswith(prefix) and callable(getattr(module, name))
	]
	subjects.sort(key=(lambda x: getattr(x[1], '__code__', None) and x[1].__code__.co_firstlineno or 0))
	return subjects

class Absurdity(Exception):
	"""
	# A contention that did not hold.
	"""
	symbols = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__ge__': '>=',
		'__mod__': 'is',
	}

	def __init__(self, operator, former, latter):
		self.operator = operator
		self.former = former
		self.latter = latter

	def __str__(self):
		op = self.symbols.get(self.operator, self.operator)
		return ' '.join((repr(self.former), op, repr(self.latter)))

def _contention(name, compare):
	def contend(self, operand):
		if not compare(self.object, operand):
			raise Absurdity(name, self.object, operand)
		return True
	contend.__name__ = name
	return contend

class Contention(object):
	"""
	# The object of a contention formed by `test/object`.

	# Comparisons raise &Absurdity when they are false; `%` contends identity and
	# `^` contends that the callable on the right raises the exception type on the left.
	"""
	__slots__ = ('object',)

	def __init__(self, object):
		self.object = object

	__eq__ = _contention('__eq__', operator.eq)
	__ne__ = _contention('__ne__', operator.ne)
	__lt__ = _contention('__lt__', operator.lt)
	__ge__ = _contention('__ge__', operator.ge)
	__mod__ = _contention('__mod__', operator.is_)
	__hash__ = None

	def __xor__(self, subject):
		"""
		# Call &subject and return the exception it raised.
		# &Fate exceptions are not trapped.
		"""
		try:
			subject()
		except Fate:
			raise
		except BaseException as err:
			if not isinstance(err, self.object):
				raise Absurdity("isinstance", self.object, err) from err
			return err

		raise Absurdity("raises", self.object, subject)

class Fate(BaseException):
	"""
	# The conclusion of a test; raised by subjects to end with a particular result.
	"""
	impact = 0

	def __init__(self, content):
		self.content = content

	@property
	def negative(self):
		return self.impact < 0

class Return(Fate):
	impact = 1

class Skip(Fate):
	impact = 0

class Fail(Fate):
	impact = -1

class Test(object):
	"""
	# An individual test and its outcome.

	# [ Properties ]
	# /identity/
		# Identifier of the test.
	# /subject/
		# The callable performing the checks.
	# /fate/
		# The conclusion of the test after &seal.
	# /exits/
		# Cleanup for allocations made by the subject; processed by the runner.
	"""
	__slots__ = ('identity', 'subject', 'fate', 'exits',)

	def __init__(self, identity, subject):
		self.identity = identity
		self.subject = subject
		self.exits = contextlib.ExitStack()

	def __truediv__(self, object):
		return Contention(object)
	__rtruediv__ = __truediv__

	def isinstance(self, *args):
		if not builtins.isinstance(*args):
			raise Absurdity("isinstance", *args)

	def skip(self, condition):
		if condition:
			raise Skip(condition)

	def fail(self, cause):
		raise Fail(cause)

	def seal(self):
		"""
		# Run the subject and record its &fate.
		"""
		try:
			self.subject(self)
			self.fate = Return(None)
		except Fate as fate:
			self.fate = fate
		except Exception as err:
			self.fate = Fail('test raised exception')
			self.fate.__cause__ = err

def execute(module):
	"""
	# Run the tests of &module, raising the fate of the first failure.
	"""
	for identity, subject in gather(module):
		test = Test(identity, subject)
		with test.exits:
			test.seal()
		if test.fate.negative:
			raise test.fate
