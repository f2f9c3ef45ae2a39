"""
# Function tools and process-wide state primitives used by the project.
"""
import functools
import dataclasses
import threading

partial = functools.partial

def reflect(obj):
	"""
	# Callable that returns the single argument that it was given.
	"""
	return obj

# Create the dataclass constructor commonly used by fault projects.
try:
	reflect(dataclasses.dataclass(slots=True))
except TypeError:
	# Pre-3.10
	record = partial(dataclasses.dataclass, eq=True, frozen=True)
else:
	record = partial(dataclasses.dataclass, slots=True, eq=True, frozen=True)

class Once(object):
	"""
	# A cell whose value is produced by &initializer exactly once per process.

	# The first call to the instance runs &initializer while holding a lock;
	# concurrent first calls wait for that result instead of initializing again.
	# Subsequent calls return the stored value without locking.

	# If &initializer raises, nothing is stored and the next call tries again.
	"""
	__slots__ = ('initializer', '_lock', '_value', '_ready')

	def __init__(self, initializer, *, Lock=threading.Lock):
		self.initializer = initializer
		self._lock = Lock()
		self._value = None
		self._ready = False

	@property
	def ready(self) -> bool:
		"""
		# Whether the value has been produced.
		"""
		return self._ready

	def __call__(self):
		if self._ready:
			return self._value

		with self._lock:
			if not self._ready:
				self._value = self.initializer()
				self._ready = True

		return self._value

	def reset(self):
		"""
		# Forget the stored value so that the next call initializes again.
		"""
		with self._lock:
			self._value = None
			self._ready = False
