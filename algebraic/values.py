"""
Run-time behaviour of the values this engine builds.

Every generated variant class derives from its family class and from one of
`Record` or `Singleton` here. The family class derives from `Data`
(or `Ordered`, for enumerations), which is the brand: `equals`, `clone`
and `only` treat a value as algebraic data exactly when it is an instance of `Data`.

Instances never change after construction. Updates make new instances.
"""
from . import native
from .errors import ImmutableError, UnknownFieldError, FamilyMismatchError, ArityError

class Data:
	""" Root of everything built by this engine. """
	__slots__ = ()

	def equals(self, other) -> bool: raise NotImplementedError(type(self))
	def clone(self): raise NotImplementedError(type(self))
	def to_json(self): raise NotImplementedError(type(self))

	def __eq__(self, other):
		if not isinstance(other, Data): return NotImplemented
		return self.equals(other)

	def __setattr__(self, key, value):
		raise ImmutableError("%s is immutable; use set() to make a changed copy."%type(self).__qualname__)

	def __delattr__(self, key):
		raise ImmutableError("%s is immutable."%type(self).__qualname__)

	def __copy__(self): return self
	def __deepcopy__(self, memo): return self.clone()

def plain(value):
	""" The plain-value form of a field: unwrap anything that knows how to, and leave the rest alone. """
	if isinstance(value, type): return value
	to_json = getattr(value, "to_json", None)
	return to_json() if callable(to_json) else value

class Record(Data):
	""" Instance behaviour for variants with named, ordered fields. """
	__slots__ = ()
	_fields: tuple[str, ...] = ()
	_constraints: dict = {}

	def _values(self) -> tuple:
		return tuple(getattr(self, f) for f in self._fields)

	def get(self, key):
		""" Fetch a field by name or by position. """
		fields = self._fields
		if isinstance(key, int) and not isinstance(key, bool):
			if not 0 <= key < len(fields):
				raise UnknownFieldError("%s has no field at index %d (it has %d)"%(type(self).__qualname__, key, len(fields)))
			key = fields[key]
		elif key not in self._constraints:
			raise UnknownFieldError("%s has no field called %r"%(type(self).__qualname__, key))
		return getattr(self, key)

	def set(self, changes=None, /, **more):
		"""
		Return a new instance like this one, but with the named fields replaced.
		The new values pass through their constraints just as they would at construction.
		"""
		changes = dict(changes or (), **more)
		unknown = [k for k in changes if k not in self._constraints]
		if unknown:
			raise UnknownFieldError("%s has no field called %s"%(type(self).__qualname__, ", ".join(map(repr, unknown))))
		return type(self)(*[changes.get(f, getattr(self, f)) for f in self._fields])

	def clone(self):
		return type(self)(*[
			v.clone() if isinstance(v, Data) else native.clone(v)
			for v in self._values()
		])

	def equals(self, other) -> bool:
		if self is other: return True
		if type(other) is not type(self): return False
		for a, b in zip(self._values(), other._values()):
			if isinstance(a, Data):
				if not a.equals(b): return False
			elif not native.equals(a, b): return False
		return True

	def __hash__(self):
		return hash((type(self),) + self._values())

	def to_json(self) -> dict:
		return {f: plain(getattr(self, f)) for f in self._fields}

	def __str__(self):
		name = type(self).__name__
		if self._fields: return "%s(%s)"%(name, ", ".join(map(str, self._values())))
		return name

	def __repr__(self):
		name = type(self).__name__
		if self._fields: return "%s(%s)"%(name, ", ".join(map(repr, self._values())))
		return name

class Singleton(Data):
	""" Instance behaviour for variants which have exactly one instance. """
	__slots__ = ()
	_json = None

	def clone(self): return self
	def equals(self, other) -> bool: return self is other
	def to_json(self): return self._json
	def __hash__(self): return id(self)
	def __str__(self): return type(self).__name__
	def __repr__(self): return type(self).__name__

class Ordered(Data):
	"""
	Comparisons for the members of an enumeration.
	Each variant class carries an `order`, fixed when it was registered.
	"""
	__slots__ = ()

	def _orders(self, that) -> tuple[int, int]:
		family = type(self).family
		if not isinstance(that, family):
			raise FamilyMismatchError("Unexpected type: %r is not a member of %s"%(that, family.__qualname__))
		return type(self).order, type(that).order

	def lt(self, that) -> bool:
		a, b = self._orders(that)
		return a < b

	def lte(self, that) -> bool:
		a, b = self._orders(that)
		return a <= b

	def gt(self, that) -> bool:
		a, b = self._orders(that)
		return a > b

	def gte(self, that) -> bool:
		a, b = self._orders(that)
		return a >= b

	def eq(self, that) -> bool:
		""" Same position in the enumeration. Not quite `equals`, which also looks at fields. """
		a, b = self._orders(that)
		return a == b

	def neq(self, that) -> bool:
		a, b = self._orders(that)
		return a != b

	__lt__, __le__, __gt__, __ge__ = lt, lte, gt, gte

class Partial:
	""" A record constructor with a prefix of its arguments already supplied. """
	__slots__ = ("ctor", "args")

	def __init__(self, ctor, args: tuple):
		self.ctor = ctor
		self.args = args

	def remaining(self) -> int:
		return len(self.ctor._fields) - len(self.args)

	def __call__(self, *more):
		if len(more) > self.remaining():
			raise ArityError("%s: unexpected number of arguments (expected at most %d more, got %d)"%(
				self.ctor.__qualname__, self.remaining(), len(more)
			))
		return self.ctor(*self.args, *more)

	def __repr__(self):
		shown = [repr(a) for a in self.args] + ["..."]
		return "<partial %s(%s)>"%(self.ctor.__qualname__, ", ".join(shown))
