"""
Type-level behaviour: the metaclasses of generated families and variants.

A family is a class. Each variant is a subclass of its family (and of `Record` or `Singleton`),
so `isinstance(x, Family)` is the closed-world membership test and ordinary methods
attached to the family class are available on every instance.

Methods defined here live on the classes, not on the instances:
`Maybe.Just.create(...)` works, but `Maybe.Just(1).create` does not exist.
"""
import logging
from .constraints import apply_constraint
from .errors import ArityError, BadInvocationError, DeclarationError, FamilyMismatchError
from .values import Data, Record, Singleton, Ordered, Partial

logger = logging.getLogger(__name__)

class Kind(type):
	_label = "kind"

	def has_instance(cls, x) -> bool:
		return isinstance(x, cls)

	def __repr__(cls):
		return "<%s %s>"%(cls._label, cls.__qualname__)

class FamilyKind(Kind):
	"""
	Metaclass of families.
	The registration capability is the `_registrar` in the family's own dictionary.
	Sealing throws it away, which is why sealing cannot be undone.
	"""
	_label = "family"

	def type(cls, *args, **kwargs):
		""" Declare and realize another variant. Returns its constructor, or its sole instance. """
		registrar = cls.__dict__.get("_registrar")
		if registrar is None:
			if "names" in cls.__dict__:
				raise BadInvocationError("%s is sealed; it takes no more variants."%cls.__qualname__)
			raise BadInvocationError("%s is a variant, not a type family."%cls.__qualname__)
		return registrar(*args, **kwargs)

	def seal(cls):
		if cls.__dict__.get("_registrar") is None: return cls
		cls._registrar = None
		for member in cls.variants():
			seal = getattr(member, "seal", None)
			if callable(seal): seal()
		logger.debug("Sealed %s with variants %s", cls.__qualname__, ", ".join(cls.names))
		return cls

	def is_sealed(cls) -> bool:
		return cls.__dict__.get("_registrar") is None

	def variants(cls) -> tuple:
		return tuple(getattr(cls, name) for name in cls.names)

	def method(cls, fn):
		""" Decorator: attach `fn` to every instance of the family, under its own name. """
		setattr(cls, fn.__name__, fn)
		return fn

	def default_constructor(cls, fn):
		""" Decorator: install `fn` as what happens when the family itself is called. """
		cls._default_constructor = staticmethod(fn)
		return fn

	def __call__(cls, *args, **kwargs):
		hook = getattr(cls, "_default_constructor", None)
		if hook is None:
			raise BadInvocationError("%s has no default constructor; call one of its variants (%s) instead."%(
				cls.__qualname__, ", ".join(cls.names)
			))
		return hook(*args, **kwargs)

	def _vet(cls, name):
		if not isinstance(name, str) or not name.isidentifier() or name.startswith("_"):
			raise DeclarationError("%r is not a usable variant name."%(name,))
		if name in cls.names:
			raise DeclarationError("%s already has a variant called %s."%(cls.__qualname__, name))
		if hasattr(cls, name):
			raise DeclarationError("A variant called %s would hide %s.%s"%(name, cls.__qualname__, name))
		# Variants are attributes of the family, so every member instance would see them too.
		for base in (Record, Singleton, Ordered):
			if hasattr(base, name):
				raise DeclarationError("A variant called %s would hide %s.%s"%(name, base.__name__, name))

	def _enroll(cls, name, variant, exposed):
		setattr(cls, "is_"+name, False)
		if issubclass(cls, Ordered): variant.order = len(cls.names)
		setattr(cls, name, exposed)
		cls.names = cls.names + (name,)
		logger.debug("Registered %s %s", variant._label, variant.__qualname__)

class RecordKind(FamilyKind):
	"""
	Metaclass of record variants. Calling one constructs, or curries:
	too few arguments give back a `Partial` awaiting the rest.
	"""
	_label = "record"

	def __call__(cls, *args):
		arity = len(cls._fields)
		if len(args) < arity: return Partial(cls, args)
		if len(args) > arity:
			raise ArityError("%s: unexpected number of arguments (expected %d, got %d)"%(cls.__qualname__, arity, len(args)))
		return cls._construct(args)

	def _construct(cls, args):
		# Check every field before building anything: no half-made instance gets out.
		values = [
			apply_constraint(cls._constraints[field], arg, field, cls)
			for field, arg in zip(cls._fields, args)
		]
		instance = object.__new__(cls)
		for field, value in zip(cls._fields, values):
			object.__setattr__(instance, field, value)
		return instance

	def create(cls, values):
		""" Construct from a mapping of field names to values. """
		args = []
		for field in cls._fields:
			if field not in values:
				raise ArityError("%s: could not find field %r in arguments"%(cls.__qualname__, field))
			args.append(values[field])
		return cls._construct(args)

	def unapply(cls, instance, transform=None) -> list:
		cls._own(instance)
		values = instance._values()
		return [transform(v) for v in values] if transform else list(values)

	def unapply_as_dict(cls, instance, transform=None) -> dict:
		return dict(zip(cls._fields, cls.unapply(instance, transform)))

	def seal(cls):
		""" Fields were frozen when the record was realized, so there is nothing left to disable. """
		return cls

	def _own(cls, instance):
		if not isinstance(instance, cls):
			raise FamilyMismatchError("Unexpected type: %r is not a %s"%(instance, cls.__qualname__))

class SingletonKind(FamilyKind):
	""" Metaclass of singleton variants. Calling one just gives back the instance. """
	_label = "singleton"

	def __call__(cls, *args):
		if args:
			raise ArityError("%s: unexpected number of arguments (expected 0, got %d)"%(cls.__qualname__, len(args)))
		return cls._instance

	def create(cls, values=None):
		return cls._instance

	def unapply(cls, instance, transform=None) -> list:
		if instance is not cls._instance:
			raise FamilyMismatchError("Unexpected type: %r is not %s"%(instance, cls.__qualname__))
		return []

	def unapply_as_dict(cls, instance, transform=None) -> dict:
		cls.unapply(instance)
		return {}

def make_family(name:str, bases=()) -> FamilyKind:
	family = FamilyKind(name, tuple(bases) or (Data,), {"__slots__": (), "names": (), "_registrar": None})
	logger.debug("Created type family %s", name)
	return family

def make_record(family:FamilyKind, name:str, fields:tuple, constraints:dict) -> RecordKind:
	family._vet(name)
	ctor = RecordKind(name, (family, Record), {
		"__slots__": fields,
		"__qualname__": family.__qualname__+"."+name,
		"_fields": fields,
		"_constraints": constraints,
		"family": family,
		"is_"+name: True,
	})
	family._enroll(name, ctor, ctor)
	return ctor

def make_singleton(family:FamilyKind, name:str, json_value) -> Singleton:
	family._vet(name)
	cls = SingletonKind(name, (family, Singleton), {
		"__slots__": (),
		"__qualname__": family.__qualname__+"."+name,
		"_json": json_value,
		"family": family,
		"is_"+name: True,
	})
	cls._instance = instance = object.__new__(cls)
	family._enroll(name, cls, instance)
	return instance
