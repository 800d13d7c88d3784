"""
Declaring types: the front door of the engine.

A declaration goes through two phases. First a template collects the shape:
`record(...)` makes a `RecordTemplate`, whose fields may be added until it is used,
and `single(...)` makes a `SingletonTemplate`. Then a family realizes the template
under a variant name, which generates the actual variant class.

Families accept a fair bit of shorthand in the place of a template.
The `Shorthand` visitor is what decides what each kind of thing means.
"""
import itertools
import keyword
import logging
from collections.abc import Mapping

from boozetools.support.foundation import Visitor

from .constraints import anything
from .errors import BadInvocationError, DeclarationError
from .kinds import FamilyKind, RecordKind, make_family, make_record, make_singleton
from .values import Data, Record, Singleton, Ordered

logger = logging.getLogger(__name__)

_serial = itertools.count()

def unique_id(prefix:str) -> str:
	return "%s%d"%(prefix, next(_serial))

ABSENT = object()

# Fields may not take names which instances or variant classes already use.
RESERVED_FIELDS = frozenset(["family", "order", "names"])

class RecordTemplate:
	""" A record's fields, in declaration order, with their constraints. Open until realized. """
	def __init__(self):
		self._fields = []
		self._constraints = {}
		self._frozen = False

	def field(self, name:str, constraint=None) -> "RecordTemplate":
		if self._frozen:
			raise BadInvocationError("This record's fields are frozen; cannot add %r."%(name,))
		if constraint is None: constraint = anything
		if not callable(constraint):
			raise DeclarationError("The constraint for field %r must be callable, not %r."%(name, constraint))
		_vet_field_name(name)
		if name in self._constraints:
			raise DeclarationError("Field %r is declared twice."%name)
		self._fields.append(name)
		self._constraints[name] = constraint
		return self

	def seal(self) -> "RecordTemplate":
		self._frozen = True
		return self

	@property
	def fields(self) -> tuple[str, ...]: return tuple(self._fields)

	@property
	def constraints(self) -> dict: return dict(self._constraints)

	def realize(self, family:FamilyKind, name:str) -> RecordKind:
		self._frozen = True
		return make_record(family, name, tuple(self._fields), dict(self._constraints))

def _vet_field_name(name):
	if (
		not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name)
		or name.startswith("_") or name.startswith("is_") or name in RESERVED_FIELDS
		or hasattr(Record, name) or hasattr(Ordered, name) or hasattr(RecordKind, name)
	):
		raise DeclarationError("%r cannot be used as a field name."%(name,))

class SingletonTemplate:
	def __init__(self, json_value=None):
		self.json_value = json_value

	def realize(self, family:FamilyKind, name:str) -> Singleton:
		return make_singleton(family, name, self.json_value)

def record(*spec) -> RecordTemplate:
	"""
	Declare a record. Three forms are equivalent:
		record("x", "y")                     # or record(["x", "y"]); every field unconstrained
		record({"x": int, "y": None})        # None also means unconstrained
		record(lambda template, field: ...)  # call field(name, constraint) as you please,
		                                     # and optionally return a mapping of more fields.
	"""
	template = RecordTemplate()
	if len(spec) == 1 and isinstance(spec[0], Mapping):
		for name, constraint in spec[0].items(): template.field(name, constraint)
	elif len(spec) == 1 and isinstance(spec[0], (list, tuple)):
		for name in spec[0]: template.field(name)
	elif len(spec) == 1 and callable(spec[0]):
		more = spec[0](template, template.field)
		if isinstance(more, Mapping):
			for name, constraint in more.items(): template.field(name, constraint)
	else:
		for name in spec: template.field(name)
	return template

def single(json_value=None) -> SingletonTemplate:
	""" Declare a singleton, optionally with the value it serializes as. """
	return SingletonTemplate(json_value)

class Shorthand(Visitor):
	""" What each kind of thing means when it appears where a variant's template belongs. """

	def visit(self, host):
		# Algebraic values are classed by variant, and a variant may be called `dict` or `str`.
		if isinstance(host, Singleton): return single(host.to_json())
		if isinstance(host, Data): raise DeclarationError("Cannot make a variant out of %r."%(host,))
		return super().visit(host)

	@staticmethod
	def visit_RecordTemplate(it): return it

	@staticmethod
	def visit_SingletonTemplate(it): return it

	@staticmethod
	def visit_RecordKind(ctor):
		# Re-use the shape of a record which was already realized elsewhere.
		return record(dict(zip(ctor._fields, (ctor._constraints[f] for f in ctor._fields))))

	@staticmethod
	def visit_dict(fields): return record(fields)

	@staticmethod
	def visit_list(names): return record(names)

	visit_tuple = visit_list

	@staticmethod
	def visit_function(callback): return record(callback)

	@staticmethod
	def visit_str(literal): return single(literal)

	visit_int = visit_float = visit_bool = visit_NoneType = visit_date = visit_datetime = visit_str

	@staticmethod
	def visit_type(it):
		raise DeclarationError("%r is a class, not a variant template. Perhaps you meant record({...: only(%s)})?"%(it, it.__name__))

	@staticmethod
	def visit_object(it):
		raise DeclarationError("Cannot make a variant out of %r."%(it,))

SHORTHAND = Shorthand()

class Registrar:
	"""
	The capability to add variants to one particular family.
	The family holds it until sealed; see `FamilyKind.type`.
	"""
	def __init__(self, family:FamilyKind):
		self._family = family

	def __call__(self, name=None, template=ABSENT):
		if name is not None and not isinstance(name, str):
			name, template = None, name
		if name is None: name = unique_id("Anonymous")
		template = single() if template is ABSENT else SHORTHAND.visit(template)
		return template.realize(self._family, name)

def _declare(family:FamilyKind, spec:tuple):
	if not spec: return
	if len(spec) == 1 and isinstance(spec[0], Mapping):
		more = spec[0]
	elif len(spec) == 1 and callable(spec[0]) and not isinstance(spec[0], type):
		more = spec[0](family, family.type)
		if not isinstance(more, Mapping): return
	elif all(isinstance(name, str) for name in spec):
		for name in spec: family.type(name)
		return
	elif len(spec) == 1 and isinstance(spec[0], (list, tuple)):
		return _declare(family, tuple(spec[0]))
	else:
		raise DeclarationError("Cannot declare a type family from %r."%(spec,))
	for name, template in more.items(): family.type(name, template)

def data(*spec, name:str=None, bases=()) -> FamilyKind:
	"""
	Declare a type family. Three forms are equivalent:
		data("A", "B")                       # or data(["A", "B"]); all singletons
		data({"A": None, "B": {"x": int}})   # name -> template, with shorthand
		data(lambda family, type: ...)       # call type(name, template) as you please,
		                                     # and optionally return a mapping of more variants.
	The family stays open to `Family.type(...)` until `Family.seal()`.
	"""
	family = make_family(name or unique_id("Anonymous"), bases)
	family._registrar = Registrar(family)
	_declare(family, spec)
	return family

def enumeration(*spec, name:str=None) -> FamilyKind:
	""" A family whose variants are ordered by when they were registered. """
	return data(*spec, name=name, bases=(Ordered,))

def newtype(template=ABSENT, name:str=None):
	""" A family of one. Returns that one variant's constructor (or instance, for a singleton). """
	family = data(name=name)
	return family.type(family.__name__, template)

class TypeConstructor:
	"""
	A family parameterized by type arguments, like `Maybe(int)`.
	The callback receives the fresh family and the type arguments, and returns its variants.
	Each distinct (hashable) set of arguments is specialized only once.
	Methods attached with `@ctor.method` appear on every specialization.
	"""
	def __init__(self, callback, name:str):
		self._callback = callback
		self.name = name
		self.prototype = type(name, (Data,), {"__slots__": ()})
		self._cache = {}

	def __call__(self, *type_args) -> FamilyKind:
		try: return self._cache[type_args]
		except KeyError: family = self._cache[type_args] = self._specialize(type_args)
		except TypeError: family = self._specialize(type_args)
		return family

	def _specialize(self, type_args) -> FamilyKind:
		label = "%s[%s]"%(self.name, ", ".join(getattr(a, "__name__", None) or repr(a) for a in type_args))
		logger.debug("Specializing %s", label)
		return data(lambda family, _: self._callback(family, *type_args), name=label, bases=(self.prototype,))

	def method(self, fn):
		setattr(self.prototype, fn.__name__, fn)
		return fn

	def has_instance(self, x) -> bool:
		return isinstance(x, self.prototype)

	def __repr__(self): return "<type constructor %s>"%self.name

def construct(callback, name:str=None) -> TypeConstructor:
	return TypeConstructor(callback, name or unique_id("Anonymous"))
