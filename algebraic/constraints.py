"""
Field constraints.

A constraint is any callable from a candidate value to the value which actually gets stored.
It may coerce (`int` is a perfectly good constraint) or it may raise to reject the candidate.
Plain callables see only the candidate. Constraints derived from `Constraint` are
also told which field of which variant they are guarding, so they can complain precisely
and so they can refer to the family under construction.
"""
from .errors import ConstraintViolation, DeclarationError
from .values import Data
from .native import strictly_equal

class Constraint:
	""" A constraint which wants to know where it is being applied. """
	def __call__(self, x, field=None, owner=None): raise NotImplementedError(type(self))

class _SelfReference:
	"""
	Stands for the family which owns the field being checked.
	Resolved only when a value arrives, so a record may mention its own family
	before that family has finished registering variants.
	"""
	def __repr__(self): return "SELF"

SELF = _SelfReference()

def anything(x):
	""" The default constraint: accepts whatever it's given. """
	return x

def apply_constraint(constraint, x, field, owner):
	if isinstance(constraint, Constraint): return constraint(x, field, owner)
	return constraint(x)

class Only(Constraint):
	"""
	Accept a value if it matches any of the given specs:
	a class (by isinstance), a fixed algebraic value (by structural equality),
	something with a `has_instance` test (like a generic type constructor),
	`SELF`, or else a literal (by strict equality).
	"""
	def __init__(self, specs):
		self.specs = specs

	def __repr__(self): return "only(%s)"%", ".join(map(_spec_name, self.specs))

	def __call__(self, x, field=None, owner=None):
		for spec in self.specs:
			if _matches(spec, x, owner): return x
		raise ConstraintViolation(_complaint(self, x, field, owner))

def only(*specs) -> Only:
	if not specs: raise DeclarationError("only() needs at least one thing to accept.")
	return Only(specs)

def _matches(spec, x, owner) -> bool:
	if spec is SELF:
		return owner is not None and isinstance(x, owner.family)
	if isinstance(spec, Data): return spec.equals(x)
	if isinstance(spec, type): return _is_kind(x, spec)
	has_instance = getattr(spec, "has_instance", None)
	if callable(has_instance): return has_instance(x)
	return strictly_equal(spec, x)

def _is_kind(x, kind:type) -> bool:
	# True and False are ints to Python, but they are not numbers to anyone else.
	if isinstance(x, bool) and kind not in (bool, object): return False
	return isinstance(x, kind)

def _spec_name(spec):
	if isinstance(spec, type): return spec.__qualname__
	return repr(spec)

def _complaint(constraint:Only, x, field, owner) -> str:
	where = ""
	if field is not None: where += " for field %r"%field
	if owner is not None: where += " of %s"%owner.__qualname__
	return "Unexpected type%s: expected %r, got %r"%(where, constraint, x)
