"""
The public face of the engine, meant to be imported whole:

	from algebraic import adt

	Maybe = adt.data({
		"Nothing": None,
		"Just": {"value": adt.anything},
	}, name="Maybe")

	Maybe.Just(42).get("value")     # 42
	Maybe.Nothing.is_Nothing        # True
"""
from .constraints import Constraint, Only, SELF, anything, only
from .declare import (
	RecordTemplate, SingletonTemplate, TypeConstructor,
	record, single, data, enumeration, newtype, construct,
)
from .errors import (
	AlgebraicError, ConstraintViolation, ArityError, UnknownFieldError,
	FamilyMismatchError, BadInvocationError, DeclarationError, ImmutableError,
)
from .kinds import FamilyKind, RecordKind, SingletonKind
from .values import Data, Record, Singleton, Ordered, Partial
from . import native
