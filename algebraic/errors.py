"""
Everything this package raises on purpose.

Each error also derives from the nearest built-in exception,
so callers who only care about "wrong type" can still say `except TypeError`.
"""

class AlgebraicError(Exception):
	""" Root of the package's deliberate failures. """

class ConstraintViolation(AlgebraicError, TypeError):
	""" A field value failed its constraint. """

class ArityError(AlgebraicError, TypeError):
	""" Wrong number of arguments to a record constructor, or a missing field. """

class UnknownFieldError(AlgebraicError, LookupError):
	""" A field name or index that the record does not have. """

class FamilyMismatchError(AlgebraicError, TypeError):
	""" Two values which were supposed to share a family, don't. """

class BadInvocationError(AlgebraicError, TypeError):
	""" Something was called which should not have been, at least not now. """

class DeclarationError(AlgebraicError, ValueError):
	""" A malformed type declaration. """

class ImmutableError(AlgebraicError, AttributeError):
	""" Instances do not change after construction. """
