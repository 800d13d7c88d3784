"""
The optional value: either Nothing, or Just a value.
"""
from algebraic import adt

Maybe = adt.data({
	"Nothing": None,
	"Just": {"value": adt.anything},
}, name="Maybe")

@Maybe.method
@staticmethod
def of(value):
	return Maybe.Just(value)

@Maybe.method
def map(self, fn):
	return self if self.is_Nothing else self.set(value=fn(self.value))

@Maybe.method
def chain(self, fn):
	return self if self.is_Nothing else fn(self.value)

@Maybe.method
def ap(self, other):
	""" Apply the function inside this Maybe to the value inside the other. """
	return self if self.is_Nothing else other.map(self.value)

Maybe.seal()
