"""
A Maybe specialized to what it may hold:

	Maybe(int).Just(42)      # fine
	Maybe(int).Just("abc")   # TypeError

Methods attached here work on every specialization.
"""
from algebraic import adt

Maybe = adt.construct(lambda family, kind: {
	"Nothing": None,
	"Just": {"value": adt.only(kind)},
}, name="Maybe")

@Maybe.method
@classmethod
def of(family, value):
	return family.Just(value)

@Maybe.method
def map(self, fn):
	return self if self.is_Nothing else self.set(value=fn(self.value))

@Maybe.method
def chain(self, fn):
	return self if self.is_Nothing else fn(self.value)

@Maybe.method
def ap(self, other):
	return self if self.is_Nothing else other.map(self.value)
