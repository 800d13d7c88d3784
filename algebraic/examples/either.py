"""
Either a Left (conventionally, a failure) or a Right (a success).
"""
from algebraic import adt

Either = adt.data({
	"Left": {"value": adt.anything},
	"Right": {"value": adt.anything},
}, name="Either")

@Either.method
@staticmethod
def of(value):
	return Either.Right(value)

@Either.method
def map(self, fn):
	return self if self.is_Left else Either.Right(fn(self.value))

@Either.method
def chain(self, fn):
	return self if self.is_Left else fn(self.value)

@Either.method
def ap(self, other):
	return self if self.is_Left else other.map(self.value)

Either.seal()
