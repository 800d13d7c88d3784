"""
A singly-linked list, built from Nil and Cons cells.

The tail of a Cons must itself be a List, which is a self-reference:
the family does not exist yet while its variants are being described,
so the constraint says `only(SELF)` and gets resolved on use.

Calling the family itself builds a list from its arguments: List(1, 2, 3).
"""
from algebraic import adt

List = adt.data({
	"Nil": adt.single(),
	"Cons": {"head": adt.anything, "tail": adt.only(adt.SELF)},
}, name="List")

@List.method
@staticmethod
def from_iterable(items):
	result = List.Nil
	for item in reversed(list(items)):
		result = List.Cons(item, result)
	return result

@List.default_constructor
def from_values(*items):
	return List.from_iterable(items)

@List.method
@staticmethod
def of(value):
	return List.Cons(value, List.Nil)

@List.method
def foldl(self, fn, memo):
	""" fn(memo, head) for each head, front to back. """
	cell = self
	while cell.is_Cons:
		memo = fn(memo, cell.head)
		cell = cell.tail
	return memo

@List.method
def __iter__(self):
	cell = self
	while cell.is_Cons:
		yield cell.head
		cell = cell.tail

@List.method
def to_list(self) -> list:
	return list(self)

@List.method
def length(self) -> int:
	return self.foldl(lambda n, _: n + 1, 0)

@List.method
def concat(self, other):
	result = other
	for item in reversed(self.to_list()):
		result = List.Cons(item, result)
	return result

@List.method
def flatten(self):
	""" A list of lists, concatenated. """
	result = List.Nil
	for inner in reversed(self.to_list()):
		result = inner.concat(result)
	return result

@List.method
def map(self, fn):
	return List.from_iterable(fn(item) for item in self)

@List.method
def chain(self, fn):
	return self.map(fn).flatten()

List.seal()
