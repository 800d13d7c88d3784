"""
Hooks for values which are not themselves algebraic data.

The engine looks these up on this module at call time,
so replacing them is just assignment:

	from algebraic import native
	native.clone = copy.deepcopy

The defaults assume foreign values are immutable (or at least never mutated),
so cloning is identity and equality is strict.
"""

def clone(x):
	return x

def equals(a, b) -> bool:
	return strictly_equal(a, b)

def strictly_equal(a, b) -> bool:
	""" Same object, or same exact type and equal. Thus 1 is not True, and 1 is not 1.0 """
	return a is b or (type(a) is type(b) and a == b)
