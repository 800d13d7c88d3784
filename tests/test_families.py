import logging
import unittest
from datetime import date

from algebraic import adt

def no_42(x):
	if x == 42: raise TypeError("42 not allowed")
	return x

class DeclaringFamilies(unittest.TestCase):

	def test_callback(self):
		seen = []
		def configure(family, type):
			seen.append((family, type))
			type("A", adt.single())
			type("B")
			type("C", adt.record("a", "b", "c"))
			type("D", {"a": adt.anything, "b": None, "c": no_42})
			return {"E": adt.single()}
		Foo = adt.data(configure, name="Foo")
		family, registrar = seen[0]
		self.assertIs(Foo, family)
		self.assertEqual(("A", "B", "C", "D", "E"), Foo.names)
		a, b, c, d, e = Foo.A, Foo.B, Foo.C(1, 2, 3), Foo.D(4, 5, 6), Foo.E
		for it in (a, b, c, d, e):
			with self.subTest(it=it):
				self.assertIsInstance(it, adt.Data)
				self.assertIsInstance(it, Foo)
				self.assertTrue(Foo.has_instance(it))
		flags = [[getattr(it, "is_"+n) for n in Foo.names] for it in (a, b, c, d, e)]
		self.assertEqual([[i == j for j in range(5)] for i in range(5)], flags)
		self.assertEqual(("a", "b", "c"), Foo.D._fields)
		self.assertIs(no_42, Foo.D._constraints["c"])
		self.assertEqual("Foo.D", Foo.D.__qualname__)

	def test_flags_default_to_false_on_the_family(self):
		Foo = adt.data("A", "B")
		self.assertFalse(Foo.is_A)
		self.assertFalse(Foo.is_B)

	def test_names_and_mapping(self):
		for Foo in [adt.data("A", "B"), adt.data(["A", "B"]), adt.data({"A": None, "B": None})]:
			with self.subTest(Foo=Foo):
				self.assertEqual(("A", "B"), Foo.names)
				self.assertIsInstance(Foo.A, adt.Singleton)
				self.assertIsNot(Foo.A, Foo.B)

	def test_shorthand(self):
		when = date(2020, 2, 2)
		Foo = adt.data({
			"Text": "text", "Number": 7, "Flag": False, "When": when, "Null": None,
			"Fields": {"x": None}, "Names": ["x", "y"], "Callback": lambda r, field: field("z"),
		})
		self.assertEqual(["text", 7, False, when, None], [Foo.Text.to_json(), Foo.Number.to_json(), Foo.Flag.to_json(), Foo.When.to_json(), Foo.Null.to_json()])
		self.assertEqual(("x",), Foo.Fields._fields)
		self.assertEqual(("x", "y"), Foo.Names._fields)
		self.assertEqual(("z",), Foo.Callback._fields)

	def test_realized_record_as_template(self):
		Point = adt.newtype(adt.record({"x": no_42, "y": None}), name="Point")
		Shape = adt.data({"Dot": Point})
		self.assertIsNot(Point, Shape.Dot)
		self.assertEqual(("x", "y"), Shape.Dot._fields)
		with self.assertRaises(TypeError):
			Shape.Dot(42, 0)

	def test_bad_templates(self):
		for bogon in [int, object(), {1, 2}]:
			with self.subTest(bogon=bogon):
				with self.assertRaises(adt.DeclarationError):
					adt.data({"Bad": bogon})

	def test_bad_variant_names(self):
		Foo = adt.data("A")
		for bogon in ["A", "_A", "not a name", "type", "seal", "names", "get", "set", "clone", "to_json", "lt"]:
			with self.subTest(bogon=bogon):
				with self.assertRaises(adt.DeclarationError):
					Foo.type(bogon)

	def test_variant_names_cannot_hide_instance_methods(self):
		with self.assertRaises(adt.DeclarationError):
			adt.data({"get": ["a"], "B": ["x"]})
		Foo = adt.data({"B": ["x"]})
		with self.assertRaises(adt.DeclarationError):
			Foo.type("get", ["a"])
		self.assertEqual(1, Foo.B(1).get("x"))

	def test_singletons_named_like_builtins_as_templates(self):
		Odd = adt.data({"dict": adt.single("d"), "str": adt.single("s"), "function": None})
		Copy = adt.data({"D": Odd.dict, "S": Odd.str, "F": Odd.function})
		self.assertEqual(("d", "s", None), (Copy.D.to_json(), Copy.S.to_json(), Copy.F.to_json()))
		self.assertIsInstance(Copy.D, adt.Singleton)
		Box = adt.data({"list": ["x"]})
		with self.assertRaises(adt.DeclarationError):
			adt.data({"Bad": Box.list(1)})

	def test_incremental_registration(self):
		Foo = adt.data("A")
		B = Foo.type("B", adt.record("x"))
		self.assertIs(B, Foo.B)
		self.assertEqual(("A", "B"), Foo.names)
		self.assertIsInstance(B(1), Foo)
		self.assertFalse(Foo.A.is_B)

	def test_anonymous_names(self):
		Foo = adt.data()
		nameless = Foo.type(adt.record("x"))
		self.assertTrue(nameless.__name__.startswith("Anonymous"))
		self.assertIs(nameless, getattr(Foo, nameless.__name__))
		self.assertTrue(Foo.__name__.startswith("Anonymous"))
		self.assertNotEqual(Foo.__name__, adt.data().__name__)

	def test_logs_declarations(self):
		with self.assertLogs("algebraic.kinds", logging.DEBUG) as logs:
			Foo = adt.data("A", name="Logged")
			Foo.seal()
		text = "\n".join(logs.output)
		self.assertIn("Logged.A", text)
		self.assertIn("Sealed Logged", text)

class Singletons(unittest.TestCase):

	def setUp(self):
		self.Foo = adt.data({"A": adt.single(), "B": adt.single({"b": 1})}, name="Foo")

	def test_one_instance(self):
		a = self.Foo.A
		self.assertIs(a, type(a)())
		self.assertIs(a, a.clone())
		self.assertIs(a, type(a).create({}))
		self.assertTrue(a.equals(a))
		self.assertFalse(a.equals(self.Foo.B))
		self.assertFalse(a.equals(12))
		self.assertEqual([], type(a).unapply(a))
		self.assertEqual({}, type(a).unapply_as_dict(a))
		with self.assertRaises(adt.ArityError):
			type(a)(1)

	def test_serialization(self):
		self.assertIsNone(self.Foo.A.to_json())
		self.assertEqual({"b": 1}, self.Foo.B.to_json())
		self.assertEqual("A", str(self.Foo.A))

	def test_hashable(self):
		self.assertEqual({self.Foo.A: 1}[self.Foo.A], 1)

class Sealing(unittest.TestCase):

	def test_seal(self):
		Foo = adt.data({"A": None, "B": ["x"]})
		self.assertFalse(Foo.is_sealed())
		self.assertIs(Foo, Foo.seal())
		self.assertTrue(Foo.is_sealed())
		with self.assertRaises(adt.BadInvocationError):
			Foo.type("C")
		Foo.seal()
		b = Foo.B(1)
		self.assertTrue(b.equals(Foo.B(1)))
		self.assertTrue(b.clone().equals(b))
		self.assertIs(Foo.A, Foo.A.clone())

	def test_variants_cannot_register(self):
		Foo = adt.data({"B": ["x"]})
		with self.assertRaises(adt.BadInvocationError):
			Foo.B.type("C")

class DefaultConstruction(unittest.TestCase):

	def test_absent_by_default(self):
		Foo = adt.data("A")
		with self.assertRaises(adt.BadInvocationError):
			Foo()

	def test_installed(self):
		Foo = adt.data({"Zero": None, "Some": ["n"]})
		@Foo.default_constructor
		def build(n=0):
			return Foo.Some(n) if n else Foo.Zero
		self.assertIs(Foo.Zero, Foo())
		self.assertTrue(Foo(3).equals(Foo.Some(3)))

class Recursion(unittest.TestCase):

	def test_self_marker(self):
		Tree = adt.data({"Leaf": None, "Node": {"left": adt.only(adt.SELF), "right": adt.only(adt.SELF)}})
		tree = Tree.Node(Tree.Leaf, Tree.Node(Tree.Leaf, Tree.Leaf))
		self.assertTrue(tree.clone().equals(tree))
		with self.assertRaises(adt.ConstraintViolation) as context:
			Tree.Node(Tree.Leaf, 5)
		self.assertIn("'right'", str(context.exception))
		self.assertIn("Node", str(context.exception))

	def test_family_in_callback(self):
		Tree = adt.data(lambda Tree, type: {
			"Leaf": None,
			"Node": {"left": adt.only(Tree), "right": adt.only(Tree)},
		})
		self.assertIsInstance(Tree.Node(Tree.Leaf, Tree.Leaf), Tree)
		with self.assertRaises(TypeError):
			Tree.Node(1, Tree.Leaf)

class Enumerations(unittest.TestCase):

	def setUp(self):
		self.Color = adt.enumeration("Red", "Green", "Blue")

	def test_order(self):
		Red, Green, Blue = self.Color.variants()
		self.assertEqual([0, 1, 2], [type(c).order for c in (Red, Green, Blue)])
		self.assertTrue(Red.lt(Green) and Green.lt(Blue) and Red.lt(Blue))
		self.assertFalse(Green.lt(Red) or Blue.lt(Green))
		self.assertTrue(Red.lte(Red) and Blue.gt(Red) and Blue.gte(Blue))
		self.assertTrue(Green.eq(Green) and Green.neq(Blue))
		self.assertTrue(Red < Green <= Green < Blue)
		self.assertEqual([Red, Green, Blue], sorted([Blue, Red, Green]))

	def test_later_variants_go_last(self):
		Violet = self.Color.type("Violet")
		self.assertEqual(3, type(Violet).order)
		self.assertTrue(self.Color.Blue.lt(Violet))

	def test_record_members(self):
		Size = adt.enumeration({"Small": None, "Custom": {"inches": int}})
		self.assertTrue(Size.Small.lt(Size.Custom(3)))
		self.assertTrue(Size.Custom(3).eq(Size.Custom(4)))
		self.assertFalse(Size.Custom(3).equals(Size.Custom(4)))

	def test_mismatch(self):
		Other = adt.enumeration("Red")
		for op in ("lt", "lte", "gt", "gte", "eq", "neq"):
			with self.subTest(op):
				with self.assertRaises(TypeError):
					getattr(self.Color.Red, op)(Other.Red)
		with self.assertRaises(adt.FamilyMismatchError):
			self.Color.Red.lt(0)

class Newtypes(unittest.TestCase):

	def test_record(self):
		Meters = adt.newtype(adt.record({"value": float}), name="Meters")
		self.assertEqual(("Meters",), Meters.family.names)
		self.assertIsInstance(Meters(3), Meters.family)
		self.assertEqual(3.0, Meters(3).value)

	def test_singleton(self):
		Unit = adt.newtype(name="Unit")
		self.assertIsInstance(Unit, adt.Singleton)
		self.assertIs(Unit, type(Unit).family.Unit)

class TypeConstructors(unittest.TestCase):

	def setUp(self):
		self.Box = adt.construct(lambda family, kind: {"Box": {"content": adt.only(kind)}}, name="Box")

	def test_specialization(self):
		IntBox = self.Box(int)
		self.assertIs(IntBox, self.Box(int))
		self.assertIsNot(IntBox, self.Box(str))
		self.assertEqual("Box[int]", IntBox.__name__)
		self.assertEqual(1, IntBox.Box(1).content)
		with self.assertRaises(TypeError):
			IntBox.Box("one")

	def test_shared_methods(self):
		@self.Box.method
		def peek(self):
			return self.content
		self.assertEqual("s", self.Box(str).Box("s").peek())
		self.assertEqual(2, self.Box(int).Box(2).peek())

	def test_membership(self):
		box = self.Box(int).Box(1)
		self.assertTrue(self.Box.has_instance(box))
		self.assertFalse(self.Box.has_instance(1))
		Holder = adt.newtype(adt.record({"box": adt.only(self.Box)}))
		self.assertIs(box, Holder(box).box)
		with self.assertRaises(TypeError):
			Holder(1)

	def test_unhashable_arguments(self):
		Pick = adt.construct(lambda family, choices: {"Pick": {"choice": adt.only(*choices)}})
		self.assertEqual("b", Pick(["a", "b"]).Pick("b").choice)

if __name__ == '__main__':
	unittest.main()
