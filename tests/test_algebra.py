import unittest

from hindley.algebra import TypeVariable, Arrow, Scheme, Render, curry, monomorphic
from hindley.stacking import Context
from hindley.syntax import Id, Fn, Call, let, call

V0, V1, V2, V3 = map(TypeVariable, range(4))

class TypeTermTests(unittest.TestCase):

	def test_structural_equality(self):
		self.assertEqual(TypeVariable(0), V0)
		self.assertNotEqual(V0, V1)
		self.assertEqual(Arrow(V0, Arrow(V1, V0)), Arrow(V0, Arrow(V1, V0)))
		self.assertNotEqual(Arrow(V0, V1), Arrow(V1, V0))
		self.assertNotEqual(V0, Arrow(V0, V0))
		self.assertEqual(len({Arrow(V0, V0), Arrow(V0, V0), V0}), 2)

	def test_substitution_goes_all_the_way_down(self):
		typ = Arrow(Arrow(V0, V1), Arrow(V1, V2))
		got = typ.substitute({1: V3})
		self.assertEqual(Arrow(Arrow(V0, V3), Arrow(V3, V2)), got)
		self.assertEqual(Arrow(Arrow(V0, V1), Arrow(V1, V2)), typ)

	def test_substitution_is_a_single_pass(self):
		""" The image of a variable is not itself rewritten, so this terminates. """
		selfish = Arrow(V0, V0)
		self.assertEqual(Arrow(selfish, V1), Arrow(V0, V1).substitute({0: selfish}))

	def test_empty_substitution(self):
		typ = Arrow(V0, V1)
		self.assertIs(typ, typ.substitute({}))

	def test_mentions(self):
		typ = Arrow(V0, Arrow(V2, V0))
		self.assertTrue(typ.mentions(V2))
		self.assertTrue(typ.mentions(V0))
		self.assertFalse(typ.mentions(V1))

	def test_curry(self):
		self.assertEqual(V2, curry([], V2))
		self.assertEqual(Arrow(V0, Arrow(V1, V2)), curry([V0, V1], V2))

	def test_rendering(self):
		self.assertEqual("?a -> ?b -> ?a", Arrow(V3, Arrow(V1, V3)).visit(Render()))
		self.assertEqual("(?a -> ?b) -> ?a", Arrow(Arrow(V2, V0), V2).visit(Render()))
		self.assertEqual("(<2> -> <0>) -> <2>", repr(Arrow(Arrow(V2, V0), V2)))

class SchemeTests(unittest.TestCase):

	def setUp(self) -> None:
		self.context = Context()
		self.context.fresh()
		self.context.fresh()

	def test_monomorphic_passes_straight_through(self):
		typ = Arrow(V0, V0)
		self.assertIs(typ, monomorphic(typ).instantiate(self.context))
		self.assertEqual(TypeVariable(2), self.context.fresh(), "Nothing should have been minted.")

	def test_each_instantiation_is_independent(self):
		scheme = Scheme(Arrow(V0, Arrow(V1, V0)), {0, 1})
		first = scheme.instantiate(self.context)
		second = scheme.instantiate(self.context)
		self.assertEqual(Arrow(V2, Arrow(V3, V2)), first)
		self.assertEqual(Arrow(TypeVariable(4), Arrow(TypeVariable(5), TypeVariable(4))), second)
		self.assertEqual(Arrow(V0, Arrow(V1, V0)), scheme.typ, "The scheme itself must not change.")
		self.assertEqual(frozenset({0, 1}), scheme.generic)

	def test_only_generic_variables_are_renamed(self):
		scheme = Scheme(Arrow(V0, V1), [1])
		self.assertEqual(Arrow(V0, V2), scheme.instantiate(self.context))

	def test_repr(self):
		self.assertEqual("forall <0>. <0> -> <1>", repr(Scheme(Arrow(V0, V1), [0])))
		self.assertEqual("<0> -> <1>", repr(Scheme(Arrow(V0, V1))))

class SyntaxTests(unittest.TestCase):

	def test_rendering(self):
		f, a, b = Id("f"), Id("a"), Id("b")
		self.assertEqual("(\\x -> x)", str(Fn("x", Id("x"))))
		self.assertEqual("let f a b = a in (f b)", str(let("f", "ab", a, Call(f, b))))
		self.assertEqual("let id = (\\x -> x) in id", str(let("id", [], Fn("x", Id("x")), Id("id"))))

	def test_call_is_curried(self):
		f, a, b = Id("f"), Id("a"), Id("b")
		self.assertEqual(Call(Call(f, a), b), call(f, a, b))
		self.assertEqual(Call(f, a), call(f, a))

if __name__ == '__main__':
	unittest.main()
