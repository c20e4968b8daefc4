import math

from django.test import SimpleTestCase

from expressions.tree import (
    DivisionByZero,
    ExpressionTree,
    Literal,
    UnbalancedParentheses,
)


class ExpressionTreeTests(SimpleTestCase):
    def test_render(self):
        tree = ExpressionTree.from_string("((3+4)*2)")
        self.assertEqual(tree.render(), [
            "Infix: ((3 + 4 )* 2 )",
            "Prefix: * + 3 4 2 ",
            "Postfix: 3 4 + 2 * ",
            "Expression evaluates to: 14.0",
        ])

    def test_single_literal(self):
        tree = ExpressionTree.from_string("5")
        self.assertEqual(tree.root, Literal("5"))
        self.assertEqual(tree.evaluate(), 5.0)
        self.assertEqual(tree.prefix(), ["5"])
        self.assertEqual(tree.postfix(), ["5"])
        self.assertEqual(tree.infix(), ["5"])

    def test_division_by_zero(self):
        tree = ExpressionTree.from_string("(10/0)")
        self.assertEqual(tree.evaluate(), math.inf)
        self.assertEqual(tree.render()[-1], "Expression evaluates to: inf")

    def test_strict_division(self):
        tree = ExpressionTree.from_string("(10/0)", strict_division=True)
        with self.assertRaises(DivisionByZero):
            tree.evaluate()

    def test_variables(self):
        tree = ExpressionTree.from_string("(a+3)")
        self.assertEqual(tree.variables, {})
        self.assertEqual(tree.evaluate(), 3.0)

        tree.variables["a"] = 4
        self.assertEqual(tree.evaluate(), 7.0)

        tree = ExpressionTree.from_string("(a*b)", variables={"a": 2, "b": 5})
        self.assertEqual(tree.evaluate(), 10.0)

    def test_variables_are_copied(self):
        values = {"a": 1}
        tree = ExpressionTree.from_string("a", variables=values)
        values["a"] = 100
        self.assertEqual(tree.evaluate(), 1.0)

    def test_unparseable_input(self):
        tree = ExpressionTree.from_string("(5)")
        self.assertIsNone(tree.root)
        self.assertEqual(tree.render(), [
            "Infix: ",
            "Prefix: ",
            "Postfix: ",
            "Expression evaluates to: 0.0",
        ])

    def test_strict_build(self):
        with self.assertRaises(UnbalancedParentheses):
            ExpressionTree.from_string("((1+2)", strict=True)

    def test_render_is_repeatable(self):
        tree = ExpressionTree.from_string("((x-2)/(y+1))", variables={"x": 8, "y": 2})
        self.assertEqual(tree.render(), tree.render())
        self.assertEqual(tree.evaluate(), 2.0)
