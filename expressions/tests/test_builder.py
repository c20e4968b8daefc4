from django.test import SimpleTestCase

from expressions.tree import (
    EmptyOperand,
    ExpressionError,
    Literal,
    Operator,
    TreeBuilder,
    UnbalancedParentheses,
    UnrecognizedToken,
    Variable,
    build_tree,
)
from expressions.tree.builder import find_split, is_balanced


class FindSplitTests(SimpleTestCase):
    def test_rightmost_top_level_operator(self):
        self.assertEqual(find_split("(1+2)*3"), 5)
        self.assertEqual(find_split("1-2-3"), 3)
        self.assertEqual(find_split("3*(1+2)"), 1)

    def test_no_operator(self):
        self.assertEqual(find_split("12"), -1)
        self.assertEqual(find_split("(1+2)"), -1)
        self.assertEqual(find_split(""), -1)

    def test_is_balanced(self):
        self.assertTrue(is_balanced("((1+2)*3)"))
        self.assertTrue(is_balanced(""))
        self.assertFalse(is_balanced("((1+2)"))
        self.assertFalse(is_balanced("1+2)*(3+4"))


class PermissiveBuildTests(SimpleTestCase):
    def test_leaves(self):
        self.assertEqual(build_tree("5"), Literal("5"))
        self.assertEqual(build_tree("  x12 "), Variable("x12"))

    def test_nested(self):
        self.assertEqual(
            build_tree("((3+4)*2)"),
            Operator("*", Operator("+", Literal("3"), Literal("4")), Literal("2")),
        )

    def test_whitespace_inside(self):
        self.assertEqual(
            build_tree(" ( 3 +  a ) "),
            Operator("+", Literal("3"), Variable("a")),
        )

    def test_chain_splits_at_last_operator(self):
        expected = Operator("-", Operator("-", Literal("1"), Literal("2")), Literal("3"))
        self.assertEqual(build_tree("1-2-3"), expected)
        self.assertEqual(build_tree("((1-2)-3)"), expected)

    def test_right_nested_group(self):
        self.assertEqual(
            build_tree("(1-(2-3))"),
            Operator("-", Literal("1"), Operator("-", Literal("2"), Literal("3"))),
        )

    def test_only_one_outer_layer_is_stripped(self):
        self.assertIsNone(build_tree("(5)"))
        self.assertIsNone(build_tree("((3+4))"))

    def test_empty_input(self):
        self.assertIsNone(build_tree(""))
        self.assertIsNone(build_tree("   "))

    def test_missing_operand_leaves_a_gap(self):
        self.assertEqual(build_tree("(3+)"), Operator("+", Literal("3"), None))
        self.assertEqual(build_tree("(-3)"), Operator("-", None, Literal("3")))
        self.assertEqual(build_tree("(+)"), Operator("+", None, None))

    def test_unknown_characters_are_dropped(self):
        self.assertIsNone(build_tree("(3$4)"))
        self.assertEqual(build_tree("(a+b$)"), Operator("+", Variable("a"), None))

    def test_unmatched_outer_pair(self):
        # "(1+2)*(3+4)" loses its first and last character; no error is raised
        tree = build_tree("(1+2)*(3+4)")
        self.assertIsInstance(tree, Operator)

    def test_missing_subtree_is_logged(self):
        with self.assertLogs("expressions.tree.builder", level="DEBUG") as logs:
            build_tree("(5)")
        self.assertIn("subtree dropped", logs.output[0])


class StrictBuildTests(SimpleTestCase):
    def setUp(self):
        self.builder = TreeBuilder(strict=True)

    def test_valid_input_builds_same_tree(self):
        for expression in ("5", "abc", "((3+4)*2)", "(a/(b1-7))", "1+2"):
            with self.subTest(expression=expression):
                self.assertEqual(self.builder.build(expression), build_tree(expression))

    def test_empty(self):
        for expression in ("", "   ", "()", "(3+)", "(*4)"):
            with self.subTest(expression=expression):
                with self.assertRaises(EmptyOperand):
                    self.builder.build(expression)

    def test_unbalanced(self):
        for expression in ("((1+2)", "(1+2))", "(1+2)*(3+4)", ")1+2("):
            with self.subTest(expression=expression):
                with self.assertRaises(UnbalancedParentheses):
                    self.builder.build(expression)

    def test_unrecognized(self):
        for expression in ("(3$4)", "(a+b$)", "3.5", "(5)", "((3+4))"):
            with self.subTest(expression=expression):
                with self.assertRaises(UnrecognizedToken):
                    self.builder.build(expression)

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError) as ctx:
            build_tree("(3+)", strict=True)
        self.assertIsInstance(ctx.exception, ExpressionError)
        self.assertIn("right operand", str(ctx.exception))

    def test_redundant_parentheses_message(self):
        with self.assertRaises(UnrecognizedToken) as ctx:
            build_tree("(5)", strict=True)
        self.assertIn("Redundant parentheses", str(ctx.exception))
