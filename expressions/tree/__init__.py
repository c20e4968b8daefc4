"""
Binary expression trees for fully parenthesized arithmetic.

Builds a tree from strings like ``((3+4)*2)``, evaluates it, and renders
it in prefix, postfix and infix notation.
"""

from .builder import TreeBuilder, build_tree
from .errors import (
    DivisionByZero,
    EmptyOperand,
    ExpressionError,
    UnbalancedParentheses,
    UnrecognizedToken,
)
from .evaluator import Evaluator, evaluate
from .expression_tree import ExpressionTree
from .nodes import BinaryOp, Literal, Node, Operator, Variable
from .printers import infix_tokens, join_tokens, postfix_tokens, prefix_tokens, render_line

__all__ = [
    'TreeBuilder', 'build_tree',
    'Evaluator', 'evaluate',
    'ExpressionTree',
    'BinaryOp', 'Node', 'Literal', 'Variable', 'Operator',
    'prefix_tokens', 'postfix_tokens', 'infix_tokens', 'join_tokens', 'render_line',
    'ExpressionError', 'UnbalancedParentheses', 'EmptyOperand', 'UnrecognizedToken', 'DivisionByZero',
]
