import logging
from typing import Optional

from .errors import EmptyOperand, UnbalancedParentheses, UnrecognizedToken
from .nodes import Node, Operator, OPERATOR_SYMBOLS, classify_leaf

logger = logging.getLogger(__name__)


def find_split(text: str) -> int:
    """
    Index of the rightmost operator at parenthesis depth 0, or -1.

    The scan runs right to left, so the root of a chain such as ``1-2-3``
    is its last operator.
    """
    depth = 0
    for i in range(len(text) - 1, -1, -1):
        c = text[i]
        if c == ')':
            depth += 1
        elif c == '(':
            depth -= 1
        elif depth == 0 and c in OPERATOR_SYMBOLS:
            return i
    return -1


def is_balanced(text: str) -> bool:
    depth = 0
    for c in text:
        if c == '(':
            depth += 1
        elif c == ')':
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


class TreeBuilder:
    """
    Recursive builder for fully parenthesized arithmetic expressions.

    In the default permissive mode malformed pieces are dropped: a piece
    that is neither a leaf nor splittable becomes a missing (None) child.
    With ``strict=True`` the first problem aborts the build with an
    ExpressionError subclass instead.
    """

    def __init__(self, strict=False):
        self.strict = strict

    def build(self, expression: str) -> Optional[Node]:
        if self.strict:
            if not expression or not expression.strip():
                raise EmptyOperand("Expression is empty", expression)
            if not is_balanced(expression):
                raise UnbalancedParentheses(f"Unbalanced parentheses in '{expression.strip()}'", expression)
        return self._build(expression)

    def _build(self, text: str) -> Optional[Node]:
        text = text.strip()

        leaf = classify_leaf(text)
        if leaf is not None:
            return leaf

        # Strip one outer layer only
        if text.startswith('(') and text.endswith(')'):
            text = text[1:-1]
            if self.strict and not is_balanced(text):
                raise UnbalancedParentheses(f"Outer parentheses do not enclose '({text})'", text)

        pos = find_split(text)
        if pos == -1:
            if self.strict:
                if not text.strip():
                    raise EmptyOperand("Empty parentheses", text)
                if classify_leaf(text.strip()) is not None:
                    raise UnrecognizedToken(f"Redundant parentheses around '{text.strip()}'", text)
                raise UnrecognizedToken(f"Unrecognized token '{text.strip()}'", text)
            logger.debug(f"No operator or operand in '{text}', subtree dropped")
            return None

        left = text[:pos].strip()
        right = text[pos + 1:].strip()
        if self.strict and (not left or not right):
            side = "left" if not left else "right"
            raise EmptyOperand(f"Missing {side} operand for '{text[pos]}' in '{text.strip()}'", text)

        return Operator(text[pos], self._build(left), self._build(right))


def build_tree(expression: str, strict=False) -> Optional[Node]:
    return TreeBuilder(strict=strict).build(expression)
