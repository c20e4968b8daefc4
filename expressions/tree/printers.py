"""
Depth-first renderings of an expression tree.

Each function returns a flat list of string tokens. Missing (None)
children are skipped. ``join_tokens`` writes a space after every value
token and none after parentheses, so the infix form of ``((3+4)*2)``
reads ``((3 + 4 )* 2 )``.
"""
from typing import List, Optional

from .nodes import Node

OPEN_PAREN = "("
CLOSE_PAREN = ")"


def prefix_tokens(node: Optional[Node]) -> List[str]:
    tokens = []
    _prefix(node, tokens)
    return tokens


def _prefix(node, tokens):
    if node is None:
        return
    tokens.append(node.value)
    for child in node.children:
        _prefix(child, tokens)


def postfix_tokens(node: Optional[Node]) -> List[str]:
    tokens = []
    _postfix(node, tokens)
    return tokens


def _postfix(node, tokens):
    if node is None:
        return
    for child in node.children:
        _postfix(child, tokens)
    tokens.append(node.value)


def infix_tokens(node: Optional[Node]) -> List[str]:
    tokens = []
    _infix(node, tokens)
    return tokens


def _infix(node, tokens):
    if node is None:
        return
    wrap = not node.is_leaf
    if wrap:
        tokens.append(OPEN_PAREN)
    left, right = node.children or (None, None)
    _infix(left, tokens)
    tokens.append(node.value)
    _infix(right, tokens)
    if wrap:
        tokens.append(CLOSE_PAREN)


def join_tokens(tokens: List[str]) -> str:
    parts = []
    for token in tokens:
        if token in (OPEN_PAREN, CLOSE_PAREN):
            parts.append(token)
        else:
            parts.append(token + " ")
    return "".join(parts)


def render_line(label: str, tokens: List[str]) -> str:
    return f"{label}: {join_tokens(tokens)}"
