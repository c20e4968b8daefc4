import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

LITERAL_PATTERN = re.compile(r"[0-9]+")
VARIABLE_PATTERN = re.compile(r"[a-zA-Z]+[0-9]*")


def divide(left, right):
    """IEEE-754 division: x/0 gives a signed infinity, 0/0 gives nan."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


class BinaryOp(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def apply(self, left, right):
        if self is BinaryOp.ADD: return left + right
        if self is BinaryOp.SUB: return left - right
        if self is BinaryOp.MUL: return left * right
        return divide(left, right)


OPERATOR_SYMBOLS = frozenset(op.value for op in BinaryOp)


@dataclass(frozen=True)
class Literal:
    text: str
    number: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "number", float(self.text))

    @property
    def value(self):
        return self.text

    @property
    def children(self):
        return ()

    @property
    def is_leaf(self):
        return True

    def __repr__(self):
        return f"Literal({self.text!r})"


@dataclass(frozen=True)
class Variable:
    name: str

    @property
    def value(self):
        return self.name

    @property
    def children(self):
        return ()

    @property
    def is_leaf(self):
        return True

    def __repr__(self):
        return f"Variable({self.name!r})"


@dataclass(frozen=True)
class Operator:
    op: BinaryOp
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def __post_init__(self):
        if not isinstance(self.op, BinaryOp):
            object.__setattr__(self, "op", BinaryOp(self.op))

    @property
    def value(self):
        return self.op.value

    @property
    def children(self):
        return (self.left, self.right)

    @property
    def is_leaf(self):
        # An operator whose sub-parses both failed prints like a leaf.
        return self.left is None and self.right is None

    def __repr__(self):
        return f"Operator({self.op.value!r}, {self.left!r}, {self.right!r})"


Node = Union[Literal, Variable, Operator]


def is_literal(text):
    return LITERAL_PATTERN.fullmatch(text) is not None


def is_variable(text):
    return VARIABLE_PATTERN.fullmatch(text) is not None


def classify_leaf(text):
    """Return the leaf node for ``text``, or None if it is neither a literal nor a variable."""
    if is_literal(text):
        return Literal(text)
    if is_variable(text):
        return Variable(text)
    return None
