from typing import Dict, List, Optional

from .builder import TreeBuilder
from .evaluator import Evaluator
from .nodes import Node
from .printers import infix_tokens, postfix_tokens, prefix_tokens, render_line


class ExpressionTree:
    """
    A built expression plus the variable values used to evaluate it.

    The root is None when the source string could not be reduced to any
    node. The tree itself is never modified; ``variables`` may be filled in
    by the caller before evaluating.
    """

    def __init__(self, root: Optional[Node] = None, variables: Optional[Dict[str, float]] = None,
                 strict_division=False):
        self.root = root
        self.variables = dict(variables or {})
        self.strict_division = strict_division

    @classmethod
    def from_string(cls, expression: str, variables=None, strict=False, strict_division=False):
        """
        Build a tree from a fully parenthesized expression.

        Args:
            expression: e.g. "((3+4)*2)"
            variables: optional name -> value mapping for free variables
            strict: raise ExpressionError subclasses instead of dropping malformed pieces
            strict_division: raise DivisionByZero instead of returning inf/nan

        Returns:
            ExpressionTree instance
        """
        root = TreeBuilder(strict=strict).build(expression)
        return cls(root, variables, strict_division=strict_division)

    def evaluate(self) -> float:
        return Evaluator(self.variables, strict_division=self.strict_division).eval(self.root)

    def prefix(self) -> List[str]:
        return prefix_tokens(self.root)

    def postfix(self) -> List[str]:
        return postfix_tokens(self.root)

    def infix(self) -> List[str]:
        return infix_tokens(self.root)

    def render(self) -> List[str]:
        """The four report lines: infix, prefix, postfix and the value."""
        return [
            render_line("Infix", self.infix()),
            render_line("Prefix", self.prefix()),
            render_line("Postfix", self.postfix()),
            f"Expression evaluates to: {self.evaluate()}",
        ]

    def __repr__(self):
        return f"ExpressionTree({self.root!r})"
