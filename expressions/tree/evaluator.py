from .errors import DivisionByZero
from .nodes import BinaryOp, Literal, Operator, Variable


class Evaluator:
    def __init__(self, variables=None, strict_division=False):
        self.variables = variables if variables is not None else {}  # {"a": 2.0}
        self.strict_division = strict_division

    def eval(self, node):
        # Missing subtrees count as zero
        if node is None:
            return 0.0

        if isinstance(node, Literal):
            return node.number

        if isinstance(node, Variable):
            return float(self.variables.get(node.name, 0.0))

        if isinstance(node, Operator):
            left = self.eval(node.left)
            right = self.eval(node.right)

            if node.op is BinaryOp.DIV and right == 0 and self.strict_division:
                raise DivisionByZero(f"Division by zero: {left} / {right}")
            return node.op.apply(left, right)

        raise TypeError(f"Invalid tree node {node!r}")


def evaluate(node, variables=None, strict_division=False):
    return Evaluator(variables, strict_division=strict_division).eval(node)
