class ExpressionError(ValueError):
    """Base class for problems reported by the strict builder and evaluator."""

    def __init__(self, message, expression=None):
        super().__init__(message)
        self.expression = expression


class UnbalancedParentheses(ExpressionError):
    pass


class EmptyOperand(ExpressionError):
    pass


class UnrecognizedToken(ExpressionError):
    pass


class DivisionByZero(ExpressionError):
    pass
