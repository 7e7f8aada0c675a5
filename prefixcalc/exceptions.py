"""Errors.

Every stage of the pipeline raises its own error type. Messages are built
in ``__init__`` and carry the 1-based column of the offending token when it
is known.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


def _at(message: str, position: int | None) -> str:
    if position is not None:
        message += f" at column {position}"
    return message


class LexError(Exception):
    """
    Error for characters the tokenizer does not recognise.
    """
    def __init__(self, message, position=None):
        self.position = position
        super().__init__(_at(message, position))


class ExpressionSyntaxError(SyntaxError):
    """
    Error for structural violations of the atom grammar.
    """
    def __init__(self, message, position=None):
        self.position = position
        super().__init__(_at(message, position))


class EvalError(Exception):
    """
    Base class for evaluation failures.
    """
    def __init__(self, message, position=None):
        self.position = position
        super().__init__(_at(message, position))


class DivideByZeroError(EvalError):
    """
    Error for a divisor that evaluates to zero.
    """
    def __init__(self, expr, position=None):
        self.expr = expr
        super().__init__(f"Division by zero in {expr}", position)


class ArityMismatchError(EvalError):
    """
    Error for an operator with fewer than two operands.
    """
    def __init__(self, op, count, position=None):
        self.op = op
        self.count = count
        super().__init__(
            f"Operator '{op.symbol}' expects at least 2 operands, got {count}",
            position,
        )


class TypeMismatchError(EvalError):
    """
    Error for a non-numeric value used where a number is required.
    """


class IntegerOverflowError(EvalError):
    """
    Error for results that leave the signed 64-bit range.
    """
    def __init__(self, expr, position=None):
        self.expr = expr
        super().__init__(f"Integer overflow in {expr}", position)
