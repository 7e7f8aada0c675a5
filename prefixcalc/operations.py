"""Shared definitions for arithmetic operators.

The tokenizer, parser and interpreter all refer to operators through
:class:`Op`. Each member knows its source symbol and the binary reducer the
interpreter folds across an operator's operands.
"""

from enum import Enum

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def truncating_div(lhs: int, rhs: int) -> int:
    """
    Integer division rounding toward zero.

    Python's ``//`` floors, so ``-7 // 2`` is ``-4``; this returns ``-3``.
    """
    quotient = abs(lhs) // abs(rhs)
    if (lhs < 0) != (rhs < 0):
        return -quotient
    return quotient


class Op(str, Enum):
    """
    Enumeration of supported operators.
    """

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Op":
        """
        Look up the operator written as ``symbol`` in source text.
        """
        return _BY_SYMBOL[symbol]

    @property
    def symbol(self) -> str:
        """
        The character the operator is written as.
        """
        return _SYMBOLS[self]

    def reduce(self, lhs: int, rhs: int) -> int:
        """
        Apply the operator's binary reducer.
        """
        match self:
            case Op.ADD:
                return lhs + rhs
            case Op.SUB:
                return lhs - rhs
            case Op.MUL:
                return lhs * rhs
            case Op.DIV:
                return truncating_div(lhs, rhs)
        raise ValueError(f"Unknown operator {self!r}")


_SYMBOLS = {
    Op.ADD: "+",
    Op.SUB: "-",
    Op.MUL: "*",
    Op.DIV: "/",
}
_BY_SYMBOL = {symbol: op for op, symbol in _SYMBOLS.items()}


__all__ = ["Op", "INT64_MIN", "INT64_MAX", "truncating_div"]
