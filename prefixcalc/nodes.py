"""Expression tree node types.

The parser produces a tree of the frozen dataclasses below and the
interpreter dispatches on them with ``match``. Every node records the
column of the token that opened it; the column is excluded from equality so
that structurally identical trees compare equal.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from prefixcalc.operations import Op


@dataclass(frozen=True)
class Number:
    """An integer literal."""

    value: int
    position: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Empty:
    """The ``()`` form. Evaluates to no value."""

    position: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Symbol:
    """An operator atom that does not head its list."""

    op: Op
    position: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Operator:
    """An operator applied to its operands, left to right."""

    op: Op
    operands: tuple[Node, ...] = ()
    position: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Sequence:
    """A list of atoms not headed by an operator, including the top level."""

    items: tuple[Node, ...] = ()
    position: int = field(default=0, compare=False)


Node = Union[Number, Empty, Symbol, Operator, Sequence]


def format_expr(node: Node) -> str:
    """
    Convert a tree back to prefix notation for debugging and messages.

    Args:
        node (Node): The node to render.

    Returns:
        str: A string such as ``(+ 1 (* 2 3))``.
    """
    match node:
        case Number(value=value):
            return str(value)
        case Empty():
            return "()"
        case Symbol(op=op):
            return op.symbol
        case Operator(op=op, operands=operands):
            return "(" + " ".join([op.symbol, *(format_expr(o) for o in operands)]) + ")"
        case Sequence(items=items):
            return "(" + " ".join(format_expr(i) for i in items) + ")"
        case _:
            raise TypeError(f"Not an expression node: {node!r}")


__all__ = ["Number", "Empty", "Symbol", "Operator", "Sequence", "Node", "format_expr"]
