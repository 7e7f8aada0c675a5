"""Interpreter.

This is a tree-walk interpreter for evaluating expression trees produced by
the parser.

1. Execution Model
The interpreter evaluates a tree in a top-down, recursive manner. Every
node is dispatched through `eval_expr()`, which matches on the node class.
Nothing is kept between calls; one instance can evaluate any number of
trees.

2. Operators
An operator folds its operands left to right: the first operand becomes the
accumulator and each later operand is combined into it with the operator's
reducer, so ``(- 10 3 2)`` is ``(10 - 3) - 2``. Operands are evaluated one
at a time, so a zero divisor stops evaluation before the operands to its
right are visited.

3. Values
Evaluation yields an ``int`` or ``None`` ("no value", produced by ``()``
and by an empty line). ``None`` may be the final result of a line but an
operator may never consume it.

4. Error Handling
Runtime errors are surfaced as `EvalError` subclasses carrying the column
of the node that failed: `DivideByZeroError`, `ArityMismatchError`,
`TypeMismatchError` and `IntegerOverflowError`.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from prefixcalc.exceptions import (
    ArityMismatchError,
    DivideByZeroError,
    IntegerOverflowError,
    TypeMismatchError,
)
from prefixcalc.nodes import (
    Empty,
    Node,
    Number,
    Operator,
    Sequence,
    Symbol,
    format_expr,
)
from prefixcalc.operations import INT64_MAX, INT64_MIN, Op


class Interpreter:
    """Tree-walk interpreter for prefix arithmetic."""

    def eval_expr(self, node: Node) -> int | None:
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            node (Node): An expression node produced by the parser.

        Returns:
            int | None: The value, or ``None`` when the node has no value.

        Raises:
            ArityMismatchError: If an operator has fewer than two operands.
            DivideByZeroError: If a divisor evaluates to zero.
            TypeMismatchError: If a non-number is used where a number is required.
            IntegerOverflowError: If a result leaves the signed 64-bit range.
        """
        match node:
            case Number(value=value):
                return value
            case Empty():
                return None
            case Symbol(op=op, position=position):
                raise TypeMismatchError(
                    f"Operator '{op.symbol}' used where a number is required",
                    position,
                )
            case Sequence(items=items):
                result = None
                for item in items:
                    result = self.eval_expr(item)
                return result
            case Operator():
                return self.apply(node)
            case _:
                raise TypeError(f"Not an expression node: {node!r}")

    def apply(self, node: Operator) -> int:
        """
        Fold an operator across its operands, left to right.

        Parameters:
            node (Operator): The operator node to apply.

        Returns:
            int: The reduced value.
        """
        op = node.op
        arity = sum(1 for operand in node.operands if not isinstance(operand, Empty))
        if arity < 2:
            raise ArityMismatchError(op, arity, node.position)

        acc = None
        for index, operand in enumerate(node.operands):
            value = self.eval_expr(operand)
            if value is None:
                raise TypeMismatchError(
                    f"Operand {index + 1} of '{op.symbol}' has no value: "
                    f"{format_expr(operand)}",
                    operand.position,
                )
            if acc is None:
                acc = value
                continue
            if op is Op.DIV and value == 0:
                raise DivideByZeroError(format_expr(node), operand.position)
            acc = op.reduce(acc, value)
            if not INT64_MIN <= acc <= INT64_MAX:
                raise IntegerOverflowError(format_expr(node), node.position)
        return acc


def evaluate(node: Node) -> int | None:
    """
    Evaluate ``node`` with a fresh interpreter.
    """
    return Interpreter().eval_expr(node)
