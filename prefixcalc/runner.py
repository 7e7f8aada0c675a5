"""Line runner.

Runs one line of input through the tokenizer, the parser and the
interpreter, and records how far it got. Lines never share state, so a
failure on one line has no effect on the next.


File: runner.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import os
from dataclasses import dataclass
from typing import Iterable, Iterator

from prefixcalc.exceptions import EvalError, ExpressionSyntaxError, LexError
from prefixcalc.interpreter import Interpreter
from prefixcalc.lexer import Token, tokenize
from prefixcalc.nodes import Node, Sequence, format_expr
from prefixcalc.parser import Parser

CALC_ERRORS = (LexError, ExpressionSyntaxError, EvalError)


@dataclass
class LineResult:
    """Outcome of running a single line."""

    source: str
    value: int | None = None
    error: Exception | None = None
    tokens: list[Token] | None = None
    tree: Node | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def position(self) -> int | None:
        """Column of the failure, if the error recorded one."""
        return getattr(self.error, "position", None)

    def describe(self) -> str:
        """
        Render the result the way the driver prints it.
        """
        if self.error is not None:
            return f"{type(self.error).__name__}: {self.error}"
        return "" if self.value is None else str(self.value)


def debug_enabled() -> bool:
    """
    Return ``True`` when ``PREFIXCALC_DEBUG`` asks for the debug dump.
    """
    return os.environ.get('PREFIXCALC_DEBUG', '') not in ('', '0')


def format_tree(tree: Node) -> str:
    """
    Render a parsed line; the top-level sequence is shown without parentheses.
    """
    if isinstance(tree, Sequence):
        return " ".join(format_expr(item) for item in tree.items)
    return format_expr(tree)


def debug_print_tokens_ast(tokens, tree):
    """
    Print tokenized source and tree
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nTree:\n")
    print(repr(tree))
    print(format_tree(tree))
    print(" ")


def run_line(line: str, debug: bool = False) -> LineResult:
    """
    Tokenize, parse and evaluate one line.

    Parameters:
        line (str): The source line. A trailing newline is ignored.
        debug (bool): Dump tokens and tree before evaluating.

    Returns:
        LineResult: The value, or the error that stopped the pipeline.
    """
    source = line.rstrip('\r\n')
    result = LineResult(source)
    try:
        result.tokens = tokenize(source)
        result.tree = Parser(result.tokens).parse()
        if debug:
            debug_print_tokens_ast(result.tokens, result.tree)
        result.value = Interpreter().eval_expr(result.tree)
    except CALC_ERRORS as e:
        result.error = e
    return result


def run_lines(lines: Iterable[str], debug: bool = False) -> Iterator[tuple[int, LineResult]]:
    """
    Run every non-blank line independently.

    Yields:
        tuple[int, LineResult]: The 1-based line number and its result.
    """
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        yield lineno, run_line(line, debug)
