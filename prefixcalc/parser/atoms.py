"""Atom parsing utilities.

These functions operate on a `prefixcalc.parser.parser.Parser` instance and
implement the grammar:

    expr := atom*
    atom := NUMBER | OPERATOR | '(' expr ')'

Any sequence of atoms is accepted. Operator arity and operand types are left
to the interpreter.


File: atoms.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from prefixcalc.exceptions import ExpressionSyntaxError
from prefixcalc.nodes import Empty, Node, Number, Operator, Sequence, Symbol
from prefixcalc.operations import Op

if TYPE_CHECKING:
    from prefixcalc.parser import Parser


def _make_list(items: list[Node], position: int) -> Node:
    """
    Build the node for a non-empty list of sibling atoms.

    A list headed by a bare operator becomes an `Operator` over the rest;
    anything else stays a `Sequence`.
    """
    if items and isinstance(items[0], Symbol):
        head = items[0]
        return Operator(head.op, tuple(items[1:]), position)
    return Sequence(tuple(items), position)


def parse_atom(parser: 'Parser') -> Node:
    """
    Parse a single atom.

    Syntax:
        <number> | <operator> | ( <atom>* )

    Args:
        parser: The parser instance.

    Returns:
        Node: `Number`, `Symbol`, or the node of a parenthesized list.
    """
    tok = parser.curr_token
    if tok.type == 'NUMBER':
        parser.eat('NUMBER')
        return Number(tok.value, tok.position)
    if tok.type == 'OPERATOR':
        parser.eat('OPERATOR')
        return Symbol(Op.from_symbol(tok.value), tok.position)
    if tok.type == 'LPAREN':
        return parser.group()
    raise ExpressionSyntaxError(
        f"Unexpected token {tok.text or 'end of input'!r}", tok.position
    )


def parse_atom_list(parser: 'Parser') -> list[Node]:
    """
    Parse sibling atoms until a closing parenthesis or the end of input.

    The terminating token is left for the caller to consume.

    Args:
        parser: The parser instance.

    Returns:
        list: The atoms in source order.
    """
    items = []
    while parser.curr_token.type not in ('RPAREN', 'EOF'):
        items.append(parser.atom())
    return items


def parse_group(parser: 'Parser') -> Node:
    """
    Parse a parenthesized list.

    Syntax:
        ( <atom>* )

    Args:
        parser: The parser instance.

    Returns:
        Node: `Empty` for ``()``, otherwise an `Operator` or `Sequence`.

    Raises:
        ExpressionSyntaxError: If the input ends before the matching ``)``.
    """
    open_tok = parser.eat('LPAREN')
    if parser.curr_token.type == 'RPAREN':
        parser.eat('RPAREN')
        return Empty(open_tok.position)

    if parser.depth >= parser.max_depth:
        raise ExpressionSyntaxError(
            f"Expression nested deeper than {parser.max_depth} levels",
            open_tok.position,
        )
    parser.depth += 1
    try:
        items = parser.atom_list()
    finally:
        parser.depth -= 1
    if parser.curr_token.type == 'EOF':
        raise ExpressionSyntaxError("Unmatched '('", open_tok.position)
    parser.eat('RPAREN')
    return _make_list(items, open_tok.position)


def parse_top_level(parser: 'Parser') -> Node:
    """
    Parse a whole line: atoms with no enclosing parentheses, then ``EOF``.

    Args:
        parser: The parser instance.

    Returns:
        Node: An empty `Sequence` for blank input, otherwise the list node.

    Raises:
        ExpressionSyntaxError: If a ``)`` has no matching ``(``.
    """
    start = parser.curr_token.position
    items = parser.atom_list()
    if parser.curr_token.type == 'RPAREN':
        raise ExpressionSyntaxError("Unmatched ')'", parser.curr_token.position)
    parser.eat('EOF')
    if not items:
        return Sequence((), start)
    return _make_list(items, start)
