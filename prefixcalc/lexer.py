"""Lexer for prefix arithmetic expressions.

This lexer performs a single pass over one line of input using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type, value, source text and column.

Only ASCII spaces separate tokens. Numbers are runs of ASCII digits; the
operators are ``+ - * /`` and the delimiters are ``(`` and ``)``. Anything
else is rejected with :class:`LexError`. The token list always ends with a
single ``EOF`` token.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import re
from dataclasses import dataclass
from typing import Any

from prefixcalc.exceptions import LexError
from prefixcalc.operations import INT64_MAX

TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Literals
    ('NUMBER',    r'[0-9]+'),

    # Operators
    ('OPERATOR',  r'[+\-*/]'),

    # Delimiters
    ('LPAREN',    r'\('),
    ('RPAREN',    r'\)'),

    # Miscellaneous
    ('SKIP',      r' +'),
    ('MISMATCH',  r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION),
    re.DOTALL,
)


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Attributes:
        type (str): One of ``NUMBER``, ``OPERATOR``, ``LPAREN``, ``RPAREN``
            or ``EOF``.
        value (Any): The integer payload of a ``NUMBER``, otherwise the
            literal character (``None`` for ``EOF``).
        text (str): The source text the token was read from.
        position (int): 1-based column of the token's first character.
    """
    type: str
    value: Any
    text: str
    position: int

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, col={self.position})"


def tokenize(code: str) -> list[Token]:
    """
    Convert a line of source text into a list of tokens.

    Parameters:
        code (str): The source text to tokenize.

    Returns:
        list[Token]: A list of Token instances terminated by ``EOF``.

    Raises:
        LexError: If an unexpected character is encountered, or a number
            literal does not fit in a signed 64-bit integer.
    """
    tokens = []

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        text = match_obj.group()
        column = match_obj.start() + 1

        if kind == 'SKIP':
            continue
        if kind == 'MISMATCH':
            raise LexError(f"Unexpected character {text!r}", column)

        if kind == 'NUMBER':
            # Very long digit runs would trip int()'s string-length limit
            digits = text.lstrip('0') or '0'
            if len(digits) > len(str(INT64_MAX)) or int(digits) > INT64_MAX:
                raise LexError(f"Integer literal {text} out of range", column)
            value = int(digits)
            tokens.append(Token('NUMBER', value, text, column))
        else:
            tokens.append(Token(kind, text, text, column))

    tokens.append(Token('EOF', None, '', len(code) + 1))
    return tokens
