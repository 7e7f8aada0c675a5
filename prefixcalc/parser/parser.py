"""
Main parser entry point.

This module defines the `Parser` class, which holds the token cursor for
the recursive descent. The grammar routines themselves live in
`prefixcalc.parser.atoms`.
"""

from prefixcalc.exceptions import ExpressionSyntaxError
from prefixcalc.lexer import Token
from prefixcalc.nodes import Node

from . import atoms as _atoms


MAX_DEPTH = 128


class Parser:
    """Prefix expression parser."""

    def __init__(self, tokens: list[Token], max_depth: int = MAX_DEPTH):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with ``EOF``.
            max_depth (int): Deepest parenthesis nesting accepted. Keeps the
                recursive descent and the interpreter below Python's
                recursion limit.
        """
        if not tokens or tokens[-1].type != 'EOF':
            raise ValueError("Token list must end with an EOF token")
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.depth = 0
        self.max_depth = max_depth

    def eat(self, token_type: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.

        Returns:
            Token: The consumed token.

        Raises:
            ExpressionSyntaxError: If the token does not match the expected type.
        """
        tok = self.curr_token
        if tok.type != token_type:
            raise ExpressionSyntaxError(
                f"Expected token of type {token_type}, "
                f"but got {tok.text or 'end of input'!r} of type {tok.type}",
                tok.position,
            )
        if tok.type != 'EOF':
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return tok

    def atom(self) -> Node:
        """
        Parse a single atom: a number, an operator or a parenthesized list.
        """
        return _atoms.parse_atom(self)

    def group(self) -> Node:
        """
        Parse a parenthesized list of atoms.
        """
        return _atoms.parse_group(self)

    def atom_list(self) -> list[Node]:
        """
        Parse sibling atoms up to the closing parenthesis or end of input.
        """
        return _atoms.parse_atom_list(self)

    def parse(self) -> Node:
        """
        Parse the whole token list.

        Returns:
            Node: The top-level node of the line.
        """
        return _atoms.parse_top_level(self)


def parse(tokens: list[Token]) -> Node:
    """
    Parse ``tokens`` into an expression tree.

    Raises:
        ExpressionSyntaxError: On unbalanced parentheses.
    """
    return Parser(tokens).parse()
