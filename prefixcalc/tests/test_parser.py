"""Tests for the parser."""

import pytest

from prefixcalc.exceptions import ExpressionSyntaxError
from prefixcalc.lexer import tokenize
from prefixcalc.nodes import Empty, Number, Operator, Sequence, Symbol, format_expr
from prefixcalc.operations import Op
from prefixcalc.parser import Parser, parse

from prefixcalc.tests.utils import parse_source


def test_nested_operator_tree():
    tree = parse_source("(* (+ 1 2 3) 4 5)")
    assert tree == Sequence((
        Operator(Op.MUL, (
            Operator(Op.ADD, (Number(1), Number(2), Number(3))),
            Number(4),
            Number(5),
        )),
    ))


def test_positions_point_at_opening_tokens():
    expr = parse_source("(+ 1 (- 2 3))").items[0]
    assert expr.position == 1
    assert expr.operands[0].position == 4
    assert expr.operands[1].position == 6


def test_empty_input_is_empty_sequence():
    assert parse_source("") == Sequence(())


def test_single_number():
    assert parse_source("42") == Sequence((Number(42),))


def test_empty_parens_parse_to_empty():
    assert parse_source("()") == Sequence((Empty(),))
    assert parse_source("(+ 1 ())") == Sequence((Operator(Op.ADD, (Number(1), Empty())),))


def test_arity_is_not_checked_when_parsing():
    assert parse_source("(+)") == Sequence((Operator(Op.ADD, ()),))
    assert parse_source("(- 1)") == Sequence((Operator(Op.SUB, (Number(1),)),))


def test_operator_not_at_head_is_a_symbol():
    tree = parse_source("(1 + 2)")
    assert tree == Sequence((Sequence((Number(1), Symbol(Op.ADD), Number(2))),))


def test_top_level_operator_list():
    assert parse_source("+ 1 2") == Operator(Op.ADD, (Number(1), Number(2)))


def test_unmatched_open_paren():
    with pytest.raises(ExpressionSyntaxError, match="Unmatched '\\('") as excinfo:
        parse_source("(+ 1")
    assert excinfo.value.position == 1
    with pytest.raises(ExpressionSyntaxError):
        parse_source("(+ 1 (* 2 3)")
    with pytest.raises(ExpressionSyntaxError):
        parse_source("(")


def test_unmatched_close_paren():
    with pytest.raises(ExpressionSyntaxError, match="Unmatched '\\)'"):
        parse_source("(+ 1 2))")


def test_syntax_error_is_a_builtin_syntax_error():
    with pytest.raises(SyntaxError):
        parse_source(")")


def test_nesting_limit():
    deep = "(+ 1 " * 10 + "1" + ")" * 10
    with pytest.raises(ExpressionSyntaxError, match="nested deeper"):
        Parser(tokenize(deep), max_depth=5).parse()
    assert Parser(tokenize(deep), max_depth=10).parse()


def test_parser_requires_eof_token():
    with pytest.raises(ValueError):
        Parser(tokenize("1")[:-1])


def test_reparsing_gives_identical_trees():
    source = "(+ 1 (/ 8 2 2) (- 3) ())"
    first = parse(tokenize(source))
    second = parse(tokenize(source))
    assert first == second
    assert first is not second


def test_format_expr_round_trips_text():
    source = "(* (+ 1 2 3) () (- 4 5))"
    assert format_expr(parse_source(source).items[0]) == source
