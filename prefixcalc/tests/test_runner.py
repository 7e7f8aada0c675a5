"""Tests for the line runner."""

from prefixcalc.exceptions import DivideByZeroError, ExpressionSyntaxError, LexError
from prefixcalc.nodes import Operator
from prefixcalc.runner import debug_enabled, format_tree, run_line, run_lines


def test_run_line_success():
    result = run_line("(* (+ 1 2 3) 4 5)\n")
    assert result.ok
    assert result.value == 120
    assert result.source == "(* (+ 1 2 3) 4 5)"
    assert isinstance(result.tree.items[0], Operator)
    assert result.describe() == "120"


def test_run_line_stops_at_first_failing_stage():
    lex = run_line("(+ 1 x)")
    assert isinstance(lex.error, LexError)
    assert lex.tree is None

    syntax = run_line("(+ 1")
    assert isinstance(syntax.error, ExpressionSyntaxError)
    assert syntax.tokens is not None
    assert syntax.tree is None

    div = run_line("(/ 1 0)")
    assert isinstance(div.error, DivideByZeroError)
    assert div.value is None
    assert div.position == 6
    assert div.describe() == "DivideByZeroError: Division by zero in (/ 1 0) at column 6"


def test_no_value_describes_as_empty_string():
    result = run_line("")
    assert result.ok
    assert result.value is None
    assert result.describe() == ""


def test_failure_does_not_leak_into_next_line():
    lines = ["(/ 1 0)", "", "(+ 1 2)", "(+ 1", "7"]
    results = list(run_lines(lines))
    assert [lineno for lineno, _ in results] == [1, 3, 4, 5]
    assert [r.ok for _, r in results] == [False, True, False, True]
    assert [r.value for _, r in results] == [None, 3, None, 7]


def test_debug_dump(capsys):
    run_line("(+ 1 (* 2 3))", debug=True)
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "Tree:" in out
    assert "(+ 1 (* 2 3))" in out


def test_debug_dump_is_skipped_on_lex_error(capsys):
    run_line("(+ 1 x)", debug=True)
    assert capsys.readouterr().out == ""


def test_debug_enabled_reads_environment(monkeypatch):
    monkeypatch.delenv("PREFIXCALC_DEBUG", raising=False)
    assert not debug_enabled()
    monkeypatch.setenv("PREFIXCALC_DEBUG", "0")
    assert not debug_enabled()
    monkeypatch.setenv("PREFIXCALC_DEBUG", "1")
    assert debug_enabled()


def test_format_tree_top_level():
    assert format_tree(run_line("1 (- 2 3)").tree) == "1 (- 2 3)"
    assert format_tree(run_line("+ 1 2").tree) == "(+ 1 2)"
