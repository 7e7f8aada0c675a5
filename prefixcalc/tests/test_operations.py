"""Tests for operator definitions."""

import pytest

from prefixcalc.operations import Op, truncating_div


def test_symbols_round_trip():
    for op in Op:
        assert Op.from_symbol(op.symbol) is op


def test_unknown_symbol():
    with pytest.raises(KeyError):
        Op.from_symbol("%")


@pytest.mark.parametrize("lhs, rhs, expected", [
    (7, 2, 3),
    (-7, 2, -3),
    (7, -2, -3),
    (-7, -2, 3),
    (6, 3, 2),
    (0, -5, 0),
])
def test_truncating_div(lhs, rhs, expected):
    assert truncating_div(lhs, rhs) == expected


def test_reducers():
    assert Op.ADD.reduce(2, 3) == 5
    assert Op.SUB.reduce(2, 3) == -1
    assert Op.MUL.reduce(2, 3) == 6
    assert Op.DIV.reduce(-9, 2) == -4
