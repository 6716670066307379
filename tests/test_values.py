import math

import pytest

from wq_visualizer.values import (
    friendly_name, is_blank, label_text, round_half_away, to_number,
)


@pytest.mark.parametrize("value, expected", [
    (7, 7.0),
    (7.5, 7.5),
    ("7.5", 7.5),
    (" -0.25 ", -0.25),
    ("1e-3", 0.001),
])
def test_to_number_accepts_finite_numbers(value, expected):
    assert to_number(value) == pytest.approx(expected)


@pytest.mark.parametrize("value", [
    None, "", "   ", "abc", "1_000", "0x10", "inf", "nan",
    math.inf, math.nan, True, False, [1],
])
def test_to_number_rejects(value):
    assert to_number(value) is None


def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert not is_blank(0)
    assert not is_blank(" x")


@pytest.mark.parametrize("value, expected", [
    (None, ""),
    (7, "7"),
    (7.0, "7"),
    (7.25, "7.25"),
    ("2024-01-01", "2024-01-01"),
])
def test_label_text(value, expected):
    assert label_text(value) == expected


@pytest.mark.parametrize("column, expected", [
    ("Dissolved_Oxygen_mg_L", "Dissolved Oxygen mg L"),
    ("pH", "p H"),
    ("siteName", "site Name"),
    ("Date", "Date"),
])
def test_friendly_name(column, expected):
    assert friendly_name(column) == expected


@pytest.mark.parametrize("value, ndigits, expected", [
    (0.125, 2, 0.13),
    (-0.125, 2, -0.13),
    (2.5, 0, 3.0),
    (7.1234, 2, 7.12),
    (0.0, 2, 0.0),
])
def test_round_half_away(value, ndigits, expected):
    assert round_half_away(value, ndigits) == expected
