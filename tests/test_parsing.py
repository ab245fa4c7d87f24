import math

import pytest

from lsqcalc.parsing import parse_float, parse_points


@pytest.mark.parametrize(
    "text,expected",
    [("3.5", 3.5), (" -2 ", -2.0), ("1e3", 1000.0), (4, 4.0)],
)
def test_parse_float_numbers(text, expected):
    assert parse_float(text) == expected


@pytest.mark.parametrize(
    "text", [None, "", "   ", "abc", "nan", "1,5", "1_000", "inf", "-Infinity", math.inf]
)
def test_parse_float_unset(text):
    assert parse_float(text) is None


def test_parse_points_mixed_delimiters():
    text = "1 2\r\n3,4\n5\t6\n\nfoo bar\n7\n8 nan\n9 inf\n10, 11, 12\n"
    assert parse_points(text) == [(1.0, 2.0), (3.0, 4.0), (5.0, 6.0), (10.0, 11.0)]


def test_parse_points_empty():
    assert parse_points("") == []
    assert parse_points("   \n  ") == []
