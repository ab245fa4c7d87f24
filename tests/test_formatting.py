import math

import pytest

from lsqcalc.formatting import (
    MISSING,
    DisplayFormat,
    NumberFormatter,
    round_to_decimal_places,
    round_to_significant_digits,
    to_display_text,
)


def test_default_format_is_four_significant_figures():
    fmt = NumberFormatter()
    assert fmt.display_format == DisplayFormat("sig", 4)


def test_decimal_places_rounding():
    fmt = NumberFormatter(DisplayFormat("dec", 2))
    assert fmt.format(1234.56789) == 1234.57


def test_significant_figure_boundaries_keep_sign():
    fmt = NumberFormatter(DisplayFormat("sig", 3))
    assert fmt.format(0.0001234567) == 0.000123
    fmt.set_format("sig", 4)
    assert fmt.format(-98.7654321) == -98.77


@pytest.mark.parametrize("mode", ["sig", "dec"])
def test_zero_is_exact(mode):
    fmt = NumberFormatter(DisplayFormat(mode, 4))
    out = fmt.format(0)
    assert out == 0
    assert not isinstance(out, str)


@pytest.mark.parametrize("value", [None, math.nan, math.inf, -math.inf, "abc"])
def test_missing_values_render_sentinel(value):
    assert NumberFormatter().format(value) == MISSING


def test_half_away_from_zero():
    assert round_to_decimal_places(2.5, 0) == 3.0
    assert round_to_decimal_places(-2.5, 0) == -3.0
    assert round_to_decimal_places(1.005, 2) == 1.01
    assert round_to_decimal_places(0.125, 2) == 0.13
    assert round_to_significant_digits(0.00015, 1) == 0.0002
    assert round_to_significant_digits(-0.00015, 1) == -0.0002


def test_significant_figures_on_large_numbers():
    assert round_to_significant_digits(12345.0, 2) == 12000.0
    assert round_to_significant_digits(9.995, 3) == 10.0
    assert round_to_decimal_places(1e30, 4) == 1e30


def test_negative_zero_is_normalised():
    out = round_to_decimal_places(-0.0001, 2)
    assert out == 0.0
    assert math.copysign(1.0, out) == 1.0


def test_digit_override_applies_to_one_call():
    fmt = NumberFormatter(DisplayFormat("dec", 4))
    assert fmt.format(3.14159265, 6) == 3.141593
    assert fmt.format(3.14159265) == 3.1416


def test_invalid_override_falls_back_to_setting():
    fmt = NumberFormatter(DisplayFormat("sig", 3))
    assert fmt.format(3.14159, 0) == 3.14
    assert fmt.format(3.14159, math.nan) == 3.14


def test_set_format_ignores_invalid_parts_independently():
    fmt = NumberFormatter()
    fmt.set_format("bogus", 6)
    assert fmt.display_format == DisplayFormat("sig", 6)
    fmt.set_format("dec", 0)
    assert fmt.display_format == DisplayFormat("dec", 6)
    fmt.set_format(None, math.inf)
    assert fmt.display_format == DisplayFormat("dec", 6)
    fmt.set_format("significant-figures", 2.7)
    assert fmt.display_format == DisplayFormat("sig", 2)


def test_format_reads_new_setting_immediately():
    fmt = NumberFormatter(DisplayFormat("sig", 2))
    assert fmt.format(1.23456) == 1.2
    fmt.set_format("dec", 3)
    assert fmt.format(1.23456) == 1.235


def test_display_text():
    fmt = NumberFormatter()
    assert fmt.format_text(2.0) == "2"
    assert fmt.format_text(0.5) == "0.5"
    assert fmt.format_text(None) == MISSING
    assert to_display_text(math.inf) == MISSING


def test_display_format_canonicalizes_fields():
    assert DisplayFormat("decimal-places", 2.9) == DisplayFormat("dec", 2)


@pytest.mark.parametrize("mode,digits", [("bogus", 4), ("sig", 0), ("dec", math.nan), (None, 4)])
def test_display_format_rejects_invalid_fields(mode, digits):
    with pytest.raises(ValueError):
        DisplayFormat(mode, digits)
