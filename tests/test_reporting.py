"""Tests for equation, result-panel and derivation formatting."""

import math

import pytest

from lsqcalc.formatting import DisplayFormat, NumberFormatter
from lsqcalc.reporting import (
    EQUATION_PLACEHOLDER,
    format_equation,
    formula_breakdown,
    formula_lines,
    result_panel,
    sample_panel,
)
from lsqcalc.session import MODE_STATS, RegressionSession
from lsqcalc.stats.regression import RegressionResult, SufficientStatistics, fit_points
from lsqcalc.stats.sample import summarize


@pytest.fixture
def formatter():
    return NumberFormatter(DisplayFormat("sig", 4))


def test_equation_placeholder_and_error(formatter, make_points):
    assert format_equation(fit_points(()), formatter) == EQUATION_PLACEHOLDER
    degenerate = fit_points(make_points([(1, 1), (1, 5)]))
    assert format_equation(degenerate, formatter) == degenerate.error_message


def test_equation_signs(formatter, make_points):
    res = fit_points(make_points([(1, 2), (2, 4), (3, 6)]))
    assert format_equation(res, formatter) == "y = 2x + 0"
    res = fit_points(make_points([(0, -0.5), (1, 1.5), (2, 3.5)]))
    assert format_equation(res, formatter) == "y = 2x - 0.5"


def test_equation_with_overflowed_sums(formatter):
    session = RegressionSession(formatter=formatter)
    for x in (1, 2, 3):
        session.add_point(x, 1e308)
    assert format_equation(session.result, formatter) == "y = ---x + ---"

    manual = RegressionSession(formatter=formatter, mode=MODE_STATS)
    manual.set_manual_statistics(n="3", sum_x="6", sum_y="12", sum_x2="14", sum_xy="1e308")
    assert format_equation(manual.result, formatter) == "y = ---x + ---"

    assert format_equation(RegressionResult(slope=1.0, intercept=math.nan), formatter) == "y = 1x + ---"


def test_equation_uses_three_digit_override(formatter, make_points):
    res = fit_points(make_points([(0, 0), (3, 1)]))
    assert format_equation(res, formatter) == "y = 0.333x + 0"


def test_result_panel(formatter, make_points):
    panel = result_panel(fit_points(make_points([(1, 2), (2, 4), (3, 6)])), formatter)
    assert panel.slope == "2"
    assert panel.intercept == "0"
    assert panel.std_err_slope == "± 0"

    two = result_panel(fit_points(make_points([(0, 1), (1, 3)])), formatter)
    assert two.std_err_slope is None
    assert two.std_err_intercept is None

    empty = result_panel(fit_points(()), formatter)
    assert empty.slope == "---"


def test_formula_breakdown_terms():
    stats = SufficientStatistics(n=3, sum_x=6.0, sum_y=12.0, sum_x2=14.0, sum_xy=28.0)
    terms = formula_breakdown(stats, 0.5)
    assert terms.denominator == 6.0
    assert terms.slope_numerator == 12.0
    assert terms.intercept_numerator == 0.0
    assert terms.ve == 0.5
    assert terms.sxx == 2.0
    assert formula_breakdown(SufficientStatistics()) is None


def test_formula_lines(formatter, make_points):
    points = make_points([(1, 2), (2, 4), (3, 6)])
    stats = SufficientStatistics.from_points(points)
    lines = formula_lines(stats, fit_points(points), formatter)
    assert len(lines) == 7
    assert lines[0] == "D = nΣx² - (Σx)² = 3 × 14 - (6)² = 6"
    assert lines[1].endswith("= 2")
    assert lines[4] == "Sxx = D / n = 6 / 3 = 2"

    two = make_points([(0, 1), (1, 3)])
    assert len(formula_lines(SufficientStatistics.from_points(two), fit_points(two), formatter)) == 3
    assert formula_lines(SufficientStatistics(), fit_points(()), formatter) == []


def test_sample_panel_uses_override(formatter):
    panel = sample_panel(summarize([1.0, 2.0, 2.0]), formatter, 6)
    assert panel["n"] == "3"
    assert panel["mean"] == "1.66667"
    assert sample_panel(summarize([]), formatter, 6)["mean"] == "---"
