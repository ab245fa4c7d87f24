"""Format fit results for display: the line equation, the result panel and the
step-by-step derivation of the parameters and their standard errors.

All numbers pass through the session's :class:`NumberFormatter`; nothing here
computes a statistic that the regression module does not already provide,
apart from the intermediate terms shown in the derivation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from .formatting import MISSING, NumberFormatter, to_display_text
from .stats.regression import RegressionResult, SufficientStatistics

EQUATION_PLACEHOLDER = "y = ax + b"
EQUATION_DIGITS = 3
PARAMETER_DIGITS = 5
STD_ERR_DIGITS = 4


def format_equation(result: RegressionResult, formatter: NumberFormatter) -> str:
    """Return ``"y = ax + b"`` with the fitted values substituted.

    Args:
        result (RegressionResult): Current fit.
        formatter (NumberFormatter): Display policy; values use a 3-digit
            override.

    Returns:
        str: The equation, the placeholder ``"y = ax + b"`` when there is no
        fit yet, or the error message for a degenerate fit.

    Examples:
        A fit with slope 2 and intercept -0.5 renders as ``"y = 2x - 0.5"``.
    """
    if result.is_degenerate:
        return result.error_message
    if not result.has_fit:
        return EQUATION_PLACEHOLDER

    slope = formatter.format_text(result.slope, EQUATION_DIGITS)
    # Overflowed sums leave a non-finite intercept with no meaningful sign.
    if not math.isfinite(result.intercept):
        return f"y = {slope}x + {MISSING}"
    sign = "+" if result.intercept >= 0 else "-"
    intercept = formatter.format_text(abs(result.intercept), EQUATION_DIGITS)
    return f"y = {slope}x {sign} {intercept}"


@dataclass(frozen=True)
class ResultPanel:
    slope: str
    intercept: str
    std_err_slope: Optional[str]
    std_err_intercept: Optional[str]
    error_message: str = ""


def result_panel(result: RegressionResult, formatter: NumberFormatter) -> ResultPanel:
    """Slope and intercept at 5 digits, standard errors at 4 (None if undefined)."""

    def _se(value):
        if value is None:
            return None
        return f"± {formatter.format_text(value, STD_ERR_DIGITS)}"

    return ResultPanel(
        slope=formatter.format_text(result.slope, PARAMETER_DIGITS),
        intercept=formatter.format_text(result.intercept, PARAMETER_DIGITS),
        std_err_slope=_se(result.std_err_slope),
        std_err_intercept=_se(result.std_err_intercept),
        error_message=result.error_message,
    )


@dataclass(frozen=True)
class FormulaBreakdown:
    """Intermediate terms of the closed-form solution.

    Attributes:
        denominator: ``D = nΣx² − (Σx)²``.
        slope_numerator: ``nΣxy − ΣxΣy``.
        intercept_numerator: ``Σx²Σy − ΣxyΣx``.
        ve: Residual variance ``Σ(y − ax − b)² / (n − 2)``; 0 for ``n <= 2``.
        sxx: Corrected sum of squares of x, ``D / n``.
    """

    denominator: float
    slope_numerator: float
    intercept_numerator: float
    ve: float
    sxx: float


def formula_breakdown(
    stats: SufficientStatistics, residual_sum_of_squares: Optional[float] = None
) -> Optional[FormulaBreakdown]:
    """Return the derivation terms, or None when no data has been entered."""
    n = stats.n
    if not n:
        return None
    denominator = stats.denominator
    rss = residual_sum_of_squares
    ve = rss / (n - 2) if n > 2 and rss is not None else 0.0
    sxx = denominator / n if n > 0 else 0.0
    return FormulaBreakdown(
        denominator=denominator,
        slope_numerator=n * stats.sum_xy - stats.sum_x * stats.sum_y,
        intercept_numerator=stats.sum_x2 * stats.sum_y - stats.sum_xy * stats.sum_x,
        ve=ve,
        sxx=sxx,
    )


def formula_lines(
    stats: SufficientStatistics,
    result: RegressionResult,
    formatter: NumberFormatter,
) -> List[str]:
    """Render the step-by-step derivation as text lines.

    The error-propagation steps are only included when ``n > 2`` and the
    slope standard error is defined.
    """
    terms = formula_breakdown(stats, result.residual_sum_of_squares)
    if terms is None:
        return []

    f = formatter.format_text
    n = to_display_text(float(stats.n))
    d = f(terms.denominator)
    lines = [
        f"D = nΣx² - (Σx)² = {n} × {f(stats.sum_x2)} - ({f(stats.sum_x)})² = {d}",
        (
            f"a = (nΣxy - ΣxΣy) / D = ({n}×{f(stats.sum_xy)} - "
            f"{f(stats.sum_x)}×{f(stats.sum_y)}) / {d} = {f(result.slope)}"
        ),
        (
            f"b = (Σx²Σy - ΣxyΣx) / D = ({f(stats.sum_x2)}×{f(stats.sum_y)} - "
            f"{f(stats.sum_xy)}×{f(stats.sum_x)}) / {d} = {f(result.intercept)}"
        ),
    ]
    if stats.n > 2 and result.std_err_slope is not None:
        n_dof = to_display_text(float(stats.n - 2))
        ve = f(terms.ve)
        sxx = f(terms.sxx)
        lines += [
            f"Ve = Σ(Y - aX - b)² / (n - 2) = {f(result.residual_sum_of_squares)} / {n_dof} = {ve}",
            f"Sxx = D / n = {d} / {n} = {sxx}",
            f"Δa = √(Ve / Sxx) = √({ve} / {sxx}) = {f(result.std_err_slope)}",
            (
                f"Δb = √(Ve·Σx² / (n·Sxx)) = √({ve}×{f(stats.sum_x2)} / "
                f"({n}×{sxx})) = {f(result.std_err_intercept)}"
            ),
        ]
    return lines


def sample_panel(summary, formatter: NumberFormatter, digits: int) -> dict:
    """Display strings for a :class:`SampleSummary` using a fixed digit override."""
    return {
        "n": str(summary.n),
        "mean": formatter.format_text(summary.mean, digits),
        "sample_std_dev": formatter.format_text(summary.sample_std_dev, digits),
        "standard_error": formatter.format_text(summary.standard_error, digits),
    }
