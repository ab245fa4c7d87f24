"""Least-squares straight-line fitting from sufficient statistics.

This module supports:
- recomputing the five regression sums from a point set in one full pass,
- the closed-form slope/intercept solution, and
- standard errors of slope and intercept from the residual variance.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from ..points import Point, as_arrays

logger = logging.getLogger(__name__)

DEGENERATE_FIT_MESSAGE = "denominator is zero (X has no variance)"


@dataclass(frozen=True)
class SufficientStatistics:
    """The aggregate sums that fully determine a least-squares line.

    Attributes:
        n: Number of observations.
        sum_x: Σx.
        sum_y: Σy.
        sum_x2: Σx².
        sum_xy: Σxy.
    """

    n: float = 0
    sum_x: float = 0.0
    sum_y: float = 0.0
    sum_x2: float = 0.0
    sum_xy: float = 0.0

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> "SufficientStatistics":
        """Compute the sums with a single full pass over ``points``.

        The sums are rebuilt from scratch on every call; running totals that
        are patched on add/delete drift after edits.
        """
        if not points:
            return cls()
        x, y = as_arrays(points)
        return cls(
            n=int(len(x)),
            sum_x=float(np.sum(x)),
            sum_y=float(np.sum(y)),
            sum_x2=float(np.sum(x * x)),
            sum_xy=float(np.sum(x * y)),
        )

    @property
    def denominator(self) -> float:
        """``D = nΣx² − (Σx)²``."""
        return self.n * self.sum_x2 - self.sum_x * self.sum_x


@dataclass(frozen=True)
class RegressionResult:
    """Fitted line parameters for ``y = slope·x + intercept``.

    All numeric fields are None when there is nothing to fit yet or when the
    fit is degenerate; only the latter sets ``error_message``.
    """

    slope: Optional[float] = None
    intercept: Optional[float] = None
    std_err_slope: Optional[float] = None
    std_err_intercept: Optional[float] = None
    residual_sum_of_squares: Optional[float] = None
    error_message: str = ""

    @property
    def has_fit(self) -> bool:
        return self.slope is not None and self.intercept is not None

    @property
    def is_degenerate(self) -> bool:
        return bool(self.error_message)

    def predict(self, x: float) -> Optional[float]:
        if not self.has_fit:
            return None
        return self.slope * float(x) + self.intercept


EMPTY_RESULT = RegressionResult()


def sum_squared_residuals(
    points: Sequence[Point], slope: float, intercept: float
) -> float:
    """Return ``Σ(yᵢ − (slope·xᵢ + intercept))²`` over ``points``."""
    if not points:
        return 0.0
    x, y = as_arrays(points)
    resid = y - (slope * x + intercept)
    return float(np.sum(resid**2))


def _is_finite(value) -> bool:
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False


def fit(
    n,
    sum_x,
    sum_y,
    sum_x2,
    sum_xy,
    residual_sum_of_squares: Optional[float] = None,
    points: Optional[Sequence[Point]] = None,
) -> RegressionResult:
    """Solve the least-squares line from its sufficient statistics.

    Args:
        n: Number of observations. None, zero or non-finite means "nothing
            entered yet".
        sum_x, sum_y, sum_x2, sum_xy: Σx, Σy, Σx², Σxy. None means unset.
        residual_sum_of_squares (float, optional): Residual sum of
            squares to use when ``points`` is not given (manual statistics).
            Defaults to ``0.0`` when omitted.
        points (Sequence[Point], optional): The point set the sums came from.
            When given, the residual sum of squares is recomputed from these
            points with the fitted line.

    Returns:
        RegressionResult: Slope, intercept, their standard errors and the
        residual sum of squares. Standard errors are only computed for
        ``n > 2``.

    Note:
        Never raises for numeric input. A zero or non-finite denominator is
        reported through ``error_message``.
    """
    required = (n, sum_x, sum_y, sum_x2, sum_xy)
    if any(v is None for v in required):
        return EMPTY_RESULT
    if not _is_finite(n) or float(n) == 0:
        return EMPTY_RESULT

    n = float(n)
    sum_x, sum_y, sum_x2, sum_xy = (float(v) for v in (sum_x, sum_y, sum_x2, sum_xy))

    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0 or not math.isfinite(denominator):
        logger.debug("Degenerate fit: denominator=%r", denominator)
        return RegressionResult(error_message=DEGENERATE_FIT_MESSAGE)

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_x2 * sum_y - sum_xy * sum_x) / denominator

    if points is not None:
        sse = sum_squared_residuals(points, slope, intercept)
    elif residual_sum_of_squares is not None:
        sse = float(residual_sum_of_squares)
    else:
        sse = 0.0

    se_slope = None
    se_intercept = None
    if n > 2:
        ve = sse / (n - 2)
        sxx = denominator / n
        if sxx > 0 and ve >= 0:
            se_slope = float(np.sqrt(ve / sxx))
            se_intercept = float(np.sqrt(ve * sum_x2 / (n * sxx)))

    return RegressionResult(
        slope=float(slope),
        intercept=float(intercept),
        std_err_slope=se_slope,
        std_err_intercept=se_intercept,
        residual_sum_of_squares=sse,
    )


def fit_statistics(
    stats: SufficientStatistics,
    residual_sum_of_squares: Optional[float] = None,
    points: Optional[Sequence[Point]] = None,
) -> RegressionResult:
    return fit(
        stats.n,
        stats.sum_x,
        stats.sum_y,
        stats.sum_x2,
        stats.sum_xy,
        residual_sum_of_squares,
        points=points,
    )


def fit_points(points: Sequence[Point]) -> RegressionResult:
    """Fit a line to ``points``, recomputing sums and residuals from scratch."""
    stats = SufficientStatistics.from_points(points)
    return fit_statistics(stats, points=points)
