"""
Statistical routines for the least-squares calculator.

All functions operate on plain floats, numpy arrays or point records; no
display or session logic is included.

Modules:
    regression:
        Sufficient statistics of a point set, the closed-form least-squares
        line and the standard errors of its slope and intercept.

    sample:
        Mean, Bessel-corrected standard deviation and standard error of the
        mean for one group of observations.
"""

from .regression import (
    DEGENERATE_FIT_MESSAGE,
    RegressionResult,
    SufficientStatistics,
    fit,
    fit_points,
    fit_statistics,
    sum_squared_residuals,
)
from .sample import SampleSummary, summarize

__all__ = [
    "DEGENERATE_FIT_MESSAGE",
    "RegressionResult",
    "SufficientStatistics",
    "fit",
    "fit_points",
    "fit_statistics",
    "sum_squared_residuals",
    "SampleSummary",
    "summarize",
]
