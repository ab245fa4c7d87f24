"""
A Python package for least-squares straight-line fitting with standard errors.

Fits y = ax + b from a point set or from directly entered sums, reports the
standard errors of a and b, and formats every number under one shared
significant-figure / decimal-place display policy. A companion calculator
gives the mean, sample standard deviation and standard error of the mean for
several named groups of values.

Modules:
    - formatting: Display-precision policy and rounding.
    - stats: Regression and sample statistics.
    - history: Snapshot undo/redo for the point set.
    - table: Per-point calculation table and delimited exports.
    - session: Interactive regression session (points, manual sums, history).
    - datasets: Named groups of values for the standard-error calculator.
    - reporting: Equation text, result panel and formula derivation.
    - axes: Plot domain and axis ticks.
    - settings: Persisted display-format preference.
    - output: CSV file exports.
"""

__version__ = "1.0.0"

from .datasets import SampleDataset, SampleValue, SampleWorkbook
from .formatting import DisplayFormat, NumberFormatter
from .history import HistoryLog
from .parsing import parse_float, parse_points
from .points import Point
from .session import ManualStatistics, RegressionSession
from .stats import (
    RegressionResult,
    SampleSummary,
    SufficientStatistics,
    fit,
    fit_points,
    summarize,
)
from .table import DerivedTable, derive_table, points_to_text, table_to_text

__all__ = [
    # Formatting
    "DisplayFormat",
    "NumberFormatter",
    # Statistics
    "RegressionResult",
    "SufficientStatistics",
    "SampleSummary",
    "fit",
    "fit_points",
    "summarize",
    # Session state
    "Point",
    "HistoryLog",
    "ManualStatistics",
    "RegressionSession",
    "SampleDataset",
    "SampleValue",
    "SampleWorkbook",
    # Parsing and tables
    "parse_float",
    "parse_points",
    "DerivedTable",
    "derive_table",
    "points_to_text",
    "table_to_text",
]
