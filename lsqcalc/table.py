"""Derive the per-point calculation table and its delimited-text exports.

The table is a pure function of the point set and the fitted line. CSV
downloads and clipboard text are plain serializations of the same rows plus
a trailing ``Sum`` row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .points import Point, as_arrays
from .schema import COLUMNS, POINT_COLUMNS

DELIMITERS = {",": "csv", "\t": "clipboard"}


@dataclass(frozen=True)
class TableRow:
    no: int
    x: float
    y: float
    x2: float
    xy: float
    residual_sq: Optional[float]


@dataclass(frozen=True)
class TableTotals:
    x: float = 0.0
    y: float = 0.0
    x2: float = 0.0
    xy: float = 0.0
    residual_sq: Optional[float] = None


@dataclass(frozen=True)
class DerivedTable:
    rows: Tuple[TableRow, ...]
    totals: TableTotals

    def __len__(self) -> int:
        return len(self.rows)

    def to_dataframe(self) -> pd.DataFrame:
        """Return the rows plus the aggregate row as a DataFrame.

        Returns:
            pandas.DataFrame: Columns ``No, X, Y, X^2, XY, (Y-aX-b)^2``; the
            last row is labelled ``Sum`` in the ``No`` column.
        """
        records: List[dict] = [
            {
                COLUMNS.no: r.no,
                COLUMNS.x: r.x,
                COLUMNS.y: r.y,
                COLUMNS.x2: r.x2,
                COLUMNS.xy: r.xy,
                COLUMNS.residual_sq: r.residual_sq,
            }
            for r in self.rows
        ]
        t = self.totals
        records.append(
            {
                COLUMNS.no: COLUMNS.total_label,
                COLUMNS.x: t.x,
                COLUMNS.y: t.y,
                COLUMNS.x2: t.x2,
                COLUMNS.xy: t.xy,
                COLUMNS.residual_sq: t.residual_sq,
            }
        )
        return pd.DataFrame.from_records(records, columns=list(COLUMNS.header))


def derive_table(
    points: Sequence[Point],
    slope: Optional[float],
    intercept: Optional[float],
) -> DerivedTable:
    """Build the calculation table for ``points`` against ``y = slope·x + intercept``.

    Args:
        points (Sequence[Point]): Current point set, in display order.
        slope (float | None): Fitted slope, or None when there is no fit.
        intercept (float | None): Fitted intercept, or None when there is no
            fit.

    Returns:
        DerivedTable: One row per point with ``x², xy`` and the squared
        residual, plus column totals. Squared residuals and their total are
        None whenever ``slope`` or ``intercept`` is None.
    """
    if not points:
        has_line = slope is not None and intercept is not None
        return DerivedTable(rows=(), totals=TableTotals(residual_sq=0.0 if has_line else None))

    x, y = as_arrays(points)
    x2 = x * x
    xy = x * y
    if slope is not None and intercept is not None:
        resid_sq = (y - (slope * x + intercept)) ** 2
        resid_total: Optional[float] = float(np.sum(resid_sq))
        resid_values: List[Optional[float]] = [float(v) for v in resid_sq]
    else:
        resid_total = None
        resid_values = [None] * len(points)

    rows = tuple(
        TableRow(
            no=i + 1,
            x=float(x[i]),
            y=float(y[i]),
            x2=float(x2[i]),
            xy=float(xy[i]),
            residual_sq=resid_values[i],
        )
        for i in range(len(points))
    )
    totals = TableTotals(
        x=float(np.sum(x)),
        y=float(np.sum(y)),
        x2=float(np.sum(x2)),
        xy=float(np.sum(xy)),
        residual_sq=resid_total,
    )
    return DerivedTable(rows=rows, totals=totals)


def _check_delimiter(delimiter: str) -> None:
    if delimiter not in DELIMITERS:
        raise ValueError(f"delimiter must be ',' or '\\t', got {delimiter!r}")


def table_to_text(table: DerivedTable, delimiter: str = ",") -> str:
    """Serialize ``table`` as delimited text with a header and a ``Sum`` row.

    Use ``","`` for CSV downloads and ``"\\t"`` for clipboard text. Missing
    squared residuals are written as empty cells.
    """
    _check_delimiter(delimiter)
    return table.to_dataframe().to_csv(
        sep=delimiter, index=False, na_rep="", lineterminator="\n"
    )


def points_to_text(points: Sequence[Point], delimiter: str = ",") -> str:
    """Serialize the raw ``X, Y`` pairs with a header row."""
    _check_delimiter(delimiter)
    x, y = as_arrays(points)
    df = pd.DataFrame({POINT_COLUMNS[0]: x, POINT_COLUMNS[1]: y})
    return df.to_csv(sep=delimiter, index=False, lineterminator="\n")
