"""Define standardized column labels for derived tables and exports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class TableColumns:
    """Container for the column labels of the calculation table.

    The same labels are used for the in-memory DataFrame, the CSV download
    and the tab-separated clipboard text, so the exported header always
    matches what the table shows.

    Attributes:
        no: 1-based row number. The aggregate row carries ``total_label``
            in this column instead.
        x: Independent variable as entered.
        y: Dependent variable as entered.
        x2: Square of ``x``; the column total is Σx².
        xy: Product ``x·y``; the column total is Σxy.
        residual_sq: Squared residual ``(y − (a·x + b))²`` against the
            fitted line. Empty while no line has been fitted.
        total_label: Label of the trailing aggregate row.
    """

    no: str = "No"
    x: str = "X"
    y: str = "Y"
    x2: str = "X^2"
    xy: str = "XY"
    residual_sq: str = "(Y-aX-b)^2"
    total_label: str = "Sum"

    @property
    def header(self) -> Tuple[str, ...]:
        return (self.no, self.x, self.y, self.x2, self.xy, self.residual_sq)


COLUMNS = TableColumns()

POINT_COLUMNS: Tuple[str, str] = ("X", "Y")
