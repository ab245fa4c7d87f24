"""Write the calculation table and raw points to CSV files.

This module is the file boundary for exports; the text itself comes from
:mod:`lsqcalc.table`.
"""

from __future__ import annotations

import logging
import os
from typing import Sequence

from .points import Point
from .table import DerivedTable, points_to_text, table_to_text

logger = logging.getLogger(__name__)

DETAILED_TABLE_FILENAME = "least_squares_detailed_data.csv"
POINTS_FILENAME = "least_squares_data.csv"


def _write_text(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(text)


def save_table_to_csv(table: DerivedTable, output_dir: str = "output") -> str:
    """Save the per-point calculation table with its ``Sum`` row.

    Args:
        table (DerivedTable): Output of :func:`lsqcalc.table.derive_table`.
        output_dir (str): Directory where the CSV is written.

    Returns:
        str: Path to ``least_squares_detailed_data.csv``.
    """
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, DETAILED_TABLE_FILENAME)
    _write_text(path, table_to_text(table, delimiter=","))
    logger.info("Saved calculation table (%d rows) to %s", len(table), path)
    return path


def save_points_to_csv(points: Sequence[Point], output_dir: str = "output") -> str:
    """Save the raw ``X,Y`` pairs and return the file path."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, POINTS_FILENAME)
    _write_text(path, points_to_text(points, delimiter=","))
    logger.info("Saved %d point(s) to %s", len(points), path)
    return path
