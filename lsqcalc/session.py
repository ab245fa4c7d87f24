"""Interactive regression session: point set, manual sums, history and live fit.

A session has two input modes:
- ``"raw"``: a point set that is edited point by point (with undo/redo), and
- ``"stats"``: sufficient statistics typed directly into form fields.

Every mutation recomputes the sums and the fit before returning, so the
``result`` read immediately afterwards is always current.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Iterable, Optional, Sequence, Tuple

from .formatting import NumberFormatter
from .history import HistoryLog
from .parsing import parse_float, parse_points
from .points import Point, points_from_pairs
from .stats.regression import (
    EMPTY_RESULT,
    RegressionResult,
    SufficientStatistics,
    fit,
    fit_statistics,
)
from .table import DerivedTable, derive_table

logger = logging.getLogger(__name__)

MODE_RAW = "raw"
MODE_STATS = "stats"
MODES = (MODE_RAW, MODE_STATS)


@dataclass(frozen=True)
class ManualStatistics:
    """Sufficient statistics as typed into the form, kept as text."""

    n: str = ""
    sum_x: str = ""
    sum_y: str = ""
    sum_x2: str = ""
    sum_xy: str = ""
    sum_residuals: str = ""

    REQUIRED = ("n", "sum_x", "sum_y", "sum_x2", "sum_xy")

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def parsed(self) -> dict:
        return {name: parse_float(getattr(self, name)) for name in self.field_names()}

    @property
    def is_complete(self) -> bool:
        values = self.parsed()
        return all(values[name] is not None for name in self.REQUIRED)

    @property
    def is_blank(self) -> bool:
        return all(not str(getattr(self, name)).strip() for name in self.field_names())


class RegressionSession:
    """Owns one calculator's input state and its derived fit."""

    def __init__(self, formatter: NumberFormatter | None = None, mode: str = MODE_RAW):
        if mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {mode!r}")
        self.formatter = formatter or NumberFormatter()
        self._mode = mode
        self._history = HistoryLog()
        self._points: Tuple[Point, ...] = self._history.current
        self._manual = ManualStatistics()
        self._stats = SufficientStatistics()
        self._result: RegressionResult = EMPTY_RESULT
        self._recompute()

    # -- read surface -----------------------------------------------------

    @property
    def mode(self) -> str:
        return self._mode

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    @property
    def manual_statistics(self) -> ManualStatistics:
        return self._manual

    @property
    def result(self) -> RegressionResult:
        return self._result

    @property
    def history(self) -> HistoryLog:
        return self._history

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    @property
    def statistics(self) -> SufficientStatistics:
        """Sums shown in the statistics panel.

        In ``"stats"`` mode blank or unparseable fields display as 0; the fit
        itself still treats them as unset.
        """
        if self._mode == MODE_RAW:
            return self._stats
        values = self._manual.parsed()
        return SufficientStatistics(
            n=values["n"] or 0,
            sum_x=values["sum_x"] or 0.0,
            sum_y=values["sum_y"] or 0.0,
            sum_x2=values["sum_x2"] or 0.0,
            sum_xy=values["sum_xy"] or 0.0,
        )

    @property
    def has_data(self) -> bool:
        if self._mode == MODE_RAW:
            return bool(self._points)
        return not self._manual.is_blank

    def table(self) -> DerivedTable:
        return derive_table(self._points, self._result.slope, self._result.intercept)

    def find_point(self, point_id: str) -> Optional[Point]:
        for p in self._points:
            if p.id == point_id:
                return p
        return None

    # -- mode -------------------------------------------------------------

    def set_mode(self, mode: str) -> None:
        if mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {mode!r}")
        if mode != self._mode:
            logger.debug("Session mode %s -> %s", self._mode, mode)
            self._mode = mode
            self._recompute()

    # -- point-set surface ------------------------------------------------

    def add_point(self, x: float, y: float) -> Point:
        point = Point.create(x, y)
        self._commit(self._points + (point,))
        return point

    def update_point(self, point_id: str, x: float, y: float) -> Optional[Point]:
        """Edit a point in place; an unknown id is a no-op and returns None."""
        target = self.find_point(point_id)
        if target is None:
            logger.debug("update_point: unknown id %s", point_id)
            return None
        updated = replace(target, x=float(x), y=float(y))
        self._commit(tuple(updated if p.id == point_id else p for p in self._points))
        return updated

    def delete_point(self, point_id: str) -> bool:
        """Remove a point; an unknown id is a no-op and returns False."""
        if self.find_point(point_id) is None:
            logger.debug("delete_point: unknown id %s", point_id)
            return False
        self._commit(tuple(p for p in self._points if p.id != point_id))
        return True

    def replace_points(self, points: Iterable[Point]) -> None:
        self._commit(tuple(points))

    def import_pairs(self, pairs: Iterable[Tuple[float, float]]) -> Tuple[Point, ...]:
        """Append ``(x, y)`` pairs as a single undoable step."""
        new_points = points_from_pairs(pairs)
        if new_points:
            self._commit(self._points + new_points)
        return new_points

    def import_text(self, text: str) -> Tuple[Point, ...]:
        new_points = self.import_pairs(parse_points(text))
        logger.info("Imported %d point(s)", len(new_points))
        return new_points

    def submit_point(
        self, x_text, y_text, point_id: Optional[str] = None
    ) -> Optional[Point]:
        """Add a point (or edit ``point_id``) from form text.

        Blank or unparseable input leaves the session untouched and returns
        None.
        """
        x = parse_float(x_text)
        y = parse_float(y_text)
        if x is None or y is None:
            return None
        if point_id is not None:
            return self.update_point(point_id, x, y)
        return self.add_point(x, y)

    def reset(self) -> None:
        """Clear the input of the current mode.

        In ``"raw"`` mode the empty point set is pushed to history, so a reset
        can be undone.
        """
        if self._mode == MODE_RAW:
            self._commit(())
        else:
            self._manual = ManualStatistics()
            self._recompute()

    def undo(self) -> bool:
        snapshot = self._history.undo()
        if snapshot is None:
            return False
        self._points = snapshot
        self._recompute()
        return True

    def redo(self) -> bool:
        snapshot = self._history.redo()
        if snapshot is None:
            return False
        self._points = snapshot
        self._recompute()
        return True

    # -- manual-statistics surface ----------------------------------------

    def set_manual_field(self, name: str, text) -> None:
        if name not in ManualStatistics.field_names():
            raise KeyError(f"Unknown statistics field '{name}'.")
        value = "" if text is None else str(text)
        self._manual = replace(self._manual, **{name: value})
        self._recompute()

    def set_manual_statistics(self, **values) -> None:
        unknown = set(values) - set(ManualStatistics.field_names())
        if unknown:
            raise KeyError(f"Unknown statistics field(s): {sorted(unknown)}")
        self._manual = replace(
            self._manual,
            **{k: "" if v is None else str(v) for k, v in values.items()},
        )
        self._recompute()

    # -- internals --------------------------------------------------------

    def _commit(self, points: Sequence[Point]) -> None:
        self._points = self._history.push(points)
        self._recompute()

    def _recompute(self) -> None:
        if self._mode == MODE_RAW:
            self._stats = SufficientStatistics.from_points(self._points)
            if self._stats.n == 0:
                self._result = EMPTY_RESULT
            else:
                self._result = fit_statistics(self._stats, points=self._points)
        else:
            values = self._manual.parsed()
            if not self._manual.is_complete:
                self._result = EMPTY_RESULT
            else:
                self._result = fit(
                    values["n"],
                    values["sum_x"],
                    values["sum_y"],
                    values["sum_x2"],
                    values["sum_xy"],
                    values["sum_residuals"],
                )
        if self._result.is_degenerate:
            logger.debug("Fit is degenerate: %s", self._result.error_message)
