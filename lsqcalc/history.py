"""Linear undo/redo over full snapshots of the point set."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from .points import Point

logger = logging.getLogger(__name__)

Snapshot = Tuple[Point, ...]


class HistoryLog:
    """Snapshot history with a cursor.

    The log starts with a single empty snapshot. Pushing after an undo drops
    every snapshot after the cursor.
    """

    def __init__(self, initial: Iterable[Point] = ()):
        self._snapshots: List[Snapshot] = [tuple(initial)]
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current(self) -> Snapshot:
        return self._snapshots[self._cursor]

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def push(self, snapshot: Iterable[Point]) -> Snapshot:
        """Record ``snapshot`` as the newest state and discard any redo states."""
        snap = tuple(snapshot)
        dropped = len(self._snapshots) - self._cursor - 1
        del self._snapshots[self._cursor + 1 :]
        self._snapshots.append(snap)
        self._cursor += 1
        if dropped:
            logger.debug("Discarded %d redo snapshot(s)", dropped)
        return snap

    def undo(self) -> Optional[Snapshot]:
        if not self.can_undo:
            return None
        self._cursor -= 1
        return self._snapshots[self._cursor]

    def redo(self) -> Optional[Snapshot]:
        if not self.can_redo:
            return None
        self._cursor += 1
        return self._snapshots[self._cursor]
