"""Point records owned by a regression session."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import numpy as np


def generate_id() -> str:
    """Return a fresh opaque identifier. Identifiers are never reused."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Point:
    id: str
    x: float
    y: float

    @classmethod
    def create(cls, x: float, y: float) -> "Point":
        return cls(id=generate_id(), x=float(x), y=float(y))


def points_from_pairs(pairs: Iterable[Tuple[float, float]]) -> Tuple[Point, ...]:
    """Create new points (with new ids) from ``(x, y)`` pairs."""
    return tuple(Point.create(x, y) for x, y in pairs)


def as_arrays(points: Sequence[Point]) -> Tuple[np.ndarray, np.ndarray]:
    """Split points into ``x`` and ``y`` float arrays."""
    x = np.fromiter((p.x for p in points), dtype=float, count=len(points))
    y = np.fromiter((p.y for p in points), dtype=float, count=len(points))
    return x, y
