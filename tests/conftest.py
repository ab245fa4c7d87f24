"""Pytest configuration for repository-relative imports."""

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from lsqcalc.points import Point  # noqa: E402


@pytest.fixture
def make_points():
    def _make(pairs):
        return tuple(Point.create(x, y) for x, y in pairs)

    return _make
