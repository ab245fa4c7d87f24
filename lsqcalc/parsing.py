"""
Parse free-text numeric input from form fields and pasted data.
"""

# Form fields treat anything that does not read as a number as "not entered":
# nothing here raises on user text.

from __future__ import annotations

import logging
import math
import re
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

_FIELD_SPLIT = re.compile(r"[,\t\s]+")
_LINE_SPLIT = re.compile(r"\r?\n")


def parse_float(text) -> Optional[float]:
    """
    Parse a single form value.

    Returns None for None, blank text, unparseable text and non-finite
    values. Digit-group underscores such as ``"1_000"`` are rejected even
    though ``float()`` accepts them.
    """
    if text is None:
        return None
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        value = float(text)
    else:
        raw = str(text).strip()
        if not raw or "_" in raw:
            return None
        try:
            value = float(raw)
        except ValueError:
            return None
    if not math.isfinite(value):
        return None
    return value


def parse_points(text: str) -> List[Tuple[float, float]]:
    """
    Parse pasted ``x y`` data, one pair per line.

    Fields may be separated by commas, tabs or spaces. Lines whose first two
    fields do not both parse to finite numbers are skipped; extra fields are
    ignored.
    """
    pairs: List[Tuple[float, float]] = []
    if not text or not text.strip():
        return pairs

    skipped = 0
    for line in _LINE_SPLIT.split(text.strip()):
        parts = [p for p in _FIELD_SPLIT.split(line) if p]
        if len(parts) < 2:
            skipped += 1
            continue
        x = parse_float(parts[0])
        y = parse_float(parts[1])
        if x is None or y is None:
            skipped += 1
            continue
        pairs.append((x, y))

    if skipped:
        logger.debug("Skipped %d line(s) without two numeric fields", skipped)
    return pairs
