"""Persist the display-format preference between runs.

The preference is two scalar settings stored as a small JSON object:

    {"numberFormatMode": "sig", "numberFormatDigits": 4}

Missing, unreadable or invalid values fall back to the defaults, so loading
never fails.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .formatting import (
    DEFAULT_DIGITS,
    DEFAULT_MODE,
    DisplayFormat,
    normalize_digits,
    normalize_mode,
)

logger = logging.getLogger(__name__)

MODE_KEY = "numberFormatMode"
DIGITS_KEY = "numberFormatDigits"

DEFAULT_PREFERENCES_PATH = Path.home() / ".lsqcalc" / "preferences.json"


def display_format_from_mapping(data) -> DisplayFormat:
    if not isinstance(data, dict):
        return DisplayFormat()
    return DisplayFormat(
        mode=normalize_mode(data.get(MODE_KEY)) or DEFAULT_MODE,
        digits=normalize_digits(data.get(DIGITS_KEY)) or DEFAULT_DIGITS,
    )


def load_display_format(path: str | Path = DEFAULT_PREFERENCES_PATH) -> DisplayFormat:
    """Read the stored display format, or the default ``("sig", 4)``."""
    path = Path(path)
    if not path.exists():
        return DisplayFormat()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable preferences file %s: %s", path, e)
        return DisplayFormat()
    return display_format_from_mapping(data)


def save_display_format(
    display_format: DisplayFormat, path: str | Path = DEFAULT_PREFERENCES_PATH
) -> Path:
    """Write ``display_format`` to ``path``, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {MODE_KEY: display_format.mode, DIGITS_KEY: int(display_format.digits)}
    path.write_text(json.dumps(payload), encoding="utf-8")
    logger.info("Saved display format %s to %s", display_format, path)
    return path
