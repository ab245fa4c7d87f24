"""Round numbers for display under a shared significant-figure/decimal policy.

Every rendered number in the calculator goes through a :class:`NumberFormatter`
so that changing the display setting reformats all outputs at once.
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional, Union

logger = logging.getLogger(__name__)

MODE_SIG = "sig"
MODE_DEC = "dec"

_MODE_ALIASES = {
    MODE_SIG: MODE_SIG,
    MODE_DEC: MODE_DEC,
    "significant-figures": MODE_SIG,
    "decimal-places": MODE_DEC,
}

DEFAULT_MODE = MODE_SIG
DEFAULT_DIGITS = 4

MISSING = "---"

Formatted = Union[float, str]


@dataclass(frozen=True)
class DisplayFormat:
    """Display precision policy.

    Attributes:
        mode: ``"sig"`` to round to significant figures, ``"dec"`` to round
            to a fixed number of decimal places.
        digits: Significant figures or decimal places, always >= 1.

    Raises:
        ValueError: For an unknown mode or a digit count below 1. Mode
            aliases are stored under their canonical name and digits are
            floored to an int.
    """

    mode: str = DEFAULT_MODE
    digits: int = DEFAULT_DIGITS

    def __post_init__(self):
        mode = normalize_mode(self.mode)
        if mode is None:
            raise ValueError(f"Unknown display mode: {self.mode!r}")
        digits = normalize_digits(self.digits)
        if digits is None:
            raise ValueError(f"Digits must be a finite number >= 1, got {self.digits!r}")
        object.__setattr__(self, "mode", mode)
        object.__setattr__(self, "digits", digits)


def normalize_mode(mode) -> Optional[str]:
    """Return the canonical mode name, or None for an unknown mode."""
    if not isinstance(mode, str):
        return None
    return _MODE_ALIASES.get(mode.strip().lower())


def normalize_digits(digits) -> Optional[int]:
    """Return ``digits`` floored to an int if it is finite and >= 1."""
    if isinstance(digits, bool):
        return None
    try:
        d = float(digits)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(d) or d <= 0:
        return None
    d = int(math.floor(d))
    return d if d >= 1 else None


def _is_finite_number(value) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False


def _quantize(value: float, exponent: int) -> float:
    # repr() gives the shortest string that round-trips, so 1.005 rounds as
    # the user typed it rather than as its binary neighbour 1.00499999...
    d = Decimal(repr(float(value)))
    prec = max(28, abs(d.adjusted()) + abs(exponent) + 2)
    ctx = Context(prec=prec, rounding=ROUND_HALF_UP)
    rounded = float(d.quantize(Decimal(1).scaleb(exponent), context=ctx))
    return rounded + 0.0  # -0.0 -> 0.0


def round_to_significant_digits(value: float, digits: int) -> float:
    """Round ``value`` to ``digits`` significant figures (half away from zero).

    Args:
        value (float): Finite number to round.
        digits (int): Number of significant figures, >= 1.

    Returns:
        float: Rounded value. Zero and non-finite input are returned unchanged.

    Examples:
        >>> round_to_significant_digits(0.0001234567, 3)
        0.000123
        >>> round_to_significant_digits(-98.7654321, 4)
        -98.77
    """
    value = float(value)
    if not math.isfinite(value) or value == 0:
        return value
    exponent = Decimal(repr(value)).adjusted()
    return _quantize(value, exponent - int(digits) + 1)


def round_to_decimal_places(value: float, decimals: int) -> float:
    """Round ``value`` to ``decimals`` places after the point (half away from zero).

    Examples:
        >>> round_to_decimal_places(1234.56789, 2)
        1234.57
        >>> round_to_decimal_places(-2.5, 0)
        -3.0
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    return _quantize(value, -int(decimals))


class NumberFormatter:
    """Hold the current :class:`DisplayFormat` and round values with it.

    The format is replaced as a whole under a lock, so any ``format`` call that
    starts after ``set_format`` has returned observes the new setting.
    """

    def __init__(self, display_format: DisplayFormat | None = None):
        self._lock = threading.Lock()
        self._format = display_format or DisplayFormat()

    @property
    def display_format(self) -> DisplayFormat:
        with self._lock:
            return self._format

    @property
    def mode(self) -> str:
        return self.display_format.mode

    @property
    def digits(self) -> int:
        return self.display_format.digits

    def set_format(self, mode=None, digits=None) -> DisplayFormat:
        """Update the mode and/or digit count.

        Invalid values are ignored individually and the previous setting is
        kept for that part.

        Returns:
            DisplayFormat: The format in effect after the update.
        """
        new_mode = normalize_mode(mode)
        new_digits = normalize_digits(digits)
        with self._lock:
            current = self._format
            updated = DisplayFormat(
                mode=new_mode or current.mode,
                digits=new_digits or current.digits,
            )
            self._format = updated
        if updated != current:
            logger.debug("Display format changed: %s -> %s", current, updated)
        return updated

    def format(self, value, digits=None) -> Formatted:
        """Round ``value`` for display.

        Args:
            value: Number to format. None, NaN and infinities are "missing".
            digits: Optional per-call override of the configured digit count.

        Returns:
            float | str: The rounded number, or ``"---"`` for missing values.
        """
        if not _is_finite_number(value):
            return MISSING
        value = float(value)
        if value == 0:
            return 0.0

        fmt = self.display_format
        d = normalize_digits(digits) or fmt.digits
        if fmt.mode == MODE_SIG:
            return round_to_significant_digits(value, d)
        return round_to_decimal_places(value, d)

    def format_text(self, value, digits=None) -> str:
        """Format ``value`` and convert it to its display string."""
        return to_display_text(self.format(value, digits))


def to_display_text(formatted: Formatted) -> str:
    """Render a formatted value the way a number field shows it.

    Integral values drop the trailing ``.0``; the ``"---"`` sentinel passes
    through.
    """
    if isinstance(formatted, str):
        return formatted
    if not math.isfinite(formatted):
        return MISSING
    if formatted == int(formatted) and abs(formatted) < 1e16:
        return str(int(formatted))
    return repr(float(formatted))
