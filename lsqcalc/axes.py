"""Compute plot domains, axis ticks and tick labels for the scatter chart.

The chart itself is drawn by the presentation layer; this module only decides
what range to show and which tick values and labels to draw, using the same
:class:`NumberFormatter` as every other number on screen.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np

from .formatting import NumberFormatter, to_display_text
from .points import Point, as_arrays

MAX_TICKS = 100
DOMAIN_PADDING = 0.1
EXPONENTIAL_LABEL_THRESHOLD = 1000.0


def _padded(lo: float, hi: float) -> Tuple[float, float]:
    pad = (hi - lo) * DOMAIN_PADDING
    if pad == 0:
        pad = 1.0
    return lo - pad, hi + pad


def plot_domain(points: Sequence[Point]) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """Return ``((x_min, x_max), (y_min, y_max))`` for the chart.

    Both ranges always include 0 at the low end and are padded by 10 % of
    their span (1 unit when the span is zero). Non-finite points are ignored.
    """
    x, y = as_arrays(points)
    mask = np.isfinite(x) & np.isfinite(y)
    x, y = x[mask], y[mask]
    if len(x) == 0:
        return _padded(0.0, 0.0), _padded(0.0, 0.0)
    x_range = _padded(min(0.0, float(np.min(x))), float(np.max(x)))
    y_range = _padded(min(0.0, float(np.min(y))), float(np.max(y)))
    return x_range, y_range


def generate_ticks(lo: float, hi: float) -> List[float]:
    """Return evenly spaced "nice" tick values covering ``[lo, hi]``.

    The step is 1, 0.5 or 0.2 times the power of ten below the range, so
    that a range holds roughly 5-10 ticks. At most 101 ticks are produced.
    """
    span = hi - lo
    if span <= 0 or not math.isfinite(span):
        return [lo]

    magnitude = 10 ** math.floor(math.log10(span))
    ratio = span / magnitude
    if ratio > 5:
        step = magnitude
    elif ratio > 2:
        step = magnitude / 2
    else:
        step = magnitude / 5
    if step <= 0 or not math.isfinite(step):
        step = 1.0

    ticks = []
    start = math.ceil(lo / step) * step
    for i in range(MAX_TICKS + 1):
        tick = start + i * step
        if tick > hi:
            break
        # strip float noise such as 0.6000000000000001
        ticks.append(float(f"{tick:.10g}"))
    return ticks


def tick_label(value: float, formatter: NumberFormatter) -> str:
    """Label a tick with the current display format.

    Magnitudes above 1000 use exponential notation with ``digits - 1``
    decimals so labels stay short.
    """
    digits = formatter.digits
    if abs(value) > EXPONENTIAL_LABEL_THRESHOLD:
        return f"{value:.{max(1, digits - 1)}e}"
    return to_display_text(formatter.format(value))
