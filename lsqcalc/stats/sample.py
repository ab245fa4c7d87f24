"""Mean, sample standard deviation and standard error of the mean."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np


@dataclass(frozen=True)
class SampleSummary:
    n: int = 0
    mean: Optional[float] = None
    sample_std_dev: Optional[float] = None
    standard_error: Optional[float] = None


def summarize(values: Iterable[float]) -> SampleSummary:
    """Summarize a flat list of observations.

    Args:
        values (Iterable[float]): Observations. Non-finite entries are skipped.

    Returns:
        SampleSummary: ``n`` and the mean (``n >= 1``); the Bessel-corrected
        standard deviation and ``s / sqrt(n)`` only for ``n >= 2``.
    """
    arr = np.asarray(list(values), dtype=float)
    arr = arr[np.isfinite(arr)]
    n = int(len(arr))
    if n == 0:
        return SampleSummary()

    mean = float(np.sum(arr) / n)
    if n == 1:
        return SampleSummary(n=1, mean=mean)

    ss = float(np.sum((arr - mean) ** 2))
    sd = float(np.sqrt(ss / (n - 1)))
    se = float(sd / np.sqrt(n))
    return SampleSummary(n=n, mean=mean, sample_std_dev=sd, standard_error=se)
