"""
Summary statistics over any distribution.

The following items are provided:
  - a frozen summary of the moments, median, modes and entropy of a distribution
  - empirical relative frequencies of integer draws
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Tuple

import numpy as np

from probdist.distribution import Distribution


@dataclass(frozen=True)
class DistributionSummary:
    mean: float
    var: float
    sd: float
    skewness: float
    kurtosis: float
    median: float
    modes: Tuple[Any, ...]
    entropy: float

    @staticmethod
    def from_distribution(dist: Distribution) -> "DistributionSummary":
        if not isinstance(dist, Distribution):
            raise TypeError("Unsupported distribution type for summary")
        return DistributionSummary(
            mean=float(dist.mean()),
            var=float(dist.var()),
            sd=float(dist.sd()),
            skewness=float(dist.skewness()),
            kurtosis=float(dist.kurtosis()),
            median=float(dist.median()),
            modes=tuple(dist.modes()),
            entropy=float(dist.entropy()),
        )


def empirical_pmf(samples: Iterable[int], k: int) -> np.ndarray:
    """
    Relative frequency of each outcome ``0..k-1`` among ``samples``.
    """
    k = int(k)
    if k <= 0:
        raise ValueError("k must be positive")
    draws = np.asarray(list(samples), dtype=np.int64)
    if draws.size == 0:
        raise ValueError("samples cannot be empty")
    if np.any(draws < 0) or np.any(draws >= k):
        raise ValueError(f"samples must lie in [0, {k - 1}]")
    counts = np.bincount(draws, minlength=k)
    return counts.astype(float) / float(draws.size)
