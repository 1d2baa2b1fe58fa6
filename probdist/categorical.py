"""
Categorical distribution over outcomes ``0..k-1``.

The mass vector is copied at construction and stored read-only together with
its running (left-to-right) cumulative sums. ``cdf`` reads the cumulative array
directly and ``inv_cdf`` uses a binary search over it; both agree exactly with a
linear scan that accumulates the masses one at a time.
"""

from __future__ import annotations

import math
import operator
import warnings
from typing import List, Sequence

import numpy as np

from probdist.errors import InvalidProbabilityVectorError, OutOfRangeError
from probdist.source import RandomSource

SUM_TOLERANCE = 1e-12


def _validated_masses(p: Sequence[float]) -> np.ndarray:
    try:
        arr = np.array(p, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidProbabilityVectorError(f"p must be a sequence of numbers: {e}")
    if arr.ndim != 1:
        raise InvalidProbabilityVectorError("p must be 1D")
    if arr.size == 0:
        raise InvalidProbabilityVectorError("p cannot be empty")
    if not np.all((arr >= 0.0) & (arr <= 1.0)):
        raise InvalidProbabilityVectorError("every entry of p must lie in [0, 1]")
    return arr


class Categorical:
    """
    Discrete distribution with probability ``p[i]`` on outcome ``i``.

    Instances are immutable and may be shared read-only between threads.

    Attributes:
        k: Number of outcomes.
        p: Read-only array of event probabilities.

    Notes:
    - ``inv_cdf(1.0)`` returns the first outcome at which the running sum
      reaches 1.0, so trailing zero-mass outcomes are never returned even
      when rounding would otherwise allow a later positive-mass outcome.
    """

    __slots__ = ("_p", "_cumulative")

    def __init__(self, p: Sequence[float]) -> None:
        """
        Create a categorical distribution from a probability vector.

        Args:
            p: Event probabilities. Every entry must lie in [0, 1] and the
                entries must sum to 1 within an absolute tolerance of 1e-12.

        Raises:
            InvalidProbabilityVectorError: If ``p`` is not a valid
                probability vector.
        """
        masses = _validated_masses(p)
        # np.cumsum accumulates sequentially, matching a running sum.
        cumulative = np.cumsum(masses)
        total = float(cumulative[-1])
        if abs(total - 1.0) > SUM_TOLERANCE:
            raise InvalidProbabilityVectorError(
                f"p must sum to 1 within {SUM_TOLERANCE}, but sums to {total!r}"
            )
        masses.setflags(write=False)
        cumulative.setflags(write=False)
        self._p = masses
        self._cumulative = cumulative

    @property
    def k(self) -> int:
        return int(self._p.shape[0])

    @property
    def p(self) -> np.ndarray:
        return self._p

    def __len__(self) -> int:
        return self.k

    def __repr__(self) -> str:
        return f"Categorical(p={self._p.tolist()!r})"

    def mean(self) -> float:
        total = 0.0
        for i, p in enumerate(self._p.tolist()):
            total += i * p
        return total

    def var(self) -> float:
        mean = self.mean()
        total = 0.0
        for i, p in enumerate(self._p.tolist()):
            d = i - mean
            total += d * d * p
        return total

    def sd(self) -> float:
        return math.sqrt(self.var())

    def skewness(self) -> float:
        mean, var = self.mean(), self.var()
        if var == 0.0:
            warnings.warn(
                "Skewness is undefined for a distribution with zero variance.",
                RuntimeWarning,
                stacklevel=2,
            )
            return float("nan")
        total = 0.0
        for i, p in enumerate(self._p.tolist()):
            d = i - mean
            total += d * d * d * p
        return total / (var * math.sqrt(var))

    def kurtosis(self) -> float:
        """
        Return the excess kurtosis.
        """
        mean, var = self.mean(), self.var()
        if var == 0.0:
            warnings.warn(
                "Kurtosis is undefined for a distribution with zero variance.",
                RuntimeWarning,
                stacklevel=2,
            )
            return float("nan")
        total = 0.0
        for i, p in enumerate(self._p.tolist()):
            d2 = (i - mean) * (i - mean)
            total += d2 * d2 * p
        return total / (var * var) - 3.0

    def median(self) -> float:
        """
        Return the median.

        When the running sum equals 0.5 exactly at outcome ``i``, the midpoint
        ``i - 0.5`` is returned. A first mass of exactly 0.5 gives 0.5.
        """
        first = float(self._p[0])
        if first > 0.5:
            return 0.0
        if first == 0.5:
            return 0.5
        for i, c in enumerate(self._cumulative.tolist()):
            if c == 0.5:
                return (2 * i - 1) / 2.0
            if c > 0.5:
                return float(i)
        raise RuntimeError("Cumulative mass never exceeded 0.5")

    def modes(self) -> List[int]:
        """
        Return every outcome attaining the maximal mass, in ascending order.
        """
        top = np.max(self._p)
        return [int(i) for i in np.flatnonzero(self._p == top)]

    def entropy(self) -> float:
        total = 0.0
        for p in self._p.tolist():
            # 0 * ln(0) is taken as 0.
            if p > 0.0:
                total += p * math.log(p)
        return -total

    def cdf(self, x: float) -> float:
        """
        Return P(X <= x). Non-integer ``x`` is floored to an outcome boundary.
        """
        x = float(x)
        if math.isnan(x):
            return float("nan")
        if x < 0.0:
            return 0.0
        if x >= self.k - 1:
            return 1.0
        return float(self._cumulative[int(x)])

    def inv_cdf(self, p: float) -> int:
        """
        Return the smallest outcome whose cumulative mass is at least ``p``.

        ``p == 0`` maps to the first outcome with strictly positive mass.

        Raises:
            OutOfRangeError: If ``p`` is not in [0, 1].
        """
        p = float(p)
        if not (0.0 <= p <= 1.0):
            raise OutOfRangeError(f"p must be in [0, 1], got {p!r}")
        if p == 0.0:
            return int(np.flatnonzero(self._p > 0.0)[0])
        # A running sum of exactly 1.0 always satisfies c >= p here.
        idx = int(np.searchsorted(self._cumulative, p, side="left"))
        return min(idx, self.k - 1)

    def pmf(self, x: int) -> float:
        i = operator.index(x)
        if i < 0 or i >= self.k:
            raise OutOfRangeError(f"x must be in [0, {self.k - 1}], got {i}")
        return float(self._p[i])

    def sample(self, source: RandomSource) -> int:
        return self.inv_cdf(source.random())
