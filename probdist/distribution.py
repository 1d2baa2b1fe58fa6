"""
Distribution interfaces.

In this module, the capability set shared by all distributions is defined as a
structural protocol, so that sampling adapters and statistics utilities can
operate over any distribution without knowing its concrete shape.

Contract notes:
  - ``cdf`` and ``inv_cdf`` are mutually consistent order-preserving inverses
    over the support, and ``sample`` is ``inv_cdf`` applied to one uniform draw.
  - Summing ``pmf`` (or integrating ``pdf``) up to ``x`` agrees with ``cdf(x)``.
  - ``skewness`` and ``kurtosis`` are undefined when the variance is zero and
    are then reported as NaN.
"""

from __future__ import annotations

from typing import Any, List, Protocol, runtime_checkable

from probdist.source import RandomSource


@runtime_checkable
class Distribution(Protocol):
    """
    Moments, probabilities and sampling for a univariate distribution.
    """

    def mean(self) -> float: ...

    def var(self) -> float: ...

    def sd(self) -> float: ...

    def skewness(self) -> float: ...

    def kurtosis(self) -> float:
        """
        Return the excess kurtosis (fourth standardised moment minus 3).
        """
        ...

    def median(self) -> float: ...

    def modes(self) -> List[Any]: ...

    def entropy(self) -> float: ...

    def cdf(self, x: float) -> float: ...

    def inv_cdf(self, p: float) -> Any:
        """
        Return the smallest support value whose cumulative probability is >= p.
        """
        ...

    def sample(self, source: RandomSource) -> Any: ...


@runtime_checkable
class Discrete(Distribution, Protocol):
    """
    A distribution over integer-valued support, described by a mass function.
    """

    def pmf(self, x: int) -> float: ...


@runtime_checkable
class Continuous(Distribution, Protocol):
    """
    A distribution over real-valued support, described by a density.
    """

    def pdf(self, x: float) -> float: ...


def is_discrete(dist: object) -> bool:
    return isinstance(dist, Discrete)


def is_continuous(dist: object) -> bool:
    return isinstance(dist, Continuous)
