"""
Lazy sampling adapters.

A sampler pairs a distribution with a random source and yields one variate per
pull. The sequence is infinite; consumers truncate it with ``take`` or
``itertools.islice``. A sampler cannot be rewound: a fresh stream is obtained by
constructing a new sampler.
"""

from __future__ import annotations

from typing import Any, Iterator, List

from probdist.distribution import Distribution
from probdist.source import RandomSource


class Sampler(Iterator[Any]):
    """
    Infinite stream of variates drawn from ``distribution`` using ``source``.
    """

    independent = False

    def __init__(self, distribution: Distribution, source: RandomSource) -> None:
        self.distribution = distribution
        self.source = source

    def __iter__(self) -> "Sampler":
        return self

    def __next__(self) -> Any:
        return self.distribution.sample(self.source)

    def take(self, n: int) -> List[Any]:
        """
        Return the next ``n`` variates as a list.
        """
        if int(n) < 0:
            raise ValueError("n must be non-negative")
        return [next(self) for _ in range(int(n))]


class Independent(Sampler):
    """
    Stream of statistically independent variates.

    Draws are produced exactly as by ``Sampler``; the type records that
    successive draws may be treated as i.i.d. (for example when summing them).
    """

    independent = True
