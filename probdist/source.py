"""
Random sources for sampling.

A random source is any object with a ``random()`` method returning a uniform
float in [0, 1). ``numpy.random.Generator`` satisfies this directly; the helpers
below build seeded PCG64 generators so that every caller owns its own source.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Protocol, Tuple, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """
    A uniform random source interface is defined.
    """

    def random(self) -> float: ...


@dataclass(frozen=True)
class SourceConfig:
    """
    Configuration for seeded random sources.
    """

    seed: int = 123
    bitgen: Literal["PCG64"] = "PCG64"

    def validate(self) -> None:
        """
        Configuration validation is performed.
        """
        if int(self.seed) < 0:
            raise ValueError("seed must be non-negative")
        if str(self.bitgen) != "PCG64":
            raise ValueError("bitgen is not recognised")


def _generator(ss: np.random.SeedSequence) -> np.random.Generator:
    return np.random.Generator(np.random.PCG64(ss))


def make_source(config: Optional[SourceConfig] = None) -> np.random.Generator:
    """
    Return a fresh generator seeded from ``config.seed``.
    """
    config = config or SourceConfig()
    config.validate()
    return _generator(np.random.SeedSequence(int(config.seed)))


def spawn_sources(
    n: int, config: Optional[SourceConfig] = None
) -> Tuple[np.random.Generator, ...]:
    """
    Return ``n`` independent generators derived from one root seed.

    Each concurrent consumer should receive its own generator; generators are
    stateful and are not safe to share without external synchronisation.
    """
    if int(n) <= 0:
        raise ValueError("n must be positive")
    config = config or SourceConfig()
    config.validate()
    root = np.random.SeedSequence(int(config.seed))
    return tuple(_generator(ss) for ss in root.spawn(int(n)))
