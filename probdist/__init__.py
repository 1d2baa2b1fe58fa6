"""
Probability distributions with a uniform interface.

This package provides the distribution contract (moments, CDF, inverse CDF and
sampling), a categorical distribution over ``k`` outcomes, lazy sampling
adapters, and seeded random sources.
"""

from probdist.categorical import Categorical
from probdist.distribution import (
    Continuous,
    Discrete,
    Distribution,
    is_continuous,
    is_discrete,
)
from probdist.errors import (
    InvalidProbabilityVectorError,
    OutOfRangeError,
    ProbabilityError,
)
from probdist.sampling import Independent, Sampler
from probdist.source import RandomSource, SourceConfig, make_source, spawn_sources
from probdist.summary import DistributionSummary, empirical_pmf

__all__ = [
    "Distribution",
    "Discrete",
    "Continuous",
    "is_discrete",
    "is_continuous",
    "Categorical",
    "Sampler",
    "Independent",
    "RandomSource",
    "SourceConfig",
    "make_source",
    "spawn_sources",
    "DistributionSummary",
    "empirical_pmf",
    "ProbabilityError",
    "InvalidProbabilityVectorError",
    "OutOfRangeError",
]
