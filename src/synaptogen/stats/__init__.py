"""Random sampling primitives and probability distributions."""

from synaptogen.stats.distributions import (
    ConstantDistribution,
    IProbabilityDistribution,
    NormalDistribution,
    UniformDistribution,
    coerce_distribution,
)
from synaptogen.stats.sampling import (
    iter_samples,
    round_half_up,
    sample_without_replacement,
    shuffled,
)

__all__ = [
    "ConstantDistribution",
    "IProbabilityDistribution",
    "NormalDistribution",
    "UniformDistribution",
    "coerce_distribution",
    "iter_samples",
    "round_half_up",
    "sample_without_replacement",
    "shuffled",
]
