"""Parametric distributions used to draw synapse strengths."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from synaptogen.contracts.tensor import Generator
from synaptogen.core.torch_utils import require_torch
from synaptogen.errors import InvalidConfiguration


@runtime_checkable
class IProbabilityDistribution(Protocol):
    def sample(self, *, generator: Generator | None = None) -> float:
        ...

    def sample_n(self, n: int, *, generator: Generator | None = None) -> list[float]:
        ...


@dataclass(frozen=True, slots=True)
class NormalDistribution:
    mean: float = 0.0
    std: float = 1.0

    def __post_init__(self) -> None:
        if self.std < 0:
            raise InvalidConfiguration(f"std must be non-negative, got {self.std}")

    def sample(self, *, generator: Generator | None = None) -> float:
        return self.sample_n(1, generator=generator)[0]

    def sample_n(self, n: int, *, generator: Generator | None = None) -> list[float]:
        if n <= 0:
            return []
        torch = require_torch()
        draws = torch.randn((n,), generator=generator, dtype=torch.float64) * self.std + self.mean
        return [float(v) for v in draws.tolist()]


@dataclass(frozen=True, slots=True)
class UniformDistribution:
    low: float = 0.0
    high: float = 1.0

    def __post_init__(self) -> None:
        if self.high < self.low:
            raise InvalidConfiguration(f"high ({self.high}) must be >= low ({self.low})")

    def sample(self, *, generator: Generator | None = None) -> float:
        return self.sample_n(1, generator=generator)[0]

    def sample_n(self, n: int, *, generator: Generator | None = None) -> list[float]:
        if n <= 0:
            return []
        if self.high == self.low:
            return [float(self.low)] * n
        torch = require_torch()
        draws = torch.empty((n,), dtype=torch.float64).uniform_(self.low, self.high, generator=generator)
        return [float(v) for v in draws.tolist()]


@dataclass(frozen=True, slots=True)
class ConstantDistribution:
    value: float = 1.0

    def sample(self, *, generator: Generator | None = None) -> float:
        return float(self.value)

    def sample_n(self, n: int, *, generator: Generator | None = None) -> list[float]:
        return [float(self.value)] * max(0, n)


def coerce_distribution(
    value: IProbabilityDistribution | Mapping[str, Any] | float | None,
) -> IProbabilityDistribution | None:
    """Build a distribution from a config mapping such as ``{"kind": "normal", "std": 0.5}``."""

    if value is None or isinstance(value, IProbabilityDistribution):
        return value
    if isinstance(value, (int, float)):
        return ConstantDistribution(float(value))
    if not isinstance(value, Mapping):
        raise TypeError("distribution must be a distribution, a number or Mapping[str, Any]")

    kind = str(value.get("kind", "")).strip().lower()
    if kind == "normal":
        return NormalDistribution(
            mean=float(value.get("mean", 0.0)),
            std=float(value.get("std", 1.0)),
        )
    if kind == "uniform":
        return UniformDistribution(
            low=float(value.get("low", 0.0)),
            high=float(value.get("high", 1.0)),
        )
    if kind == "constant":
        return ConstantDistribution(float(value.get("value", 1.0)))
    raise InvalidConfiguration(f"Unknown distribution kind: {kind!r}")


__all__ = [
    "ConstantDistribution",
    "IProbabilityDistribution",
    "NormalDistribution",
    "UniformDistribution",
    "coerce_distribution",
]
