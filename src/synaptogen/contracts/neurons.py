"""Neuron contracts.

The connectivity engine never owns neurons. It only needs three things from
them: a stable identity (object identity / hash), a 2D position for radius
queries, and a polarity that decides the sign of synapses they emit.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, runtime_checkable


class Polarity(StrEnum):
    EXCITATORY = "excitatory"
    INHIBITORY = "inhibitory"
    BOTH = "both"  # unassigned; values pass through unchanged

    def apply(self, value: float) -> float:
        """Return ``value`` with the sign this polarity imposes."""
        if self is Polarity.EXCITATORY:
            return abs(value)
        if self is Polarity.INHIBITORY:
            return -abs(value)
        return value


@dataclass(frozen=True, slots=True)
class NeuronPosition:
    x: float
    y: float

    def distance_to(self, other: NeuronPosition) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return float((dx * dx + dy * dy) ** 0.5)


@runtime_checkable
class INeuron(Protocol):
    """Opaque node handle consumed by connection strategies."""

    position: NeuronPosition
    polarity: Polarity

    def __hash__(self) -> int:
        ...


__all__ = ["INeuron", "NeuronPosition", "Polarity"]
