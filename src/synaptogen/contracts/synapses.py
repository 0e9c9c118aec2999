"""Synapse contracts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from synaptogen.contracts.neurons import INeuron


class Direction(StrEnum):
    IN = "in"    # selected neuron -> source neuron (bounded in-degree)
    OUT = "out"  # source neuron -> selected neuron (bounded out-degree)


@dataclass(slots=True, eq=False)
class Synapse:
    """Directed weighted edge.

    Identity is the ordered ``(source, target)`` pair exposed by :attr:`key`;
    strength is mutable because polarization rewrites it after construction.
    """

    source: INeuron
    target: INeuron
    strength: float = 1.0

    @property
    def key(self) -> tuple[INeuron, INeuron]:
        return (self.source, self.target)

    @property
    def is_self_connection(self) -> bool:
        return self.source is self.target

    def __repr__(self) -> str:
        return f"Synapse({self.source!r} -> {self.target!r}, strength={self.strength:.4g})"


__all__ = ["Direction", "Synapse"]
