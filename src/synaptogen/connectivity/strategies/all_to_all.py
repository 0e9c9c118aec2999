"""All-to-all connectivity."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from synaptogen.connectivity.strategies.base import ConnectionStrategy, candidate_pairs
from synaptogen.contracts.connections import Add, ConnectionsResult
from synaptogen.contracts.neurons import INeuron
from synaptogen.contracts.synapses import Synapse
from synaptogen.contracts.tensor import Generator


@dataclass(slots=True)
class AllToAll(ConnectionStrategy):
    """Connect every source neuron to every target neuron not already connected."""

    name: ClassVar[str] = "all_to_all"

    allow_self_connection: bool = True
    strength: float = 1.0

    def compute(
        self,
        source: Sequence[INeuron],
        target: Sequence[INeuron],
        *,
        existing: Sequence[Synapse],
        generator: Generator,
    ) -> ConnectionsResult:
        occupied = {syn.key for syn in existing}
        pairs = candidate_pairs(source, target, allow_self_connection=self.allow_self_connection)
        return Add(tuple(Synapse(pre, post, self.strength) for pre, post in pairs if (pre, post) not in occupied))


__all__ = ["AllToAll"]
