"""Network container contract (collaborator boundary)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Protocol, runtime_checkable

from synaptogen.contracts.neurons import INeuron
from synaptogen.contracts.synapses import Synapse


@runtime_checkable
class INetwork(Protocol):
    """What a connection strategy needs from the live network.

    ``lock`` must be re-entrant; strategies hold it from the existing-synapse
    snapshot until the result has been applied.
    """

    lock: Any

    def synapses_between(
        self,
        source: Sequence[INeuron],
        target: Sequence[INeuron],
    ) -> list[Synapse]:
        ...

    def add_synapses(self, synapses: Iterable[Synapse]) -> None:
        ...

    def delete_synapse(self, synapse: Synapse) -> None:
        ...

    def replace_synapses(
        self,
        source: Sequence[INeuron],
        target: Sequence[INeuron],
        synapses: Iterable[Synapse],
    ) -> None:
        ...


__all__ = ["INetwork"]
