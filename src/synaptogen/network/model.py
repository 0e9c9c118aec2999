"""Reference in-memory network container.

Neurons are compared by identity. Synapses are indexed by their ordered
``(source, target)`` pair so that duplicate detection is a dictionary lookup.
"""

from __future__ import annotations

import itertools
import threading
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from synaptogen.connectivity.positions import PopulationFrame, generate_positions
from synaptogen.contracts.neurons import INeuron, NeuronPosition, Polarity
from synaptogen.contracts.synapses import Synapse
from synaptogen.errors import ConnectivityError

_NEURON_IDS = itertools.count()


@dataclass(slots=True, eq=False)
class Neuron:
    label: str = ""
    position: NeuronPosition = NeuronPosition(0.0, 0.0)
    polarity: Polarity = Polarity.BOTH
    uid: int = field(default_factory=lambda: next(_NEURON_IDS))

    def __repr__(self) -> str:
        return f"Neuron({self.label or self.uid})"


class Network:
    """Owns neurons and synapses; strategies read and mutate it through :class:`INetwork`."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._neurons: list[INeuron] = []
        self._fan_out: dict[INeuron, dict[INeuron, Synapse]] = {}
        self._fan_in: dict[INeuron, dict[INeuron, Synapse]] = {}

    @property
    def neurons(self) -> list[INeuron]:
        return list(self._neurons)

    @property
    def synapses(self) -> list[Synapse]:
        return [syn for out in self._fan_out.values() for syn in out.values()]

    def __len__(self) -> int:
        return sum(len(out) for out in self._fan_out.values())

    def __iter__(self) -> Iterator[Synapse]:
        return iter(self.synapses)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Synapse):
            return self.get_synapse(item.source, item.target) is item
        if isinstance(item, tuple) and len(item) == 2:
            return self.get_synapse(item[0], item[1]) is not None
        return False

    def add_neurons(self, neurons: Iterable[INeuron]) -> None:
        with self.lock:
            known = set(self._neurons)
            for neuron in neurons:
                if neuron not in known:
                    self._neurons.append(neuron)
                    known.add(neuron)

    def add_population(
        self,
        n: int,
        *,
        frame: PopulationFrame | Mapping[str, Any] | None = None,
        polarity: Polarity = Polarity.BOTH,
        label: str = "n",
    ) -> list[Neuron]:
        """Create ``n`` neurons, laid out in ``frame`` when one is given."""
        if n < 0:
            raise ValueError("n must be non-negative")
        if frame is not None:
            positions = generate_positions(frame, n)
        else:
            positions = [NeuronPosition(0.0, 0.0)] * n
        neurons = [
            Neuron(label=f"{label}{idx}", position=pos, polarity=polarity)
            for idx, pos in enumerate(positions)
        ]
        self.add_neurons(neurons)
        return neurons

    def get_synapse(self, source: Any, target: Any) -> Synapse | None:
        return self._fan_out.get(source, {}).get(target)

    def fan_out(self, neuron: INeuron) -> list[Synapse]:
        return list(self._fan_out.get(neuron, {}).values())

    def fan_in(self, neuron: INeuron) -> list[Synapse]:
        return list(self._fan_in.get(neuron, {}).values())

    def synapses_between(
        self,
        source: Sequence[INeuron],
        target: Sequence[INeuron],
    ) -> list[Synapse]:
        """Synapses from any ``source`` neuron into any ``target`` neuron.

        Ordered by source order, then by insertion order within each fan-out.
        """
        targets = set(target)
        result: list[Synapse] = []
        for src in dict.fromkeys(source):
            for tgt, syn in self._fan_out.get(src, {}).items():
                if tgt in targets:
                    result.append(syn)
        return result

    def add_synapses(self, synapses: Iterable[Synapse]) -> None:
        batch = list(synapses)
        with self.lock:
            seen: set[tuple[INeuron, INeuron]] = set()
            for syn in batch:
                if syn.key in seen or self.get_synapse(syn.source, syn.target) is not None:
                    raise ConnectivityError(f"synapse {syn.source!r} -> {syn.target!r} already exists")
                seen.add(syn.key)
            self.add_neurons(itertools.chain.from_iterable((syn.source, syn.target) for syn in batch))
            for syn in batch:
                self._fan_out.setdefault(syn.source, {})[syn.target] = syn
                self._fan_in.setdefault(syn.target, {})[syn.source] = syn

    def delete_synapse(self, synapse: Synapse) -> None:
        with self.lock:
            out = self._fan_out.get(synapse.source, {})
            if out.get(synapse.target) is not synapse:
                raise KeyError(f"synapse {synapse.source!r} -> {synapse.target!r} is not in the network")
            del out[synapse.target]
            del self._fan_in[synapse.target][synapse.source]

    def replace_synapses(
        self,
        source: Sequence[INeuron],
        target: Sequence[INeuron],
        synapses: Iterable[Synapse],
    ) -> None:
        """Swap every synapse between ``source`` and ``target`` for ``synapses``.

        The batch is checked against the synapses that survive the swap
        before anything is deleted, so a rejected batch leaves the network
        unchanged.
        """
        batch = list(synapses)
        with self.lock:
            replaced = self.synapses_between(source, target)
            replaced_keys = {syn.key for syn in replaced}
            seen: set[tuple[INeuron, INeuron]] = set()
            for syn in batch:
                kept = syn.key not in replaced_keys and self.get_synapse(syn.source, syn.target) is not None
                if syn.key in seen or kept:
                    raise ConnectivityError(f"synapse {syn.source!r} -> {syn.target!r} already exists")
                seen.add(syn.key)
            for syn in replaced:
                self.delete_synapse(syn)
            self.add_synapses(batch)


__all__ = ["Network", "Neuron"]
