from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from synaptogen.contracts.neurons import NeuronPosition, Polarity
from synaptogen.contracts.synapses import Synapse
from synaptogen.network import Neuron


def make_population(n: int, *, label: str = "n", polarity: Polarity = Polarity.BOTH) -> list[Neuron]:
    return [Neuron(label=f"{label}{idx}", polarity=polarity) for idx in range(n)]


def line_population(n: int, *, spacing: float = 1.0, label: str = "n") -> list[Neuron]:
    """Neurons on the x axis at 0, spacing, 2*spacing, ..."""
    return [Neuron(label=f"{label}{idx}", position=NeuronPosition(idx * spacing, 0.0)) for idx in range(n)]


def pair_keys(synapses: Iterable[Synapse]) -> list[tuple[Neuron, Neuron]]:
    return [syn.key for syn in synapses]  # type: ignore[misc]


def labels(synapses: Iterable[Synapse]) -> list[tuple[str, str]]:
    return [(syn.source.label, syn.target.label) for syn in synapses]  # type: ignore[attr-defined]


def strengths(synapses: Iterable[Synapse]) -> list[float]:
    return [syn.strength for syn in synapses]


def out_degrees(synapses: Sequence[Synapse]) -> Counter:
    return Counter(syn.source for syn in synapses)


def in_degrees(synapses: Sequence[Synapse]) -> Counter:
    return Counter(syn.target for syn in synapses)
