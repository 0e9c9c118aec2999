"""Connection strategy base class.

A strategy turns two ordered neuron populations into a
:data:`~synaptogen.contracts.connections.ConnectionsResult`. Subclasses only
implement :meth:`ConnectionStrategy.compute`; snapshotting existing synapses,
polarizing new ones and applying the result to a network happen here.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar, Self

from synaptogen.contracts.connections import Add, ConnectionsResult, Remove, Reset
from synaptogen.contracts.network import INetwork
from synaptogen.contracts.neurons import INeuron
from synaptogen.contracts.synapses import Synapse
from synaptogen.contracts.tensor import Generator
from synaptogen.core.torch_utils import resolve_generator
from synaptogen.errors import ConnectivityError, require_unit_interval
from synaptogen.stats.distributions import IProbabilityDistribution
from synaptogen.stats.sampling import round_half_up, sample_without_replacement


@dataclass(slots=True, kw_only=True)
class ConnectionStrategy(ABC):
    """Shared configuration for every strategy.

    percent_excitatory: fraction in [0,1] of newly added synapses made
        excitatory; ``None`` keeps the sign chosen at construction.
    excitatory_randomizer / inhibitory_randomizer: when set, polarization
        redraws magnitudes from these instead of reusing the current strength.
    seed: seeds the generator used when a call does not pass one.
    verbose: print a one-line summary per invocation.
    """

    name: ClassVar[str] = "strategy"

    percent_excitatory: float | None = 0.5
    excitatory_randomizer: IProbabilityDistribution | None = None
    inhibitory_randomizer: IProbabilityDistribution | None = None
    seed: int | None = None
    verbose: bool = False

    @abstractmethod
    def compute(
        self,
        source: Sequence[INeuron],
        target: Sequence[INeuron],
        *,
        existing: Sequence[Synapse],
        generator: Generator,
    ) -> ConnectionsResult:
        """Compute connectivity from a read-only snapshot of existing synapses."""

    def validate(self) -> None:
        if self.percent_excitatory is not None:
            require_unit_interval(self.percent_excitatory, name="percent_excitatory")

    def apply(
        self,
        network: INetwork | None,
        source: Sequence[INeuron],
        target: Sequence[INeuron],
        *,
        commit: bool = True,
        generator: Generator | None = None,
    ) -> ConnectionsResult:
        """Compute, polarize and (when ``commit``) apply connectivity.

        The network lock is held from the existing-synapse snapshot until the
        result has been applied.
        """
        self.validate()
        if network is None and commit:
            raise ConnectivityError("a network is required when commit=True")
        gen = resolve_generator(generator, self.seed)
        source = _unique(source)
        target = _unique(target)

        if network is None:
            result = self.compute(source, target, existing=(), generator=gen)
            self._polarize(result, gen)
        else:
            with network.lock:
                existing = tuple(network.synapses_between(source, target))
                result = self.compute(source, target, existing=existing, generator=gen)
                self._polarize(result, gen)
                if commit:
                    apply_result(network, result, source, target)

        if self.verbose:
            print(
                f"[{self.name}] "
                f"result={result.kind} "
                f"added={len(result.added)} "
                f"removed={len(result.removed)} "
                f"sources={len(source)} "
                f"targets={len(target)} "
                f"commit={commit}"
            )
        return result

    def connect(
        self,
        network: INetwork | None,
        source: Sequence[INeuron],
        target: Sequence[INeuron],
        *,
        commit: bool = True,
        generator: Generator | None = None,
    ) -> list[Synapse]:
        """Apply the strategy and return only the synapses it created."""
        return list(self.apply(network, source, target, commit=commit, generator=generator).added)

    def copy(self) -> Self:
        return copy.deepcopy(self)

    def _polarize(self, result: ConnectionsResult, generator: Generator) -> None:
        if self.percent_excitatory is None or not result.added:
            return
        polarize_synapses(
            result.added,
            self.percent_excitatory,
            excitatory_randomizer=self.excitatory_randomizer,
            inhibitory_randomizer=self.inhibitory_randomizer,
            generator=generator,
        )

    def __str__(self) -> str:
        return self.name


def polarize_synapses(
    synapses: Sequence[Synapse],
    percent_excitatory: float,
    *,
    excitatory_randomizer: IProbabilityDistribution | None = None,
    inhibitory_randomizer: IProbabilityDistribution | None = None,
    generator: Generator | None = None,
) -> None:
    """Make exactly ``round(percent_excitatory * len(synapses))`` synapses excitatory.

    The excitatory subset is drawn without replacement; the remainder become
    inhibitory. Magnitudes are kept unless a randomizer for that sign is given.
    """
    require_unit_interval(percent_excitatory, name="percent_excitatory")
    if not synapses:
        return
    n_excitatory = round_half_up(percent_excitatory * len(synapses))
    chosen = sample_without_replacement(range(len(synapses)), n_excitatory, generator=generator)
    excitatory = set(chosen)
    for idx, syn in enumerate(synapses):
        if idx in excitatory:
            magnitude = _magnitude(syn, excitatory_randomizer, generator)
            syn.strength = abs(magnitude)
        else:
            magnitude = _magnitude(syn, inhibitory_randomizer, generator)
            syn.strength = -abs(magnitude)


def apply_result(
    network: INetwork,
    result: ConnectionsResult,
    source: Sequence[INeuron],
    target: Sequence[INeuron],
) -> None:
    """Insert, delete or replace synapses according to the result type."""
    if isinstance(result, Add):
        network.add_synapses(result.synapses)
    elif isinstance(result, Remove):
        for syn in result.synapses:
            network.delete_synapse(syn)
    elif isinstance(result, Reset):
        network.replace_synapses(source, target, result.synapses)
    else:
        raise TypeError(f"Unknown connections result: {type(result).__name__}")


def candidate_pairs(
    source: Sequence[INeuron],
    target: Sequence[INeuron],
    *,
    allow_self_connection: bool,
) -> list[tuple[INeuron, INeuron]]:
    """Ordered cartesian product of ``source`` x ``target`` minus excluded self pairs."""
    return [
        (src, tgt)
        for src in source
        for tgt in target
        if allow_self_connection or src is not tgt
    ]


def _magnitude(
    synapse: Synapse,
    randomizer: IProbabilityDistribution | None,
    generator: Generator | None,
) -> float:
    if randomizer is None:
        return synapse.strength
    return randomizer.sample(generator=generator)


def _unique(neurons: Sequence[INeuron]) -> list[INeuron]:
    return list(dict.fromkeys(neurons))


__all__ = [
    "ConnectionStrategy",
    "apply_result",
    "candidate_pairs",
    "polarize_synapses",
]
