"""Density-driven (sparse) connectivity.

Density is the fraction of candidate source/target pairs that carry a
synapse. Changing the density of an already-connected pair of populations
only adds the missing synapses or removes the surplus ones: moving from 10%
to 20% over 100 candidate pairs adds ~10 synapses rather than regenerating 20.
"""

from __future__ import annotations

import itertools
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from synaptogen.connectivity.strategies.base import ConnectionStrategy, candidate_pairs
from synaptogen.contracts.connections import Add, ConnectionsResult, Remove, Reset
from synaptogen.contracts.neurons import INeuron
from synaptogen.contracts.synapses import Synapse
from synaptogen.contracts.tensor import Generator
from synaptogen.errors import require_unit_interval
from synaptogen.stats.sampling import iter_samples, round_half_up, sample_without_replacement


@dataclass(slots=True)
class Sparse(ConnectionStrategy):
    """Connect a fraction ``density`` of all possible source/target pairs.

    With ``equalize_efferents`` every source neuron receives an (almost)
    identical out-degree and the whole synapse set between the populations is
    replaced instead of adjusted.
    """

    name: ClassVar[str] = "sparse"

    density: float = 0.8
    equalize_efferents: bool = False
    allow_self_connection: bool = False
    strength: float = 1.0

    def validate(self) -> None:
        ConnectionStrategy.validate(self)
        require_unit_interval(self.density, name="density")

    def compute(
        self,
        source: Sequence[INeuron],
        target: Sequence[INeuron],
        *,
        existing: Sequence[Synapse],
        generator: Generator,
    ) -> ConnectionsResult:
        return connect_sparse(
            source,
            target,
            self.density,
            existing=existing,
            allow_self_connection=self.allow_self_connection,
            equalize_efferents=self.equalize_efferents,
            strength=self.strength,
            generator=generator,
        )


def connect_sparse(
    source: Sequence[INeuron],
    target: Sequence[INeuron],
    density: float,
    *,
    existing: Sequence[Synapse] = (),
    allow_self_connection: bool = False,
    equalize_efferents: bool = False,
    strength: float = 1.0,
    generator: Generator | None = None,
) -> ConnectionsResult:
    """Move the synapses between ``source`` and ``target`` to ``density``.

    Returns :class:`Add` with the missing synapses, :class:`Remove` with the
    surplus ones, or (``equalize_efferents``) a :class:`Reset`.
    """
    require_unit_interval(density, name="density")
    if equalize_efferents:
        return connect_equalized(
            source,
            target,
            density,
            allow_self_connection=allow_self_connection,
            strength=strength,
            generator=generator,
        )
    if not source or not target:
        return Add()

    pairs = candidate_pairs(source, target, allow_self_connection=allow_self_connection)
    if not pairs:
        return Add()
    pair_set = set(pairs)
    current = [syn for syn in existing if syn.key in pair_set]

    # Counts, not densities, are compared so repeated calls are idempotent.
    wanted = round_half_up(density * len(pairs))
    delta = wanted - len(current)

    if delta >= 0:
        occupied = {syn.key for syn in current}
        available = [pair for pair in pairs if pair not in occupied]
        chosen = sample_without_replacement(available, delta, generator=generator)
        return Add(tuple(Synapse(pre, post, strength) for pre, post in chosen))

    return Remove(tuple(sample_without_replacement(current, -delta, generator=generator)))


def connect_equalized(
    source: Sequence[INeuron],
    target: Sequence[INeuron],
    density: float,
    *,
    allow_self_connection: bool = False,
    strength: float = 1.0,
    generator: Generator | None = None,
) -> Reset:
    """Replace all synapses with ``round(|source| * |target| * density)`` new ones.

    Source neurons are drawn from a reshuffling stream so each one receives
    ``floor`` or ``ceil`` of the mean out-degree; each then picks that many
    distinct targets. Self-connection exclusion may under-fill a source.
    """
    require_unit_interval(density, name="density")
    if not source or not target:
        return Reset()

    connection_count = round_half_up(len(source) * len(target) * density)
    picks = itertools.islice(
        iter_samples(source, generator=generator, restart_if_exhausted=True),
        connection_count,
    )
    quota = Counter(picks)

    synapses: list[Synapse] = []
    for pre in source:
        n_out = quota.get(pre, 0)
        if n_out == 0:
            continue
        pool = [post for post in target if allow_self_connection or post is not pre]
        for post in sample_without_replacement(pool, n_out, generator=generator):
            synapses.append(Synapse(pre, post, strength))
    return Reset(tuple(synapses))


__all__ = ["Sparse", "connect_equalized", "connect_sparse"]
