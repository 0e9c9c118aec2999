"""Fixed in-degree / out-degree connectivity."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import dataclass, field
from typing import ClassVar

from synaptogen.connectivity.spatial import neurons_in_radius
from synaptogen.connectivity.strategies.base import ConnectionStrategy
from synaptogen.contracts.connections import Add, ConnectionsResult
from synaptogen.contracts.neurons import INeuron
from synaptogen.contracts.synapses import Direction, Synapse
from synaptogen.contracts.tensor import Generator
from synaptogen.errors import InvalidConfiguration, require_non_negative
from synaptogen.stats.distributions import IProbabilityDistribution, NormalDistribution
from synaptogen.stats.sampling import sample_without_replacement


@dataclass(slots=True)
class FixedDegree(ConnectionStrategy):
    """For each source neuron, connect to or from at most ``degree`` target neurons.

    ``Direction.IN`` gives every source neuron a bounded in-degree (synapses
    point from the selected target neuron to it); ``Direction.OUT`` bounds its
    out-degree. With ``use_radius`` only targets within ``radius`` are eligible.
    """

    name: ClassVar[str] = "fixed_degree"

    degree: int = 2
    direction: Direction = Direction.IN
    use_radius: bool = False
    radius: float = 200.0
    allow_self_connections: bool = False
    randomizer: IProbabilityDistribution = field(default_factory=NormalDistribution)

    def validate(self) -> None:
        ConnectionStrategy.validate(self)
        if isinstance(self.degree, bool) or not isinstance(self.degree, int):
            raise InvalidConfiguration(f"degree must be an integer, got {self.degree!r}")
        require_non_negative(self.degree, name="degree")
        if self.use_radius and self.radius <= 0:
            raise InvalidConfiguration(f"radius must be positive when use_radius is set, got {self.radius}")

    def compute(
        self,
        source: Sequence[INeuron],
        target: Sequence[INeuron],
        *,
        existing: Sequence[Synapse],
        generator: Generator,
    ) -> ConnectionsResult:
        existing_pairs = {syn.key for syn in existing}
        if self.use_radius:
            synapses = connect_fixed_degree_in_radius(
                source,
                target,
                self.degree,
                self.radius,
                direction=self.direction,
                allow_self_connection=self.allow_self_connections,
                randomizer=self.randomizer,
                exclude=existing_pairs,
                generator=generator,
            )
        else:
            synapses = connect_fixed_degree(
                source,
                target,
                self.degree,
                direction=self.direction,
                allow_self_connection=self.allow_self_connections,
                randomizer=self.randomizer,
                exclude=existing_pairs,
                generator=generator,
            )
        return Add(tuple(synapses))


def connect_fixed_degree(
    source: Sequence[INeuron],
    target: Sequence[INeuron],
    degree: int,
    *,
    direction: Direction = Direction.IN,
    allow_self_connection: bool = False,
    randomizer: IProbabilityDistribution | None = None,
    exclude: Collection[tuple[INeuron, INeuron]] = (),
    generator: Generator | None = None,
) -> list[Synapse]:
    """For each neuron in ``source`` connect to or from at most ``degree`` neurons in ``target``."""
    synapses: list[Synapse] = []
    for neuron in source:
        synapses.extend(
            connect_to_n(
                neuron,
                target,
                degree,
                direction=direction,
                allow_self_connection=allow_self_connection,
                randomizer=randomizer,
                exclude=exclude,
                generator=generator,
            )
        )
    return synapses


def connect_fixed_degree_in_radius(
    source: Sequence[INeuron],
    target: Sequence[INeuron],
    degree: int,
    radius: float,
    *,
    direction: Direction = Direction.IN,
    allow_self_connection: bool = False,
    randomizer: IProbabilityDistribution | None = None,
    exclude: Collection[tuple[INeuron, INeuron]] = (),
    generator: Generator | None = None,
) -> list[Synapse]:
    """Like :func:`connect_fixed_degree` but only within ``radius`` of each source neuron."""
    synapses: list[Synapse] = []
    for neuron in source:
        synapses.extend(
            connect_to_n(
                neuron,
                neurons_in_radius(neuron, target, radius),
                degree,
                direction=direction,
                allow_self_connection=allow_self_connection,
                randomizer=randomizer,
                exclude=exclude,
                generator=generator,
            )
        )
    return synapses


def connect_to_n(
    neuron: INeuron,
    pool: Sequence[INeuron],
    n: int,
    *,
    direction: Direction = Direction.IN,
    allow_self_connection: bool = False,
    randomizer: IProbabilityDistribution | None = None,
    exclude: Collection[tuple[INeuron, INeuron]] = (),
    generator: Generator | None = None,
) -> list[Synapse]:
    """Connect ``neuron`` to (``OUT``) or from (``IN``) up to ``n`` distinct neurons of ``pool``.

    Strengths are drawn from ``randomizer`` and signed by the polarity of the
    synapse's source neuron. Pairs listed in ``exclude`` are never produced.
    """
    require_non_negative(n, name="n")
    randomizer = randomizer or NormalDistribution(0.0, 1.0)
    candidates = [
        other
        for other in dict.fromkeys(pool)
        if (allow_self_connection or other is not neuron)
        and _pair(neuron, other, direction) not in exclude
    ]
    chosen = sample_without_replacement(candidates, n, generator=generator)
    draws = randomizer.sample_n(len(chosen), generator=generator)

    synapses: list[Synapse] = []
    for other, draw in zip(chosen, draws, strict=True):
        pre, post = _pair(neuron, other, direction)
        synapses.append(Synapse(pre, post, pre.polarity.apply(draw)))
    return synapses


def _pair(neuron: INeuron, other: INeuron, direction: Direction) -> tuple[INeuron, INeuron]:
    if direction == Direction.IN:
        return (other, neuron)
    return (neuron, other)


__all__ = [
    "FixedDegree",
    "connect_fixed_degree",
    "connect_fixed_degree_in_radius",
    "connect_to_n",
]
