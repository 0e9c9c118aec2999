"""Connection strategies and their name registry."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from synaptogen.connectivity.strategies.all_to_all import AllToAll
from synaptogen.connectivity.strategies.base import (
    ConnectionStrategy,
    apply_result,
    candidate_pairs,
    polarize_synapses,
)
from synaptogen.connectivity.strategies.fixed_degree import (
    FixedDegree,
    connect_fixed_degree,
    connect_fixed_degree_in_radius,
    connect_to_n,
)
from synaptogen.connectivity.strategies.sparse import Sparse, connect_equalized, connect_sparse
from synaptogen.contracts.factories import Registry
from synaptogen.contracts.synapses import Direction
from synaptogen.errors import InvalidConfiguration
from synaptogen.stats.distributions import coerce_distribution

STRATEGIES: Registry[ConnectionStrategy] = Registry(label="connection strategy")
STRATEGIES.register(AllToAll.name, AllToAll)
STRATEGIES.register(FixedDegree.name, FixedDegree)
STRATEGIES.register(Sparse.name, Sparse)

_DISTRIBUTION_FIELDS = ("randomizer", "excitatory_randomizer", "inhibitory_randomizer")


def strategy_from_config(config: ConnectionStrategy | Mapping[str, Any]) -> ConnectionStrategy:
    """Build a strategy from ``{"kind": "sparse", "density": 0.1, ...}``."""

    if isinstance(config, ConnectionStrategy):
        return config
    if not isinstance(config, Mapping):
        raise TypeError("config must be ConnectionStrategy or Mapping[str, Any]")

    params = dict(config)
    kind_raw = params.pop("kind", None)
    if kind_raw is None:
        raise InvalidConfiguration("config.kind is required")
    kind = str(kind_raw).strip().lower().replace("-", "_")
    if kind not in STRATEGIES:
        raise InvalidConfiguration(
            f"Unknown connection strategy {kind_raw!r}; expected one of: {', '.join(STRATEGIES.keys())}"
        )

    if "direction" in params:
        try:
            params["direction"] = Direction(str(params["direction"]).strip().lower())
        except ValueError as exc:
            raise InvalidConfiguration(f"direction must be 'in' or 'out', got {params['direction']!r}") from exc
    degree = params.get("degree")
    if isinstance(degree, float) and degree.is_integer():
        params["degree"] = int(degree)
    for key in _DISTRIBUTION_FIELDS:
        if key in params:
            params[key] = coerce_distribution(params[key])

    try:
        strategy = STRATEGIES.create(kind, **params)
    except TypeError as exc:
        raise InvalidConfiguration(f"Invalid parameters for {kind}: {exc}") from exc
    strategy.validate()
    return strategy


__all__ = [
    "STRATEGIES",
    "AllToAll",
    "ConnectionStrategy",
    "FixedDegree",
    "Sparse",
    "apply_result",
    "candidate_pairs",
    "connect_equalized",
    "connect_fixed_degree",
    "connect_fixed_degree_in_radius",
    "connect_sparse",
    "connect_to_n",
    "polarize_synapses",
    "strategy_from_config",
]
