from __future__ import annotations

import pytest

from synaptogen.connectivity.strategies import (
    STRATEGIES,
    AllToAll,
    FixedDegree,
    Sparse,
    strategy_from_config,
)
from synaptogen.contracts.factories import Registry
from synaptogen.contracts.synapses import Direction
from synaptogen.errors import InvalidConfiguration
from synaptogen.stats.distributions import ConstantDistribution, UniformDistribution

pytestmark = pytest.mark.unit


def test_builtin_strategies_are_registered() -> None:
    assert STRATEGIES.keys() == ["all_to_all", "fixed_degree", "sparse"]
    assert isinstance(STRATEGIES.create("sparse", density=0.2), Sparse)


def test_strategy_from_config_coerces_fields() -> None:
    strategy = strategy_from_config(
        {
            "kind": "Fixed-Degree",
            "degree": 3,
            "direction": "OUT",
            "randomizer": {"kind": "uniform", "low": 0.0, "high": 0.5},
            "excitatory_randomizer": 1.5,
            "percent_excitatory": 0.8,
        }
    )
    assert isinstance(strategy, FixedDegree)
    assert strategy.degree == 3
    assert strategy.direction is Direction.OUT
    assert strategy.randomizer == UniformDistribution(0.0, 0.5)
    assert strategy.excitatory_randomizer == ConstantDistribution(1.5)
    assert strategy.percent_excitatory == 0.8


def test_strategy_from_config_passes_instances_through() -> None:
    strategy = AllToAll()
    assert strategy_from_config(strategy) is strategy


@pytest.mark.parametrize(
    "config",
    [
        {"density": 0.5},
        {"kind": "small_world"},
        {"kind": "sparse", "density": 2.0},
        {"kind": "sparse", "sparsity": 0.1},
        {"kind": "fixed_degree", "direction": "sideways"},
        {"kind": "fixed_degree", "degree": -2},
        {"kind": "fixed_degree", "degree": 2.5},
        {"kind": "fixed_degree", "degree": "2"},
        {"kind": "sparse", "density": float("nan")},
    ],
)
def test_strategy_from_config_rejects_invalid(config: dict) -> None:
    with pytest.raises(InvalidConfiguration):
        strategy_from_config(config)


def test_strategy_from_config_rejects_non_mapping() -> None:
    with pytest.raises(TypeError):
        strategy_from_config(["sparse"])  # type: ignore[arg-type]


def test_registry_aliases_and_deprecations() -> None:
    registry: Registry[Sparse] = Registry(label="test")
    registry.register("sparse", Sparse)
    registry.register_alias("random", "sparse", deprecated=True)

    with pytest.warns(DeprecationWarning, match="use 'sparse'"):
        strategy = registry.create("random", density=0.1)
    assert strategy.density == 0.1
    assert "random" in registry
    assert registry.keys() == ["random", "sparse"]

    with pytest.raises(KeyError):
        registry.register("sparse", Sparse)
    with pytest.raises(KeyError):
        registry.register_alias("other", "missing")
    with pytest.raises(KeyError):
        registry.create("missing")


def test_strategy_from_config_accepts_integral_float_degree() -> None:
    strategy = strategy_from_config({"kind": "fixed_degree", "degree": 2.0})
    assert isinstance(strategy, FixedDegree)
    assert strategy.degree == 2
    assert isinstance(strategy.degree, int)
