from __future__ import annotations

import threading

import pytest

from synaptogen.connectivity.strategies import Sparse, apply_result
from synaptogen.contracts.connections import Add, Remove, Reset
from synaptogen.contracts.synapses import Synapse
from synaptogen.errors import ConnectivityError
from synaptogen.network import Network

from tests.support import make_population

pytestmark = pytest.mark.unit

torch = pytest.importorskip("torch")


def test_commit_requires_network(populations) -> None:
    src, tgt = populations
    with pytest.raises(ConnectivityError):
        Sparse(density=0.5).apply(None, src, tgt)


def test_duplicate_neurons_in_population_are_collapsed(network: Network, generator) -> None:
    src = make_population(2, label="s")
    tgt = make_population(2, label="t")
    result = Sparse(density=1.0).apply(network, src + src, tgt + tgt[:1], generator=generator)
    assert len(result.synapses) == 4


def test_apply_result_dispatches_on_result_type(network: Network) -> None:
    src = make_population(2, label="s")
    tgt = make_population(2, label="t")
    first = Synapse(src[0], tgt[0])
    second = Synapse(src[1], tgt[1])

    apply_result(network, Add((first, second)), src, tgt)
    assert len(network) == 2

    apply_result(network, Remove((first,)), src, tgt)
    assert network.synapses == [second]

    replacement = Synapse(src[0], tgt[1])
    apply_result(network, Reset((replacement,)), src, tgt)
    assert network.synapses == [replacement]

    with pytest.raises(TypeError):
        apply_result(network, object(), src, tgt)  # type: ignore[arg-type]


def test_result_views() -> None:
    syn = Synapse(*make_population(2))
    assert Add((syn,)).added == (syn,) and Add((syn,)).removed == ()
    assert Remove((syn,)).added == () and Remove((syn,)).removed == (syn,)
    assert Reset((syn,)).added == (syn,)
    assert [r.kind for r in (Add(), Remove(), Reset())] == ["add", "remove", "reset"]


def test_verbose_prints_summary(network: Network, populations, generator, capsys) -> None:
    src, tgt = populations
    Sparse(density=0.5, verbose=True).apply(network, src, tgt, generator=generator)
    out = capsys.readouterr().out
    assert out.startswith("[sparse] result=add added=8 removed=0 sources=4 targets=4")


def test_seeded_strategy_is_reproducible(populations) -> None:
    src, tgt = populations
    strategy = Sparse(density=0.5, seed=21)
    a = strategy.apply(None, src, tgt, commit=False)
    b = strategy.apply(None, src, tgt, commit=False)
    assert [s.key for s in a.synapses] == [s.key for s in b.synapses]
    assert [s.strength for s in a.synapses] == [s.strength for s in b.synapses]


def test_concurrent_applications_are_serialized(network: Network) -> None:
    src = make_population(10, label="s")
    tgt = make_population(10, label="t")
    errors: list[Exception] = []

    def worker(seed: int) -> None:
        try:
            Sparse(density=0.4, seed=seed).apply(network, src, tgt)
        except Exception as exc:  # pragma: no cover - surfaced via assertion
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(seed,)) for seed in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(network) == 40
