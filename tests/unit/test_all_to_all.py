from __future__ import annotations

import pytest

from synaptogen.connectivity.strategies import AllToAll
from synaptogen.contracts.connections import Add
from synaptogen.network import Network

from tests.support import make_population, pair_keys

pytestmark = pytest.mark.unit

torch = pytest.importorskip("torch")


def test_all_to_all_connects_every_pair(network: Network, generator) -> None:
    pop = make_population(3)
    result = AllToAll().apply(network, pop, pop, generator=generator)

    assert isinstance(result, Add)
    assert len(result.synapses) == 9
    assert len(set(pair_keys(result.synapses))) == 9


def test_all_to_all_without_self_connections(generator) -> None:
    pop = make_population(3)
    synapses = AllToAll(allow_self_connection=False).connect(None, pop, pop, commit=False, generator=generator)
    assert len(synapses) == 6
    assert not any(syn.is_self_connection for syn in synapses)


def test_all_to_all_only_adds_missing_pairs(network: Network, generator) -> None:
    src = make_population(2, label="s")
    tgt = make_population(3, label="t")
    AllToAll().apply(network, src, tgt[:2], generator=generator)

    added = AllToAll().connect(network, src, tgt, generator=generator)

    assert len(added) == 2
    assert all(syn.target is tgt[2] for syn in added)
    assert len(network) == 6
