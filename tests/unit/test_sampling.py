from __future__ import annotations

import itertools
from collections import Counter

import pytest

from synaptogen.core.torch_utils import make_generator
from synaptogen.errors import InvalidConfiguration
from synaptogen.stats.sampling import (
    iter_samples,
    round_half_up,
    sample_without_replacement,
    shuffled,
)

pytestmark = pytest.mark.unit

torch = pytest.importorskip("torch")


def test_shuffled_is_a_permutation(generator) -> None:
    items = list(range(20))
    out = shuffled(items, generator=generator)
    assert sorted(out) == items
    assert items == list(range(20))


def test_shuffled_is_deterministic_for_seed() -> None:
    items = [f"n{idx}" for idx in range(30)]
    a = shuffled(items, generator=make_generator(5))
    b = shuffled(items, generator=make_generator(5))
    assert a == b


def test_sample_without_replacement_is_distinct(generator) -> None:
    out = sample_without_replacement(list(range(50)), 10, generator=generator)
    assert len(out) == 10
    assert len(set(out)) == 10


def test_sample_without_replacement_underfills_gracefully(generator) -> None:
    out = sample_without_replacement(["a", "b", "c"], 10, generator=generator)
    assert sorted(out) == ["a", "b", "c"]


def test_sample_without_replacement_edge_cases(generator) -> None:
    assert sample_without_replacement([], 3, generator=generator) == []
    assert sample_without_replacement([1, 2], 0, generator=generator) == []
    with pytest.raises(InvalidConfiguration):
        sample_without_replacement([1, 2], -1, generator=generator)


def test_iter_samples_without_restart_stops(generator) -> None:
    out = list(iter_samples(list(range(6)), generator=generator))
    assert sorted(out) == list(range(6))


def test_iter_samples_with_restart_balances_draws(generator) -> None:
    items = list(range(10))
    out = list(itertools.islice(iter_samples(items, generator=generator, restart_if_exhausted=True), 25))

    assert sorted(out[:10]) == items
    assert sorted(out[10:20]) == items
    counts = Counter(out)
    assert set(counts) == set(items)
    assert set(counts.values()) <= {2, 3}


def test_iter_samples_empty_is_empty(generator) -> None:
    assert list(iter_samples([], generator=generator, restart_if_exhausted=True)) == []


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.0, 0), (0.49, 0), (0.5, 1), (2.5, 3), (3.5, 4), (7.999999999, 8), (28.999999999999996, 29)],
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected
