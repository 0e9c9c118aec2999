"""Pytest configuration."""

from __future__ import annotations

import pytest

from synaptogen.core.torch_utils import make_generator
from synaptogen.network import Network

from tests.support import make_population


@pytest.fixture
def generator():
    return make_generator(1234)


@pytest.fixture
def network() -> Network:
    return Network()


@pytest.fixture
def populations():
    """Two disjoint 4-neuron populations."""
    return make_population(4, label="src"), make_population(4, label="tgt")
