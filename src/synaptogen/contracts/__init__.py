"""Contracts (dataclasses, enums and protocols) for synaptogen.

This package is *not* the public API surface. Only symbols re-exported from
:mod:`synaptogen.api` are considered semver-stable.
"""

from synaptogen.contracts.connections import Add, ConnectionsResult, Remove, Reset
from synaptogen.contracts.factories import IRegistry, Registry
from synaptogen.contracts.network import INetwork
from synaptogen.contracts.neurons import INeuron, NeuronPosition, Polarity
from synaptogen.contracts.synapses import Direction, Synapse

__all__ = [
    # neurons
    "INeuron",
    "NeuronPosition",
    "Polarity",
    # synapses
    "Direction",
    "Synapse",
    # results
    "Add",
    "Remove",
    "Reset",
    "ConnectionsResult",
    # network
    "INetwork",
    # factories
    "IRegistry",
    "Registry",
]
