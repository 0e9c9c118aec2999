"""In-memory network container."""

from synaptogen.network.model import Network, Neuron

__all__ = ["Network", "Neuron"]
