"""Euclidean radius queries over neuron positions."""

from __future__ import annotations

from collections.abc import Sequence

from synaptogen.contracts.neurons import INeuron
from synaptogen.contracts.tensor import Tensor
from synaptogen.core.torch_utils import require_torch


def positions_of(neurons: Sequence[INeuron]) -> Tensor:
    """Stack neuron positions into a float64 tensor of shape ``[N, 2]``."""
    torch = require_torch()
    if not neurons:
        return torch.empty((0, 2), dtype=torch.float64)
    return torch.tensor(
        [(n.position.x, n.position.y) for n in neurons],
        dtype=torch.float64,
    )


def distances_from(center: INeuron, pool: Sequence[INeuron]) -> list[float]:
    torch = require_torch()
    if not pool:
        return []
    origin = torch.tensor((center.position.x, center.position.y), dtype=torch.float64)
    diff = positions_of(pool) - origin
    return [float(d) for d in torch.sqrt((diff * diff).sum(dim=1)).tolist()]


def neurons_in_radius[N: INeuron](center: INeuron, pool: Sequence[N], radius: float) -> list[N]:
    """Return pool members within ``radius`` (inclusive) of ``center``, in pool order."""
    if radius < 0 or not pool:
        return []
    return [n for n, dist in zip(pool, distances_from(center, pool), strict=True) if dist <= radius]


__all__ = ["distances_from", "neurons_in_radius", "positions_of"]
