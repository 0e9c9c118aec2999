"""Connectivity generation: layouts, spatial queries and connection strategies."""

from synaptogen.connectivity.positions import (
    PopulationFrame,
    coerce_population_frame,
    generate_positions,
    positions_tensor,
)
from synaptogen.connectivity.spatial import neurons_in_radius

__all__ = [
    "PopulationFrame",
    "coerce_population_frame",
    "generate_positions",
    "neurons_in_radius",
    "positions_tensor",
]
