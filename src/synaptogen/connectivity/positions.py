"""Deterministic 2D population layouts."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal, cast

from synaptogen.contracts.neurons import NeuronPosition
from synaptogen.contracts.tensor import Tensor
from synaptogen.core.torch_utils import make_generator, require_torch

Layout = Literal["grid", "random", "ring", "line"]
_LAYOUTS = frozenset({"grid", "random", "ring", "line"})


@dataclass(frozen=True, slots=True)
class PopulationFrame:
    origin: tuple[float, float]
    extent: tuple[float, float]
    layout: Layout
    seed: int | None = None


def generate_positions(
    frame: PopulationFrame | Mapping[str, Any],
    n: int,
) -> list[NeuronPosition]:
    """Return ``n`` positions laid out inside ``frame``."""

    frame_obj = coerce_population_frame(frame)
    points = positions_tensor(frame_obj, n)
    if int(points.numel()) == 0:
        return []
    return [NeuronPosition(float(row[0]), float(row[1])) for row in points.tolist()]


def positions_tensor(frame: PopulationFrame | Mapping[str, Any], n: int) -> Tensor:
    """Generate positions as a float64 tensor of shape ``[n, 2]``."""

    torch = require_torch()
    frame_obj = coerce_population_frame(frame)
    n = int(n)
    dtype = torch.float64
    if n <= 0:
        return torch.empty((0, 2), dtype=dtype)

    ox, oy = frame_obj.origin
    ex, ey = frame_obj.extent
    layout = frame_obj.layout

    if layout == "line":
        xs = _linspace(ox, ox + ex, n)
        ys = torch.full((n,), oy + 0.5 * ey, dtype=dtype)
        return torch.stack((xs, ys), dim=1)

    if layout == "grid":
        cols, rows = _grid_dims(n, ex, ey)
        xs = _linspace(ox, ox + ex, cols)
        ys = _linspace(oy, oy + ey, rows)
        grid_x = xs.repeat(rows)
        grid_y = ys.repeat_interleave(cols)
        return torch.stack((grid_x, grid_y), dim=1)[:n]

    if layout == "ring":
        cx = ox + 0.5 * ex
        cy = oy + 0.5 * ey
        radius = 0.5 * min(abs(ex), abs(ey))
        angles = torch.arange(n, dtype=dtype) * (2.0 * math.pi / n)
        xs = cx + radius * torch.cos(angles)
        ys = cy + radius * torch.sin(angles)
        return torch.stack((xs, ys), dim=1)

    if layout == "random":
        generator = make_generator(frame_obj.seed)
        noise = torch.rand((n, 2), dtype=dtype, generator=generator)
        origin = torch.tensor((ox, oy), dtype=dtype)
        extent = torch.tensor((ex, ey), dtype=dtype)
        return origin.unsqueeze(0) + noise * extent.unsqueeze(0)

    raise ValueError(f"Unknown population layout: {layout}")


def coerce_population_frame(frame: PopulationFrame | Mapping[str, Any]) -> PopulationFrame:
    if isinstance(frame, PopulationFrame):
        return frame

    if not isinstance(frame, Mapping):
        raise TypeError("frame must be PopulationFrame or Mapping[str, Any]")

    origin = _as_xy_tuple(frame.get("origin", (0.0, 0.0)), name="origin")
    extent = _as_xy_tuple(frame.get("extent"), name="extent")
    layout_raw = frame.get("layout")
    if layout_raw is None:
        raise ValueError("frame.layout is required")
    layout = str(layout_raw).strip().lower()
    if layout not in _LAYOUTS:
        raise ValueError("frame.layout must be one of: grid, random, ring, line")

    seed_raw = frame.get("seed")
    seed = None if seed_raw is None else int(seed_raw)
    return PopulationFrame(origin=origin, extent=extent, layout=cast(Layout, layout), seed=seed)


def _as_xy_tuple(value: Any, *, name: str) -> tuple[float, float]:
    if not isinstance(value, Sequence) or len(value) != 2:
        raise ValueError(f"frame.{name} must be a sequence of length 2")
    return (float(value[0]), float(value[1]))


def _linspace(start: float, end: float, count: int) -> Tensor:
    torch = require_torch()
    if count <= 1:
        return torch.full((1,), start + 0.5 * (end - start), dtype=torch.float64)
    return torch.linspace(start, end, count, dtype=torch.float64)


def _grid_dims(n: int, extent_x: float, extent_y: float) -> tuple[int, int]:
    aspect = abs(extent_x / extent_y) if extent_y != 0.0 else 1.0
    cols = max(1, int(math.ceil(math.sqrt(n * aspect))))
    rows = max(1, int(math.ceil(n / cols)))
    return cols, rows


__all__ = ["PopulationFrame", "coerce_population_frame", "generate_positions", "positions_tensor"]
