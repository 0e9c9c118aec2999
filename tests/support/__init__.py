from __future__ import annotations

from .populations import (
    in_degrees,
    labels,
    line_population,
    make_population,
    out_degrees,
    pair_keys,
    strengths,
)

__all__ = [
    "in_degrees",
    "labels",
    "line_population",
    "make_population",
    "out_degrees",
    "pair_keys",
    "strengths",
]
