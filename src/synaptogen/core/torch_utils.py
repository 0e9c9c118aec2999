"""Torch utilities shared across the codebase."""

from __future__ import annotations

import importlib
from typing import Any

from synaptogen.contracts.tensor import Generator


def require_torch() -> Any:
    try:
        return importlib.import_module("torch")
    except Exception as exc:  # pragma: no cover - optional dependency
        raise RuntimeError("Torch is required to sample synaptogen connectivity.") from exc


def make_generator(seed: int | None = None) -> Generator:
    """Return a CPU ``torch.Generator``; unseeded generators draw a fresh seed."""
    torch = require_torch()
    generator = torch.Generator()
    if seed is None:
        generator.seed()
    else:
        generator.manual_seed(int(seed))
    return generator


def resolve_generator(generator: Generator | None, seed: int | None = None) -> Generator:
    if generator is not None:
        return generator
    return make_generator(seed)


__all__ = ["make_generator", "require_torch", "resolve_generator"]
