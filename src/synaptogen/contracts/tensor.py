"""Tensor typing utilities (torch optional)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    import torch  # type: ignore[import-not-found]  # pyright: ignore[reportMissingImports]
    Tensor: TypeAlias = "torch.Tensor"
    Generator: TypeAlias = "torch.Generator"
else:
    Tensor: TypeAlias = Any
    Generator: TypeAlias = Any

__all__ = ["Generator", "Tensor"]
