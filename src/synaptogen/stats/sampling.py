"""Seedable sampling over ordered collections.

Every draw goes through an explicit ``torch.Generator`` so that the same seed
and the same input order always produce the same selection.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

from synaptogen.contracts.tensor import Generator
from synaptogen.core.torch_utils import require_torch
from synaptogen.errors import InvalidConfiguration


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positive values."""
    return int(math.floor(float(value) + 0.5))


def permutation(n: int, *, generator: Generator | None = None) -> list[int]:
    if n <= 0:
        return []
    torch = require_torch()
    return [int(i) for i in torch.randperm(int(n), generator=generator).tolist()]


def shuffled[T](items: Sequence[T], *, generator: Generator | None = None) -> list[T]:
    """Return a uniformly shuffled copy of ``items``."""
    return [items[idx] for idx in permutation(len(items), generator=generator)]


def sample_without_replacement[T](
    items: Sequence[T],
    k: int,
    *,
    generator: Generator | None = None,
) -> list[T]:
    """Draw ``k`` distinct positions from ``items``.

    Asking for more than ``len(items)`` returns every item in shuffled order.
    """
    if k < 0:
        raise InvalidConfiguration(f"sample size must be non-negative, got {k}")
    if k == 0 or not items:
        return []
    return shuffled(items, generator=generator)[:k]


def iter_samples[T](
    items: Sequence[T],
    *,
    generator: Generator | None = None,
    restart_if_exhausted: bool = False,
) -> Iterator[T]:
    """Yield items without replacement, optionally reshuffling once exhausted.

    With ``restart_if_exhausted`` the stream is infinite and every window of
    ``len(items)`` consecutive draws aligned to the start is a permutation.
    """
    if not items:
        return
    while True:
        yield from shuffled(items, generator=generator)
        if not restart_if_exhausted:
            return


__all__ = [
    "iter_samples",
    "permutation",
    "round_half_up",
    "sample_without_replacement",
    "shuffled",
]
