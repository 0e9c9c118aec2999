"""Connection result contracts.

A strategy invocation produces exactly one of :class:`Add`, :class:`Remove`
or :class:`Reset`. Callers decide whether to merge, delete or replace by the
concrete type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from synaptogen.contracts.synapses import Synapse


@dataclass(frozen=True, slots=True)
class Add:
    """Synapses to insert; existing synapses are untouched."""

    synapses: tuple[Synapse, ...] = ()

    @property
    def added(self) -> tuple[Synapse, ...]:
        return self.synapses

    @property
    def removed(self) -> tuple[Synapse, ...]:
        return ()

    @property
    def kind(self) -> str:
        return "add"


@dataclass(frozen=True, slots=True)
class Remove:
    """Existing synapses to delete; nothing is created."""

    synapses: tuple[Synapse, ...] = ()

    @property
    def added(self) -> tuple[Synapse, ...]:
        return ()

    @property
    def removed(self) -> tuple[Synapse, ...]:
        return self.synapses

    @property
    def kind(self) -> str:
        return "remove"


@dataclass(frozen=True, slots=True)
class Reset:
    """Complete replacement for every synapse between the two populations."""

    synapses: tuple[Synapse, ...] = ()

    @property
    def added(self) -> tuple[Synapse, ...]:
        return self.synapses

    @property
    def removed(self) -> tuple[Synapse, ...]:
        return ()

    @property
    def kind(self) -> str:
        return "reset"


ConnectionsResult: TypeAlias = Add | Remove | Reset


__all__ = ["Add", "ConnectionsResult", "Remove", "Reset"]
