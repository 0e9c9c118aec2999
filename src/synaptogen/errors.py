"""Exception hierarchy for synaptogen.

SynaptogenError (base)
├── InvalidConfiguration - strategy or distribution parameters out of range
└── ConnectivityError    - misuse of a network container (duplicate pairs, missing network)

Both concrete errors also derive from ``ValueError`` so callers that only
guard against bad values keep working.
"""

from __future__ import annotations

import math


class SynaptogenError(Exception):
    """Base exception for all synaptogen-specific errors."""


class InvalidConfiguration(SynaptogenError, ValueError):
    """Invalid configuration parameters.

    Raised at the strategy-invocation boundary before any synapse is proposed.
    """


class ConnectivityError(SynaptogenError, ValueError):
    """A connectivity result could not be applied to a network."""


def require_unit_interval(value: float, *, name: str) -> float:
    value = float(value)
    if math.isnan(value) or value < 0.0 or value > 1.0:
        raise InvalidConfiguration(f"{name} must be within [0,1], got {value}")
    return value


def require_non_negative(value: float, *, name: str) -> float:
    if value < 0:
        raise InvalidConfiguration(f"{name} must be non-negative, got {value}")
    return value


__all__ = [
    "ConnectivityError",
    "InvalidConfiguration",
    "SynaptogenError",
    "require_non_negative",
    "require_unit_interval",
]
