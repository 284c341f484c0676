"""Default parameters shared by the sharing schemes.

The prime field and the commitment generator are fixed public constants; a
scheme only deviates from them when the caller passes explicit values at
construction. The size of the commitment worker pool is an operational knob
and can be tuned through ``THRESHOLD_VSS_MAX_WORKERS``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_PRIME = 2**31 - 1
DEFAULT_GENERATOR = 2
DEFAULT_MAX_WORKERS = 4


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


@dataclass(frozen=True)
class SharingPolicy:
    """Holds the defaults applied when a scheme is built without overrides."""

    default_prime: int = DEFAULT_PRIME
    default_generator: int = DEFAULT_GENERATOR
    max_workers: int = DEFAULT_MAX_WORKERS


def load_policy() -> SharingPolicy:
    """Load the sharing policy considering environment overrides."""

    return SharingPolicy(
        max_workers=_load_int("THRESHOLD_VSS_MAX_WORKERS", DEFAULT_MAX_WORKERS),
    )


policy = load_policy()


__all__ = [
    "DEFAULT_GENERATOR",
    "DEFAULT_MAX_WORKERS",
    "DEFAULT_PRIME",
    "SharingPolicy",
    "load_policy",
    "policy",
]
