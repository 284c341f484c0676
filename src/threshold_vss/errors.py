"""Exception hierarchy raised by the secret sharing schemes."""

from __future__ import annotations


class SecretSharingError(Exception):
    """Base class for every failure reported by :mod:`threshold_vss`."""


class ConfigurationError(SecretSharingError, ValueError):
    """Raised when threshold, share count, modulus or generator are invalid."""


class SecretOutOfRange(SecretSharingError, ValueError):
    """Raised when the secret does not fit into the field ``[0, modulus)``."""


class InsufficientShares(SecretSharingError, ValueError):
    """Raised when fewer than ``threshold`` shares are submitted."""


class InvalidShares(SecretSharingError, ValueError):
    """Raised when submitted shares are malformed or collide on their index."""


class InvalidUsage(SecretSharingError, RuntimeError):
    """Raised when an operation is called before the state it needs exists."""


__all__ = [
    "SecretSharingError",
    "ConfigurationError",
    "SecretOutOfRange",
    "InsufficientShares",
    "InvalidShares",
    "InvalidUsage",
]
