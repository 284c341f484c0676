"""Threshold secret sharing with Feldman share verification."""

from __future__ import annotations

from .errors import (
    ConfigurationError,
    InsufficientShares,
    InvalidShares,
    InvalidUsage,
    SecretOutOfRange,
    SecretSharingError,
)
from .feldman import Dealing, FeldmanVSS, derive_commitments, verify_share
from .policy import DEFAULT_GENERATOR, DEFAULT_PRIME
from .shamir import Polynomial, ShamirSecretSharing, Share, recover_secret, split_secret

__all__ = [
    "ConfigurationError",
    "DEFAULT_GENERATOR",
    "DEFAULT_PRIME",
    "Dealing",
    "FeldmanVSS",
    "InsufficientShares",
    "InvalidShares",
    "InvalidUsage",
    "Polynomial",
    "SecretOutOfRange",
    "SecretSharingError",
    "ShamirSecretSharing",
    "Share",
    "derive_commitments",
    "recover_secret",
    "split_secret",
    "verify_share",
]
