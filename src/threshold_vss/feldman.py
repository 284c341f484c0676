"""Feldman verifiable secret sharing on top of :mod:`threshold_vss.shamir`.

The dealer publishes ``C_k = g^a_k mod p`` for every coefficient ``a_k`` of the
sharing polynomial. A participant holding the share ``(i, v)`` accepts it when::

    g^v == C_0 * C_1^i * C_2^(i^2) * ... * C_(t-1)^(i^(t-1))    (mod p)

which holds when ``v`` is the evaluation of the committed polynomial at ``i``.
The commitments only bind exponents up to the multiplicative order of ``g``,
so shares dealt here carry the exact, unreduced evaluation ``f(i)``; the
combiner reduces them modulo ``p`` while interpolating.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, NamedTuple, Sequence

from .errors import ConfigurationError, InvalidUsage
from .policy import DEFAULT_GENERATOR, DEFAULT_PRIME, policy
from .shamir import ShamirSecretSharing, Share, _as_shares

_logger = logging.getLogger(__name__)


class Dealing(NamedTuple):
    """Shares to hand out privately and commitments to publish."""

    shares: list[Share]
    commitments: tuple[int, ...]


def derive_commitments(
    coefficients: Sequence[int],
    *,
    generator: int = DEFAULT_GENERATOR,
    modulus: int = DEFAULT_PRIME,
    max_workers: int | None = None,
) -> tuple[int, ...]:
    """Compute ``generator^a mod modulus`` for every coefficient on a bounded pool."""
    if not coefficients:
        return ()
    workers = max(1, min(max_workers or policy.max_workers, len(coefficients)))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="vss-commit") as pool:
        commitments = tuple(pool.map(lambda a: pow(generator, a, modulus), coefficients))
    _logger.debug("derived %d commitments on %d workers", len(commitments), workers)
    return commitments


def verify_share(
    share: Sequence[int],
    commitments: Sequence[int],
    *,
    generator: int = DEFAULT_GENERATOR,
    modulus: int = DEFAULT_PRIME,
) -> bool:
    """Check *share* against published *commitments* without any secret state.

    Returns ``False`` for a share that does not lie on the committed
    polynomial. Raises :class:`InvalidUsage` when *commitments* is empty and
    :class:`~threshold_vss.errors.InvalidShares` when *share* is malformed.
    """
    if not commitments:
        raise InvalidUsage("no commitments to verify against")
    index, value = _as_shares([share])[0]
    if index < 1 or value < 0:
        _logger.debug("rejected share %d: index or value out of range", index)
        return False

    lhs = pow(generator, value, modulus)
    # Horner in the exponent: ((C_(t-1)^i * C_(t-2))^i * ...)^i * C_0
    rhs = 1
    for commitment in reversed(commitments):
        rhs = (pow(rhs, index, modulus) * commitment) % modulus
    valid = lhs == rhs
    _logger.debug("share %d verification %s", index, "passed" if valid else "failed")
    return valid


class FeldmanVSS:
    """Shamir sharing whose shares can be checked against public commitments.

    Every call to :meth:`generate_shares` replaces the commitment set; shares
    from an earlier dealing do not verify against the new one.
    """

    def __init__(
        self,
        threshold: int,
        total_shares: int,
        modulus: int | None = None,
        *,
        generator: int | None = None,
        max_workers: int | None = None,
    ) -> None:
        self._shamir = ShamirSecretSharing(threshold, total_shares, modulus)
        if generator is None:
            generator = policy.default_generator
        if self._shamir.modulus > 2 and not 2 <= generator < self._shamir.modulus:
            raise ConfigurationError(
                f"generator must lie in [2, {self._shamir.modulus})"
            )
        if max_workers is not None and max_workers < 1:
            raise ConfigurationError("max_workers must be at least 1")
        self._generator = generator
        self._max_workers = max_workers
        self._lock = threading.Lock()
        self._commitments: tuple[int, ...] = ()

    @property
    def scheme(self) -> ShamirSecretSharing:
        return self._shamir

    @property
    def threshold(self) -> int:
        return self._shamir.threshold

    @property
    def total_shares(self) -> int:
        return self._shamir.total_shares

    @property
    def modulus(self) -> int:
        return self._shamir.modulus

    @property
    def generator(self) -> int:
        return self._generator

    @property
    def commitments(self) -> tuple[int, ...]:
        with self._lock:
            return self._commitments

    def generate_shares(self, secret: int) -> Dealing:
        """Deal *secret* and publish one commitment per polynomial coefficient."""
        polynomial, shares = self._shamir.deal(secret, reduce=False)
        try:
            commitments = derive_commitments(
                polynomial.coefficients,
                generator=self._generator,
                modulus=self.modulus,
                max_workers=self._max_workers,
            )
        finally:
            polynomial.wipe()
        with self._lock:
            self._commitments = commitments
        _logger.debug("published %d commitments for %d shares", len(commitments), len(shares))
        return Dealing(shares=shares, commitments=commitments)

    def validate_share(self, share: Sequence[int]) -> bool:
        """Return whether *share* lies on the polynomial of the latest dealing."""
        commitments = self.commitments
        if not commitments:
            raise InvalidUsage("no commitments yet, call generate_shares first")
        return verify_share(share, commitments, generator=self._generator, modulus=self.modulus)

    def reconstruct(self, shares: Iterable[Sequence[int]]) -> int:
        return self._shamir.reconstruct(shares)


__all__ = ["Dealing", "FeldmanVSS", "derive_commitments", "verify_share"]
