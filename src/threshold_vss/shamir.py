"""Shamir's threshold secret sharing over a prime field.

:class:`ShamirSecretSharing` splits an integer secret into ``total_shares``
points on a random polynomial of degree ``threshold - 1`` and recovers it from
any ``threshold`` of them by Lagrange interpolation at ``x = 0``.

Two functional helpers are kept for one-shot use:

``split_secret``
    Split an integer secret into ``n`` shares with a reconstruction threshold
    of ``k``.

``recover_secret``
    Interpolate the secret from every point handed in.

The modulus is expected to be prime. Only its sign is checked; a composite
modulus is a caller error that surfaces as :class:`InvalidShares` during
reconstruction when a Lagrange denominator has no inverse.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Sequence

from .errors import ConfigurationError, InsufficientShares, InvalidShares, SecretOutOfRange
from .policy import DEFAULT_PRIME, policy

_logger = logging.getLogger(__name__)


class Share(NamedTuple):
    """A point ``(index, value)`` on the sharing polynomial."""

    index: int
    value: int


@dataclass
class Polynomial:
    """Coefficients ``[a_0, ..., a_{t-1}]`` of a sharing polynomial, ``a_0`` being the secret."""

    coefficients: list[int] = field(repr=False)

    def evaluate(self, x: int, modulus: int | None = None) -> int:
        """Return ``sum(a_k * x**k)``, reduced step by step when *modulus* is given."""
        result = 0
        power = 1
        for coeff in self.coefficients:
            if modulus is None:
                result += coeff * power
                power *= x
            else:
                result = (result + coeff * power) % modulus
                power = (power * x) % modulus
        return result

    def wipe(self) -> None:
        """Overwrite and drop the coefficients."""
        for i in range(len(self.coefficients)):
            self.coefficients[i] = 0
        self.coefficients.clear()


def _random_coefficient(modulus: int) -> int:
    # uniform in [1, modulus); the one-element field only has 0
    if modulus < 2:
        return 0
    return 1 + secrets.randbelow(modulus - 1)


def _as_shares(points: Iterable[Sequence[int]]) -> list[Share]:
    shares: list[Share] = []
    for point in points:
        try:
            index, value = point
        except (TypeError, ValueError) as exc:
            raise InvalidShares(
                f"share must be an (index, value) pair, got {type(point).__name__}"
            ) from exc
        if not isinstance(index, int) or not isinstance(value, int):
            raise InvalidShares("share index and value must be integers")
        shares.append(Share(index, value))
    return shares


def _require_distinct_indices(points: Sequence[Share], modulus: int) -> None:
    seen: set[int] = set()
    for index, _ in points:
        residue = index % modulus
        if residue in seen:
            raise InvalidShares(f"share index {index} is repeated modulo the field")
        seen.add(residue)


def _lagrange_interpolate(x: int, points: Sequence[Share], modulus: int) -> int:
    """Perform Lagrange interpolation at *x* over the given points."""
    total = 0
    for i, (xi, yi) in enumerate(points):
        num = 1
        den = 1
        for j, (xj, _) in enumerate(points):
            if i == j:
                continue
            num = (num * (x - xj)) % modulus
            den = (den * (xi - xj)) % modulus
        try:
            inverse = pow(den, -1, modulus)
        except ValueError as exc:
            raise InvalidShares(
                f"no inverse for the basis denominator of share {xi}; is the modulus prime?"
            ) from exc
        total = (total + yi * num * inverse) % modulus
    return total


class ShamirSecretSharing:
    """Dealer and combiner for a fixed ``(threshold, total_shares, modulus)``."""

    def __init__(self, threshold: int, total_shares: int, modulus: int | None = None) -> None:
        if threshold < 1:
            raise ConfigurationError("threshold must be at least 1")
        if threshold > total_shares:
            raise ConfigurationError(
                f"threshold {threshold} exceeds the number of shares {total_shares}"
            )
        if modulus is None:
            modulus = policy.default_prime
        if modulus <= 0:
            raise ConfigurationError("modulus must be a positive integer")
        self._threshold = threshold
        self._total_shares = total_shares
        self._modulus = modulus

    @property
    def threshold(self) -> int:
        return self._threshold

    @property
    def total_shares(self) -> int:
        return self._total_shares

    @property
    def modulus(self) -> int:
        return self._modulus

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(threshold={self._threshold}, "
            f"total_shares={self._total_shares}, modulus={self._modulus})"
        )

    def deal(self, secret: int, *, reduce: bool = True) -> tuple[Polynomial, list[Share]]:
        """Draw a fresh polynomial for *secret* and evaluate it at ``1..total_shares``.

        The polynomial is handed back to the caller, who owns it and should
        :meth:`~Polynomial.wipe` it once it is no longer needed. With
        ``reduce=False`` the share values are exact integer evaluations, as
        required by exponent-based commitments.
        """
        if secret < 0 or secret >= self._modulus:
            raise SecretOutOfRange(f"secret must lie in [0, {self._modulus})")

        coefficients = [secret]
        coefficients.extend(_random_coefficient(self._modulus) for _ in range(self._threshold - 1))
        polynomial = Polynomial(coefficients)

        modulus = self._modulus if reduce else None
        shares = [
            Share(x, polynomial.evaluate(x, modulus)) for x in range(1, self._total_shares + 1)
        ]
        _logger.debug(
            "dealt %d shares with threshold %d over a %d-bit modulus",
            self._total_shares,
            self._threshold,
            self._modulus.bit_length(),
        )
        return polynomial, shares

    def generate_shares(self, secret: int) -> list[Share]:
        """Split *secret* into ``total_shares`` shares reduced modulo the field."""
        polynomial, shares = self.deal(secret)
        polynomial.wipe()
        return shares

    def reconstruct(self, shares: Iterable[Sequence[int]]) -> int:
        """Recover the secret from the first ``threshold`` of *shares*.

        Shares beyond the threshold are ignored; callers wanting a particular
        subset must select it beforehand.
        """
        points = _as_shares(shares)
        if len(points) < self._threshold:
            raise InsufficientShares(
                f"require at least {self._threshold} shares, got {len(points)}"
            )
        selected = points[: self._threshold]
        _require_distinct_indices(selected, self._modulus)
        secret = _lagrange_interpolate(0, selected, self._modulus)
        _logger.debug("reconstructed secret from share indices %s", [s.index for s in selected])
        return secret


def split_secret(secret: int, *, n: int, k: int, modulus: int = DEFAULT_PRIME) -> list[Share]:
    """Split ``secret`` into ``n`` shares with threshold ``k``."""
    return ShamirSecretSharing(k, n, modulus).generate_shares(secret)


def recover_secret(points: Iterable[Sequence[int]], *, modulus: int = DEFAULT_PRIME) -> int:
    """
    Recover secret integer from every (x, y) point given.
    """
    if modulus <= 0:
        raise ConfigurationError("modulus must be a positive integer")
    shares = _as_shares(points)
    if not shares:
        raise InsufficientShares("at least one share is required")
    _require_distinct_indices(shares, modulus)
    return _lagrange_interpolate(0, shares, modulus)


__all__ = [
    "Polynomial",
    "Share",
    "ShamirSecretSharing",
    "recover_secret",
    "split_secret",
]
