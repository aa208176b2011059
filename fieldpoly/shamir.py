"""Shamir secret sharing on top of Polynomial."""

import logging

from fieldpoly.field import DEFAULT_FIELD_ORDER
from fieldpoly.interpolation import interpolate_at_zero
from fieldpoly.polynomial import Polynomial

logger = logging.getLogger(__name__)


def split_secret(secret: int, threshold: int, num_shares: int,
                 field_order: int = DEFAULT_FIELD_ORDER) -> dict[int, int]:
    """Shares {i: p(i)} of a random degree threshold-1 polynomial with p(0) = secret.

    Any threshold of the num_shares shares recover the secret.
    """
    if threshold < 1:
        raise ValueError(f"threshold must be at least 1, got {threshold}")
    if threshold > num_shares:
        raise ValueError(f"threshold {threshold} exceeds number of shares {num_shares}")
    if num_shares >= field_order:
        raise ValueError(f"{num_shares} shares need a field order above {num_shares}")
    poly = Polynomial.random(field_order, threshold - 1, constant=secret)
    logger.debug("split_secret: %d-of-%d", threshold, num_shares)
    return {i: poly.evaluate(i) for i in range(1, num_shares + 1)}


def recover_secret(shares: dict[int, int],
                   field_order: int = DEFAULT_FIELD_ORDER) -> int:
    """Recover p(0) from a share dict {x: y}."""
    return interpolate_at_zero(list(shares.items()), field_order)
