"""Seedable randomness for coefficient sampling.

Use set_seed(n) at test start for reproducibility.
Default (no seed) draws from the OS CSPRNG via the secrets module.
"""

import random as _random
import secrets

from fieldpoly.errors import RandomGenerationError


class DeterministicRNG:
    """Seeded PRNG wrapper. When seed is None, uses OS randomness."""

    def __init__(self, seed=None):
        self._seed = seed
        if seed is not None:
            self._rng = _random.Random(seed)
        else:
            self._rng = None  # Use os-level randomness

    @property
    def seed(self):
        return self._seed

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"upper bound must be positive, got {n}")
        if self._rng is not None:
            return self._rng.randrange(n)
        try:
            return secrets.randbelow(n)
        except OSError as exc:
            raise RandomGenerationError("entropy source unavailable") from exc


# Global instance
_global_rng = DeterministicRNG(seed=None)


def set_seed(seed: int | None):
    """Set global seed for reproducibility. None = cryptographic randomness."""
    global _global_rng
    _global_rng = DeterministicRNG(seed=seed)


def get_seed() -> int | None:
    return _global_rng.seed


def randbelow(n: int) -> int:
    return _global_rng.randbelow(n)


def random_field_element(field_order: int) -> int:
    """Uniform element of [0, field_order)."""
    return _global_rng.randbelow(field_order)
