"""Tests for seedable randomness."""

import pytest

from fieldpoly import rng
from fieldpoly.errors import RandomGenerationError


def test_seeded_sequence_repeats():
    rng.set_seed(11)
    first = [rng.randbelow(1000) for _ in range(5)]
    rng.set_seed(11)
    assert [rng.randbelow(1000) for _ in range(5)] == first
    assert rng.get_seed() == 11

def test_field_element_in_range():
    for seed in (None, 5):
        rng.set_seed(seed)
        for _ in range(20):
            assert 0 <= rng.random_field_element(13) < 13

def test_randbelow_nonpositive():
    with pytest.raises(ValueError):
        rng.randbelow(0)

def test_entropy_failure(monkeypatch):
    def fail(n):
        raise OSError("no entropy")
    rng.set_seed(None)
    monkeypatch.setattr(rng.secrets, "randbelow", fail)
    with pytest.raises(RandomGenerationError) as info:
        rng.random_field_element(7)
    assert isinstance(info.value.__cause__, OSError)
