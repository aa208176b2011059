"""Pytest configuration: project root on sys.path, seeded randomness."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fieldpoly import rng  # noqa: E402


@pytest.fixture(autouse=True)
def seeded_rng():
    rng.set_seed(42)
    yield
    rng.set_seed(None)
