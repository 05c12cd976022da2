"""Pytest configuration and shared fixtures for qslice tests.

This module provides:
- A deterministic numpy RNG for building random test matrices
- Global seeding and debug-mode isolation for every test
"""

import os
from typing import Iterator

import numpy as np
import pytest
import torch

from qslice.diagnostics import is_debug_enabled, set_debug_enabled


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function")
def random_complex(rng: np.random.Generator):
    """Factory for random complex arrays of a given shape."""

    def make(*shape: int) -> np.ndarray:
        return rng.normal(size=shape) + 1j * rng.normal(size=shape)

    return make


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set global random seeds for reproducibility."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode() -> Iterator[None]:
    """Keep debug-mode changes made by a test from leaking into the next one."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)
