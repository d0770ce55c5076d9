"""Pytest configuration and shared fixtures for fqmap tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Isolation of the process-wide debug flag
"""

import os

import numpy as np
import pytest
import torch

from fqmap.config import set_debug_enabled, is_debug_enabled


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic CPU torch RNG for tests."""
    generator = torch.Generator(device=torch.device("cpu"))
    generator.manual_seed(_seed())
    return generator


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds(rng: np.random.Generator, torch_rng: torch.Generator) -> None:
    """Auto-use fixture to set global random seeds for reproducibility."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Restore the debug flag after tests that toggle it."""
    prev = is_debug_enabled()
    yield
    set_debug_enabled(prev)
