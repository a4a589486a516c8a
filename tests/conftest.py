"""Shared fixtures for sickle_sim tests."""

import dataclasses

import numpy as np
import pytest

from sickle_sim.config import default_config


class FixedRng:
    """Stand-in generator whose draws are fixed and counted."""
    
    def __init__(self, value: float):
        self.value = value
        self.draws = 0
    
    def random(self):
        self.draws += 1
        return self.value


@pytest.fixture
def rng():
    """Seeded NumPy generator."""
    return np.random.default_rng(12345)


@pytest.fixture
def config():
    """Small, seeded configuration for fast runs."""
    return dataclasses.replace(
        default_config(),
        seed=42,
        populations=4,
        generations=50,
        workers=1
    )


@pytest.fixture
def fixed_rng():
    """Factory for generators that always draw the same value."""
    return FixedRng
