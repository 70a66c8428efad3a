"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def example_chain():
    """Three-state irreducible aperiodic chain with mu = [5, 22, 30] / 57."""
    P = np.array([
        [0.4, 0.4, 0.2],
        [0.0, 0.5, 0.5],
        [0.1, 0.3, 0.6],
    ])
    mu = np.array([5.0, 22.0, 30.0]) / 57.0
    return P, mu


@pytest.fixture
def two_state_chain():
    """Weather chain: mu = [5/6, 1/6]."""
    P = np.array([
        [0.9, 0.1],
        [0.5, 0.5],
    ])
    mu = np.array([5.0, 1.0]) / 6.0
    return P, mu


@pytest.fixture
def reducible_chain():
    """Block-diagonal chain with two closed classes."""
    return np.array([
        [0.5, 0.5, 0.0, 0.0],
        [0.3, 0.7, 0.0, 0.0],
        [0.0, 0.0, 0.2, 0.8],
        [0.0, 0.0, 0.6, 0.4],
    ])


@pytest.fixture
def random_chain(rng):
    """Dense random 12-state chain (strictly positive, so irreducible and aperiodic)."""
    n = 12
    P = rng.uniform(0.05, 1.0, size=(n, n))
    return P / P.sum(axis=1, keepdims=True)
