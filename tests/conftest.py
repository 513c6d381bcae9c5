"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


def _expand_table(table, levels):
    x, y = [], []
    for i, row in enumerate(np.asarray(table, dtype=int)):
        for j, count in enumerate(row):
            x.extend([levels[i]] * int(count))
            y.extend([levels[j]] * int(count))
    return np.array(x), np.array(y)


@pytest.fixture
def expand_table():
    """Turn a count table back into paired observations over levels."""
    return _expand_table


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def uniform_table():
    """Observed equals expected everywhere."""
    return np.array([[10, 10], [10, 10]])


@pytest.fixture
def table_2x2():
    """Row sums [30, 20], column sums [25, 25], expected [[15, 15], [10, 10]]."""
    return np.array([[20, 10], [5, 15]])


@pytest.fixture
def table_3x4(rng):
    """Random 3x4 table with every cell at least 5."""
    return rng.integers(5, 40, size=(3, 4))


@pytest.fixture
def sparse_table():
    """Smallest observed cell is 1, below the default min_freq of 5."""
    return np.array([[1, 2], [3, 4]])
