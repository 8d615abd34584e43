"""
pytest configuration and shared fixtures.
"""

from fractions import Fraction

import pytest
import numpy as np

from pymatrix import Matrix
from pymatrix.core.config import config_context


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(autouse=True)
def restore_config():
    """Configuration changes made by a test do not leak into the next."""
    with config_context():
        yield


@pytest.fixture
def square_2x2():
    """[[1, 2], [3, 4]]: det -2."""
    return Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def singular_2x2():
    """[[1, 2], [2, 4]]: second row is twice the first."""
    return Matrix.from_rows([[1.0, 2.0], [2.0, 4.0]])


@pytest.fixture
def rect_2x3():
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def exact_3x3():
    """Nonsingular Fraction matrix whose first column needs a row swap."""
    return Matrix.from_rows([
        [Fraction(0), Fraction(2), Fraction(1)],
        [Fraction(1), Fraction(1), Fraction(0)],
        [Fraction(3), Fraction(0), Fraction(1)],
    ])


@pytest.fixture
def well_conditioned(rng):
    """Random 5x5 float matrix, diagonally dominant so it is invertible."""
    data = rng.uniform(-1.0, 1.0, size=(5, 5)) + 5.0 * np.eye(5)
    return Matrix.from_array(data)
