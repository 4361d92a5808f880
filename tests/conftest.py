import numpy as np
import pytest


@pytest.fixture
def word_counts():
    x = np.array([[2, 0], [0, 2], [3, 1], [1, 3]], dtype=float)
    y = np.array([0, 0, 1, 1])
    return x, y


@pytest.fixture
def separable_counts():
    x = np.array([[5, 0], [4, 1], [0, 5], [1, 4]], dtype=float)
    y = np.array([0, 0, 1, 1])
    return x, y


@pytest.fixture
def separated_blobs():
    x = np.array([[0.0, 0.0], [1.0, 1.0], [10.0, 10.0], [11.0, 11.0]])
    y = np.array([0, 0, 1, 1])
    return x, y


@pytest.fixture
def random_counts():
    rng = np.random.default_rng(0)
    x = rng.integers(0, 6, size=(30, 5)).astype(float)
    y = np.arange(30) % 3
    return x, y


@pytest.fixture
def random_blobs():
    rng = np.random.default_rng(1)
    x0 = rng.normal(-1.0, 0.5, size=(20, 3))
    x1 = rng.normal(+1.0, 0.5, size=(20, 3))
    x2 = rng.normal(+3.0, 0.5, size=(20, 3))
    x = np.vstack([x0, x1, x2])
    y = np.array([0] * 20 + [1] * 20 + [2] * 20)
    return x, y
