"""Pytest configuration and fixtures."""

import numpy as np
import pytest
from learnedhash import LinearModel, MLPModel, Point


class ConstantModel:
    """Duck-typed model that always predicts the same value."""

    def __init__(self, value: float):
        self.value = value

    def fit(self, xs, ys):
        pass

    def predict(self, x):
        return self.value


@pytest.fixture
def linear_model():
    """Fixture for an unfitted LinearModel."""
    return LinearModel()


@pytest.fixture
def mlp_model():
    """Fixture for a small, fast MLPModel."""
    return MLPModel(hidden=8, epochs=100, seed=0)


@pytest.fixture(params=['linear', 'mlp'])
def model(request):
    """Fixture that parametrizes over the bundled models."""
    if request.param == 'linear':
        return LinearModel()
    elif request.param == 'mlp':
        return MLPModel(hidden=8, epochs=50, seed=0)


@pytest.fixture
def rng():
    """Seeded numpy generator for reproducibility."""
    return np.random.default_rng(42)


@pytest.fixture
def wide_x_points(rng):
    """200 points with distinct keys, spread far wider along x than y."""
    xs = rng.permutation(10_000)[:200].astype(float)
    ys = rng.uniform(0.0, 1.0, size=200)
    return [Point(i, float(x), float(y)) for i, (x, y) in enumerate(zip(xs, ys))]


@pytest.fixture
def wide_y_points(rng):
    """200 points with distinct keys, spread far wider along y than x."""
    xs = rng.uniform(0.0, 1.0, size=200)
    ys = rng.permutation(10_000)[:200].astype(float)
    return [Point(i, float(x), float(y)) for i, (x, y) in enumerate(zip(xs, ys))]


@pytest.fixture
def constant_model():
    """Factory for models that always predict the given value."""
    return ConstantModel
