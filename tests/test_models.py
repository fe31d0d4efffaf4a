"""Tests for rank models."""

import math

import pytest
import torch
from learnedhash import (
    EmptyInputError,
    FitError,
    LengthMismatchError,
    LinearModel,
    MLPModel,
    Model,
)


class TestModelInterface:
    """Tests for the abstract Model capability."""

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            Model()

    def test_subclass_must_implement_predict(self):
        class FitOnly(Model):
            def fit(self, xs, ys):
                pass

        with pytest.raises(TypeError):
            FitOnly()

    def test_predict_batch(self):
        model = LinearModel(slope=2.0, intercept=1.0)
        assert model.predict_batch([0.0, 1.0, 2.0]) == [1.0, 3.0, 5.0]

    def test_validation_shared_by_models(self, model):
        """Every bundled model rejects bad training data the same way."""
        with pytest.raises(EmptyInputError):
            model.fit([], [])
        with pytest.raises(LengthMismatchError):
            model.fit([1.0, 2.0], [0.0])

    def test_errors_are_value_errors(self, model):
        with pytest.raises(ValueError):
            model.fit([], [])


class TestLinearModel:
    """Tests for LinearModel."""

    def test_unfitted_predicts_zero(self, linear_model):
        assert not linear_model.is_fitted
        assert linear_model.predict(123.0) == 0.0

    def test_fit_exact_line(self, linear_model):
        linear_model.fit([1.0, 2.0, 3.0], [0.0, 1.0, 2.0])
        assert linear_model.is_fitted
        assert linear_model.slope == pytest.approx(1.0)
        assert linear_model.intercept == pytest.approx(-1.0)
        assert linear_model.predict(4.0) == pytest.approx(3.0)

    def test_fit_least_squares(self, linear_model):
        xs = [1.0, 2.0, 3.0, 3.0, 5.0]
        ys = [0.0, 1.0, 2.0, 3.0, 4.0]
        linear_model.fit(xs, ys)

        x = torch.tensor(xs, dtype=torch.float64)
        y = torch.tensor(ys, dtype=torch.float64)
        xc = x - x.mean()
        slope = (xc * (y - y.mean())).sum() / (xc ** 2).sum()
        intercept = y.mean() - slope * x.mean()

        assert linear_model.slope == pytest.approx(slope.item())
        assert linear_model.intercept == pytest.approx(intercept.item())

    def test_degenerate_fit(self, linear_model):
        with pytest.raises(FitError):
            linear_model.fit([2.0, 2.0, 2.0], [0.0, 1.0, 2.0])
        with pytest.raises(FitError):
            linear_model.fit([2.0], [0.0])

    def test_failed_fit_keeps_state(self, linear_model):
        linear_model.fit([0.0, 1.0], [0.0, 1.0])
        with pytest.raises(FitError):
            linear_model.fit([5.0, 5.0], [0.0, 1.0])
        with pytest.raises(LengthMismatchError):
            linear_model.fit([5.0, 6.0], [0.0])
        assert linear_model.predict(10.0) == pytest.approx(10.0)

    def test_refit_replaces_state(self, linear_model):
        linear_model.fit([0.0, 1.0], [0.0, 1.0])
        linear_model.fit([0.0, 1.0], [0.0, 2.0])
        assert linear_model.slope == pytest.approx(2.0)

    def test_fit_error_is_arithmetic_error(self):
        assert issubclass(FitError, ArithmeticError)


class TestMLPModel:
    """Tests for MLPModel."""

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            MLPModel(hidden=0)
        with pytest.raises(ValueError):
            MLPModel(epochs=0)
        with pytest.raises(ValueError):
            MLPModel(lr=-1.0)

    def test_unfitted_predicts_zero(self, mlp_model):
        assert not mlp_model.is_fitted
        assert mlp_model.predict(5.0) == 0.0

    def test_fit_then_predict_finite(self, mlp_model):
        xs = [float(i) for i in range(20)]
        ys = [float(i) for i in range(20)]
        mlp_model.fit(xs, ys)
        assert mlp_model.is_fitted
        for x in xs:
            assert math.isfinite(mlp_model.predict(x))

    def test_learns_increasing_ranks(self):
        model = MLPModel(hidden=16, epochs=300, seed=0)
        xs = [float(i) for i in range(50)]
        ys = [float(i) for i in range(50)]
        model.fit(xs, ys)
        assert model.predict(49.0) > model.predict(0.0)

    def test_deterministic_for_same_seed(self):
        xs = [0.0, 1.0, 4.0, 9.0, 16.0]
        ys = [0.0, 1.0, 2.0, 3.0, 4.0]
        a = MLPModel(hidden=8, epochs=50, seed=3)
        b = MLPModel(hidden=8, epochs=50, seed=3)
        a.fit(xs, ys)
        b.fit(xs, ys)
        assert a.predict(7.0) == b.predict(7.0)

    def test_seed_does_not_touch_global_rng(self, mlp_model):
        torch.manual_seed(123)
        expected = torch.rand(1)
        torch.manual_seed(123)
        mlp_model.fit([0.0, 1.0, 2.0], [0.0, 1.0, 2.0])
        assert torch.equal(torch.rand(1), expected)

    def test_constant_features_do_not_fail(self, mlp_model):
        mlp_model.fit([3.0, 3.0, 3.0], [0.0, 1.0, 2.0])
        assert math.isfinite(mlp_model.predict(3.0))
