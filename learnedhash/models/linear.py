"""Ordinary least-squares linear model."""

import logging
from typing import Sequence

import torch

from ..errors import FitError
from .model import Model, check_training_data

logger = logging.getLogger(__name__)


class LinearModel(Model):
    """
    Linear regression ``y = slope * x + intercept``.

    Fitted in closed form with ``torch.linalg.lstsq`` in float64. Before
    the first fit both coefficients are zero, so every prediction is 0.0.

    Example:
        >>> model = LinearModel()
        >>> model.fit([1.0, 2.0, 3.0], [0.0, 1.0, 2.0])
        >>> round(model.predict(4.0), 6)
        3.0
    """

    def __init__(self, slope: float = 0.0, intercept: float = 0.0):
        self._coef = torch.tensor([slope, intercept], dtype=torch.float64)
        self._fitted = False

    @property
    def slope(self) -> float:
        return self._coef[0].item()

    @property
    def intercept(self) -> float:
        return self._coef[1].item()

    @property
    def is_fitted(self) -> bool:
        return self._fitted

    def fit(self, xs: Sequence[float], ys: Sequence[float]) -> None:
        check_training_data(xs, ys)

        x = torch.as_tensor(list(xs), dtype=torch.float64)
        y = torch.as_tensor(list(ys), dtype=torch.float64)

        # A constant feature leaves the slope undetermined
        if x.numel() < 2 or torch.all(x == x[0]):
            raise FitError("degenerate fit: feature values have zero variance")

        A = torch.stack([x, torch.ones_like(x)], dim=-1)
        solution = torch.linalg.lstsq(A, y.unsqueeze(-1)).solution.squeeze(-1)

        if not torch.isfinite(solution).all():
            raise FitError(f"non-finite coefficients: {solution.tolist()}")

        self._coef = solution
        self._fitted = True
        logger.debug(
            "fitted linear model on %d samples: slope=%g intercept=%g",
            x.numel(), self.slope, self.intercept,
        )

    def predict(self, x: float) -> float:
        slope, intercept = self._coef.tolist()
        return slope * float(x) + intercept

    def __repr__(self) -> str:
        return f"LinearModel(slope={self.slope:g}, intercept={self.intercept:g})"
