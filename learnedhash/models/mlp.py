"""Small feed-forward network as a nonlinear rank predictor."""

import logging
import math
from typing import Optional, Sequence

import torch
import torch.nn as nn
import torch.nn.functional as F

from ..errors import FitError
from .model import Model, check_training_data

logger = logging.getLogger(__name__)


class MLPModel(Model):
    """
    One-hidden-layer MLP mapping a feature value to its rank.

    Inputs and targets are standardised before training; the network is
    trained full-batch with Adam on the mean squared error. Weight
    initialisation is seeded from ``seed`` without touching the global
    torch RNG, so two models built with the same arguments and fitted on
    the same data predict identically.

    Args:
        hidden: Width of the hidden layer
        epochs: Number of full-batch optimisation steps
        lr: Adam learning rate
        seed: Seed for weight initialisation

    Example:
        >>> model = MLPModel(hidden=8, epochs=100)
        >>> model.fit([0.0, 1.0, 2.0, 4.0], [0.0, 1.0, 2.0, 3.0])
        >>> slot_guess = model.predict(3.0)
    """

    def __init__(
        self,
        hidden: int = 16,
        epochs: int = 200,
        lr: float = 0.01,
        seed: int = 0,
    ):
        if hidden < 1:
            raise ValueError(f"Invalid hidden width: {hidden}")
        if epochs < 1:
            raise ValueError(f"Invalid number of epochs: {epochs}")
        if lr <= 0.0:
            raise ValueError(f"Invalid learning rate: {lr}")

        self.hidden = hidden
        self.epochs = epochs
        self.lr = lr
        self.seed = seed

        self._net: Optional[nn.Module] = None
        self._x_mean = 0.0
        self._x_std = 1.0
        self._y_mean = 0.0
        self._y_std = 1.0

    @property
    def is_fitted(self) -> bool:
        return self._net is not None

    def _build(self) -> nn.Module:
        with torch.random.fork_rng(devices=[]):
            torch.manual_seed(self.seed)
            return nn.Sequential(
                nn.Linear(1, self.hidden),
                nn.ReLU(),
                nn.Linear(self.hidden, 1),
            )

    def fit(self, xs: Sequence[float], ys: Sequence[float]) -> None:
        check_training_data(xs, ys)

        x = torch.as_tensor(list(xs), dtype=torch.float32).unsqueeze(-1)
        y = torch.as_tensor(list(ys), dtype=torch.float32).unsqueeze(-1)

        x_mean, y_mean = x.mean().item(), y.mean().item()
        x_std = x.std(correction=0).item() or 1.0
        y_std = y.std(correction=0).item() or 1.0
        x_n = (x - x_mean) / x_std
        y_n = (y - y_mean) / y_std

        net = self._build()
        optimizer = torch.optim.Adam(net.parameters(), lr=self.lr)

        loss = None
        for _ in range(self.epochs):
            optimizer.zero_grad()
            loss = F.mse_loss(net(x_n), y_n)
            loss.backward()
            optimizer.step()

        final_loss = loss.item()
        if not math.isfinite(final_loss):
            raise FitError(f"training diverged: loss={final_loss}")

        net.eval()
        self._net = net
        self._x_mean, self._x_std = x_mean, x_std
        self._y_mean, self._y_std = y_mean, y_std
        logger.debug(
            "fitted mlp on %d samples: epochs=%d loss=%g",
            x.shape[0], self.epochs, final_loss,
        )

    def predict(self, x: float) -> float:
        if self._net is None:
            return 0.0
        with torch.no_grad():
            inp = torch.tensor([[(float(x) - self._x_mean) / self._x_std]])
            out = self._net(inp).item()
        return out * self._y_std + self._y_mean

    def __repr__(self) -> str:
        return (
            f"MLPModel(hidden={self.hidden}, epochs={self.epochs}, "
            f"lr={self.lr}, seed={self.seed})"
        )
