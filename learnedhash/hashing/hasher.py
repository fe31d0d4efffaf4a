"""Model-driven bucket index computation."""

import math
from typing import Sequence

from ..geometry import Axis, Key


class LearnedHasher:
    """
    Hash function backed by a trained rank model.

    The coordinate on ``axis`` is fed to ``model.predict``; the prediction
    is truncated toward zero and reduced modulo the table capacity, so the
    result is always a valid slot whatever the model returns.

    Args:
        model: Any object with ``fit(xs, ys)`` and ``predict(x)``
        axis: Coordinate the model was trained against
    """

    def __init__(self, model, axis: Axis = Axis.X):
        self._model = model
        self._axis = axis

    @property
    def model(self):
        return self._model

    @property
    def axis(self) -> Axis:
        return self._axis

    @axis.setter
    def axis(self, axis: Axis):
        self._axis = axis

    def feature(self, key: Sequence[float]) -> float:
        """Feature value of ``key`` on the trained axis."""
        return float(key[self._axis.index])

    def hash(self, key: Key, capacity: int) -> int:
        """
        Slot of ``key`` in a table of ``capacity`` buckets.

        Returns:
            Integer in ``[0, capacity)``. Non-finite predictions map to 0.
        """
        if capacity <= 0:
            raise ValueError(f"Invalid capacity: {capacity}")

        prediction = float(self._model.predict(self.feature(key)))
        if not math.isfinite(prediction):
            return 0
        return math.trunc(prediction) % capacity

    def __call__(self, key: Key, capacity: int) -> int:
        return self.hash(key, capacity)

    def __repr__(self) -> str:
        return f"LearnedHasher(model={self._model!r}, axis={self._axis.name})"


def make_hash(hasher: LearnedHasher, key: Key, capacity: int) -> int:
    """Slot of ``key`` under ``hasher`` for a table of ``capacity`` buckets."""
    return hasher.hash(key, capacity)
