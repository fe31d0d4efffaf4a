"""
Trainer: training-set preparation for rank models
=================================================

Turns raw coordinate pairs into a ``(feature, rank)`` training set:

1. Pick the axis with the strictly larger variance as the feature
   (ties go to Y).
2. Stable-sort the points along that axis.
3. Label each point with its position in the sorted order.

The prepared set is then handed to any Model through :meth:`Trainer.train`.
"""

import logging
from typing import List, Sequence, Tuple

from ..errors import EmptyInputError
from ..geometry import (
    Axis,
    Point,
    extract_x,
    extract_y,
    sort_by_x,
    sort_by_y,
    variance,
)
from .model import check_training_data

logger = logging.getLogger(__name__)


def _select_axis(points: List[Point]) -> Tuple[Axis, List[float]]:
    """Sort ``points`` in place along the axis of larger variance."""
    if variance(extract_x(points)) > variance(extract_y(points)):
        sort_by_x(points)
        return Axis.X, extract_x(points)
    sort_by_y(points)
    return Axis.Y, extract_y(points)


def _ranks(n: int) -> List[float]:
    return [float(i) for i in range(n)]


class Trainer:
    """
    Prepares and holds the training set of a rank model.

    Example:
        >>> trainer, points = Trainer.with_data([1.0, 3.0, 2.0], [1.0, 1.0, 1.0])
        >>> trainer.axis, trainer.train_x, trainer.train_y
        (<Axis.X: 0>, [1.0, 2.0, 3.0], [0.0, 1.0, 2.0])
        >>> trainer.train(LinearModel())
    """

    def __init__(self):
        self._train_x: List[float] = []
        self._train_y: List[float] = []
        self._axis = Axis.X

    @property
    def train_x(self) -> List[float]:
        """Sorted feature values."""
        return self._train_x

    @property
    def train_y(self) -> List[float]:
        """Rank labels ``0 .. n-1``."""
        return self._train_y

    @property
    def axis(self) -> Axis:
        """Axis the features were taken from."""
        return self._axis

    def set_train_x(self, xs: Sequence[float]):
        self._train_x = list(xs)

    def set_train_y(self, ys: Sequence[float]):
        self._train_y = list(ys)

    def set_axis(self, axis: Axis):
        self._axis = axis

    @classmethod
    def with_data(
        cls,
        xs: Sequence[float],
        ys: Sequence[float],
    ) -> Tuple["Trainer", List[Point]]:
        """
        Build a trainer from two coordinate sequences.

        Returns:
            The prepared trainer and the points sorted along its axis
        """
        trainer = cls()
        points = trainer.preprocess(xs, ys)
        return trainer, points

    def preprocess(self, xs: Sequence[float], ys: Sequence[float]) -> List[Point]:
        """
        Prepare the training set from two coordinate sequences.

        Point ``i`` is built from ``(xs[i], ys[i])`` and gets id ``i``.
        Nothing is modified when validation fails.

        Args:
            xs: x coordinates
            ys: y coordinates, same length as ``xs``

        Returns:
            Points sorted along the selected axis

        Raises:
            EmptyInputError: ``xs`` is empty.
            LengthMismatchError: ``xs`` and ``ys`` differ in length.
        """
        check_training_data(xs, ys)

        points = [Point(i, float(x), float(y)) for i, (x, y) in enumerate(zip(xs, ys))]
        axis, train_x = _select_axis(points)

        self.set_axis(axis)
        self.set_train_x(train_x)
        self.set_train_y(_ranks(len(points)))
        return points

    @classmethod
    def with_points(cls, points: List[Point]) -> "Trainer":
        """
        Build a trainer from existing points.

        ``points`` is sorted in place along the selected axis.

        Raises:
            EmptyInputError: ``points`` is empty.
        """
        if not points:
            raise EmptyInputError()

        trainer = cls()
        axis, train_x = _select_axis(points)
        trainer.set_axis(axis)
        trainer.set_train_x(train_x)
        trainer.set_train_y(_ranks(len(points)))
        return trainer

    def train(self, model) -> None:
        """
        Fit ``model`` on the prepared training set.

        Errors raised by ``model.fit`` propagate unchanged.
        """
        logger.debug(
            "training %r on %d samples along %s",
            model, len(self._train_x), self._axis.name,
        )
        model.fit(self._train_x, self._train_y)

    def __len__(self) -> int:
        return len(self._train_x)

    def __repr__(self) -> str:
        return f"Trainer(axis={self._axis.name}, n={len(self._train_x)})"
