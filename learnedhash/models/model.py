"""Base model class for learned hashing."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..errors import EmptyInputError, LengthMismatchError


def check_training_data(xs: Sequence[float], ys: Sequence[float]) -> None:
    """Raise if ``xs``/``ys`` cannot be used as a training set.

    Raises:
        EmptyInputError: ``xs`` has no samples.
        LengthMismatchError: ``xs`` and ``ys`` differ in length.
    """
    if len(xs) == 0:
        raise EmptyInputError()
    if len(xs) != len(ys):
        raise LengthMismatchError(len(xs), len(ys))


class Model(ABC):
    """Abstract base class for trainable real-valued functions.

    A model is fitted on ``(feature, rank)`` samples and then predicts a
    rank-like value for unseen features. LearnedHasher only relies on
    ``fit`` and ``predict``, so any object providing both can be plugged in
    without subclassing.
    """

    @abstractmethod
    def fit(self, xs: Sequence[float], ys: Sequence[float]) -> None:
        """Train the model in place.

        Implementations validate their input with
        :func:`check_training_data` before changing any state.

        Args:
            xs: Feature values
            ys: Labels, same length as ``xs``

        Raises:
            EmptyInputError: No samples given.
            LengthMismatchError: ``xs`` and ``ys`` differ in length.
            FitError: The model cannot be fitted to the data.
        """
        pass

    @abstractmethod
    def predict(self, x: float) -> float:
        """Predict the label of feature ``x`` from the current fitted state."""
        pass

    def predict_batch(self, xs: Sequence[float]) -> List[float]:
        """Predict a label for every feature in ``xs``."""
        return [self.predict(x) for x in xs]
