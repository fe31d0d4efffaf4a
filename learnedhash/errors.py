"""Exceptions raised by learnedhash."""


class LearnedHashError(Exception):
    """Base class for all learnedhash errors."""


class EmptyInputError(LearnedHashError, ValueError):
    """Training data with no samples."""

    def __init__(self, message: str = "training data is empty"):
        super().__init__(message)


class LengthMismatchError(LearnedHashError, ValueError):
    """Feature and label sequences of different lengths."""

    def __init__(self, n_features: int, n_labels: int):
        self.n_features = n_features
        self.n_labels = n_labels
        super().__init__(
            f"features and labels differ in length: {n_features} != {n_labels}"
        )


class FitError(LearnedHashError, ArithmeticError):
    """A model could not be fitted to its training data."""
