"""learnedhash: point lookup with learned hash functions."""

from .errors import (
    LearnedHashError,
    EmptyInputError,
    LengthMismatchError,
    FitError,
)
from .geometry import Axis, Point
from .models import Model, LinearModel, MLPModel, Trainer
from .hashing import LearnedHasher, LearnedHashMap, make_hash

__version__ = "0.1.0"

__all__ = [
    # Errors
    'LearnedHashError',
    'EmptyInputError',
    'LengthMismatchError',
    'FitError',
    # Geometry
    'Axis',
    'Point',
    # Models
    'Model',
    'LinearModel',
    'MLPModel',
    'Trainer',
    # Hashing
    'LearnedHasher',
    'LearnedHashMap',
    'make_hash',
]
