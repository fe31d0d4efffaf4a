"""Trainable rank models and their training-set preparation."""

from .model import Model, check_training_data
from .linear import LinearModel
from .mlp import MLPModel
from .trainer import Trainer

__all__ = [
    'Model',
    'check_training_data',
    'LinearModel',
    'MLPModel',
    'Trainer',
]
