"""Axis-wise helpers over sequences of points."""

from typing import List, Sequence

import numpy as np

from .point import Point


def sort_by_x(points: List[Point]) -> None:
    """Stable in-place sort along x."""
    points.sort(key=lambda p: p.x)


def sort_by_y(points: List[Point]) -> None:
    """Stable in-place sort along y."""
    points.sort(key=lambda p: p.y)


def extract_x(points: Sequence[Point]) -> List[float]:
    return [p.x for p in points]


def extract_y(points: Sequence[Point]) -> List[float]:
    return [p.y for p in points]


def variance(values: Sequence[float]) -> float:
    """
    Population variance of ``values``.

    Returns 0.0 for an empty sequence rather than numpy's NaN.
    """
    if len(values) == 0:
        return 0.0
    return float(np.var(np.asarray(values, dtype=np.float64)))
