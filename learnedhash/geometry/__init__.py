"""2D point type and axis-wise helpers."""

from .point import Axis, Key, Point
from .helper import extract_x, extract_y, sort_by_x, sort_by_y, variance

__all__ = [
    'Axis',
    'Key',
    'Point',
    'extract_x',
    'extract_y',
    'sort_by_x',
    'sort_by_y',
    'variance',
]
