"""Point and axis types used as index entries."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Key = Tuple[float, float]


class Axis(Enum):
    """Coordinate axis used as the predictive feature."""

    X = 0
    Y = 1

    @property
    def index(self) -> int:
        """Position of this axis inside a ``(x, y)`` key."""
        return self.value


@dataclass(frozen=True)
class Point:
    """
    Identity-bearing 2D point stored in a LearnedHashMap.

    Equality covers ``id`` as well as the coordinates. The index itself
    matches entries by ``key`` only.
    """
    id: int
    x: float
    y: float

    @classmethod
    def from_key(cls, id: int, key: Key) -> "Point":
        x, y = key
        return cls(id, float(x), float(y))

    @property
    def key(self) -> Key:
        """Coordinate pair used for hashing and lookup."""
        return (self.x, self.y)

    @property
    def value(self) -> Key:
        """Alias for :attr:`key`."""
        return self.key

    def coord(self, axis: Axis) -> float:
        return self.key[axis.index]
