"""
LearnedHashMap: chained hash table with a learned hash function
===============================================================

Buckets are plain lists of points; the bucket of a key is chosen by a
LearnedHasher instead of a fixed hash. Lookups scan their bucket linearly,
so results are exact however good or bad the model is.

Capacity grows 0 → 1 → 2 → 4 → ... and never shrinks. A resize happens
before an insert whenever the table is empty or holds more than 3/4 of its
capacity in items.
"""

import copy
import logging
from typing import Dict, Iterable, Iterator, List, Optional

from ..geometry import Axis, Key, Point
from ..models import LinearModel, Trainer
from .hasher import LearnedHasher

logger = logging.getLogger(__name__)

INITIAL_NBUCKETS = 1
LOAD_FACTOR = (3, 4)


class LearnedHashMap:
    """
    Point index keyed by coordinate pair.

    Two points with the same ``(x, y)`` are the same entry regardless of
    ``id``: inserting the second replaces the first.

    Example:
        >>> table = LearnedHashMap(LinearModel())
        >>> table.insert(Point(1, 0.0, 1.0))
        >>> table.get((0.0, 1.0))
        Point(id=1, x=0.0, y=1.0)
        >>> table.insert(Point(2, 0.0, 1.0))
        Point(id=1, x=0.0, y=1.0)
        >>> len(table)
        1

    Complexity:
        - insert/get/remove: O(1) + O(bucket size)
        - resize/fit: O(n) full rehash
    """

    def __init__(self, model=None, axis: Axis = Axis.X):
        """
        Args:
            model: Rank model driving the hash (fresh LinearModel if None)
            axis: Coordinate fed to the model
        """
        if model is None:
            model = LinearModel()
        self._hasher = LearnedHasher(model, axis)
        self._table: List[List[Point]] = []
        self._items = 0

    @classmethod
    def new(cls, model=None) -> "LearnedHashMap":
        return cls(model)

    @classmethod
    def with_capacity(cls, model, capacity: int) -> "LearnedHashMap":
        """
        Empty table expected to hold about ``capacity`` points.

        ``capacity`` is only a sizing hint: no buckets are allocated and the
        first insert grows the table to INITIAL_NBUCKETS, exactly as for a
        table built with ``new``.
        """
        if capacity < 0:
            raise ValueError(f"Invalid capacity: {capacity}")
        return cls(model)

    @property
    def hasher(self) -> LearnedHasher:
        return self._hasher

    @property
    def model(self):
        return self._hasher.model

    @property
    def capacity(self) -> int:
        """Number of buckets."""
        return len(self._table)

    def _slot(self, key: Key, capacity: int) -> int:
        return self._hasher.hash(key, capacity)

    def _needs_resize(self) -> bool:
        num, den = LOAD_FACTOR
        return not self._table or self._items > num * len(self._table) // den

    def insert(self, point: Point) -> Optional[Point]:
        """
        Insert ``point``, replacing any entry with the same key.

        Returns:
            The replaced point, or None if the key was new
        """
        if self._needs_resize():
            self.resize()

        bucket = self._table[self._slot(point.key, len(self._table))]
        for i, existing in enumerate(bucket):
            if existing.key == point.key:
                bucket[i] = point
                return existing

        bucket.append(point)
        self._items += 1
        return None

    def batch_insert(self, points: Iterable[Point]) -> List[Point]:
        """Insert every point; returns the points that were replaced."""
        replaced = []
        for point in points:
            old = self.insert(point)
            if old is not None:
                replaced.append(old)
        return replaced

    def get(self, key: Key) -> Optional[Point]:
        """Stored point with coordinates ``key``, or None."""
        if not self._table:
            return None
        key = tuple(key)
        for point in self._table[self._slot(key, len(self._table))]:
            if point.key == key:
                return point
        return None

    def contains_key(self, key: Key) -> bool:
        return self.get(key) is not None

    def remove(self, key: Key) -> Optional[Point]:
        """
        Remove and return the point with coordinates ``key``.

        Bucket order is not preserved: the last entry of the bucket takes
        the removed entry's place.
        """
        if not self._table:
            return None
        key = tuple(key)
        bucket = self._table[self._slot(key, len(self._table))]
        for i, point in enumerate(bucket):
            if point.key == key:
                bucket[i] = bucket[-1]
                bucket.pop()
                self._items -= 1
                return point
        return None

    def resize(self):
        """Double the capacity (0 becomes 1) and rehash every point."""
        old_capacity = len(self._table)
        new_capacity = INITIAL_NBUCKETS if old_capacity == 0 else 2 * old_capacity
        self._table = self._build_table(self._hasher, new_capacity)
        logger.debug(
            "resized learned hash map: %d -> %d buckets, %d items",
            old_capacity, new_capacity, self._items,
        )

    def _build_table(self, hasher: LearnedHasher, capacity: int) -> List[List[Point]]:
        # Built aside; callers swap it in only once every point has a slot
        new_table: List[List[Point]] = [[] for _ in range(capacity)]
        for bucket in self._table:
            for point in bucket:
                new_table[hasher.hash(point.key, capacity)].append(point)
        return new_table

    def fit(self, points: Optional[Iterable[Point]] = None):
        """
        Train the model on ``points`` and rehash the stored entries.

        The axis with the larger variance becomes the hashing axis. With
        ``points=None`` the model is trained on the entries already stored.
        The caller's sequence is left untouched.

        Either the model, axis and buckets are all updated or none are. On
        failure the hasher gets back a copy of the model taken before
        training, so the table keeps hashing exactly as it did.

        Raises:
            EmptyInputError: No points to train on.
            FitError: The model rejected the training set.
        """
        data = list(self) if points is None else list(points)
        trainer = Trainer.with_points(data)

        model = self._hasher.model
        snapshot = copy.deepcopy(model)
        hasher = LearnedHasher(model, trainer.axis)
        try:
            trainer.train(model)
            new_table = self._build_table(hasher, len(self._table))
        except Exception:
            self._hasher = LearnedHasher(snapshot, self._hasher.axis)
            raise

        self._hasher = hasher
        self._table = new_table
        logger.debug(
            "refitted learned hash map on %d points along %s",
            len(data), trainer.axis.name,
        )

    def fit_batch_insert(self, points: Iterable[Point]) -> List[Point]:
        """Train on ``points``, then insert them."""
        points = list(points)
        self.fit(points)
        return self.batch_insert(points)

    def clear(self):
        """Remove all points; capacity and model are kept."""
        self._table = [[] for _ in range(len(self._table))]
        self._items = 0

    def len(self) -> int:
        return self._items

    def is_empty(self) -> bool:
        return self._items == 0

    def __len__(self) -> int:
        return self._items

    def __contains__(self, key) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[Point]:
        for bucket in self._table:
            yield from bucket

    def stats(self) -> Dict:
        """Bucket occupancy statistics."""
        sizes = [len(bucket) for bucket in self._table]
        nonempty = [s for s in sizes if s]
        return {
            'capacity': len(self._table),
            'total_items': self._items,
            'n_nonempty': len(nonempty),
            'avg_bucket_size': sum(nonempty) / max(len(nonempty), 1),
            'max_bucket_size': max(sizes) if sizes else 0,
            'min_bucket_size': min(sizes) if sizes else 0,
            'load_factor': self._items / len(self._table) if self._table else 0.0,
        }

    def __repr__(self) -> str:
        return (
            f"LearnedHashMap(items={self._items}, capacity={len(self._table)}, "
            f"hasher={self._hasher!r})"
        )
