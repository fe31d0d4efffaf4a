"""
learnedhash.hashing: model-driven hash table
============================================

A LearnedHasher turns a rank model's prediction into a bucket index;
LearnedHashMap is a chained hash table built on top of it.
"""

from .hasher import LearnedHasher, make_hash
from .map import LearnedHashMap, INITIAL_NBUCKETS, LOAD_FACTOR

__all__ = [
    'LearnedHasher',
    'make_hash',
    'LearnedHashMap',
    'INITIAL_NBUCKETS',
    'LOAD_FACTOR',
]
