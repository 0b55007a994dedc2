"""
In-memory ordered map backed by a Red-Black Tree.

This package provides a sorted key-value container with:
- insert(key, value) - O(log N), rejects duplicate keys
- lookup(key) - O(log N)
- delete(key) - O(log N), rejects absent keys
- traverse() - all keys in ascending order
"""

from rbmap.models.exceptions import DuplicateKeyError, KeyNotFoundError
from rbmap.models.sortedcontainers import RedBlackTree

__all__ = ["DuplicateKeyError", "KeyNotFoundError", "RedBlackTree"]
