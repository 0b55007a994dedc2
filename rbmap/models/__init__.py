"""
Data models for the sorted container.
"""

from rbmap.models.exceptions import (
    DuplicateKeyError,
    EmptyTreeError,
    InvariantViolationError,
    KeyNotFoundError,
    RedBlackTreeError,
)
from rbmap.models.sortedcontainers import RedBlackTree

__all__ = [
    "DuplicateKeyError",
    "EmptyTreeError",
    "InvariantViolationError",
    "KeyNotFoundError",
    "RedBlackTree",
    "RedBlackTreeError",
]
