"""
Custom exceptions for the sorted container.
"""

from typing import Any


class RedBlackTreeError(Exception):
    """Base class for caller-facing container errors."""


class DuplicateKeyError(RedBlackTreeError):
    """
    Raised when inserting a key that is already present.

    The tree is left untouched.
    """

    def __init__(self, key: Any):
        """
        Initialize duplicate key error.

        Args:
            key: The key that was already stored.
        """
        self.key = key
        super().__init__(f"insert: duplicate key {key!r}")


class KeyNotFoundError(RedBlackTreeError, KeyError):
    """
    Raised when looking up or deleting a key that is absent.

    Also a KeyError, so mapping-style callers can keep catching that.
    """

    def __init__(self, key: Any, operation: str = "lookup"):
        self.key = key
        self.operation = operation
        super().__init__(f"{operation}: key {key!r} not found")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class EmptyTreeError(RedBlackTreeError):
    """Raised when asking an empty tree for its smallest or largest key."""


class InvariantViolationError(AssertionError):
    """
    Raised when a red-black invariant is found broken.

    This is an internal defect in the balancing code, not a caller error.
    It must never be caught and recovered from.
    """

    def __init__(self, rule: str, detail: str):
        """
        Initialize invariant violation.

        Args:
            rule: Name of the failed rule (ordering, root, red, black).
            detail: Human readable description of where it failed.
        """
        self.rule = rule
        self.detail = detail
        super().__init__(f"red-black invariant '{rule}' violated: {detail}")
