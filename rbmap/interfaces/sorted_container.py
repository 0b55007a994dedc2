"""
SortedContainer abstract base class for sorted key-value data structures.
"""

from abc import abstractmethod
from typing import Any

from rbmap.interfaces.ordered_iterable import OrderedIterable


class SortedContainer(OrderedIterable):
    """
    Abstract base class for sorted key-value containers with unique keys.

    Provides O(log N) operations for insert, lookup, and delete.
    Inherits ordered iteration from OrderedIterable.

    Implementations:
    - RedBlackTree: worst-case logarithmic mutation cost
    """

    @abstractmethod
    def insert(self, key: Any, value: Any) -> None:
        """
        Insert a new key-value pair.

        Args:
            key: The key to insert. Must not already be present.
            value: The value to associate with the key.

        Raises:
            DuplicateKeyError: If the key is already stored. Nothing changes.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def lookup(self, key: Any) -> Any:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            The associated value.

        Raises:
            KeyNotFoundError: If the key is absent.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> None:
        """
        Remove a key and its value.

        Args:
            key: The key to remove.

        Raises:
            KeyNotFoundError: If the key is absent. Nothing changes.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Time complexity: O(1)
        """
        pass
