"""
OrderedIterable protocol for data structures that iterate in key order.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class OrderedIterable(ABC):
    """
    Protocol for data structures that can be walked in ascending key order.

    Implementations must support:
    - Full iteration over (key, value) pairs via __iter__
    - Async iteration over (key, value) pairs via __aiter__
    - A materialized, ascending list of keys via traverse()
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Return an iterator over all key-value pairs in sorted order."""
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        """Return an async iterator over all key-value pairs in sorted order."""
        pass

    @abstractmethod
    def traverse(self) -> list[Any]:
        """
        Return every key in ascending order.

        The list is built fresh on each call, so later mutations of the
        container do not affect a list already returned.

        Returns:
            List of keys, strictly increasing.
        """
        pass
