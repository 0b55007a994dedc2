"""
Shared pytest fixtures for sorted container tests.
"""

import random

import pytest

from rbmap.models.sortedcontainers import RedBlackTree


@pytest.fixture
def tree():
    """Provide an empty RedBlackTree."""
    return RedBlackTree()


@pytest.fixture
def checked_tree():
    """Provide an empty RedBlackTree that validates itself after each mutation."""
    return RedBlackTree(check_invariants=True)


@pytest.fixture
def sample_entries():
    """Provide sample key-value entries for testing."""
    return [(7, "seven"), (3, "three"), (9, "nine"), (1, "one"), (5, "five")]


@pytest.fixture
def shuffled_keys():
    """Provide 500 distinct keys in a fixed random order."""
    keys = list(range(500))
    random.Random(1234).shuffle(keys)
    return keys
