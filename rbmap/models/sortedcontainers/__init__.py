"""
Sorted container implementations.
"""

from rbmap.models.sortedcontainers.invariants import InvariantChecker
from rbmap.models.sortedcontainers.node import Color, Node
from rbmap.models.sortedcontainers.red_black_tree import RedBlackTree

__all__ = ["Color", "InvariantChecker", "Node", "RedBlackTree"]
