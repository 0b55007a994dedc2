"""
Node and color definitions shared by the Red-Black Tree and its checker.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class Node:
    """
    Node in the Red-Black Tree.

    Links are never None once a node is in a tree: an absent child or
    parent is the tree's sentinel. Identity comparison only.
    """

    key: Any
    value: Any
    color: Color = Color.RED
    left: "Node | None" = field(default=None, repr=False)
    right: "Node | None" = field(default=None, repr=False)
    parent: "Node | None" = field(default=None, repr=False)


def make_sentinel() -> Node:
    """Create a BLACK sentinel whose links all point back at itself."""
    sentinel = Node(key=None, value=None, color=Color.BLACK)
    sentinel.left = sentinel.right = sentinel.parent = sentinel
    return sentinel
