"""
Read-only verification of Red-Black Tree invariants.

Every check walks the tree with an explicit stack and never mutates it.
A failure means the balancing code is wrong, so it is logged as critical
and raised as InvariantViolationError.
"""

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from rbmap.models.exceptions import InvariantViolationError
from rbmap.models.sortedcontainers.node import Color, Node

if TYPE_CHECKING:
    from rbmap.models.sortedcontainers.red_black_tree import RedBlackTree

logger = logging.getLogger(__name__)


class InvariantChecker:
    """
    Validates one RedBlackTree.

    Rules checked:
    - root: the root is black
    - links: every child points back at its parent, and the node count
      matches the tree's size
    - ordering: in-order keys are strictly increasing
    - red: no red node has a red child
    - black: left and right black-heights agree at every node
    """

    def __init__(self, tree: "RedBlackTree") -> None:
        self._tree = tree
        self._nil: Node = tree._nil

    def check(self) -> int:
        """
        Run every rule.

        Returns:
            Black-height of the root (0 for an empty tree).
        """
        self.check_root()
        self.check_links()
        self.check_ordering()
        self.check_red_rule()
        return self.check_black_height()

    def is_valid(self) -> bool:
        """Same as check(), but reports the outcome instead of raising."""
        try:
            self.check()
        except InvariantViolationError:
            return False
        return True

    def check_root(self) -> None:
        if self._nil.color != Color.BLACK:
            self._fail("root", "sentinel is not black")
        if self._tree._root.color != Color.BLACK:
            self._fail("root", f"root {self._tree._root.key!r} is red")

    def check_links(self) -> None:
        root = self._tree._root
        if root is not self._nil and root.parent is not self._nil:
            self._fail("links", f"root {root.key!r} has a parent")

        count = 0
        for node in self._nodes_in_order():
            count += 1
            for child in (node.left, node.right):
                if child is not self._nil and child.parent is not node:
                    self._fail(
                        "links", f"child {child.key!r} does not point back at {node.key!r}"
                    )

        if count != self._tree.size():
            self._fail("links", f"found {count} nodes, size says {self._tree.size()}")

    def check_ordering(self) -> None:
        previous: Any = None
        first = True
        for node in self._nodes_in_order():
            if not first and not previous < node.key:
                self._fail("ordering", f"{previous!r} is not below {node.key!r}")
            previous = node.key
            first = False

    def check_red_rule(self) -> None:
        for node in self._nodes_in_order():
            if node.color == Color.BLACK:
                continue
            if node.left.color == Color.RED or node.right.color == Color.RED:
                self._fail("red", f"red node {node.key!r} has a red child")

    def check_black_height(self) -> int:
        """
        Compute black-heights bottom-up and compare both sides of each node.

        Returns:
            Black-height of the root.
        """
        heights: dict[int, int] = {}

        def height_of(node: Node) -> int:
            if node is self._nil:
                return 0
            return heights[id(node)]

        stack: list[tuple[Node, bool]] = [(self._tree._root, False)]
        while stack:
            node, children_done = stack.pop()
            if node is self._nil:
                continue
            if not children_done:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
                continue

            left = height_of(node.left)
            right = height_of(node.right)
            if left != right:
                self._fail(
                    "black",
                    f"node {node.key!r} has black-height {left} on the left, {right} on the right",
                )
            heights[id(node)] = (1 if node.color == Color.BLACK else 0) + max(left, right)

        return height_of(self._tree._root)

    def _nodes_in_order(self) -> Iterator[Node]:
        stack: list[Node] = []
        current = self._tree._root
        while stack or current is not self._nil:
            while current is not self._nil:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right

    def _fail(self, rule: str, detail: str) -> None:
        logger.critical(f"Red-black invariant '{rule}' violated: {detail}")
        raise InvariantViolationError(rule, detail)
