"""
Red-Black Tree implementation for sorted key-value storage.

Keys are unique. Insert, delete and lookup are O(log N) in the worst case.
"""

import math
from collections.abc import AsyncIterator, Iterator
from typing import Any

from rbmap.interfaces.sorted_container import SortedContainer
from rbmap.models.exceptions import DuplicateKeyError, EmptyTreeError, KeyNotFoundError
from rbmap.models.sortedcontainers.invariants import InvariantChecker
from rbmap.models.sortedcontainers.node import Color, Node, make_sentinel


class RedBlackTree(SortedContainer):
    """
    Red-Black Tree implementation of SortedContainer.

    Properties maintained:
    1. Keys are in BST order
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from a node to a leaf has the same number of black nodes

    A single black sentinel stands in for every missing child and for the
    root's parent. The sentinel's links are never rewritten.
    """

    def __init__(self, check_invariants: bool = False) -> None:
        """
        Initialize an empty tree.

        Args:
            check_invariants: Verify every red-black rule after each
                successful insert and delete. Meant for development and
                tests; costs O(N) per mutation.
        """
        self._nil: Node = make_sentinel()
        self._root: Node = self._nil
        self._size: int = 0
        self._check_invariants = check_invariants

    def insert(self, key: Any, value: Any) -> None:
        """Insert a new key-value pair. O(log N)"""
        # Find insertion point
        parent = self._nil
        current = self._root

        while current is not self._nil:
            parent = current
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                raise DuplicateKeyError(key)

        # Insert new red leaf
        node = Node(key=key, value=value, left=self._nil, right=self._nil, parent=parent)
        if parent is self._nil:
            self._root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node

        self._size += 1
        self._fix_insert(node)

        if self._check_invariants:
            self.validate()

    def lookup(self, key: Any) -> Any:
        """Retrieve value by key. O(log N)"""
        node = self._find_node(key)
        if node is self._nil:
            raise KeyNotFoundError(key, "lookup")
        return node.value

    def delete(self, key: Any) -> None:
        """Remove a key-value pair. O(log N)"""
        node = self._find_node(key)
        if node is self._nil:
            raise KeyNotFoundError(key, "delete")

        self._delete_node(node)
        self._size -= 1

        if self._check_invariants:
            self.validate()

    def has(self, key: Any) -> bool:
        return self._find_node(key) is not self._nil

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is self._nil

    def min_key(self) -> Any:
        """Smallest stored key."""
        if self.is_empty():
            raise EmptyTreeError("min_key: tree is empty")
        return self._min_node(self._root).key

    def max_key(self) -> Any:
        """Largest stored key."""
        if self.is_empty():
            raise EmptyTreeError("max_key: tree is empty")
        return self._max_node(self._root).key

    def height(self) -> int:
        """
        Number of nodes on the longest root-to-leaf path.

        Zero for an empty tree. Bounded by 2 * log2(N + 1).
        """
        best = 0
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            if node is self._nil:
                continue
            best = max(best, depth)
            stack.append((node.left, depth + 1))
            stack.append((node.right, depth + 1))
        return best

    def max_height(self) -> float:
        """Upper bound on height() that the red-black rules guarantee."""
        return 2 * math.log2(self._size + 1)

    def validate(self) -> int:
        """
        Check all red-black invariants.

        Returns:
            Black-height of the root.

        Raises:
            InvariantViolationError: If any rule is broken.
        """
        return InvariantChecker(self).check()

    def traverse(self) -> list[Any]:
        return [key for key, _ in self]

    def items(self) -> list[tuple[Any, Any]]:
        """Return all (key, value) pairs in key order."""
        return list(self)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size})"

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return _InOrderIterator(self)

    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        return _AsyncInOrderIterator(self)

    def _find_node(self, key: Any) -> Node:
        """Find node by key, or the sentinel."""
        current = self._root
        while current is not self._nil:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return self._nil

    def _min_node(self, node: Node) -> Node:
        """Leftmost node of a subtree (sentinel for an empty subtree)."""
        if node is self._nil:
            return self._nil
        while node.left is not self._nil:
            node = node.left
        return node

    def _max_node(self, node: Node) -> Node:
        """Rightmost node of a subtree (sentinel for an empty subtree)."""
        if node is self._nil:
            return self._nil
        while node.right is not self._nil:
            node = node.right
        return node

    def _successor(self, node: Node) -> Node:
        """In-order successor of node, or the sentinel for the largest key."""
        if node.right is not self._nil:
            return self._min_node(node.right)

        parent = node.parent
        while parent is not self._nil and node is parent.right:
            node = parent
            parent = parent.parent
        return parent

    def _rotate_left(self, node: Node) -> None:
        """Left rotation."""
        pivot = node.right

        node.right = pivot.left
        if pivot.left is not self._nil:
            pivot.left.parent = node

        pivot.parent = node.parent

        if node.parent is self._nil:
            self._root = pivot
        elif node is node.parent.left:
            node.parent.left = pivot
        else:
            node.parent.right = pivot

        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: Node) -> None:
        """Right rotation."""
        pivot = node.left

        node.left = pivot.right
        if pivot.right is not self._nil:
            pivot.right.parent = node

        pivot.parent = node.parent

        if node.parent is self._nil:
            self._root = pivot
        elif node is node.parent.right:
            node.parent.right = pivot
        else:
            node.parent.left = pivot

        pivot.right = node
        node.parent = pivot

    def _fix_insert(self, node: Node) -> None:
        """Fix Red-Black Tree properties after insert."""
        while node.color == Color.RED and node.parent.color == Color.RED:
            parent = node.parent
            # parent is red, so it is not the root and grandparent is black
            grandparent = parent.parent

            if parent is grandparent.left:
                uncle = grandparent.right

                if uncle.color == Color.RED:
                    # Case 1: Uncle is red
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue

                if node is parent.right:
                    # Case 2: Node is right child
                    self._rotate_left(parent)
                    parent = node

                # Case 3: Node is left child
                self._rotate_right(grandparent)
                parent.color = Color.BLACK
                grandparent.color = Color.RED
            else:
                uncle = grandparent.left

                if uncle.color == Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue

                if node is parent.left:
                    self._rotate_right(parent)
                    parent = node

                self._rotate_left(grandparent)
                parent.color = Color.BLACK
                grandparent.color = Color.RED

        self._root.color = Color.BLACK

    def _delete_node(self, node: Node) -> None:
        """Unlink a node from the tree and rebalance."""
        if node.left is not self._nil and node.right is not self._nil:
            # Two children: move the successor's data up and unlink the
            # successor instead. It has no left child.
            successor = self._successor(node)
            node.key = successor.key
            node.value = successor.value
            node = successor

        # Node has at most one real child
        removed_color = node.color
        child = node.left if node.left is not self._nil else node.right
        parent = node.parent

        self._transplant(node, child)

        if removed_color == Color.BLACK:
            self._fix_delete(child, parent)

    def _transplant(self, node: Node, replacement: Node) -> None:
        """Put replacement where node was under node's parent."""
        if node.parent is self._nil:
            self._root = replacement
        elif node is node.parent.left:
            node.parent.left = replacement
        else:
            node.parent.right = replacement

        if replacement is not self._nil:
            replacement.parent = node.parent

    def _fix_delete(self, node: Node, parent: Node) -> None:
        """
        Fix Red-Black Tree properties after delete.

        node carries an extra black and may be the sentinel, so its parent
        is tracked here instead of being read from node.parent.
        """
        while node is not self._root and node.color == Color.BLACK:
            if node is parent.left:
                sibling = parent.right

                if sibling.color == Color.RED:
                    # Case 1: sibling red, turn it into a black sibling case
                    self._rotate_left(parent)
                    parent.color = Color.RED
                    sibling.color = Color.BLACK
                    sibling = parent.right

                if sibling.left.color == Color.BLACK and sibling.right.color == Color.BLACK:
                    # Case 2: push the extra black up
                    sibling.color = Color.RED
                    node = parent
                    parent = node.parent
                    continue

                if sibling.right.color == Color.BLACK:
                    # Case 3: near nephew red, far nephew black
                    nephew = sibling.left
                    self._rotate_right(sibling)
                    nephew.color = Color.BLACK
                    sibling.color = Color.RED
                    sibling = parent.right

                # Case 4: far nephew red
                self._rotate_left(parent)
                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.right.color = Color.BLACK
                node = self._root
            else:
                sibling = parent.left

                if sibling.color == Color.RED:
                    self._rotate_right(parent)
                    parent.color = Color.RED
                    sibling.color = Color.BLACK
                    sibling = parent.left

                if sibling.left.color == Color.BLACK and sibling.right.color == Color.BLACK:
                    sibling.color = Color.RED
                    node = parent
                    parent = node.parent
                    continue

                if sibling.left.color == Color.BLACK:
                    nephew = sibling.right
                    self._rotate_left(sibling)
                    nephew.color = Color.BLACK
                    sibling.color = Color.RED
                    sibling = parent.left

                self._rotate_right(parent)
                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.left.color = Color.BLACK
                node = self._root

        node.color = Color.BLACK


class _InOrderIterator(Iterator[tuple[Any, Any]]):
    """Iterator over a Red-Black Tree in ascending key order."""

    def __init__(self, tree: RedBlackTree) -> None:
        self._tree = tree
        self._next = tree._min_node(tree._root)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self

    def __next__(self) -> tuple[Any, Any]:
        node = self._next
        if node is self._tree._nil:
            raise StopIteration

        self._next = self._tree._successor(node)
        return (node.key, node.value)


class _AsyncInOrderIterator(AsyncIterator[tuple[Any, Any]]):
    """Async iterator over a Red-Black Tree (in-memory, no I/O)."""

    def __init__(self, tree: RedBlackTree) -> None:
        self._tree = tree
        self._next = tree._min_node(tree._root)

    def __aiter__(self) -> "_AsyncInOrderIterator":
        return self

    async def __anext__(self) -> tuple[Any, Any]:
        node = self._next
        if node is self._tree._nil:
            raise StopAsyncIteration

        self._next = self._tree._successor(node)
        return (node.key, node.value)
