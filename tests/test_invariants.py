"""
Tests for the red-black invariant checker.

Trees are corrupted by hand to make sure every rule is actually detected.
"""

import logging

import pytest

from rbmap.models.exceptions import InvariantViolationError
from rbmap.models.sortedcontainers import Color, InvariantChecker, RedBlackTree


@pytest.fixture
def small_tree():
    """Black 2 at the root with red 1 and red 3 below it."""
    tree = RedBlackTree()
    for key in (2, 1, 3):
        tree.insert(key, key * 10)
    return tree


class TestInvariantChecker:
    """Each rule on valid and corrupted trees."""

    def test_empty_tree_is_valid(self):
        checker = InvariantChecker(RedBlackTree())
        assert checker.check() == 0
        assert checker.is_valid()

    def test_valid_tree(self, small_tree):
        checker = InvariantChecker(small_tree)
        assert checker.check() == 1
        assert checker.is_valid()

    def test_red_root_detected(self, small_tree):
        small_tree._root.color = Color.RED

        with pytest.raises(InvariantViolationError) as excinfo:
            InvariantChecker(small_tree).check_root()
        assert excinfo.value.rule == "root"

    def test_red_rule_detected(self, small_tree):
        small_tree.insert(4, 40)
        # 3 is black with red child 4; turning 3 red breaks the red rule
        node = small_tree._find_node(3)
        node.color = Color.RED

        with pytest.raises(InvariantViolationError) as excinfo:
            InvariantChecker(small_tree).check_red_rule()
        assert excinfo.value.rule == "red"

    def test_black_rule_detected(self, small_tree):
        small_tree._find_node(1).color = Color.BLACK

        with pytest.raises(InvariantViolationError) as excinfo:
            InvariantChecker(small_tree).check_black_height()
        assert excinfo.value.rule == "black"

    def test_ordering_detected(self, small_tree):
        small_tree._find_node(1).key = 99

        with pytest.raises(InvariantViolationError) as excinfo:
            InvariantChecker(small_tree).check_ordering()
        assert excinfo.value.rule == "ordering"

    def test_duplicate_keys_break_ordering(self, small_tree):
        small_tree._find_node(3).key = 2

        with pytest.raises(InvariantViolationError) as excinfo:
            InvariantChecker(small_tree).check_ordering()
        assert excinfo.value.rule == "ordering"

    def test_broken_parent_link_detected(self, small_tree):
        left = small_tree._find_node(1)
        left.parent = left

        with pytest.raises(InvariantViolationError) as excinfo:
            InvariantChecker(small_tree).check_links()
        assert excinfo.value.rule == "links"

    def test_size_mismatch_detected(self, small_tree):
        small_tree._size = 5

        with pytest.raises(InvariantViolationError) as excinfo:
            InvariantChecker(small_tree).check_links()
        assert excinfo.value.rule == "links"

    def test_is_valid_reports_failure(self, small_tree):
        small_tree._root.color = Color.RED
        assert not InvariantChecker(small_tree).is_valid()

    def test_violation_is_assertion_error(self, small_tree):
        small_tree._root.color = Color.RED
        with pytest.raises(AssertionError):
            small_tree.validate()

    def test_violation_logged_as_critical(self, small_tree, caplog):
        small_tree._find_node(1).color = Color.BLACK

        with caplog.at_level(logging.CRITICAL):
            with pytest.raises(InvariantViolationError):
                small_tree.validate()

        assert any(
            record.levelno == logging.CRITICAL and "'black'" in record.getMessage()
            for record in caplog.records
        )

    def test_checked_tree_fails_fast(self):
        """A corrupted checked tree fails on its next mutation."""
        tree = RedBlackTree(check_invariants=True)
        for key in (2, 1, 3):
            tree.insert(key, key)

        tree._find_node(3).color = Color.BLACK
        with pytest.raises(InvariantViolationError):
            tree.insert(0, 0)

    def test_checker_does_not_mutate(self, small_tree):
        before = [(n.key, n.color) for n in InvariantChecker(small_tree)._nodes_in_order()]
        InvariantChecker(small_tree).check()
        after = [(n.key, n.color) for n in InvariantChecker(small_tree)._nodes_in_order()]
        assert before == after
