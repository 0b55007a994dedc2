"""
Tests for the randomized workload driver and its entry point.
"""

import logging
import math

import pytest

from rbmap.engine import WorkloadDriver, WorkloadResult
from rbmap.models.sortedcontainers import RedBlackTree


class TestWorkloadDriver:
    """WorkloadDriver behaviour."""

    def test_run_counts(self):
        driver = WorkloadDriver(key_space=100, operations=500, seed=3)
        result = driver.run()

        assert isinstance(result, WorkloadResult)
        assert result.operations == 500
        assert result.inserts + result.deletes == 500
        assert result.final_size == result.inserts - result.deletes
        assert result.final_size == driver.tree.size()

    def test_presence_record_matches_tree(self):
        driver = WorkloadDriver(key_space=50, operations=300, seed=11)
        driver.run()

        assert driver.present_keys() == driver.tree.traverse()

    def test_step_alternates_on_same_key(self):
        """With a single key the driver must insert, delete, insert, ..."""
        driver = WorkloadDriver(key_space=1, operations=0, seed=0)

        assert driver.step() == ("insert", 0)
        assert driver.step() == ("delete", 0)
        assert driver.step() == ("insert", 0)
        assert driver.tree.traverse() == [0]

    def test_seed_is_reproducible(self):
        first = WorkloadDriver(key_space=200, operations=400, seed=21)
        second = WorkloadDriver(key_space=200, operations=400, seed=21)
        first.run()
        second.run()

        assert first.tree.items() == second.tree.items()

    def test_existing_tree_keys_are_tracked(self):
        tree = RedBlackTree()
        for key in range(5):
            tree.insert(key, key)

        driver = WorkloadDriver(tree=tree, key_space=5, operations=0)
        assert driver.present_keys() == [0, 1, 2, 3, 4]

        # Every key is present, so the next step has to delete
        op, key = driver.step()
        assert op == "delete"
        assert key not in tree

    def test_height_bound(self):
        driver = WorkloadDriver(key_space=2000, operations=2000, seed=8)
        result = driver.run()

        assert result.max_height <= 2 * math.log2(2000 + 1)
        assert driver.tree.height() <= driver.tree.max_height()

    def test_logs_each_operation(self, caplog):
        driver = WorkloadDriver(key_space=10, operations=20, seed=4)

        with caplog.at_level(logging.INFO, logger="rbmap.engine.workload"):
            driver.run()

        op_records = [
            r for r in caplog.records
            if r.getMessage().startswith(("Insert ", "Delete "))
        ]
        assert len(op_records) == 20
        assert any(r.getMessage().startswith("Workload done") for r in caplog.records)

    @pytest.mark.parametrize(
        "kwargs",
        [{"key_space": 0}, {"key_space": -5}, {"operations": -1}],
    )
    def test_invalid_config(self, kwargs):
        with pytest.raises(ValueError):
            WorkloadDriver(**kwargs)

    def test_ops_per_sec(self):
        result = WorkloadResult(
            operations=100, inserts=60, deletes=40, final_size=20, max_height=6, elapsed_s=0.5
        )
        assert result.ops_per_sec == 200
        result.elapsed_s = 0
        assert result.ops_per_sec == 0.0


class TestRunWorkload:
    """Script entry point."""

    def test_quick_run(self, capsys):
        from run_workload import main

        result = main(quick=True, seed=1)

        assert result.operations == 1_000
        out = capsys.readouterr().out
        assert "Workload summary" in out
        assert "Operations: 1,000" in out
