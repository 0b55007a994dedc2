"""
WorkloadDriver - Randomized insert/delete workload against a RedBlackTree.
"""

import logging
import random
import time
from dataclasses import dataclass

from rbmap.models.sortedcontainers import RedBlackTree

logger = logging.getLogger(__name__)


@dataclass
class WorkloadResult:
    """
    Outcome of a workload run.

    Attributes:
        operations: Number of operations issued.
        inserts: How many of them were inserts.
        deletes: How many of them were deletes.
        final_size: Keys left in the tree at the end.
        max_height: Tallest the tree got during the run.
        elapsed_s: Wall-clock duration in seconds.
    """

    operations: int
    inserts: int
    deletes: int
    final_size: int
    max_height: int
    elapsed_s: float

    @property
    def ops_per_sec(self) -> float:
        if self.elapsed_s <= 0:
            return 0.0
        return self.operations / self.elapsed_s


class WorkloadDriver:
    """
    Drives a tree with random inserts and deletes over a bounded key space.

    Each step draws a key. If it is recorded as present it is deleted,
    otherwise it is inserted with itself as value. The driver only uses the
    tree's public operations.
    """

    DEFAULT_KEY_SPACE = 10_000
    DEFAULT_OPERATIONS = 10_000

    def __init__(
        self,
        tree: RedBlackTree | None = None,
        key_space: int = DEFAULT_KEY_SPACE,
        operations: int = DEFAULT_OPERATIONS,
        seed: int | None = None,
        check_invariants: bool = True,
    ) -> None:
        """
        Initialize the driver.

        Args:
            tree: Tree to drive. A fresh one is created when omitted.
            key_space: Keys are drawn from range(key_space).
            operations: Number of steps run() performs.
            seed: Seed for the key generator, for reproducible runs.
            check_invariants: Validate the tree after every step.
        """
        if key_space <= 0:
            raise ValueError(f"key_space must be positive, got {key_space}")
        if operations < 0:
            raise ValueError(f"operations must be >= 0, got {operations}")

        self._tree = tree if tree is not None else RedBlackTree()
        self._key_space = key_space
        self._operations = operations
        self._check_invariants = check_invariants
        self._random = random.Random(seed)
        self._present: dict[int, bool] = dict.fromkeys(range(key_space), False)

        # A tree handed in may already hold keys from the space
        for key in self._tree.traverse():
            if key in self._present:
                self._present[key] = True

    @property
    def tree(self) -> RedBlackTree:
        return self._tree

    def present_keys(self) -> list[int]:
        """Keys the driver believes are in the tree, ascending."""
        return [key for key, present in self._present.items() if present]

    def step(self) -> tuple[str, int]:
        """
        Issue one operation.

        Returns:
            ("insert" or "delete", key).
        """
        key = self._random.randrange(self._key_space)

        if self._present[key]:
            logger.info(f"Delete {key}")
            self._tree.delete(key)
            self._present[key] = False
            op = "delete"
        else:
            logger.info(f"Insert {key}")
            self._tree.insert(key, key)
            self._present[key] = True
            op = "insert"

        if self._check_invariants:
            self._tree.validate()

        return op, key

    def run(self) -> WorkloadResult:
        """Run the configured number of steps and summarize them."""
        inserts = 0
        deletes = 0
        max_height = self._tree.height()

        start = time.perf_counter()
        for _ in range(self._operations):
            op, _key = self.step()
            if op == "insert":
                inserts += 1
            else:
                deletes += 1
            max_height = max(max_height, self._tree.height())
        elapsed = time.perf_counter() - start

        result = WorkloadResult(
            operations=self._operations,
            inserts=inserts,
            deletes=deletes,
            final_size=self._tree.size(),
            max_height=max_height,
            elapsed_s=elapsed,
        )
        logger.info(
            f"Workload done: {result.operations} ops ({result.inserts} inserts, "
            f"{result.deletes} deletes), size {result.final_size}, "
            f"max height {result.max_height}, {result.ops_per_sec:.0f} ops/sec"
        )
        return result
