#!/usr/bin/env python3
"""
Randomized workload against the Red-Black Tree.

Draws random keys from a bounded space and inserts each absent key or
deletes each present one, logging every operation. The tree is validated
after every step.

Usage:
    python run_workload.py          # 10,000 operations over 10,000 keys
    python run_workload.py quick    # 1,000 operations over 1,000 keys
"""

import logging
import os
import sys

from rbmap.engine import WorkloadDriver, WorkloadResult

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


def main(quick: bool = False, seed: int | None = None) -> WorkloadResult:
    if quick:
        driver = WorkloadDriver(key_space=1_000, operations=1_000, seed=seed)
    else:
        driver = WorkloadDriver(seed=seed)

    result = driver.run()

    print(f"\n{'='*60}")
    print("Workload summary")
    print(f"{'='*60}")
    print(f"Operations: {result.operations:,}")
    print(f"Inserts:    {result.inserts:,}")
    print(f"Deletes:    {result.deletes:,}")
    print(f"Final size: {result.final_size:,}")
    print(f"Max height: {result.max_height}")
    print(f"Throughput: {result.ops_per_sec:,.0f} ops/sec")
    return result


if __name__ == "__main__":
    try:
        main(quick=len(sys.argv) > 1 and sys.argv[1] == "quick")
    except KeyboardInterrupt:
        pass
