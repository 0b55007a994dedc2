"""
Workload drivers that exercise the sorted containers.
"""

from rbmap.engine.workload import WorkloadDriver, WorkloadResult

__all__ = ["WorkloadDriver", "WorkloadResult"]
