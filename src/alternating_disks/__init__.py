"""Alternating disks — sort a row of light and dark disks by adjacent swaps.

Re-exports public symbols so callers can write::

    from alternating_disks import DiskRow, sort_alternate
"""

from alternating_disks.benchmark import BenchmarkResult, format_table, run_benchmark
from alternating_disks.disks import DiskColor, DiskRow, PreconditionError
from alternating_disks.logging import LogEntry, Logger, LogLevel
from alternating_disks.sorting import (
    AlternatingSort,
    LawnmowerSort,
    SortAlgorithm,
    SortAlgorithmName,
    SortResult,
    create_sorter,
    sort_alternate,
    sort_lawnmower,
)

__all__ = [
    "AlternatingSort",
    "BenchmarkResult",
    "DiskColor",
    "DiskRow",
    "LawnmowerSort",
    "LogEntry",
    "LogLevel",
    "Logger",
    "PreconditionError",
    "SortAlgorithm",
    "SortAlgorithmName",
    "SortResult",
    "create_sorter",
    "format_table",
    "run_benchmark",
    "sort_alternate",
    "sort_lawnmower",
]
