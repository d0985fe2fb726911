"""Benchmark — compare the algorithms on identical rows.

For every requested size, each algorithm sorts a fresh alternating row
and the run's swaps, passes, and wall-clock time are collected.  The
results render as an ASCII table so the two strategies can be read off
side by side: the swap counts always agree (and match the minimum), the
pass counts and timings do not.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from time import perf_counter

from alternating_disks.disks import DiskRow
from alternating_disks.logging import Logger, LogLevel
from alternating_disks.sorting import SortAlgorithmName, create_sorter

_HEADERS = ("Algorithm", "N", "Swaps", "Minimum", "Passes", "Seconds")


@dataclass(frozen=True)
class BenchmarkResult:
    """Measurements from one algorithm sorting one row."""

    algorithm: SortAlgorithmName
    light_count: int
    swap_count: int
    passes: int
    minimum_swaps: int
    elapsed_seconds: float


def run_benchmark(
    light_counts: Iterable[int],
    *,
    algorithms: Sequence[SortAlgorithmName] | None = None,
    logger: Logger | None = None,
) -> list[BenchmarkResult]:
    """Sort a fresh alternating row of each size with each algorithm.

    Args:
        light_counts: Row sizes to try (disks of each colour).
        algorithms: Algorithms to compare; defaults to all of them.
        logger: Optional log receiving one INFO entry per run.

    Returns:
        One result per (size, algorithm) pair, sizes in the order given.

    Raises:
        PreconditionError: If a light count is less than 1.

    """
    chosen = list(algorithms) if algorithms is not None else list(SortAlgorithmName)
    results: list[BenchmarkResult] = []
    for light_count in light_counts:
        before = DiskRow(light_count)
        minimum = before.inversion_count()
        for name in chosen:
            sorter = create_sorter(name)
            start = perf_counter()
            outcome = sorter.sort(before)
            elapsed = perf_counter() - start
            results.append(
                BenchmarkResult(
                    algorithm=sorter.name,
                    light_count=light_count,
                    swap_count=outcome.swap_count,
                    passes=outcome.passes,
                    minimum_swaps=minimum,
                    elapsed_seconds=elapsed,
                )
            )
            if logger is not None:
                logger.log(
                    LogLevel.INFO,
                    f"n={light_count}: {outcome.swap_count} swaps, {outcome.passes} passes",
                    source="benchmark",
                )
    return results


def format_table(results: Iterable[BenchmarkResult]) -> str:
    """Render *results* as an aligned ASCII table."""
    rows = [
        (
            r.algorithm.value,
            str(r.light_count),
            str(r.swap_count),
            str(r.minimum_swaps),
            str(r.passes),
            f"{r.elapsed_seconds:.6f}",
        )
        for r in results
    ]
    widths = [len(h) for h in _HEADERS]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row, strict=True)]

    def _line(cells: Sequence[str]) -> str:
        first, *rest = cells
        parts = [first.ljust(widths[0])]
        parts.extend(cell.rjust(width) for cell, width in zip(rest, widths[1:], strict=True))
        return "  ".join(parts)

    lines = [_line(_HEADERS), "  ".join("-" * w for w in widths)]
    lines.extend(_line(row) for row in rows)
    return "\n".join(lines)
