"""Sorting algorithms — segregating an alternating row of disks.

Both algorithms solve the same puzzle: start from ``L D L D ... L D``
and finish at ``L L ... D D`` using only adjacent swaps.  They differ
in *how* they walk the row.

Think of it like tidying a queue of people wearing light and dark
shirts, where neighbours may only trade places:
    - **Alternate** — everyone standing at an odd (or even) slot checks
      their right-hand neighbour at once, and the checked stretch
      shrinks by one person at each end after every round.
    - **Lawnmower** — walk down the queue fixing pairs, then turn round
      and walk back fixing pairs, like mowing a lawn in strips.

A swap only ever happens on a dark-then-light pair, and each such swap
removes exactly one inversion.  Both algorithms therefore perform the
same number of swaps on the same input (the row's inversion count, which
is ``n * (n - 1) / 2`` for ``n`` disks of each colour).  They differ only
in how many passes they need.

All algorithms implement the ``SortAlgorithm`` protocol — the Strategy
pattern.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from alternating_disks.disks import DiskColor, DiskRow
from alternating_disks.logging import Logger, LogLevel


class SortAlgorithmName(StrEnum):
    """Names under which the algorithms can be selected."""

    ALTERNATE = "alternate"
    LAWNMOWER = "lawnmower"


@dataclass(frozen=True)
class SortResult:
    """The outcome of one sort.

    Attributes:
        after: The sorted row.  It belongs to the result alone; the
            caller's input row is never modified.
        swap_count: Adjacent swaps performed.
        passes: Passes (alternate) or sweeps (lawnmower) executed,
            including the final one that found nothing to swap.
        algorithm: Which algorithm produced this result.

    """

    after: DiskRow
    swap_count: int
    passes: int
    algorithm: SortAlgorithmName


class SortAlgorithm(Protocol):
    """Protocol for disk sorting algorithms (Strategy pattern)."""

    @property
    def name(self) -> SortAlgorithmName:
        """Return the algorithm's name."""
        ...

    def sort(self, before: DiskRow) -> SortResult:
        """Return a sorted copy of *before* and the swaps it took."""
        ...


def _out_of_order(state: DiskRow, left_index: int) -> bool:
    """Return True if the pair starting at *left_index* is dark-then-light."""
    return state.get(left_index) is DiskColor.DARK and state.get(left_index + 1) is DiskColor.LIGHT


class _TracedSort:
    """Shared logging plumbing for the concrete algorithms."""

    _name: SortAlgorithmName

    def __init__(self, *, logger: Logger | None = None) -> None:
        """Create the algorithm, optionally tracing into *logger*."""
        self._logger = logger

    @property
    def name(self) -> SortAlgorithmName:
        """Return the algorithm's name."""
        return self._name

    def _trace_pass(self, pass_number: int, swaps: int, state: DiskRow) -> None:
        if self._logger is None:
            return
        self._logger.log(
            LogLevel.DEBUG,
            f"pass {pass_number}: {swaps} swaps -> {state}",
            source=self._name,
            pass_number=pass_number,
        )

    def _finish(self, state: DiskRow, swap_count: int, passes: int) -> SortResult:
        if self._logger is not None:
            self._logger.log(
                LogLevel.INFO,
                f"sorted {state.light_count()} light disks in {swap_count} swaps over {passes} passes",
                source=self._name,
            )
        return SortResult(after=state, swap_count=swap_count, passes=passes, algorithm=self._name)


class AlternatingSort(_TracedSort):
    """Alternate algorithm — disjoint pairs over a shrinking window.

    Pass ``k`` checks the pairs starting at ``k, k + 2, k + 4, ...`` up
    to (not including) ``total - k``, so successive passes alternate
    between even and odd pairings.  After pass ``k`` the outer ``k``
    disks at each end are final and the next pass skips them.

    The very first pass is never allowed to end the loop: in the
    alternating layout it only sees ``L D`` pairs, so finding nothing to
    swap there does not mean the row is sorted.
    """

    _name = SortAlgorithmName.ALTERNATE

    def sort(self, before: DiskRow) -> SortResult:
        """Sort a copy of *before* and return it with the swap count."""
        state = before.copy()
        total = state.total_count()
        swap_count = 0
        offset = 0
        while True:
            pass_swaps = 0
            for left in range(offset, total - offset, 2):
                if _out_of_order(state, left):
                    state.swap(left)
                    pass_swaps += 1
            swap_count += pass_swaps
            self._trace_pass(offset, pass_swaps, state)
            if pass_swaps == 0 and offset != 0:
                break
            offset += 1
        return self._finish(state, swap_count, offset + 1)


class LawnmowerSort(_TracedSort):
    """Lawnmower algorithm — full sweeps left-to-right then back.

    Each sweep runs a left-to-right pass over every pair, then a
    right-to-left pass back down to the first pair.  Sweeping stops
    once a whole sweep (both directions) makes no swaps.
    """

    _name = SortAlgorithmName.LAWNMOWER

    def sort(self, before: DiskRow) -> SortResult:
        """Sort a copy of *before* and return it with the swap count."""
        state = before.copy()
        total = state.total_count()
        swap_count = 0
        sweeps = 0
        while True:
            sweep_swaps = 0
            for left in range(total - 1):
                if _out_of_order(state, left):
                    state.swap(left)
                    sweep_swaps += 1
            for right in range(total - 1, 0, -1):
                if _out_of_order(state, right - 1):
                    state.swap(right - 1)
                    sweep_swaps += 1
            swap_count += sweep_swaps
            self._trace_pass(sweeps, sweep_swaps, state)
            sweeps += 1
            if sweep_swaps == 0:
                break
        return self._finish(state, swap_count, sweeps)


_ALGORITHMS: dict[SortAlgorithmName, type[AlternatingSort] | type[LawnmowerSort]] = {
    SortAlgorithmName.ALTERNATE: AlternatingSort,
    SortAlgorithmName.LAWNMOWER: LawnmowerSort,
}


def create_sorter(name: SortAlgorithmName | str, *, logger: Logger | None = None) -> SortAlgorithm:
    """Return the algorithm registered under *name*.

    Args:
        name: A ``SortAlgorithmName`` or its string value.
        logger: Optional trace log passed to the algorithm.

    Raises:
        ValueError: If *name* is not a known algorithm.

    """
    try:
        key = SortAlgorithmName(name)
    except ValueError as e:
        known = ", ".join(member.value for member in SortAlgorithmName)
        msg = f"Unknown sort algorithm {name!r} (expected one of: {known})"
        raise ValueError(msg) from e
    return _ALGORITHMS[key](logger=logger)


def sort_alternate(before: DiskRow, *, logger: Logger | None = None) -> SortResult:
    """Sort *before* with the alternate algorithm."""
    return AlternatingSort(logger=logger).sort(before)


def sort_lawnmower(before: DiskRow, *, logger: Logger | None = None) -> SortResult:
    """Sort *before* with the lawnmower algorithm."""
    return LawnmowerSort(logger=logger).sort(before)
