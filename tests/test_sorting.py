"""Tests for the alternate and lawnmower sorting algorithms.

Both algorithms take an alternating row and return a sorted copy plus
the number of adjacent swaps performed.  Only dark-then-light pairs are
ever swapped, so the swap count always equals the row's inversion count
(``n * (n - 1) / 2`` for ``n`` disks of each colour).
"""

from collections.abc import Callable

import pytest

from alternating_disks.disks import DiskRow
from alternating_disks.logging import Logger, LogLevel
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

_SIZES = [1, 2, 3, 4, 7, 16]
Sorter = Callable[[DiskRow], SortResult]

_SORTERS: list[Sorter] = [sort_alternate, sort_lawnmower]


def _expected_swaps(light_count: int) -> int:
    """Return the inversion count of an alternating row."""
    return light_count * (light_count - 1) // 2


# -- Shared contract ------------------------------------------------------------


class TestSortContract:
    """Properties every algorithm must satisfy."""

    @pytest.mark.parametrize("light_count", _SIZES)
    @pytest.mark.parametrize("sorter", _SORTERS)
    def test_result_is_sorted(self, sorter: Sorter, light_count: int) -> None:
        """The returned row is fully segregated."""
        result = sorter(DiskRow(light_count))
        assert result.after.is_sorted()

    @pytest.mark.parametrize("light_count", _SIZES)
    @pytest.mark.parametrize("sorter", _SORTERS)
    def test_colour_counts_conserved(self, sorter: Sorter, light_count: int) -> None:
        """Sorting never changes how many disks of each colour there are."""
        result = sorter(DiskRow(light_count))
        rendered = result.after.to_string().split()
        assert rendered.count("L") == light_count
        assert rendered.count("D") == light_count
        assert result.after.light_count() == light_count
        assert result.after.dark_count() == light_count

    @pytest.mark.parametrize("light_count", _SIZES)
    @pytest.mark.parametrize("sorter", _SORTERS)
    def test_swap_count_is_minimal(self, sorter: Sorter, light_count: int) -> None:
        """The swap count equals the alternating row's inversion count."""
        before = DiskRow(light_count)
        result = sorter(before)
        assert result.swap_count == _expected_swaps(light_count)
        assert result.swap_count == before.inversion_count()

    @pytest.mark.parametrize("sorter", _SORTERS)
    def test_input_left_untouched(self, sorter: Sorter) -> None:
        """The caller's row is still alternating after sorting."""
        before = DiskRow(4)
        sorter(before)
        assert before.is_initialized()
        assert before == DiskRow(4)

    @pytest.mark.parametrize("sorter", _SORTERS)
    def test_idempotent_on_sorted_row(self, sorter: Sorter) -> None:
        """Sorting an already-sorted row makes no swaps and changes nothing."""
        first = sorter(DiskRow(5))
        second = sorter(first.after)
        assert second.swap_count == 0
        assert second.after == first.after

    @pytest.mark.parametrize("sorter", _SORTERS)
    def test_single_pair_needs_no_swaps(self, sorter: Sorter) -> None:
        """L D is already sorted: zero swaps."""
        result = sorter(DiskRow(1))
        assert result.swap_count == 0
        assert result.after.to_string() == "L D"


# -- Worked examples ------------------------------------------------------------


class TestWorkedExamples:
    """Small rows with hand-checked answers."""

    def test_two_of_each(self) -> None:
        """L D L D sorts to L L D D with a single swap."""
        result = sort_alternate(DiskRow(2))
        assert result.after.to_string() == "L L D D"
        assert result.swap_count == 1

    def test_three_of_each(self) -> None:
        """L D L D L D sorts to L L L D D D with three swaps."""
        result = sort_lawnmower(DiskRow(3))
        assert result.after.to_string() == "L L L D D D"
        expected_swaps = 3
        assert result.swap_count == expected_swaps


# -- Alternate algorithm --------------------------------------------------------


class TestAlternatingSort:
    """Shrinking-window passes over disjoint pairs."""

    def test_name(self) -> None:
        """The algorithm reports its registered name."""
        assert AlternatingSort().name is SortAlgorithmName.ALTERNATE

    def test_first_pass_does_not_stop_early(self) -> None:
        """The first pass sees only L D pairs but sorting continues."""
        logger = Logger()
        result = AlternatingSort(logger=logger).sort(DiskRow(3))
        first = logger.filter(min_level=LogLevel.DEBUG, source="alternate")[0]
        assert first.pass_number == 0
        assert "0 swaps" in first.message
        assert result.after.is_sorted()

    @pytest.mark.parametrize("light_count", [2, 3, 4, 7])
    def test_pass_count(self, light_count: int) -> None:
        """n disks per colour take n working passes plus the first one."""
        result = sort_alternate(DiskRow(light_count))
        assert result.passes == light_count + 1

    def test_result_records_algorithm(self) -> None:
        """The result names the algorithm that produced it."""
        assert sort_alternate(DiskRow(2)).algorithm is SortAlgorithmName.ALTERNATE


# -- Lawnmower algorithm --------------------------------------------------------


class TestLawnmowerSort:
    """Back-and-forth sweeps until a sweep makes no swaps."""

    def test_name(self) -> None:
        """The algorithm reports its registered name."""
        assert LawnmowerSort().name is SortAlgorithmName.LAWNMOWER

    def test_single_pair_takes_one_sweep(self) -> None:
        """An already-sorted row stops after one empty sweep."""
        assert sort_lawnmower(DiskRow(1)).passes == 1

    def test_fewer_passes_than_alternate(self) -> None:
        """Covering the row twice per sweep needs fewer sweeps than passes."""
        before = DiskRow(8)
        assert sort_lawnmower(before).passes < sort_alternate(before).passes

    def test_result_records_algorithm(self) -> None:
        """The result names the algorithm that produced it."""
        assert sort_lawnmower(DiskRow(2)).algorithm is SortAlgorithmName.LAWNMOWER


# -- Equivalence and selection --------------------------------------------------


class TestEquivalence:
    """Both algorithms agree on every alternating row."""

    @pytest.mark.parametrize("light_count", _SIZES)
    def test_same_final_row(self, light_count: int) -> None:
        """Both algorithms produce structurally equal rows."""
        before = DiskRow(light_count)
        assert sort_alternate(before).after == sort_lawnmower(before).after

    @pytest.mark.parametrize("light_count", _SIZES)
    def test_same_swap_count(self, light_count: int) -> None:
        """Both algorithms perform the same number of swaps."""
        before = DiskRow(light_count)
        assert sort_alternate(before).swap_count == sort_lawnmower(before).swap_count


class TestCreateSorter:
    """Selecting an algorithm by name."""

    def test_by_enum(self) -> None:
        """Enum members select their algorithm."""
        assert isinstance(create_sorter(SortAlgorithmName.ALTERNATE), AlternatingSort)

    def test_by_string(self) -> None:
        """Plain strings work too."""
        assert isinstance(create_sorter("lawnmower"), LawnmowerSort)

    def test_unknown_name(self) -> None:
        """Unknown names raise ValueError listing the choices."""
        with pytest.raises(ValueError, match="alternate"):
            create_sorter("bogosort")

    def test_logger_is_passed_through(self) -> None:
        """A logger given to the factory receives the algorithm's trace."""
        logger = Logger()
        sorter: SortAlgorithm = create_sorter("alternate", logger=logger)
        sorter.sort(DiskRow(2))
        assert len(logger) > 0


# -- Results and tracing --------------------------------------------------------


class TestSortResult:
    """Results are immutable values."""

    def test_frozen(self) -> None:
        """Fields cannot be reassigned."""
        result = sort_alternate(DiskRow(2))
        with pytest.raises(AttributeError):
            result.swap_count = 99  # pyright: ignore[reportAttributeAccessIssue]

    def test_fields(self) -> None:
        """A result can be built directly from its parts."""
        row = DiskRow(1)
        result = SortResult(after=row, swap_count=0, passes=1, algorithm=SortAlgorithmName.LAWNMOWER)
        assert result.after is row
        assert result.swap_count == 0


class TestTracing:
    """Algorithms narrate their passes into an optional logger."""

    @pytest.mark.parametrize("name", list(SortAlgorithmName))
    def test_one_debug_entry_per_pass(self, name: SortAlgorithmName) -> None:
        """Every pass or sweep records exactly one DEBUG entry."""
        logger = Logger()
        result = create_sorter(name, logger=logger).sort(DiskRow(4))
        debug = [e for e in logger.entries if e.level is LogLevel.DEBUG]
        assert len(debug) == result.passes
        assert [e.pass_number for e in debug] == list(range(result.passes))

    @pytest.mark.parametrize("name", list(SortAlgorithmName))
    def test_summary_entry(self, name: SortAlgorithmName) -> None:
        """Completion records one INFO entry with the swap total."""
        logger = Logger()
        create_sorter(name, logger=logger).sort(DiskRow(3))
        info = logger.filter(min_level=LogLevel.INFO)
        assert len(info) == 1
        assert "3 swaps" in info[0].message
        assert info[0].source == name

    def test_last_pass_shows_sorted_row(self) -> None:
        """The final trace line renders the sorted row."""
        logger = Logger()
        sort_lawnmower(DiskRow(2), logger=logger)
        last_debug = logger.filter(source="lawnmower")[-2]
        assert last_debug.message.endswith("L L D D")

    def test_no_logger_no_entries(self) -> None:
        """Without a logger nothing is recorded and sorting still works."""
        assert sort_alternate(DiskRow(3)).after.is_sorted()
