"""Disk rows — the state container for the alternating disks problem.

A row holds ``2n`` disks, ``n`` light and ``n`` dark.  It always starts
in the **alternating** arrangement (light, dark, light, dark, ...) and
the goal is the **sorted** arrangement: every light disk on the left,
every dark disk on the right.  The only permitted move is swapping two
neighbours.

Think of it like a row of chess pieces on a shelf: you may only slide
two touching pieces past each other, never lift one out of the line.

Design choices:
    - **StrEnum for colours** so each member carries its one-letter
      rendering code (``"L"`` / ``"D"``).  Comparisons always use the
      named members, never the underlying values.
    - **Preconditions raise** ``PreconditionError`` (an
      ``AssertionError``).  A bad index is a caller bug, not a runtime
      condition to recover from.
    - **No aliasing** — every row owns its list; ``copy()`` is the only
      way to get a second row with the same contents.
"""

from enum import StrEnum


class PreconditionError(AssertionError):
    """Raised when a caller breaks a row's contract (bad count or index)."""


class DiskColor(StrEnum):
    """The two disk colours, valued by their rendering code."""

    LIGHT = "L"
    DARK = "D"


class DiskRow:
    """A fixed-length row of light and dark disks.

    Args:
        light_count: Number of light disks (and of dark disks).  Must be
            at least 1.

    Raises:
        PreconditionError: If *light_count* is less than 1.

    """

    def __init__(self, light_count: int) -> None:
        """Create a row of ``2 * light_count`` disks in alternating order."""
        if light_count < 1:
            msg = f"light_count must be at least 1, got {light_count}"
            raise PreconditionError(msg)
        self._colors: list[DiskColor] = [
            DiskColor.LIGHT if i % 2 == 0 else DiskColor.DARK for i in range(light_count * 2)
        ]

    # -- Sizes ------------------------------------------------------------

    def total_count(self) -> int:
        """Return the number of disks in the row."""
        return len(self._colors)

    def light_count(self) -> int:
        """Return the number of light disks."""
        return self.total_count() // 2

    def dark_count(self) -> int:
        """Return the number of dark disks (always equal to the light count)."""
        return self.light_count()

    # -- Access and mutation ----------------------------------------------

    def is_index(self, index: int) -> bool:
        """Return True if *index* addresses a disk in this row."""
        return 0 <= index < self.total_count()

    def get(self, index: int) -> DiskColor:
        """Return the colour at *index*.

        Raises:
            PreconditionError: If *index* is out of bounds.

        """
        if not self.is_index(index):
            msg = f"Index {index} out of range (row has {self.total_count()} disks)"
            raise PreconditionError(msg)
        return self._colors[index]

    def swap(self, left_index: int) -> None:
        """Exchange the disks at *left_index* and ``left_index + 1``.

        Raises:
            PreconditionError: If either index is out of bounds.

        """
        right_index = left_index + 1
        if not (self.is_index(left_index) and self.is_index(right_index)):
            msg = f"Cannot swap at {left_index} (row has {self.total_count()} disks)"
            raise PreconditionError(msg)
        self._colors[left_index], self._colors[right_index] = (
            self._colors[right_index],
            self._colors[left_index],
        )

    def copy(self) -> "DiskRow":
        """Return an independent row with the same colours."""
        clone = DiskRow(self.light_count())
        clone._colors = list(self._colors)
        return clone

    @property
    def colors(self) -> tuple[DiskColor, ...]:
        """Return a snapshot of the colours in index order."""
        return tuple(self._colors)

    # -- Structural queries -----------------------------------------------

    def is_initialized(self) -> bool:
        """Return True if the row is in the alternating arrangement.

        Even indices hold light disks, odd indices hold dark disks.
        """
        for i, color in enumerate(self._colors):
            expected = DiskColor.LIGHT if i % 2 == 0 else DiskColor.DARK
            if color is not expected:
                return False
        return True

    def is_sorted(self) -> bool:
        """Return True if every light disk sits left of every dark disk."""
        half = self.light_count()
        if any(color is not DiskColor.LIGHT for color in self._colors[:half]):
            return False
        return all(color is DiskColor.DARK for color in self._colors[half:])

    def inversion_count(self) -> int:
        """Return the number of dark disks sitting left of light disks.

        Each (dark, light) pair with the dark disk at the lower index is
        one inversion.  An adjacent swap of a dark-then-light pair
        removes exactly one, so this is the fewest swaps that can sort
        the row.
        """
        inversions = 0
        darks_seen = 0
        for color in self._colors:
            if color is DiskColor.DARK:
                darks_seen += 1
            else:
                inversions += darks_seen
        return inversions

    # -- Rendering and comparison -----------------------------------------

    def to_string(self) -> str:
        """Render as space-separated colour codes, e.g. ``L D L D``."""
        return " ".join(color.value for color in self._colors)

    def __str__(self) -> str:
        """Return the same text as ``to_string``."""
        return self.to_string()

    def __repr__(self) -> str:
        """Return a debugging representation."""
        return f"DiskRow({self.to_string()!r})"

    def __len__(self) -> int:
        """Return the number of disks."""
        return self.total_count()

    def __eq__(self, other: object) -> bool:
        """Compare rows element by element."""
        if not isinstance(other, DiskRow):
            return NotImplemented
        return self._colors == other._colors
