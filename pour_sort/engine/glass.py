"""
Glass Module - Fixed-capacity stack of colored water units.

Cells are indexed bottom-up: index 0 is the bottom of the glass and
index height-1 the top. Color 0 means empty; nonzero cells always form a
contiguous run starting at the bottom.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

EMPTY = 0
MAX_COLORS = 12
MAX_GLASSES = 16

# Bits per cell when packing a glass into its canonical key
_KEY_BITS = 8


@dataclass(frozen=True)
class Glass:
    """
    Immutable glass contents.

    Attributes:
        cells: Tuple of color ids, bottom first. Length is the glass height.
    """
    cells: Tuple[int, ...]

    @classmethod
    def of(cls, cells: Iterable[int]) -> 'Glass':
        """Create a Glass from any iterable of color ids (bottom first)."""
        return cls(cells=tuple(int(c) for c in cells))

    @classmethod
    def vacant(cls, height: int) -> 'Glass':
        """Create an empty glass of the given height."""
        return cls(cells=(EMPTY,) * height)

    @classmethod
    def filled(cls, color: int, count: int, height: int) -> 'Glass':
        """
        Create a glass holding count units of one color.

        Args:
            color: Color id of the water
            count: Number of units (0..height)
            height: Glass capacity

        Returns:
            Glass with count units of color at the bottom
        """
        if not 0 <= count <= height:
            raise ValueError(f"Cannot put {count} units into a glass of height {height}")
        return cls(cells=(color,) * count + (EMPTY,) * (height - count))

    @property
    def height(self) -> int:
        """Capacity of the glass."""
        return len(self.cells)

    @property
    def level(self) -> int:
        """Number of nonzero cells."""
        return sum(1 for c in self.cells if c != EMPTY)

    def info(self) -> Tuple[int, int, int]:
        """
        Describe the top of the glass.

        Scans from the top down. Leading empty cells are counted as free
        room; the first nonzero cell sets the top color, and the run length
        keeps counting until the first cell of a different color.

        Returns:
            (top_color, top_run_length, empty_count). top_color and
            top_run_length are 0 for a vacant glass.
        """
        top_color = EMPTY
        top_count = 0
        empty_count = 0
        counting = True
        for cell in reversed(self.cells):
            if cell == EMPTY:
                empty_count += 1
            elif top_color == EMPTY:
                top_color = cell
                top_count = 1
            elif counting and cell == top_color:
                top_count += 1
            else:
                counting = False
        return top_color, top_count, empty_count

    def is_full(self) -> bool:
        """True if the whole glass holds a single color (bottom must be nonzero)."""
        bottom = self.cells[0]
        return bottom != EMPTY and all(c == bottom for c in self.cells)

    def is_vacant(self) -> bool:
        """True iff every cell is empty."""
        return all(c == EMPTY for c in self.cells)

    def is_sorted(self) -> bool:
        """True if every cell equals the bottom cell (vacant glasses included)."""
        bottom = self.cells[0]
        return all(c == bottom for c in self.cells)

    def colors(self) -> int:
        """Number of distinct colors in the glass."""
        return len({c for c in self.cells if c != EMPTY})

    def canonical_key(self) -> int:
        """
        Pack the cells into one integer, bottom cell most significant.

        Only used as a sort key when canonicalizing a board.
        """
        key = 0
        for cell in self.cells:
            key = (key << _KEY_BITS) | cell
        return key

    def removed(self, count: int) -> 'Glass':
        """Return a copy with the top count units taken out."""
        level = self.level
        cells = list(self.cells)
        for i in range(level - count, level):
            cells[i] = EMPTY
        return Glass(cells=tuple(cells))

    def added(self, color: int, count: int) -> 'Glass':
        """Return a copy with count units of color poured on top."""
        level = self.level
        cells = list(self.cells)
        for i in range(level, level + count):
            cells[i] = color
        return Glass(cells=tuple(cells))

    def __str__(self) -> str:
        return " ".join(f"{c:2d}" if c else " ." for c in self.cells)
