"""
Board State Module - Immutable board representation for the pour sort puzzle.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .glass import EMPTY, Glass, MAX_COLORS, MAX_GLASSES


@dataclass(frozen=True)
class BoardState:
    """
    Immutable board state representation.

    Uses a tuple of Glass values for hashability and immutability, so a
    board can be copied by reference and stored directly in a visited set.

    Attributes:
        glasses: Tuple of Glass values, all of the same height
    """
    glasses: Tuple[Glass, ...]

    @classmethod
    def from_lists(cls, rows: Sequence[Sequence[int]]) -> 'BoardState':
        """
        Create BoardState from nested lists of color ids.

        Args:
            rows: One sequence per glass, bottom cell first

        Returns:
            BoardState instance

        Raises:
            ValueError: If glasses differ in height, there are too many
                glasses, or a color id is out of range
        """
        glasses = tuple(Glass.of(row) for row in rows)
        if len(glasses) > MAX_GLASSES:
            raise ValueError(f"A board holds at most {MAX_GLASSES} glasses, got {len(glasses)}")
        if len({g.height for g in glasses}) > 1:
            raise ValueError("All glasses on a board must have the same height")
        for glass in glasses:
            if any(not EMPTY <= c <= MAX_COLORS for c in glass.cells):
                raise ValueError(f"Color ids must be in 0..{MAX_COLORS}: {glass.cells}")
        return cls(glasses=glasses)

    def to_lists(self) -> List[List[int]]:
        """
        Convert to mutable nested list representation.

        Returns:
            One list per glass, bottom cell first
        """
        return [list(g.cells) for g in self.glasses]

    @property
    def glass_count(self) -> int:
        """Number of glasses on the board."""
        return len(self.glasses)

    @property
    def glass_height(self) -> int:
        """Capacity of every glass on the board."""
        return self.glasses[0].height if self.glasses else 0

    def __getitem__(self, index: int) -> Glass:
        return self.glasses[index]

    def __len__(self) -> int:
        return len(self.glasses)

    def is_win(self) -> bool:
        """True if every glass is vacant or holds a single color top to bottom."""
        return all(g.is_sorted() for g in self.glasses)

    def has_full_glass(self) -> bool:
        """True if any glass is already completely filled with one color."""
        return any(g.is_full() for g in self.glasses)

    def canonical_form(self) -> 'BoardState':
        """
        Order-independent copy of the board.

        Glasses are interchangeable, so two boards whose glasses are
        permutations of each other share the same canonical form.
        """
        return BoardState(glasses=tuple(sorted(self.glasses, key=Glass.canonical_key)))

    def color_counts(self) -> Dict[int, int]:
        """
        Multiset of nonzero color units on the board.

        Returns:
            Mapping of color id to number of units
        """
        counts: Counter = Counter()
        for glass in self.glasses:
            counts.update(c for c in glass.cells if c != EMPTY)
        return dict(counts)

    def with_glasses(self, replacements: Dict[int, Glass]) -> 'BoardState':
        """
        Return a copy with some glasses replaced.

        Args:
            replacements: Mapping of glass index to its new contents

        Returns:
            New BoardState, original unchanged
        """
        glasses = list(self.glasses)
        for index, glass in replacements.items():
            glasses[index] = glass
        return BoardState(glasses=tuple(glasses))

    def __str__(self) -> str:
        return "\n".join(
            f"{chr(ord('a') + i)}: {glass}" for i, glass in enumerate(self.glasses)
        )
