"""
Search Context Module - Per-call state threaded through a solver search.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Set

from .board import BoardState
from .move import Move


@dataclass
class SearchContext:
    """
    Mutable state owned by one solver invocation.

    Nothing here is shared between searches, so independent searches can
    run side by side.

    Attributes:
        board: Board the search starts from
        visited: Canonical forms already explored
        path: Moves from the start board to the board being expanded
        best: Shortest winning path recorded so far
        solutions_found: Number of winning paths recorded
    """
    board: BoardState
    visited: Set[BoardState] = field(default_factory=set)
    path: List[Move] = field(default_factory=list)
    best: Optional[List[Move]] = None
    solutions_found: int = 0

    def mark_visited(self, board: BoardState) -> bool:
        """
        Record a board as explored.

        Args:
            board: Board to record (canonicalized here)

        Returns:
            True if the board was new, False if its canonical form was
            already explored
        """
        key = board.canonical_form()
        if key in self.visited:
            return False
        self.visited.add(key)
        return True

    def record_solution(self) -> None:
        """Record the current path as a winning sequence; first of minimal length wins."""
        self.solutions_found += 1
        if self.best is None or len(self.path) < len(self.best):
            self.best = list(self.path)

    @property
    def states_explored(self) -> int:
        """Distinct canonical boards explored, start board included."""
        return len(self.visited)
