"""
Solution Module - Result of a solver search.
"""

from dataclasses import dataclass, field
from typing import List

from .board import BoardState
from .move import Move, encode_moves
from .mover import pour


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of distinct canonical boards explored
        solutions_found: Number of winning sequences seen during the search
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    solutions_found: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    An empty move list with is_complete False means the board cannot be
    solved from its current configuration. An already-won board gives an
    empty, complete solution.

    Attributes:
        moves: Ordered sequence of pours to execute
        is_complete: True if the moves reach a won board
        metrics: Performance statistics
    """
    moves: List[Move] = field(default_factory=list)
    is_complete: bool = False
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def has_moves(self) -> bool:
        """Check if solution has any moves."""
        return len(self.moves) > 0

    @property
    def encoded(self) -> List[int]:
        """Flat [src, dst, ...] sequence for UI and animation layers."""
        return encode_moves(self.moves)

    def as_letters(self) -> str:
        """Letter pairs, glass 0 being 'a'."""
        return "".join(m.as_letters() for m in self.moves)

    def replay(self, board: BoardState) -> List[BoardState]:
        """
        Apply the moves to a board.

        Args:
            board: Board the solution was computed for

        Returns:
            Board after each move, starting with the input board

        Raises:
            ValueError: If a move is illegal on the board it is applied to
        """
        states = [board]
        for index, move in enumerate(self.moves):
            result = pour(states[-1], move.src, move.dst)
            if result is None:
                raise ValueError(f"Move {index} ({move.as_letters()}) is illegal on the replayed board")
            states.append(result[0])
        return states
