"""
Base Strategy Module - Abstract base class for solving strategies.
"""

import time
from abc import ABC, abstractmethod
from typing import Iterator, Tuple

from .board import BoardState
from .context import SearchContext
from .move import Move
from .mover import pour
from .solution import Solution, SolutionMetrics


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the search() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for listings
    """
    name: str = "base"
    description: str = "Base strategy"

    def solve(self, board: BoardState) -> Solution:
        """
        Compute the solution for a board.

        A board that is already won is answered without searching.

        Args:
            board: Board to solve; never modified

        Returns:
            Solution with moves and metrics
        """
        start_time = time.perf_counter()
        context = SearchContext(board=board)
        context.mark_visited(board)

        if board.is_win():
            context.best = []
        else:
            self.search(context)

        return self._build_solution(context, start_time)

    @abstractmethod
    def search(self, context: SearchContext) -> None:
        """
        Explore the boards reachable from context.board.

        Implementations record winning paths with context.record_solution()
        and mark every explored board with context.mark_visited().

        Args:
            context: Search context, start board already marked visited
        """
        pass

    def expand(self, board: BoardState) -> Iterator[Tuple[Move, BoardState]]:
        """
        Yield every legal pour from a board.

        Pairs are tried in (src, dst) order, src outermost.

        Args:
            board: Board to expand

        Yields:
            (move, resulting board) for each legal pour
        """
        count = board.glass_count
        for src in range(count):
            for dst in range(count):
                if src == dst:
                    continue
                result = pour(board, src, dst)
                if result is not None:
                    child, move = result
                    yield move, child

    def _build_solution(self, context: SearchContext, start_time: float) -> Solution:
        """Build Solution object from the search context."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        return Solution(
            moves=list(context.best or []),
            is_complete=context.best is not None,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                states_explored=context.states_explored,
                solutions_found=context.solutions_found,
                strategy_name=self.name
            )
        )
