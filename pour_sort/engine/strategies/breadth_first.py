"""
Breadth-First Strategy - Level-order search for a guaranteed shortest solution.
"""

import logging
from collections import deque
from typing import Deque, Tuple

from ..base import SolverStrategy
from ..board import BoardState
from ..context import SearchContext
from ..move import Move
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class BreadthFirstStrategy(SolverStrategy):
    """
    Breadth-first solver.

    Uses the same move generation and canonical deduplication as the
    depth-first strategy, but expands boards in order of distance from
    the start. The first won board reached therefore ends a shortest
    possible solution and the search stops there.

    Memory grows with the width of the frontier, which for large boards
    is much more than the depth-first path.
    """
    name = "breadth_first"
    description = "Breadth-first (optimal) - Stops at the first, shortest solution"

    def search(self, context: SearchContext) -> None:
        """
        Expand boards level by level until a win is found.

        Args:
            context: Search context, start board already marked visited
        """
        frontier: Deque[Tuple[BoardState, Tuple[Move, ...]]] = deque([(context.board, ())])

        while frontier:
            board, path = frontier.popleft()
            for move, child in self.expand(board):
                child_path = path + (move,)
                if child.is_win():
                    context.path = list(child_path)
                    context.record_solution()
                    logger.debug(
                        f"Breadth-first search found {len(child_path)} moves "
                        f"after {context.states_explored} states"
                    )
                    return
                if context.mark_visited(child):
                    frontier.append((child, child_path))

        logger.debug(f"Breadth-first search exhausted {context.states_explored} states, no solution")
