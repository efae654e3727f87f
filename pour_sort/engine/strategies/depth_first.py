"""
Depth-First Strategy - Exhaustive backtracking search with canonical memoization.
"""

import logging
from typing import Iterator, List, Tuple

from ..base import SolverStrategy
from ..board import BoardState
from ..context import SearchContext
from ..move import Move
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class DepthFirstStrategy(SolverStrategy):
    """
    Exhaustive depth-first solver.

    Every legal pour is tried from every board. A won board is recorded as
    a candidate solution and the search carries on with its siblings; any
    other board is expanded only the first time its canonical form is seen.
    The shortest recorded path wins, ties going to the first one found.

    Algorithm:
        1. For each (src, dst) pair in order, try to pour
        2. Push the move onto the current path
        3. Won board: record the path
           Unseen board: mark it visited and descend into it
        4. Pop the move and continue with the next pair

    Frames are kept on an explicit stack rather than the interpreter call
    stack, so long move sequences are not bounded by the recursion limit.
    The order boards are visited in is the same as the recursive form.

    Because a board is never re-expanded, the returned path is the
    shortest among the paths the search happened to follow, which is not
    always a global optimum. Use "breadth_first" for that.
    """
    name = "depth_first"
    description = "Depth-first (exhaustive) - Backtracking over every legal pour"

    def search(self, context: SearchContext) -> None:
        """
        Run the backtracking search from context.board.

        Args:
            context: Search context, start board already marked visited
        """
        stack: List[Tuple[BoardState, Iterator[Tuple[Move, BoardState]]]] = [
            (context.board, self.expand(context.board))
        ]
        max_depth = 0

        while stack:
            _, moves = stack[-1]
            for move, child in moves:
                context.path.append(move)
                if child.is_win():
                    context.record_solution()
                elif context.mark_visited(child):
                    stack.append((child, self.expand(child)))
                    max_depth = max(max_depth, len(stack) - 1)
                    break
                context.path.pop()
            else:
                stack.pop()
                if stack:
                    context.path.pop()

        logger.debug(
            f"Depth-first search done: {context.states_explored} states, "
            f"{context.solutions_found} solutions, max depth {max_depth}"
        )
