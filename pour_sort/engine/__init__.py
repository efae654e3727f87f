"""
Engine Package - Puzzle state-space engine for the pour sort puzzle.

This package holds the board model, the pour rules and a pluggable
solver framework. Strategies can be selected at runtime by name.

Public API:
    - Glass: Immutable fixed-height stack of color units
    - BoardState: Immutable board representation
    - Move: A pour between two glasses
    - pour(), pour_inverse(): Pure move rules
    - Solution: Result of strategy computation
    - SolutionMetrics: Performance statistics
    - SearchContext: Per-search state
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - solve(): Encoded moves and explored-state count for a board

Usage:
    from pour_sort.engine import BoardState, create_strategy

    board = BoardState.from_lists([[1, 2], [2, 1], [0, 0]])
    solution = create_strategy("depth_first").solve(board)

    for move in solution.moves:
        print(f"Pour {move.count} from {move.src} into {move.dst}")
"""

# Core data structures
from .glass import Glass, EMPTY, MAX_COLORS, MAX_GLASSES
from .board import BoardState
from .move import Move, encode_moves, decode_moves, decode_letters
from .mover import pour, pour_inverse
from .solution import Solution, SolutionMetrics
from .context import SearchContext

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
    solve,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "Glass",
    "EMPTY",
    "MAX_COLORS",
    "MAX_GLASSES",
    "BoardState",
    "Move",
    "encode_moves",
    "decode_moves",
    "decode_letters",
    "pour",
    "pour_inverse",
    "Solution",
    "SolutionMetrics",
    "SearchContext",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "solve",
]
