"""
Strategy Factory Module - Registry and factory for strategy instantiation.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple, Type

from .base import SolverStrategy
from .board import BoardState

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = "depth_first"

# Global registry of strategies
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Decorator to register a strategy class.

    Usage:
        @register_strategy
        class MyStrategy(SolverStrategy):
            name = "my_strategy"
            ...

    Args:
        cls: Strategy class to register

    Returns:
        The same class (for decorator chaining)
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: Optional[str] = None, **kwargs: Any) -> SolverStrategy:
    """
    Create a strategy instance by name.

    Args:
        name: Strategy name (e.g., "depth_first"); None selects the default
        **kwargs: Additional arguments passed to strategy constructor

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy name not found
    """
    if name is None:
        name = get_default_strategy_name()
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return _STRATEGIES[name](**kwargs)


def get_strategy_names() -> List[str]:
    """
    Get list of available strategy names.

    Returns:
        List of registered strategy names
    """
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered strategies.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """
    Get the default strategy name.

    Returns:
        Default strategy name ("depth_first" if available, else first registered)
    """
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    if _STRATEGIES:
        return next(iter(_STRATEGIES.keys()))
    return ""


def solve(board: BoardState, strategy_name: Optional[str] = None) -> Tuple[List[int], int]:
    """
    Solve a board and report the search size.

    Args:
        board: Board to solve
        strategy_name: Registered strategy to use (default strategy if None)

    Returns:
        (encoded moves as [src, dst, ...], explored state count). The
        move list is empty if the board is unsolvable or already won.
    """
    solution = create_strategy(strategy_name).solve(board)
    logger.debug(
        f"{solution.metrics.strategy_name}: {solution.move_count} moves, "
        f"{solution.metrics.states_explored} states, "
        f"{solution.metrics.computation_time_ms:.1f}ms"
    )
    return solution.encoded, solution.metrics.states_explored
