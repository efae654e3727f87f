"""
Level Mixer Module - Backward generation from a solved board.

Starting from one full glass per color plus a few spare glasses, inverse
pours are applied in every combination up to a depth limit. Boards where
every colored glass ends up mixed and every spare is vacant again are
candidates; the candidate whose shortest solution is longest is kept.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

import numpy as np

from ..engine import BoardState, Glass, MAX_COLORS, MAX_GLASSES, create_strategy, pour_inverse

logger = logging.getLogger(__name__)


class MixError(Exception):
    """Raised when mixing finds no usable board."""


@dataclass(frozen=True)
class MixConfig:
    """
    Settings for backward generation.

    Attributes:
        colors: Number of colors, one full glass each
        glass_height: Capacity of the glasses
        max_depth: Maximum number of inverse pours applied
        max_pour: Largest number of units moved by one inverse pour
        spare_count: Vacant glasses added to the solved board
        seed: Shuffles the inverse pour order when set; None keeps the
            natural (src, dst, count) order
        strategy_name: Solver strategy used to rate candidates
    """
    colors: int = 3
    glass_height: int = 4
    max_depth: int = 6
    max_pour: int = 2
    spare_count: int = 2
    seed: Optional[int] = None
    strategy_name: Optional[str] = None

    def validate(self) -> None:
        """
        Raises:
            ValueError: If the configuration cannot describe a board
        """
        if not 1 <= self.colors <= MAX_COLORS:
            raise ValueError(f"colors must be in 1..{MAX_COLORS}, got {self.colors}")
        if self.glass_height < 2:
            raise ValueError(f"glass_height must be at least 2, got {self.glass_height}")
        if self.spare_count < 1 or self.colors + self.spare_count > MAX_GLASSES:
            raise ValueError(f"spare_count {self.spare_count} does not fit on a board")
        if self.max_depth < 1 or self.max_pour < 1:
            raise ValueError("max_depth and max_pour must be positive")


def solved_board(config: MixConfig) -> BoardState:
    """
    Build the solved starting board: one full glass per color, then the spares.
    """
    height = config.glass_height
    glasses = [Glass.filled(color, height, height) for color in range(1, config.colors + 1)]
    glasses.extend(Glass.vacant(height) for _ in range(config.spare_count))
    return BoardState(glasses=tuple(glasses))


def is_mixed(board: BoardState, spare_count: int) -> bool:
    """
    True if spare_count glasses are vacant and every other glass holds two or more colors.

    Glasses are interchangeable, so the spares may end up at any index;
    the test gives the same answer for every permutation of the board.

    Args:
        board: Board to check
        spare_count: Number of glasses that must be vacant
    """
    vacant = 0
    for glass in board.glasses:
        if glass.is_vacant():
            vacant += 1
        elif glass.colors() < 2:
            return False
    return vacant == spare_count


def _pour_order(config: MixConfig, glass_count: int) -> List[Tuple[int, int, int]]:
    order = [
        (src, dst, count)
        for src in range(glass_count)
        for dst in range(glass_count)
        if src != dst
        for count in range(1, config.max_pour + 1)
    ]
    if config.seed is not None:
        rng = np.random.default_rng(config.seed)
        order = [order[i] for i in rng.permutation(len(order))]
    return order


def mix_candidates(config: MixConfig) -> List[BoardState]:
    """
    Collect every sufficiently mixed board reachable within config.max_depth.

    Boards are deduplicated by canonical form. Each canonical form keeps
    the shallowest depth it was reached at, and a board reached again by
    a shorter path is expanded again with the larger remaining budget.

    Args:
        config: Mixing settings

    Returns:
        Candidate boards in discovery order, one per canonical form
    """
    config.validate()
    start = solved_board(config)
    order = _pour_order(config, start.glass_count)

    depths: Dict[BoardState, int] = {start.canonical_form(): 0}
    found: Set[BoardState] = set()
    candidates: List[BoardState] = []
    expansions = 0

    # Frames hold (board, index of the next pour to try); a board's depth
    # is its position in the stack
    stack: List[Tuple[BoardState, int]] = [(start, 0)]
    while stack:
        board, next_index = stack[-1]
        if next_index >= len(order):
            stack.pop()
            continue

        src, dst, count = order[next_index]
        stack[-1] = (board, next_index + 1)

        child = pour_inverse(board, src, dst, count)
        if child is None:
            continue
        depth = len(stack)
        key = child.canonical_form()
        if depths.get(key, depth + 1) <= depth:
            continue
        depths[key] = depth
        if key not in found and is_mixed(child, config.spare_count):
            found.add(key)
            candidates.append(child)
        if depth < config.max_depth:
            expansions += 1
            stack.append((child, 0))

    logger.debug(
        f"Mixing reached {len(depths)} boards with {expansions} expansions, "
        f"{len(candidates)} candidates"
    )
    return candidates


def mix_level(config: Optional[MixConfig] = None) -> BoardState:
    """
    Produce the hardest mixed board for a configuration.

    Args:
        config: Mixing settings (defaults used when None)

    Returns:
        Candidate whose shortest solution has the most moves; ties go to
        the candidate found first

    Raises:
        MixError: If no solvable candidate is reachable within max_depth
    """
    config = config or MixConfig()
    candidates = mix_candidates(config)
    strategy = create_strategy(config.strategy_name)

    best: Optional[BoardState] = None
    best_moves = 0
    for candidate in candidates:
        solution = strategy.solve(candidate)
        if solution.move_count > best_moves:
            best = candidate
            best_moves = solution.move_count

    if best is None:
        raise MixError(
            f"No solvable mixed board within {config.max_depth} inverse pours "
            f"({len(candidates)} candidates)"
        )

    logger.info(f"Mixed board needs {best_moves} moves ({len(candidates)} candidates rated)")
    return best
