"""
Level Generator Module - Forward shuffle-and-test level generation.

A level is built by shuffling one glass worth of each color with a
stream seeded from the level number, then asking the solver whether the
result can be solved. Rejected boards get another empty glass (up to a
ceiling) and a fresh shuffle from the same stream, so the level produced
for a given number and glass height never changes.
"""

import logging
from typing import Optional

import numpy as np

from ..engine import BoardState, Glass, MAX_COLORS, create_strategy

logger = logging.getLogger(__name__)

# Levels up to this number get number + 1 colors
EASY_LEVELS = 3
# Above the easy levels, one more color every this many levels
LEVELS_PER_COLOR = 7
BASE_COLORS = 3
# Color counts above this get a random reduction of up to MAX_COLOR_JITTER
JITTER_THRESHOLD = 8
MAX_COLOR_JITTER = 3
# Empty glasses are never increased past this count
MAX_EMPTY_GLASSES = 5


def color_count_for_level(level_index: int, rng: np.random.Generator) -> int:
    """
    Number of colors used by a level.

    Draws from rng only when the count is above JITTER_THRESHOLD.

    Args:
        level_index: Level number (1 or more)
        rng: Level's seeded random stream

    Returns:
        Color count between 2 and MAX_COLORS
    """
    if level_index <= EASY_LEVELS:
        return level_index + 1

    count = min(level_index // LEVELS_PER_COLOR + BASE_COLORS, MAX_COLORS)
    if count > JITTER_THRESHOLD:
        count -= int(rng.integers(0, MAX_COLOR_JITTER + 1))
    return count


def tutorial_board(glass_height: int) -> BoardState:
    """
    Fixed first level: two glasses, each half filled with the same color.

    Args:
        glass_height: Capacity of the glasses

    Returns:
        Tutorial board
    """
    half = glass_height // 2
    return BoardState(glasses=(
        Glass.filled(1, half, glass_height),
        Glass.filled(1, glass_height - half, glass_height),
    ))


def shuffled_board(color_count: int, empty_count: int, glass_height: int,
                   rng: np.random.Generator) -> BoardState:
    """
    Build one candidate board.

    Args:
        color_count: Number of colors, one glass worth of each
        empty_count: Vacant glasses appended after the colored ones
        glass_height: Capacity of the glasses
        rng: Random stream; one shuffle is drawn from it

    Returns:
        Board of color_count full glasses followed by empty_count vacant ones
    """
    mixed = np.repeat(np.arange(1, color_count + 1), glass_height)
    rng.shuffle(mixed)

    glasses = [
        Glass.of(mixed[i * glass_height:(i + 1) * glass_height].tolist())
        for i in range(color_count)
    ]
    glasses.extend(Glass.vacant(glass_height) for _ in range(empty_count))
    return BoardState(glasses=tuple(glasses))


def generate_level(level_index: int, glass_height: int,
                   strategy_name: Optional[str] = None) -> BoardState:
    """
    Generate the starting board for a level.

    Args:
        level_index: Level number, also the random seed; 0 is the tutorial
        glass_height: Capacity of the glasses
        strategy_name: Solver strategy used as the solvability oracle

    Returns:
        Solvable board without any glass already filled with one color

    Raises:
        ValueError: If level_index is negative or glass_height is below 2
    """
    if level_index < 0:
        raise ValueError(f"Level index must not be negative, got {level_index}")
    if glass_height < 2:
        raise ValueError(f"Glass height must be at least 2, got {glass_height}")

    if level_index == 0:
        return tutorial_board(glass_height)

    rng = np.random.default_rng(level_index)
    color_count = color_count_for_level(level_index, rng)
    empty_count = 2 if color_count == MAX_COLORS else 1
    strategy = create_strategy(strategy_name)

    attempt = 0
    while True:
        attempt += 1
        board = shuffled_board(color_count, empty_count, glass_height, rng)

        solution = strategy.solve(board)
        if solution.has_moves and not board.has_full_glass():
            logger.info(
                f"Level {level_index}: {color_count} colors, {empty_count} empty, "
                f"{solution.move_count} moves, {solution.metrics.states_explored} states "
                f"(attempt {attempt})"
            )
            return board

        logger.debug(
            f"Level {level_index} attempt {attempt} rejected "
            f"(solvable={solution.has_moves}, full glass={board.has_full_glass()})"
        )
        if empty_count < MAX_EMPTY_GLASSES:
            empty_count += 1
