"""
Level Module - A playable level: loaded board, current board and move history.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..engine import BoardState, Move, Solution, create_strategy, pour, pour_inverse
from .generator import generate_level
from .store import LevelFileError, load_board

logger = logging.getLogger(__name__)


class Level:
    """
    Playable level state.

    The loaded board never changes; the current board is the loaded board
    with the recorded moves applied. Solving works on a copy of the
    current board and never touches the level.

    Example:
        level = Level.create(3, glass_height=4)
        if level.pour(0, 4):
            ...
        level.undo()
        solution = level.solve()
    """

    def __init__(self, number: int, glass_height: int, loaded: BoardState,
                 strategy_name: Optional[str] = None):
        """
        Initialize a level.

        Args:
            number: Level number
            glass_height: Capacity of every glass
            loaded: Starting board
            strategy_name: Solver strategy used for solving and for
                generating following levels (default strategy if None)
        """
        self.number = number
        self.glass_height = glass_height
        self.loaded = loaded
        self.strategy_name = strategy_name
        self.current = loaded
        self.history: List[Move] = []
        self.levels_dir: Optional[Path] = None

    @classmethod
    def create(cls, number: int, glass_height: int,
               strategy_name: Optional[str] = None) -> 'Level':
        """Generate a level from its number."""
        return cls(number, glass_height, generate_level(number, glass_height, strategy_name), strategy_name)

    @classmethod
    def load(cls, number: int, glass_height: int,
             directory: Union[str, Path] = ".",
             strategy_name: Optional[str] = None) -> 'Level':
        """
        Read a level from a level pack.

        Raises:
            LevelFileError: If the pack is missing or too short
        """
        level = cls(number, glass_height, load_board(number, glass_height, directory), strategy_name)
        level.levels_dir = Path(directory)
        return level

    @classmethod
    def load_or_create(cls, number: int, glass_height: int,
                       directory: Union[str, Path] = ".",
                       strategy_name: Optional[str] = None) -> 'Level':
        """
        Read a level from its pack, generating it if the pack cannot provide it.
        """
        try:
            return cls.load(number, glass_height, directory, strategy_name)
        except LevelFileError as e:
            logger.warning(f"{e}, generating level {number} instead")
        level = cls.create(number, glass_height, strategy_name)
        level.levels_dir = Path(directory)
        return level

    @property
    def glass_count(self) -> int:
        """Number of glasses in the level."""
        return self.current.glass_count

    @property
    def move_count(self) -> int:
        """Number of recorded moves."""
        return len(self.history)

    def pour(self, src: int, dst: int, record_move: bool = True) -> bool:
        """
        Pour on the current board.

        Args:
            src: Glass to pour from
            dst: Glass to pour into
            record_move: Push the move on the history so it can be undone

        Returns:
            True if the pour was legal and applied
        """
        result = pour(self.current, src, dst)
        if result is None:
            return False
        self.current, move = result
        if record_move:
            self.history.append(move)
        return True

    def pour_inverse(self, src: int, dst: int, count: int) -> bool:
        """
        Inverse pour on the current board.

        Returns:
            True if the inverse pour was legal and applied
        """
        board = pour_inverse(self.current, src, dst, count)
        if board is None:
            return False
        self.current = board
        return True

    def undo(self) -> bool:
        """
        Take back the last recorded move.

        Returns:
            True if a move was undone
        """
        if not self.history:
            return False
        move = self.history.pop()
        undone = move.inverse()
        if not self.pour_inverse(undone.src, undone.dst, undone.count):
            # Recorded moves always invert; reaching this means the board
            # was changed behind the level's back.
            logger.error(f"Could not undo move {move}")
            self.history.append(move)
            return False
        return True

    def restart(self) -> None:
        """Reset the current board to the loaded board and clear the history."""
        self.current = self.loaded
        self.history.clear()

    def is_win(self) -> bool:
        """True if the current board is solved."""
        return self.current.is_win()

    def solve(self, strategy_name: Optional[str] = None) -> Solution:
        """
        Solve from the current board.

        Args:
            strategy_name: Solver strategy (the level's strategy if None)

        Returns:
            Solution for the current board
        """
        solution = create_strategy(strategy_name or self.strategy_name).solve(self.current)
        logger.debug(
            f"Level {self.number}: {solution.move_count} moves from current board, "
            f"{solution.metrics.states_explored} states"
        )
        return solution

    def _reload(self, number: int, glass_height: int) -> None:
        if self.levels_dir is not None:
            other = Level.load_or_create(number, glass_height, self.levels_dir, self.strategy_name)
        else:
            other = Level.create(number, glass_height, self.strategy_name)
        self.number = number
        self.glass_height = glass_height
        self.loaded = other.loaded
        self.restart()

    def next_level(self) -> None:
        """Replace this level with the following level number."""
        self._reload(self.number + 1, self.glass_height)
        logger.info(f"Advanced to level {self.number}")

    def resize(self, glass_height: int) -> None:
        """Reload the same level number with a different glass height."""
        self._reload(self.number, glass_height)
        logger.info(f"Level {self.number} resized to glass height {glass_height}")
