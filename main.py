"""
Pour Sort - Entry Point

Command line front end for the level generator and solver.

Example:
    python main.py generate 5
    python main.py solve 5 --height 3 --strategy breadth_first
    python main.py mix --colors 3 --depth 6
    python main.py build --count 10 --levels-dir levels
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, Optional

from pour_sort.engine import Solution, create_strategy, decode_letters, get_strategy_names
from pour_sort.levels import (
    Level,
    LevelFileError,
    MixConfig,
    MixError,
    build_level_file,
    mix_level,
)
from pour_sort.settings import load_settings, remember_level, save_settings


logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Log to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("pour_sort.log", mode='w', encoding='utf-8')  # File output
        ]
    )


class Application:
    """
    Command dispatcher.

    Merges saved settings with command line flags and runs one command.
    """

    def __init__(self, args: argparse.Namespace):
        """
        Initialize the application.

        Args:
            args: Parsed command line arguments (override saved settings)
        """
        self.args = args
        self.settings: Dict[str, Any] = load_settings()

        self.glass_height: int = args.height or self.settings["glass_height"]
        self.strategy_name: str = args.strategy or self.settings["strategy_name"]
        self.levels_dir = Path(args.levels_dir or self.settings["levels_dir"])

    def run(self) -> int:
        """
        Run the selected command.

        Returns:
            Exit code
        """
        handler = getattr(self, f"_cmd_{self.args.command}")
        try:
            return handler()
        except (LevelFileError, MixError, ValueError) as e:
            logger.error(f"{self.args.command} failed: {e}")
            return 1

    def _load_level(self, number: Optional[int]) -> Level:
        if number is None:
            number = self.settings["level_number"]
        return Level.load_or_create(number, self.glass_height, self.levels_dir, self.strategy_name)

    def _cmd_generate(self) -> int:
        """Print the starting board of a level."""
        level = self._load_level(self.args.level)
        print(f"Level {level.number} (glass height {level.glass_height}):")
        print(level.loaded)

        remember_level(self.settings, level.number, self.glass_height)
        save_settings(self.settings)
        return 0

    def _cmd_solve(self) -> int:
        """Print the solution of a level, after replaying any given moves."""
        level = self._load_level(self.args.level)
        for move in decode_letters(self.args.moves or ""):
            if max(move.src, move.dst) >= level.glass_count or not level.pour(move.src, move.dst):
                raise ValueError(f"Illegal move {move.as_letters()} after {level.move_count} moves")
        print(level.current)
        solution = level.solve(self.strategy_name)
        self._print_solution(solution)
        return 0

    def _cmd_mix(self) -> int:
        """Print the hardest board found by backward mixing."""
        config = MixConfig(
            colors=self.args.colors,
            glass_height=self.glass_height,
            max_depth=self.args.depth,
            max_pour=self.args.max_pour,
            seed=self.args.seed,
            strategy_name=self.strategy_name,
        )
        board = mix_level(config)
        print(board)
        self._print_solution(create_strategy(self.strategy_name).solve(board))
        return 0

    def _cmd_build(self) -> int:
        """Write a level pack."""
        path = build_level_file(self.glass_height, self.args.count, self.levels_dir, self.strategy_name)
        print(f"Wrote {self.args.count} levels to {path}")
        return 0

    @staticmethod
    def _print_solution(solution: Solution) -> None:
        metrics = solution.metrics
        if not solution.is_complete:
            print(f"No solution ({metrics.states_explored} states explored)")
            return
        print(
            f"Solution: {solution.as_letters() or '(already solved)'} "
            f"[{solution.move_count} moves, {metrics.states_explored} states, "
            f"{metrics.computation_time_ms:.1f}ms, {metrics.strategy_name}]"
        )


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Pour Sort - Water sort puzzle generator and solver"
    )
    parser.add_argument(
        "--height",
        type=int,
        help="Glass height (default: from config.json)"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        help="Solver strategy (default: from config.json)"
    )
    parser.add_argument(
        "--levels-dir",
        help="Folder holding levels{height}.bin packs"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="Show the starting board of a level")
    generate.add_argument("level", type=int, nargs="?", help="Level number (default: last level shown)")

    solve = commands.add_parser("solve", help="Solve a level")
    solve.add_argument("level", type=int, nargs="?", help="Level number (default: last level shown)")
    solve.add_argument("--moves", help="Letter pairs to play before solving, e.g. acba")

    mix = commands.add_parser("mix", help="Mix a hard board backwards from a solved one")
    mix.add_argument("--colors", type=int, default=3)
    mix.add_argument("--depth", type=int, default=6)
    mix.add_argument("--max-pour", type=int, default=2)
    mix.add_argument("--seed", type=int, default=None)

    build = commands.add_parser("build", help="Generate a level pack")
    build.add_argument("--count", type=int, default=10)

    return parser.parse_args(argv)


def main():
    """Parse arguments and run the requested command."""
    args = parse_args()
    configure_logging(args.debug)

    application = Application(args)
    sys.exit(application.run())


if __name__ == "__main__":
    main()
