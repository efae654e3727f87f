"""
Levels Package - Level generation, play state and level packs.

Usage:
    from pour_sort.levels import Level, generate_level, mix_level, MixConfig

    board = generate_level(5, glass_height=4)
    hard = mix_level(MixConfig(colors=3, max_depth=6))

    level = Level.load_or_create(0, glass_height=4, directory="levels")
"""

from .generator import (
    generate_level,
    color_count_for_level,
    tutorial_board,
    MAX_EMPTY_GLASSES,
)
from .mixer import MixConfig, MixError, mix_level, mix_candidates, is_mixed
from .store import (
    LevelFileError,
    load_board,
    save_board,
    build_level_file,
    levels_filename,
)
from .level import Level

__all__ = [
    "generate_level",
    "color_count_for_level",
    "tutorial_board",
    "MAX_EMPTY_GLASSES",
    "MixConfig",
    "MixError",
    "mix_level",
    "mix_candidates",
    "is_mixed",
    "LevelFileError",
    "load_board",
    "save_board",
    "build_level_file",
    "levels_filename",
    "Level",
]
