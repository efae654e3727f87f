"""
Level Store Module - Fixed-width binary level packs.

One file per glass height, named levels{height}.bin. Every level takes
one record of MAX_GLASSES * height + 1 bytes:

    u8                 number of glasses
    u8[height] * n     glass cells, bottom first
    zero padding       up to MAX_GLASSES glasses

Level n sits at byte offset n * record_size.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union

import numpy as np

from ..engine import BoardState, Glass, MAX_GLASSES
from .generator import generate_level

logger = logging.getLogger(__name__)

DEFAULT_LEVEL_COUNT = 10


class LevelFileError(Exception):
    """Raised when a level pack is missing, truncated or cannot hold a board."""


def levels_filename(glass_height: int) -> str:
    """File name of the level pack for a glass height."""
    return f"levels{glass_height}.bin"


def record_size(glass_height: int) -> int:
    """Bytes used by one level in a pack."""
    return MAX_GLASSES * glass_height + 1


def encode_board(board: BoardState) -> bytes:
    """
    Encode a board as one fixed-width record.

    Raises:
        LevelFileError: If the board has too many glasses or a cell does
            not fit in a byte
    """
    height = board.glass_height
    if board.glass_count > MAX_GLASSES:
        raise LevelFileError(f"Board has {board.glass_count} glasses, a record holds {MAX_GLASSES}")

    cells = np.zeros((MAX_GLASSES, height), dtype=np.uint8)
    if board.glass_count:
        values = np.array(board.to_lists(), dtype=np.int64)
        if values.min() < 0 or values.max() > 255:
            raise LevelFileError("Cell values must fit in one byte")
        cells[:board.glass_count] = values

    record = np.empty(record_size(height), dtype=np.uint8)
    record[0] = board.glass_count
    record[1:] = cells.ravel()
    return record.tobytes()


def decode_board(data: bytes, glass_height: int) -> BoardState:
    """
    Decode one record into a board.

    Raises:
        LevelFileError: If the record is short or names too many glasses
    """
    size = record_size(glass_height)
    if len(data) < size:
        raise LevelFileError(f"Level record needs {size} bytes, got {len(data)}")

    record = np.frombuffer(data, dtype=np.uint8, count=size)
    count = int(record[0])
    if count > MAX_GLASSES:
        raise LevelFileError(f"Level record names {count} glasses, at most {MAX_GLASSES} allowed")

    cells = record[1:].reshape(MAX_GLASSES, glass_height)[:count]
    return BoardState(glasses=tuple(Glass.of(row.tolist()) for row in cells))


def save_board(board: BoardState, stream: BinaryIO) -> None:
    """
    Append a board to an open level pack.

    Args:
        board: Board to write
        stream: Binary stream positioned where the record belongs
    """
    stream.write(encode_board(board))


def load_board(level_index: int, glass_height: int,
               directory: Union[str, Path] = ".") -> BoardState:
    """
    Read one level from the pack for a glass height.

    Args:
        level_index: Level number (record index)
        glass_height: Glass height of the pack
        directory: Folder holding the level packs

    Returns:
        Board stored for the level

    Raises:
        LevelFileError: If the pack is missing or has no record for the level
    """
    path = Path(directory) / levels_filename(glass_height)
    size = record_size(glass_height)
    try:
        with open(path, 'rb') as f:
            f.seek(level_index * size)
            data = f.read(size)
    except OSError as e:
        raise LevelFileError(f"Cannot read level pack {path}: {e}") from e

    if len(data) < size:
        raise LevelFileError(f"Level pack {path} has no level {level_index}")
    return decode_board(data, glass_height)


def build_level_file(glass_height: int, count: int = DEFAULT_LEVEL_COUNT,
                     directory: Union[str, Path] = ".",
                     strategy_name: Optional[str] = None) -> Path:
    """
    Generate levels 0..count-1 and write them to a level pack.

    Args:
        glass_height: Glass height of the pack
        count: Number of levels to generate
        directory: Folder to write the pack to
        strategy_name: Solver strategy used by the generator

    Returns:
        Path of the written pack
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / levels_filename(glass_height)

    with open(path, 'wb') as f:
        for level_index in range(count):
            board = generate_level(level_index, glass_height, strategy_name)
            save_board(board, f)
            logger.debug(f"Wrote level {level_index} ({board.glass_count} glasses)")

    logger.info(f"Level pack written: {path} ({count} levels)")
    return path
