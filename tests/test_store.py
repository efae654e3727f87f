"""
Level pack tests: record layout, reading and building packs.
"""

import io

import pytest

from pour_sort.engine import BoardState, MAX_GLASSES
from pour_sort.levels import (
    Level,
    LevelFileError,
    build_level_file,
    generate_level,
    levels_filename,
    load_board,
    save_board,
)
from pour_sort.levels.store import decode_board, encode_board, record_size


def test_record_layout():
    board = BoardState.from_lists([[1, 2, 0], [3, 0, 0]])
    data = encode_board(board)
    assert len(data) == record_size(3) == MAX_GLASSES * 3 + 1
    assert data[0] == 2
    assert list(data[1:7]) == [1, 2, 0, 3, 0, 0]
    assert set(data[7:]) == {0}


def test_decode_reads_only_the_named_glasses():
    board = BoardState.from_lists([[1, 2, 0], [3, 0, 0], [0, 0, 0]])
    assert decode_board(encode_board(board), 3) == board


def test_decode_rejects_short_record():
    with pytest.raises(LevelFileError):
        decode_board(b"\x02\x01", 3)


def test_save_and_load_pack(tmp_path):
    boards = [
        BoardState.from_lists([[1, 1, 0, 0], [1, 1, 0, 0]]),
        BoardState.from_lists([[1, 2, 1, 2], [2, 1, 2, 1], [0, 0, 0, 0]]),
    ]
    path = tmp_path / levels_filename(4)
    with open(path, 'wb') as f:
        for board in boards:
            save_board(board, f)

    assert path.stat().st_size == 2 * record_size(4)
    assert load_board(0, 4, tmp_path) == boards[0]
    assert load_board(1, 4, tmp_path) == boards[1]


def test_missing_pack_or_level_raises(tmp_path):
    with pytest.raises(LevelFileError):
        load_board(0, 4, tmp_path)

    buffer = io.BytesIO()
    save_board(BoardState.from_lists([[1, 0], [1, 0]]), buffer)
    (tmp_path / levels_filename(2)).write_bytes(buffer.getvalue())
    with pytest.raises(LevelFileError):
        load_board(1, 2, tmp_path)


def test_build_level_file_matches_generator(tmp_path):
    path = build_level_file(3, count=3, directory=tmp_path)
    assert path.name == "levels3.bin"
    for level_index in range(3):
        assert load_board(level_index, 3, tmp_path) == generate_level(level_index, 3)

    level = Level.load(2, 3, tmp_path)
    assert level.loaded == generate_level(2, 3)
