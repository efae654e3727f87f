"""
Board tests: construction, win predicate and canonical form.
"""

import pytest

from pour_sort.engine import BoardState, Glass, MAX_GLASSES


def test_from_lists_round_trips_to_lists():
    rows = [[1, 2, 0], [2, 1, 0], [0, 0, 0]]
    board = BoardState.from_lists(rows)
    assert board.to_lists() == rows
    assert board.glass_count == 3
    assert board.glass_height == 3


@pytest.mark.parametrize("rows", [
    [[1, 1], [0, 0, 0]],
    [[0, 0]] * (MAX_GLASSES + 1),
    [[13, 0], [0, 0]],
    [[-1, 0], [0, 0]],
])
def test_from_lists_rejects_malformed_boards(rows):
    with pytest.raises(ValueError):
        BoardState.from_lists(rows)


def test_is_win():
    assert BoardState.from_lists([[1, 1], [0, 0]]).is_win()
    assert BoardState.from_lists([[1, 1], [2, 2], [0, 0]]).is_win()
    assert not BoardState.from_lists([[1, 0], [1, 0]]).is_win()
    assert not BoardState.from_lists([[1, 2], [2, 1], [0, 0]]).is_win()


def test_canonical_form_ignores_glass_order():
    a = BoardState.from_lists([[1, 2], [2, 1], [0, 0]])
    b = BoardState.from_lists([[0, 0], [1, 2], [2, 1]])
    c = BoardState.from_lists([[2, 1], [0, 0], [1, 2]])
    assert a != b
    assert a.canonical_form() == b.canonical_form() == c.canonical_form()
    assert hash(a.canonical_form()) == hash(c.canonical_form())


def test_canonical_form_distinguishes_different_contents():
    a = BoardState.from_lists([[1, 2], [2, 1], [0, 0]])
    b = BoardState.from_lists([[1, 1], [2, 2], [0, 0]])
    assert a.canonical_form() != b.canonical_form()


def test_color_counts_and_full_glass():
    board = BoardState.from_lists([[1, 2, 2], [1, 1, 0], [2, 2, 2]])
    assert board.color_counts() == {1: 3, 2: 5}
    assert board.has_full_glass()
    assert not BoardState.from_lists([[1, 2], [2, 1]]).has_full_glass()


def test_with_glasses_returns_a_copy():
    board = BoardState.from_lists([[1, 0], [0, 0]])
    moved = board.with_glasses({0: Glass.vacant(2), 1: Glass.of([1, 0])})
    assert moved.to_lists() == [[0, 0], [1, 0]]
    assert board.to_lists() == [[1, 0], [0, 0]]
