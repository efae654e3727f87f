"""
Backward mixing tests.
"""

import pytest

from pour_sort.engine import BoardState, create_strategy, pour_inverse
from pour_sort.levels import MixConfig, MixError, is_mixed, mix_candidates, mix_level
from pour_sort.levels.mixer import _pour_order, solved_board


SMALL = MixConfig(colors=2, glass_height=2, max_depth=6, max_pour=1)


def level_order_mixed(config):
    """Canonical forms of every mixed board within max_depth, walked level by level."""
    start = solved_board(config)
    order = _pour_order(config, start.glass_count)
    seen = {start.canonical_form()}
    mixed = set()
    frontier = [start]
    for _ in range(config.max_depth):
        following = []
        for board in frontier:
            for src, dst, count in order:
                child = pour_inverse(board, src, dst, count)
                if child is None:
                    continue
                key = child.canonical_form()
                if key in seen:
                    continue
                seen.add(key)
                if is_mixed(child, config.spare_count):
                    mixed.add(key)
                following.append(child)
        frontier = following
    return mixed


def test_solved_board_layout():
    board = solved_board(MixConfig(colors=3, glass_height=4, spare_count=2))
    assert board.to_lists() == [[1] * 4, [2] * 4, [3] * 4, [0] * 4, [0] * 4]
    assert board.is_win()


def test_is_mixed():
    assert is_mixed(BoardState.from_lists([[1, 2], [2, 1], [0, 0], [0, 0]]), 2)
    assert is_mixed(BoardState.from_lists([[0, 0], [1, 2], [0, 0], [2, 1]]), 2)
    assert not is_mixed(BoardState.from_lists([[1, 1], [2, 2], [0, 0], [0, 0]]), 2)
    assert not is_mixed(BoardState.from_lists([[1, 2], [2, 0], [1, 0], [0, 0]]), 2)
    assert not is_mixed(BoardState.from_lists([[1, 2], [2, 1], [0, 0], [0, 0]]), 1)


def test_candidates_are_mixed_and_conserve_colors():
    candidates = mix_candidates(SMALL)
    assert candidates
    for board in candidates:
        assert is_mixed(board, SMALL.spare_count)
        assert board.color_counts() == {1: 2, 2: 2}
    canonical = [b.canonical_form() for b in candidates]
    assert len(canonical) == len(set(canonical))


@pytest.mark.parametrize("config", [
    SMALL,
    MixConfig(colors=2, glass_height=3, max_depth=5, max_pour=2),
    MixConfig(colors=3, glass_height=3, max_depth=4, max_pour=2),
    MixConfig(),
])
def test_candidates_cover_everything_within_depth(config):
    found = [b.canonical_form() for b in mix_candidates(config)]
    assert len(found) == len(set(found))
    assert set(found) == level_order_mixed(config)


def test_mix_level_picks_the_longest_solution():
    board = mix_level(SMALL)
    strategy = create_strategy()
    best = strategy.solve(board).move_count
    assert best > 0
    for candidate in mix_candidates(SMALL):
        assert strategy.solve(candidate).move_count <= best


def test_mix_level_with_default_config():
    config = MixConfig()
    board = mix_level()
    assert is_mixed(board, config.spare_count)
    assert sum(glass.is_vacant() for glass in board.glasses) == config.spare_count
    assert board.color_counts() == {1: 4, 2: 4, 3: 4}

    solution = create_strategy().solve(board)
    assert solution.is_complete
    assert solution.move_count > 0
    assert solution.replay(board)[-1].is_win()


def test_mixing_is_reproducible_with_a_seed():
    config = MixConfig(colors=2, glass_height=3, max_depth=5, max_pour=2, seed=11)
    assert mix_candidates(config) == mix_candidates(config)


def test_seed_changes_order_not_coverage():
    plain = MixConfig(colors=2, glass_height=3, max_depth=4, max_pour=2)
    seeded = MixConfig(colors=2, glass_height=3, max_depth=4, max_pour=2, seed=3)
    assert ({b.canonical_form() for b in mix_candidates(plain)}
            == {b.canonical_form() for b in mix_candidates(seeded)})


def test_depth_too_small_raises():
    with pytest.raises(MixError):
        mix_level(MixConfig(colors=2, glass_height=2, max_depth=1))


@pytest.mark.parametrize("config", [
    MixConfig(colors=0),
    MixConfig(glass_height=1),
    MixConfig(spare_count=0),
    MixConfig(colors=12, spare_count=5),
    MixConfig(max_depth=0),
])
def test_invalid_configs_raise(config):
    with pytest.raises(ValueError):
        mix_candidates(config)
