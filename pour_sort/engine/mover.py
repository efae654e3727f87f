"""
Mover Module - Legality and application of pours.

Both functions are pure: they never mutate the board passed in and never
raise for an illegal move. An illegal move is reported as None.
"""

from typing import Optional, Tuple

from .board import BoardState
from .glass import EMPTY
from .move import Move


def pour(board: BoardState, src: int, dst: int) -> Optional[Tuple[BoardState, Move]]:
    """
    Pour the top run of one glass into another.

    Legal if the source holds water and the destination is vacant, or its
    top color matches and it has room for the whole run.

    Args:
        board: Board to pour on
        src: Index of the glass to pour from
        dst: Index of the glass to pour into

    Returns:
        (new_board, move) with the transferred count recorded in move,
        or None if the pour is illegal
    """
    if src == dst:
        return None

    source = board.glasses[src]
    target = board.glasses[dst]
    if source.is_vacant():
        return None

    from_color, from_count, _ = source.info()
    to_color, _, to_empty = target.info()

    if to_color != EMPTY and (to_color != from_color or from_count > to_empty):
        return None

    new_board = board.with_glasses({
        src: source.removed(from_count),
        dst: target.added(from_color, from_count),
    })
    return new_board, Move(src=src, dst=dst, count=from_count)


def pour_inverse(board: BoardState, src: int, dst: int, count: int) -> Optional[BoardState]:
    """
    Move count units of the source's top color onto the destination.

    Used to take back a pour (undo) and to mix a solved board backwards.
    The destination's top color is not checked. Taking the whole top run
    is only allowed when nothing lies beneath it, so a partially mixed
    glass never loses its top color completely.

    Args:
        board: Board to pour on
        src: Index of the glass to take units from
        dst: Index of the glass to put them on
        count: Number of units to move (must be positive)

    Returns:
        New board, or None if the inverse pour is illegal
    """
    if src == dst or count <= 0:
        return None

    source = board.glasses[src]
    target = board.glasses[dst]
    from_color, from_count, from_empty = source.info()
    _, _, to_empty = target.info()

    height = board.glass_height
    if from_empty == height:
        return None
    if count > from_count or to_empty < count:
        return None
    if from_empty + from_count < height and count == from_count:
        return None

    return board.with_glasses({
        src: source.removed(count),
        dst: target.added(from_color, count),
    })
