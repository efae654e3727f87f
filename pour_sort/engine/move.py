"""
Move Module - A pour from one glass into another.
"""

from dataclasses import dataclass
from typing import List, Sequence

# Presentation layers name glasses with letters starting here
_FIRST_LETTER = ord('a')


@dataclass(frozen=True)
class Move:
    """
    Represents a pour between two glasses.

    Attributes:
        src: Index of the glass poured from
        dst: Index of the glass poured into
        count: Units transferred, needed to invert the move (0 if unknown)
    """
    src: int
    dst: int
    count: int = 0

    def inverse(self) -> 'Move':
        """Move that takes the same units back."""
        return Move(src=self.dst, dst=self.src, count=self.count)

    def as_letters(self) -> str:
        """Two-letter form, e.g. 'ac' for a pour from glass 0 into glass 2."""
        return chr(_FIRST_LETTER + self.src) + chr(_FIRST_LETTER + self.dst)


def encode_moves(moves: Sequence[Move]) -> List[int]:
    """
    Flatten moves into the wire format consumed by UI layers.

    Args:
        moves: Ordered moves

    Returns:
        [src0, dst0, src1, dst1, ...]
    """
    encoded: List[int] = []
    for move in moves:
        encoded.append(move.src)
        encoded.append(move.dst)
    return encoded


def decode_moves(encoded: Sequence[int]) -> List[Move]:
    """
    Rebuild moves from the flat wire format.

    Counts are not part of the wire format and come back as 0.

    Raises:
        ValueError: If the sequence has an odd length
    """
    if len(encoded) % 2:
        raise ValueError(f"Encoded move sequence must have even length, got {len(encoded)}")
    return [Move(src=encoded[i], dst=encoded[i + 1]) for i in range(0, len(encoded), 2)]


def decode_letters(text: str) -> List[Move]:
    """
    Parse letter pairs such as 'acba' back into moves.

    Raises:
        ValueError: If the text holds anything but an even number of letters
    """
    text = text.strip().lower()
    for ch in text:
        if not 'a' <= ch <= 'z':
            raise ValueError(f"Not a glass letter: {ch!r}")
    return decode_moves([ord(ch) - _FIRST_LETTER for ch in text])
