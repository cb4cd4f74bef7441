"""Bitboard construction, file and rank masks, and wrap-safe shifting."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator, Union

from .enums import (
    BOARD_DIMENSION,
    EMPTY_BITBOARD,
    FULL_BITBOARD,
    Direction,
    Square,
)


def to_bitboard(*squares: Square) -> int:
    """A bitboard with the bits of the given squares set."""
    bitboard = EMPTY_BITBOARD
    for square in squares:
        square = Square(square)
        if square is Square.NULL_SQUARE:
            raise ValueError("the null square has no bitboard")
        bitboard |= 1 << square
    return bitboard


def is_square_set(bitboard: int, square: Square) -> bool:
    """Whether the bit of ``square`` is set in ``bitboard``."""
    return bool(bitboard & to_bitboard(square))


def iter_squares(bitboard: int) -> Iterator[Square]:
    """The set squares of ``bitboard``, lowest index first."""
    bitboard &= FULL_BITBOARD
    while bitboard:
        lowest = bitboard & -bitboard
        yield Square(lowest.bit_length() - 1)
        bitboard ^= lowest


_FILE_A = to_bitboard(
    Square.A1, Square.A2, Square.A3, Square.A4, Square.A5, Square.A6, Square.A7, Square.A8
)
_RANK_8 = to_bitboard(
    Square.A8, Square.B8, Square.C8, Square.D8, Square.E8, Square.F8, Square.G8, Square.H8
)

# Indexed by File.
FILE_BITBOARDS: tuple[int, ...] = tuple(_FILE_A << i for i in range(BOARD_DIMENSION))
# Indexed by Rank (R_8 first).
RANK_BITBOARDS: tuple[int, ...] = tuple(
    _RANK_8 << (BOARD_DIMENSION * i) for i in range(BOARD_DIMENSION)
)


@dataclass(frozen=True)
class RepeatedDirection:
    """A direction taken ``count`` times."""

    direction: Direction
    count: int


@dataclass(frozen=True)
class BitboardOffset:
    """A shift amount together with the mask that stops file wrap-around."""

    wrap_prevention_mask: int
    shift_value: int


DirectionLike = Union[Direction, RepeatedDirection]


def _steps(step: DirectionLike) -> tuple[Direction, int]:
    if isinstance(step, RepeatedDirection):
        return Direction(step.direction), step.count
    if isinstance(step, Direction):
        return step, 1
    raise TypeError(f"expected a Direction or RepeatedDirection, got {step!r}")


def calculate_offset(*directions: DirectionLike) -> int:
    """Total change of square index for the given steps."""
    total = 0
    for step in directions:
        direction, count = _steps(step)
        total += direction.delta() * count
    return total


def compute_wrap_prevention_mask(*directions: DirectionLike) -> int:
    """Mask clearing the files that would wrap around on a left or right shift."""
    left = right = 0
    for step in directions:
        direction, count = _steps(step)
        if direction is Direction.LEFT:
            left += count
        elif direction is Direction.RIGHT:
            right += count

    prevention = EMPTY_BITBOARD
    for file_bb in FILE_BITBOARDS[: min(left, BOARD_DIMENSION)]:
        prevention |= file_bb
    for file_bb in FILE_BITBOARDS[BOARD_DIMENSION - min(right, BOARD_DIMENSION):]:
        prevention |= file_bb
    return ~prevention & FULL_BITBOARD


@lru_cache(maxsize=None)
def make_offset(*directions: DirectionLike) -> BitboardOffset:
    """The offset, mask included, for the given steps."""
    return BitboardOffset(
        compute_wrap_prevention_mask(*directions), calculate_offset(*directions)
    )


def safe_shift(offset: BitboardOffset, bitboard: int) -> int:
    """Shift ``bitboard`` by ``offset`` after masking out wrapping bits."""
    masked = bitboard & offset.wrap_prevention_mask
    if offset.shift_value > 0:
        return (masked << offset.shift_value) & FULL_BITBOARD
    if offset.shift_value < 0:
        return masked >> -offset.shift_value
    return bitboard & FULL_BITBOARD


def shift_bitboard_no_wrap(bitboard: int, *directions: DirectionLike) -> int:
    """Shift ``bitboard`` by the given steps without wrapping between files."""
    return safe_shift(make_offset(*directions), bitboard)


_OPPOSITES = {
    Direction.TOP: Direction.BOTTOM,
    Direction.BOTTOM: Direction.TOP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def opposite_direction(direction: Direction) -> Direction:
    """The direction pointing the other way."""
    return _OPPOSITES[Direction(direction)]