"""Attack bitboards for knights and diagonal sliders."""

from __future__ import annotations

from dataclasses import dataclass

from .bitboards import BitboardOffset, RepeatedDirection, make_offset, safe_shift
from .enums import EMPTY_BITBOARD, FULL_BITBOARD, Direction


@dataclass(frozen=True)
class SliderOffsets:
    """Offsets for one, two and four steps along a sliding direction."""

    offset_x1: BitboardOffset
    offset_x2: BitboardOffset
    offset_x4: BitboardOffset


_KNIGHT_OFFSETS: tuple[BitboardOffset, ...] = tuple(
    make_offset(RepeatedDirection(long_dir, 2), short_dir)
    for long_dir, short_dir in (
        (Direction.TOP, Direction.LEFT),
        (Direction.TOP, Direction.RIGHT),
        (Direction.BOTTOM, Direction.LEFT),
        (Direction.BOTTOM, Direction.RIGHT),
        (Direction.LEFT, Direction.TOP),
        (Direction.LEFT, Direction.BOTTOM),
        (Direction.RIGHT, Direction.TOP),
        (Direction.RIGHT, Direction.BOTTOM),
    )
)


def knight_attacks(knights: int) -> int:
    """Squares attacked by every knight in ``knights``."""
    attacks = EMPTY_BITBOARD
    for offset in _KNIGHT_OFFSETS:
        attacks |= safe_shift(offset, knights)
    return attacks


def make_diagonal_offsets(first: Direction, second: Direction) -> SliderOffsets:
    """Slider offsets for the diagonal combining ``first`` and ``second``."""
    return SliderOffsets(
        offset_x1=make_offset(first, second),
        offset_x2=make_offset(RepeatedDirection(first, 2), RepeatedDirection(second, 2)),
        offset_x4=make_offset(RepeatedDirection(first, 4), RepeatedDirection(second, 4)),
    )


def occluded_fill(offsets: SliderOffsets, sliders: int, empty_squares: int) -> int:
    """Kogge-Stone fill of ``sliders`` through ``empty_squares`` in one direction."""
    empty_squares &= FULL_BITBOARD
    sliders |= empty_squares & safe_shift(offsets.offset_x1, sliders)
    empty_squares &= safe_shift(offsets.offset_x1, empty_squares)

    sliders |= empty_squares & safe_shift(offsets.offset_x2, sliders)
    empty_squares &= safe_shift(offsets.offset_x2, empty_squares)

    sliders |= empty_squares & safe_shift(offsets.offset_x4, sliders)
    return sliders & FULL_BITBOARD


def _byteswap(bitboard: int) -> int:
    return int.from_bytes((bitboard & FULL_BITBOARD).to_bytes(8, "little"), "big")


def _forward_ray(square_bitboard: int, occupied: int, mask: int) -> int:
    return (occupied ^ ((occupied - 2 * square_bitboard) & FULL_BITBOARD)) & mask


def _reversed_ray(square_bitboard: int, occupied: int, mask: int) -> int:
    reverse_occupied = _byteswap(occupied)
    reverse_slider = _byteswap(square_bitboard)
    ray = reverse_occupied ^ ((reverse_occupied - 2 * reverse_slider) & FULL_BITBOARD)
    return _byteswap(ray) & mask


def upper_left_diagonal_attacks(square_bitboard: int, occupied: int, mask: int) -> int:
    """Attacks towards the upper left along the diagonal ``mask``."""
    return _reversed_ray(square_bitboard, occupied, mask)


def bottom_right_diagonal_attacks(square_bitboard: int, occupied: int, mask: int) -> int:
    """Attacks towards the bottom right along the diagonal ``mask``."""
    return _forward_ray(square_bitboard, occupied, mask)


def upper_right_diagonal_attacks(square_bitboard: int, occupied: int, mask: int) -> int:
    """Attacks towards the upper right along the counter diagonal ``mask``."""
    return _reversed_ray(square_bitboard, occupied, mask)


def bottom_left_diagonal_attacks(square_bitboard: int, occupied: int, mask: int) -> int:
    """Attacks towards the bottom left along the counter diagonal ``mask``."""
    return _forward_ray(square_bitboard, occupied, mask)


_DIAGONAL_OFFSETS: tuple[SliderOffsets, ...] = (
    make_diagonal_offsets(Direction.TOP, Direction.LEFT),
    make_diagonal_offsets(Direction.TOP, Direction.RIGHT),
    make_diagonal_offsets(Direction.BOTTOM, Direction.LEFT),
    make_diagonal_offsets(Direction.BOTTOM, Direction.RIGHT),
)


def diagonal_attacks(sliders: int, occupancy: int) -> int:
    """Squares attacked diagonally by every slider in ``sliders``."""
    empty = ~occupancy & FULL_BITBOARD
    attacks = EMPTY_BITBOARD
    for offsets in _DIAGONAL_OFFSETS:
        fill = occluded_fill(offsets, sliders, empty)
        attacks |= safe_shift(offsets.offset_x1, fill)
    return attacks