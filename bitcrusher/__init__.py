"""Bitboard chess engine core: board state, attacks, move application and FEN/EPD reading."""

__version__ = "0.1.0"
__all__ = ["__version__"]