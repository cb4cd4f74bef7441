"""Board geometry, pieces and castling-right enumerations."""

from __future__ import annotations

from enum import IntEnum, IntFlag

BOARD_DIMENSION = 8
PIECE_COUNT = 12
CASTLING_RIGHTS_COUNT = 4
PIECE_COUNT_PER_SIDE = 6
SQUARE_COUNT = 64
DIAGONAL_COUNT = 15

INITIAL_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

EMPTY_BITBOARD = 0
FULL_BITBOARD = (1 << 64) - 1


class Rank(IntEnum):
    """Board ranks, ordered from the eighth rank (0) down to the first (7)."""

    R_8 = 0
    R_7 = 1
    R_6 = 2
    R_5 = 3
    R_4 = 4
    R_3 = 5
    R_2 = 6
    R_1 = 7


class File(IntEnum):
    """Board files, A (0) to H (7)."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7


class Square(IntEnum):
    """Board squares indexed from A8 (0) to H1 (63); NULL_SQUARE is 64."""

    A8 = 0
    B8 = 1
    C8 = 2
    D8 = 3
    E8 = 4
    F8 = 5
    G8 = 6
    H8 = 7
    A7 = 8
    B7 = 9
    C7 = 10
    D7 = 11
    E7 = 12
    F7 = 13
    G7 = 14
    H7 = 15
    A6 = 16
    B6 = 17
    C6 = 18
    D6 = 19
    E6 = 20
    F6 = 21
    G6 = 22
    H6 = 23
    A5 = 24
    B5 = 25
    C5 = 26
    D5 = 27
    E5 = 28
    F5 = 29
    G5 = 30
    H5 = 31
    A4 = 32
    B4 = 33
    C4 = 34
    D4 = 35
    E4 = 36
    F4 = 37
    G4 = 38
    H4 = 39
    A3 = 40
    B3 = 41
    C3 = 42
    D3 = 43
    E3 = 44
    F3 = 45
    G3 = 46
    H3 = 47
    A2 = 48
    B2 = 49
    C2 = 50
    D2 = 51
    E2 = 52
    F2 = 53
    G2 = 54
    H2 = 55
    A1 = 56
    B1 = 57
    C1 = 58
    D1 = 59
    E1 = 60
    F1 = 61
    G1 = 62
    H1 = 63
    NULL_SQUARE = 64

    def _require_on_board(self) -> None:
        if self is Square.NULL_SQUARE:
            raise ValueError("the null square has no file or rank")

    def file(self) -> File:
        """The file the square lies on."""
        self._require_on_board()
        return File(self.value % BOARD_DIMENSION)

    def rank(self) -> Rank:
        """The rank the square lies on."""
        self._require_on_board()
        return Rank(self.value // BOARD_DIMENSION)

    def offset(self, delta: int) -> Square:
        """The square whose index is this one's plus ``delta``."""
        return Square(self.value + delta)


class Color(IntEnum):
    WHITE = 0
    BLACK = 1

    def opposite(self) -> Color:
        """The other colour."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE


class Side(IntEnum):
    KINGSIDE = 0
    QUEENSIDE = 1


class Diagonal(IntEnum):
    H8 = 0
    G8H7 = 1
    F8H6 = 2
    E8H5 = 3
    D8H4 = 4
    C8H3 = 5
    B8H2 = 6
    A8H1 = 7
    A7G1 = 8
    A6F1 = 9
    A5E1 = 10
    A4D1 = 11
    A3C1 = 12
    A2B1 = 13
    A1 = 14


class CounterDiagonal(IntEnum):
    A8 = 0
    A7B8 = 1
    A6C8 = 2
    A5D8 = 3
    A4E8 = 4
    A3F8 = 5
    A2G8 = 6
    A1H8 = 7
    B1H7 = 8
    C1H6 = 9
    D1H5 = 10
    E1H4 = 11
    F1H3 = 12
    G1H2 = 13
    H1 = 14


class Direction(IntEnum):
    TOP = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 3

    def delta(self) -> int:
        """Change of square index for one step in this direction."""
        return _DIRECTION_DELTAS[self]


_DIRECTION_DELTAS = {
    Direction.TOP: -BOARD_DIMENSION,
    Direction.LEFT: -1,
    Direction.RIGHT: 1,
    Direction.BOTTOM: BOARD_DIMENSION,
}


class PieceType(IntEnum):
    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5
    NONE = 6


class Piece(IntEnum):
    WHITE_PAWN = 0
    WHITE_KNIGHT = 1
    WHITE_BISHOP = 2
    WHITE_ROOK = 3
    WHITE_QUEEN = 4
    WHITE_KING = 5
    BLACK_PAWN = 6
    BLACK_KNIGHT = 7
    BLACK_BISHOP = 8
    BLACK_ROOK = 9
    BLACK_QUEEN = 10
    BLACK_KING = 11
    COUNT = 12
    NONE = 13

    @classmethod
    def of(cls, color: Color, piece_type: PieceType) -> Piece:
        """The piece of the given colour and type; NONE for PieceType.NONE."""
        if piece_type is PieceType.NONE:
            return cls.NONE
        return cls(Color(color) * PIECE_COUNT_PER_SIDE + PieceType(piece_type))

    def _require_real(self) -> None:
        if self.value >= PIECE_COUNT:
            raise ValueError(f"{self.name} is not a real piece")

    def color(self) -> Color:
        """The colour of the piece."""
        self._require_real()
        return Color(self.value // PIECE_COUNT_PER_SIDE)

    def piece_type(self) -> PieceType:
        """The type of the piece; PieceType.NONE for Piece.NONE."""
        if self is Piece.NONE:
            return PieceType.NONE
        self._require_real()
        return PieceType(self.value % PIECE_COUNT_PER_SIDE)


class SlidingPieceType(IntEnum):
    DIAGONAL = 0
    HORIZONTAL_VERTICAL = 1


class CastlingRights(IntFlag):
    """Castling rights, one bit each."""

    NONE = 0
    WHITE_KINGSIDE = 1 << 0
    WHITE_QUEENSIDE = 1 << 1
    BLACK_KINGSIDE = 1 << 2
    BLACK_QUEENSIDE = 1 << 3