"""Bitboard representation of a chess position."""

from __future__ import annotations

from dataclasses import dataclass, field

from .bitboards import is_square_set, to_bitboard
from .enums import (
    EMPTY_BITBOARD,
    FULL_BITBOARD,
    PIECE_COUNT,
    CastlingRights,
    Color,
    Piece,
    PieceType,
    Square,
)

WHITE_PIECES: tuple[Piece, ...] = tuple(Piece(i) for i in range(6))
BLACK_PIECES: tuple[Piece, ...] = tuple(Piece(i) for i in range(6, PIECE_COUNT))

# Order in which piece types are looked up on a square; kings are not included.
_TYPE_LOOKUP_ORDER = (
    PieceType.PAWN,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.QUEEN,
)


def _piece_index(piece: Piece) -> int:
    piece = Piece(piece)
    if piece.value >= PIECE_COUNT:
        raise ValueError(f"{piece.name} has no bitboard")
    return piece.value


@dataclass
class BoardState:
    """Piece bitboards plus side to move, castling rights, en passant and counters."""

    bitboards: list[int] = field(default_factory=lambda: [EMPTY_BITBOARD] * PIECE_COUNT)
    white_attacked_squares: int = EMPTY_BITBOARD
    black_attacked_squares: int = EMPTY_BITBOARD
    fullmove_number: int = 1
    halfmove_clock: int = 0
    en_passant_square: Square = Square.NULL_SQUARE
    castling_rights: CastlingRights = CastlingRights.NONE
    side_to_move: Color = Color.WHITE
    white_occupancy: int = field(default=EMPTY_BITBOARD, init=False)
    black_occupancy: int = field(default=EMPTY_BITBOARD, init=False)
    all_occupancy: int = field(default=EMPTY_BITBOARD, init=False)
    empty_squares: int = field(default=FULL_BITBOARD, init=False)

    def __post_init__(self) -> None:
        if len(self.bitboards) != PIECE_COUNT:
            raise ValueError(f"expected {PIECE_COUNT} bitboards, got {len(self.bitboards)}")
        self.bitboards = list(self.bitboards)
        self.calculate_occupancies()

    def __copy__(self) -> BoardState:
        clone = BoardState.__new__(BoardState)
        clone.__dict__.update(self.__dict__)
        clone.bitboards = list(self.bitboards)
        return clone

    # Bitboard access

    def bitboard(self, piece: Piece) -> int:
        """The bitboard of ``piece``."""
        return self.bitboards[_piece_index(piece)]

    def piece_bitboard(self, piece_type: PieceType, color: Color) -> int:
        """The bitboard of the given type and colour."""
        return self.bitboard(Piece.of(color, piece_type))

    def diagonal_sliders(self, color: Color) -> int:
        """Bishops and queens of ``color``."""
        return self.piece_bitboard(PieceType.BISHOP, color) | self.piece_bitboard(
            PieceType.QUEEN, color
        )

    def horizontal_vertical_sliders(self, color: Color) -> int:
        """Rooks and queens of ``color``."""
        return self.piece_bitboard(PieceType.ROOK, color) | self.piece_bitboard(
            PieceType.QUEEN, color
        )

    def is_piece_on_square(self, piece: Piece, square: Square) -> bool:
        """Whether ``piece`` stands on ``square``."""
        return is_square_set(self.bitboard(piece), square)

    def piece_on_square(self, square: Square) -> Piece:
        """The piece on ``square``, white pieces checked first; NONE if empty."""
        square_bb = to_bitboard(square)
        for piece in WHITE_PIECES + BLACK_PIECES:
            if square_bb & self.bitboards[piece]:
                return piece
        return Piece.NONE

    def piece_type_on_square(self, square: Square) -> PieceType:
        """The type of a pawn, knight, bishop, rook or queen on ``square``.

        Kings and empty squares give PieceType.NONE.
        """
        square_bb = to_bitboard(square)
        for piece_type in _TYPE_LOOKUP_ORDER:
            both = self.piece_bitboard(piece_type, Color.WHITE) | self.piece_bitboard(
                piece_type, Color.BLACK
            )
            if square_bb & both:
                return piece_type
        return PieceType.NONE

    # Adding, removing and moving pieces

    def add_piece(self, piece: Piece, square: Square) -> None:
        """Put ``piece`` on ``square`` and recompute occupancies."""
        self.bitboards[_piece_index(piece)] |= to_bitboard(square)
        self.calculate_occupancies()

    def remove_piece(self, piece: Piece, square: Square) -> None:
        """Take ``piece`` off ``square``; occupancies are left for the caller to recompute."""
        self.bitboards[_piece_index(piece)] &= ~to_bitboard(square) & FULL_BITBOARD

    def move_piece(self, piece: Piece, source: Square, destination: Square) -> None:
        """Toggle ``piece`` on both squares; occupancies are not recomputed."""
        self.bitboards[_piece_index(piece)] ^= to_bitboard(source, destination)

    # Side to move

    def is_white_move(self) -> bool:
        """Whether white is to move."""
        return self.side_to_move == Color.WHITE

    def toggle_side_to_move(self) -> None:
        """Hand the move to the other side."""
        self.side_to_move = Color(self.side_to_move).opposite()

    # Castling rights

    def has_castling_right(self, right: CastlingRights) -> bool:
        """Whether any of the bits of ``right`` is held."""
        return bool(self.castling_rights & right)

    def add_castling_right(self, right: CastlingRights) -> None:
        """Grant ``right``."""
        self.castling_rights = CastlingRights(self.castling_rights | right)

    def remove_castling_rights(self, rights: CastlingRights) -> None:
        """Revoke every right in ``rights``."""
        self.castling_rights = CastlingRights(self.castling_rights & ~CastlingRights(rights))

    # En passant

    def has_en_passant(self) -> bool:
        """Whether an en passant square is set."""
        return self.en_passant_square != Square.NULL_SQUARE

    # Occupancy

    def own_occupancy(self, color: Color) -> int:
        """Squares occupied by ``color``."""
        return self.white_occupancy if color == Color.WHITE else self.black_occupancy

    def opponent_occupancy(self, color: Color) -> int:
        """Squares occupied by the opponent of ``color``."""
        return self.black_occupancy if color == Color.WHITE else self.white_occupancy

    def is_empty(self, squares_bitboard: int) -> bool:
        """Whether none of the given squares is occupied."""
        return (squares_bitboard & self.all_occupancy) == EMPTY_BITBOARD

    def is_not_attacked_by_opponent(self, squares_bitboard: int, enemy_attacked_squares: int) -> bool:
        """Whether none of the given squares lies in ``enemy_attacked_squares``."""
        return (squares_bitboard & enemy_attacked_squares) == EMPTY_BITBOARD

    def update_opponent_attacked_squares(self, color: Color, attacks: int) -> None:
        """Record the squares attacked by the opponent of ``color``."""
        if color == Color.WHITE:
            self.black_attacked_squares = attacks
        else:
            self.white_attacked_squares = attacks

    def calculate_occupancies(self) -> None:
        """Recompute the occupancy and empty-square bitboards."""
        white = EMPTY_BITBOARD
        for piece in WHITE_PIECES:
            white |= self.bitboards[piece]
        black = EMPTY_BITBOARD
        for piece in BLACK_PIECES:
            black |= self.bitboards[piece]
        self.white_occupancy = white
        self.black_occupancy = black
        self.all_occupancy = white | black
        self.empty_squares = ~self.all_occupancy & FULL_BITBOARD

    def reset(self) -> None:
        """Clear the board back to an empty position with white to move."""
        self.bitboards = [EMPTY_BITBOARD] * PIECE_COUNT
        self.castling_rights = CastlingRights.NONE
        self.en_passant_square = Square.NULL_SQUARE
        self.fullmove_number = 1
        self.halfmove_clock = 0
        self.side_to_move = Color.WHITE
        self.white_attacked_squares = EMPTY_BITBOARD
        self.black_attacked_squares = EMPTY_BITBOARD
        self.calculate_occupancies()