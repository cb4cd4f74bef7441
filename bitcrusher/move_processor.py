"""Moves and applying/undoing them on a board."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from .board_state import BoardState
from .enums import (
    BOARD_DIMENSION,
    CastlingRights,
    Color,
    Piece,
    PieceType,
    Side,
    Square,
)

MAX_DEPTH = 20

_PROMOTION_PIECES = frozenset(
    {PieceType.KNIGHT, PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN}
)


class MoveKind(Enum):
    QUIET = auto()
    CAPTURE = auto()
    DOUBLE_PAWN_PUSH = auto()
    EN_PASSANT = auto()
    PROMOTION = auto()
    PROMOTION_CAPTURE = auto()
    KINGSIDE_CASTLE = auto()
    QUEENSIDE_CASTLE = auto()


def _check_promotion(piece: PieceType) -> PieceType:
    piece = PieceType(piece)
    if piece not in _PROMOTION_PIECES:
        raise ValueError(f"cannot promote to {piece.name}")
    return piece


def _check_capturable(piece: PieceType) -> PieceType:
    piece = PieceType(piece)
    if piece in (PieceType.KING, PieceType.NONE):
        raise ValueError(f"cannot capture {piece.name}")
    return piece


@dataclass(frozen=True)
class Move:
    """A chess move with everything needed to apply and undo it."""

    from_square: Square
    to_square: Square
    kind: MoveKind
    moving_piece: PieceType
    captured_piece: PieceType = PieceType.NONE
    promotion_piece: PieceType = PieceType.NONE

    @classmethod
    def quiet(cls, from_square: Square, to_square: Square, piece: PieceType) -> Move:
        return cls(Square(from_square), Square(to_square), MoveKind.QUIET, PieceType(piece))

    @classmethod
    def capture(
        cls, from_square: Square, to_square: Square, piece: PieceType, captured: PieceType
    ) -> Move:
        return cls(
            Square(from_square),
            Square(to_square),
            MoveKind.CAPTURE,
            PieceType(piece),
            captured_piece=_check_capturable(captured),
        )

    @classmethod
    def double_pawn_push(cls, from_square: Square, to_square: Square) -> Move:
        return cls(
            Square(from_square), Square(to_square), MoveKind.DOUBLE_PAWN_PUSH, PieceType.PAWN
        )

    @classmethod
    def en_passant(cls, from_square: Square, to_square: Square) -> Move:
        return cls(
            Square(from_square),
            Square(to_square),
            MoveKind.EN_PASSANT,
            PieceType.PAWN,
            captured_piece=PieceType.PAWN,
        )

    @classmethod
    def promotion(cls, from_square: Square, to_square: Square, promoted: PieceType) -> Move:
        return cls(
            Square(from_square),
            Square(to_square),
            MoveKind.PROMOTION,
            PieceType.PAWN,
            promotion_piece=_check_promotion(promoted),
        )

    @classmethod
    def promotion_capture(
        cls,
        from_square: Square,
        to_square: Square,
        promoted: PieceType,
        captured: PieceType,
    ) -> Move:
        return cls(
            Square(from_square),
            Square(to_square),
            MoveKind.PROMOTION_CAPTURE,
            PieceType.PAWN,
            captured_piece=_check_capturable(captured),
            promotion_piece=_check_promotion(promoted),
        )

    @classmethod
    def castling(cls, color: Color, side: Side) -> Move:
        """The king move of a castle; the rook is moved when the move is applied."""
        home = Square.E1 if color == Color.WHITE else Square.E8
        if side == Side.KINGSIDE:
            kind, delta = MoveKind.KINGSIDE_CASTLE, 2
        else:
            kind, delta = MoveKind.QUEENSIDE_CASTLE, -2
        return cls(home, home.offset(delta), kind, PieceType.KING)

    def is_capture(self) -> bool:
        return self.kind in (MoveKind.CAPTURE, MoveKind.PROMOTION_CAPTURE)

    def is_promotion(self) -> bool:
        return self.kind in (MoveKind.PROMOTION, MoveKind.PROMOTION_CAPTURE)

    def is_en_passant(self) -> bool:
        return self.kind is MoveKind.EN_PASSANT

    def is_kingside_castle(self) -> bool:
        return self.kind is MoveKind.KINGSIDE_CASTLE

    def is_queenside_castle(self) -> bool:
        return self.kind is MoveKind.QUEENSIDE_CASTLE

    def is_pawn_double_push(self) -> bool:
        return self.kind is MoveKind.DOUBLE_PAWN_PUSH


@dataclass(frozen=True)
class MoveUndo:
    """Board state that a move changes and cannot be recovered from the move itself."""

    prev_castling_rights: CastlingRights
    prev_en_passant_square: Square
    prev_halfmove_clock: int
    prev_fullmove_number: int
    moving_side: Color


_KING_RIGHTS = {
    Color.WHITE: CastlingRights.WHITE_KINGSIDE | CastlingRights.WHITE_QUEENSIDE,
    Color.BLACK: CastlingRights.BLACK_KINGSIDE | CastlingRights.BLACK_QUEENSIDE,
}

_ROOK_HOME_RIGHTS = {
    Color.WHITE: {
        Square.H1: CastlingRights.WHITE_KINGSIDE,
        Square.A1: CastlingRights.WHITE_QUEENSIDE,
    },
    Color.BLACK: {
        Square.H8: CastlingRights.BLACK_KINGSIDE,
        Square.A8: CastlingRights.BLACK_QUEENSIDE,
    },
}

_CASTLING_ROOK_MOVES = {
    (Color.WHITE, MoveKind.KINGSIDE_CASTLE): (Square.H1, Square.F1),
    (Color.WHITE, MoveKind.QUEENSIDE_CASTLE): (Square.A1, Square.D1),
    (Color.BLACK, MoveKind.KINGSIDE_CASTLE): (Square.H8, Square.F8),
    (Color.BLACK, MoveKind.QUEENSIDE_CASTLE): (Square.A8, Square.D8),
}


def _en_passant_victim_square(move: Move, side: Color) -> Square:
    return move.to_square.offset(BOARD_DIMENSION if side == Color.WHITE else -BOARD_DIMENSION)


def _apply(board: BoardState, move: Move, side: Color) -> None:
    opponent = side.opposite()

    if move.is_en_passant():
        board.remove_piece(Piece.of(opponent, PieceType.PAWN), _en_passant_victim_square(move, side))
    elif move.is_capture():
        lost_right = _ROOK_HOME_RIGHTS[opponent].get(move.to_square)
        if lost_right is not None:
            board.remove_castling_rights(lost_right)
        board.remove_piece(Piece.of(opponent, move.captured_piece), move.to_square)

    if move.is_promotion():
        board.remove_piece(Piece.of(side, PieceType.PAWN), move.from_square)
        board.add_piece(Piece.of(side, move.promotion_piece), move.to_square)
    else:
        board.move_piece(Piece.of(side, move.moving_piece), move.from_square, move.to_square)

    rook_move = _CASTLING_ROOK_MOVES.get((side, move.kind))
    if rook_move is not None:
        board.move_piece(Piece.of(side, PieceType.ROOK), *rook_move)

    if move.moving_piece == PieceType.KING:
        board.remove_castling_rights(_KING_RIGHTS[side])
    elif move.moving_piece == PieceType.ROOK:
        lost_right = _ROOK_HOME_RIGHTS[side].get(move.from_square)
        if lost_right is not None:
            board.remove_castling_rights(lost_right)

    if move.is_pawn_double_push():
        step = -BOARD_DIMENSION if side == Color.WHITE else BOARD_DIMENSION
        board.en_passant_square = move.from_square.offset(step)
    else:
        board.en_passant_square = Square.NULL_SQUARE

    if move.is_promotion() or move.is_capture() or move.moving_piece == PieceType.PAWN:
        board.halfmove_clock = 0
    else:
        board.halfmove_clock += 1

    if side == Color.BLACK:
        board.fullmove_number += 1
    board.calculate_occupancies()
    board.toggle_side_to_move()


def _undo(board: BoardState, move: Move, undo: MoveUndo) -> None:
    side = undo.moving_side
    opponent = side.opposite()

    if move.is_en_passant():
        board.add_piece(Piece.of(opponent, PieceType.PAWN), _en_passant_victim_square(move, side))
    elif move.is_capture():
        board.add_piece(Piece.of(opponent, move.captured_piece), move.to_square)

    if move.is_promotion():
        board.add_piece(Piece.of(side, PieceType.PAWN), move.from_square)
        board.remove_piece(Piece.of(side, move.promotion_piece), move.to_square)
    else:
        board.move_piece(Piece.of(side, move.moving_piece), move.to_square, move.from_square)

    rook_move = _CASTLING_ROOK_MOVES.get((side, move.kind))
    if rook_move is not None:
        home, castled = rook_move
        board.move_piece(Piece.of(side, PieceType.ROOK), castled, home)

    board.castling_rights = undo.prev_castling_rights
    board.en_passant_square = undo.prev_en_passant_square
    board.halfmove_clock = undo.prev_halfmove_clock
    board.fullmove_number = undo.prev_fullmove_number
    board.calculate_occupancies()
    board.toggle_side_to_move()


@dataclass
class MoveProcessor:
    """Applies moves to a board and undoes them in reverse order."""

    history: list[MoveUndo] = field(default_factory=list)

    def apply_move(self, board: BoardState, move: Move) -> None:
        """Play ``move`` for the side to move, remembering what is needed to undo it."""
        side = Color(board.side_to_move)
        self.history.append(
            MoveUndo(
                prev_castling_rights=board.castling_rights,
                prev_en_passant_square=board.en_passant_square,
                prev_halfmove_clock=board.halfmove_clock,
                prev_fullmove_number=board.fullmove_number,
                moving_side=side,
            )
        )
        _apply(board, move, side)

    def undo_move(self, board: BoardState, move: Move) -> None:
        """Take back ``move``, the last move applied."""
        if not self.history:
            raise IndexError("no move to undo")
        _undo(board, move, self.history.pop())

    def reset_history(self) -> None:
        """Forget every remembered move."""
        self.history.clear()