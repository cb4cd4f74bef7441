import copy

import pytest

from bitcrusher.bitboards import is_square_set
from bitcrusher.board_state import BoardState
from bitcrusher.enums import CastlingRights, Color, Piece, PieceType, Side, Square
from bitcrusher.move_processor import Move, MoveKind, MoveProcessor


@pytest.fixture
def processor():
    return MoveProcessor()


def test_quiet_move(processor):
    board = BoardState()
    board.side_to_move = Color.WHITE
    board.add_piece(Piece.WHITE_KNIGHT, Square.G1)
    move = Move.quiet(Square.G1, Square.F3, PieceType.KNIGHT)
    pre = copy.deepcopy(board)

    processor.apply_move(board, move)
    assert board.is_piece_on_square(Piece.WHITE_KNIGHT, Square.F3)
    assert not board.is_piece_on_square(Piece.WHITE_KNIGHT, Square.G1)
    assert board.halfmove_clock == 1
    assert not board.is_white_move()

    processor.undo_move(board, move)
    assert board == pre


def test_pawn_double_push(processor):
    board = BoardState()
    board.add_piece(Piece.WHITE_PAWN, Square.E2)
    move = Move.double_pawn_push(Square.E2, Square.E4)
    pre = copy.deepcopy(board)

    processor.apply_move(board, move)
    assert is_square_set(board.bitboard(Piece.WHITE_PAWN), Square.E4)
    assert not board.is_piece_on_square(Piece.WHITE_PAWN, Square.E3)
    assert not board.is_piece_on_square(Piece.WHITE_PAWN, Square.E2)
    assert board.en_passant_square == Square.E3
    assert board.halfmove_clock == 0

    processor.undo_move(board, move)
    assert board == pre


def test_en_passant_capture(processor):
    board = BoardState()
    board.add_piece(Piece.WHITE_PAWN, Square.E5)
    board.add_piece(Piece.BLACK_PAWN, Square.F5)
    board.en_passant_square = Square.F6
    move = Move.en_passant(Square.E5, Square.F6)
    pre = copy.deepcopy(board)

    processor.apply_move(board, move)
    assert not board.is_piece_on_square(Piece.WHITE_PAWN, Square.E5)
    assert board.is_piece_on_square(Piece.WHITE_PAWN, Square.F6)
    assert not board.is_piece_on_square(Piece.BLACK_PAWN, Square.F5)

    processor.undo_move(board, move)
    assert board == pre


def test_capture_move(processor):
    board = BoardState()
    board.add_piece(Piece.WHITE_BISHOP, Square.C1)
    board.add_piece(Piece.BLACK_KNIGHT, Square.F4)
    pre = copy.deepcopy(board)
    move = Move.capture(Square.C1, Square.F4, PieceType.BISHOP, PieceType.KNIGHT)

    processor.apply_move(board, move)
    assert board.is_piece_on_square(Piece.WHITE_BISHOP, Square.F4)
    assert not board.is_piece_on_square(Piece.WHITE_BISHOP, Square.C1)
    assert not board.is_piece_on_square(Piece.BLACK_KNIGHT, Square.F4)
    assert board.halfmove_clock == 0

    processor.undo_move(board, move)
    assert board == pre


def test_white_kingside_castling(processor):
    board = BoardState()
    board.add_piece(Piece.WHITE_KING, Square.E1)
    board.add_piece(Piece.WHITE_ROOK, Square.H1)
    move = Move.castling(Color.WHITE, Side.KINGSIDE)
    pre = copy.deepcopy(board)

    processor.apply_move(board, move)
    assert board.is_piece_on_square(Piece.WHITE_KING, Square.G1)
    assert not board.is_piece_on_square(Piece.WHITE_KING, Square.E1)
    assert board.is_piece_on_square(Piece.WHITE_ROOK, Square.F1)
    assert not board.is_piece_on_square(Piece.WHITE_ROOK, Square.H1)
    assert not board.has_castling_right(CastlingRights.WHITE_KINGSIDE)
    assert not board.has_castling_right(CastlingRights.WHITE_QUEENSIDE)

    processor.undo_move(board, move)
    assert board == pre


def test_black_queenside_castling(processor):
    board = BoardState()
    board.side_to_move = Color.BLACK
    board.add_piece(Piece.BLACK_KING, Square.E8)
    board.add_piece(Piece.BLACK_ROOK, Square.A8)
    move = Move.castling(Color.BLACK, Side.QUEENSIDE)
    pre = copy.deepcopy(board)

    processor.apply_move(board, move)
    assert board.is_piece_on_square(Piece.BLACK_KING, Square.C8)
    assert not board.is_piece_on_square(Piece.BLACK_KING, Square.E8)
    assert board.is_piece_on_square(Piece.BLACK_ROOK, Square.D8)
    assert not board.is_piece_on_square(Piece.BLACK_ROOK, Square.A8)
    assert not board.has_castling_right(CastlingRights.BLACK_KINGSIDE)
    assert not board.has_castling_right(CastlingRights.BLACK_QUEENSIDE)

    processor.undo_move(board, move)
    assert board == pre


def test_castling_removes_held_rights_and_undo_restores(processor):
    board = BoardState()
    board.add_piece(Piece.WHITE_KING, Square.E1)
    board.add_piece(Piece.WHITE_ROOK, Square.H1)
    board.add_castling_right(CastlingRights.WHITE_KINGSIDE | CastlingRights.WHITE_QUEENSIDE)
    move = Move.castling(Color.WHITE, Side.KINGSIDE)
    pre = copy.deepcopy(board)

    processor.apply_move(board, move)
    assert board.castling_rights == CastlingRights.NONE

    processor.undo_move(board, move)
    assert board == pre


def test_pawn_promotion_queen(processor):
    board = BoardState()
    board.add_piece(Piece.WHITE_PAWN, Square.A7)
    move = Move.promotion(Square.A7, Square.A8, PieceType.QUEEN)
    pre = copy.deepcopy(board)

    processor.apply_move(board, move)
    assert not board.is_piece_on_square(Piece.WHITE_PAWN, Square.A8)
    assert board.is_piece_on_square(Piece.WHITE_QUEEN, Square.A8)
    assert board.halfmove_clock == 0

    processor.undo_move(board, move)
    assert board == pre


def test_update_castling_rights_on_king_move(processor):
    board = BoardState()
    board.add_castling_right(CastlingRights.WHITE_KINGSIDE)
    board.add_castling_right(CastlingRights.WHITE_QUEENSIDE)
    board.add_piece(Piece.WHITE_KING, Square.E1)
    move = Move.quiet(Square.E1, Square.F2, PieceType.KING)
    pre = copy.deepcopy(board)

    processor.apply_move(board, move)
    assert not board.has_castling_right(CastlingRights.WHITE_KINGSIDE)
    assert not board.has_castling_right(CastlingRights.WHITE_QUEENSIDE)

    processor.undo_move(board, move)
    assert board == pre


def test_update_castling_rights_on_rook_move(processor):
    board = BoardState()
    board.add_piece(Piece.WHITE_ROOK, Square.H1)
    move = Move.quiet(Square.H1, Square.H5, PieceType.ROOK)
    pre = copy.deepcopy(board)

    processor.apply_move(board, move)
    assert not board.has_castling_right(CastlingRights.WHITE_KINGSIDE)
    assert not board.has_castling_right(CastlingRights.WHITE_QUEENSIDE)

    processor.undo_move(board, move)
    assert board == pre


def test_rook_move_removes_only_its_right(processor):
    board = BoardState()
    board.add_piece(Piece.WHITE_ROOK, Square.H1)
    board.add_castling_right(CastlingRights.WHITE_KINGSIDE | CastlingRights.WHITE_QUEENSIDE)
    processor.apply_move(board, Move.quiet(Square.H1, Square.H5, PieceType.ROOK))
    assert board.castling_rights == CastlingRights.WHITE_QUEENSIDE


def test_capturing_rook_removes_opponent_right(processor):
    board = BoardState()
    board.add_piece(Piece.WHITE_BISHOP, Square.B2)
    board.add_piece(Piece.BLACK_ROOK, Square.H8)
    board.add_castling_right(CastlingRights.BLACK_KINGSIDE | CastlingRights.BLACK_QUEENSIDE)
    move = Move.capture(Square.B2, Square.H8, PieceType.BISHOP, PieceType.ROOK)
    pre = copy.deepcopy(board)

    processor.apply_move(board, move)
    assert board.castling_rights == CastlingRights.BLACK_QUEENSIDE

    processor.undo_move(board, move)
    assert board == pre


def test_fullmove_number_increment_black_move(processor):
    board = BoardState()
    board.side_to_move = Color.BLACK
    board.fullmove_number = 5
    board.add_piece(Piece.BLACK_PAWN, Square.E7)
    move = Move.double_pawn_push(Square.E7, Square.E5)
    pre = copy.deepcopy(board)

    processor.apply_move(board, move)
    assert board.fullmove_number == 6
    assert board.is_white_move()
    assert board.en_passant_square == Square.E6

    processor.undo_move(board, move)
    assert board == pre


def test_pawn_promotion_knight_capture(processor):
    board = BoardState()
    board.add_piece(Piece.WHITE_PAWN, Square.B7)
    board.add_piece(Piece.BLACK_ROOK, Square.C8)
    move = Move.promotion_capture(Square.B7, Square.C8, PieceType.KNIGHT, PieceType.ROOK)
    pre = copy.deepcopy(board)

    processor.apply_move(board, move)
    assert not board.is_piece_on_square(Piece.WHITE_PAWN, Square.C8)
    assert board.is_piece_on_square(Piece.WHITE_KNIGHT, Square.C8)
    assert not board.is_piece_on_square(Piece.BLACK_ROOK, Square.C8)
    assert board.halfmove_clock == 0

    processor.undo_move(board, move)
    assert board == pre


@pytest.mark.parametrize(
    "start, target, promoted, piece",
    [
        (Square.D7, Square.D8, PieceType.ROOK, Piece.WHITE_ROOK),
        (Square.F7, Square.F8, PieceType.BISHOP, Piece.WHITE_BISHOP),
    ],
)
def test_pawn_promotion(processor, start, target, promoted, piece):
    board = BoardState()
    board.add_piece(Piece.WHITE_PAWN, start)
    move = Move.promotion(start, target, promoted)
    pre = copy.deepcopy(board)

    processor.apply_move(board, move)
    assert not board.is_piece_on_square(Piece.WHITE_PAWN, target)
    assert board.is_piece_on_square(piece, target)
    assert board.halfmove_clock == 0

    processor.undo_move(board, move)
    assert board == pre


def test_two_moves_undo_in_reverse_order(processor):
    board = BoardState()
    board.add_piece(Piece.WHITE_KNIGHT, Square.G1)
    board.add_piece(Piece.BLACK_KNIGHT, Square.G8)
    pre = copy.deepcopy(board)
    first = Move.quiet(Square.G1, Square.F3, PieceType.KNIGHT)
    second = Move.quiet(Square.G8, Square.F6, PieceType.KNIGHT)

    processor.apply_move(board, first)
    processor.apply_move(board, second)
    assert board.fullmove_number == 2
    assert board.halfmove_clock == 2

    processor.undo_move(board, second)
    processor.undo_move(board, first)
    assert board == pre


def test_undo_without_history_raises(processor):
    board = BoardState()
    with pytest.raises(IndexError):
        processor.undo_move(board, Move.quiet(Square.G1, Square.F3, PieceType.KNIGHT))


def test_reset_history_forgets_moves(processor):
    board = BoardState()
    board.add_piece(Piece.WHITE_KNIGHT, Square.G1)
    move = Move.quiet(Square.G1, Square.F3, PieceType.KNIGHT)
    processor.apply_move(board, move)
    processor.reset_history()
    with pytest.raises(IndexError):
        processor.undo_move(board, move)


def test_castling_move_squares():
    move = Move.castling(Color.BLACK, Side.KINGSIDE)
    assert move.from_square == Square.E8
    assert move.to_square == Square.G8
    assert move.kind is MoveKind.KINGSIDE_CASTLE
    assert move.is_kingside_castle()
    assert not move.is_queenside_castle()


def test_move_predicates():
    move = Move.promotion_capture(Square.B7, Square.C8, PieceType.KNIGHT, PieceType.ROOK)
    assert move.is_capture()
    assert move.is_promotion()
    assert not move.is_en_passant()
    assert not move.is_pawn_double_push()


def test_invalid_promotion_raises():
    with pytest.raises(ValueError):
        Move.promotion(Square.A7, Square.A8, PieceType.KING)