# bitcrusher

The core of a bitboard chess engine, in plain Python with no third-party
dependencies.

A board is held as twelve 64-bit bitboards, one for each piece. Square 0 is A8
and square 63 is H1.

## What it provides

- `bitcrusher.enums`: `Square`, `Rank`, `File`, `Color`, `Side`, `Direction`,
  `PieceType`, `Piece`, `SlidingPieceType`, `CastlingRights` and the
  `Diagonal` and `CounterDiagonal` enumerations, with constants such as
  `INITIAL_POSITION_FEN`, `EMPTY_BITBOARD` and `FULL_BITBOARD`.
- `bitcrusher.bitboards`: bitboard helpers (`to_bitboard`, `is_square_set`,
  `iter_squares`), the `FILE_BITBOARDS` and `RANK_BITBOARDS` masks, and shifts
  that do not wrap across files (`make_offset`, `safe_shift`,
  `shift_bitboard_no_wrap`, `RepeatedDirection`, `BitboardOffset`).
- `bitcrusher.board_state`: `BoardState`, a dataclass that holds the pieces,
  the side to move, castling rights, the en passant square, the move counters
  and the occupancy bitboards.
- `bitcrusher.attacks`: `knight_attacks`, Kogge-Stone diagonal slider attacks
  (`diagonal_attacks`, `occluded_fill`, `make_diagonal_offsets`) and the
  single-ray diagonal helpers.
- `bitcrusher.move_processor`: `Move` (built with `Move.quiet`,
  `Move.capture`, `Move.double_pawn_push`, `Move.en_passant`,
  `Move.promotion`, `Move.promotion_capture` and `Move.castling`), and a
  `MoveProcessor` that applies moves and takes them back in reverse order.
- `bitcrusher.epd`: `parse_epd`, `load_fen_from_file` and `load_epd_from_file`.

## Installation

```
pip install .
```

Add the `test` extra to install pytest as well:

```
pip install .[test]
```

## Example

Applying and undoing a move:

```python
import copy

from bitcrusher.board_state import BoardState
from bitcrusher.enums import Piece, PieceType, Square
from bitcrusher.move_processor import Move, MoveProcessor

board = BoardState()
board.add_piece(Piece.WHITE_KNIGHT, Square.G1)
before = copy.copy(board)

processor = MoveProcessor()
move = Move.quiet(Square.G1, Square.F3, PieceType.KNIGHT)
processor.apply_move(board, move)
assert board.is_piece_on_square(Piece.WHITE_KNIGHT, Square.F3)
assert board.halfmove_clock == 1
assert not board.is_white_move()

processor.undo_move(board, move)
assert board == before
```

`undo_move` raises `IndexError` when no move has been applied.

Shifting a bitboard without wrapping onto the next rank:

```python
from bitcrusher.bitboards import RepeatedDirection, shift_bitboard_no_wrap, to_bitboard
from bitcrusher.enums import Direction, Square

shifted = shift_bitboard_no_wrap(
    to_bitboard(Square.H1),
    RepeatedDirection(Direction.TOP, 7),
    Direction.LEFT,
)
assert shifted == to_bitboard(Square.G8)
```

Knight attacks:

```python
from bitcrusher.attacks import knight_attacks
from bitcrusher.bitboards import to_bitboard
from bitcrusher.enums import Square

assert knight_attacks(to_bitboard(Square.B1)) == to_bitboard(Square.A3, Square.C3, Square.D2)
```

Reading an EPD record:

```python
from bitcrusher.epd import parse_epd

epd = parse_epd("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 bm e7e5;")
print(epd.fen)        # rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3
print(epd.best_move)  # e7e5
```

`load_fen_from_file` and `load_epd_from_file` read the first line of a file;
they raise `OSError` if the file cannot be opened and `ValueError` if it is
empty.

## What it does not do

- It does not turn a FEN string into a `BoardState`; `load_fen_from_file`
  returns the text only. Boards are built with `BoardState.add_piece` and its
  fields.
- It does not generate legal moves, or attacks for pawns, kings, rooks or
  queens along ranks and files. Moves are built by hand with the `Move`
  constructors, and `MoveProcessor` applies them without checking legality.
- It does not hash positions, evaluate them or search for a best move, and it
  has no command-line program or UCI interface.

## Running the tests

```
pytest
```