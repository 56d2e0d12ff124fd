# bytechess

A small chess engine played from the terminal. Each side can be a human
typing moves or a computer player using either a plain min-max (negamax)
search or an alpha-beta search. Every game and each of its moves are stored
in a SQLite database, so a stored game can be replayed and continued.

## Installation

```
pip install .
```

The package needs nothing beyond the Python standard library.

## Playing

```
bytechess
```

Options:

- `--database PATH`: the SQLite file that stores games. The default is
  `chess_game.db` in the current directory; the tables are created if they
  are missing.

The program first asks for the source of moves for each side, White first:

1. Console gamer: you type the moves
2. Simple min-max algorithm
3. Alpha-beta algorithm

Anything else is asked for again. The computer players search 5 plies deep,
which can take a long time, especially for the min-max search.

It then asks whether to load a stored game. Press Enter to start a new game,
or type the id of a stored game: its moves are replayed on a fresh board,
each position is printed, and play continues with the side whose turn it is.
An id that cannot be read or found is reported and asked for again.

Moves are typed as two squares, for example `e2e4`: a letter for the column
(A to H) and a digit for the row (1 to 8); case does not matter. A move that
cannot be read or is not allowed is asked for again. After every move the
board, the move, the time taken and the number of positions the computer
evaluated are printed, and the move is saved to the database.

The game ends when a king is taken, or when a side has no moves left, which
is reported as a likely draw. Ending the input (end of file) at any prompt
quits with exit status 1.

## Rules that are not played

The engine keeps the rules simple. It does not detect check or checkmate (a
king is simply captured), and it has no castling and no en passant. A pawn
that steps straight onto the last row always becomes a queen; a pawn that
captures onto the last row stays a pawn.

## Using the library

```python
from bytechess.board import ByteBoard
from bytechess.board_controller import BoardDataHolder
from bytechess.figure import Color
from bytechess.score import AlphaBetaSearch

holder = BoardDataHolder(ByteBoard.standard())
controller = holder.controller(Color.WHITE)
score, move = AlphaBetaSearch().find_best_move(controller, 3)
print(move, score)

controller.make_move(move)
print(holder.board)
```

The modules are:

- `bytechess.point`: `Point`, a square, parsed with `Point.from_string("E2")`
- `bytechess.figure`: `Figure`, `Rank`, `Color` and the piece weights
  (`W_PAWN`, `W_QUEEN`, `W_INFINITY`, ...); a figure packs rank, colour and a
  flag into one byte
- `bytechess.board`: `ByteBoard`, a 16x16 grid whose border cells hold
  `Rank.OUT`; `ByteBoard.empty()` and `ByteBoard.standard()` build boards,
  and it is indexed by `Point`
- `bytechess.movement`: `Move` (parsed with `Move.from_string("E2E4")`),
  `MoveType`, `MoveList` and `MoveGenerator`
- `bytechess.figure_list`: `FigurePointList`, the squares of one side's
  pieces, heaviest first, with `LinkedNodeCursor` for unlinking and relinking
  captured pieces; also `FigureArrayList` and `FigureLinkedList`
- `bytechess.board_controller`: `BoardDataHolder` owns a board and both
  sides' lists; `BoardController` lists moves, checks them with
  `is_valid_move`, and applies and undoes them with `make_move` and
  `unmake_move`
- `bytechess.score`: `evaluate_score`, `material_fn`,
  `simple_positional_fn`, `min_max_simple`, `alpha_betta`, and the
  `MinMaxSimpleSearch` and `AlphaBetaSearch` strategies
- `bytechess.database`: `DataBaseInstance` with `Game` and `MoveRecord`,
  usable as a context manager
- `bytechess.cli`: the console game, `main`

## Tests

```
pip install ".[test]"
pytest
```