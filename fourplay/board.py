"""The Board class holds the 7x6 connect four grid and applies gravity to placements."""
from contextlib import contextmanager
from typing import Iterator

from . import errors
from .piece import Piece

# region Globals
WIDTH = 7
HEIGHT = 6
CONNECT = 4
# endregion


class Board:
    """
    Board is a fixed WIDTH x HEIGHT grid of pieces addressed by (column, row).

    Row 0 is the top of the board and row HEIGHT - 1 is the bottom, where pieces land first.
    Within a column, occupied cells are always contiguous and end at the bottom row.
    """

    # region Construction and Printing
    def __init__(self) -> None:
        self.grid: list[Piece] = [Piece.EMPTY] * (WIDTH * HEIGHT)

    @classmethod
    def from_rows(cls, rows: list[str]) -> "Board":
        """
        Return a board built from HEIGHT strings of WIDTH characters, top row first.

        Characters use the rendering vocabulary: '.' for empty, 'Y' for the human and 'M' for the engine.
        Whitespace inside a row is ignored so rows can be copied from the printed board.
        """
        if len(rows) != HEIGHT:
            raise errors.InvalidBoardError(f"from_rows(): expected {HEIGHT} rows, got {len(rows)}.")
        board = cls()
        for r, line in enumerate(rows):
            cells = "".join(line.split())
            if len(cells) != WIDTH:
                raise errors.InvalidBoardError(f"from_rows(): row {r} has {len(cells)} cells, expected {WIDTH}.")
            for c, char in enumerate(cells):
                try:
                    board.put(c, r, Piece(char))
                except ValueError:
                    raise errors.InvalidBoardError(f"from_rows(): unknown piece {char!r} in row {r}.") from None
        for c in range(WIDTH):
            for r in range(HEIGHT - 1):
                if board.get(c, r) is not Piece.EMPTY and board.get(c, r + 1) is Piece.EMPTY:
                    raise errors.InvalidBoardError(f"from_rows(): floating piece in column {c}, row {r}.")
        return board

    def copy(self) -> "Board":
        board = Board()
        board.grid = self.grid[:]
        return board

    def mirrored(self) -> "Board":
        """Return a copy of the board with the columns in reverse order."""
        board = Board()
        for r in range(HEIGHT):
            for c in range(WIDTH):
                board.put(WIDTH - 1 - c, r, self.get(c, r))
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __str__(self) -> str:
        """Return the board drawn with a column index footer."""
        result = []
        for r in range(HEIGHT):
            result.append("| " + " ".join(self.get(c, r).value for c in range(WIDTH)) + " |")
        result.append("+-" + "-" * (WIDTH * 2) + "+")
        result.append("| " + " ".join(str(c) for c in range(WIDTH)) + " |")
        return "\n".join(result)

    def __repr__(self) -> str:
        """Return a string listing every occupied position as column, row and piece."""
        result = []
        for r in range(HEIGHT):
            for c in range(WIDTH):
                if self.get(c, r) is not Piece.EMPTY:
                    result.append(f"{c}{r}{self.get(c, r).value}")
        return ",".join(result)

    # endregion

    # region Cell Access
    def get(self, col: int, row: int) -> Piece:
        return self.grid[row * WIDTH + col]

    def put(self, col: int, row: int, piece: Piece) -> None:
        self.grid[row * WIDTH + col] = piece

    # endregion

    # region Column Interactions
    def place(self, col: int, piece: Piece) -> bool:
        """
        Drop a piece into the given column and return True.

        If the column is full nothing changes and False is returned; that is an ordinary outcome, not an error.
        """
        if col not in range(WIDTH):
            raise errors.OutOfBoundsError(f"place(): column {col} is out of bounds.")
        if self.get(col, 0) is not Piece.EMPTY:
            return False
        for row in range(HEIGHT - 1, -1, -1):
            if self.get(col, row) is Piece.EMPTY:
                self.put(col, row, piece)
                return True

    def lift(self, col: int) -> None:
        """
        Remove the topmost piece from the given column.

        Lifting from an empty column means placements and lifts went out of step,
        so BoardDesyncError is raised and is not meant to be recovered from.
        """
        if col not in range(WIDTH):
            raise errors.OutOfBoundsError(f"lift(): column {col} is out of bounds.")
        for row in range(HEIGHT):
            if self.get(col, row) is not Piece.EMPTY:
                self.put(col, row, Piece.EMPTY)
                return
        raise errors.BoardDesyncError(f"lift(): there are no pieces in column {col} to remove.")

    @contextmanager
    def placed(self, col: int, piece: Piece) -> Iterator[bool]:
        """
        Place a piece for the duration of a with-block, yielding whether the placement succeeded.

        The piece is lifted again on every way out of the block, including early returns.
        """
        ok = self.place(col, piece)
        try:
            yield ok
        finally:
            if ok:
                self.lift(col)

    def available_columns(self) -> list[int]:
        """Return the indexes of columns that are not yet full."""
        return [c for c in range(WIDTH) if self.get(c, 0) is Piece.EMPTY]

    def is_full(self) -> bool:
        return len(self.available_columns()) == 0

    # endregion
