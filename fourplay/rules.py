"""Detect whether a side has connected four or the board has run out of space."""
from .board import CONNECT, HEIGHT, WIDTH, Board
from .piece import Ending, Piece

# (column step, row step) for: right, down-right, down, down-left.
DIRECTIONS: list[tuple[int, int]] = [(1, 0), (1, 1), (0, 1), (-1, 1)]


def _in_bounds(col: int, row: int) -> bool:
    return 0 <= col < WIDTH and 0 <= row < HEIGHT


def _line_from(board: Board, col: int, row: int, side: Piece, step: tuple[int, int]) -> list[tuple[int, int]]:
    """Return the CONNECT cells starting at (col, row) along step if they all hold side, otherwise []."""
    dc, dr = step
    if not _in_bounds(col + dc * (CONNECT - 1), row + dr * (CONNECT - 1)):
        return []
    line = [(col + dc * i, row + dr * i) for i in range(CONNECT)]
    if all(board.get(c, r) is side for c, r in line):
        return line
    return []


def winning_line(board: Board, side: Piece) -> list[tuple[int, int]]:
    """Return the (column, row) cells of the first four-in-a-row held by side, or an empty list."""
    for row in range(HEIGHT):
        for col in range(WIDTH):
            if board.get(col, row) is not side:
                continue
            for step in DIRECTIONS:
                line = _line_from(board, col, row, side, step)
                if line:
                    return line
    return []


def ending(board: Board, side: Piece) -> Ending:
    """
    Return WIN if side has four in a row, TIE if the board is full without a win, otherwise CONTINUE.

    The board is scanned once, top row first, left to right, stopping at the first winning run.
    """
    empty = 0
    for row in range(HEIGHT):
        for col in range(WIDTH):
            piece = board.get(col, row)
            if piece is Piece.EMPTY:
                empty += 1
            if piece is not side:
                continue
            for step in DIRECTIONS:
                if _line_from(board, col, row, side, step):
                    return Ending.WIN
    if empty == 0:
        return Ending.TIE
    return Ending.CONTINUE
