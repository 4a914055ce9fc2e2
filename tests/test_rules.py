"""Tests for win and tie detection."""
import pytest

from fourplay.board import Board
from fourplay.piece import Ending, Piece
from fourplay.rules import ending, winning_line

# A full board without four in a row for either side.
TIE_ROWS = [
    "YMYMYMY",
    "YMYMYMY",
    "MYMYMYM",
    "MYMYMYM",
    "YMYMYMY",
    "YMYMYMY",
]


def test_empty_board_continues():
    board = Board()
    assert ending(board, Piece.HUMAN) is Ending.CONTINUE
    assert ending(board, Piece.ENGINE) is Ending.CONTINUE


@pytest.mark.parametrize(
    "rows, line",
    [
        # horizontal
        (
            [".......", ".......", ".......", ".......", ".......", "..MMMM."],
            [(2, 5), (3, 5), (4, 5), (5, 5)],
        ),
        # vertical
        (
            [".......", ".......", "M......", "M......", "M......", "M......"],
            [(0, 2), (0, 3), (0, 4), (0, 5)],
        ),
        # down-right
        (
            [".......", ".......", "M......", "YM.....", "YYM....", "YYYM..."],
            [(0, 2), (1, 3), (2, 4), (3, 5)],
        ),
        # down-left
        (
            [".......", ".......", "......M", ".....MY", "....MYY", "...MYYY"],
            [(6, 2), (5, 3), (4, 4), (3, 5)],
        ),
    ],
)
def test_win_in_every_direction(rows, line):
    board = Board.from_rows(rows)
    assert ending(board, Piece.ENGINE) is Ending.WIN
    assert winning_line(board, Piece.ENGINE) == line
    assert ending(board.mirrored(), Piece.ENGINE) is Ending.WIN


def test_win_belongs_to_one_side():
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        "MMM....",
        "YYYY...",
    ])
    assert ending(board, Piece.HUMAN) is Ending.WIN
    assert ending(board, Piece.ENGINE) is Ending.CONTINUE
    assert winning_line(board, Piece.ENGINE) == []


def test_three_in_a_row_is_not_a_win():
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        "Y......",
        "Y......",
        "Y.MMM..",
    ])
    assert ending(board, Piece.HUMAN) is Ending.CONTINUE
    assert ending(board, Piece.ENGINE) is Ending.CONTINUE


def test_full_board_without_line_is_tie_for_both_sides():
    board = Board.from_rows(TIE_ROWS)
    assert board.is_full()
    assert ending(board, Piece.HUMAN) is Ending.TIE
    assert ending(board, Piece.ENGINE) is Ending.TIE


def test_win_on_full_board_beats_tie():
    rows = list(TIE_ROWS)
    rows[5] = "YYYYMYM"
    board = Board.from_rows(rows)
    assert ending(board, Piece.HUMAN) is Ending.WIN
    assert ending(board, Piece.ENGINE) is Ending.TIE
