"""Tests for the negamax engine."""
import pytest

from fourplay.board import WIDTH, Board
from fourplay.piece import Piece
from fourplay.search import FULL_COLUMN, NO_MOVE, TIE_SCORE, WIN_SCORE, Engine, best_column, pick_move

TIE_ROWS = [
    "YMYMYMY",
    "YMYMYMY",
    "MYMYMYM",
    "MYMYMYM",
    "YMYMYMY",
    "YMYMYMY",
]


class RecordingBoard(Board):
    """A Board that remembers every column a piece was placed in."""

    def __init__(self) -> None:
        super().__init__()
        self.placements: list[int] = []

    def place(self, col: int, piece: Piece) -> bool:
        self.placements.append(col)
        return super().place(col, piece)


def test_best_column_prefers_first_of_equal_scores():
    assert best_column([5, 7, 7, -1, 7, 0, 0]) == (1, 7)
    assert best_column([FULL_COLUMN, -3, -3, FULL_COLUMN, -9, -3, -4]) == (1, -3)
    assert best_column([FULL_COLUMN] * WIDTH) == (NO_MOVE, FULL_COLUMN)


def test_empty_board_picks_leftmost_column():
    assert pick_move(Board(), Piece.ENGINE, 0) == (0, -4)


@pytest.mark.parametrize("depth", [0, 1, 2])
def test_immediate_win_is_taken(depth):
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        "....M..",
        "....M..",
        "YY..MY.",
    ])
    before = board.copy()
    assert pick_move(board, Piece.ENGINE, depth) == (4, WIN_SCORE)
    assert board == before


def test_win_short_circuits_later_columns():
    board = RecordingBoard.from_rows([
        ".......",
        ".......",
        ".......",
        "....M..",
        "....M..",
        "YY..MY.",
    ])
    pick_move(board, Piece.ENGINE, 0)
    assert board.placements == [0, 1, 2, 3, 4]


def test_lowest_winning_column_is_chosen():
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        "..M..M.",
        "..M..M.",
        "YYM.YMY",
    ])
    assert pick_move(board, Piece.ENGINE, 2) == (2, WIN_SCORE)


def test_full_board_has_no_move():
    board = Board.from_rows(TIE_ROWS)
    assert pick_move(board, Piece.ENGINE, 0) == (NO_MOVE, FULL_COLUMN)
    assert pick_move(board, Piece.HUMAN, 3) == (NO_MOVE, FULL_COLUMN)


def test_last_cell_tie_scores_zero():
    rows = list(TIE_ROWS)
    rows[0] = "YMYMYM."
    board = Board.from_rows(rows)
    assert pick_move(board, Piece.ENGINE, 3) == (6, TIE_SCORE)


def test_full_column_is_never_chosen():
    board = Board.from_rows([
        "Y......",
        "M......",
        "Y......",
        "M......",
        "Y......",
        "M......",
    ])
    for depth in (0, 1, 2):
        col, value = pick_move(board, Piece.ENGINE, depth)
        assert col != 0
        assert value > FULL_COLUMN
        assert board.place(col, Piece.ENGINE)
        board.lift(col)


def test_threat_is_blocked():
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".....Y.",
        ".....Y.",
        "MM...Y.",
    ])
    col, value = pick_move(board, Piece.ENGINE, 1)
    assert col == 5
    assert value > -WIN_SCORE


def test_losing_everywhere_scores_minus_win():
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "M.YYY.M",
    ])
    assert pick_move(board, Piece.ENGINE, 1) == (0, -WIN_SCORE)


@pytest.mark.parametrize("depth", [0, 1, 2])
def test_mirrored_board_mirrors_the_choice(depth):
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".....Y.",
        ".....Y.",
        "MM...Y.",
    ])
    col, value = pick_move(board, Piece.ENGINE, depth)
    mirror_col, mirror_value = pick_move(board.mirrored(), Piece.ENGINE, depth)
    if depth > 0:
        assert mirror_col == WIDTH - 1 - col
    assert mirror_value == value


def test_search_leaves_board_unchanged():
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        "...M...",
        "..YY...",
        "..MYM.Y",
    ])
    before = board.copy()
    pick_move(board, Piece.ENGINE, 3)
    assert board == before


def test_make_move_plays_on_the_board():
    board = Board()
    engine = Engine(board, lookahead=1)
    col = engine.make_move()
    assert col in range(WIDTH)
    assert board.get(col, 5) is Piece.ENGINE
    assert engine.nodes > 0


def test_make_move_on_full_board():
    board = Board.from_rows(TIE_ROWS)
    before = board.copy()
    assert Engine(board, lookahead=2).make_move() == NO_MOVE
    assert board == before


def test_negative_lookahead_is_rejected():
    with pytest.raises(ValueError):
        Engine(Board(), lookahead=-1)
