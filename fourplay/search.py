"""The Engine class picks the computer's move with a depth-limited negamax search."""
from codetiming import Timer

from . import heuristic, rules
from .board import WIDTH, Board
from .logger import Logger
from .piece import Ending, Piece

# region Globals
DEFAULT_LOOKAHEAD = 6
WIN_SCORE = 100000
TIE_SCORE = 0
FULL_COLUMN = -200000
NO_MOVE = -1
# endregion


def best_column(scores: list[int]) -> tuple[int, int]:
    """
    Return the first column holding the strictly greatest score, and that score.

    If every column is full, (NO_MOVE, FULL_COLUMN) is returned.
    """
    highest, highest_index = FULL_COLUMN, NO_MOVE
    for col, value in enumerate(scores):
        if value > highest:
            highest, highest_index = value, col
    return highest_index, highest


def pick_move(board: Board, side: Piece, depth: int, log: Logger = None) -> tuple[int, int]:
    """Return the best column for side and its value, searching depth further plies. See Engine.pick_move."""
    return Engine(board, lookahead=depth, side=side, log=log).pick_move(side, depth)


class Engine:
    """
    Engine searches the game tree below the current board to choose a column for its side.

    Every column is tried in order by placing a piece, scoring the result and lifting the piece again,
    so the board is left exactly as it was found after each search.
    """

    def __init__(
        self,
        board: Board,
        lookahead: int = DEFAULT_LOOKAHEAD,
        side: Piece = Piece.ENGINE,
        log: Logger = None,
    ) -> None:
        """
        Initialize an engine playing side on board.

        Args:
            board (Board): The board shared with the game. Searches mutate it temporarily.
            lookahead (int, optional): How many replies to explore below each candidate move. Defaults to 6.
            side (Piece, optional): The side the engine plays. Defaults to Piece.ENGINE.
            log (Logger, optional): Where search progress is reported. Defaults to a silent Logger.
        """
        if lookahead < 0:
            raise ValueError(f"lookahead must be non-negative, got {lookahead}.")
        self.board: Board = board
        self.lookahead: int = lookahead
        self.side: Piece = side
        self.log: Logger = log or Logger()
        self.nodes: int = 0

    def pick_move(self, side: Piece, depth: int) -> tuple[int, int]:
        """
        Return the column that is best for side, and its value from side's point of view.

        An immediate win returns at once with WIN_SCORE, so among several winning columns the lowest one is chosen.
        A tie scores TIE_SCORE. Otherwise the value is the negation of the opponent's best reply,
        or at depth 0 the negation of side's heuristic score after the move.
        Full columns score FULL_COLUMN and are never chosen.
        """
        indent = "\t" * (self.lookahead - depth)
        scores = [FULL_COLUMN] * WIDTH
        for col in range(WIDTH):
            with self.board.placed(col, side) as ok:
                if not ok:
                    continue
                self.nodes += 1
                end = rules.ending(self.board, side)
                if end is Ending.WIN:
                    self.log.verbose(indent, f"{repr(side)} ({depth}) wins in col {col}")
                    return col, WIN_SCORE
                if end is Ending.TIE:
                    scores[col] = TIE_SCORE
                elif depth > 0:
                    _, reply = self.pick_move(side.opponent, depth - 1)
                    scores[col] = -reply
                else:
                    scores[col] = -heuristic.score(self.board, side)
            self.log.verbose(indent, f"{repr(side)} ({depth}) playing in col {col} would result in {scores[col]}")
        return best_column(scores)

    def make_move(self) -> int:
        """
        Choose a column for the engine's side, play it on the board and return it.

        NO_MOVE is returned, and the board left untouched, when every column is full.
        """
        self.nodes = 0
        t = Timer(name=f"\tpick_move(depth: {self.lookahead})", text="{name} took {:.3f}s", logger=self.log.debug)
        t.start()
        col, value = self.pick_move(self.side, self.lookahead)
        t.stop()
        self.log.debug("make_move:", repr(self.side), f"col {col} value {value} after {self.nodes} positions")
        if col != NO_MOVE:
            self.board.place(col, self.side)
        return col
