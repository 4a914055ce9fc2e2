"""Static evaluation of a position for one side, used when the search stops short of a finished game."""
from .board import CONNECT, HEIGHT, WIDTH, Board
from .piece import Piece
from .rules import DIRECTIONS

# Points for a run of a given (bonus adjusted) length.
RUN_WEIGHTS: dict[int, int] = {
    1: 1,
    2: 10,
    3: 100,
    4: 1000,
}


def _is_empty(board: Board, col: int, row: int) -> bool:
    return 0 <= col < WIDTH and 0 <= row < HEIGHT and board.get(col, row) is Piece.EMPTY


def run_length(board: Board, col: int, row: int, side: Piece, step: tuple[int, int]) -> int:
    """Return how many consecutive cells hold side starting at (col, row) along step, at most CONNECT."""
    dc, dr = step
    length = 0
    while length < CONNECT:
        c, r = col + dc * length, row + dr * length
        if not (0 <= c < WIDTH and 0 <= r < HEIGHT) or board.get(c, r) is not side:
            break
        length += 1
    return length


def open_ends(board: Board, col: int, row: int, length: int, step: tuple[int, int]) -> int:
    """Return how many of the cells just before and just after a run are empty (0, 1 or 2)."""
    dc, dr = step
    before = _is_empty(board, col - dc, row - dr)
    after = _is_empty(board, col + dc * length, row + dr * length)
    return int(before) + int(after)


def run_score(board: Board, col: int, row: int, length: int, step: tuple[int, int]) -> int:
    """
    Return the weight of a run that starts at (col, row).

    A line of two or three with an empty cell at one end is scored as one longer.
    With both ends empty it also keeps its own weight on top. Either way the result
    is capped at the weight of a four, so an open three never outscores a completed line.
    """
    weight = RUN_WEIGHTS[length]
    if not 1 < length < CONNECT:
        return weight
    ends = open_ends(board, col, row, length, step)
    if ends == 0:
        return weight
    bonus = weight if ends == 2 else 0
    return min(RUN_WEIGHTS[length + 1] + bonus, RUN_WEIGHTS[CONNECT])


def score(board: Board, side: Piece) -> int:
    """
    Return the positional value of the board for side alone.

    Every run of side's pieces in each of the four directions is credited once, to its first cell in scan order.
    The opponent's pieces only matter in that they block runs and close their ends.
    """
    total = 0
    for step in DIRECTIONS:
        dc, dr = step
        counted: set[tuple[int, int]] = set()
        for row in range(HEIGHT):
            for col in range(WIDTH):
                if board.get(col, row) is not side or (col, row) in counted:
                    continue
                length = run_length(board, col, row, side, step)
                counted.update((col + dc * i, row + dr * i) for i in range(length))
                total += run_score(board, col, row, length, step)
    return total
