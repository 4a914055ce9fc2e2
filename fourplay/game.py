"""The ConnectFour class runs a game between a human on the console and the search engine."""
import sys
from enum import IntEnum
from typing import TextIO, Union

from . import errors, rules
from .board import WIDTH, Board
from .logger import Logger, LogLevel
from .piece import Ending, Piece
from .search import DEFAULT_LOOKAHEAD, NO_MOVE, Engine


class ExitCode(IntEnum):
    """Process exit status describing how the game ended."""
    INPUT_CLOSED = 0
    ENGINE_WON = 1
    HUMAN_WON = 2
    TIE = 3


def parse_move(text: str) -> int:
    """
    Return the column number entered by the human.

    Raises InvalidMoveError if the text is not a number and OutOfBoundsError if it is not a column.
    """
    try:
        col = int(text.strip())
    except ValueError:
        raise errors.InvalidMoveError(f"{text.strip()!r} is not a column number.") from None
    if col not in range(WIDTH):
        raise errors.OutOfBoundsError(f"Column {col} is out of bounds.")
    return col


class ConnectFour:
    """
    ConnectFour alternates between reading the human's column and playing the engine's reply.

    Diagnostics (board, prompts, results) go to the logger's error stream; standard output only carries
    the engine's moves, one column number per line, so another program can drive the game.
    """

    def __init__(
        self,
        board: Board = None,
        lookahead: int = DEFAULT_LOOKAHEAD,
        quiet: bool = False,
        log_level: Union[LogLevel, str] = LogLevel.NONE,
        stdin: TextIO = None,
        stdout: TextIO = None,
        stderr: TextIO = None,
    ) -> None:
        """
        Initialize a game based on the configuration parameters provided.

        Args:
            board (Board, optional): The starting board. Defaults to an empty board.
            lookahead (int, optional): Search depth for the engine. Defaults to 6.
            quiet (bool, optional): Whether to hide the board and prompts. Defaults to False.
            log_level (Union[LogLevel, str], optional): The log level for game logging. Defaults to LogLevel.NONE.
            stdin, stdout, stderr (TextIO, optional): Streams to use instead of the process's own.
        """
        self.log: Logger = Logger(log_level, quiet=quiet, out=stdout, err=stderr)
        self.stdin: TextIO = stdin
        self.board: Board = board or Board()
        self.engine: Engine = Engine(self.board, lookahead=lookahead, side=Piece.ENGINE, log=self.log)

    # region Input
    def read_move(self) -> int:
        """
        Prompt until the human gives a column that is not full, then play it there.

        Returns NO_MOVE when input runs out.
        """
        stream = self.stdin or sys.stdin
        while True:
            self.log.normal(f"Enter your move column (0..{WIDTH - 1}): ", end="")
            line = stream.readline()
            if not line:
                self.log.info("read_move: input closed.")
                return NO_MOVE
            try:
                col = parse_move(line)
            except (errors.InvalidMoveError, errors.OutOfBoundsError) as e:
                self.log.info("read_move:", e)
                continue
            if self.board.place(col, Piece.HUMAN):
                return col
            self.log.normal(f"Couldn't make move at column {col}")

    # endregion

    # region Turn Mechanics
    def report_win(self, side: Piece) -> None:
        line = rules.winning_line(self.board, side)
        self.log.debug(f"{side} connected", ", ".join(f"({c}, {r})" for c, r in line))

    def play(self) -> ExitCode:
        """Play until someone wins, the board fills up or input runs out, and return the exit code."""
        code = ExitCode.INPUT_CLOSED
        while True:
            self.log.normal(self.board)

            # Their move
            if self.read_move() == NO_MOVE:
                break
            end = rules.ending(self.board, Piece.HUMAN)
            if end is Ending.TIE:
                self.log.normal("Tie after your move")
                code = ExitCode.TIE
                break
            elif end is Ending.WIN:
                self.report_win(Piece.HUMAN)
                self.log.normal("You won!")
                code = ExitCode.HUMAN_WON
                break

            # Our move
            move = self.engine.make_move()
            if move == NO_MOVE:
                self.log.normal("Tie after your move")
                code = ExitCode.TIE
                break
            self.log.normal("My move: ", end="")
            self.log.output(move)
            end = rules.ending(self.board, Piece.ENGINE)
            if end is Ending.TIE:
                self.log.normal("Tie after my move")
                code = ExitCode.TIE
                break
            elif end is Ending.WIN:
                self.report_win(Piece.ENGINE)
                self.log.normal("I won!")
                code = ExitCode.ENGINE_WON
                break

        self.log.normal(self.board)
        self.log.info(f"play: finished with exit code {code.value} ({code.name}).")
        return code

    # endregion
