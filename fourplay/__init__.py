"""Connect Four against a depth-limited negamax engine over a text interface."""
from .board import Board
from .game import ConnectFour, ExitCode
from .piece import Ending, Piece
from .search import Engine, pick_move
