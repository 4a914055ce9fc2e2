import argparse
import sys

from . import errors
from .game import ConnectFour
from .logger import LogLevel
from .search import DEFAULT_LOOKAHEAD


def non_negative(value: str) -> int:
    depth = int(value)
    if depth < 0:
        raise argparse.ArgumentTypeError(f"{value} is not a non-negative integer")
    return depth


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fourplay",
        description="Play Connect Four against a negamax engine. Moves are column numbers 0-6 read from stdin.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="quiet mode (don't show board on stderr)",
    )
    parser.add_argument(
        "-d",
        "--lookahead",
        type=non_negative,
        default=DEFAULT_LOOKAHEAD,
        help=f"how many plies the engine searches below its move (default: {DEFAULT_LOOKAHEAD})",
    )
    parser.add_argument(
        "-l",
        "--log-level",
        choices=[level.name for level in LogLevel],
        type=str.upper,
        default=LogLevel.NONE.name,
        help="diagnostic detail written to stderr (default: NONE)",
    )
    return parser


def main(argv: list[str] = None) -> None:
    """Parse the command line, play one game and exit with its result code."""
    args = build_parser().parse_args(argv)
    game = ConnectFour(lookahead=args.lookahead, quiet=args.quiet, log_level=args.log_level)
    try:
        code = game.play()
    except errors.BoardDesyncError as e:
        game.log.error("The board is out of step with the search:", e)
        raise
    sys.exit(code)


if __name__ == "__main__":
    main()
