import sys
from enum import IntEnum, auto
from traceback import format_exc
from typing import TextIO, Union


class LogLevel(IntEnum):
    NONE = auto()
    INFO = auto()
    DEBUG = auto()
    VERBOSE = auto()

    @classmethod
    def parse(cls, level: Union[str, "LogLevel"]) -> "LogLevel":
        """Return the LogLevel for a level name (case-insensitive) or pass a LogLevel through."""
        return cls[level.upper()] if isinstance(level, str) else level


class Logger:
    """
    Logger writes the game's diagnostic messages to the error stream with consistent formatting.

    Standard output is reserved for `output()`, which carries the engine's moves.
    """

    def __init__(
        self,
        level: Union[str, LogLevel] = LogLevel.NONE,
        quiet: bool = False,
        out: TextIO = None,
        err: TextIO = None,
    ):
        self.level = LogLevel.parse(level)
        self.quiet = quiet
        self.out = out
        self.err = err

    def _print(self, *message, end="\n"):
        print(*message, end=end, file=self.err or sys.stderr, flush=True)

    def output(self, *message):
        print(*message, file=self.out or sys.stdout, flush=True)

    def normal(self, *message, end="\n"):
        if not self.quiet:
            self._print(*message, end=end)

    def error(self, *message):
        self._print('[ERROR]', *message)
        if self.level >= LogLevel.DEBUG:
            self._print(format_exc())

    def info(self, *message):
        if self.level >= LogLevel.INFO:
            self._print('[INFO]', *message)

    def debug(self, *message):
        if self.level >= LogLevel.DEBUG:
            self._print('[DEBUG]', *message)

    def verbose(self, *message):
        if self.level >= LogLevel.VERBOSE:
            self._print('[VERBOSE]', *message)
