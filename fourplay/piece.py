from enum import Enum, auto
from sys import intern


class Piece(Enum):
    """A connect four game piece. The human is represented by 'Y' and the engine by 'M'."""
    EMPTY = intern(".")
    HUMAN = intern("Y")
    ENGINE = intern("M")

    @property
    def opponent(self) -> "Piece":
        """Return the other side, or None for an empty cell."""
        if self is Piece.HUMAN:
            return Piece.ENGINE
        elif self is Piece.ENGINE:
            return Piece.HUMAN
        return None

    def __str__(self) -> str:
        return f'{self.name} ({self.value})'

    def __repr__(self) -> str:
        return self.value


class Ending(Enum):
    """How the game stands for one side after a move."""
    CONTINUE = auto()
    TIE = auto()
    WIN = auto()
