class Error(Exception):
    """A base error class for the fourplay package."""
    def __init__(self, message="fourplay: Unknown Exception occurred.") -> None:
        self.message = message

    def __str__(self) -> str:
        return self.message

class OutOfBoundsError(Error):
    """A column outside the bounds of the game board was used."""
    pass

class InvalidMoveError(Error):
    """The player entered something that is not a column number."""
    pass

class InvalidBoardError(Error):
    """A board description is malformed or has floating pieces."""
    pass

class BoardDesyncError(Error):
    """A piece was lifted from an empty column. Placements and lifts are out of step."""
    pass
