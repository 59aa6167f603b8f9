from __future__ import annotations


class FensterError(Exception):
    """Base class for every rejected engine operation."""


class EmptyDeckError(FensterError):
    """Raised when drawing from a deck with no cards left."""


class InvalidGuessError(FensterError):
    """Raised for a token the cell's role does not accept, or a higher/lower guess without an anchor."""


class LockedStateError(FensterError):
    """Raised for any input while the penalty delay is running."""


class TurnError(FensterError):
    """Raised when the turn cannot advance, or when play continues after the game is finished."""


class UnknownCellError(FensterError):
    pass


class PlayerRegistrationError(FensterError):
    pass
