"""
Exceptions shared across layers.

Two families:
* GameError: something the player did wrong. The console catches these, shows the message and asks again.
* InvariantViolation: the code itself did something wrong. Never caught, the session ends.
"""


class GameError(Exception):
    """Base class for recoverable, user facing errors."""


class InvalidRequestError(GameError):
    """Input could not be interpreted (bad move text, bad player name, ...)"""


class InvalidCoordinateError(InvalidRequestError):
    """Text is not a square name like 'e2'."""


class InvalidFENError(InvalidRequestError):
    """Position string does not describe a pawns-only board."""


class IllegalMoveError(GameError):
    """The move breaks the rules of the game."""


class NotYourTurnError(GameError):
    """Player tried to move while it is the opponent's turn."""


class GameStateError(GameError):
    """Request does not fit the current state of the game (e.g. moving after the game ended)."""


class InvariantViolation(Exception):
    """Base class for programming errors. Must never happen if all callers respect the Board/Piece contracts."""


class OperationOnEmptyError(InvariantViolation):
    """Asked an empty square for its moves."""


class PieceNotFoundError(InvariantViolation):
    """Tried to locate a piece that is not on the board."""
