"""Error kinds raised by the game engine.

Every error carries a stable ``code`` so the API layer can map it to a
response without inspecting messages.
"""


class SplendaError(Exception):
    """Base class for all game engine errors."""

    code = 'InternalError'
    message = 'something went wrong'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {'code': self.code, 'error': self.message}


class ValidationError(SplendaError):
    """Malformed move or game input."""

    code = 'ValidationError'
    message = 'invalid input'


class NotFound(SplendaError):
    """The game does not exist or the caller is not playing in it."""

    code = 'NotFound'
    message = 'no such game'


class NotYourTurn(SplendaError):
    code = 'NotYourTurn'
    message = 'not your turn'


class MoveNotAllowed(SplendaError):
    """The game is not in a state that accepts this kind of move."""

    code = 'MoveNotAllowed'
    message = "can't do that right now"


class NoCardThere(SplendaError):
    code = 'NoCardThere'
    message = 'no card there'


class TooManyReserved(SplendaError):
    code = 'TooManyReserved'
    message = 'too many cards already reserved'


class InsufficientCoins(SplendaError):
    """The bank or the player lacks the coins for a transfer."""

    code = 'InsufficientCoins'
    message = 'not enough coins available to do that'


class Conflict(SplendaError):
    """Another move committed first; reload the game and try again."""

    code = 'Conflict'
    message = 'game was updated by another move'


class StoreError(SplendaError):
    """Opaque persistence failure."""

    code = 'InternalError'
    message = 'storage error'
