"""
Bluff - Engine Errors

Rule violations raised by the game engine. Every ``GameError`` is an ordinary,
recoverable condition whose message can be shown to the acting player as-is.
``EngineInvariantError`` is kept outside that hierarchy: it signals that the
engine was driven into an impossible state and must not be handled as a
normal rule violation.
"""


class GameError(ValueError):
    """Base class for rule violations reported to the acting player."""


class WrongState(GameError):
    """Operation not allowed in the current game state."""


class AlreadyStarted(WrongState):
    """The game has already been started."""


class NotStarted(WrongState):
    """The game has not been started yet."""


class DuplicatePlayer(GameError):
    """A player with the same id has already joined."""


class NotEnoughPlayers(GameError):
    """Too few players to start the game."""


class WrongTurn(GameError):
    """The acting player is not the one whose turn it is."""


class InvalidCount(GameError):
    """A bid must claim at least one die."""


class BidTooLow(GameError):
    """The bid does not outrank the current bid."""


class NoBidYet(GameError):
    """There is no standing bid to challenge."""


class NoEligiblePlayer(GameError):
    """No other player holding dice could be found."""


class EngineInvariantError(RuntimeError):
    """The engine state violates an invariant it relies on."""
