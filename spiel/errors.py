"""
Exceptions raised by the game contract.

Every error is reported at the call site; nothing in the core retries or
recovers on its own.
"""


class SpielError(RuntimeError):
    """Base class for all game contract errors."""


class IllegalActionError(SpielError, ValueError):
    """Raised when an action id is out of range or not legal in the current state."""


class InvalidPlayerError(SpielError, ValueError):
    """Raised when a player index is outside [0, num_players)."""


class GameConfigurationError(SpielError):
    """Raised when a game cannot be constructed from its parameters."""
