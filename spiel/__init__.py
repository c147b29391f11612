"""
Generic contract for sequential multi-player games.

- Game / State abstract base classes
- Game type descriptors
- Explicit game registry
- Error types
- Game + state serialization
"""

from .errors import GameConfigurationError, IllegalActionError, InvalidPlayerError, SpielError
from .game import Game
from .game_type import ChanceMode, Dynamics, GameType, Information, RewardModel, Utility
from .registry import GameRegistry, build_default_registry
from .state import TERMINAL_PLAYER_ID, State

__all__ = [
    'Game', 'State', 'TERMINAL_PLAYER_ID',
    'GameType', 'Dynamics', 'ChanceMode', 'Information', 'Utility', 'RewardModel',
    'GameRegistry', 'build_default_registry',
    'SpielError', 'IllegalActionError', 'InvalidPlayerError', 'GameConfigurationError',
]
