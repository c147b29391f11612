"""
Pydantic schemas for game parameters and serialized games.
"""

from .game_config import GameConfig
from .game_record import GameRecord

__all__ = [
    "GameConfig",
    "GameRecord",
]
