"""
Explicit game registry.

The registry is an ordinary object: build it once at start-up (usually with
build_default_registry()) and pass it to whatever needs to create games.
"""

import logging
from typing import Any, Callable, Dict, List, Tuple

from .errors import GameConfigurationError
from .game import Game
from .game_type import GameType

logger = logging.getLogger(__name__)

GameFactory = Callable[[Dict[str, Any]], Game]


class GameRegistry:
    """Mapping from a game's short name to its type and factory."""

    def __init__(self):
        self._entries: Dict[str, Tuple[GameType, GameFactory]] = {}

    def register(self, game_type: GameType, factory: GameFactory) -> None:
        """
        Register a game factory under game_type.short_name.

        Raises:
            GameConfigurationError: If the name is already registered
        """
        name = game_type.short_name
        if name in self._entries:
            raise GameConfigurationError(f"Game {name!r} is already registered")
        self._entries[name] = (game_type, factory)
        logger.debug(f"Registered game {name!r}")

    def registered_names(self) -> List[str]:
        return sorted(self._entries)

    def is_registered(self, name: str) -> bool:
        return name in self._entries

    def game_type(self, name: str) -> GameType:
        return self._lookup(name)[0]

    def load_game(self, name: str, **params: Any) -> Game:
        """
        Create a game by short name.

        Unknown parameters and invalid values are reported as
        GameConfigurationError.
        """
        game_type, factory = self._lookup(name)
        unknown = set(params) - set(game_type.parameter_specification)
        if unknown:
            raise GameConfigurationError(f"Unknown parameters for {name!r}: {sorted(unknown)}")
        try:
            return factory(params)
        except ValueError as e:
            raise GameConfigurationError(f"Invalid parameters for {name!r}: {e}") from e

    def _lookup(self, name: str) -> Tuple[GameType, GameFactory]:
        try:
            return self._entries[name]
        except KeyError:
            raise GameConfigurationError(
                f"Unknown game {name!r}; registered: {self.registered_names()}"
            ) from None


def build_default_registry() -> GameRegistry:
    """Create a registry holding every game shipped with this package."""
    from engine.game import register_blokus

    registry = GameRegistry()
    register_blokus(registry)
    return registry
