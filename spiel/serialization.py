"""
Round trip of a (game, state) pair through a JSON document.

The document stores the game's short name, its parameters and the action
history; the state is rebuilt by replaying the history.
"""

import logging
from typing import Tuple

from schemas.game_record import GameRecord

from .game import Game
from .registry import GameRegistry
from .state import State

logger = logging.getLogger(__name__)


def serialize_game_and_state(game: Game, state: State) -> str:
    """Serialize a game and one of its states to a JSON string."""
    record = GameRecord(
        game=game.get_type().short_name,
        parameters=game.get_parameters(),
        actions=state.history(),
        returns=state.returns() if state.is_terminal() else None,
    )
    return record.model_dump_json()


def deserialize_game_and_state(serialized: str, registry: GameRegistry) -> Tuple[Game, State]:
    """
    Rebuild a (game, state) pair from serialize_game_and_state() output.

    Raises:
        pydantic.ValidationError: If the document is malformed
        GameConfigurationError: If the game is unknown or its parameters invalid
        IllegalActionError: If the history cannot be replayed
    """
    record = GameRecord.model_validate_json(serialized)
    game = registry.load_game(record.game, **record.parameters)
    state = game.new_initial_state()
    for action in record.actions:
        state.apply_action(action)
    logger.debug(f"Restored {record.game} state after {len(record.actions)} actions")
    return game, state
