"""
Abstract Game interface shared by every game implementation.

A Game holds everything that is fixed for a given set of parameters (action
space, player count, precomputed tables) and creates States that carry the
per-episode, mutable part.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .errors import IllegalActionError
from .game_type import GameType

if TYPE_CHECKING:
    from .state import State

logger = logging.getLogger(__name__)


class Game(ABC):
    """
    Base class for games.

    Subclasses must provide the action-space size, player count, utility
    bounds and observation shape, and create initial states.
    """

    def __init__(self, game_type: GameType, parameters: Optional[Dict[str, Any]] = None):
        self._game_type = game_type
        self._parameters = dict(parameters or {})

    def get_type(self) -> GameType:
        """Get the static description of this game."""
        return self._game_type

    def get_parameters(self) -> Dict[str, Any]:
        """Get the parameters this game was created with."""
        return dict(self._parameters)

    @abstractmethod
    def num_distinct_actions(self) -> int:
        """Size of the action space; valid ids are [0, num_distinct_actions())."""

    @abstractmethod
    def new_initial_state(self) -> "State":
        """Create the state every episode starts from."""

    @abstractmethod
    def num_players(self) -> int:
        ...

    @abstractmethod
    def min_utility(self) -> float:
        ...

    @abstractmethod
    def max_utility(self) -> float:
        ...

    def utility_sum(self) -> Optional[float]:
        """Sum of returns at every terminal state, or None if it varies."""
        return None

    @abstractmethod
    def observation_tensor_shape(self) -> List[int]:
        ...

    def observation_tensor_size(self) -> int:
        size = 1
        for dim in self.observation_tensor_shape():
            size *= dim
        return size

    @abstractmethod
    def max_game_length(self) -> int:
        ...

    def deserialize_state(self, serialized: str) -> "State":
        """
        Rebuild a state from the output of State.serialize().

        The serialized form is the action history, one action id per line;
        it is replayed from the initial state through apply_action().

        Raises:
            IllegalActionError: If a line is not an integer or the replayed
                action is not legal at that point.
        """
        state = self.new_initial_state()
        for line_number, line in enumerate(serialized.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            try:
                action = int(line)
            except ValueError:
                raise IllegalActionError(
                    f"Line {line_number} of serialized state is not an action id: {line!r}"
                ) from None
            state.apply_action(action)
        logger.debug(f"Deserialized {self._game_type.short_name} state with {state.move_number()} actions")
        return state

    def __str__(self) -> str:
        params = ",".join(f"{k}={v}" for k, v in sorted(self._parameters.items()))
        return f"{self._game_type.short_name}({params})"
