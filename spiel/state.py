"""
Abstract State interface shared by every game implementation.

The base class owns the bookkeeping every game needs (action history,
range-checked application, masks, serialization) and leaves the game rules to
subclasses through a small set of abstract methods.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

import numpy as np

from .errors import IllegalActionError, InvalidPlayerError

if TYPE_CHECKING:
    from .game import Game

# Returned by current_player() once the game is over.
TERMINAL_PLAYER_ID = -4


class State(ABC):
    """
    One node of a game: the mutable, per-episode part of a game.

    A State is changed only through apply_action() (and undo_action()).
    Callers running several episodes in parallel must give each worker its
    own clone; a single State must not be mutated from two threads.
    """

    def __init__(self, game: "Game"):
        self._game = game
        self._num_players = game.num_players()
        self._history: List[int] = []

    def get_game(self) -> "Game":
        return self._game

    def num_players(self) -> int:
        return self._num_players

    # Rules supplied by subclasses.

    @abstractmethod
    def current_player(self) -> int:
        """Index of the player to move, or TERMINAL_PLAYER_ID."""

    @abstractmethod
    def legal_actions(self) -> List[int]:
        """Legal action ids for the player to move, in increasing order."""

    @abstractmethod
    def is_terminal(self) -> bool:
        ...

    @abstractmethod
    def returns(self) -> List[float]:
        """Per-player total return; all zero until the game is over."""

    @abstractmethod
    def action_to_string(self, player: int, action: int) -> str:
        ...

    @abstractmethod
    def to_string(self) -> str:
        ...

    @abstractmethod
    def observation_string(self, player: int) -> str:
        ...

    @abstractmethod
    def observation_tensor(self, player: int) -> np.ndarray:
        ...

    @abstractmethod
    def clone(self) -> "State":
        """Independent copy of this state."""

    @abstractmethod
    def undo_action(self, player: int, action: int) -> None:
        """Revert the last applied action, which must be `action` by `player`."""

    @abstractmethod
    def _do_apply_action(self, action: int) -> None:
        """Apply an in-range action; raise IllegalActionError if it is not legal."""

    # Shared behaviour.

    def apply_action(self, action: int) -> None:
        """
        Apply an action for the player to move.

        Args:
            action: Action id in [0, num_distinct_actions())

        Raises:
            IllegalActionError: If the state is terminal, the id is out of
                range, or the action is not legal here.
        """
        if self.is_terminal():
            raise IllegalActionError(f"Cannot apply action {action} to a terminal state")
        self._check_action_range(action)
        self._do_apply_action(action)
        self._history.append(int(action))

    def child(self, action: int) -> "State":
        """Return a clone with `action` applied, leaving this state unchanged."""
        new_state = self.clone()
        new_state.apply_action(action)
        return new_state

    def legal_actions_mask(self) -> np.ndarray:
        """Boolean mask over the full action space, True for legal ids."""
        mask = np.zeros(self._game.num_distinct_actions(), dtype=bool)
        legal = self.legal_actions()
        if legal:
            mask[legal] = True
        return mask

    def is_player_node(self) -> bool:
        return self.current_player() >= 0

    def is_chance_node(self) -> bool:
        return False

    def history(self) -> List[int]:
        return list(self._history)

    def history_str(self) -> str:
        return ", ".join(str(action) for action in self._history)

    def move_number(self) -> int:
        return len(self._history)

    def information_state_string(self, player: int) -> str:
        """Perfect-recall information state; the full history for perfect-information games."""
        self._check_player(player)
        return self.history_str()

    def serialize(self) -> str:
        """Action history, one id per line; see Game.deserialize_state()."""
        return "\n".join(str(action) for action in self._history)

    def _check_action_range(self, action: int) -> None:
        num_actions = self._game.num_distinct_actions()
        if not 0 <= action < num_actions:
            raise IllegalActionError(f"Action {action} out of range [0, {num_actions})")

    def _check_player(self, player: int) -> None:
        if not 0 <= player < self._num_players:
            raise InvalidPlayerError(f"Player {player} out of range [0, {self._num_players})")

    def _pop_history(self, player: int, action: int) -> None:
        """Shared undo bookkeeping: the last history entry must be `action`."""
        if not self._history or self._history[-1] != action:
            last = self._history[-1] if self._history else None
            raise IllegalActionError(f"Cannot undo action {action} by player {player}; last action was {last}")
        self._history.pop()

    def __str__(self) -> str:
        return self.to_string()
