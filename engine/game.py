"""
Blokus game and state: turn order, legality, scoring and outcome.
"""

import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from schemas.game_config import GameConfig
from spiel.errors import IllegalActionError
from spiel.game import Game
from spiel.game_type import GameType, Utility
from spiel.registry import GameRegistry
from spiel.state import TERMINAL_PLAYER_ID, State

from . import observation
from .board import NUM_PLAYERS, BoardGrid, PlayerProgress, start_corners
from .catalog import MoveCatalog, get_catalog
from .pieces import NUM_PIECES, PieceLibrary
from .placement import Cell, Placement

logger = logging.getLogger(__name__)

# Debug flag for move generation timing (controlled via environment variable)
MOVEGEN_DEBUG = bool(os.getenv("BLOKUS_MOVEGEN_DEBUG", ""))

PASS_ACTION_NAME = "Pass"

BLOKUS_GAME_TYPE = GameType(
    short_name="blokus",
    long_name="Blokus",
    utility=Utility.ZERO_SUM,
    min_num_players=NUM_PLAYERS,
    max_num_players=NUM_PLAYERS,
    parameter_specification=GameConfig().model_dump(),
)


@dataclass
class GameResult:
    """
    Final scores and winner information.

    Attributes:
        scores: Player index -> cells of unplaced pieces (lower is better)
        winner_ids: Player indices sharing the lowest score
        is_tie: True if more than one player shares the lowest score
    """
    scores: Dict[int, int]
    winner_ids: List[int]
    is_tie: bool

    @property
    def winner(self) -> Optional[int]:
        """The sole lowest scorer, or None on a tie."""
        return None if self.is_tie else self.winner_ids[0]


def compute_game_result(scores: List[int]) -> GameResult:
    """Lowest score wins; any tie for the lowest score is a draw."""
    minimum = min(scores)
    winner_ids = [player for player, score in enumerate(scores) if score == minimum]
    return GameResult(
        scores=dict(enumerate(scores)),
        winner_ids=winner_ids,
        is_tie=len(winner_ids) > 1,
    )


@dataclass(frozen=True)
class _Transition:
    """What apply_action() overwrote, so undo_action() can put it back."""
    player: int
    action: int
    first_move: bool
    done: bool
    num_done: int
    outcome: Optional[int]


class BlokusGame(Game):
    """
    Four-player Blokus.

    Holds the parameters and the placement catalog; every state of the game
    shares the same catalog.
    """

    def __init__(self, params: Optional[Dict[str, Any]] = None):
        self.config = GameConfig(**(params or {}))
        super().__init__(BLOKUS_GAME_TYPE, self.config.model_dump())
        self.catalog: MoveCatalog = get_catalog(self.config.rows, self.config.cols)
        self.pieces = self.catalog.pieces
        self.total_cells = PieceLibrary.total_cells(self.pieces)
        self.start_corners: List[Cell] = start_corners(self.config.rows, self.config.cols)

    def num_distinct_actions(self) -> int:
        return self.catalog.num_placements + 1

    def new_initial_state(self) -> "BlokusState":
        return BlokusState(self)

    def num_players(self) -> int:
        return NUM_PLAYERS

    def min_utility(self) -> float:
        return -1.0

    def max_utility(self) -> float:
        return 1.0

    def utility_sum(self) -> Optional[float]:
        return 0.0

    def observation_tensor_shape(self) -> List[int]:
        return [self.config.rows, self.config.cols]

    def max_game_length(self) -> int:
        return NUM_PIECES * NUM_PLAYERS

    @property
    def pass_action(self) -> int:
        return self.catalog.pass_action


class BlokusState(State):
    """
    State of an in-play Blokus game.

    Players move in fixed round-robin order. A player who has passed or
    placed every piece is done; their later turns only offer the pass
    action. The game ends when all four players are done.
    """

    def __init__(self, game: BlokusGame):
        super().__init__(game)
        self._catalog = game.catalog
        self._start_corners = game.start_corners
        self._use_frontier = game.config.use_frontier_movegen
        self.board = BoardGrid(game.config.rows, game.config.cols)
        self._progress = [
            PlayerProgress.initial(len(game.pieces), game.total_cells) for _ in range(NUM_PLAYERS)
        ]
        self._current_player = 0
        self._num_done = 0
        self._outcome: Optional[int] = None
        self._undo_log: List[_Transition] = []

    @property
    def pass_action(self) -> int:
        return self._catalog.pass_action

    def current_player(self) -> int:
        return TERMINAL_PLAYER_ID if self.is_terminal() else self._current_player

    def is_terminal(self) -> bool:
        return self._num_done == NUM_PLAYERS

    def player_progress(self, player: int) -> PlayerProgress:
        """Live progress record of a player; treat as read-only."""
        self._check_player(player)
        return self._progress[player]

    def num_done(self) -> int:
        return self._num_done

    def start_corner(self, player: int) -> Cell:
        self._check_player(player)
        return self._start_corners[player]

    def scores(self) -> List[int]:
        return [progress.score for progress in self._progress]

    def get_game_result(self) -> GameResult:
        """Scores and lowest scorers; may be called before the game is over."""
        return compute_game_result(self.scores())

    def outcome(self) -> Optional[int]:
        """Winner once terminal; None while playing or on a draw."""
        return self._outcome

    def returns(self) -> List[float]:
        if self._outcome is None:
            return [0.0] * NUM_PLAYERS
        return [1.0 if player == self._outcome else -1.0 for player in range(NUM_PLAYERS)]

    # Legal move generation

    def legal_actions(self) -> List[int]:
        """
        Legal action ids for the player to move.

        Placement ids in increasing order; the pass action alone if the player
        is done or has no legal placement; empty once the game is over.
        """
        if self.is_terminal():
            return []
        player = self._current_player
        if self._progress[player].done:
            return [self.pass_action]

        start = time.perf_counter()
        if self._use_frontier:
            actions = self._legal_actions_frontier(player)
        else:
            actions = self._legal_actions_naive(player)
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        generator = "frontier" if self._use_frontier else "naive"
        if MOVEGEN_DEBUG:
            logger.info(f"MoveGen[{generator}]: player={player}, legal_moves={len(actions)}, elapsed_ms={elapsed_ms:.2f}")
        logger.debug(f"Legal move generation [{generator}]: {len(actions)} moves in {elapsed_ms:.2f}ms for player={player}")

        if not actions:
            return [self.pass_action]
        return actions

    def _legal_actions_naive(self, player: int) -> List[int]:
        """Scan every placement of every piece the player still holds."""
        catalog = self._catalog
        actions = []
        for piece_index in self._progress[player].available_pieces():
            for placement_id in catalog.piece_id_range(piece_index):
                if self._is_legal_placement(catalog.placement(placement_id), player):
                    actions.append(placement_id)
        return actions

    def _legal_actions_frontier(self, player: int) -> List[int]:
        """
        Scan only placements covering a cell the player could legally reach.

        That is the starting corner for a first move and the frontier cells
        afterwards. Produces exactly the naive result.
        """
        catalog = self._catalog
        progress = self._progress[player]
        if progress.first_move:
            cells = [self._start_corners[player]]
        else:
            cells = self.board.get_frontier(player)

        candidates = set()
        for cell in cells:
            candidates.update(catalog.placements_covering(cell))

        return sorted(
            placement_id for placement_id in candidates
            if self._is_legal_placement(catalog.placement(placement_id), player)
        )

    def _is_legal_placement(self, placement: Placement, player: int) -> bool:
        progress = self._progress[player]
        if not progress.has_piece(placement.piece_index):
            return False
        if progress.first_move:
            return placement.is_legal_first_move(self._start_corners[player]) and placement.is_free(self.board)
        return placement.is_legal_subsequent_move(self.board, player)

    # Transitions

    def _do_apply_action(self, action: int) -> None:
        player = self._current_player
        progress = self._progress[player]
        record = _Transition(player, action, progress.first_move, progress.done, self._num_done, self._outcome)

        if action != self.pass_action:
            placement = self._catalog.placement(action)
            if progress.done or not self._is_legal_placement(placement, player):
                logger.warning(f"Rejected action {action} for player {player}: {self.action_to_string(player, action)}")
                raise IllegalActionError(
                    f"Action {action} ({self.action_to_string(player, action)}) is not legal for player {player}"
                )
            placement.apply(self.board, player)
            progress.available &= ~(1 << placement.piece_index)
            progress.remaining -= 1
            progress.score -= self._catalog.pieces[placement.piece_index].size
            progress.first_move = False

        if not progress.done and (progress.remaining == 0 or action == self.pass_action):
            progress.done = True
            self._num_done += 1

        self._undo_log.append(record)

        if self._num_done == NUM_PLAYERS:
            self._outcome = self.get_game_result().winner
            logger.debug(f"Game over after {self.move_number() + 1} actions: scores={self.scores()}, winner={self._outcome}")
        else:
            self._current_player = (player + 1) % NUM_PLAYERS

    def undo_action(self, player: int, action: int) -> None:
        """
        Revert the most recent action exactly.

        Raises:
            IllegalActionError: If `action` by `player` is not the last action applied
        """
        self._check_player(player)
        if not self._undo_log:
            raise IllegalActionError("No action to undo")
        record = self._undo_log[-1]
        if record.player != player or record.action != action:
            raise IllegalActionError(
                f"Cannot undo action {action} by player {player}; "
                f"last action was {record.action} by player {record.player}"
            )
        self._pop_history(player, action)
        self._undo_log.pop()

        progress = self._progress[player]
        if action != self.pass_action:
            placement = self._catalog.placement(action)
            placement.remove(self.board)
            progress.available |= 1 << placement.piece_index
            progress.remaining += 1
            progress.score += self._catalog.pieces[placement.piece_index].size
        progress.first_move = record.first_move
        progress.done = record.done
        self._num_done = record.num_done
        self._outcome = record.outcome
        self._current_player = player

    # Strings and observations

    def action_to_string(self, player: int, action: int) -> str:
        self._check_action_range(action)
        if action == self.pass_action:
            return PASS_ACTION_NAME
        placement = self._catalog.placement(action)
        return f"{self._catalog.pieces[placement.piece_index].name} at {placement.to_string()}"

    def to_string(self) -> str:
        return observation.observation_string(self.board)

    def observation_string(self, player: int) -> str:
        self._check_player(player)
        return observation.observation_string(self.board)

    def observation_tensor(self, player: int) -> np.ndarray:
        self._check_player(player)
        return observation.observation_tensor(self.board)

    def clone(self) -> "BlokusState":
        """Deep copy of the mutable state; the catalog is shared."""
        new_state = BlokusState(self._game)
        new_state.board = self.board.copy()
        new_state._progress = [progress.copy() for progress in self._progress]
        new_state._current_player = self._current_player
        new_state._num_done = self._num_done
        new_state._outcome = self._outcome
        new_state._history = list(self._history)
        new_state._undo_log = list(self._undo_log)
        return new_state


def register_blokus(registry: GameRegistry) -> None:
    """Add Blokus to a registry."""
    registry.register(BLOKUS_GAME_TYPE, BlokusGame)
