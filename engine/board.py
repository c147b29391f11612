"""
Blokus board grid and per-player progress tracking.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

import numpy as np

from .bitboard import coord_to_bit

NUM_PLAYERS = 4
EMPTY = 0

_ORTHOGONAL = [(-1, 0), (1, 0), (0, -1), (0, 1)]
_DIAGONAL = [(-1, -1), (-1, 1), (1, -1), (1, 1)]


def start_corners(rows: int, cols: int) -> List[Tuple[int, int]]:
    """Starting corner of each player, indexed by player."""
    return [
        (rows - 1, cols - 1),
        (rows - 1, 0),
        (0, 0),
        (0, cols - 1),
    ]


class BoardGrid:
    """
    Blokus board cell occupancy.

    The grid holds 0 for an empty cell and player + 1 for a cell claimed by
    player (0-based). The same information is kept as bitboards: one mask of
    all occupied cells and one mask per player.
    """

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self.grid = np.zeros((rows, cols), dtype=np.int8)
        self.occupied_bits = 0
        self.player_bits = [0] * NUM_PLAYERS

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> int:
        """Get the raw cell value (0 or player + 1)."""
        return int(self.grid[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row, col] == EMPTY

    def get_player_at(self, row: int, col: int) -> Optional[int]:
        """Get the player index at a position, or None if empty."""
        value = self.get_cell(row, col)
        if value == EMPTY:
            return None
        return value - 1

    def claim(self, cells: Iterable[Tuple[int, int]], player: int) -> None:
        """Mark cells as belonging to player. No rule checks."""
        marker = player + 1
        for row, col in cells:
            bit = coord_to_bit(row, col, self.cols)
            self.grid[row, col] = marker
            self.occupied_bits |= bit
            self.player_bits[player] |= bit

    def release(self, cells: Iterable[Tuple[int, int]]) -> None:
        """Return cells to empty."""
        for row, col in cells:
            value = int(self.grid[row, col])
            if value == EMPTY:
                continue
            bit = coord_to_bit(row, col, self.cols)
            self.grid[row, col] = EMPTY
            self.occupied_bits &= ~bit
            self.player_bits[value - 1] &= ~bit

    def count_cells(self, player: int) -> int:
        """Number of cells claimed by player."""
        return int(np.count_nonzero(self.grid == player + 1))

    def get_frontier(self, player: int) -> Set[Tuple[int, int]]:
        """
        Empty cells where player's next piece can make corner contact.

        A frontier cell touches one of the player's cells diagonally and none
        orthogonally. Every legal non-first placement covers at least one.
        """
        frontier = set()
        marker = player + 1
        grid = self.grid
        for row, col in zip(*np.nonzero(grid == marker)):
            for dr, dc in _DIAGONAL:
                r, c = int(row) + dr, int(col) + dc
                if not self.is_valid_position(r, c) or grid[r, c] != EMPTY:
                    continue
                if any(
                    self.is_valid_position(r + odr, c + odc) and grid[r + odr, c + odc] == marker
                    for odr, odc in _ORTHOGONAL
                ):
                    continue
                frontier.add((r, c))
        return frontier

    def copy(self) -> "BoardGrid":
        """Create a deep copy of the board."""
        new_board = BoardGrid(self.rows, self.cols)
        new_board.grid = self.grid.copy()
        new_board.occupied_bits = self.occupied_bits
        new_board.player_bits = list(self.player_bits)
        return new_board

    def __str__(self) -> str:
        """String representation of the board."""
        result = []
        for row in range(self.rows):
            row_str = ""
            for col in range(self.cols):
                value = self.grid[row, col]
                if value == EMPTY:
                    row_str += "."
                else:
                    row_str += str(value)
            result.append(row_str)
        return "\n".join(result)


@dataclass
class PlayerProgress:
    """
    Per-player inventory and status.

    Attributes:
        available: Bitset of pieces not yet placed (bit i = piece index i)
        remaining: Number of pieces not yet placed
        first_move: True until the player's first placement
        done: True once the player has passed or placed every piece
        score: Total cells of unplaced pieces (lower is better)
    """
    available: int
    remaining: int
    first_move: bool = True
    done: bool = False
    score: int = 0

    @classmethod
    def initial(cls, num_pieces: int, total_cells: int) -> "PlayerProgress":
        return cls(
            available=(1 << num_pieces) - 1,
            remaining=num_pieces,
            first_move=True,
            done=False,
            score=total_cells,
        )

    def has_piece(self, piece_index: int) -> bool:
        return bool(self.available >> piece_index & 1)

    def available_pieces(self) -> List[int]:
        pieces = []
        index = 0
        available = self.available
        while available:
            if available & 1:
                pieces.append(index)
            available >>= 1
            index += 1
        return pieces

    def copy(self) -> "PlayerProgress":
        return PlayerProgress(self.available, self.remaining, self.first_move, self.done, self.score)
