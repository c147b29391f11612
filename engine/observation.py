"""
Observation encoders for Blokus.

Blokus is a perfect-information game, so every player receives the same
observation: the board occupancy.
"""

import numpy as np

from .board import BoardGrid


def observation_tensor(board: BoardGrid) -> np.ndarray:
    """
    Flat float32 buffer of the board, logical shape (rows, cols).

    Cell values are 0 for empty and player + 1 for a claimed cell.
    """
    return board.grid.astype(np.float32).reshape(-1)


def observation_string(board: BoardGrid) -> str:
    """One line per board row: '.' for empty, the player marker otherwise."""
    return str(board)
