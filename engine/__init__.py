"""
Blokus game engine package.

This package contains the Blokus rules on top of the generic game contract:
- Piece definitions and orientations
- Board occupancy and per-player progress
- The placement catalog that defines the action space
- Legal move generation, scoring and outcome
"""

from .board import NUM_PLAYERS, BoardGrid, PlayerProgress, start_corners
from .catalog import MoveCatalog, get_catalog
from .game import BLOKUS_GAME_TYPE, BlokusGame, BlokusState, GameResult, compute_game_result, register_blokus
from .pieces import NUM_PIECES, Piece, PieceLibrary, PieceOrientation, get_orientations
from .placement import Placement

__all__ = [
    'NUM_PLAYERS', 'NUM_PIECES',
    'BoardGrid', 'PlayerProgress', 'start_corners',
    'Piece', 'PieceOrientation', 'PieceLibrary', 'get_orientations',
    'Placement', 'MoveCatalog', 'get_catalog',
    'BLOKUS_GAME_TYPE', 'BlokusGame', 'BlokusState', 'GameResult',
    'compute_game_result', 'register_blokus',
]
