"""
A single board-fitting placement of a piece orientation.
"""

from typing import FrozenSet, Tuple

from .bitboard import coords_to_mask
from .board import BoardGrid
from .pieces import PieceOrientation

Cell = Tuple[int, int]

_ORTHOGONAL = [(0, 1), (0, -1), (-1, 0), (1, 0)]
_DIAGONAL = [(-1, 1), (-1, -1), (1, -1), (1, 1)]


class Placement:
    """
    One orientation of one piece, anchored at a board offset.

    Neighbor and corner cells are computed once against the board bounds so
    legality checks only need the live occupancy bitboards:

    - cells: board cells covered by the piece
    - neighbors: in-bounds cells sharing an edge with the piece
    - corners: in-bounds cells touching the piece only diagonally
    """

    __slots__ = (
        "placement_id", "piece_index", "orientation_index", "anchor",
        "cells", "neighbors", "corners",
        "cell_mask", "neighbor_mask", "corner_mask",
    )

    def __init__(self, placement_id: int, orientation: PieceOrientation,
                 anchor_row: int, anchor_col: int, rows: int, cols: int):
        self.placement_id = placement_id
        self.piece_index = orientation.piece_index
        self.orientation_index = orientation.orientation_index
        self.anchor = (anchor_row, anchor_col)
        self.cells: Tuple[Cell, ...] = tuple(
            (anchor_row + r, anchor_col + c) for r, c in orientation.offsets
        )

        occupied = set(self.cells)

        def in_bounds(cell: Cell) -> bool:
            return 0 <= cell[0] < rows and 0 <= cell[1] < cols

        neighbors = set()
        for r, c in self.cells:
            for dr, dc in _ORTHOGONAL:
                candidate = (r + dr, c + dc)
                if in_bounds(candidate) and candidate not in occupied:
                    neighbors.add(candidate)

        corners = set()
        for r, c in self.cells:
            for dr, dc in _DIAGONAL:
                candidate = (r + dr, c + dc)
                if in_bounds(candidate) and candidate not in occupied and candidate not in neighbors:
                    corners.add(candidate)

        self.neighbors: FrozenSet[Cell] = frozenset(neighbors)
        self.corners: FrozenSet[Cell] = frozenset(corners)
        self.cell_mask = coords_to_mask(self.cells, cols)
        self.neighbor_mask = coords_to_mask(self.neighbors, cols)
        self.corner_mask = coords_to_mask(self.corners, cols)

    @property
    def size(self) -> int:
        return len(self.cells)

    def is_legal_first_move(self, start_corner: Cell) -> bool:
        """True iff the placement covers the player's starting corner."""
        return start_corner in self.cells

    def is_free(self, board: BoardGrid) -> bool:
        """True iff no covered cell is claimed by any player."""
        return self.cell_mask & board.occupied_bits == 0

    def is_legal_subsequent_move(self, board: BoardGrid, player: int) -> bool:
        """
        Check the placement rules for every move after a player's first.

        The piece must land on empty cells, share no edge with the player's
        own cells, and touch at least one of them at a corner.
        """
        own = board.player_bits[player]
        return (
            self.cell_mask & board.occupied_bits == 0
            and self.neighbor_mask & own == 0
            and self.corner_mask & own != 0
        )

    def apply(self, board: BoardGrid, player: int) -> None:
        """Claim the covered cells for player. Legality must already be checked."""
        board.claim(self.cells, player)

    def remove(self, board: BoardGrid) -> None:
        """Clear the covered cells again."""
        board.release(self.cells)

    def to_string(self) -> str:
        return "Positions: " + ", ".join(f"({r}, {c})" for r, c in sorted(self.cells))

    def __repr__(self) -> str:
        return (
            f"Placement(id={self.placement_id}, piece={self.piece_index}, "
            f"orientation={self.orientation_index}, anchor={self.anchor})"
        )

