"""
Catalog of every board-fitting placement for a board size.

The catalog is built once per (rows, cols) and then only read. Its
enumeration order defines the action ids: piece by piece, orientation by
orientation, anchor cells in raster order. Rebuilding with the same board
size reproduces the same ids.
"""

import logging
import time
from functools import lru_cache
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from spiel.errors import GameConfigurationError, IllegalActionError

from .pieces import Piece, PieceLibrary, get_orientations
from .placement import Cell, Placement

logger = logging.getLogger(__name__)


class MoveCatalog:
    """
    Immutable enumeration of all placements that fit on the board.

    Only board bounds are considered here; occupancy and adjacency are
    checked against the live board when legal actions are requested.
    """

    def __init__(self, rows: int, cols: int, pieces: List[Piece], placements: List[Placement]):
        self.rows = rows
        self.cols = cols
        self.pieces = pieces
        self._placements = placements
        self._piece_ranges: List[Tuple[int, int]] = []
        self._by_cell: Dict[Cell, Tuple[int, ...]] = {}
        self._by_shape: Dict[Tuple[int, FrozenSet[Cell]], int] = {}
        self._index()

    @classmethod
    def build(cls, rows: int, cols: int) -> "MoveCatalog":
        """
        Enumerate every placement that fits on a rows x cols board.

        Raises:
            GameConfigurationError: If the piece library is malformed or no
                placement fits on the board
        """
        start = time.perf_counter()
        pieces = PieceLibrary.get_all_pieces()
        placements: List[Placement] = []

        for piece in pieces:
            for orientation in get_orientations(piece):
                for row in range(rows):
                    for col in range(cols):
                        if row + orientation.height > rows or col + orientation.width > cols:
                            continue
                        placements.append(Placement(len(placements), orientation, row, col, rows, cols))

        if not placements:
            raise GameConfigurationError(f"No piece fits on a {rows}x{cols} board")

        catalog = cls(rows, cols, pieces, placements)
        elapsed = time.perf_counter() - start
        logger.info(f"Built move catalog for {rows}x{cols} board: {len(placements)} placements in {elapsed:.3f}s")
        return catalog

    def _index(self) -> None:
        by_cell: Dict[Cell, List[int]] = {}
        ranges = {}
        for placement in self._placements:
            pid = placement.placement_id
            first, _ = ranges.get(placement.piece_index, (pid, pid))
            ranges[placement.piece_index] = (first, pid + 1)
            for cell in placement.cells:
                by_cell.setdefault(cell, []).append(pid)
            self._by_shape[(placement.piece_index, frozenset(placement.cells))] = pid

        self._piece_ranges = [ranges.get(piece.index, (0, 0)) for piece in self.pieces]
        self._by_cell = {cell: tuple(ids) for cell, ids in by_cell.items()}

    @property
    def num_placements(self) -> int:
        return len(self._placements)

    @property
    def pass_action(self) -> int:
        """The reserved pass id, one past the last placement id."""
        return len(self._placements)

    def __len__(self) -> int:
        return len(self._placements)

    def __iter__(self):
        return iter(self._placements)

    def placement(self, placement_id: int) -> Placement:
        if not 0 <= placement_id < len(self._placements):
            raise IllegalActionError(f"Placement id {placement_id} out of range [0, {len(self._placements)})")
        return self._placements[placement_id]

    def piece_index(self, placement_id: int) -> int:
        """Index of the piece a placement uses."""
        return self.placement(placement_id).piece_index

    def piece(self, placement_id: int) -> Piece:
        return self.pieces[self.piece_index(placement_id)]

    def piece_id_range(self, piece_index: int) -> range:
        """Contiguous range of placement ids belonging to one piece."""
        first, end = self._piece_ranges[piece_index]
        return range(first, end)

    def placements_covering(self, cell: Cell) -> Tuple[int, ...]:
        """Ids of placements that cover cell, in increasing order."""
        return self._by_cell.get(cell, ())

    def find_placement(self, piece_index: int, cells: Iterable[Cell]) -> Optional[int]:
        """Id of the placement of piece_index covering exactly these cells, if any."""
        return self._by_shape.get((piece_index, frozenset(cells)))

    def piece_index_by_name(self, name: str) -> int:
        for piece in self.pieces:
            if piece.name == name:
                return piece.index
        raise KeyError(name)


@lru_cache(maxsize=None)
def get_catalog(rows: int, cols: int) -> MoveCatalog:
    """Shared catalog for a board size; built on first use, then reused read-only."""
    return MoveCatalog.build(rows, cols)
