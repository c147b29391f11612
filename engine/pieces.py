"""
Blokus piece definitions: the 21 polyominoes and their rotations/reflections.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from spiel.errors import GameConfigurationError

NUM_PIECES = 21

Offsets = Tuple[Tuple[int, int], ...]


@dataclass(frozen=True, eq=False)
class Piece:
    """Represents a Blokus piece."""
    index: int
    name: str
    shape: np.ndarray  # 2D array representing the piece
    size: int  # Number of squares in the piece

    def __post_init__(self):
        """Validate piece after initialization."""
        if self.shape.ndim != 2:
            raise ValueError("Piece shape must be 2D")
        if np.sum(self.shape) != self.size:
            raise ValueError("Piece shape sum must equal size")

    @property
    def offsets(self) -> Offsets:
        """Canonical (row, col) offsets of the base shape."""
        return normalize_offsets(shape_to_offsets(self.shape))

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class PieceOrientation:
    """
    One distinct rotation/reflection of a piece.

    Offsets are canonical: sorted, with min row and min col equal to 0.
    """
    piece_index: int
    orientation_index: int
    offsets: Offsets

    @property
    def height(self) -> int:
        return max(r for r, _ in self.offsets) + 1

    @property
    def width(self) -> int:
        return max(c for _, c in self.offsets) + 1


def shape_to_offsets(shape: np.ndarray) -> List[Tuple[int, int]]:
    """
    Convert a numpy shape array to a list of (row, col) offsets.

    Args:
        shape: 2D numpy array with 1s where cells are occupied

    Returns:
        List of (row, col) tuples for occupied cells
    """
    return [(int(r), int(c)) for r, c in zip(*np.nonzero(shape))]


def normalize_offsets(offsets: Sequence[Tuple[int, int]]) -> Offsets:
    """
    Normalize offsets so that min_row = 0 and min_col = 0.

    Args:
        offsets: Sequence of (row, col) tuples

    Returns:
        Normalized offsets, sorted for canonical ordering
    """
    if not offsets:
        return ()

    min_row = min(r for r, c in offsets)
    min_col = min(c for r, c in offsets)

    return tuple(sorted((r - min_row, c - min_col) for r, c in offsets))


def rotate_offsets(offsets: Sequence[Tuple[int, int]]) -> Offsets:
    """Rotate a shape by 90 degrees and re-canonicalize it."""
    return normalize_offsets([(-c, r) for r, c in offsets])


def mirror_offsets(offsets: Sequence[Tuple[int, int]]) -> Offsets:
    """Mirror a shape top-to-bottom and re-canonicalize it."""
    return normalize_offsets([(-r, c) for r, c in offsets])


def get_orientations(piece: Piece) -> List[PieceOrientation]:
    """
    Generate all unique orientations of a piece.

    Order is fixed: for each of the four rotations, the rotated shape and then
    its mirror image. Shapes already produced are skipped, so symmetric pieces
    yield fewer than 8 entries.

    Args:
        piece: Piece to orient

    Returns:
        List of PieceOrientation instances, one per unique orientation
    """
    variants = []
    rotated = piece.offsets
    for step in range(4):
        if step > 0:
            rotated = rotate_offsets(rotated)
        variants.append(rotated)
        variants.append(mirror_offsets(rotated))

    orientations = []
    seen = set()
    for offsets in variants:
        if offsets in seen:
            continue
        seen.add(offsets)
        orientations.append(PieceOrientation(piece.index, len(orientations), offsets))

    return orientations


class PieceLibrary:
    """The fixed set of Blokus pieces, in catalog order."""

    # (name, shape) in the order pieces are indexed.
    _DEFINITIONS = (
        ("i1", [[1]]),
        ("i2", [[1], [1]]),
        ("i3", [[1], [1], [1]]),
        ("i4", [[1], [1], [1], [1]]),
        ("i5", [[1], [1], [1], [1], [1]]),
        ("L5", [[1, 1, 1, 1], [0, 0, 0, 1]]),
        ("Y", [[1, 1, 1, 1], [0, 1, 0, 0]]),
        ("N", [[1, 1, 1, 0], [0, 0, 1, 1]]),
        ("V3", [[1, 0], [1, 1]]),
        ("U", [[1, 1], [0, 1], [1, 1]]),
        ("V5", [[1, 0, 0], [1, 0, 0], [1, 1, 1]]),
        ("Z5", [[1, 1, 0], [0, 1, 0], [0, 1, 1]]),
        ("X", [[0, 1, 0], [1, 1, 1], [0, 1, 0]]),
        ("T5", [[1, 1, 1], [0, 1, 0], [0, 1, 0]]),
        ("W", [[1, 0, 0], [1, 1, 0], [0, 1, 1]]),
        ("P", [[1, 1], [1, 1], [1, 0]]),
        ("F", [[0, 1, 1], [1, 1, 0], [0, 1, 0]]),
        ("O4", [[1, 1], [1, 1]]),
        ("L4", [[1, 1, 1], [0, 0, 1]]),
        ("T4", [[1, 1, 1], [0, 1, 0]]),
        ("Z4", [[1, 1, 0], [0, 1, 1]]),
    )

    @staticmethod
    def get_all_pieces() -> List[Piece]:
        """
        Get all 21 Blokus pieces.

        Raises:
            GameConfigurationError: If the definitions do not hold exactly 21 pieces
        """
        pieces = []
        for index, (name, rows) in enumerate(PieceLibrary._DEFINITIONS):
            shape = np.array(rows, dtype=np.int8)
            pieces.append(Piece(index, name, shape, int(shape.sum())))

        if len(pieces) != NUM_PIECES:
            raise GameConfigurationError(f"Expected {NUM_PIECES} pieces, found {len(pieces)}")
        return pieces

    @staticmethod
    def total_cells(pieces: Sequence[Piece]) -> int:
        """Sum of piece sizes; every player's starting score."""
        return sum(piece.size for piece in pieces)
