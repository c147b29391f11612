"""
Bitboard utilities for Blokus board representation.

Cells are numbered in raster order (row * cols + col) and a set of cells is an
int with one bit per cell, so placement legality reduces to a few ANDs.
"""

from typing import Iterable, List, Tuple


def coord_to_index(row: int, col: int, cols: int) -> int:
    """
    Convert board coordinates to a linear index.

    Args:
        row: Row coordinate (0-based)
        col: Column coordinate (0-based)
        cols: Board width

    Returns:
        Linear index in [0, rows * cols)
    """
    return row * cols + col


def index_to_coord(index: int, cols: int) -> Tuple[int, int]:
    """Convert a linear index back to (row, col)."""
    return (index // cols, index % cols)


def coord_to_bit(row: int, col: int, cols: int) -> int:
    """Bit mask with the single bit for (row, col) set."""
    return 1 << coord_to_index(row, col, cols)


def coords_to_mask(coords: Iterable[Tuple[int, int]], cols: int) -> int:
    """
    Convert a collection of coordinates to a bitmask.

    Args:
        coords: Iterable of (row, col) tuples
        cols: Board width

    Returns:
        Bitmask with bits set for each coordinate
    """
    mask = 0
    for row, col in coords:
        mask |= coord_to_bit(row, col, cols)
    return mask


def mask_to_coords(mask: int, cols: int) -> List[Tuple[int, int]]:
    """
    Convert a bitmask back into a list of coordinates, in raster order.

    Useful for debugging and testing.
    """
    coords = []
    index = 0
    while mask != 0:
        if mask & 1:
            coords.append(index_to_coord(index, cols))
        mask >>= 1
        index += 1
    return coords
