"""
Aztec diamond region masks.

A diamond of order n lives in a (2n) x (2n) boolean mask indexed [row][col].
Cell (x, y) in tiling coordinates maps to mask[y + n][x + n].

Row widths, top to bottom, are 2, 4, ..., 2n, 2n, ..., 4, 2: the area is
2n(n+1) cells, i.e. n(n+1) dominoes.
"""

from typing import Iterable

import numpy as np

from .domino import Domino
from .errors import InvariantViolation


def area(n: int) -> int:
    """Number of cells in the diamond of order n."""
    return 2 * n * (n + 1)


def cells_occupied_by(n: int) -> np.ndarray:
    """Boolean mask of the diamond of order n (True inside)."""
    if n < 1:
        raise ValueError(f"Diamond order must be >= 1, got {n}")
    mask = np.zeros((2 * n, 2 * n), dtype=bool)
    for r in range(2 * n):
        # Distance from the midline, 0 for the two middle rows
        d = r if r < n else 2 * n - 1 - r
        mask[r, n - d - 1:n + d + 1] = True
    return mask


def empty_cells(n: int, occupied: np.ndarray) -> np.ndarray:
    """Diamond cells not covered by `occupied` (the holes to fill)."""
    region = cells_occupied_by(n)
    if occupied.shape != region.shape:
        raise ValueError(f"Occupancy mask shape {occupied.shape} does not match order {n} {region.shape}")
    return region & ~occupied


def occupancy_mask(dominoes: Iterable[Domino], n: int) -> np.ndarray:
    """Mask of the cells covered by `dominoes` in the order-n frame.

    Raises InvariantViolation if a domino lies outside the frame or two
    dominoes cover the same cell.
    """
    size = 2 * n
    mask = np.zeros((size, size), dtype=bool)
    for domino in dominoes:
        for x, y in domino.cells():
            row, col = y + n, x + n
            if not (0 <= row < size and 0 <= col < size):
                raise InvariantViolation(f"{domino} covers ({x}, {y}) outside the order {n} frame")
            if mask[row, col]:
                raise InvariantViolation(f"{domino} overlaps another domino at ({x}, {y})")
            mask[row, col] = True
    return mask


class DiamondRegion:
    """The diamond of a fixed order, with the mask computed once."""

    def __init__(self, n: int):
        self.n = n
        self.mask = cells_occupied_by(n)

    @property
    def area(self) -> int:
        return area(self.n)

    def contains(self, x: int, y: int) -> bool:
        """True if tiling cell (x, y) belongs to the diamond."""
        row, col = y + self.n, x + self.n
        size = 2 * self.n
        return 0 <= row < size and 0 <= col < size and bool(self.mask[row, col])

    def holes(self, dominoes: Iterable[Domino]) -> np.ndarray:
        """Diamond cells left uncovered by `dominoes`."""
        return empty_cells(self.n, occupancy_mask(dominoes, self.n))

    cells_occupied_by = staticmethod(cells_occupied_by)
    empty_cells = staticmethod(empty_cells)
