"""
Console output for a tiling.

Each cell of the diamond is printed as the direction letter of the domino
covering it (N, S, E, W), holes as '.', cells outside the diamond as blanks.
"""

from typing import Iterable

from .config import HOLE_CHAR
from .domino import Domino
from .region import cells_occupied_by


def format_tiling(dominoes: Iterable[Domino], n: int) -> str:
    """Character grid of the order-n diamond, one row per line.

    Dominoes outside the order-n frame are ignored.
    """
    mask = cells_occupied_by(n)
    size = 2 * n
    grid = [[HOLE_CHAR if mask[r, c] else " " for c in range(size)] for r in range(size)]

    for domino in dominoes:
        for x, y in domino.cells():
            row, col = y + n, x + n
            if 0 <= row < size and 0 <= col < size:
                grid[row][col] = domino.direction

    return "\n".join("".join(row).rstrip() for row in grid)


def display_tiling(engine) -> None:
    """Print the current tiling of an engine with a short summary."""
    n = engine.order if engine.phase_index == 0 else engine.iteration
    print(f"\nOrder {engine.order} tiling (next phase: {engine.phase}):")
    print("=" * (2 * n))
    print(format_tiling(engine.dominoes, n))
    print("=" * (2 * n))
    counts = engine.direction_counts()
    print(f"Dominoes: {len(engine.dominoes)}  " + "  ".join(f"{d}={c}" for d, c in counts.items()))
