"""Conway's Game of Life on a bounded grid."""

from __future__ import annotations

import enum
import random
from typing import Sequence

__all__ = ["CellState", "next_state", "count_neighbors", "next_generation", "random_grid"]

Grid = list[list["CellState"]]


class CellState(enum.Enum):
    ALIVE = enum.auto()
    DEAD = enum.auto()


def next_state(cell: CellState, neighbors: int) -> CellState:
    """Apply the rules of Life to one cell with the given live-neighbour count."""
    if cell is CellState.ALIVE:
        if neighbors < 2 or neighbors > 3:
            return CellState.DEAD
        return CellState.ALIVE
    if neighbors == 3:
        return CellState.ALIVE
    return cell


def count_neighbors(cells: Sequence[Sequence[CellState]], x: int, y: int) -> int:
    """Count live cells around (x, y); cells outside the grid count as dead."""
    height = len(cells)
    width = len(cells[0]) if height else 0
    return sum(
        1
        for ny in range(max(y - 1, 0), min(y + 2, height))
        for nx in range(max(x - 1, 0), min(x + 2, width))
        if (nx, ny) != (x, y) and cells[ny][nx] is CellState.ALIVE
    )


def next_generation(cells: Sequence[Sequence[CellState]]) -> Grid:
    """Return the grid after one step; the input is left unchanged."""
    return [
        [next_state(cell, count_neighbors(cells, x, y)) for x, cell in enumerate(row)]
        for y, row in enumerate(cells)
    ]


def random_grid(width: int, height: int, rng: random.Random | None = None) -> Grid:
    """Make a grid where each cell is alive with probability 1/5."""
    rng = rng or random.Random()
    return [
        [CellState.ALIVE if rng.randrange(5) == 0 else CellState.DEAD for _ in range(width)]
        for _ in range(height)
    ]