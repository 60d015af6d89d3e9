from __future__ import annotations
import random
import time

from ..grid import Grid, GridState
from .base import mark_applied, new_grid, require_state


class BinaryTree:
    """Link every cell to its north or east neighbour, a coin flip when both exist.

    Produces unbroken corridors along the top row and the east column.
    """
    name = "BinaryTree"
    requires = GridState.CLOSED

    def new_grid(self, rows: int, columns: int) -> Grid:
        return new_grid(self, rows, columns)

    def apply(self, grid: Grid, rng: random.Random) -> Grid:
        require_state(self, grid, rng)
        started = time.perf_counter()
        for cell in grid.each_cell():
            north, east = cell.north, cell.east
            if north is not None and east is not None:
                cell.link(north if rng.randrange(2) == 0 else east)
            elif north is not None:
                cell.link(north)
            elif east is not None:
                cell.link(east)
        return mark_applied(self, grid, started)
