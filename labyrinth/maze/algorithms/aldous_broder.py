from __future__ import annotations
import random
import time

from ..grid import Grid, GridState
from .base import mark_applied, new_grid, require_state


class AldousBroder:
    """Random walk that links into each cell the first time it is entered.

    Yields a uniform spanning tree. The walk wanders over visited cells a lot,
    so large grids are slow.
    """
    name = "AldousBroder"
    requires = GridState.CLOSED

    def new_grid(self, rows: int, columns: int) -> Grid:
        return new_grid(self, rows, columns)

    def apply(self, grid: Grid, rng: random.Random) -> Grid:
        require_state(self, grid, rng)
        started = time.perf_counter()
        cell = grid.random_cell(rng)
        visited = {cell}
        unvisited = grid.size - 1
        while unvisited > 0:
            neighbor = rng.choice(cell.neighbors())
            if neighbor not in visited:
                cell.link(neighbor)
                visited.add(neighbor)
                unvisited -= 1
            cell = neighbor
        return mark_applied(self, grid, started)
