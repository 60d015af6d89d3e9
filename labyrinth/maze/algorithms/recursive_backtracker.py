from __future__ import annotations
import random
import time

from ..grid import Grid, GridState
from .base import mark_applied, new_grid, require_state


class RecursiveBacktracker:
    """Depth-first carve with an explicit stack; long winding corridors, few dead ends."""
    name = "RecursiveBacktracker"
    requires = GridState.CLOSED

    def new_grid(self, rows: int, columns: int) -> Grid:
        return new_grid(self, rows, columns)

    def apply(self, grid: Grid, rng: random.Random) -> Grid:
        require_state(self, grid, rng)
        started = time.perf_counter()
        first = grid.random_cell(rng)
        visited = {first}
        stack = [first]
        while stack:
            current = stack[-1]
            candidates = [n for n in current.neighbors() if n not in visited]
            if not candidates:
                stack.pop()
                continue
            neighbor = rng.choice(candidates)
            current.link(neighbor)
            visited.add(neighbor)
            stack.append(neighbor)
        return mark_applied(self, grid, started)
