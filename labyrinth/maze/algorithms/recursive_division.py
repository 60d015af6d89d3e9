"""Recursive division: carve walls into a fully open grid.

Each region is split by a wall along its longer axis (vertical on squares),
leaving a single passage, and both halves are divided again until they are
one cell thin. With ``room_chance`` > 0, regions smaller than ``room_size``
on both axes may be left undivided as open rooms; those rooms contain cycles,
so the result is no longer a tree.
"""
from __future__ import annotations
import random
import time

from ..grid import Grid, GridState
from .base import mark_applied, new_grid, require_state

TOO_SMALL = 1
ROOM_SIZE = 5


class RecursiveDivision:
    name = "RecursiveDivision"
    requires = GridState.OPEN

    def __init__(self, room_size: int = ROOM_SIZE, room_chance: float = 0.0):
        if not 0.0 <= room_chance <= 1.0:
            raise ValueError(f"room_chance must be within [0, 1], got {room_chance}")
        self.room_size = room_size
        self.room_chance = room_chance

    def __repr__(self):
        return f"RecursiveDivision(room_size={self.room_size}, room_chance={self.room_chance})"

    def new_grid(self, rows: int, columns: int) -> Grid:
        return new_grid(self, rows, columns)

    def apply(self, grid: Grid, rng: random.Random) -> Grid:
        require_state(self, grid, rng)
        started = time.perf_counter()
        # Explicit stack (row, column, height, width); second half pushed first so
        # regions are divided in the same order plain recursion would use.
        regions = [(0, 0, grid.rows, grid.columns)]
        while regions:
            row, column, height, width = regions.pop()
            if self._stop(height, width, rng):
                continue
            if height > width:
                regions.extend(reversed(self._divide_horizontally(grid, rng, row, column, height, width)))
            else:
                regions.extend(reversed(self._divide_vertically(grid, rng, row, column, height, width)))
        return mark_applied(self, grid, started)

    def _stop(self, height: int, width: int, rng: random.Random) -> bool:
        if height <= TOO_SMALL or width <= TOO_SMALL:
            return True
        if self.room_chance and height < self.room_size and width < self.room_size:
            return rng.random() < self.room_chance
        return False

    @staticmethod
    def _divide_horizontally(grid, rng, row, column, height, width):
        divide_south_of = rng.randrange(height - 1)
        passage_at = rng.randrange(width)
        for x in range(width):
            if x == passage_at:
                continue
            cell = grid.at(row + divide_south_of, column + x)
            cell.unlink(cell.south)
        return [
            (row, column, divide_south_of + 1, width),
            (row + divide_south_of + 1, column, height - divide_south_of - 1, width),
        ]

    @staticmethod
    def _divide_vertically(grid, rng, row, column, height, width):
        divide_east_of = rng.randrange(width - 1)
        passage_at = rng.randrange(height)
        for y in range(height):
            if y == passage_at:
                continue
            cell = grid.at(row + y, column + divide_east_of)
            cell.unlink(cell.east)
        return [
            (row, column, height, divide_east_of + 1),
            (row, column + divide_east_of + 1, height, width - divide_east_of - 1),
        ]
