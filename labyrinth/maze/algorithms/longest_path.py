"""Longest path (tree diameter) via two farthest-cell passes.

The farthest cell from any start is an endpoint of some longest path in a
tree, so a second pass from it reaches the other endpoint. On a link graph
with cycles the result is a long path, not necessarily the longest.
"""
from __future__ import annotations
import random
from typing import List, NamedTuple, Optional

from ..cells import Cell
from ..distances import compute
from ..grid import Grid
from ...logging_utils import get_logger

log = get_logger("labyrinth.maze.algorithms")


class LongestPathResult(NamedTuple):
    start: Cell
    goal: Cell
    path: List[Cell]
    length: int


def longest_path(grid: Grid, start: Cell) -> LongestPathResult:
    new_start, first_distance = compute(grid, start).max()
    distances = compute(grid, new_start)
    goal, length = distances.max()
    log.debug(
        event="longest_path",
        origin=start.coords,
        start=new_start.coords,
        goal=goal.coords,
        first_pass=first_distance,
        length=length,
    )
    return LongestPathResult(new_start, goal, distances.path_to(goal), length)


class LongestPath:
    name = "LongestPath"
    requires = None  # any generated grid

    def endpoints(self, grid: Grid, rng: Optional[random.Random] = None, start: Optional[Cell] = None):
        return self.find(grid, rng, start)[:2]

    def find(self, grid: Grid, rng: Optional[random.Random] = None, start: Optional[Cell] = None) -> LongestPathResult:
        if start is None:
            if rng is None:
                raise TypeError("LongestPath needs either a start cell or an injected random.Random")
            start = grid.random_cell(rng)
        return longest_path(grid, start)

    def apply(self, grid: Grid, rng: Optional[random.Random] = None, start: Optional[Cell] = None) -> Grid:
        """Annotate ``grid.distances`` with the breadcrumbs of a longest path."""
        result = self.find(grid, rng, start)
        grid.distances = compute(grid, result.start).breadcrumbs(result.goal)
        return grid
