"""Shared precondition helpers for maze algorithms.

An algorithm is any object with ``name``, ``requires`` (a GridState value)
and ``apply(grid, rng) -> grid``. Generators call ``require_state`` before
touching links and ``mark_applied`` once done.
"""
from __future__ import annotations
import random
import time

from ..errors import GridStateError
from ..grid import Grid
from ...logging_utils import get_logger

log = get_logger("labyrinth.maze.algorithms")


def require_state(algorithm, grid: Grid, rng) -> None:
    if not isinstance(rng, random.Random):
        raise TypeError(f"{algorithm.name} needs an injected random.Random, got {type(rng).__name__}")
    if grid.algorithm is not None:
        raise GridStateError(f"{algorithm.name}: grid already generated by {grid.algorithm}")
    if grid.initial_state != algorithm.requires:
        raise GridStateError(
            f"{algorithm.name} requires a {algorithm.requires} grid, got {grid.initial_state}"
        )


def mark_applied(algorithm, grid: Grid, started: float) -> Grid:
    grid.algorithm = algorithm.name
    if log.enabled_for("debug"):
        log.debug(
            event="algorithm_applied",
            algorithm=algorithm.name,
            rows=grid.rows,
            columns=grid.columns,
            dead_ends=len(grid.dead_ends()),
            elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
        )
    return grid


def new_grid(algorithm, rows: int, columns: int) -> Grid:
    return Grid(rows, columns, algorithm.requires)
