"""Level assembly: grid construction, generation, and entrance/stairs placement.

Provides the public Level class consumed by level-building code. One
``random.Random(seed)`` drives every random choice, so a seed fully
determines the layout.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import random
import time

from . import tiles
from .algorithms import AVAILABLE, LongestPathResult, RecursiveDivision, get_algorithm, longest_path
from .cells import Cell
from .config import MazeConfig
from .distances import compute
from .grid import Grid
from .metrics import init_metrics
from ..logging_utils import get_logger

log = get_logger("labyrinth.maze.pipeline")


@dataclass
class Level:
    rows: int = 10
    columns: int = 10
    seed: Optional[int] = None
    algorithm: Any = None
    enable_metrics: bool = True
    room_chance: float = 0.0
    grid: Grid = field(init=False, repr=False)

    def __post_init__(self):
        # 0 is a valid deterministic seed; None => draw one and keep it for replay
        if self.seed is None:
            self.seed = random.SystemRandom().randint(1, 999_999_999)
        self.rng = random.Random(self.seed)
        self.metrics: Dict[str, Any] = init_metrics() if self.enable_metrics else {}
        self.entrance_pos: Optional[Tuple[int, int]] = None
        self.stairs_pos: Optional[Tuple[int, int]] = None
        self.path: List[Cell] = []
        self.dead_ends: List[Cell] = []
        self._run_pipeline()

    @classmethod
    def from_config(cls, cfg: MazeConfig) -> "Level":
        return cls(
            rows=cfg.rows,
            columns=cfg.columns,
            seed=cfg.seed,
            algorithm=cfg.algorithm,
            enable_metrics=cfg.enable_metrics,
            room_chance=cfg.room_chance,
        )

    @property
    def algorithm_name(self) -> str:
        return self.grid.algorithm

    def _run_pipeline(self):
        """Execute generation phases, timing each into ``metrics['phase_ms']``."""
        if self.enable_metrics:
            start = time.perf_counter()
            phase_times = {}

            def _phase(label, fn, *a, **k):
                ps = time.perf_counter()
                r = fn(*a, **k)
                phase_times[label] = round((time.perf_counter() - ps) * 1000, 3)
                return r
        else:
            def _phase(label, fn, *a, **k):
                return fn(*a, **k)

        algorithm = _phase('select_algorithm', self._select_algorithm)
        self.grid = _phase('build_grid', algorithm.new_grid, self.rows, self.columns)
        _phase('generate', algorithm.apply, self.grid, self.rng)
        walls = _phase('mark_walls', self._mark_walls)
        self.dead_ends = _phase('dead_ends', self.grid.dead_ends)
        origin = _phase('start_position', self._start_position)
        result = _phase('longest_path', longest_path, self.grid, origin)
        _phase('place_endpoints', self._place_endpoints, result)

        if self.enable_metrics:
            self.metrics['cells'] = self.grid.size
            self.metrics['links'] = self.grid.link_count()
            self.metrics['dead_ends'] = len(self.dead_ends)
            self.metrics['walls_marked'] = walls
            self.metrics['longest_path_length'] = result.length
            self.metrics['runtime_ms'] = round((time.perf_counter() - start) * 1000, 3)
            self.metrics['phase_ms'] = phase_times
        log.info(
            event="level_created",
            seed=self.seed,
            rows=self.rows,
            columns=self.columns,
            algorithm=self.grid.algorithm,
            entrance=self.entrance_pos,
            stairs=self.stairs_pos,
            dead_ends=len(self.dead_ends),
            runtime_ms=self.metrics.get('runtime_ms'),
        )

    def _select_algorithm(self):
        if self.algorithm is None:
            algorithm = self.rng.choice(AVAILABLE)
        else:
            algorithm = get_algorithm(self.algorithm)
        if isinstance(algorithm, RecursiveDivision) and self.room_chance != algorithm.room_chance:
            algorithm = RecursiveDivision(room_size=algorithm.room_size, room_chance=self.room_chance)
        log.debug(event="algorithm_selected", seed=self.seed, algorithm=algorithm.name)
        return algorithm

    def _mark_walls(self) -> int:
        marked = 0
        for cell in self.grid.each_cell():
            if cell.link_count == 0:
                cell.tile = tiles.WALL
                marked += 1
        return marked

    def _start_position(self) -> Cell:
        # Entrance search begins in the top-left quadrant
        row = self.rng.randint(0, (self.grid.rows - 1) // 2)
        column = self.rng.randint(0, (self.grid.columns - 1) // 2)
        return self.grid.at(row, column)

    def _place_endpoints(self, result: LongestPathResult):
        self.entrance_pos = result.start.coords
        self.stairs_pos = result.goal.coords
        self.path = result.path
        self.grid.distances = compute(self.grid, result.start).breadcrumbs(result.goal)
        result.goal.tile = tiles.STAIRS
        log.debug(
            event="endpoints_placed",
            seed=self.seed,
            entrance=self.entrance_pos,
            stairs=self.stairs_pos,
            length=result.length,
        )


__all__ = ["Level"]
