"""Rectangular grid owning a flat, row-major arena of cells."""
from __future__ import annotations
import random
from typing import Iterator, List, Optional, Set, FrozenSet, Tuple

from .cells import Cell

Coord = Tuple[int, int]


class GridState:
    """Initial link state a grid was built in.

    CLOSED: every wall standing, zero links.
    OPEN: every physically adjacent pair linked.
    """
    CLOSED = "closed"
    OPEN = "open"


class Grid:
    def __init__(self, rows: int, columns: int, state: str = GridState.CLOSED):
        if not isinstance(rows, int) or not isinstance(columns, int) or rows < 1 or columns < 1:
            raise ValueError(f"grid dimensions must be positive integers, got {rows}x{columns}")
        if state not in (GridState.CLOSED, GridState.OPEN):
            raise ValueError(f"unknown grid state {state!r}")
        self._rows = rows
        self._columns = columns
        self._initial_state = state
        # Name of the generating algorithm once one has been applied
        self.algorithm: Optional[str] = None
        # Optional Distances annotation for collaborators (set by annotate / LongestPath)
        self.distances = None
        self._cells: List[Cell] = [Cell(self, i // columns, i % columns) for i in range(rows * columns)]
        self._wire()
        if state == GridState.OPEN:
            for cell in self._cells:
                for n in cell.neighbors():
                    cell.link(n, bidirectional=False)

    @classmethod
    def closed(cls, rows: int, columns: int) -> "Grid":
        return cls(rows, columns, GridState.CLOSED)

    @classmethod
    def open(cls, rows: int, columns: int) -> "Grid":
        return cls(rows, columns, GridState.OPEN)

    def _wire(self):
        rows, columns = self._rows, self._columns
        for cell in self._cells:
            r, c = cell.row, cell.column
            adj = cell._adjacent
            if r > 0:
                adj["north"] = (r - 1) * columns + c
            if r < rows - 1:
                adj["south"] = (r + 1) * columns + c
            if c < columns - 1:
                adj["east"] = r * columns + c + 1
            if c > 0:
                adj["west"] = r * columns + c - 1

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def initial_state(self) -> str:
        return self._initial_state

    @property
    def size(self) -> int:
        return self._rows * self._columns

    def __len__(self) -> int:
        return self.size

    def __repr__(self):
        return f"Grid({self._rows}x{self._columns}, {self._initial_state}, algorithm={self.algorithm})"

    def at(self, row, column) -> Optional[Cell]:
        """Cell at (row, column), or None when out of range."""
        if not isinstance(row, int) or not isinstance(column, int):
            return None
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            return None
        return self._cells[row * self._columns + column]

    def __getitem__(self, key: Coord) -> Optional[Cell]:
        row, column = key
        return self.at(row, column)

    def each_cell(self) -> Iterator[Cell]:
        for cell in self._cells:
            yield cell

    __iter__ = each_cell

    def each_row(self) -> Iterator[List[Cell]]:
        for r in range(self._rows):
            yield self._cells[r * self._columns:(r + 1) * self._columns]

    def dead_ends(self) -> List[Cell]:
        return [cell for cell in self._cells if cell.is_dead_end()]

    def random_cell(self, rng: random.Random) -> Cell:
        return self._cells[rng.randrange(len(self._cells))]

    def link_pairs(self) -> Set[FrozenSet[Coord]]:
        """Unordered coordinate pairs of every linked cell pair."""
        pairs = set()
        for cell in self._cells:
            for other in cell.links:
                pairs.add(frozenset((cell.coords, other.coords)))
        return pairs

    def link_count(self) -> int:
        return len(self.link_pairs())


__all__ = ["Grid", "GridState"]
