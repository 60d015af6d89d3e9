"""Maze cell: fixed physical adjacency plus mutable link state.

Cells live in their grid's flat arena. Adjacency and links are stored as
arena indices and resolved through the owning grid, so cells never hold
references to each other.
"""
from __future__ import annotations
from typing import List, Optional, TYPE_CHECKING

from . import tiles

if TYPE_CHECKING:  # pragma: no cover
    from .grid import Grid
    from .distances import Distances

DIRECTIONS = ("north", "south", "east", "west")


class Cell:
    __slots__ = ("row", "column", "index", "tile", "_grid", "_adjacent", "_links")

    def __init__(self, grid: "Grid", row: int, column: int):
        self._grid = grid
        self.row = row
        self.column = column
        self.index = row * grid.columns + column
        self.tile = tiles.EMPTY
        # direction -> arena index; wired once by the grid
        self._adjacent = {}
        self._links = set()

    def __repr__(self):
        return f"Cell({self.row}, {self.column})"

    def _resolve(self, direction: str) -> Optional["Cell"]:
        idx = self._adjacent.get(direction)
        return None if idx is None else self._grid._cells[idx]

    @property
    def north(self) -> Optional["Cell"]:
        return self._resolve("north")

    @property
    def south(self) -> Optional["Cell"]:
        return self._resolve("south")

    @property
    def east(self) -> Optional["Cell"]:
        return self._resolve("east")

    @property
    def west(self) -> Optional["Cell"]:
        return self._resolve("west")

    @property
    def coords(self):
        return (self.row, self.column)

    @property
    def links(self) -> List["Cell"]:
        cells = self._grid._cells
        return [cells[i] for i in sorted(self._links)]

    def neighbors(self) -> List["Cell"]:
        """Physically adjacent cells that exist, in N/S/E/W order, ignoring links."""
        cells = self._grid._cells
        return [cells[self._adjacent[d]] for d in DIRECTIONS if d in self._adjacent]

    def is_adjacent(self, other: Optional["Cell"]) -> bool:
        return other is not None and other._grid is self._grid and other.index in self._adjacent.values()

    def link(self, other: Optional["Cell"], bidirectional: bool = True) -> "Cell":
        if other is None:
            return self
        if not self.is_adjacent(other):
            raise ValueError(f"{other!r} is not adjacent to {self!r}")
        self._links.add(other.index)
        if bidirectional:
            other._links.add(self.index)
        return self

    def unlink(self, other: Optional["Cell"], bidirectional: bool = True) -> "Cell":
        if other is None:
            return self
        self._links.discard(other.index)
        if bidirectional:
            other._links.discard(self.index)
        return self

    def is_linked(self, other: Optional["Cell"]) -> bool:
        if other is None or other._grid is not self._grid:
            return False
        return other.index in self._links

    @property
    def link_count(self) -> int:
        return len(self._links)

    def is_dead_end(self) -> bool:
        return len(self._links) == 1

    def distances(self) -> "Distances":
        from .distances import compute
        return compute(self._grid, self)


__all__ = ["Cell", "DIRECTIONS"]
