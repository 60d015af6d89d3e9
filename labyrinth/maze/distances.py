"""Hop-count distances over the link graph.

Edges are unweighted, so a breadth-first flood is all the "Dijkstra" this
needs. A Distances object is a snapshot: later link changes do not update it.
"""
from __future__ import annotations
from collections import deque
from collections.abc import Mapping
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

from .errors import UnreachableCellError

if TYPE_CHECKING:  # pragma: no cover
    from .cells import Cell
    from .grid import Grid


class Distances(Mapping):
    """Read-only mapping of reached cell -> hops from ``root``.

    Unreached cells are absent; ``distances[cell]`` raises KeyError for them
    and ``distances.get(cell)`` returns None.
    """

    def __init__(self, root: "Cell", cells: Optional[Dict["Cell", int]] = None):
        self.root = root
        self._cells = cells if cells is not None else {root: 0}

    def __getitem__(self, cell: "Cell") -> int:
        return self._cells[cell]

    def __iter__(self):
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self):
        return f"Distances(root={self.root!r}, reached={len(self._cells)})"

    @property
    def cells(self) -> List["Cell"]:
        return list(self._cells)

    def max(self) -> Tuple["Cell", int]:
        """Farthest reached cell and its distance; the first one found wins ties."""
        max_cell, max_distance = self.root, 0
        for cell, distance in self._cells.items():
            if distance > max_distance:
                max_cell, max_distance = cell, distance
        return max_cell, max_distance

    def path_to(self, goal: "Cell") -> List["Cell"]:
        """Cells from root to ``goal`` inclusive, walking back along decreasing distance."""
        if goal not in self._cells:
            raise UnreachableCellError(goal)
        current = goal
        path = [current]
        while current is not self.root:
            step = self._cells[current] - 1
            for neighbor in current.links:
                if self._cells.get(neighbor) == step:
                    current = neighbor
                    break
            else:  # pragma: no cover - only possible if links changed after compute
                raise UnreachableCellError(goal)
            path.append(current)
        path.reverse()
        return path

    def breadcrumbs(self, goal: "Cell") -> "Distances":
        """Distances restricted to the cells on the path to ``goal``."""
        return Distances(self.root, {cell: self._cells[cell] for cell in self.path_to(goal)})


def compute(grid: "Grid", start: "Cell") -> Distances:
    dist = {start: 0}
    q = deque([start])
    while q:
        cell = q.popleft()
        d = dist[cell] + 1
        for linked in cell.links:
            if linked not in dist:
                dist[linked] = d
                q.append(linked)
    return Distances(start, dist)


def path_to(distances: Distances, goal: "Cell") -> List["Cell"]:
    return distances.path_to(goal)


def shortest_path(grid: "Grid", start: "Cell", goal: "Cell") -> List["Cell"]:
    return compute(grid, start).path_to(goal)


def annotate(grid: "Grid", start: "Cell", goal: Optional["Cell"] = None) -> "Grid":
    """Store distances from ``start`` (or just the path to ``goal``) on ``grid.distances``."""
    distances = compute(grid, start)
    grid.distances = distances.breadcrumbs(goal) if goal is not None else distances
    return grid


__all__ = ["Distances", "compute", "path_to", "shortest_path", "annotate"]
