"""Structural analysis of a generated grid for diagnostics and tests."""
from __future__ import annotations
from typing import Any, Dict

from .distances import compute
from .grid import Grid


def analyze(grid: Grid) -> Dict[str, Any]:
    """Summarise link-graph health.

    Keys:
      unreachable        coordinates not reachable from (0, 0)
      asymmetric_links   (a, b) where a links b but b does not link a
      non_adjacent_links (a, b) links between cells that are not physical neighbours
      edges              number of undirected links
      is_tree            connected with exactly cells - 1 edges
      dead_ends          number of cells with one link
    """
    reached = compute(grid, grid.at(0, 0))
    unreachable = [cell.coords for cell in grid.each_cell() if cell not in reached]
    asymmetric = []
    non_adjacent = []
    for cell in grid.each_cell():
        for other in cell.links:
            if not other.is_linked(cell):
                asymmetric.append((cell.coords, other.coords))
            if not cell.is_adjacent(other):
                non_adjacent.append((cell.coords, other.coords))
    edges = grid.link_count()
    return {
        'unreachable': unreachable,
        'asymmetric_links': asymmetric,
        'non_adjacent_links': non_adjacent,
        'edges': edges,
        'is_tree': not unreachable and edges == grid.size - 1,
        'dead_ends': len(grid.dead_ends()),
    }


__all__ = ["analyze"]
