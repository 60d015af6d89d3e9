"""Maze generation algorithms.

Every generator exposes ``name``, ``requires`` (the GridState it must start
from) and ``apply(grid, rng)``, which mutates links in place and returns the
grid. ``AVAILABLE`` lists the generators a level may pick from.
"""
from __future__ import annotations
import re

from ..errors import UnknownAlgorithmError
from .aldous_broder import AldousBroder
from .binary_tree import BinaryTree
from .longest_path import LongestPath, LongestPathResult, longest_path
from .recursive_backtracker import RecursiveBacktracker
from .recursive_division import RecursiveDivision

AVAILABLE = (
    AldousBroder(),
    BinaryTree(),
    RecursiveDivision(),
    RecursiveBacktracker(),
)


def _normalize(name: str) -> str:
    return re.sub(r"[^a-z]", "", name.lower())


def get_algorithm(name):
    """Resolve a generator by name ('BinaryTree', 'binary_tree', 'binary-tree')."""
    if not isinstance(name, str):
        if hasattr(name, "apply") and hasattr(name, "requires"):
            return name
        raise UnknownAlgorithmError(f"not an algorithm: {name!r}")
    key = _normalize(name)
    for algorithm in AVAILABLE:
        if _normalize(algorithm.name) == key:
            return algorithm
    raise UnknownAlgorithmError(f"unknown maze algorithm {name!r}")


__all__ = [
    "AVAILABLE",
    "AldousBroder",
    "BinaryTree",
    "LongestPath",
    "LongestPathResult",
    "RecursiveBacktracker",
    "RecursiveDivision",
    "get_algorithm",
    "longest_path",
]
