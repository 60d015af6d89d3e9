"""Public maze package interface."""

from .algorithms import (
    AVAILABLE,
    AldousBroder,
    BinaryTree,
    LongestPath,
    LongestPathResult,
    RecursiveBacktracker,
    RecursiveDivision,
    get_algorithm,
    longest_path,
)  # noqa: F401
from .cells import Cell
from .config import MazeConfig, load_env_file
from .distances import Distances, annotate, compute, path_to, shortest_path
from .errors import GridStateError, MazeError, UnknownAlgorithmError, UnreachableCellError
from .grid import Grid, GridState
from .pipeline import Level

__all__ = [
    "AVAILABLE",
    "AldousBroder",
    "BinaryTree",
    "Cell",
    "Distances",
    "Grid",
    "GridState",
    "GridStateError",
    "Level",
    "LongestPath",
    "LongestPathResult",
    "MazeConfig",
    "MazeError",
    "RecursiveBacktracker",
    "RecursiveDivision",
    "UnknownAlgorithmError",
    "UnreachableCellError",
    "annotate",
    "compute",
    "get_algorithm",
    "load_env_file",
    "longest_path",
    "path_to",
    "shortest_path",
]
