"""Exceptions raised by the maze core.

Lookups and links toward missing neighbours never raise; these cover caller
precondition violations only.
"""


class MazeError(Exception):
    """Base class for maze core errors."""


class GridStateError(MazeError, ValueError):
    """An algorithm was applied to a grid in the wrong initial state (or twice)."""


class UnreachableCellError(MazeError, KeyError):
    """A path was requested to a cell absent from the distances snapshot."""


class UnknownAlgorithmError(MazeError, LookupError):
    pass


__all__ = ["MazeError", "GridStateError", "UnreachableCellError", "UnknownAlgorithmError"]
