"""
project: labyrinth
module: __init__.py

Procedural maze generation and path metrics for roguelike level building.
"""

from .maze import Grid, GridState, Level, MazeConfig  # noqa: F401

__version__ = "0.1.0"

__all__ = ["Grid", "GridState", "Level", "MazeConfig", "__version__"]
