import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from labyrinth.maze import get_algorithm  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_maze():
    """Factory: build a grid in the algorithm's required state and apply it with a seeded rng."""

    def _make(algorithm, rows=8, columns=8, seed=1234):
        algo = get_algorithm(algorithm)
        grid = algo.new_grid(rows, columns)
        return algo.apply(grid, random.Random(seed))

    return _make


@pytest.fixture(autouse=True)
def _clear_maze_env(monkeypatch):
    # Keep developer MAZE_* overrides from leaking into config resolution
    for key in list(os.environ):
        if key.startswith("MAZE_"):
            monkeypatch.delenv(key, raising=False)
