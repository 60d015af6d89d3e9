import random

import pytest

from labyrinth.maze import LongestPath, compute, longest_path
from tests.maze_test_utils import diameter


@pytest.mark.parametrize("name", ["BinaryTree", "AldousBroder", "RecursiveBacktracker", "RecursiveDivision"])
@pytest.mark.parametrize("seed", [1, 2, 3])
def test_two_passes_find_the_tree_diameter(make_maze, name, seed):
    grid = make_maze(name, 6, 7, seed=seed)
    result = longest_path(grid, grid.at(3, 3))
    assert result.length == diameter(grid)
    assert len(result.path) == result.length + 1
    assert result.path[0] is result.start
    assert result.path[-1] is result.goal
    assert compute(grid, result.start)[result.goal] == result.length


def test_longest_path_path_is_linked_chain(make_maze):
    grid = make_maze("AldousBroder", 5, 5, seed=10)
    result = longest_path(grid, grid.at(0, 0))
    for a, b in zip(result.path, result.path[1:]):
        assert a.is_linked(b)
    # interior path cells link to exactly two other path cells
    on_path = set(result.path)
    for cell in result.path[1:-1]:
        assert sum(1 for n in cell.links if n in on_path) == 2


def test_same_seed_same_endpoints(make_maze):
    runs = []
    for _ in range(2):
        grid = make_maze("RecursiveBacktracker", 8, 8, seed=99)
        start, goal = LongestPath().endpoints(grid, random.Random(5))
        runs.append((start.coords, goal.coords))
    assert runs[0] == runs[1]


def test_apply_sets_path_breadcrumbs(make_maze):
    grid = make_maze("BinaryTree", 5, 5, seed=3)
    out = LongestPath().apply(grid, random.Random(0))
    assert out is grid
    assert grid.distances is not None
    cells = grid.distances.cells
    assert len(cells) == diameter(grid) + 1
    # apply does not count as a generator run
    assert grid.algorithm == "BinaryTree"


def test_explicit_start_needs_no_rng(make_maze):
    grid = make_maze("BinaryTree", 4, 4, seed=3)
    result = LongestPath().find(grid, start=grid.at(0, 0))
    assert result.length == diameter(grid)
    with pytest.raises(TypeError):
        LongestPath().find(grid)


def test_single_cell():
    from labyrinth.maze import Grid
    grid = Grid.closed(1, 1)
    result = longest_path(grid, grid.at(0, 0))
    assert result.start is result.goal
    assert result.length == 0
    assert result.path == [grid.at(0, 0)]
