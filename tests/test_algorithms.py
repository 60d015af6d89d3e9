import random

import pytest

from labyrinth.maze import (
    AVAILABLE,
    AldousBroder,
    BinaryTree,
    Grid,
    GridState,
    GridStateError,
    RecursiveBacktracker,
    RecursiveDivision,
    UnknownAlgorithmError,
    get_algorithm,
)
from labyrinth.maze.debug_checks import analyze
from tests.maze_test_utils import all_links_symmetric, bfs_reachable

SPANNING = ["BinaryTree", "AldousBroder", "RecursiveBacktracker", "RecursiveDivision"]


@pytest.mark.parametrize("name", SPANNING)
@pytest.mark.parametrize("rows,columns", [(1, 1), (1, 7), (6, 1), (5, 9), (12, 12)])
def test_generators_produce_connected_trees(make_maze, name, rows, columns):
    grid = make_maze(name, rows, columns, seed=rows * 31 + columns)
    assert grid.size == rows * columns
    reach = bfs_reachable(grid, grid.at(0, 0))
    assert len(reach) == rows * columns, f"{name} left {rows * columns - len(reach)} cells unreachable"
    assert grid.link_count() == rows * columns - 1
    assert all_links_symmetric(grid)
    res = analyze(grid)
    assert res["is_tree"]
    assert res["non_adjacent_links"] == []


@pytest.mark.parametrize("name", SPANNING)
def test_apply_returns_same_grid_and_records_algorithm(name):
    algo = get_algorithm(name)
    grid = algo.new_grid(5, 5)
    assert grid.initial_state == algo.requires
    out = algo.apply(grid, random.Random(1))
    assert out is grid
    assert grid.algorithm == algo.name
    assert (grid.rows, grid.columns) == (5, 5)


@pytest.mark.parametrize("name", SPANNING)
def test_same_seed_same_maze(make_maze, name):
    a = make_maze(name, 10, 13, seed=777)
    b = make_maze(name, 10, 13, seed=777)
    assert a.link_pairs() == b.link_pairs()


@pytest.mark.parametrize("name", ["AldousBroder", "RecursiveBacktracker", "RecursiveDivision"])
def test_different_seeds_differ(make_maze, name):
    a = make_maze(name, 10, 10, seed=1)
    b = make_maze(name, 10, 10, seed=2)
    assert a.link_pairs() != b.link_pairs()


@pytest.mark.parametrize(
    "algo,wrong",
    [
        (BinaryTree(), Grid.open),
        (AldousBroder(), Grid.open),
        (RecursiveBacktracker(), Grid.open),
        (RecursiveDivision(), Grid.closed),
    ],
)
def test_wrong_initial_state_rejected(algo, wrong):
    grid = wrong(4, 4)
    before = grid.link_pairs()
    with pytest.raises(GridStateError):
        algo.apply(grid, random.Random(0))
    assert grid.link_pairs() == before
    assert grid.algorithm is None


def test_reapplying_rejected(make_maze):
    grid = make_maze("BinaryTree", 4, 4)
    with pytest.raises(GridStateError):
        BinaryTree().apply(grid, random.Random(0))
    with pytest.raises(GridStateError):
        RecursiveBacktracker().apply(grid, random.Random(0))


def test_rng_must_be_injected():
    grid = Grid.closed(3, 3)
    with pytest.raises(TypeError):
        BinaryTree().apply(grid, 42)
    assert grid.algorithm is None


def test_grid_state_error_is_value_error():
    with pytest.raises(ValueError):
        RecursiveDivision().apply(Grid.closed(2, 2), random.Random(0))


def test_binary_tree_links_exactly_one_of_north_or_east(make_maze):
    grid = make_maze("BinaryTree", 9, 7, seed=5)
    for cell in grid.each_cell():
        chosen = [n for n in (cell.north, cell.east) if n is not None and cell.is_linked(n)]
        if cell.north is None and cell.east is None:
            assert chosen == []
            assert (cell.row, cell.column) == (0, 6)
        else:
            assert len(chosen) == 1, f"{cell} linked {chosen}"


def test_binary_tree_top_row_and_east_column_are_corridors(make_maze):
    grid = make_maze("BinaryTree", 6, 6, seed=11)
    for c in range(5):
        assert grid.at(0, c).is_linked(grid.at(0, c + 1))
    for r in range(1, 6):
        assert grid.at(r, 5).is_linked(grid.at(r - 1, 5))


def test_binary_tree_has_dead_ends(make_maze):
    grid = make_maze("BinaryTree", 2, 2, seed=3)
    ends = grid.dead_ends()
    assert ends
    assert all(len(c.links) == 1 for c in ends)


def test_recursive_division_carves_walls_into_open_grid(make_maze):
    grid = make_maze("RecursiveDivision", 8, 8, seed=21)
    assert (grid.rows, grid.columns) == (8, 8)
    assert grid.size == 64
    total_pairs = 7 * 8 * 2
    links = grid.link_count()
    assert 0 < links < total_pairs
    assert links == 63


def test_recursive_division_thin_grid_stays_a_corridor(make_maze):
    grid = make_maze("RecursiveDivision", 1, 6)
    assert grid.link_count() == 5


def test_recursive_division_rooms_left_open():
    algo = RecursiveDivision(room_chance=1.0)
    grid = algo.apply(algo.new_grid(4, 4), random.Random(0))
    # every region below room_size stays whole, so the 4x4 grid is never divided
    assert grid.link_count() == 24


@pytest.mark.parametrize("seed", range(8))
def test_recursive_division_rooms_keep_connectivity(seed):
    algo = RecursiveDivision(room_chance=0.5)
    grid = algo.apply(algo.new_grid(12, 9), random.Random(seed))
    assert analyze(grid)["unreachable"] == []
    assert all_links_symmetric(grid)


def test_recursive_division_rejects_bad_room_chance():
    with pytest.raises(ValueError):
        RecursiveDivision(room_chance=1.5)


def test_aldous_broder_visits_every_cell_on_a_strip(make_maze):
    grid = make_maze("AldousBroder", 1, 10, seed=4)
    assert all(c.links for c in grid.each_cell())
    assert len(grid.dead_ends()) == 2


def test_recursive_backtracker_few_dead_ends_compared_to_binary_tree(make_maze):
    bt = sum(len(make_maze("BinaryTree", 15, 15, seed=s).dead_ends()) for s in range(5))
    rb = sum(len(make_maze("RecursiveBacktracker", 15, 15, seed=s).dead_ends()) for s in range(5))
    assert rb < bt


def test_registry_lists_generators_and_resolves_names():
    assert [a.name for a in AVAILABLE] == [
        "AldousBroder",
        "BinaryTree",
        "RecursiveDivision",
        "RecursiveBacktracker",
    ]
    assert get_algorithm("binary_tree").name == "BinaryTree"
    assert get_algorithm("Recursive-Backtracker").name == "RecursiveBacktracker"
    assert get_algorithm("ALDOUSBRODER").name == "AldousBroder"
    custom = RecursiveDivision(room_chance=0.2)
    assert get_algorithm(custom) is custom
    assert AVAILABLE[2].requires == GridState.OPEN


def test_unknown_algorithm():
    with pytest.raises(UnknownAlgorithmError):
        get_algorithm("wilson")
    with pytest.raises(LookupError):
        get_algorithm(12)
