"""Tests for the four grid searches and their shared helpers."""

import random

import pytest

from algorithms import PATHFINDING_REGISTRY, run_pathfinding
from algorithms.astar import astar
from algorithms.bfs import bfs
from algorithms.dfs import dfs
from algorithms.dijkstra import dijkstra
from algorithms.grid_search import manhattan, neighbours, reconstruct_path
from problems import GridConfig, generate_grid


def assert_valid_path(result, cfg):
    """Path runs start → end through adjacent walkable cells."""
    path = result.path
    assert path[0] == cfg.start
    assert path[-1] == cfg.end
    for a, b in zip(path, path[1:]):
        assert manhattan(a, b) == 1
        assert cfg.is_walkable(b)
    assert len(set(path)) == len(path)


class TestHelpers:
    """neighbours / reconstruct_path / manhattan."""

    def test_neighbour_order_is_up_down_left_right(self, open_grid):
        assert list(neighbours((2, 2), open_grid)) == [(1, 2), (3, 2), (2, 1), (2, 3)]

    def test_neighbours_skip_walls_and_edges(self, blocked_grid):
        assert list(neighbours((0, 0), blocked_grid)) == [(1, 0), (0, 1)]
        assert list(neighbours((3, 3), blocked_grid)) == [(2, 3), (3, 2)]

    def test_reconstruct_path(self):
        came_from = {(0, 1): (0, 0), (0, 2): (0, 1)}
        assert reconstruct_path(came_from, (0, 2)) == ((0, 0), (0, 1), (0, 2))

    def test_manhattan(self):
        assert manhattan((0, 0), (4, 4)) == 8
        assert manhattan((3, 1), (1, 2)) == 3


class TestOpenGrid:
    """5x5 open grid, (0, 0) → (4, 4)."""

    @pytest.mark.parametrize("key", ["dijkstra", "astar", "bfs"])
    def test_optimal_algorithms_find_nine_cell_path(self, key, open_grid):
        result = PATHFINDING_REGISTRY[key].fn(open_grid)
        assert result.found
        assert result.path_length == 9
        assert_valid_path(result, open_grid)

    def test_dfs_finds_a_longer_valid_path(self, open_grid):
        """DFS keeps the first parent it discovers, so it snakes instead of cutting across."""
        result = dfs(open_grid)
        assert result.found
        assert_valid_path(result, open_grid)
        assert result.path_length >= 9
        assert result.path_length > bfs(open_grid).path_length

    @pytest.mark.parametrize("fn", [bfs, dfs, dijkstra, astar])
    def test_explored_starts_at_start_and_ends_at_end(self, fn, open_grid):
        result = fn(open_grid)
        assert result.explored[0] == open_grid.start
        assert result.explored[-1] == open_grid.end
        assert len(set(result.explored)) == len(result.explored)

    def test_astar_explores_no_more_than_dijkstra(self, open_grid):
        assert astar(open_grid).explored_count <= dijkstra(open_grid).explored_count

    def test_dfs_dives_along_last_pushed_neighbour(self, open_grid):
        """Right is pushed last, so DFS runs along row 0 first."""
        assert dfs(open_grid).explored[:5] == ((0, 0), (0, 1), (0, 2), (0, 3), (0, 4))


class TestDetour:
    def test_optimal_algorithms_go_around_the_wall(self, detour_grid):
        for fn in (bfs, dijkstra, astar):
            result = fn(detour_grid)
            assert result.path_length == 13
            assert_valid_path(result, detour_grid)


class TestUnreachable:
    """Target sealed off by walls."""

    @pytest.mark.parametrize("fn", [bfs, dfs, dijkstra, astar])
    def test_empty_path_and_full_component_explored(self, fn, blocked_grid):
        result = fn(blocked_grid)
        assert not result.found
        assert result.path == ()
        # every reachable cell: 25 - 2 walls - end
        assert result.explored_count == 22
        assert blocked_grid.end not in result.explored


class TestRandomGrids:
    """Properties that hold on any grid."""

    @pytest.mark.parametrize("seed", range(40))
    def test_bfs_is_shortest_and_dijkstra_matches_astar(self, seed):
        cfg = generate_grid(15, 0.3, rng=random.Random(seed))
        results = run_pathfinding(cfg)
        assert list(results) == ["dijkstra", "astar", "bfs", "dfs"]

        found = {key: r for key, r in results.items() if r.found}
        # reachability does not depend on the algorithm
        assert len(found) in (0, 4)
        for key, r in found.items():
            assert_valid_path(r, cfg)
            assert results["bfs"].path_length <= r.path_length
        if found:
            assert results["dijkstra"].path_length == results["astar"].path_length
            assert results["dijkstra"].path_length == results["bfs"].path_length

    def test_deterministic(self):
        cfg = generate_grid(20, 0.25, rng=random.Random(99))
        assert run_pathfinding(cfg) == run_pathfinding(cfg)

    def test_result_to_dict(self):
        cfg = GridConfig(rows=2, cols=2, start=(0, 0), end=(0, 1))
        data = bfs(cfg).to_dict()
        assert data == {"explored": [[0, 0], [1, 0], [0, 1]], "path": [[0, 0], [0, 1]]}
