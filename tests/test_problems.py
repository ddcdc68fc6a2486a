"""Tests for the grid and array generators."""

import random

import pytest

from problems import MAX_VALUE, MIN_VALUE, GridConfig, generate_array, generate_grid


class TestGridConfig:
    """Construction-time validation and serialisation."""

    def test_accepts_lists_and_normalises(self):
        """Cells given as lists are stored as tuples, walls as a frozenset."""
        cfg = GridConfig(rows=3, cols=3, start=[0, 0], end=[2, 2], walls=[[1, 1]])
        assert cfg.start == (0, 0)
        assert cfg.end == (2, 2)
        assert cfg.walls == frozenset({(1, 1)})

    @pytest.mark.parametrize(
        "kwargs",
        [
            dict(rows=0, cols=3, start=(0, 0), end=(0, 1)),
            dict(rows=3, cols=3, start=(0, 0), end=(3, 3)),
            dict(rows=3, cols=3, start=(1, 1), end=(1, 1)),
            dict(rows=3, cols=3, start=(0, 0), end=(2, 2), walls={(0, 0)}),
            dict(rows=3, cols=3, start=(0, 0), end=(2, 2), walls={(2, 2)}),
        ],
    )
    def test_rejects_broken_invariants(self, kwargs):
        """Out-of-bounds, coinciding or walled endpoints are ValueErrors."""
        with pytest.raises(ValueError):
            GridConfig(**kwargs)

    def test_walkability(self, blocked_grid):
        assert blocked_grid.is_walkable((0, 0))
        assert not blocked_grid.is_walkable((3, 4))
        assert not blocked_grid.is_walkable((-1, 0))
        assert not blocked_grid.is_walkable((0, 5))

    def test_dict_round_trip(self, blocked_grid):
        data = blocked_grid.to_dict()
        assert data["walls"] == [[3, 4], [4, 3]]
        assert GridConfig.from_dict(data) == blocked_grid


class TestGenerateGrid:
    """Random grid generation."""

    @pytest.mark.parametrize("seed", range(20))
    @pytest.mark.parametrize("size", [2, 5, 15, 25])
    def test_start_and_end_are_valid(self, seed, size):
        """start != end, both in bounds and never walls, even at p = 0.5."""
        cfg = generate_grid(size, 0.5, rng=random.Random(seed))
        assert cfg.rows == cfg.cols == size
        assert cfg.start != cfg.end
        assert cfg.start not in cfg.walls
        assert cfg.end not in cfg.walls
        assert cfg.in_bounds(cfg.start) and cfg.in_bounds(cfg.end)

    def test_endpoints_in_opposite_quadrants(self, rng):
        for _ in range(20):
            cfg = generate_grid(10, 0.3, rng=rng)
            assert cfg.start[0] < 5 and cfg.start[1] < 5
            assert cfg.end[0] >= 5 and cfg.end[1] >= 5

    def test_no_walls_at_zero_probability(self, rng):
        assert generate_grid(15, 0.0, rng=rng).walls == frozenset()

    def test_full_walls_falls_back_to_corners(self, rng):
        """With every cell walled the corners are used and cleared."""
        cfg = generate_grid(6, 1.0, rng=rng)
        assert cfg.start == (0, 0)
        assert cfg.end == (5, 5)
        assert len(cfg.walls) == 36 - 2

    def test_same_seed_same_grid(self):
        a = generate_grid(12, 0.25, rng=random.Random(7))
        b = generate_grid(12, 0.25, rng=random.Random(7))
        assert a == b

    @pytest.mark.parametrize("size, p", [(1, 0.2), (0, 0.2), (5, -0.1), (5, 1.5)])
    def test_rejects_bad_arguments(self, size, p):
        with pytest.raises(ValueError):
            generate_grid(size, p)


class TestGenerateArray:
    """Random array generation."""

    @pytest.mark.parametrize("size", [1, 10, 30, 100])
    def test_size_and_range(self, size, rng):
        values = generate_array(size, rng=rng)
        assert len(values) == size
        assert all(MIN_VALUE <= v <= MAX_VALUE for v in values)

    def test_value_bounds(self):
        assert (MIN_VALUE, MAX_VALUE) == (5, 100)

    def test_same_seed_same_array(self):
        assert generate_array(30, rng=random.Random(3)) == generate_array(30, rng=random.Random(3))

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            generate_array(0)
