"""Tests for race playback, winners and rankings."""

import pytest

from algorithms import PATHFINDING_REGISTRY, PathfindingResult
from engine import (
    PathfindingRace,
    PathfindingWinners,
    RaceInProgressError,
    RaceState,
    SortingRace,
    pathfinding_winners,
)


def fake_result(explored, path):
    """PathfindingResult with `explored` / `path` cells (contents irrelevant)."""
    return PathfindingResult(
        explored=tuple((0, i) for i in range(explored)),
        path=tuple((1, i) for i in range(path)),
    )


def run_to_end(race, start=1.0, step=1.0, limit=100000):
    """Tick at start, start+step, ... until the race stops.  Returns tick count."""
    now = start
    ticks = 0
    while ticks < limit:
        ticks += 1
        if not race.tick(now):
            return ticks
        now += step
    raise AssertionError("race never completed")


class TestPathfindingWinners:
    def test_fewest_explored_and_all_shortest(self):
        results = {
            "dijkstra": fake_result(10, 5),
            "astar":    fake_result(6, 5),
            "bfs":      fake_result(8, 5),
            "dfs":      fake_result(3, 7),
        }
        winners = pathfinding_winners(results)
        assert winners.fastest == "dfs"
        assert winners.fastest_explored == 3
        assert winners.shortest == ("dijkstra", "astar", "bfs")
        assert winners.shortest_length == 5

    def test_fastest_tie_goes_to_earlier_registry_entry(self):
        results = {
            "dijkstra": fake_result(10, 5),
            "astar":    fake_result(6, 5),
            "bfs":      fake_result(6, 5),
            "dfs":      fake_result(2, 0),
        }
        winners = pathfinding_winners(results)
        # dfs found nothing, so it cannot win despite exploring least
        assert winners.fastest == "astar"

    def test_nothing_found(self):
        results = {key: fake_result(4, 0) for key in PATHFINDING_REGISTRY}
        winners = pathfinding_winners(results)
        assert winners == PathfindingWinners()
        assert winners.to_dict() == {
            "fastest": None, "fastest_explored": 0, "shortest": [], "shortest_length": 0,
        }


class TestPathfindingRace:
    def test_lifecycle_on_open_grid(self, open_grid):
        race = PathfindingRace()
        assert race.state is RaceState.IDLE
        assert race.winners() is None

        race.start(open_grid, now=0.0)
        assert race.is_running
        assert list(race.traces) == list(PATHFINDING_REGISTRY)
        assert race.winners() is None

        expected_ticks = max(len(r.explored) + len(r.path) for r in race.traces.values())
        assert run_to_end(race) == expected_ticks
        assert race.is_complete

        winners = race.winners()
        counts = {k: r.explored_count for k, r in race.traces.items()}
        assert winners.fastest_explored == min(counts.values())
        assert winners.fastest == next(k for k in PATHFINDING_REGISTRY if counts[k] == min(counts.values()))
        # DFS reaches the target too, but along a longer path
        assert winners.shortest == ("dijkstra", "astar", "bfs")
        assert winners.shortest_length == 9

    def test_explored_before_path(self, open_grid):
        race = PathfindingRace()
        race.start(open_grid)
        explored = len(race.traces["bfs"].explored)
        for t in range(explored):
            race.tick(float(t))
        assert race.explored_up_to["bfs"] == explored
        assert race.path_up_to["bfs"] == 0
        race.tick(float(explored))
        assert race.path_up_to["bfs"] == 1

    def test_unreachable_race_completes_without_winner(self, blocked_grid):
        race = PathfindingRace()
        race.start(blocked_grid)
        run_to_end(race)
        assert race.winners() == PathfindingWinners()

    def test_start_while_running_is_rejected(self, open_grid):
        race = PathfindingRace()
        race.start(open_grid)
        traces = race.traces
        with pytest.raises(RaceInProgressError):
            race.start(open_grid)
        assert race.traces is traces

    def test_restart_after_complete(self, open_grid):
        race = PathfindingRace()
        race.start(open_grid)
        run_to_end(race)
        race.start(open_grid)
        assert race.is_running
        assert all(v == 0 for v in race.explored_up_to.values())

    def test_tick_outside_running_is_noop(self, open_grid):
        race = PathfindingRace()
        assert race.tick(1.0) is False
        assert race.state is RaceState.IDLE

        race.start(open_grid)
        run_to_end(race)
        cursors = dict(race.explored_up_to)
        assert race.tick(99.0) is False
        assert race.explored_up_to == cursors

    def test_reset(self, open_grid):
        race = PathfindingRace()
        race.start(open_grid)
        race.tick(1.0)
        race.reset()
        assert race.state is RaceState.IDLE
        assert race.traces == {}
        assert race.instance is None
        assert race.explored_up_to == {key: 0 for key in PATHFINDING_REGISTRY}

    def test_snapshot(self, open_grid):
        race = PathfindingRace()
        race.start(open_grid)
        race.tick(1.0)
        snap = race.snapshot()
        assert snap["family"] == "pathfinding"
        assert snap["state"] == "running"
        assert snap["cursors"]["bfs"] == {"explored_up_to": 1, "path_up_to": 0}


class TestSortingRace:
    def test_finish_times_latch_once(self):
        race = SortingRace()
        race.start([4, 3, 2, 1], now=10.0)
        lengths = {key: len(steps) for key, steps in race.traces.items()}

        run_to_end(race, start=11.0, step=1.0)
        assert race.is_complete
        for key, n in lengths.items():
            # tick k happens at 10 + k; the last index n - 1 is reached on tick n - 1
            assert race.finish_times[key] == pytest.approx(n - 1)
            assert race.step_index[key] == n - 1

        before = dict(race.finish_times)
        race.tick(500.0)
        assert race.finish_times == before

    def test_rankings_fastest_first_ties_in_registry_order(self):
        race = SortingRace()
        race.start([2, 1], now=0.0)
        run_to_end(race)
        rankings = race.rankings()

        assert [key for key, _ in rankings] == sorted(
            race.traces, key=lambda k: (len(race.traces[k]), list(race.traces).index(k))
        )
        times = [t for _, t in rankings]
        assert times == sorted(times)

    def test_single_step_traces_finish_on_first_tick(self):
        race = SortingRace()
        race.start([7], now=0.0)
        assert race.tick(0.5) is False
        assert race.is_complete
        assert all(t == 0.5 for t in race.finish_times.values())
        assert [k for k, _ in race.rankings()] == ["bubble", "selection", "quick", "merge"]

    def test_rankings_only_list_finished(self):
        race = SortingRace()
        race.start([5, 4, 3, 2, 1], now=0.0)
        shortest = min(len(s) for s in race.traces.values())
        for t in range(1, shortest):
            race.tick(float(t))
        finished = [key for key, _ in race.rankings()]
        assert finished
        assert all(len(race.traces[k]) == shortest for k in finished)

    def test_current_step_and_cursors(self):
        race = SortingRace()
        race.start([5, 4, 3, 2, 1])
        assert race.current_step("bubble") == race.traces["bubble"][0]
        race.tick(1.0)
        assert race.current_step("bubble") == race.traces["bubble"][1]
        cursor = race.snapshot()["cursors"]["bubble"]
        assert cursor["step_index"] == 1
        assert cursor["total_steps"] == len(race.traces["bubble"])
        assert cursor["finish_time"] is None

    def test_input_not_mutated(self):
        array = [3, 1, 2]
        race = SortingRace()
        race.start(array)
        run_to_end(race)
        assert array == [3, 1, 2]
