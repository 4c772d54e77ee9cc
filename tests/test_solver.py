import json
from io import StringIO

import networkx as nx
import pytest

from crossroads.exceptions import ConfigError
from crossroads.generator import random_road_network, shuffled_roads
from crossroads.graph import RoadNetwork
from crossroads.logger import StdLogger
from crossroads.solver import (
    CONVERGE,
    LEGACY_UNREACHABLE,
    FordBellmanSolver,
    SolverConfig,
    crossings,
    shortest_hops,
)


def test_no_roads_means_unreachable():
    g = RoadNetwork(3)
    assert shortest_hops(g) is None
    assert shortest_hops(g, 1, 3) is None
    assert crossings(shortest_hops(g)) is None


def test_single_road():
    g = RoadNetwork.from_edges(2, [(1, 2)])
    assert shortest_hops(g) == 1
    assert crossings(shortest_hops(g)) == 2


def test_two_roads_to_third_crossroad():
    g = RoadNetwork.from_edges(3, [(1, 2), (2, 3)])
    assert shortest_hops(g, 1, 3) == 2
    assert crossings(shortest_hops(g, 1, 3)) == 3


def test_source_to_itself():
    g = RoadNetwork.from_edges(2, [(1, 2)])
    assert shortest_hops(g, 1, 1) == 0
    assert crossings(0) == 1


def test_reversed_direction_on_one_road():
    g = RoadNetwork.from_edges(2, [(1, 2)])
    assert shortest_hops(g, 2, 1) == 1


def test_chain_forward_matches_trace(chain):
    solver = FordBellmanSolver(chain, 1)
    res = solver.solve()
    assert res.distances == [None, 0, 1, 2, 3]
    assert res.predecessors == [None, None, 1, 2, 3]
    assert solver.summary() == {"sweeps": 1, "pairs_scanned": 6, "relaxations": 3}


def test_chain_backward_is_missed_by_one_sweep(chain):
    # sweeping 1..4 from source 4 only reaches 3 before the loop ends
    res = FordBellmanSolver(chain, 4).solve()
    assert res.distances == [None, None, None, 1, 0]
    assert res.hops(1) is None


def test_chain_backward_converges(chain):
    solver = FordBellmanSolver(chain, 4, config=SolverConfig(mode=CONVERGE))
    res = solver.solve()
    assert res.distances == [None, 3, 2, 1, 0]
    assert res.sweeps == 4
    assert solver.path(1) == [4, 3, 2, 1]


def test_converge_with_one_sweep_equals_single_pass(chain):
    one = FordBellmanSolver(chain, 4, config=SolverConfig(mode=CONVERGE, max_sweeps=1)).solve()
    single = FordBellmanSolver(chain, 4).solve()
    assert one.distances == single.distances


def test_converge_with_zero_sweeps_only_knows_source(chain):
    res = FordBellmanSolver(chain, 2, config=SolverConfig(mode=CONVERGE, max_sweeps=0)).solve()
    assert res.distances == [None, None, 0, None, None]
    assert res.sweeps == 0


def test_shortcut_through_higher_crossroad():
    g = RoadNetwork.from_edges(4, [(1, 3), (3, 4), (4, 2)])
    solver = FordBellmanSolver(g, 1)
    assert solver.distance(2) == 3
    assert solver.path(2) == [1, 3, 4, 2]


@pytest.mark.parametrize("source", [0, 5, 100])
def test_out_of_range_source_reaches_nothing(chain, source):
    res = FordBellmanSolver(chain, source).solve()
    assert all(d is None for d in res.distances)
    assert FordBellmanSolver(chain, source).path(1) == []


@pytest.mark.parametrize("target", [0, 5, -1])
def test_out_of_range_target_is_unreachable(chain, target):
    assert shortest_hops(chain, 1, target) is None


def test_path_to_unreached_crossroad_is_empty(chain):
    assert FordBellmanSolver(chain, 4).path(1) == []


def test_solve_is_cached(chain):
    solver = FordBellmanSolver(chain, 1)
    assert solver.solve() is solver.solve()
    assert solver.summary()["sweeps"] == 1


def test_invalid_config(chain):
    with pytest.raises(ConfigError):
        FordBellmanSolver(chain, 1, config=SolverConfig(mode="dijkstra"))
    with pytest.raises(ConfigError):
        FordBellmanSolver(chain, 1, config=SolverConfig(mode=CONVERGE, max_sweeps=-1))


def test_legacy_unreachable_value():
    assert LEGACY_UNREACHABLE == 4294967295


@pytest.mark.parametrize("seed", range(5))
def test_converge_matches_networkx(seed):
    g = random_road_network(15, 22, seed=seed, ensure_connected=True)
    expected = nx.single_source_shortest_path_length(g.to_networkx(), 5)
    solver = FordBellmanSolver(g, 5, config=SolverConfig(mode=CONVERGE))
    for target in range(1, g.n + 1):
        assert solver.distance(target) == expected[target]
        assert len(solver.path(target)) - 1 == expected[target]


@pytest.mark.parametrize("seed", range(5))
def test_single_pass_never_undercuts_true_distance(seed):
    base = random_road_network(15, 22, seed=seed, ensure_connected=True)
    g = RoadNetwork.from_edges(base.n, shuffled_roads(base, seed=seed))
    expected = nx.single_source_shortest_path_length(g.to_networkx(), 8)
    res = FordBellmanSolver(g, 8).solve()
    for target in range(1, g.n + 1):
        hops = res.hops(target)
        if hops is not None:
            assert hops >= expected[target]
            path = FordBellmanSolver(g, 8).path(target)
            assert path[0] == 8 and path[-1] == target
            assert len(path) - 1 <= hops


def test_solver_logs_sweeps_and_summary(chain):
    stream = StringIO()
    logger = StdLogger(level="debug", json_fmt=True, stream=stream)
    FordBellmanSolver(chain, 1, logger=logger).solve()
    events = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert [e["event"] for e in events] == ["sweep", "solved"]
    assert events[0]["relaxed"] == 3
    assert events[1]["reached"] == 4
    assert events[1]["mode"] == "single-pass"


def test_solver_logs_out_of_range_source(chain):
    stream = StringIO()
    FordBellmanSolver(chain, 9, logger=StdLogger(level="debug", stream=stream))
    assert stream.getvalue().startswith("debug source_out_of_range mode=single-pass source=9 n=4")
