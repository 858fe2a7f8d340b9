import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from busca_incremental import DStarLite, a_star, build_corridor_example, build_grid_graph, dijkstra
from busca_incremental.graph_operations import GraphOperations
from busca_incremental.metrics import measure_replanning, measure_search_ms
from busca_incremental.scenarios import apply_event_scenario


def test_replanning_stats_after_blockage():
    G = build_grid_graph(10, 6, diagonal=True)
    ds = DStarLite(G, (0, 3), (9, 3))
    plan = ds.planned_path()
    blocked = [(plan[4], plan[5]), (plan[5], plan[4])]

    stats = measure_replanning(ds, apply_event_scenario(G, blocked))

    assert stats.latency_ms >= 0.0
    assert stats.expansions > 0
    _, expected = dijkstra(G, (0, 3), (9, 3))
    assert stats.g_start == pytest.approx(expected)


def test_replanning_without_changes_expands_nothing():
    G = build_corridor_example()
    ds = DStarLite(G, "A", "D")
    stats = measure_replanning(ds, [])
    assert stats.expansions == 0
    assert stats.g_start == 3.0


def test_search_timing_returns_last_result():
    G = build_grid_graph(6, 6)
    ms, path, cost = measure_search_ms(lambda: a_star(G, (0, 0), (5, 5)), repetitions=3)
    assert ms >= 0.0
    assert path[0] == (0, 0) and path[-1] == (5, 5)
    assert cost == pytest.approx(10.0)
    with pytest.raises(ValueError):
        measure_search_ms(lambda: a_star(G, (0, 0), (5, 5)), repetitions=0)


def test_path_cost_sums_edges():
    G = build_corridor_example()
    assert GraphOperations.path_cost(G.cost, ["A", "B", "C", "D"]) == 3.0
    assert GraphOperations.path_cost(G.cost, ["A"]) == 0.0
    assert GraphOperations.path_cost(G.cost, ["A", "C"]) == float("inf")
