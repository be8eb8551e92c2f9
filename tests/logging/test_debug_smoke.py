"""Algorithms log search summaries at DEBUG and stay quiet otherwise."""

import logging

import pytest

from graphwalk.algorithms.bellman_ford import bellman_ford
from graphwalk.algorithms.dijkstra import shortest_path
from graphwalk.algorithms.distance_matrix import distance_matrix
from graphwalk.algorithms.floyd_warshall import floyd_warshall
from graphwalk.algorithms.types import NegativeCycleError, PathStatus
from graphwalk.graph import WeightedGraph


def _cycle() -> WeightedGraph:
    g = WeightedGraph()
    for n in (1, 2, 3):
        g.add_node(n)
    g.add_edge(1, 2, 1)
    g.add_edge(2, 3, 1)
    g.add_edge(3, 1, -5)
    return g


def test_search_summary_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="graphwalk")
    shortest_path(_cycle(), 1, 3)
    messages = [r.getMessage() for r in caplog.records if r.name.startswith("graphwalk")]
    assert any("Best-first search settled" in m for m in messages)
    assert all(r.levelno == logging.DEBUG for r in caplog.records)


def test_negative_cycle_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="graphwalk")
    assert bellman_ford(_cycle(), 1, 2).status == PathStatus.NEGATIVE_CYCLE
    with pytest.raises(NegativeCycleError):
        floyd_warshall(_cycle())
    messages = " ".join(r.getMessage() for r in caplog.records)
    assert "Negative cycle reachable from 1" in messages
    assert "Floyd-Warshall found a negative cycle" in messages


def test_matrix_regime_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="graphwalk")
    g = WeightedGraph()
    for n in "ab":
        g.add_node(n)
    g.add_edge("a", "b", 2)
    distance_matrix(g, ["a", "b"])
    assert any("DENSE regime" in r.getMessage() for r in caplog.records)


def test_nothing_logged_at_info(caplog):
    caplog.set_level(logging.INFO, logger="graphwalk")
    shortest_path(_cycle(), 1, 3)
    assert not [r for r in caplog.records if r.name.startswith("graphwalk")]
