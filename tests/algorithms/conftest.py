"""Shared graph fixtures for the algorithm tests."""

import pytest

from graphwalk.graph import WeightedGraph


def build_graph(nodes, edges, directed=True):
    g = WeightedGraph(directed=directed)
    for node in nodes:
        g.add_node(node)
    for u, v, w in edges:
        g.add_edge(u, v, w)
    return g


@pytest.fixture
def line1():
    # Weights:
    #     [1]     [2]
    #  1──────►2──────►3
    #  │               ▲
    #  └───────────────┘
    #         [1]
    return build_graph([1, 2, 3], [(1, 2, 1), (2, 3, 2), (1, 3, 1)])


@pytest.fixture
def square1():
    # Weights:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►D─────────┘
    return build_graph(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("B", "C", 1), ("A", "D", 2), ("D", "C", 2)],
    )


@pytest.fixture
def square2():
    # Two equal-cost routes A->B->C and A->D->C
    return build_graph(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("B", "C", 1), ("A", "D", 1), ("D", "C", 1)],
    )


@pytest.fixture
def tree1():
    #        A
    #      /   \
    #     B     C
    #    / \     \
    #   D   E     F
    return build_graph(
        ["A", "B", "C", "D", "E", "F"],
        [
            ("A", "B", 1),
            ("A", "C", 1),
            ("B", "D", 1),
            ("B", "E", 1),
            ("C", "F", 1),
        ],
    )


@pytest.fixture
def graph1():
    # Mixed weights with a cheaper detour A->E->C and a long direct A->D
    return build_graph(
        ["A", "B", "C", "D", "E", "F"],
        [
            ("A", "B", 1),
            ("B", "C", 1),
            ("C", "D", 2),
            ("A", "E", 1),
            ("E", "C", 1),
            ("A", "D", 4),
            ("C", "F", 1),
            ("F", "D", 1),
        ],
    )


@pytest.fixture
def negative_line():
    #     [10]     [-5]
    #  1───────►2───────►3
    return build_graph([1, 2, 3], [(1, 2, 10), (2, 3, -5)])


@pytest.fixture
def negative_cycle():
    #  1 ─[1]─► 2 ─[1]─► 3
    #  ▲                 │
    #  └──────[-5]───────┘
    return build_graph([1, 2, 3], [(1, 2, 1), (2, 3, 1), (3, 1, -5)])


@pytest.fixture
def detached_negative_cycle():
    # S -> T is fine; X <-> Y is a negative cycle unreachable from S.
    # Y -> T makes the cycle reach T, but not the other way round.
    return build_graph(
        ["S", "T", "X", "Y"],
        [("S", "T", 3), ("X", "Y", -2), ("Y", "X", 1), ("Y", "T", 1)],
    )


@pytest.fixture
def undirected1():
    #   A ──[4]── B
    #   │         │
    #  [1]       [1]
    #   │         │
    #   C ──[1]── D
    return build_graph(
        ["A", "B", "C", "D"],
        [("A", "B", 4), ("A", "C", 1), ("C", "D", 1), ("D", "B", 1)],
        directed=False,
    )


@pytest.fixture
def make_graph():
    """Factory fixture: ``make_graph(nodes, edges, directed=True)``."""
    return build_graph
