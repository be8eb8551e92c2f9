"""Conversion utilities between WeightedGraph and NetworkX graphs.

`from_networkx` accepts any NetworkX graph. Multigraph parallel edges are
collapsed with last-write-wins, matching `WeightedGraph.add_edge`.
"""

from typing import Any, Union

import networkx as nx

from graphwalk.graph.weighted_graph import WEIGHT_ATTR, WeightedGraph


def from_networkx(
    nx_graph: nx.Graph,
    weight: str = WEIGHT_ATTR,
    default_weight: Any = 1,
) -> WeightedGraph:
    """Build a WeightedGraph from a NetworkX graph.

    Undirected inputs produce an undirected WeightedGraph. Node attributes
    are copied; of the edge attributes only the weight is kept.

    Args:
        nx_graph: Source NetworkX graph (Graph, DiGraph or a multigraph).
        weight: Edge attribute to read the weight from.
        default_weight: Weight used when an edge lacks the attribute.

    Returns:
        A new WeightedGraph with the same nodes and edges.
    """
    graph = WeightedGraph(directed=nx_graph.is_directed())
    graph.add_graph(nx_graph, weight, default_weight)
    return graph


def to_networkx(graph: WeightedGraph) -> Union[nx.DiGraph, nx.Graph]:
    """Convert a WeightedGraph to a plain NetworkX graph.

    Directed graphs become `nx.DiGraph`; undirected ones become `nx.Graph`,
    one edge per mirrored pair. The weight is stored under ``"weight"``.

    Args:
        graph: The WeightedGraph to convert.

    Returns:
        A NetworkX graph carrying node attributes and edge weights.
    """
    nx_graph: Union[nx.DiGraph, nx.Graph] = nx.DiGraph() if graph.directed else nx.Graph()
    nx_graph.add_nodes_from(graph.nodes(data=True))
    for u in graph:
        for v, w in graph.weighted_successors(u):
            nx_graph.add_edge(u, v, **{WEIGHT_ATTR: w})
    return nx_graph
