"""Floyd-Warshall all-pairs shortest paths.

Distances live in a dict of dicts holding only reachable pairs, so sparse
graphs do not pay for a full ``|V| x |V|`` table of infinities and the
weight type never needs an "infinity" value.
"""

from __future__ import annotations

from typing import Dict, Tuple

from graphwalk.algorithms.base import NUMERIC, NodeID, Weight, WeightAlgebra, WeightedSuccessors
from graphwalk.algorithms.types import NegativeCycleError
from graphwalk.logging import get_logger

_logger = get_logger(__name__)

#: All-pairs table keyed by ``(source, target)``; unreachable pairs are absent.
DistanceTable = Dict[Tuple[NodeID, NodeID], Weight]


def floyd_warshall(
    graph: WeightedSuccessors,
    algebra: WeightAlgebra = NUMERIC,
) -> DistanceTable:
    """Compute shortest distances between every ordered pair of nodes.

    Every node is at ``zero`` from itself. A positive self-loop never changes
    that; a negative one is a negative cycle.

    Args:
        graph: Graph exposing ``weighted_successors`` and node iteration.
        algebra: Weight algebra; negative weights are allowed.

    Returns:
        Mapping ``(source, target) -> distance`` for every reachable pair,
        including ``(n, n) -> zero`` for every node.

    Raises:
        NegativeCycleError: If any node ends up lighter than ``zero`` from
            itself, i.e. the graph holds a negative cycle anywhere.
    """
    add, zero = algebra.add, algebra.zero
    nodes = list(graph)

    dist: Dict[NodeID, Dict[NodeID, Weight]] = {}
    for u in nodes:
        row = {u: zero}
        for v, w in graph.weighted_successors(u):
            if v == u:
                if algebra.is_negative(w):
                    row[u] = w
                continue
            row[v] = w
        dist[u] = row

    for k in nodes:
        row_k = list(dist[k].items())
        for i in nodes:
            row_i = dist[i]
            if k not in row_i:
                continue
            d_ik = row_i[k]
            for j, d_kj in row_k:
                candidate = add(d_ik, d_kj)
                if j not in row_i or algebra.less(candidate, row_i[j]):
                    row_i[j] = candidate

    for n in nodes:
        if algebra.is_negative(dist[n][n]):
            _logger.debug("Floyd-Warshall found a negative cycle through %r", n)
            raise NegativeCycleError(n)

    return {(i, j): d for i in nodes for j, d in dist[i].items()}


def has_negative_cycle(
    graph: WeightedSuccessors,
    algebra: WeightAlgebra = NUMERIC,
) -> bool:
    """Return True if the graph contains a negative cycle anywhere."""
    try:
        floyd_warshall(graph, algebra)
    except NegativeCycleError:
        return True
    return False
