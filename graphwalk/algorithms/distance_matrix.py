"""Pairwise distances restricted to a set of points of interest (POIs).

Two regimes produce the same table:

- DENSE: one Floyd-Warshall run over the whole graph, filtered to POI pairs.
  Pays ``O(|V|^3)`` once; wins when there are many POIs.
- SPARSE: one full Dijkstra per POI, keeping POI targets only. Pays
  ``O(k (E + V log V))``; wins when POIs are few.

``MatrixStrategy.AUTO`` asks `SearchConfig.prefers_dense` which to use.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from graphwalk.algorithms.base import (
    NUMERIC,
    MatrixStrategy,
    NodeID,
    WeightAlgebra,
    WeightedSuccessors,
)
from graphwalk.algorithms.dijkstra import single_source_distances
from graphwalk.algorithms.floyd_warshall import DistanceTable, floyd_warshall
from graphwalk.config import SEARCH_CONFIG, SearchConfig
from graphwalk.logging import get_logger

_logger = get_logger(__name__)


def _dense(
    graph: WeightedSuccessors, pois: List[NodeID], algebra: WeightAlgebra
) -> DistanceTable:
    table = floyd_warshall(graph, algebra)
    return {(s, t): table[(s, t)] for s in pois for t in pois if (s, t) in table}


def _sparse(
    graph: WeightedSuccessors, pois: List[NodeID], algebra: WeightAlgebra
) -> DistanceTable:
    result: DistanceTable = {}
    for s in pois:
        distances = single_source_distances(graph, s, algebra)
        for t in pois:
            if t in distances:
                result[(s, t)] = distances[t]
    return result


def distance_matrix(
    graph: WeightedSuccessors,
    points_of_interest: Iterable[NodeID],
    algebra: WeightAlgebra = NUMERIC,
    strategy: MatrixStrategy = MatrixStrategy.AUTO,
    config: Optional[SearchConfig] = None,
) -> DistanceTable:
    """Shortest distances between every ordered pair of POIs.

    Weights must be non-negative for the SPARSE regime to be exact; the
    DENSE regime additionally accepts negative edges.

    Args:
        graph: Graph exposing ``weighted_successors`` and node iteration.
        points_of_interest: Nodes of interest. Duplicates and nodes absent
            from the graph are ignored.
        algebra: Weight algebra.
        strategy: Force DENSE or SPARSE, or let AUTO choose by density.
        config: Strategy-selection settings; defaults to ``SEARCH_CONFIG``.

    Returns:
        Mapping ``(source, target) -> distance`` for reachable POI pairs,
        including ``(p, p) -> zero``.

    Raises:
        NegativeCycleError: In the DENSE regime, if the graph has a negative cycle.
    """
    pois = list(dict.fromkeys(p for p in points_of_interest if p in graph))
    if strategy == MatrixStrategy.AUTO:
        cfg = config or SEARCH_CONFIG
        num_nodes = sum(1 for _ in graph)
        strategy = (
            MatrixStrategy.DENSE
            if cfg.prefers_dense(len(pois), num_nodes)
            else MatrixStrategy.SPARSE
        )

    _logger.debug("Distance matrix over %d POIs using %s regime", len(pois), strategy.name)
    if strategy == MatrixStrategy.DENSE:
        return _dense(graph, pois, algebra)
    if strategy == MatrixStrategy.SPARSE:
        return _sparse(graph, pois, algebra)
    raise ValueError(f"Unsupported matrix strategy: {strategy!r}")
