"""graphwalk: generic graph traversal and shortest-path search.

graphwalk walks explicit graphs and on-demand state spaces with the same
engines, generic over an injected weight algebra instead of a numeric type.

Primary API:
    walk(), walk_until(), fold_walk() - BFS/DFS over a graph
    implicit_fold(), implicit_fold_by() - BFS/DFS over a successor function
    shortest_path(), a_star(), bellman_ford() - single-pair shortest paths
    implicit_dijkstra(), implicit_a_star(), implicit_bellman_ford() - goal search
    floyd_warshall(), distance_matrix() - all-pairs distances
    WeightedGraph - strict weighted graph container (NetworkX-based)

Example:
    from graphwalk import WeightedGraph, shortest_path

    g = WeightedGraph()
    for n in (1, 2, 3):
        g.add_node(n)
    g.add_edge(1, 2, 1)
    g.add_edge(2, 3, 2)
    g.add_edge(1, 3, 4)

    shortest_path(g, 1, 3)  # Path([1, 2, 3], total_weight=3)
"""

from __future__ import annotations

from graphwalk import logging
from graphwalk._version import __version__
from graphwalk.algorithms.base import (
    FLOAT,
    NUMERIC,
    MatrixStrategy,
    WalkControl,
    WalkOrder,
    WeightAlgebra,
)
from graphwalk.path import Path
from graphwalk.algorithms.types import (
    BellmanFordResult,
    GoalSearchResult,
    GoalStatus,
    NegativeCycleError,
    PathStatus,
    WalkMetadata,
)
from graphwalk.algorithms.traversal import (
    fold_walk,
    implicit_fold,
    implicit_fold_by,
    walk,
    walk_until,
)
from graphwalk.algorithms.dijkstra import (
    implicit_dijkstra,
    implicit_dijkstra_by,
    shortest_path,
    single_source_distances,
)
from graphwalk.algorithms.astar import a_star, implicit_a_star, implicit_a_star_by
from graphwalk.algorithms.bellman_ford import (
    bellman_ford,
    implicit_bellman_ford,
    implicit_bellman_ford_by,
)
from graphwalk.algorithms.floyd_warshall import floyd_warshall, has_negative_cycle
from graphwalk.algorithms.distance_matrix import distance_matrix
from graphwalk.config import SEARCH_CONFIG, SearchConfig
from graphwalk.graph import WeightedGraph
from graphwalk.graph.convert import from_networkx, to_networkx

__all__ = [
    # Version
    "__version__",
    # Weights and enums
    "WeightAlgebra",
    "NUMERIC",
    "FLOAT",
    "WalkOrder",
    "WalkControl",
    "MatrixStrategy",
    # Results
    "Path",
    "WalkMetadata",
    "PathStatus",
    "GoalStatus",
    "BellmanFordResult",
    "GoalSearchResult",
    "NegativeCycleError",
    # Traversal
    "walk",
    "walk_until",
    "fold_walk",
    "implicit_fold",
    "implicit_fold_by",
    # Shortest paths
    "shortest_path",
    "single_source_distances",
    "implicit_dijkstra",
    "implicit_dijkstra_by",
    "a_star",
    "implicit_a_star",
    "implicit_a_star_by",
    "bellman_ford",
    "implicit_bellman_ford",
    "implicit_bellman_ford_by",
    "floyd_warshall",
    "has_negative_cycle",
    "distance_matrix",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Graph container
    "WeightedGraph",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
