"""Graph primitives and helpers.

This package provides the strict weighted graph type `WeightedGraph` and
helpers for conversion to and from NetworkX graphs (`convert`).
"""

from graphwalk.graph.weighted_graph import WEIGHT_ATTR, NodeID, WeightedGraph

__all__ = ["WEIGHT_ATTR", "NodeID", "WeightedGraph"]
