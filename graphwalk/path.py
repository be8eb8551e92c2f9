"""Lightweight representation of a single weighted path.

The ``Path`` dataclass stores an ordered node sequence and the total weight
obtained by folding the edge weights with the algebra's ``add`` from
``zero``. Helpers expose the edge sequence and sub-path extraction with
weight recalculation.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, Iterator, Tuple

from graphwalk.algorithms.base import NUMERIC, NodeID, Weight, WeightAlgebra

if TYPE_CHECKING:
    from graphwalk.graph import WeightedGraph


@dataclass(frozen=True)
class Path:
    """A path from ``nodes[0]`` to ``nodes[-1]``.

    Equality compares both the node sequence and the weight, so two searches
    agree only if they pick the same route.

    Attributes:
        nodes: Node ids in order; consecutive ids are joined by an edge.
        total_weight: Sum of the edge weights under the algebra used.
    """

    nodes: Tuple[NodeID, ...]
    total_weight: Weight

    def __post_init__(self) -> None:
        if not isinstance(self.nodes, tuple):
            object.__setattr__(self, "nodes", tuple(self.nodes))
        if not self.nodes:
            raise ValueError("A path needs at least one node.")

    def __getitem__(self, idx: int) -> NodeID:
        return self.nodes[idx]

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self.nodes)

    def __len__(self) -> int:
        """Return the number of nodes in the path."""
        return len(self.nodes)

    @property
    def src_node(self) -> NodeID:
        """Return the first node in the path (the source node)."""
        return self.nodes[0]

    @property
    def dst_node(self) -> NodeID:
        """Return the last node in the path (the destination node)."""
        return self.nodes[-1]

    @cached_property
    def edges(self) -> Tuple[Tuple[NodeID, NodeID], ...]:
        """Return the ``(u, v)`` hops along the path; empty for a single node."""
        return tuple(zip(self.nodes[:-1], self.nodes[1:]))

    def sub_path(
        self,
        dst_node: NodeID,
        graph: WeightedGraph,
        algebra: WeightAlgebra = NUMERIC,
    ) -> Path:
        """Create a sub-path ending at ``dst_node`` with its weight recomputed.

        Args:
            dst_node: The node at which to truncate the path.
            graph: The graph the path was computed on; supplies edge weights.
            algebra: Weight algebra used to fold the remaining edges.

        Returns:
            A new Path from ``src_node`` to the first occurrence of ``dst_node``.

        Raises:
            ValueError: If ``dst_node`` is not in this path, or an edge of the
                prefix no longer exists in ``graph``.
        """
        try:
            end = self.nodes.index(dst_node)
        except ValueError:
            raise ValueError(f"{dst_node} not in this path.") from None

        prefix = self.nodes[: end + 1]
        weights = [graph.edge_weight(u, v) for u, v in zip(prefix[:-1], prefix[1:])]
        return Path(prefix, algebra.total(weights))

    def __repr__(self) -> str:
        return f"Path({list(self.nodes)}, total_weight={self.total_weight!r})"
