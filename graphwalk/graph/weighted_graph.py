"""Strict weighted graph used as the explicit input of the search algorithms.

`WeightedGraph` extends `networkx.DiGraph` with explicit node management,
one weighted edge per ordered node pair, and an undirected mode that keeps
both directions of every edge in sync. It exposes the read-only query the
algorithms consume: ``weighted_successors(node) -> [(neighbor, weight)]``.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import Any, Dict, Hashable, List, Tuple

import networkx as nx

NodeID = Hashable
AttrDict = Dict[str, Any]

#: Edge attribute holding the weight.
WEIGHT_ATTR = "weight"


class WeightedGraph(nx.DiGraph):
    """A directed or undirected weighted graph with strict rules.

    This class enforces:
      - No automatic creation of missing nodes when adding an edge.
      - No duplicate nodes (raises ValueError on duplicates).
      - At most one edge per ordered pair; re-adding an edge replaces its
        weight in place (last write wins) and keeps its iteration position.
      - Removing non-existent nodes or edges raises ValueError.
      - In undirected mode every edge is stored in both directions with the
        same weight. Re-adding overwrites both directions; weights never
        accumulate.

    The direction flag lives in ``self.graph["directed"]`` so that NetworkX
    copies and views keep it.

    Inherits from:
        networkx.DiGraph
    """

    def __init__(self, incoming_graph_data=None, directed: bool = True, **attr) -> None:
        """Initialize a WeightedGraph.

        Args:
            incoming_graph_data: Optional data to load through `add_graph`.
                Anything accepted by the NetworkX constructors works (edge
                list, dict of dicts, another graph). Edges without a weight
                get 1.
            directed: If False, every added edge is mirrored.
            **attr: Graph attributes forwarded to the DiGraph constructor.
        """
        attr.setdefault("directed", directed)
        super().__init__(None, **attr)
        if incoming_graph_data is not None:
            if not isinstance(incoming_graph_data, nx.Graph):
                incoming_graph_data = nx.DiGraph(incoming_graph_data)
            self.add_graph(incoming_graph_data)

    def add_graph(
        self,
        nx_graph: nx.Graph,
        weight: str = WEIGHT_ATTR,
        default_weight: Any = 1,
    ) -> None:
        """Add the nodes and edges of a NetworkX graph through the strict API.

        Edges of an undirected input are added in both directions even when
        this graph is directed.

        Args:
            nx_graph: Source NetworkX graph (Graph, DiGraph or a multigraph).
            weight: Edge attribute to read the weight from.
            default_weight: Weight used when an edge lacks the attribute.

        Raises:
            ValueError: If a node of ``nx_graph`` already exists here.
        """
        for node, data in nx_graph.nodes(data=True):
            self.add_node(node, **data)
        mirror = not nx_graph.is_directed() and self.directed
        for u, v, data in nx_graph.edges(data=True):
            w = data.get(weight, default_weight)
            self.add_edge(u, v, w)
            if mirror and u != v:
                self.add_edge(v, u, w)

    @property
    def directed(self) -> bool:
        """Whether edges are one-way."""
        return bool(self.graph.get("directed", True))

    def copy(self, as_view: bool = False, pickle: bool = True) -> WeightedGraph:
        """Create a copy of this graph.

        By default, use pickle-based deep copying. If ``pickle=False``,
        call the parent class's copy, which supports views.

        Args:
            as_view: If True, return a view instead of a full copy; only used
                if ``pickle=False``.
            pickle: If True, perform a pickle-based deep copy.

        Returns:
            WeightedGraph: A new instance (or view) of the graph.
        """
        if not pickle:
            return super().copy(as_view=as_view)  # type: ignore[return-value]
        return loads(dumps(self))

    #
    # Node management
    #
    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a single node, disallowing duplicates.

        Args:
            node_for_adding: The node to add.
            **attr: Arbitrary attributes for this node.

        Raises:
            ValueError: If the node already exists in the graph.
        """
        if node_for_adding in self:
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)

    def remove_node(self, n: NodeID) -> None:
        """Remove a single node and all incident edges.

        Raises:
            ValueError: If the node does not exist in the graph.
        """
        if n not in self:
            raise ValueError(f"Node '{n}' does not exist.")
        super().remove_node(n)

    #
    # Edge management
    #
    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_of_edge: NodeID,
        v_of_edge: NodeID,
        weight: Any = 1,
        **attr: Any,
    ) -> None:
        """Add (or overwrite) the edge ``u -> v`` with the given weight.

        Both endpoints must already exist. In undirected mode the edge
        ``v -> u`` is written with the same weight and attributes.

        Args:
            u_of_edge: The source node. Must exist in the graph.
            v_of_edge: The target node. Must exist in the graph.
            weight: Edge weight; any value the caller's weight algebra accepts.
            **attr: Arbitrary extra edge attributes.

        Raises:
            ValueError: If either node does not exist.
        """
        if u_of_edge not in self:
            raise ValueError(f"Source node '{u_of_edge}' does not exist.")
        if v_of_edge not in self:
            raise ValueError(f"Target node '{v_of_edge}' does not exist.")

        attr[WEIGHT_ATTR] = weight
        super().add_edge(u_of_edge, v_of_edge, **attr)
        if not self.directed and u_of_edge != v_of_edge:
            super().add_edge(v_of_edge, u_of_edge, **attr)

    def remove_edge(self, u: NodeID, v: NodeID) -> None:
        """Remove the edge ``u -> v`` (both directions in undirected mode).

        Raises:
            ValueError: If the nodes or the edge do not exist.
        """
        if u not in self:
            raise ValueError(f"Source node '{u}' does not exist.")
        if v not in self:
            raise ValueError(f"Target node '{v}' does not exist.")
        if v not in self._succ[u]:
            raise ValueError(f"No edge from '{u}' to '{v}' to remove.")

        super().remove_edge(u, v)
        if not self.directed and u != v:
            super().remove_edge(v, u)

    #
    # Queries consumed by the algorithms
    #
    def weighted_successors(self, node: NodeID) -> List[Tuple[NodeID, Any]]:
        """List ``(neighbor, weight)`` for outgoing edges in insertion order.

        Raises:
            ValueError: If the node does not exist.
        """
        if node not in self._succ:
            raise ValueError(f"Node '{node}' does not exist.")
        return [(nbr, data[WEIGHT_ATTR]) for nbr, data in self._succ[node].items()]

    def weighted_predecessors(self, node: NodeID) -> List[Tuple[NodeID, Any]]:
        """List ``(neighbor, weight)`` for incoming edges in insertion order.

        Raises:
            ValueError: If the node does not exist.
        """
        if node not in self._pred:
            raise ValueError(f"Node '{node}' does not exist.")
        return [(nbr, data[WEIGHT_ATTR]) for nbr, data in self._pred[node].items()]

    def edge_weight(self, u: NodeID, v: NodeID) -> Any:
        """Return the weight of ``u -> v``.

        Raises:
            ValueError: If no such edge exists.
        """
        if u not in self._succ or v not in self._succ[u]:
            raise ValueError(f"No edge from '{u}' to '{v}'.")
        return self._succ[u][v][WEIGHT_ATTR]

    def get_nodes(self) -> Dict[NodeID, AttrDict]:
        """Retrieve all nodes and their attributes as a dictionary."""
        return dict(self.nodes(data=True))

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return (
            f"WeightedGraph({kind}, nodes={self.number_of_nodes()}, "
            f"edges={self.number_of_edges()})"
        )
