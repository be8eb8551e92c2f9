from __future__ import annotations

from typing import Dict, List, Optional

from graphwalk.algorithms.base import NodeID


def resolve_to_path(
    src_node: NodeID,
    dst_node: NodeID,
    parents: Dict[NodeID, Optional[NodeID]],
) -> List[NodeID]:
    """
    Rebuild the node sequence from src_node to dst_node out of a parent map.

    Args:
        src_node: Source node ID; its parent entry is None.
        dst_node: Destination node ID.
        parents: Node -> predecessor on its best known path, as filled by a search.

    Returns:
        Node IDs from src_node to dst_node, or an empty list if dst_node was
        never reached.
    """
    if dst_node not in parents:
        return []

    nodes = [dst_node]
    seen = {dst_node}
    current = dst_node
    while current != src_node:
        current = parents[current]
        if current is None or current in seen:
            # Broken chain: src_node is not an ancestor of dst_node
            return []
        seen.add(current)
        nodes.append(current)
    nodes.reverse()
    return nodes
