"""A* search: Dijkstra ordered by ``distance + heuristic``.

The heuristic must be admissible (never overestimate the remaining cost) for
the result to be optimal. This is a caller contract and is not checked.
Consistency is not required: keys are reopened when a lighter route to them
appears after they were settled. With
a heuristic that is always ``zero``, A* pops states in exactly the order
Dijkstra does and returns the same path.
"""

from __future__ import annotations

from typing import Callable, Hashable, Optional, TypeVar

from graphwalk.algorithms.base import NUMERIC, NodeID, Weight, WeightAlgebra, WeightedSuccessors
from graphwalk.algorithms.dijkstra import (
    SuccessorsWithCost,
    best_first_search,
    graph_successors,
    path_from_outcome,
)
from graphwalk.path import Path

S = TypeVar("S")


def a_star(
    graph: WeightedSuccessors,
    source: NodeID,
    target: NodeID,
    heuristic: Callable[[NodeID, NodeID], Weight],
    algebra: WeightAlgebra = NUMERIC,
) -> Optional[Path]:
    """Find the lightest path from ``source`` to ``target`` with A*.

    Args:
        graph: Graph exposing ``weighted_successors``; weights must be
            non-negative under ``algebra``.
        source: Start node.
        target: Destination node.
        heuristic: ``(node, target) -> estimated remaining weight``.
        algebra: Weight algebra.

    Returns:
        The shortest Path, or None if either node is missing or ``target`` is
        unreachable.
    """
    if source not in graph or target not in graph:
        return None
    outcome = best_first_search(
        source,
        graph_successors(graph),
        algebra,
        is_goal=lambda node: node == target,
        heuristic=lambda node: heuristic(node, target),
    )
    return path_from_outcome(source, target, outcome)


def implicit_a_star(
    start: S,
    successors_with_cost: SuccessorsWithCost,
    is_goal: Callable[[S], bool],
    heuristic: Callable[[S], Weight],
    algebra: WeightAlgebra = NUMERIC,
) -> Optional[Weight]:
    """A* over a state space generated on demand.

    Returns:
        The distance to the first goal state popped, or None.
    """
    return best_first_search(
        start, successors_with_cost, algebra, is_goal=is_goal, heuristic=heuristic
    ).goal_weight


def implicit_a_star_by(
    start: S,
    successors_with_cost: SuccessorsWithCost,
    is_goal: Callable[[S], bool],
    heuristic: Callable[[S], Weight],
    visited_by: Callable[[S], Hashable],
    algebra: WeightAlgebra = NUMERIC,
) -> Optional[Weight]:
    """`implicit_a_star` deduplicating states by ``visited_by(state)``."""
    return best_first_search(
        start,
        successors_with_cost,
        algebra,
        is_goal=is_goal,
        visited_by=visited_by,
        heuristic=heuristic,
    ).goal_weight
