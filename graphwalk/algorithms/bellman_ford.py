"""Bellman-Ford shortest paths with negative-cycle detection.

The explicit form relaxes every edge reachable from the source up to
``|V| - 1`` times and reports a negative cycle only when one more pass still
improves a node reachable from the source. Cycles elsewhere in the graph are
never reported.

Among several equally light paths, the returned one is chosen by replaying
the best-first engine over the tight edges (``dist[u] + w == dist[v]``). On
graphs without negative edges this picks the same path as `shortest_path`.

The implicit form is a FIFO label-correcting fixed point over the states
discovered from the start. Each label carries the hop count of the walk that
produced it; a strictly improving walk with at least as many hops as there
are discovered keys must repeat a key, which only a negative cycle allows.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Dict, Hashable, List, Optional, Set, Tuple, TypeVar

from graphwalk.algorithms.base import (
    NUMERIC,
    NodeID,
    Weight,
    WeightAlgebra,
    WeightedSuccessors,
)
from graphwalk.algorithms.dijkstra import (
    SuccessorsWithCost,
    best_first_search,
    path_from_outcome,
)
from graphwalk.algorithms.types import (
    BellmanFordResult,
    GoalSearchResult,
    GoalStatus,
    PathStatus,
)
from graphwalk.logging import get_logger

_logger = get_logger(__name__)

S = TypeVar("S")

Edge = Tuple[NodeID, NodeID, Weight]


def _identity(state):
    return state


def _relax_pass(
    edges: List[Edge],
    dist: Dict[NodeID, Weight],
    algebra: WeightAlgebra,
) -> bool:
    """Relax every edge once; return True if any distance improved."""
    changed = False
    for u, v, w in edges:
        if u not in dist:
            continue
        candidate = algebra.add(dist[u], w)
        if v not in dist or algebra.less(candidate, dist[v]):
            dist[v] = candidate
            changed = True
    return changed


def bellman_ford(
    graph: WeightedSuccessors,
    source: NodeID,
    target: NodeID,
    algebra: WeightAlgebra = NUMERIC,
) -> BellmanFordResult:
    """Shortest path from ``source`` to ``target`` allowing negative weights.

    A negative self-loop is a one-edge negative cycle. Positive self-loops
    never improve a distance and are effectively ignored.

    Args:
        graph: Graph exposing ``weighted_successors``.
        source: Start node.
        target: Destination node.
        algebra: Weight algebra.

    Returns:
        BellmanFordResult with status SHORTEST_PATH (and the path), NO_PATH
        (also for missing nodes) or NEGATIVE_CYCLE.
    """
    if source not in graph or target not in graph:
        return BellmanFordResult(PathStatus.NO_PATH)

    edges: List[Edge] = [
        (u, v, w) for u in graph for v, w in graph.weighted_successors(u)
    ]
    dist: Dict[NodeID, Weight] = {source: algebra.zero}
    num_nodes = sum(1 for _ in graph)

    passes = 0
    for passes in range(1, num_nodes):
        if not _relax_pass(edges, dist, algebra):
            break
    else:
        # Every pass changed something; one more decides about negative cycles
        if _relax_pass(edges, dist, algebra):
            _logger.debug(
                "Negative cycle reachable from %r after %d passes", source, passes
            )
            return BellmanFordResult(PathStatus.NEGATIVE_CYCLE)

    if target not in dist:
        return BellmanFordResult(PathStatus.NO_PATH)

    # Pick the canonical route among the tight edges
    def tight_successors(node: NodeID) -> List[Tuple[NodeID, Weight]]:
        base = dist[node]
        return [
            (v, w)
            for v, w in graph.weighted_successors(node)
            if v in dist and algebra.compare(algebra.add(base, w), dist[v]) == 0
        ]

    outcome = best_first_search(
        source, tight_successors, algebra, is_goal=lambda node: node == target
    )
    path = path_from_outcome(source, target, outcome)
    return BellmanFordResult(PathStatus.SHORTEST_PATH, path)


def implicit_bellman_ford(
    start: S,
    successors_with_cost: SuccessorsWithCost,
    is_goal: Callable[[S], bool],
    algebra: WeightAlgebra = NUMERIC,
) -> GoalSearchResult:
    """Bellman-Ford over a state space generated on demand.

    States dedupe by equality and must be hashable. The reachable space must
    be finite for the fixed point to be reached.

    Args:
        start: Initial state.
        successors_with_cost: ``state -> iterable of (next_state, weight)``.
        is_goal: Goal predicate evaluated on every discovered state.
        algebra: Weight algebra.

    Returns:
        GoalSearchResult with FOUND_GOAL and the lightest goal weight,
        NO_GOAL, or NEGATIVE_CYCLE.
    """
    return implicit_bellman_ford_by(
        start, successors_with_cost, is_goal, _identity, algebra
    )


def implicit_bellman_ford_by(
    start: S,
    successors_with_cost: SuccessorsWithCost,
    is_goal: Callable[[S], bool],
    visited_by: Callable[[S], Hashable],
    algebra: WeightAlgebra = NUMERIC,
) -> GoalSearchResult:
    """`implicit_bellman_ford` deduplicating states by ``visited_by(state)``.

    A key keeps the state of its best label; an equally light later arrival
    does not replace it.
    """
    add = algebra.add
    start_key = visited_by(start)

    best: Dict[Hashable, Weight] = {start_key: algebra.zero}
    hops: Dict[Hashable, int] = {start_key: 0}
    states: Dict[Hashable, S] = {start_key: start}
    queue: Deque[Hashable] = deque([start_key])
    queued: Set[Hashable] = {start_key}

    while queue:
        key = queue.popleft()
        queued.discard(key)
        dist = best[key]
        for next_state, weight in successors_with_cost(states[key]):
            next_key = visited_by(next_state)
            candidate = add(dist, weight)
            if next_key in best and not algebra.less(candidate, best[next_key]):
                continue
            best[next_key] = candidate
            states[next_key] = next_state
            hops[next_key] = hops[key] + 1
            if hops[next_key] >= len(best):
                _logger.debug(
                    "Negative cycle detected among %d discovered states", len(best)
                )
                return GoalSearchResult(GoalStatus.NEGATIVE_CYCLE)
            if next_key not in queued:
                queue.append(next_key)
                queued.add(next_key)

    goal_weight: Optional[Weight] = None
    found = False
    for key, weight in best.items():
        if not is_goal(states[key]):
            continue
        goal_weight = weight if not found else algebra.minimum(goal_weight, weight)
        found = True

    if not found:
        return GoalSearchResult(GoalStatus.NO_GOAL)
    return GoalSearchResult(GoalStatus.FOUND_GOAL, goal_weight)
