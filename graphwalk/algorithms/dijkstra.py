"""Dijkstra shortest paths over explicit graphs and implicit state spaces.

One best-first engine (`best_first_search`) serves Dijkstra, A* and the path
replay used by Bellman-Ford. It works on a successor function; explicit-graph
entry points wrap ``graph.weighted_successors`` into one and rebuild the node
path from the recorded parents.

Notes:
    Weights must be non-negative under the algebra. With negative weights the
    Dijkstra result is unspecified, but the search still terminates because
    settled keys are never reopened. Use `bellman_ford` for negative weights.

    A* reopens a settled key when a strictly lighter route to it turns up,
    which keeps it optimal for heuristics that are admissible but not
    consistent. A consistent heuristic never triggers a reopen.

    Equal priorities pop in push order, and successors are expanded in the
    order the graph lists them, so repeated calls on the same graph return
    the same path, not merely the same weight.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Dict,
    Hashable,
    Iterable,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from graphwalk.algorithms.base import (
    NUMERIC,
    NodeID,
    Weight,
    WeightAlgebra,
    WeightedSuccessors,
)
from graphwalk.algorithms.frontier import PriorityFrontier
from graphwalk.algorithms.paths import resolve_to_path
from graphwalk.logging import get_logger
from graphwalk.path import Path

_logger = get_logger(__name__)

S = TypeVar("S")

SuccessorsWithCost = Callable[[S], Iterable[Tuple[S, Weight]]]


def _identity(state: Any) -> Any:
    return state


def _never(_state: Any) -> bool:
    return False


@dataclass
class SearchOutcome:
    """Bookkeeping left behind by `best_first_search`.

    Attributes:
        found: Whether a goal state was popped.
        goal_key: Key of the goal state that ended the search.
        goal_weight: Distance to that goal.
        settled: Key -> final distance, in settle order.
        parents: Key -> key of the predecessor on the best path (None for start).
    """

    found: bool = False
    goal_key: Optional[Hashable] = None
    goal_weight: Optional[Weight] = None
    settled: Dict[Hashable, Weight] = field(default_factory=dict)
    parents: Dict[Hashable, Optional[Hashable]] = field(default_factory=dict)


def best_first_search(
    start: S,
    successors_with_cost: SuccessorsWithCost,
    algebra: WeightAlgebra = NUMERIC,
    is_goal: Callable[[S], bool] = _never,
    visited_by: Callable[[S], Hashable] = _identity,
    heuristic: Optional[Callable[[S], Weight]] = None,
) -> SearchOutcome:
    """Generic Dijkstra / A* over a successor function.

    The frontier is ordered by ``distance`` (Dijkstra) or by
    ``add(distance, heuristic(state))`` (A*). Without a heuristic a popped key
    is settled once; with one, a strictly lighter route reopens it. The search
    ends the moment a goal state is popped, or when the frontier
    empties.

    Args:
        start: Initial state.
        successors_with_cost: ``state -> iterable of (next_state, weight)``.
        algebra: Weight algebra.
        is_goal: Goal predicate; the default never fires, which settles
            everything reachable.
        visited_by: Dedup key of a state. The first state to reach a key with
            the best distance is the one expanded.
        heuristic: Optional A* estimate of the remaining cost from a state.

    Returns:
        SearchOutcome with the goal (if any), settled distances and parents.
    """
    add, less = algebra.add, algebra.less
    outcome = SearchOutcome()
    start_key = visited_by(start)

    best: Dict[Hashable, Weight] = {start_key: algebra.zero}
    outcome.parents[start_key] = None

    def priority(state: S, dist: Weight) -> Weight:
        return dist if heuristic is None else add(dist, heuristic(state))

    frontier: PriorityFrontier[Tuple[S, Hashable, Weight]] = PriorityFrontier(algebra)
    frontier.push(priority(start, algebra.zero), (start, start_key, algebra.zero))
    settled = outcome.settled
    reopen = heuristic is not None

    while frontier:
        _, (state, key, dist) = frontier.pop()
        if key in settled or less(best[key], dist):
            # stale entry
            continue
        settled[key] = dist

        if is_goal(state):
            outcome.found = True
            outcome.goal_key = key
            outcome.goal_weight = dist
            break

        for next_state, weight in successors_with_cost(state):
            next_key = visited_by(next_state)
            if next_key in settled and not reopen:
                continue
            next_dist = add(dist, weight)
            if next_key not in best or less(next_dist, best[next_key]):
                settled.pop(next_key, None)
                best[next_key] = next_dist
                outcome.parents[next_key] = key
                frontier.push(
                    priority(next_state, next_dist), (next_state, next_key, next_dist)
                )

    _logger.debug(
        "Best-first search settled %d of %d discovered keys (goal found: %s)",
        len(settled),
        len(best),
        outcome.found,
    )
    return outcome


def graph_successors(graph: WeightedSuccessors) -> Callable[[NodeID], List[Tuple[NodeID, Weight]]]:
    """Adapt a graph into a ``successors_with_cost`` function."""
    return graph.weighted_successors


def path_from_outcome(
    source: NodeID, target: NodeID, outcome: SearchOutcome
) -> Optional[Path]:
    """Build the Path to ``target`` out of a finished search."""
    if target not in outcome.settled:
        return None
    nodes = resolve_to_path(source, target, outcome.parents)
    if not nodes:
        return None
    return Path(tuple(nodes), outcome.settled[target])


def shortest_path(
    graph: WeightedSuccessors,
    source: NodeID,
    target: NodeID,
    algebra: WeightAlgebra = NUMERIC,
) -> Optional[Path]:
    """Find the lightest path from ``source`` to ``target`` with Dijkstra.

    Args:
        graph: Graph exposing ``weighted_successors``; weights must be
            non-negative under ``algebra``.
        source: Start node.
        target: Destination node.
        algebra: Weight algebra.

    Returns:
        The shortest Path, or None if either node is missing or ``target`` is
        unreachable. ``source == target`` yields ``Path([source], zero)``.
    """
    if source not in graph or target not in graph:
        return None
    outcome = best_first_search(
        source,
        graph_successors(graph),
        algebra,
        is_goal=lambda node: node == target,
    )
    return path_from_outcome(source, target, outcome)


def single_source_distances(
    graph: WeightedSuccessors,
    source: NodeID,
    algebra: WeightAlgebra = NUMERIC,
) -> Dict[NodeID, Weight]:
    """Distances from ``source`` to every reachable node.

    Returns:
        Node -> shortest distance, in settle order (``source`` first, at zero).
        Empty if ``source`` is not in the graph.
    """
    if source not in graph:
        return {}
    return best_first_search(source, graph_successors(graph), algebra).settled


def implicit_dijkstra(
    start: S,
    successors_with_cost: SuccessorsWithCost,
    is_goal: Callable[[S], bool],
    algebra: WeightAlgebra = NUMERIC,
) -> Optional[Weight]:
    """Distance from ``start`` to the nearest goal state.

    States dedupe by equality and must be hashable. No path is returned.

    Returns:
        The goal distance, or None if the reachable space holds no goal.
    """
    return best_first_search(
        start, successors_with_cost, algebra, is_goal=is_goal
    ).goal_weight


def implicit_dijkstra_by(
    start: S,
    successors_with_cost: SuccessorsWithCost,
    is_goal: Callable[[S], bool],
    visited_by: Callable[[S], Hashable],
    algebra: WeightAlgebra = NUMERIC,
) -> Optional[Weight]:
    """`implicit_dijkstra` deduplicating states by ``visited_by(state)``."""
    return best_first_search(
        start, successors_with_cost, algebra, is_goal=is_goal, visited_by=visited_by
    ).goal_weight
