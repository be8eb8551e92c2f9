"""Breadth-first and depth-first walks with fold-based visitation.

All walks share one engine (`_fold`): a FIFO or LIFO frontier of
``(state, WalkMetadata)`` entries, deduplicated on pop by a key function.
The visitor returns ``(WalkControl, accumulator)``:

- ``CONTINUE`` expands the visited node.
- ``STOP`` records the node without expanding it; other branches proceed.
- ``HALT`` ends the traversal right after the current node.

Explicit walks read neighbors from ``graph.weighted_successors``; implicit
walks call a caller-supplied ``successors_of(state)`` and may dedupe states by
a projection (``visited_by``) so that states differing only in payload are
visited once. The first state popped for a key is the one the visitor sees.
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, List, Set, Tuple, TypeVar

from graphwalk.algorithms.base import (
    NodeID,
    WalkControl,
    WalkOrder,
    WeightedSuccessors,
)
from graphwalk.algorithms.frontier import make_frontier
from graphwalk.algorithms.types import WalkMetadata
from graphwalk.logging import get_logger

_logger = get_logger(__name__)

A = TypeVar("A")
S = TypeVar("S")

Visitor = Callable[[A, S, WalkMetadata], Tuple[WalkControl, A]]


def _identity(state: Any) -> Any:
    return state


def _fold(
    start: S,
    successors_of: Callable[[S], Iterable[S]],
    visited_by: Callable[[S], Hashable],
    order: WalkOrder,
    initial: A,
    visitor: Visitor,
) -> A:
    frontier = make_frontier(order)
    frontier.push((start, WalkMetadata(depth=0, parent=None)))
    visited: Set[Hashable] = set()
    acc = initial

    while frontier:
        state, meta = frontier.pop()
        key = visited_by(state)
        if key in visited:
            continue
        visited.add(key)

        control, acc = visitor(acc, state, meta)
        if control == WalkControl.HALT:
            _logger.debug("Walk halted at depth %d after %d visits", meta.depth, len(visited))
            break
        if control == WalkControl.STOP:
            continue

        children = [s for s in successors_of(state) if visited_by(s) not in visited]
        if order == WalkOrder.DEPTH_FIRST:
            # Stack pops last-in first; reverse to expand the first successor first
            children.reverse()
        child_meta = WalkMetadata(depth=meta.depth + 1, parent=state)
        for child in children:
            frontier.push((child, child_meta))

    return acc


def _neighbors(graph: WeightedSuccessors) -> Callable[[NodeID], List[NodeID]]:
    def successors_of(node: NodeID) -> List[NodeID]:
        return [nbr for nbr, _ in graph.weighted_successors(node)]

    return successors_of


def fold_walk(
    graph: WeightedSuccessors,
    start: NodeID,
    order: WalkOrder,
    initial: A,
    visitor: Visitor,
) -> A:
    """Fold a visitor over the nodes reachable from ``start``.

    Each reachable node is visited at most once, in BFS or DFS order.
    Self-loops and back-edges never cause revisits.

    Args:
        graph: Graph exposing ``weighted_successors``.
        start: Node to start from. A node absent from the graph yields ``initial``.
        order: BREADTH_FIRST or DEPTH_FIRST.
        initial: Initial accumulator.
        visitor: ``(acc, node, WalkMetadata) -> (WalkControl, new_acc)``.

    Returns:
        The accumulator after the last visit.
    """
    if start not in graph:
        return initial
    return _fold(start, _neighbors(graph), _identity, order, initial, visitor)


def walk(
    graph: WeightedSuccessors,
    start: NodeID,
    order: WalkOrder = WalkOrder.BREADTH_FIRST,
) -> List[NodeID]:
    """Return the nodes reachable from ``start`` in traversal order."""

    def collect(acc: List[NodeID], node: NodeID, _meta: WalkMetadata):
        acc.append(node)
        return WalkControl.CONTINUE, acc

    return fold_walk(graph, start, order, [], collect)


def walk_until(
    graph: WeightedSuccessors,
    start: NodeID,
    order: WalkOrder,
    predicate: Callable[[NodeID], bool],
) -> List[NodeID]:
    """Walk until the first node satisfying ``predicate``.

    Returns:
        Visited nodes up to and including the first match, or every
        reachable node if nothing matches.
    """

    def collect(acc: List[NodeID], node: NodeID, _meta: WalkMetadata):
        acc.append(node)
        if predicate(node):
            return WalkControl.HALT, acc
        return WalkControl.CONTINUE, acc

    return fold_walk(graph, start, order, [], collect)


def implicit_fold(
    start: S,
    successors_of: Callable[[S], Iterable[S]],
    order: WalkOrder,
    initial: A,
    visitor: Visitor,
) -> A:
    """Fold over a state space generated on demand.

    States are deduplicated by equality, so they must be hashable. The space
    may be infinite; termination then relies on the visitor returning HALT
    (or STOP on every frontier branch).

    Args:
        start: Initial state.
        successors_of: ``state -> iterable of next states``; must be pure.
        order: BREADTH_FIRST or DEPTH_FIRST.
        initial: Initial accumulator.
        visitor: ``(acc, state, WalkMetadata) -> (WalkControl, new_acc)``.

    Returns:
        The accumulator after the last visit.
    """
    return _fold(start, successors_of, _identity, order, initial, visitor)


def implicit_fold_by(
    start: S,
    successors_of: Callable[[S], Iterable[S]],
    visited_by: Callable[[S], Hashable],
    order: WalkOrder,
    initial: A,
    visitor: Visitor,
) -> A:
    """Like `implicit_fold`, but deduplicates states by ``visited_by(state)``.

    Only the key must be hashable; the full state (with any payload) flows to
    the visitor. Later arrivals at an already visited key are discarded.
    """
    return _fold(start, successors_of, visited_by, order, initial, visitor)
