"""Frontier containers driving traversals and best-first searches.

`FifoFrontier` and `LifoFrontier` back breadth-first and depth-first walks.
`PriorityFrontier` backs Dijkstra and A*: entries are ordered by the weight
algebra's ``compare`` and ties pop in insertion order.
"""

from __future__ import annotations

from collections import deque
from heapq import heappop, heappush
from itertools import count
from typing import Any, Deque, Generic, List, Tuple, TypeVar, Union

from graphwalk.algorithms.base import WalkOrder, Weight, WeightAlgebra

T = TypeVar("T")


class FifoFrontier(Generic[T]):
    """Queue frontier for breadth-first order."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class LifoFrontier(Generic[T]):
    """Stack frontier for depth-first order."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


def make_frontier(order: WalkOrder) -> Union[FifoFrontier, LifoFrontier]:
    """Return an empty frontier matching the walk order.

    Raises:
        ValueError: If ``order`` is not a known WalkOrder.
    """
    if order == WalkOrder.BREADTH_FIRST:
        return FifoFrontier()
    if order == WalkOrder.DEPTH_FIRST:
        return LifoFrontier()
    raise ValueError(f"Unsupported walk order: {order!r}")


class PriorityFrontier(Generic[T]):
    """Min-heap keyed by ``(priority, insertion sequence)``.

    Priorities are arbitrary weights compared through the algebra, so no
    numeric type is assumed. The sequence number makes equal priorities pop
    oldest first and keeps payloads out of comparisons.
    """

    def __init__(self, algebra: WeightAlgebra) -> None:
        self._heap: List[Tuple[Any, int, Weight, T]] = []
        self._key = algebra.sort_key()
        self._seq = count()

    def push(self, priority: Weight, item: T) -> None:
        heappush(self._heap, (self._key(priority), next(self._seq), priority, item))

    def pop(self) -> Tuple[Weight, T]:
        """Remove and return ``(priority, item)`` of the smallest entry."""
        _, _, priority, item = heappop(self._heap)
        return priority, item

    def __len__(self) -> int:
        return len(self._heap)
