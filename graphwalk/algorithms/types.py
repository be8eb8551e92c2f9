"""Result containers and errors returned by the traversal and path searches.

Defines immutable records for walk metadata and status-tagged results for
the searches whose outcome is more than "found / not found".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

from graphwalk.algorithms.base import NodeID, Weight
from graphwalk.path import Path


@dataclass(frozen=True)
class WalkMetadata:
    """Discovery record handed to a fold visitor.

    Attributes:
        depth: Number of hops from the start; 0 for the start itself.
        parent: Node (or state) the visit was reached from; None for the start.
    """

    depth: int
    parent: Optional[Any] = None


class PathStatus(IntEnum):
    """Outcome of an explicit Bellman-Ford query."""

    SHORTEST_PATH = 1
    NO_PATH = 2
    NEGATIVE_CYCLE = 3


class GoalStatus(IntEnum):
    """Outcome of an implicit Bellman-Ford query."""

    FOUND_GOAL = 1
    NO_GOAL = 2
    NEGATIVE_CYCLE = 3


@dataclass(frozen=True)
class BellmanFordResult:
    """Result of `bellman_ford`.

    Attributes:
        status: Which of the three outcomes occurred.
        path: The shortest path when ``status`` is SHORTEST_PATH, else None.
    """

    status: PathStatus
    path: Optional[Path] = None

    @property
    def found(self) -> bool:
        return self.status == PathStatus.SHORTEST_PATH


@dataclass(frozen=True)
class GoalSearchResult:
    """Result of `implicit_bellman_ford`.

    Attributes:
        status: Which of the three outcomes occurred.
        weight: Best weight to a goal state when ``status`` is FOUND_GOAL.
    """

    status: GoalStatus
    weight: Optional[Weight] = None

    @property
    def found(self) -> bool:
        return self.status == GoalStatus.FOUND_GOAL


class NegativeCycleError(ValueError):
    """Raised by all-pairs searches when some cycle has negative total weight.

    Attributes:
        node: A node whose distance to itself dropped below zero.
    """

    def __init__(self, node: NodeID) -> None:
        super().__init__(f"Negative cycle detected through node '{node}'.")
        self.node = node
