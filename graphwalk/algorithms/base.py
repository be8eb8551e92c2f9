"""Base classes, enums and the weight algebra shared by all algorithms."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import IntEnum
from functools import cmp_to_key
from typing import Any, Callable, Hashable, Iterator, List, Protocol, Tuple

NodeID = Hashable

#: Opaque edge weight. Only the injected `WeightAlgebra` interprets it.
Weight = Any


def compare_numbers(a: Any, b: Any) -> int:
    """Three-way comparison for values supporting ``<`` and ``>``."""
    return (a > b) - (a < b)


@dataclass(frozen=True)
class WeightAlgebra:
    """Ordered monoid describing edge weights.

    Every path search is generic over this bundle instead of assuming a
    numeric type, so hop counts, float distances and custom cost tuples all
    go through the same code.

    Attributes:
        zero: Identity of ``add``; the weight of an empty path.
        add: Associative combination of two weights.
        compare: Three-way comparison returning a negative int, zero or a
            positive int, like the classic ``cmp``.
    """

    zero: Weight
    add: Callable[[Weight, Weight], Weight]
    compare: Callable[[Weight, Weight], int]

    def less(self, a: Weight, b: Weight) -> bool:
        return self.compare(a, b) < 0

    def minimum(self, a: Weight, b: Weight) -> Weight:
        """Return the smaller weight; ``a`` on ties."""
        return b if self.compare(b, a) < 0 else a

    def is_negative(self, weight: Weight) -> bool:
        return self.compare(weight, self.zero) < 0

    def sort_key(self) -> Callable[[Weight], Any]:
        """Key function ordering weights by ``compare``."""
        return cmp_to_key(self.compare)

    def total(self, weights: List[Weight]) -> Weight:
        """Fold ``add`` over ``weights`` seeded with ``zero``."""
        acc = self.zero
        for weight in weights:
            acc = self.add(acc, weight)
        return acc


#: Integer (or any numeric) weights with ``+`` and the natural order.
NUMERIC = WeightAlgebra(zero=0, add=operator.add, compare=compare_numbers)

#: Float weights; identical to NUMERIC but seeded with ``0.0``.
FLOAT = WeightAlgebra(zero=0.0, add=operator.add, compare=compare_numbers)


class WeightedSuccessors(Protocol):
    """Read-only graph query consumed by the explicit-graph algorithms."""

    def __contains__(self, node: object) -> bool: ...

    def __iter__(self) -> Iterator[NodeID]: ...

    def weighted_successors(self, node: NodeID) -> List[Tuple[NodeID, Weight]]: ...


class WalkOrder(IntEnum):
    """Frontier discipline of an unweighted traversal."""

    #: FIFO frontier, level by level.
    BREADTH_FIRST = 1
    #: LIFO frontier, recursive preorder.
    DEPTH_FIRST = 2


class WalkControl(IntEnum):
    """Signal returned by a fold visitor."""

    #: Enqueue the node's unvisited neighbors.
    CONTINUE = 1
    #: Record the node but do not expand it; siblings still proceed.
    STOP = 2
    #: End the whole traversal after the current node.
    HALT = 3


class MatrixStrategy(IntEnum):
    """How `distance_matrix` computes POI-to-POI distances."""

    #: Pick by density, see `SearchConfig.prefers_dense`.
    AUTO = 0
    #: One Floyd-Warshall run, filtered to POI pairs.
    DENSE = 1
    #: One Dijkstra per POI, filtered to POI targets.
    SPARSE = 2

    @classmethod
    def from_string(cls, value: str) -> "MatrixStrategy":
        """Parse a string into a MatrixStrategy enum value.

        Args:
            value: Case-insensitive string name (e.g., "dense", "SPARSE").

        Returns:
            The corresponding MatrixStrategy enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid matrix strategy '{value}'. Valid values are: {valid}"
            ) from None
