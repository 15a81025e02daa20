"""Edge value types.

`Edge` is an unordered vertex pair used as a cost-lookup key. `WeightedEdge`
carries a cost and sorts by ``(cost, v, w)``, which is the order Kruskal scans
edges in and the order Prim's heap extracts them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Hashable, Tuple

Vertex = Hashable


@dataclass(frozen=True, eq=False)
class Edge:
    """Unordered pair of vertices.

    ``Edge(v, w) == Edge(w, v)`` and both hash alike. The endpoints keep the
    order they were given in so callers can still read ``v`` and ``w``.

    Attributes:
        v: First endpoint.
        w: Second endpoint.
    """

    v: Vertex
    w: Vertex

    def _endpoints(self) -> frozenset:
        return frozenset((self.v, self.w))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._endpoints() == other._endpoints()

    def __hash__(self) -> int:
        return hash(self._endpoints())

    def reverse(self) -> Edge:
        """Return the same edge with endpoints swapped."""
        return Edge(self.w, self.v)


@dataclass(frozen=True)
class WeightedEdge:
    """Edge ``(v, w)`` with a float cost ``c``.

    Ordering is by cost first, then by endpoints, so a sorted sequence of
    weighted edges is deterministic for totally ordered vertex types. Equality
    compares all three fields; heap identity is decided by the heap's key
    function, not by equality.

    Attributes:
        v: Source (or parent) endpoint.
        w: Destination (or child) endpoint.
        c: Edge cost.
    """

    v: Vertex
    w: Vertex
    c: float

    def _sort_key(self) -> Tuple[float, Any, Any]:
        return (self.c, self.v, self.w)

    def __lt__(self, other: WeightedEdge) -> bool:
        if not isinstance(other, WeightedEdge):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: WeightedEdge) -> bool:
        if not isinstance(other, WeightedEdge):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: WeightedEdge) -> bool:
        if not isinstance(other, WeightedEdge):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: WeightedEdge) -> bool:
        if not isinstance(other, WeightedEdge):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    @property
    def edge(self) -> Edge:
        """The unweighted edge ``{v, w}``."""
        return Edge(self.v, self.w)

    def __str__(self) -> str:
        return f"{self.v} {self.w} {format_cost(self.c)}"


def format_cost(cost: float) -> str:
    """Return a short text form of a cost.

    Integral values drop the fractional part; other values use ``repr`` so a
    written cost reads back to the identical float.

    Examples:
        1.0 -> "1"; 2.5 -> "2.5"; inf -> "inf".
    """
    cost = float(cost)
    if math.isfinite(cost) and cost.is_integer():
        return str(int(cost))
    return repr(cost)
