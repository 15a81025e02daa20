"""Disjoint-set-union forest with path compression and union by rank."""

from __future__ import annotations

from typing import Dict, Hashable

Vertex = Hashable


class DisjointSets:
    """Partition of vertices into disjoint components.

    A vertex whose parent is itself is the root (and representative) of its
    component. Rank is kept for roots only and bounds tree height, so
    ``find_set`` is near O(1) amortized together with path compression.
    """

    def __init__(self) -> None:
        self._parent: Dict[Vertex, Vertex] = {}
        self._rank: Dict[Vertex, int] = {}
        self._count = 0

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, v: object) -> bool:
        return v in self._parent

    @property
    def component_count(self) -> int:
        """Number of disjoint components currently tracked."""
        return self._count

    def make_set(self, v: Vertex) -> None:
        """Register ``v`` as a singleton component.

        Call once per vertex. Registering a vertex again resets it to a
        singleton without repairing vertices that pointed at it.
        """
        if v not in self._parent:
            self._count += 1
        self._parent[v] = v
        self._rank[v] = 0

    def find_set(self, v: Vertex) -> Vertex:
        """Return the identifier of ``v``'s component.

        Two vertices share an identifier iff they are in the same component.
        Every vertex on the walked path is re-pointed at the root.

        Raises:
            KeyError: If ``v`` was never registered with ``make_set``.
        """
        parent = self._parent
        root = v
        while parent[root] != root:
            root = parent[root]
        while parent[v] != root:
            parent[v], v = root, parent[v]
        return root

    def root_key(self, v: Vertex) -> Vertex:
        """Return the representative vertex of ``v``'s component.

        Roots are vertices themselves, so the representative doubles as a
        stable dictionary key for per-component bookkeeping within a round.
        """
        return self.find_set(v)

    def join_sets(self, v: Vertex, w: Vertex) -> bool:
        """Merge the components of ``v`` and ``w``.

        Returns:
            bool: True if two components were merged, False if ``v`` and ``w``
                were already in the same component.
        """
        rv = self.find_set(v)
        rw = self.find_set(w)
        if rv == rw:
            return False

        if self._rank[rv] < self._rank[rw]:
            rv, rw = rw, rv
        self._parent[rw] = rv
        if self._rank[rv] == self._rank[rw]:
            self._rank[rv] += 1
        del self._rank[rw]

        self._count -= 1
        return True
