"""Strict undirected graph used as the unweighted substrate.

`UndirectedGraph` extends `networkx.Graph` with explicit vertex management and
boolean results for benign no-ops, and exposes the small query surface the
weighted graph and the MST algorithms rely on: membership, edge existence,
vertex/neighbor enumeration, counts and connectivity.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import Any, Hashable, Iterable, Iterator, List

import networkx as nx

Vertex = Hashable


class UndirectedGraph(nx.Graph):
    """A simple undirected graph with strict rules.

    This class enforces:
      - No automatic creation of missing vertices when adding an edge.
      - No self-loops and no parallel edges.
      - Adding an existing vertex or edge, or removing an absent edge, is a
        no-op reported through the boolean result.
      - Removing a non-existent vertex raises ValueError.

    Vertices keep insertion order, so ``vertices()`` enumerates them in the
    order they were added.

    Inherits from:
        networkx.Graph
    """

    def copy(self, as_view: bool = False, pickle: bool = True) -> UndirectedGraph:
        """Create a copy of this graph.

        By default, use pickle-based deep copying so subclass state travels
        with the copy. With ``pickle=False``, and always for frozen views such
        as ``subgraph()``, the copy is rebuilt through ``add_nodes_from`` and
        ``add_edges_from``.

        Args:
            as_view: If True, return a read-only view instead of a copy.
            pickle: If True, perform a pickle-based deep copy.

        Returns:
            UndirectedGraph: A new instance (or view) of the graph.
        """
        if as_view:
            return super().copy(as_view=True)  # type: ignore[return-value]
        if pickle and not nx.is_frozen(self):
            return loads(dumps(self))
        return super().copy()  # type: ignore[return-value]

    #
    # Vertex management
    #
    def add_vertex(self, v: Vertex, **attr: Any) -> bool:
        """Add a vertex if it is not already present.

        Args:
            v: The vertex to add.
            **attr: Arbitrary attributes for this vertex.

        Returns:
            bool: True if the vertex was added, False if it already existed.
        """
        if v in self:
            return False
        super().add_node(v, **attr)
        return True

    def remove_node(self, n: Vertex) -> None:
        """Remove a single vertex and all incident edges.

        Args:
            n: The vertex to remove.

        Raises:
            ValueError: If the vertex does not exist in the graph.
        """
        if n not in self:
            raise ValueError(f"Vertex '{n}' does not exist.")
        super().remove_node(n)

    def remove_nodes_from(self, nodes: Iterable[Vertex]) -> None:
        """Remove each vertex in ``nodes`` through ``remove_node``.

        Vertices that are not in the graph are skipped.
        """
        for n in list(nodes):
            if n in self:
                self.remove_node(n)

    def is_vertex(self, v: Vertex) -> bool:
        """Return True if ``v`` is a vertex of this graph."""
        return v in self

    def vertices(self) -> List[Vertex]:
        """Return all vertices in insertion order."""
        return list(self._node)

    #
    # Edge management
    #
    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self, u_of_edge: Vertex, v_of_edge: Vertex, **attr: Any
    ) -> bool:
        """Add the undirected edge ``{u_of_edge, v_of_edge}``.

        Both endpoints must already exist; the edge must not exist yet and
        must not be a self-loop.

        Args:
            u_of_edge: First endpoint.
            v_of_edge: Second endpoint.
            **attr: Arbitrary edge attributes.

        Returns:
            bool: True if the edge was added, otherwise False.
        """
        if u_of_edge not in self or v_of_edge not in self:
            return False
        if u_of_edge == v_of_edge:
            return False
        if self.has_edge(u_of_edge, v_of_edge):
            return False
        super().add_edge(u_of_edge, v_of_edge, **attr)
        return True

    def remove_edge(self, u: Vertex, v: Vertex) -> bool:
        """Remove the edge ``{u, v}`` if present.

        Returns:
            bool: True if an edge was removed, False if there was none.
        """
        if not self.has_edge(u, v):
            return False
        super().remove_edge(u, v)
        return True

    def add_edges_from(self, ebunch_to_add: Iterable[tuple], **attr: Any) -> None:
        """Add each edge in ``ebunch_to_add`` through ``add_edge``.

        Edges are ``(u, v)`` or ``(u, v, data)`` tuples; ``data`` overrides
        ``attr``. Edges that ``add_edge`` rejects are skipped, so unlike
        ``networkx.Graph`` no vertices are created. ``update()``, ``copy()``
        and graph construction from another graph all go through here.

        Raises:
            networkx.NetworkXError: If an edge tuple has the wrong length.
        """
        for e in ebunch_to_add:
            if len(e) == 3:
                u, v, data = e
            elif len(e) == 2:
                u, v = e
                data = {}
            else:
                raise nx.NetworkXError(
                    f"Edge tuple {e} must be a 2-tuple or 3-tuple."
                )
            self.add_edge(u, v, **{**attr, **data})

    def remove_edges_from(self, ebunch: Iterable[tuple]) -> None:
        """Remove each ``(u, v, ...)`` edge through ``remove_edge``."""
        for e in list(ebunch):
            self.remove_edge(e[0], e[1])

    def is_edge(self, v: Vertex, w: Vertex) -> bool:
        """Return True if ``{v, w}`` is an edge of this graph."""
        return self.has_edge(v, w)

    def adj_of(self, v: Vertex) -> Iterator[Vertex]:
        """Iterate over the neighbors of ``v``.

        Raises:
            ValueError: If ``v`` is not a vertex.
        """
        if v not in self:
            raise ValueError(f"Vertex '{v}' does not exist.")
        return iter(self._adj[v])

    #
    # Counts and connectivity
    #
    def n(self) -> int:
        """Number of vertices."""
        return self.number_of_nodes()

    def m(self) -> int:
        """Number of undirected edges."""
        return self.number_of_edges()

    def ncc(self) -> int:
        """Number of connected components (0 for the empty graph)."""
        return nx.number_connected_components(self)

    def is_connected(self) -> bool:
        """Return True if the graph has at most one connected component.

        The empty graph counts as connected, so algorithms that require
        connectivity accept it and return an empty result.
        """
        return self.ncc() <= 1
