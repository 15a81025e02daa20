"""Undirected graph with per-edge costs.

`WeightedGraph` keeps a cost table next to the unweighted `UndirectedGraph`
structure. Each undirected edge ``{v, w}`` is stored under both directed keys
``(v, w)`` and ``(w, v)`` with the identical cost, so lookups never need to
normalize endpoint order. Every structural mutation updates both sides: the
inherited bulk methods (``add_edges_from``, ``remove_edges_from``,
``remove_nodes_from``, ``update``) route through the single-edge and
single-vertex methods below.

Read-only views made by networkx (``subgraph``, ``edge_subgraph``,
``copy(as_view=True)``) share the cost table of the graph they wrap.

The minimum spanning tree methods live in `wgraph.algorithms.mst`; the
methods here are thin wrappers that return a new, independent graph.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import networkx as nx

from wgraph.graph.edge import Edge, Vertex, WeightedEdge, format_cost
from wgraph.graph.undirected import UndirectedGraph


class GraphPreconditionError(AssertionError):
    """A documented precondition was violated by the caller.

    Raised for programmer errors such as asking for the cost of an edge that
    does not exist, or running an algorithm that requires a connected graph
    on a disconnected one. It subclasses ``AssertionError`` and is raised
    explicitly, so it is not stripped under ``python -O``.
    """


class WeightedGraph(UndirectedGraph):
    """Undirected graph whose edges carry a float cost.

    Invariant: ``{v, w}`` is an edge iff both ``(v, w)`` and ``(w, v)`` are in
    the cost table, and both entries hold the same cost.

    Example:
        >>> g = WeightedGraph()
        >>> g.add_vertex("A"), g.add_vertex("B")
        (True, True)
        >>> g.add_edge("A", "B", 1.0)
        True
        >>> g.cost("B", "A")
        1.0
    """

    def __init__(self, **attr: Any) -> None:
        super().__init__(**attr)
        self._cost: Dict[Tuple[Vertex, Vertex], float] = {}

    def _cost_table(self) -> Dict[Tuple[Vertex, Vertex], float]:
        # networkx views keep the wrapped graph in ``_graph``
        base = getattr(self, "_graph", None)
        if base is None:
            return self._cost
        return base._cost_table()

    def copy(self, as_view: bool = False, pickle: bool = True) -> WeightedGraph:
        """Create a copy of this graph, costs included.

        Same options as `UndirectedGraph.copy`. A non-pickle copy, and any
        copy of a frozen view, is rebuilt from ``weighted_edges()`` so every
        edge carries its cost.
        """
        if as_view or (pickle and not nx.is_frozen(self)):
            return super().copy(  # type: ignore[return-value]
                as_view=as_view, pickle=pickle
            )
        graph = self.__class__()
        graph.update(self)
        return graph

    def update(self, edges: Any = None, nodes: Any = None) -> None:
        """Update the graph from another graph or from edge/vertex bunches.

        A `WeightedGraph` source contributes its vertices, edges and costs.
        Any other source follows ``networkx.Graph.update``; its edges go
        through ``add_edge``, so a ``"cost"`` edge attribute becomes the cost.
        """
        if isinstance(edges, WeightedGraph) and nodes is None:
            self.graph.update(edges.graph)
            self.add_nodes_from(edges.nodes.data())
            for e in edges.weighted_edges():
                self.add_edge(e.v, e.w, e.c, **edges.edges[e.v, e.w])
            return
        super().update(edges=edges, nodes=nodes)

    #
    # Edge and cost management
    #
    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self, v: Vertex, w: Vertex, cost: float = 1.0, **attr: Any
    ) -> bool:
        """Add edge ``{v, w}`` with ``cost``.

        Args:
            v: First endpoint; must already be a vertex.
            w: Second endpoint; must already be a vertex.
            cost: Edge cost.
            **attr: Other edge attributes, kept on the networkx edge data.

        Returns:
            bool: True if the edge was added. False, with no effect, if either
                endpoint is missing, the edge already exists, or ``v == w``.
        """
        if not super().add_edge(v, w, **attr):
            return False
        c = float(cost)
        self._cost[(v, w)] = c
        self._cost[(w, v)] = c
        return True

    def add_weighted_edge(self, edge: WeightedEdge) -> bool:
        """Add ``edge.v``-``edge.w`` with cost ``edge.c``; see ``add_edge``."""
        return self.add_edge(edge.v, edge.w, edge.c)

    def add_edges_from_triples(
        self, triples: Iterable[Tuple[Vertex, Vertex, float]]
    ) -> int:
        """Add ``(v, w, cost)`` triples; return how many edges were added."""
        return sum(1 for v, w, c in triples if self.add_edge(v, w, c))

    def add_weighted_edges_from(
        self,
        ebunch_to_add: Iterable[Tuple[Vertex, Vertex, float]],
        weight: str = "cost",
        **attr: Any,
    ) -> None:
        """networkx-compatible form of ``add_edges_from_triples``.

        With the default ``weight="cost"`` the third item is the edge cost;
        any other name stores it as a plain attribute next to cost 1.0.
        """
        self.add_edges_from(
            ((v, w, {weight: c}) for v, w, c in ebunch_to_add), **attr
        )

    def remove_edge(self, v: Vertex, w: Vertex) -> bool:
        """Remove edge ``{v, w}`` and both of its cost entries.

        Returns:
            bool: True if an edge was removed, False if there was none.
        """
        if not super().remove_edge(v, w):
            return False
        del self._cost[(v, w)]
        del self._cost[(w, v)]
        return True

    def remove_node(self, n: Vertex) -> None:
        """Remove vertex ``n``, its incident edges and their costs.

        Raises:
            ValueError: If the vertex does not exist in the graph.
        """
        if n not in self:
            raise ValueError(f"Vertex '{n}' does not exist.")
        for w in list(self._adj[n]):
            del self._cost[(n, w)]
            del self._cost[(w, n)]
        super().remove_node(n)

    def clear(self) -> None:
        super().clear()
        self._cost.clear()

    def clear_edges(self) -> None:
        super().clear_edges()
        self._cost.clear()

    def cost(self, v: Union[Vertex, Edge], w: Optional[Vertex] = None) -> float:
        """Return the cost of edge ``{v, w}``.

        Accepts either two vertices or a single `Edge`.

        Raises:
            GraphPreconditionError: If an endpoint is not a vertex or the edge
                does not exist.
        """
        if w is None and isinstance(v, Edge):
            v, w = v.v, v.w
        if v not in self or w not in self:
            raise GraphPreconditionError(
                f"cost({v!r}, {w!r}): both endpoints must be vertices."
            )
        if not self.has_edge(v, w):
            raise GraphPreconditionError(f"cost({v!r}, {w!r}): no such edge.")
        return self._cost_table()[(v, w)]

    def weighted_edges(self) -> List[WeightedEdge]:
        """Return every edge once, as ``WeightedEdge(v, w, c)`` with ``v < w``.

        The list is sorted by ``(c, v, w)``, which is the scan order used by
        Kruskal's and Borůvka's algorithms.
        """
        table = self._cost_table()
        result = [
            WeightedEdge(v, w, table[(v, w)])
            for v, nbrs in self._adj.items()
            for w in nbrs
            if v < w
        ]
        result.sort()
        return result

    def total_cost(self) -> float:
        """Sum of all edge costs."""
        return sum(e.c for e in self.weighted_edges())

    #
    # Minimum spanning trees
    #
    def kruskal_mst(self) -> WeightedGraph:
        """Minimum spanning tree via Kruskal's algorithm.

        Raises:
            GraphPreconditionError: If the graph is not connected.
        """
        from wgraph.algorithms.mst import kruskal_mst

        return kruskal_mst(self)

    def boruvka_mst(self) -> WeightedGraph:
        """Minimum spanning tree via Borůvka's algorithm.

        Raises:
            GraphPreconditionError: If the graph is not connected.
        """
        from wgraph.algorithms.mst import boruvka_mst

        return boruvka_mst(self)

    def prim_mst(self) -> WeightedGraph:
        """Minimum spanning tree (forest, if disconnected) via Prim's algorithm."""
        from wgraph.algorithms.mst import prim_mst

        return prim_mst(self)

    #
    # Serialization
    #
    def to_dict(self) -> Dict[str, Any]:
        """Return a node-link dictionary suitable for JSON serialization.

        Returns:
            Dict[str, Any]: ``{"graph": ..., "nodes": [...], "links": [...]}``
                where each link is ``{"source", "target", "cost"}`` and
                appears once.
        """
        return {
            "graph": dict(self.graph),
            "nodes": [{"id": v} for v in self.vertices()],
            "links": [
                {"source": e.v, "target": e.w, "cost": e.c}
                for e in self.weighted_edges()
            ],
        }

    def __str__(self) -> str:
        lines = [
            "Weighted Graph:",
            f"# Vertices: {self.n()}",
            f"# Edges: {self.m()}",
            "",
            "Vertices:" + "".join(f" {v}" for v in self.vertices()),
            "",
            "Edges:",
        ]
        table = self._cost_table()
        for v in self.vertices():
            for w in self._adj[v]:
                if v < w:
                    lines.append(f"{v} {w} {format_cost(table[(v, w)])}")
        return "\n".join(lines) + "\n"
