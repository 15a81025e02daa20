"""Minimum spanning tree algorithms.

Implements Kruskal's, Borůvka's and Prim's algorithms over a `WeightedGraph`.
Each returns a new `WeightedGraph` holding every input vertex (in input
order) and the tree edges; the input graph is never modified.

Notes:
    Kruskal and Borůvka require a connected input and raise
    `GraphPreconditionError` otherwise. Prim accepts any input and returns a
    minimum spanning forest when the graph is disconnected: each component
    not reachable from the start vertex is entered at infinite distance
    without a parent edge.

    Ties are resolved by the ``(cost, v, w)`` order of
    `WeightedGraph.weighted_edges`, so Kruskal and Borůvka produce the same
    tree on the same input. Prim may pick a different tree of the same cost.
"""

from __future__ import annotations

import math
from operator import attrgetter
from typing import Callable, Dict, Optional

from wgraph.algorithms.dary_heap import IndexedDaryHeap
from wgraph.algorithms.dsu import DisjointSets
from wgraph.config import ALGORITHMS, MST_CONFIG
from wgraph.graph.edge import Vertex, WeightedEdge
from wgraph.graph.weighted import GraphPreconditionError, WeightedGraph
from wgraph.logging import get_logger

logger = get_logger(__name__)


def _require_connected(graph: WeightedGraph, algorithm: str) -> None:
    ncc = graph.ncc()
    if ncc > 1:
        raise GraphPreconditionError(
            f"{algorithm} requires a connected graph; found {ncc} components."
        )


def _empty_forest(
    graph: WeightedGraph, dsu: Optional[DisjointSets] = None
) -> WeightedGraph:
    """Return a graph with all of ``graph``'s vertices and no edges."""
    result = WeightedGraph()
    for v in graph.vertices():
        result.add_vertex(v)
        if dsu is not None:
            dsu.make_set(v)
    return result


def kruskal_mst(graph: WeightedGraph) -> WeightedGraph:
    """Minimum spanning tree via Kruskal's algorithm.

    Scans edges in ascending ``(cost, v, w)`` order and keeps every edge that
    joins two different components. O(E log E), dominated by the sort.

    Args:
        graph: Connected weighted graph.

    Returns:
        New graph with all vertices and the ``n - 1`` tree edges.

    Raises:
        GraphPreconditionError: If ``graph`` is not connected.
    """
    _require_connected(graph, "Kruskal's algorithm")
    dsu = DisjointSets()
    result = _empty_forest(graph, dsu)

    for e in graph.weighted_edges():
        if dsu.join_sets(e.v, e.w):
            result.add_weighted_edge(e)

    logger.debug(
        f"Kruskal: n={graph.n()} m={graph.m()} -> {result.m()} edges, "
        f"cost={result.total_cost()}"
    )
    return result


def boruvka_mst(graph: WeightedGraph) -> WeightedGraph:
    """Minimum spanning tree via Borůvka's algorithm.

    Each round picks, for every component, the lightest edge leaving it and
    merges along all picked edges. The lightest-edge map is rebuilt every
    round because representatives change after merges. Every round at least
    halves the number of components, so there are O(log n) rounds and
    O(E log n) work in total.

    Args:
        graph: Connected weighted graph.

    Returns:
        New graph with all vertices and the ``n - 1`` tree edges.

    Raises:
        GraphPreconditionError: If ``graph`` is not connected.
    """
    _require_connected(graph, "Borůvka's algorithm")
    dsu = DisjointSets()
    result = _empty_forest(graph, dsu)
    edges = graph.weighted_edges()

    rounds = 0
    while dsu.component_count > 1:
        rounds += 1
        lightest: Dict[Vertex, WeightedEdge] = {}

        # Scanning in sorted order with a strict comparison makes every
        # component agree on ties, so the picked edges never close a cycle.
        for e in edges:
            rv = dsu.root_key(e.v)
            rw = dsu.root_key(e.w)
            if rv == rw:
                continue
            for r in (rv, rw):
                best = lightest.get(r)
                if best is None or e.c < best.c:
                    lightest[r] = e

        if not lightest:
            break

        # Two components may pick the same edge; the second join is a no-op.
        for e in lightest.values():
            if dsu.join_sets(e.v, e.w):
                result.add_weighted_edge(e)

        logger.debug(
            f"Borůvka round {rounds}: {len(lightest)} picks, "
            f"{dsu.component_count} components left"
        )

    logger.debug(
        f"Borůvka: n={graph.n()} m={graph.m()} rounds={rounds} -> "
        f"{result.m()} edges, cost={result.total_cost()}"
    )
    return result


def prim_mst(graph: WeightedGraph) -> WeightedGraph:
    """Minimum spanning tree via Prim's algorithm with an indexed d-ary heap.

    Grows a tree from the first vertex. The heap holds one entry per vertex
    outside the tree, ``WeightedEdge(parent, vertex, distance)``, identified
    by the destination vertex so that decrease-key finds the entry after its
    parent has changed. The heap arity follows the average degree
    (see `MSTConfig.heap_arity`). O(E log_d V).

    Args:
        graph: Weighted graph; need not be connected.

    Returns:
        New graph with all vertices and the tree (or forest) edges.
    """
    result = _empty_forest(graph)
    vertices = graph.vertices()
    if not vertices:
        return result

    start = vertices[0]
    dist: Dict[Vertex, float] = {v: math.inf for v in vertices}
    dist[start] = 0.0
    parent: Dict[Vertex, Vertex] = {v: v for v in vertices}

    arity = MST_CONFIG.heap_arity(graph.n(), graph.m())
    heap: IndexedDaryHeap[WeightedEdge] = IndexedDaryHeap(
        arity, key=attrgetter("w"), priority=attrgetter("c")
    )
    for v in vertices:
        heap.push(WeightedEdge(v, v, dist[v]))

    in_tree = set()
    decreases = 0
    while not heap.empty():
        x = heap.pop_min()
        in_tree.add(x.w)
        if x.v != x.w:
            result.add_edge(x.v, x.w, x.c)

        for y in graph.adj_of(x.w):
            if y in in_tree:
                continue
            new_cost = graph.cost(x.w, y)
            if new_cost < dist[y]:
                heap.decrease_key(
                    WeightedEdge(parent[y], y, dist[y]),
                    WeightedEdge(x.w, y, new_cost),
                )
                dist[y] = new_cost
                parent[y] = x.w
                decreases += 1

    logger.debug(
        f"Prim: n={graph.n()} m={graph.m()} arity={arity} "
        f"decrease_keys={decreases} -> {result.m()} edges, cost={result.total_cost()}"
    )
    return result


_ALGORITHMS: Dict[str, Callable[[WeightedGraph], WeightedGraph]] = {
    "kruskal": kruskal_mst,
    "boruvka": boruvka_mst,
    "prim": prim_mst,
}


def minimum_spanning_tree(
    graph: WeightedGraph, algorithm: Optional[str] = None
) -> WeightedGraph:
    """Compute a minimum spanning tree with the named algorithm.

    Args:
        graph: Weighted graph.
        algorithm: One of ``"kruskal"``, ``"boruvka"`` or ``"prim"``; defaults
            to ``MST_CONFIG.default_algorithm``.

    Raises:
        ValueError: If the algorithm name is unknown.
        GraphPreconditionError: As raised by the selected algorithm.
    """
    name = (algorithm or MST_CONFIG.default_algorithm).lower()
    if name not in _ALGORITHMS:
        raise ValueError(
            f"Unknown MST algorithm '{algorithm}'. Expected one of: {', '.join(ALGORITHMS)}."
        )
    return _ALGORITHMS[name](graph)
