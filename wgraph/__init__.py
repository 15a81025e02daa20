"""wgraph: minimum spanning trees over weighted undirected graphs.

wgraph provides a weighted graph type on top of NetworkX and three classical
MST algorithms, each built on its own supporting structure.

Primary API:
    WeightedGraph - Undirected graph with per-edge costs
    kruskal_mst(), boruvka_mst(), prim_mst() - MST algorithms
    minimum_spanning_tree() - Dispatch by algorithm name
    DisjointSets, IndexedDaryHeap - Supporting data structures
    load()/dump() and friends in ``wgraph.io`` - Text format

Example:
    from wgraph import WeightedGraph

    g = WeightedGraph()
    for v in "ABCD":
        g.add_vertex(v)
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 2)
    g.add_edge("C", "D", 1)
    g.add_edge("A", "D", 4)

    tree = g.kruskal_mst()
    tree.total_cost()  # 4.0
"""

from __future__ import annotations

from wgraph import cli, io, logging
from wgraph._version import __version__
from wgraph.algorithms import (
    DisjointSets,
    IndexedDaryHeap,
    boruvka_mst,
    kruskal_mst,
    minimum_spanning_tree,
    prim_mst,
)
from wgraph.config import MST_CONFIG, MSTConfig
from wgraph.graph import (
    Edge,
    GraphPreconditionError,
    UndirectedGraph,
    WeightedEdge,
    WeightedGraph,
)
from wgraph.graph.convert import from_networkx, to_networkx

__all__ = [
    # Version
    "__version__",
    # Graphs
    "WeightedGraph",
    "UndirectedGraph",
    "Edge",
    "WeightedEdge",
    "GraphPreconditionError",
    # Algorithms
    "kruskal_mst",
    "boruvka_mst",
    "prim_mst",
    "minimum_spanning_tree",
    # Data structures
    "DisjointSets",
    "IndexedDaryHeap",
    # Configuration
    "MSTConfig",
    "MST_CONFIG",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "io",
    "logging",
]
