"""Graph primitives.

This package provides the strict undirected substrate `UndirectedGraph`, the
cost-carrying `WeightedGraph`, the `Edge`/`WeightedEdge` value types and
NetworkX conversion helpers (`convert`).
"""

from wgraph.graph.edge import Edge, WeightedEdge
from wgraph.graph.undirected import UndirectedGraph
from wgraph.graph.weighted import GraphPreconditionError, WeightedGraph

__all__ = [
    "Edge",
    "WeightedEdge",
    "UndirectedGraph",
    "WeightedGraph",
    "GraphPreconditionError",
]
