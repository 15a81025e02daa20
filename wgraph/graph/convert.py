"""Conversion between WeightedGraph and plain NetworkX graphs.

The cost travels as an edge attribute (``"cost"`` by default), which lets
NetworkX algorithms such as ``nx.minimum_spanning_tree`` run on the same
data.
"""

from typing import Dict, Optional

import networkx as nx

from wgraph.graph.edge import Edge, WeightedEdge
from wgraph.graph.weighted import WeightedGraph
from wgraph.logging import get_logger

logger = get_logger(__name__)


def to_networkx(graph: WeightedGraph, weight: str = "cost") -> nx.Graph:
    """Convert a WeightedGraph to a NetworkX Graph.

    Args:
        graph: The WeightedGraph to convert.
        weight: Edge attribute name that receives the cost.

    Returns:
        A NetworkX Graph with the same vertices (in order) and edges.
    """
    nx_graph = nx.Graph()
    nx_graph.graph.update(graph.graph)
    nx_graph.add_nodes_from(graph.vertices())
    for e in graph.weighted_edges():
        nx_graph.add_edge(e.v, e.w, **{weight: e.c})
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph, weight: str = "cost", default: Optional[float] = 1.0
) -> WeightedGraph:
    """Convert an undirected NetworkX graph to a WeightedGraph.

    Args:
        nx_graph: Source graph. Multi-edges keep the cheapest parallel edge;
            self-loops are dropped.
        weight: Edge attribute name holding the cost.
        default: Cost for edges without ``weight``. When None, such edges
            raise ValueError.

    Returns:
        A new WeightedGraph.

    Raises:
        ValueError: If ``nx_graph`` is directed, or an edge has no cost and
            ``default`` is None.
    """
    if nx_graph.is_directed():
        raise ValueError("Only undirected graphs can be converted.")

    graph = WeightedGraph()
    graph.graph.update(nx_graph.graph)
    for v in nx_graph.nodes:
        graph.add_vertex(v)

    best: Dict[Edge, WeightedEdge] = {}
    for u, v, data in nx_graph.edges(data=True):
        if u == v:
            logger.debug(f"Dropping self-loop on {u!r}")
            continue
        if weight in data:
            cost = float(data[weight])
        elif default is not None:
            cost = float(default)
        else:
            raise ValueError(f"Edge ({u!r}, {v!r}) has no '{weight}' attribute.")
        e = WeightedEdge(u, v, cost)
        if e.edge not in best or cost < best[e.edge].c:
            best[e.edge] = e

    for e in best.values():
        graph.add_weighted_edge(e)
    return graph
