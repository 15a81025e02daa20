"""Text serialization for weighted graphs.

The format is whitespace-separated tokens::

    n m
    v1 v2 ... vn
    v w cost      (m lines)

Line breaks carry no meaning; only token order does. Vertex tokens are
converted with a caller-supplied ``vertex_type`` (``str`` by default), so
vertex names must not contain whitespace.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, List, TextIO, Union

from wgraph.graph.edge import Vertex, format_cost
from wgraph.graph.weighted import WeightedGraph
from wgraph.logging import get_logger

logger = get_logger(__name__)

VertexParser = Callable[[str], Vertex]


def _take(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"Unexpected end of input while reading {what}.") from None


def _parse_count(token: str, what: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise ValueError(f"Invalid {what} '{token}': expected an integer.") from None
    if value < 0:
        raise ValueError(f"Invalid {what} {value}: must be non-negative.")
    return value


def parse_tokens(
    tokens: List[str], vertex_type: VertexParser = str
) -> WeightedGraph:
    """Build a graph from an already tokenized input.

    Edges that the graph rejects (duplicates, unknown endpoints, self-loops)
    are skipped with a warning.

    Args:
        tokens: Input tokens in file order.
        vertex_type: Converter applied to every vertex token.

    Returns:
        WeightedGraph: The parsed graph.

    Raises:
        ValueError: If tokens are missing or a count/cost is malformed.
    """
    it = iter(tokens)
    n = _parse_count(_take(it, "vertex count"), "vertex count")
    m = _parse_count(_take(it, "edge count"), "edge count")

    graph = WeightedGraph()
    for i in range(n):
        graph.add_vertex(vertex_type(_take(it, f"vertex {i + 1} of {n}")))

    for i in range(m):
        what = f"edge {i + 1} of {m}"
        v = vertex_type(_take(it, what))
        w = vertex_type(_take(it, what))
        token = _take(it, what)
        try:
            cost = float(token)
        except ValueError:
            raise ValueError(
                f"Invalid cost '{token}' for {what} ({v}, {w}): expected a number."
            ) from None
        if not graph.add_edge(v, w, cost):
            logger.warning(f"Skipping {what} ({v}, {w}, {token}): rejected by graph")

    extra = sum(1 for _ in it)
    if extra:
        logger.warning(f"Ignoring {extra} trailing tokens after {m} edges")

    logger.debug(f"Parsed graph with {graph.n()} vertices and {graph.m()} edges")
    return graph


def loads(text: str, vertex_type: VertexParser = str) -> WeightedGraph:
    """Parse a graph from a string."""
    return parse_tokens(text.split(), vertex_type)


def load(stream: TextIO, vertex_type: VertexParser = str) -> WeightedGraph:
    """Parse a graph from a text stream."""
    return loads(stream.read(), vertex_type)


def dumps(graph: WeightedGraph) -> str:
    """Serialize ``graph`` in the text format.

    Vertices appear in graph order; each undirected edge appears once, in
    ``weighted_edges()`` order.
    """
    lines = [
        f"{graph.n()} {graph.m()}",
        " ".join(str(v) for v in graph.vertices()),
    ]
    lines.extend(
        f"{e.v} {e.w} {format_cost(e.c)}" for e in graph.weighted_edges()
    )
    return "\n".join(lines) + "\n"


def dump(graph: WeightedGraph, stream: TextIO) -> None:
    """Write ``graph`` to a text stream in the text format."""
    stream.write(dumps(graph))


def format_graph(graph: WeightedGraph) -> str:
    """Return the human-readable rendering of ``graph`` (same as ``str``)."""
    return str(graph)


def read_file(
    path: Union[str, Path], vertex_type: VertexParser = str
) -> WeightedGraph:
    """Read a graph from ``path``."""
    path = Path(path)
    logger.debug(f"Reading graph from: {path}")
    return loads(path.read_text(), vertex_type)


def write_file(graph: WeightedGraph, path: Union[str, Path]) -> None:
    """Write ``graph`` to ``path`` in the text format."""
    path = Path(path)
    logger.debug(f"Writing graph to: {path}")
    path.write_text(dumps(graph))
