"""Shared fixtures: small weighted graphs and a random connected graph builder."""

from __future__ import annotations

import random
from typing import Callable, Optional

import pytest

from wgraph.graph.weighted import WeightedGraph


def build_graph(vertices, triples) -> WeightedGraph:
    g = WeightedGraph()
    for v in vertices:
        g.add_vertex(v)
    for v, w, c in triples:
        assert g.add_edge(v, w, c)
    return g


def random_connected_graph(
    n: int, extra_edges: int, seed: int, max_cost: Optional[int] = 10
) -> WeightedGraph:
    """Random tree on ``0..n-1`` plus up to ``extra_edges`` more edges.

    Integer costs in ``1..max_cost`` make ties common.
    """
    rng = random.Random(seed)
    g = WeightedGraph()
    for v in range(n):
        g.add_vertex(v)
    for v in range(1, n):
        g.add_edge(rng.randrange(v), v, rng.randint(1, max_cost))
    for _ in range(extra_edges):
        v, w = rng.randrange(n), rng.randrange(n)
        g.add_edge(v, w, rng.randint(1, max_cost))
    return g


@pytest.fixture
def square_graph() -> WeightedGraph:
    #       [1]
    #   A ─────── B
    #   │ ╲       │
    # [4]   ╲[3]  │[2]
    #   │     ╲   │
    #   D ─────── C
    #       [1]
    #
    # MST: A-B (1), C-D (1), B-C (2); total 4
    return build_graph(
        "ABCD",
        [("A", "B", 1), ("B", "C", 2), ("C", "D", 1), ("A", "D", 4), ("A", "C", 3)],
    )


@pytest.fixture
def triangle_ties() -> WeightedGraph:
    # Every edge costs 1; any two edges form an MST of cost 2.
    #
    #        A
    #   [1] ╱ ╲ [1]
    #      B───C
    #       [1]
    return build_graph("ABC", [("A", "B", 1), ("B", "C", 1), ("A", "C", 1)])


@pytest.fixture
def two_components() -> WeightedGraph:
    #   A ──[1]── B        C ──[2]── D ──[3]── E
    return build_graph(
        "ABCDE", [("A", "B", 1), ("C", "D", 2), ("D", "E", 3)]
    )


@pytest.fixture
def single_vertex() -> WeightedGraph:
    return build_graph(["A"], [])


@pytest.fixture
def random_graph() -> Callable[..., WeightedGraph]:
    return random_connected_graph


@pytest.fixture
def make_graph() -> Callable[..., WeightedGraph]:
    return build_graph
