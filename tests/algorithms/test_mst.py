"""Tests for Kruskal's, Borůvka's and Prim's MST algorithms."""

import networkx as nx
import pytest

from wgraph.algorithms.mst import (
    boruvka_mst,
    kruskal_mst,
    minimum_spanning_tree,
    prim_mst,
)
from wgraph.config import MST_CONFIG
from wgraph.graph.convert import to_networkx
from wgraph.graph.edge import WeightedEdge
from wgraph.graph.weighted import GraphPreconditionError, WeightedGraph

ALL = [kruskal_mst, boruvka_mst, prim_mst]


def _reference_cost(g: WeightedGraph) -> float:
    tree = nx.minimum_spanning_tree(to_networkx(g), weight="cost")
    return tree.size(weight="cost")


def _assert_spanning_tree(g: WeightedGraph, tree: WeightedGraph) -> None:
    assert tree.vertices() == g.vertices()
    assert tree.m() == max(g.n() - 1, 0)
    assert tree.is_connected()
    if g.n():
        assert nx.is_tree(tree)
    for e in tree.weighted_edges():
        assert g.is_edge(e.v, e.w)
        assert g.cost(e.v, e.w) == e.c


@pytest.mark.parametrize("algorithm", ALL, ids=lambda f: f.__name__)
class TestEveryAlgorithm:
    def test_square(self, algorithm, square_graph):
        tree = algorithm(square_graph)
        _assert_spanning_tree(square_graph, tree)
        assert set(tree.weighted_edges()) == {
            WeightedEdge("A", "B", 1.0),
            WeightedEdge("C", "D", 1.0),
            WeightedEdge("B", "C", 2.0),
        }
        assert tree.total_cost() == pytest.approx(4.0)

    def test_single_vertex(self, algorithm, single_vertex):
        tree = algorithm(single_vertex)
        assert tree.vertices() == ["A"]
        assert tree.m() == 0
        assert tree.total_cost() == 0

    def test_empty_graph(self, algorithm):
        tree = algorithm(WeightedGraph())
        assert tree.n() == 0 and tree.m() == 0

    def test_ties_still_give_minimum_cost(self, algorithm, triangle_ties):
        tree = algorithm(triangle_ties)
        _assert_spanning_tree(triangle_ties, tree)
        assert tree.total_cost() == pytest.approx(2.0)

    def test_all_equal_costs_on_complete_graph(self, algorithm):
        g = WeightedGraph()
        for v in range(7):
            g.add_vertex(v)
        for v in range(7):
            for w in range(v + 1, 7):
                g.add_edge(v, w, 3)
        tree = algorithm(g)
        _assert_spanning_tree(g, tree)
        assert tree.total_cost() == pytest.approx(18.0)

    def test_input_not_modified(self, algorithm, square_graph):
        before = square_graph.weighted_edges()
        algorithm(square_graph)
        assert square_graph.weighted_edges() == before
        assert square_graph.vertices() == ["A", "B", "C", "D"]

    @pytest.mark.parametrize(
        "n,extra,seed", [(2, 0, 1), (10, 5, 2), (30, 60, 3), (60, 400, 4), (80, 40, 5)]
    )
    def test_matches_reference_on_random_graphs(
        self, algorithm, random_graph, n, extra, seed
    ):
        g = random_graph(n, extra, seed)
        tree = algorithm(g)
        _assert_spanning_tree(g, tree)
        assert tree.total_cost() == pytest.approx(_reference_cost(g))

    def test_fractional_costs(self, algorithm, make_graph):
        g = make_graph(
            [1, 2, 3, 4],
            [(1, 2, 0.5), (2, 3, 0.25), (3, 4, 0.125), (1, 4, 0.1), (1, 3, 2.0)],
        )
        tree = algorithm(g)
        _assert_spanning_tree(g, tree)
        assert tree.total_cost() == pytest.approx(0.1 + 0.125 + 0.25)

    def test_negative_costs(self, algorithm, make_graph):
        g = make_graph("abc", [("a", "b", -2), ("b", "c", 5), ("a", "c", -1)])
        tree = algorithm(g)
        assert tree.total_cost() == pytest.approx(-3.0)


@pytest.mark.parametrize("seed", range(6))
def test_algorithms_agree_on_total_cost(random_graph, seed):
    g = random_graph(50, 150, seed, max_cost=4)
    costs = [f(g).total_cost() for f in ALL]
    assert all(MST_CONFIG.costs_equal(costs[0], c) for c in costs[1:])


def test_kruskal_and_boruvka_pick_the_same_tree_on_ties(random_graph):
    g = random_graph(40, 120, 11, max_cost=3)
    assert kruskal_mst(g).weighted_edges() == boruvka_mst(g).weighted_edges()


@pytest.mark.parametrize("start", ["A", "B", "C", "D"])
def test_prim_cost_independent_of_start_vertex(make_graph, start):
    triples = [("A", "B", 1), ("B", "C", 2), ("C", "D", 1), ("A", "D", 4), ("A", "C", 3)]
    order = [start] + [v for v in "ABCD" if v != start]
    g = make_graph(order, triples)
    tree = prim_mst(g)
    assert tree.vertices() == order
    assert tree.total_cost() == pytest.approx(4.0)


@pytest.mark.parametrize("algorithm", [kruskal_mst, boruvka_mst])
def test_disconnected_graph_is_precondition_error(algorithm, two_components):
    with pytest.raises(GraphPreconditionError, match="2 components"):
        algorithm(two_components)


def test_prim_on_disconnected_graph_returns_spanning_forest(two_components):
    forest = prim_mst(two_components)
    assert forest.vertices() == ["A", "B", "C", "D", "E"]
    assert set(forest.weighted_edges()) == {
        WeightedEdge("A", "B", 1.0),
        WeightedEdge("C", "D", 2.0),
        WeightedEdge("D", "E", 3.0),
    }
    assert forest.ncc() == 2


def test_prim_heap_arity_follows_density(monkeypatch, random_graph):
    seen = []
    from wgraph.algorithms import mst

    real = mst.IndexedDaryHeap

    def spy(arity, key=None, priority=None):
        seen.append(arity)
        return real(arity, key=key, priority=priority)

    monkeypatch.setattr(mst, "IndexedDaryHeap", spy)
    sparse = random_graph(20, 0, 1)
    dense = random_graph(20, 400, 1)
    prim_mst(sparse)
    prim_mst(dense)
    assert seen[0] == 2
    assert seen[1] == max(2, dense.m() // dense.n())
    assert seen[1] > 2


def test_minimum_spanning_tree_dispatch(square_graph):
    for name in ("kruskal", "boruvka", "prim", "PRIM"):
        assert minimum_spanning_tree(square_graph, name).total_cost() == pytest.approx(4.0)
    assert minimum_spanning_tree(square_graph).total_cost() == pytest.approx(4.0)
    with pytest.raises(ValueError, match="Unknown MST algorithm"):
        minimum_spanning_tree(square_graph, "dijkstra")


def test_debug_logging(caplog, square_graph):
    caplog.set_level("DEBUG", logger="wgraph.algorithms.mst")
    boruvka_mst(square_graph)
    prim_mst(square_graph)
    messages = " ".join(r.getMessage() for r in caplog.records)
    assert "Borůvka round 1" in messages
    assert "Prim: n=4 m=5" in messages
