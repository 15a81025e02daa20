"""Algorithms and their supporting data structures."""

from wgraph.algorithms.dary_heap import IndexedDaryHeap
from wgraph.algorithms.dsu import DisjointSets
from wgraph.algorithms.mst import (
    boruvka_mst,
    kruskal_mst,
    minimum_spanning_tree,
    prim_mst,
)

__all__ = [
    "IndexedDaryHeap",
    "DisjointSets",
    "kruskal_mst",
    "boruvka_mst",
    "prim_mst",
    "minimum_spanning_tree",
]
