"""Configuration for wgraph algorithms."""

from dataclasses import dataclass

ALGORITHMS = ("kruskal", "boruvka", "prim")


@dataclass
class MSTConfig:
    """Tunables shared by the MST algorithms and their callers."""

    # Smallest fan-out allowed for Prim's heap
    min_heap_arity: int = 2

    # Algorithm used when the caller does not name one
    default_algorithm: str = "kruskal"

    # Absolute tolerance when comparing total tree costs
    cost_tolerance: float = 1e-9

    def heap_arity(self, n_vertices: int, n_edges: int) -> int:
        """Return the heap fan-out for a graph of the given size.

        Dense graphs do many decrease-key operations per extraction, so a
        wider heap (arity close to the average degree ``m / n``) keeps
        sift-ups short while sift-downs stay affordable.
        """
        if n_vertices <= 0:
            return self.min_heap_arity
        return max(self.min_heap_arity, n_edges // n_vertices)

    def costs_equal(self, a: float, b: float) -> bool:
        """Return True when two total costs agree within ``cost_tolerance``."""
        return abs(a - b) <= self.cost_tolerance


# Global configuration instance
MST_CONFIG = MSTConfig()
