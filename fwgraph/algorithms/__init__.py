"""All-pairs shortest-path engines."""

from fwgraph.algorithms.floyd_warshall import floyd_warshall, floyd_warshall_paths

__all__ = ["floyd_warshall", "floyd_warshall_paths"]
