"""fwgraph: all-pairs shortest paths on undirected weighted graphs.

Floyd-Warshall over a triangular-packed symmetric matrix, with optional
reconstruction of every shortest path.

Primary API:
    all_pairs_shortest_paths() - Run on a NetworkX graph, query by node name
    floyd_warshall() / floyd_warshall_paths() - Engines over a GraphView
    GraphView, from_networkx() - Engine input and its NetworkX adapter
    PackedSymmetricMatrix, DistanceMatrix, PathMatrix, Path - Result storage

Example:
    import networkx as nx
    from fwgraph import all_pairs_shortest_paths

    G = nx.Graph()
    G.add_weighted_edges_from([("a", "b", 1), ("b", "c", 1), ("a", "c", 3)])

    sp = all_pairs_shortest_paths(G)
    sp.distance("a", "c")   # 2
    sp.path("a", "c")       # ['b']
"""

from __future__ import annotations

from fwgraph import logging
from fwgraph._version import __version__
from fwgraph.algorithms.floyd_warshall import floyd_warshall, floyd_warshall_paths
from fwgraph.analysis import all_pairs_shortest_paths
from fwgraph.config import APSP_CONFIG, ApspConfig
from fwgraph.graph.nx import NodeMap, from_networkx
from fwgraph.graph.view import GraphView
from fwgraph.matrix.packed import (
    PackedSymmetricMatrix,
    triangular_index,
    triangular_size,
)
from fwgraph.matrix.path import Path
from fwgraph.matrix.path_matrix import DistanceMatrix, PathMatrix
from fwgraph.results import ShortestPaths
from fwgraph.types import UNREACHABLE, DuplicateEdgePolicy, NoPathError

__all__ = [
    # Version
    "__version__",
    # Analysis (primary API)
    "all_pairs_shortest_paths",
    "ShortestPaths",
    # Engines
    "floyd_warshall",
    "floyd_warshall_paths",
    # Inputs
    "GraphView",
    "NodeMap",
    "from_networkx",
    # Storage
    "PackedSymmetricMatrix",
    "DistanceMatrix",
    "PathMatrix",
    "Path",
    "triangular_index",
    "triangular_size",
    # Configuration and types
    "ApspConfig",
    "APSP_CONFIG",
    "DuplicateEdgePolicy",
    "NoPathError",
    "UNREACHABLE",
    # Utilities
    "logging",
]
