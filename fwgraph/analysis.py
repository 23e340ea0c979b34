"""One-call entry point from a NetworkX graph to queryable results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from fwgraph.algorithms.floyd_warshall import floyd_warshall, floyd_warshall_paths
from fwgraph.config import APSP_CONFIG, ApspConfig
from fwgraph.graph.nx import from_networkx
from fwgraph.logging import get_logger
from fwgraph.results import ShortestPaths

if TYPE_CHECKING:
    import networkx as nx

logger = get_logger(__name__)


def all_pairs_shortest_paths(
    G: "nx.Graph",
    *,
    weight_attr: Optional[str] = None,
    label_attr: Optional[str] = None,
    with_paths: bool = True,
    config: Optional[ApspConfig] = None,
) -> ShortestPaths:
    """Run Floyd-Warshall on an undirected NetworkX graph.

    Args:
        G: Undirected NetworkX graph (``Graph`` or ``MultiGraph``).
        weight_attr: Edge attribute with integer weights; defaults to
            ``config.weight_attr``.
        label_attr: Node attribute used as the path label; node names when None.
        with_paths: Track intermediate nodes (path engine) or lengths only.
        config: Optional configuration; defaults to ``APSP_CONFIG``.

    Returns:
        ShortestPaths addressed by node name.

    Raises:
        TypeError: If G is not a NetworkX graph.
        ValueError: If G is directed or has a negative weight.

    Example:
        >>> import networkx as nx
        >>> G = nx.Graph()
        >>> G.add_weighted_edges_from([("a", "b", 1), ("b", "c", 1), ("a", "c", 3)])
        >>> sp = all_pairs_shortest_paths(G)
        >>> sp.distance("a", "c"), sp.path("a", "c")
        (2, ['b'])
    """
    cfg = config or APSP_CONFIG
    cfg.validate()
    view, node_map = from_networkx(
        G,
        weight_attr=weight_attr or cfg.weight_attr,
        default_weight=cfg.default_weight,
        label_attr=label_attr,
    )
    logger.debug(
        "Computing all-pairs shortest %s for %d nodes",
        "paths" if with_paths else "distances",
        view.node_count,
    )
    engine = floyd_warshall_paths if with_paths else floyd_warshall
    return ShortestPaths(matrix=engine(view, cfg), node_map=node_map)
