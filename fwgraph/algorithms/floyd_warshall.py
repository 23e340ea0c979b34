"""Floyd-Warshall all-pairs shortest paths on undirected graphs.

Two engines share the same preconditions and seeding rules:

- `floyd_warshall` tracks lengths only. Unreachable pairs hold the
  ``UNREACHABLE`` sentinel and sums use saturating addition.
- `floyd_warshall_paths` also records the intermediate nodes of every
  shortest path. Reachability is an explicit flag on each `Path`, and a
  sum is only formed when both legs exist.

Notes:
    The intermediate node ``k`` is always the outermost loop. During pass
    ``k`` the entries ``(x, k)`` cannot change (a route from ``x`` to ``k``
    through ``k`` is the route itself), so the row of ``k`` is read once per
    pass. Both engines visit each unordered pair once since the matrix is
    symmetric.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from __future__ import annotations

from time import perf_counter
from typing import Optional, Tuple

from fwgraph.config import APSP_CONFIG, ApspConfig
from fwgraph.graph.view import GraphView
from fwgraph.logging import get_logger
from fwgraph.matrix.path import Path
from fwgraph.matrix.path_matrix import DistanceMatrix, PathMatrix
from fwgraph.types import (
    UNREACHABLE,
    DuplicateEdgePolicy,
    Label,
    NodeIndex,
    Weight,
    saturating_add,
)

logger = get_logger(__name__)


def _check_preconditions(view: GraphView, config: ApspConfig) -> None:
    if view.is_directed():
        raise ValueError("Floyd-Warshall here requires an undirected graph.")
    config.check_node_count(view.node_count)


def _check_edge(u: NodeIndex, v: NodeIndex, weight: Weight, n: int) -> None:
    if not (0 <= u < n and 0 <= v < n):
        raise IndexError(f"Edge ({u}, {v}) references a node outside [0, {n})")
    if weight < 0:
        raise ValueError(f"Edge ({u}, {v}) has negative weight {weight}")
    if weight >= UNREACHABLE:
        raise ValueError(
            f"Edge ({u}, {v}) weight {weight} is not below the unreachable sentinel"
        )


def floyd_warshall(
    view: GraphView, config: Optional[ApspConfig] = None
) -> DistanceMatrix:
    """Compute shortest distances between every pair of nodes.

    Args:
        view: Undirected graph view with non-negative integer weights.
        config: Optional configuration; defaults to ``APSP_CONFIG``.

    Returns:
        DistanceMatrix with the shortest distance for every reachable pair
        and ``UNREACHABLE`` for the rest. ``distance(v, v)`` is 0.

    Raises:
        ValueError: If the view is directed, has an edge weight that is
            negative or at least ``UNREACHABLE``, or exceeds
            ``config.max_nodes``.
        IndexError: If an edge references a node outside ``[0, n)``.

    Complexity: O(n^3) time, O(n^2) memory.

    Example:
        >>> view = GraphView.from_edges([(0, 1, 1), (1, 2, 1), (0, 2, 3)])
        >>> floyd_warshall(view).distance(0, 2)
        2
    """
    cfg = config or APSP_CONFIG
    _check_preconditions(view, cfg)

    n = view.node_count
    started = perf_counter()
    m = DistanceMatrix(n)

    for v in view.node_identifiers():
        m.set(v, v, 0)

    edge_count = 0
    for u, v, weight in view.edge_references():
        _check_edge(u, v, weight, n)
        edge_count += 1
        if u == v:
            continue
        if cfg.duplicate_edges == DuplicateEdgePolicy.LAST_WINS:
            m.set(u, v, weight)
        elif weight < m.get(u, v):
            m.set(u, v, weight)

    for k in view.node_identifiers():
        row_k = [m.get(k, x) for x in range(n)]
        for n1 in range(n):
            d1 = row_k[n1]
            for n2 in range(n1 + 1, n):
                candidate = saturating_add(d1, row_k[n2])
                if candidate < m.get(n1, n2):
                    m.set(n1, n2, candidate)

    logger.debug(
        "Distance-only Floyd-Warshall: %d nodes, %d edges in %.3fs",
        n,
        edge_count,
        perf_counter() - started,
    )
    return m


def _splice(
    n1: NodeIndex,
    leg1: Path,
    k: NodeIndex,
    label_k: Label,
    leg2: Path,
    n2: NodeIndex,
) -> Tuple[Label, ...]:
    """Join the walks ``n1 -> k`` and ``k -> n2`` with ``k`` in between.

    A stored leg walks from its smaller endpoint to its larger one, so it is
    reversed whenever the walk runs the other way.
    """
    first = leg1.nodes if n1 < k else leg1.nodes[::-1]
    second = leg2.nodes if k < n2 else leg2.nodes[::-1]
    return first + (label_k,) + second


def floyd_warshall_paths(
    view: GraphView, config: Optional[ApspConfig] = None
) -> PathMatrix:
    """Compute shortest distances and paths between every pair of nodes.

    Each improvement through an intermediate node ``k`` rebuilds the pair's
    path as path(n1, k) + [label(k)] + path(k, n2) and writes it as one new
    `Path` record.

    Args:
        view: Undirected graph view with non-negative integer weights. Its
            labels (or raw node ids when it has none) fill the paths.
        config: Optional configuration; defaults to ``APSP_CONFIG``.

    Returns:
        PathMatrix where ``get_path_iter(i, j)`` walks from ``min(i, j)`` to
        ``max(i, j)``. Every node has an existing, empty path to itself.

    Raises:
        ValueError: If the view is directed, has an edge weight that is
            negative or at least ``UNREACHABLE``, or exceeds
            ``config.max_nodes``.
        IndexError: If an edge references a node outside ``[0, n)``.

    Complexity: O(n^3) relaxations; each improvement also copies a path of
    up to n - 2 labels.

    Example:
        >>> view = GraphView.from_edges([(0, 1, 1), (1, 2, 1), (0, 2, 3)])
        >>> m = floyd_warshall_paths(view)
        >>> m.get_path_len(0, 2), list(m.get_path_iter(0, 2))
        (2, [1])
    """
    cfg = config or APSP_CONFIG
    _check_preconditions(view, cfg)

    n = view.node_count
    started = perf_counter()
    m = PathMatrix(n)

    for v in view.node_identifiers():
        m._replace_path(v, v, Path.direct(0))

    edge_count = 0
    for u, v, weight in view.edge_references():
        _check_edge(u, v, weight, n)
        edge_count += 1
        if u == v:
            continue
        current = m.get_path(u, v)
        if (
            cfg.duplicate_edges == DuplicateEdgePolicy.LAST_WINS
            or not current.exists
            or weight < current.cost
        ):
            m._replace_path(u, v, Path.direct(weight))

    updates = 0
    for k in view.node_identifiers():
        via_k = [m.get_path(k, x) for x in range(n)]
        label_k = view.label(k)
        for n1 in range(n):
            leg1 = via_k[n1]
            if n1 == k or not leg1.exists:
                continue
            for n2 in range(n1 + 1, n):
                leg2 = via_k[n2]
                if n2 == k or not leg2.exists:
                    continue
                candidate = leg1.cost + leg2.cost
                if candidate >= UNREACHABLE:
                    continue
                current = m.get_path(n1, n2)
                if current.exists and candidate >= current.cost:
                    continue
                nodes = _splice(n1, leg1, k, label_k, leg2, n2)
                m._replace_path(n1, n2, Path(nodes, candidate, True))
                updates += 1

    logger.debug(
        "Path Floyd-Warshall: %d nodes, %d edges, %d path updates in %.3fs",
        n,
        edge_count,
        updates,
        perf_counter() - started,
    )
    return m
