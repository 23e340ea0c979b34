"""Minimal read-only graph view consumed by the Floyd-Warshall engines.

The engines never see a host graph library. They read node count, integer
edge triples, the directed flag and optional per-node labels through
`GraphView`; adapters such as `fwgraph.graph.nx.from_networkx` build one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence

from fwgraph.types import EdgeTriple, Label, NodeIndex


@dataclass(frozen=True)
class GraphView:
    """Dense-indexed, read-only snapshot of a weighted graph.

    Attributes:
        node_count: Number of nodes; node ids are ``0 .. node_count - 1``.
        edges: ``(source, target, weight)`` triples over node ids.
        directed: Whether the source graph was directed.
        labels: Optional label per node id, stored inside reconstructed
            paths. When absent, paths hold raw node ids.
    """

    node_count: int
    edges: List[EdgeTriple] = field(default_factory=list)
    directed: bool = False
    labels: Optional[List[Label]] = None

    def __post_init__(self) -> None:
        if self.node_count < 0:
            raise ValueError(f"node_count must be non-negative, got {self.node_count}")
        if self.labels is not None and len(self.labels) != self.node_count:
            raise ValueError(
                f"Expected {self.node_count} labels, got {len(self.labels)}"
            )

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[EdgeTriple],
        node_count: Optional[int] = None,
        labels: Optional[Sequence[Label]] = None,
    ) -> GraphView:
        """Build an undirected view from edge triples.

        Args:
            edges: ``(u, v, weight)`` triples over integer node ids.
            node_count: Number of nodes. Defaults to one more than the largest
                id seen in ``edges`` (or ``len(labels)`` when given).
            labels: Optional per-node labels.

        Example:
            >>> view = GraphView.from_edges([(0, 1, 1), (1, 2, 1)])
            >>> view.node_count
            3
        """
        edge_list = [(int(u), int(v), int(w)) for u, v, w in edges]
        if node_count is None:
            if labels is not None:
                node_count = len(labels)
            else:
                node_count = 1 + max((max(u, v) for u, v, _ in edge_list), default=-1)
        return cls(
            node_count=node_count,
            edges=edge_list,
            labels=list(labels) if labels is not None else None,
        )

    def node_identifiers(self) -> Iterator[NodeIndex]:
        """Yield every node id exactly once."""
        return iter(range(self.node_count))

    def edge_references(self) -> Iterator[EdgeTriple]:
        """Yield ``(source, target, weight)`` for every edge."""
        return iter(self.edges)

    def is_directed(self) -> bool:
        return self.directed

    @property
    def has_labels(self) -> bool:
        return self.labels is not None

    def label(self, node: NodeIndex) -> Label:
        """Return the label stored in paths for ``node`` (its id if unlabeled)."""
        if self.labels is None:
            return node
        return self.labels[node]
