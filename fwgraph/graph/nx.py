"""NetworkX graph adapter.

Converts a NetworkX graph into the `GraphView` consumed by the engines, and
returns a `NodeMap` for translating results back to node names.

Example:
    >>> import networkx as nx
    >>> from fwgraph.graph.nx import from_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", weight=2)
    >>> view, node_map = from_networkx(G)
    >>> view.edges
    [(0, 1, 2)]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple, Union

from fwgraph.graph.view import GraphView
from fwgraph.types import EdgeTriple, Label

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Attributes:
        to_index: Maps original node names to integer indices.
        to_name: Maps integer indices back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def index(self, name: Hashable) -> int:
        """Return the index of ``name``.

        Raises:
            KeyError: If the node is unknown.
        """
        try:
            return self.to_index[name]
        except KeyError:
            raise KeyError(f"Node '{name}' is not in the graph.") from None

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: int = 1,
    label_attr: Optional[str] = None,
) -> Tuple[GraphView, NodeMap]:
    """Convert a NetworkX graph to a `GraphView`.

    Nodes are sorted by ``str`` for deterministic indexing. Parallel edges of
    a ``MultiGraph`` are passed through unchanged; the engine's duplicate
    edge policy decides which weight is kept. Directed graphs convert to a
    directed view, which the engines reject.

    Args:
        G: NetworkX graph (Graph, MultiGraph, DiGraph or MultiDiGraph).
        weight_attr: Edge attribute holding the integer weight. Floats are
            rejected rather than truncated.
        default_weight: Weight used when the attribute is missing.
        label_attr: Node attribute used as the path label. When None, or when
            a node lacks the attribute, the node name is used.

    Returns:
        Tuple of (view, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph.
        ValueError: If an edge weight is a bool or not an integer.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (Graph, MultiGraph, DiGraph, MultiDiGraph), "
            f"got {type(G).__name__}"
        )

    node_names = sorted(G.nodes(), key=str)
    node_map = NodeMap.from_names(node_names)

    labels: List[Label] = []
    for name in node_names:
        if label_attr is None:
            labels.append(name)
        else:
            labels.append(G.nodes[name].get(label_attr, name))

    edges: List[EdgeTriple] = []
    for u, v, data in G.edges(data=True):
        weight = data.get(weight_attr, default_weight)
        if isinstance(weight, bool) or not isinstance(weight, Integral):
            raise ValueError(
                f"Edge ('{u}', '{v}') weight must be an integer, got {weight!r}"
            )
        weight = int(weight)
        edges.append((node_map.to_index[u], node_map.to_index[v], weight))

    view = GraphView(
        node_count=len(node_names),
        edges=edges,
        directed=G.is_directed(),
        labels=labels,
    )
    return view, node_map
