"""Name-addressed query surface over a finished all-pairs computation.

`ShortestPaths` wraps the packed matrix produced by an engine together with
the `NodeMap` that produced its indices. Queries take node names, and
`path()` returns the intermediate nodes in the direction asked for, even
though the matrix stores each pair only once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Optional, Union

from fwgraph.graph.nx import NodeMap
from fwgraph.matrix.path_matrix import DistanceMatrix, PathMatrix
from fwgraph.types import UNREACHABLE, Label, Weight


@dataclass(frozen=True)
class ShortestPaths:
    """All-pairs shortest-path results addressed by node name.

    Attributes:
        matrix: Engine output; a `PathMatrix` when paths were tracked.
        node_map: Mapping between node names and matrix indices.
    """

    matrix: Union[DistanceMatrix, PathMatrix]
    node_map: NodeMap

    @property
    def has_paths(self) -> bool:
        return isinstance(self.matrix, PathMatrix)

    @property
    def nodes(self) -> List[Hashable]:
        """Node names in index order."""
        return [self.node_map.to_name[i] for i in range(len(self.node_map))]

    def distance(self, u: Hashable, v: Hashable) -> Weight:
        """Return the shortest distance, or ``UNREACHABLE``.

        Raises:
            KeyError: If either node is unknown.
        """
        return self.matrix.distance(self.node_map.index(u), self.node_map.index(v))

    def path_exists(self, u: Hashable, v: Hashable) -> bool:
        i, j = self.node_map.index(u), self.node_map.index(v)
        if isinstance(self.matrix, PathMatrix):
            return self.matrix.does_path_exist(i, j)
        return self.matrix.is_reachable(i, j)

    def path(self, u: Hashable, v: Hashable) -> List[Label]:
        """Return the intermediate nodes walking from ``u`` to ``v``.

        Empty when the nodes are adjacent, identical or not connected; use
        `path_exists` to tell these apart.

        Raises:
            KeyError: If either node is unknown.
            ValueError: If the results were computed without paths.
        """
        if not isinstance(self.matrix, PathMatrix):
            raise ValueError("Paths were not tracked for these results.")
        i, j = self.node_map.index(u), self.node_map.index(v)
        stored = self.matrix.get_path_iter(i, j)
        if i > j:
            return list(reversed(stored))
        return list(stored)

    def full_path(self, u: Hashable, v: Hashable) -> Optional[List[Label]]:
        """Return ``[u, *path(u, v), v]``, ``[u]`` when ``u == v``, or None."""
        if not self.path_exists(u, v):
            return None
        if u == v:
            return [u]
        return [u, *self.path(u, v), v]

    def to_dict(self) -> Dict[Hashable, Dict[Hashable, Optional[Weight]]]:
        """Return ``{u: {v: distance}}`` with None for unreachable pairs."""
        result: Dict[Hashable, Dict[Hashable, Optional[Weight]]] = {}
        names = self.nodes
        for i, u in enumerate(names):
            row: Dict[Hashable, Optional[Weight]] = {}
            for j, v in enumerate(names):
                d = self.matrix.distance(i, j)
                row[v] = None if d == UNREACHABLE else d
            result[u] = row
        return result

    def paths_dict(self) -> Dict[Hashable, Dict[Hashable, Dict[str, Any]]]:
        """Return ``{u: {v: entry}}`` for each unordered pair, once.

        Each pair appears under the node that comes first in index order, so
        ``entries[u][v]`` exists only when ``u`` precedes ``v`` in `nodes`. An
        entry holds ``distance`` (None when unreachable), ``exists`` and, when
        paths were tracked, ``path`` as a list of strings.
        """
        entries: Dict[Hashable, Dict[Hashable, Dict[str, Any]]] = {}
        names = self.nodes
        for i, u in enumerate(names):
            for v in names[i + 1 :]:
                exists = self.path_exists(u, v)
                entry: Dict[str, Any] = {
                    "distance": self.distance(u, v) if exists else None,
                    "exists": exists,
                }
                if self.has_paths:
                    entry["path"] = [str(x) for x in self.path(u, v)]
                entries.setdefault(u, {})[v] = entry
        return entries

    def format_table(self) -> str:
        """Render an ASCII distance table, ``-`` marking unreachable pairs."""
        names = [str(n) for n in self.nodes]
        if not names:
            return ""
        cells = [
            ["-" if d is None else str(d) for d in row.values()]
            for row in self.to_dict().values()
        ]
        width = max(len(s) for s in names + [c for row in cells for c in row])
        lines = [" " * width + " | " + " ".join(f"{n:>{width}}" for n in names)]
        lines.append("-" * width + "-+-" + "-" * ((width + 1) * len(names) - 1))
        for name, row in zip(names, cells):
            lines.append(f"{name:>{width}} | " + " ".join(f"{c:>{width}}" for c in row))
        return "\n".join(lines)

    def dump(self) -> str:
        """Raw triangular dump of the underlying matrix."""
        return self.matrix.format_triangle()

    def __str__(self) -> str:
        return self.format_table()
