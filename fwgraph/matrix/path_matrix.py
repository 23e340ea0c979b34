"""Distance and path specializations of the packed symmetric matrix."""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from fwgraph.matrix.packed import PackedSymmetricMatrix
from fwgraph.matrix.path import Path
from fwgraph.types import UNREACHABLE, Label, Weight


class DistanceMatrix(PackedSymmetricMatrix[Weight]):
    """Shortest distances for every node pair.

    Unreachable pairs hold the ``UNREACHABLE`` sentinel.
    """

    def __init__(self, n: int) -> None:
        super().__init__(n, UNREACHABLE)

    def distance(self, i: int, j: int) -> Weight:
        return self.get(i, j)

    def is_reachable(self, i: int, j: int) -> bool:
        return self.get(i, j) != UNREACHABLE

    def format_slot(self, value: Weight) -> str:
        return "inf" if value == UNREACHABLE else str(value)


class PathMatrix(PackedSymmetricMatrix[Path]):
    """Shortest path (intermediate nodes plus length) for every node pair.

    Paths are stored under the canonical key ``(min(i, j), max(i, j))`` and
    walk from the smaller to the larger index. Callers asking for the walk in
    the other direction reverse the sequence themselves.

    Example:
        >>> m = PathMatrix(3)
        >>> m.does_path_exist(0, 2)
        False
        >>> m.set_path_len(2, 0, 4)
        >>> m.get_path_len(0, 2)
        4
    """

    def __init__(self, n: int) -> None:
        super().__init__(n, default_factory=Path)

    def get_path_len(self, i: int, j: int) -> Weight:
        """Return the shortest path length between ``i`` and ``j``.

        Raises:
            NoPathError: If the nodes are not connected.
        """
        return self.get(i, j).length

    def get_path(self, i: int, j: int) -> Path:
        """Return the (immutable) path record for ``(i, j)``."""
        return self.get(i, j)

    def get_path_iter(self, i: int, j: int) -> Sequence[Label]:
        """Return the intermediate nodes for ``(i, j)`` in canonical order.

        The result walks from ``min(i, j)`` to ``max(i, j)`` regardless of the
        argument order. It is an immutable sequence, so it can be iterated
        any number of times and reversed with ``reversed()``.
        """
        return self.get(i, j).nodes

    def does_path_exist(self, i: int, j: int) -> bool:
        return self.get(i, j).exists

    def set_path_len(self, i: int, j: int, value: Weight) -> None:
        """Set the length for ``(i, j)`` and mark the pair connected."""
        self.set(i, j, replace(self.get(i, j), cost=value, exists=True))

    def distance(self, i: int, j: int) -> Weight:
        """Return the length, or ``UNREACHABLE`` when no path exists."""
        return self.get(i, j).cost

    def _replace_path(self, i: int, j: int, path: Path) -> None:
        # Engine-only writer; a slot is always swapped as a whole record.
        self.set(i, j, path)

    def format_slot(self, value: Path) -> str:
        if not value.exists:
            return "-"
        return f"{value.cost}{list(value.nodes)}"
