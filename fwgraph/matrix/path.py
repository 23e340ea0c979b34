"""Record of the best known route between one node pair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from fwgraph.types import UNREACHABLE, Label, NoPathError, Weight


@dataclass(frozen=True)
class Path:
    """Intermediate nodes and cost of the best known route for one pair.

    The two endpoints are not part of ``nodes``. For a pair stored under the
    canonical key ``(a, b)`` with ``a < b``, ``nodes`` walks from ``a`` to
    ``b``; the ``b`` to ``a`` walk is ``reversed(path)``.

    Attributes:
        nodes: Intermediate node labels in walking order.
        cost: Sum of edge weights along the route; ``UNREACHABLE`` when absent.
        exists: Whether any route is known.
    """

    nodes: Tuple[Label, ...] = ()
    cost: Weight = UNREACHABLE
    exists: bool = False

    @classmethod
    def direct(cls, weight: Weight) -> Path:
        """Return an existing path with no intermediate nodes."""
        return cls((), weight, True)

    @property
    def length(self) -> Weight:
        """Cached route length.

        Raises:
            NoPathError: If no route exists; check ``exists`` first.
        """
        if not self.exists:
            raise NoPathError("No path exists between this node pair")
        return self.cost

    def __iter__(self) -> Iterator[Label]:
        return iter(self.nodes)

    def __reversed__(self) -> Iterator[Label]:
        return reversed(self.nodes)

    def __len__(self) -> int:
        """Number of intermediate nodes."""
        return len(self.nodes)
