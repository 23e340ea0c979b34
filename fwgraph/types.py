"""Shared aliases, sentinels and enums for all-pairs shortest-path computation."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Hashable, Tuple

#: Non-negative integer edge weight / path length.
Weight = int

#: Dense node index in ``[0, n)``.
NodeIndex = int

#: Edge reference consumed by the engines: (source index, target index, weight).
EdgeTriple = Tuple[NodeIndex, NodeIndex, Weight]

#: Label materialized inside reconstructed paths (node name, attribute or index).
Label = Hashable

#: Distance sentinel meaning "no finite distance known".
UNREACHABLE: Weight = sys.maxsize


def saturating_add(a: Weight, b: Weight) -> Weight:
    """Add two distances, capping the result at ``UNREACHABLE``.

    Keeps ``UNREACHABLE + w`` from turning into a finite-looking distance.
    """
    total = a + b
    return UNREACHABLE if total >= UNREACHABLE else total


class NoPathError(LookupError):
    """Raised when the length of a non-existent path is requested."""


class DuplicateEdgePolicy(IntEnum):
    """How repeated edges between the same node pair are seeded."""

    #: Keep the smallest weight, independent of edge order.
    MIN_WEIGHT = 1
    #: The edge seen last overwrites earlier ones.
    LAST_WINS = 2

    @classmethod
    def from_string(cls, value: str) -> "DuplicateEdgePolicy":
        """Parse a case-insensitive policy name.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid duplicate edge policy '{value}'. Valid values are: {valid}"
            ) from None
