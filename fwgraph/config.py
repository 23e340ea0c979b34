"""Configuration classes for fwgraph computations."""

from dataclasses import dataclass
from typing import Optional

from fwgraph.types import DuplicateEdgePolicy


@dataclass
class ApspConfig:
    """Configuration for all-pairs shortest-path computation."""

    # Seeding rule for parallel edges between the same pair
    duplicate_edges: DuplicateEdgePolicy = DuplicateEdgePolicy.MIN_WEIGHT

    # Refuse graphs larger than this before the cubic pass starts (None = no limit)
    max_nodes: Optional[int] = None

    # Edge attribute read by the NetworkX adapter, and its fallback value
    weight_attr: str = "weight"
    default_weight: int = 1

    def validate(self) -> None:
        """Check field values.

        Raises:
            ValueError: If a limit or default is negative.
        """
        if self.max_nodes is not None and self.max_nodes < 0:
            raise ValueError(f"max_nodes must be non-negative, got {self.max_nodes}")
        if self.default_weight < 0:
            raise ValueError(
                f"default_weight must be non-negative, got {self.default_weight}"
            )

    def check_node_count(self, node_count: int) -> None:
        """Reject graphs above ``max_nodes``.

        Raises:
            ValueError: If ``node_count`` exceeds the configured limit.
        """
        if self.max_nodes is not None and node_count > self.max_nodes:
            raise ValueError(
                f"Graph has {node_count} nodes, above the configured limit of "
                f"{self.max_nodes}; Floyd-Warshall cost grows with n^3."
            )


# Global configuration instance
APSP_CONFIG = ApspConfig()
