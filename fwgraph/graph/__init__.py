"""Graph inputs for the engines.

This package provides the read-only `GraphView` consumed by the engines and
the NetworkX adapter (`nx`) that builds one.
"""

from fwgraph.graph.nx import NodeMap, from_networkx
from fwgraph.graph.view import GraphView

__all__ = ["GraphView", "NodeMap", "from_networkx"]
