"""YAML loader for weighted undirected graphs.

Expected document shape::

    nodes:            # optional; nodes named only in links are added too
      A: {label: Alpha}
      B: {}
    links:
      - {source: A, target: B, weight: 2}
      - {source: B, target: C}      # weight defaults to 1

Documents are checked against the packaged JSON Schema
``fwgraph/schemas/graph.json`` before any graph is built. The result is a
plain ``networkx.MultiGraph`` so repeated links survive loading and are
resolved by the engine's duplicate edge policy.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
import networkx as nx
import yaml

from fwgraph.logging import get_logger

logger = get_logger(__name__)


def _load_schema() -> Dict[str, Any]:
    schema_file = resources.files("fwgraph.schemas").joinpath("graph.json")
    try:
        with schema_file.open("r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as exc:  # pragma: no cover
        raise RuntimeError(
            "Failed to locate packaged graph schema 'fwgraph/schemas/graph.json'."
        ) from exc


def load_graph_yaml(yaml_str: str, weight_attr: str = "weight") -> nx.MultiGraph:
    """Parse a YAML graph description.

    Args:
        yaml_str: YAML document text.
        weight_attr: Edge attribute name to store link weights under.

    Returns:
        Undirected NetworkX multigraph with integer weights.

    Raises:
        ValueError: If the document is not a mapping at top level.
        jsonschema.ValidationError: If the document does not match the graph
            schema (unknown keys, missing link endpoints, or a weight that is
            negative or not an integer).
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    jsonschema.validate(data, _load_schema())

    graph = nx.MultiGraph()
    for name, node_def in (data.get("nodes") or {}).items():
        graph.add_node(name, **(node_def or {}))

    for entry in data.get("links") or []:
        # The schema admits integral floats such as 2.0
        weight = int(entry.get("weight", 1))
        graph.add_edge(entry["source"], entry["target"], **{weight_attr: weight})

    logger.debug(
        "Loaded graph with %d nodes and %d links",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph


def load_graph_file(path: Union[str, Path], weight_attr: str = "weight") -> nx.MultiGraph:
    """Read and parse a YAML graph file (see `load_graph_yaml`)."""
    text = Path(path).read_text(encoding="utf-8")
    return load_graph_yaml(text, weight_attr=weight_attr)
