"""Command-line interface for fwgraph."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

import jsonschema

from fwgraph.analysis import all_pairs_shortest_paths
from fwgraph.config import ApspConfig
from fwgraph.io import load_graph_file
from fwgraph.logging import get_logger, set_global_log_level, verbosity_level
from fwgraph.results import ShortestPaths
from fwgraph.types import DuplicateEdgePolicy

logger = get_logger(__name__)


def _format_paths(sp: ShortestPaths) -> str:
    """Render one ``u -> v: distance via [...]`` line per connected pair."""
    lines = []
    names = sp.nodes
    for i, u in enumerate(names):
        for v in names[i + 1 :]:
            if not sp.path_exists(u, v):
                lines.append(f"{u} -> {v}: unreachable")
                continue
            full = sp.full_path(u, v) or []
            lines.append(
                f"{u} -> {v}: {sp.distance(u, v)} via "
                + " - ".join(str(x) for x in full)
            )
    return "\n".join(lines)


def _run(
    path: Path,
    paths: bool,
    as_json: bool,
    dump: bool,
    duplicate_edges: str,
    max_nodes: Optional[int],
) -> None:
    config = ApspConfig(
        duplicate_edges=DuplicateEdgePolicy.from_string(duplicate_edges),
        max_nodes=max_nodes,
    )
    logger.info(f"Loading graph: {path}")
    graph = load_graph_file(path, weight_attr=config.weight_attr)

    started = perf_counter()
    sp = all_pairs_shortest_paths(graph, with_paths=paths, config=config)
    logger.info(
        f"Computed all-pairs shortest {'paths' if paths else 'distances'} for "
        f"{graph.number_of_nodes()} nodes in {perf_counter() - started:.3f}s"
    )

    if as_json:
        distances = {
            str(u): {str(v): d for v, d in row.items()}
            for u, row in sp.to_dict().items()
        }
        payload: Dict[str, Any] = {"distances": distances}
        if paths:
            payload["paths"] = {
                str(u): {str(v): entry for v, entry in row.items()}
                for u, row in sp.paths_dict().items()
            }
        print(json.dumps(payload, indent=2))
        return

    print(sp.format_table())
    if paths:
        print()
        print(_format_paths(sp))
    if dump:
        print()
        print(sp.dump())


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``fwgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="fwgraph",
        description="All-pairs shortest paths on undirected weighted graphs.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Compute shortest paths")
    run_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    run_parser.add_argument(
        "--paths", "-p", action="store_true", help="Reconstruct shortest paths"
    )
    run_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )
    run_parser.add_argument(
        "--dump",
        action="store_true",
        help="Also print the raw triangular matrix (diagnostic)",
    )
    run_parser.add_argument(
        "--duplicate-edges",
        choices=[p.name.lower() for p in DuplicateEdgePolicy],
        default=DuplicateEdgePolicy.MIN_WEIGHT.name.lower(),
        help="How repeated links between the same nodes are resolved",
    )
    run_parser.add_argument(
        "--max-nodes",
        type=int,
        default=None,
        help="Refuse graphs with more nodes than this",
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(verbosity_level(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    if args.command == "run":
        try:
            _run(
                path=args.graph,
                paths=args.paths,
                as_json=args.json,
                dump=args.dump,
                duplicate_edges=args.duplicate_edges,
                max_nodes=args.max_nodes,
            )
        except jsonschema.ValidationError as exc:
            logger.error(f"Invalid graph file {args.graph}: {exc.message}")
            raise SystemExit(1) from exc
        except (OSError, ValueError) as exc:
            logger.error(f"Failed to process {args.graph}: {exc}")
            raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
