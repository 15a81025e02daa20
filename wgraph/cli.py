"""Command-line interface for wgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Callable, Dict, List, Optional

from wgraph import io
from wgraph.algorithms.mst import minimum_spanning_tree
from wgraph.config import ALGORITHMS, MST_CONFIG
from wgraph.graph.edge import format_cost
from wgraph.logging import get_logger, resolve_level, set_global_log_level

logger = get_logger(__name__)

VERTEX_TYPES: Dict[str, Callable[[str], object]] = {"str": str, "int": int}


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _run_mst(
    path: Path,
    algorithm: str,
    vertex_type: str,
    output: Optional[Path],
    as_json: bool,
) -> None:
    """Load a graph, compute its MST and print or write the result.

    Args:
        path: Input graph file in the text format.
        algorithm: MST algorithm name.
        vertex_type: Key into ``VERTEX_TYPES``.
        output: Optional file to write the tree to instead of stdout.
        as_json: Emit node-link JSON instead of the text format.
    """
    logger.info(f"Loading graph from: {path}")
    try:
        graph = io.read_file(path, VERTEX_TYPES[vertex_type])
        logger.info(
            f"Computing MST with {algorithm} "
            f"({graph.n()} vertices, {graph.m()} edges)"
        )

        start = perf_counter()
        tree = minimum_spanning_tree(graph, algorithm)
        elapsed = perf_counter() - start

        if as_json:
            text = json.dumps(tree.to_dict(), indent=2, default=str) + "\n"
        else:
            text = io.dumps(tree)

        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(text)
            logger.info(f"Tree written to: {output}")
        else:
            sys.stdout.write(text)

        logger.info(
            f"MST total cost {format_cost(tree.total_cost())} "
            f"({tree.m()} edges) in {_format_duration(elapsed)}"
        )
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"ERROR: Graph file not found: {path}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to compute MST: {type(e).__name__}: {e}")
        print(
            f"ERROR: Failed to compute MST: {type(e).__name__}: {e}",
            file=sys.stderr,
        )
        sys.exit(1)


def _show_info(path: Path, vertex_type: str) -> None:
    """Print a short structural summary of a graph file."""
    try:
        graph = io.read_file(path, VERTEX_TYPES[vertex_type])
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"ERROR: Graph file not found: {path}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Failed to read graph: {e}")
        print(f"ERROR: Failed to read graph: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Vertices:   {graph.n()}")
    print(f"Edges:      {graph.m()}")
    print(f"Components: {graph.ncc()}")
    print(f"Connected:  {'yes' if graph.is_connected() else 'no'}")
    print(f"Total cost: {format_cost(graph.total_cost())}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``wgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="wgraph",
        description="Compute minimum spanning trees of weighted graphs.",
        epilog="Without --verbose or --quiet the log level comes from "
        "WGRAPH_LOG_LEVEL (default: INFO).",
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
        metavar="{mst,info}",
        help="Available commands",
    )

    mst_parser = subparsers.add_parser("mst", help="Compute a minimum spanning tree")
    mst_parser.add_argument("graph", type=Path, help="Path to graph file")
    mst_parser.add_argument(
        "--algorithm",
        "-a",
        choices=ALGORITHMS,
        default=MST_CONFIG.default_algorithm,
        help=f"MST algorithm (default: {MST_CONFIG.default_algorithm})",
    )
    mst_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the tree to this file instead of stdout",
    )
    mst_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit node-link JSON instead of the text format",
    )

    info_parser = subparsers.add_parser("info", help="Summarize a graph file")
    info_parser.add_argument("graph", type=Path, help="Path to graph file")

    for p in (mst_parser, info_parser):
        p.add_argument(
            "--vertex-type",
            choices=sorted(VERTEX_TYPES),
            default="str",
            help="How to interpret vertex tokens (default: str)",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    # No arguments: show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(resolve_level())

    if args.command == "mst":
        _run_mst(
            path=args.graph,
            algorithm=args.algorithm,
            vertex_type=args.vertex_type,
            output=args.output,
            as_json=args.json,
        )
    elif args.command == "info":
        _show_info(args.graph, args.vertex_type)


if __name__ == "__main__":
    main()
