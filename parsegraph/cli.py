"""Command-line interface for parsegraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema
import yaml

from parsegraph.config import SEARCH_CONFIG, STRATEGIES
from parsegraph.errors import GraphBuildError
from parsegraph.examples import DEFAULT_EXAMPLE, EXAMPLE_GRAPHS, get_example
from parsegraph.graph import ParseGraph, build_graph
from parsegraph.loader import load_graph_spec_file
from parsegraph.logging import get_logger, set_global_log_level
from parsegraph.nx import summarize
from parsegraph.search import PathSearchResult, search_paths

logger = get_logger(__name__)


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _load_graph(spec_path: Optional[Path], example: Optional[str]) -> ParseGraph:
    """Build the graph from a file or a built-in example.

    Any input or build error is logged and turned into exit status 1.
    """
    try:
        if spec_path is not None:
            logger.debug("Loading adjacency specification from %s", spec_path)
            return load_graph_spec_file(spec_path).build()
        name = example or DEFAULT_EXAMPLE
        logger.debug("Using built-in example '%s'", name)
        return build_graph(get_example(name))
    except GraphBuildError as exc:
        logger.error("Failed to build parse graph: %s", exc)
    except jsonschema.ValidationError as exc:
        logger.error("Invalid adjacency specification: %s", exc.message)
    except yaml.YAMLError as exc:
        logger.error("Invalid YAML in adjacency specification: %s", exc)
    except (ValueError, OSError) as exc:
        logger.error("Failed to load adjacency specification: %s", exc)
    raise SystemExit(1)


def _result_to_dict(result: PathSearchResult) -> Dict[str, Any]:
    return {
        "paths": [list(path.names) for path in result.paths],
        "loops": [
            {"state": loop.state, "path": list(loop.path)} for loop in result.loops
        ],
    }


def _run(
    spec_path: Optional[Path],
    example: Optional[str],
    strategy: Optional[str],
    as_json: bool,
) -> None:
    """Enumerate and print all paths of a parse graph."""
    graph = _load_graph(spec_path, example)
    result = search_paths(graph, strategy=strategy)

    if as_json:
        print(json.dumps(_result_to_dict(result), indent=2))
    else:
        print("Paths found:")
        for path in result.paths:
            rendered = path.render(
                SEARCH_CONFIG.delimiter, trailing=SEARCH_CONFIG.trailing_delimiter
            )
            print(f"\t{rendered}")

    n_paths, n_loops = len(result.paths), len(result.loops)
    logger.info(
        "Found %d %s, %d loop %s",
        n_paths,
        _plural(n_paths, "path"),
        n_loops,
        _plural(n_loops, "diagnostic"),
    )


def _inspect(spec_path: Optional[Path], example: Optional[str]) -> None:
    """Print a structural summary of a parse graph."""
    graph = _load_graph(spec_path, example)
    info = summarize(graph)

    print("Parse graph:")
    print(f"   entry: {info['entry']}")
    print(f"   states: {info['states']}")
    print(f"   branches: {info['branches']}")
    print(f"   terminal states: {', '.join(info['terminal_states']) or '-'}")
    print(f"   self-loops: {info['self_loops']}")
    print(f"   unreachable states: {', '.join(info['unreachable']) or '-'}")
    print(f"   cycles: {len(info['cycles'])}")
    for cycle in info["cycles"]:
        print(f"      {' -> '.join(cycle + cycle[:1])}")

    if not info["terminal_states"]:
        logger.warning("Graph has no terminal state; no path can complete")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``parsegraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used. With no arguments the default example graph is run.
    """
    parser = argparse.ArgumentParser(
        prog="parsegraph",
        description="Enumerate all paths through a parse graph.",
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
        metavar="{run,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Enumerate paths of a graph")
    run_parser.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default=None,
        help=f"Search strategy (default: {SEARCH_CONFIG.strategy})",
    )
    run_parser.add_argument(
        "--json", action="store_true", help="Print paths and loops as JSON"
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show the structure of a graph"
    )

    for p in (run_parser, inspect_parser):
        p.add_argument(
            "spec",
            nargs="?",
            type=Path,
            default=None,
            help="Path to adjacency specification YAML",
        )
        p.add_argument(
            "--example",
            "-e",
            choices=sorted(EXAMPLE_GRAPHS),
            default=None,
            help=f"Use a built-in example graph (default: {DEFAULT_EXAMPLE})",
        )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        effective_args = ["run"]

    args = parser.parse_args(effective_args)
    if args.spec is not None and args.example is not None:
        parser.error("a specification file and --example are mutually exclusive")

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run(args.spec, args.example, args.strategy, args.json)
    elif args.command == "inspect":
        _inspect(args.spec, args.example)


if __name__ == "__main__":
    main()
