"""parsegraph: path enumeration over cyclic parse graphs.

A parse graph is built from a readable adjacency specification (state name to
ordered successor names) and searched depth-first for every path from the
entry state ("start") to a terminal state. Cycles are walked at most once per
branch and path; loops that cannot be left are reported, not followed.

Primary API:
    build_graph() - Build and validate a ParseGraph from an adjacency spec
    find_paths() - Enumerate completed paths
    search_paths() - Enumerate paths and collect loop diagnostics
    load_graph_spec() - Read an adjacency spec from YAML

Example:
    from parsegraph import build_graph, find_paths

    graph = build_graph({"start": ["s1", "accept"], "s1": ["accept"], "accept": []})
    for path in find_paths(graph):
        print(path.render())
"""

from __future__ import annotations

from parsegraph import cli, logging
from parsegraph._version import __version__
from parsegraph.config import SEARCH_CONFIG, SearchConfig
from parsegraph.errors import (
    DuplicateStateError,
    GraphBuildError,
    MissingEntryStateError,
    UnresolvedReferenceError,
)
from parsegraph.examples import EXAMPLE_GRAPHS, get_example
from parsegraph.graph import Branch, ParseGraph, State, build_graph
from parsegraph.loader import GraphSpec, load_graph_spec, load_graph_spec_file
from parsegraph.nx import summarize, to_networkx
from parsegraph.path import Element, ParsePath
from parsegraph.search import LoopDiagnostic, PathSearchResult, find_paths, search_paths

__all__ = [
    # Version
    "__version__",
    # Model
    "State",
    "Branch",
    "ParseGraph",
    "Element",
    "ParsePath",
    # Building
    "build_graph",
    "GraphSpec",
    "load_graph_spec",
    "load_graph_spec_file",
    "EXAMPLE_GRAPHS",
    "get_example",
    # Errors
    "GraphBuildError",
    "DuplicateStateError",
    "UnresolvedReferenceError",
    "MissingEntryStateError",
    # Search
    "find_paths",
    "search_paths",
    "LoopDiagnostic",
    "PathSearchResult",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Library integrations (NetworkX)
    "to_networkx",
    "summarize",
    # Utilities
    "cli",
    "logging",
]
