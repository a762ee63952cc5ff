"""NetworkX export for parse graphs.

Example:
    >>> from parsegraph import build_graph
    >>> from parsegraph.nx import to_networkx
    >>> graph = build_graph({"start": ["s1", "s1"], "s1": []})
    >>> G = to_networkx(graph)
    >>> G.number_of_edges("start", "s1")
    2
"""

from __future__ import annotations

from typing import Any, Dict

import networkx as nx

from parsegraph.graph import ParseGraph


def to_networkx(graph: ParseGraph) -> nx.MultiDiGraph:
    """Convert a parse graph to a NetworkX MultiDiGraph.

    Nodes are state names with boolean ``entry`` and ``terminal`` attributes.
    Every branch becomes one edge keyed by its index in the source state's
    branch list, so parallel branches and self-loops are all preserved.

    Args:
        graph: The parse graph to convert.

    Returns:
        A new MultiDiGraph; changing it does not affect ``graph``.
    """
    nx_graph = nx.MultiDiGraph()
    for state in graph:
        nx_graph.add_node(
            state.name, entry=state is graph.entry, terminal=state.is_terminal
        )
    for state in graph:
        for branch in state.branches:
            nx_graph.add_edge(state.name, branch.target.name, key=branch.index)
    return nx_graph


def summarize(graph: ParseGraph) -> Dict[str, Any]:
    """Return structural statistics for a parse graph.

    Keys: ``states``, ``branches``, ``entry``, ``terminal_states`` (names),
    ``self_loops``, ``unreachable`` (names not reachable from the entry) and
    ``cycles`` (elementary cycles as lists of state names, self-loops
    excluded).
    """
    nx_graph = to_networkx(graph)
    reachable = nx.descendants(nx_graph, graph.entry.name) | {graph.entry.name}
    cycles = [
        cycle
        for cycle in nx.simple_cycles(nx.DiGraph(nx_graph))
        if len(cycle) > 1
    ]
    return {
        "states": nx_graph.number_of_nodes(),
        "branches": nx_graph.number_of_edges(),
        "entry": graph.entry.name,
        "terminal_states": [state.name for state in graph.terminal_states()],
        "self_loops": nx.number_of_selfloops(nx_graph),
        "unreachable": [state.name for state in graph if state.name not in reachable],
        "cycles": sorted(cycles, key=lambda c: (len(c), c)),
    }
