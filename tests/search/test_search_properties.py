"""Property-style checks of path enumeration over generated graphs.

NetworkX serves as an independent oracle for acyclic graphs.
"""

from __future__ import annotations

import random
import sys
from typing import Dict, List

import networkx as nx
import pytest

from parsegraph.graph import build_graph
from parsegraph.nx import to_networkx
from parsegraph.search import find_paths, search_paths


def random_dag(seed: int, n_states: int = 9) -> Dict[str, List[str]]:
    """Acyclic spec without parallel branches; states only point forward."""
    rng = random.Random(seed)
    names = ["start"] + [f"s{i}" for i in range(1, n_states)]
    spec: Dict[str, List[str]] = {}
    for i, name in enumerate(names):
        later = names[i + 1 :]
        k = rng.randint(1 if i == 0 else 0, min(3, len(later)))
        spec[name] = rng.sample(later, k)
    return spec


def random_cyclic(seed: int, n_states: int = 4) -> Dict[str, List[str]]:
    """Spec with arbitrary back edges, self-loops and parallel branches."""
    rng = random.Random(seed)
    names = ["start"] + [f"s{i}" for i in range(1, n_states)] + ["end"]
    spec: Dict[str, List[str]] = {}
    for name in names[:-1]:
        spec[name] = [rng.choice(names) for _ in range(rng.randint(1, 3))]
    spec["end"] = []
    return spec


@pytest.mark.parametrize("seed", range(12))
def test_dag_paths_match_exhaustive_enumeration(seed) -> None:
    """On acyclic graphs the paths equal NetworkX's simple paths."""
    spec = random_dag(seed)
    graph = build_graph(spec)

    sinks = [s.name for s in graph.terminal_states()]
    oracle = sorted(
        nx.all_simple_paths(nx.DiGraph(to_networkx(graph)), "start", sinks)
    )
    result = search_paths(graph)
    produced = [list(p.names) for p in result.paths]

    assert sorted(produced) == oracle
    assert len(produced) == len({tuple(p) for p in produced})
    assert result.loops == []


@pytest.mark.parametrize("seed", range(20))
def test_cyclic_graphs_terminate_and_keep_path_invariants(seed) -> None:
    """Paths on cyclic graphs are well formed and never reuse a branch."""
    spec = random_cyclic(seed)
    graph = build_graph(spec)
    result = search_paths(graph, strategy="iterative")

    for path in result.paths:
        assert path[0].state is graph.entry
        assert path[-1].state.is_terminal
        assert path[-1].branch is None
        chosen = [(e.state, e.branch) for e in list(path)[:-1]]
        # Each element's branch leads to the next element's state
        for (state, branch), nxt in zip(chosen, list(path)[1:]):
            assert branch.source is state
            assert branch.target is nxt.state
            assert not branch.is_self_loop
        # No (state, branch) pair is taken twice
        assert len({(id(s), id(b)) for s, b in chosen}) == len(chosen)


@pytest.mark.parametrize("seed", range(20))
def test_strategies_agree(seed) -> None:
    """Recursive and iterative search give the same paths and loops."""
    graph = build_graph(random_cyclic(seed))
    recursive = search_paths(graph, strategy="recursive")
    iterative = search_paths(graph, strategy="iterative")

    assert recursive.paths == iterative.paths
    assert recursive.loops == iterative.loops


def test_path_length_bounded_by_branch_count() -> None:
    """No path takes more steps than the graph has branches."""
    # Every state links to every state, including itself
    names = ["start", "a", "b"]
    spec = {name: list(names) + ["end"] for name in names}
    spec["end"] = []
    graph = build_graph(spec)

    paths = find_paths(graph)
    assert paths
    longest = max(len(p) for p in paths)
    assert longest - 1 <= graph.branch_count()


def test_iterative_search_handles_paths_deeper_than_recursion_limit() -> None:
    """The iterative search is not limited by the recursion limit."""
    depth = sys.getrecursionlimit() + 500
    names = ["start"] + [f"s{i}" for i in range(1, depth)]
    spec = {name: [nxt] for name, nxt in zip(names, names[1:])}
    spec[names[-1]] = []
    graph = build_graph(spec)

    paths = find_paths(graph, strategy="iterative")
    assert len(paths) == 1
    assert len(paths[0]) == depth
