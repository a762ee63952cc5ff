"""Tests for `parsegraph.graph.build_graph` and the graph model."""

from __future__ import annotations

import pytest

from parsegraph.errors import (
    DuplicateStateError,
    GraphBuildError,
    MissingEntryStateError,
    UnresolvedReferenceError,
)
from parsegraph.graph import ParseGraph, build_graph


def test_build_links_states_in_declaration_order(loops_spec) -> None:
    """States and branches keep declaration order and link back to their source."""
    graph = build_graph(loops_spec)

    assert isinstance(graph, ParseGraph)
    assert graph.entry is graph["start"]
    assert list(graph.states) == list(loops_spec)
    assert len(graph) == 6
    assert graph.branch_count() == 7

    start_loop = graph["start_loop"]
    assert [b.target.name for b in start_loop.branches] == ["loop_1", "s1"]
    assert [b.index for b in start_loop.branches] == [0, 1]
    assert all(b.source is start_loop for b in start_loop.branches)


def test_targets_are_shared_state_objects(loops_spec) -> None:
    """Every reference to a name resolves to the same State object."""
    graph = build_graph(loops_spec)
    from_start = graph["start"].branches[0].target
    from_loop_2 = graph["loop_2"].branches[0].target
    assert from_start is from_loop_2 is graph["start_loop"]


def test_terminal_states_and_spec_roundtrip(loops_spec) -> None:
    """Terminal states are found and ``to_spec`` returns the input mapping."""
    graph = build_graph(loops_spec)
    assert [s.name for s in graph.terminal_states()] == ["accept"]
    assert graph["accept"].is_terminal
    assert not graph["start"].is_terminal
    assert graph.to_spec() == loops_spec


def test_parallel_branches_are_distinct() -> None:
    """Two branches to the same target are different objects."""
    graph = build_graph({"start": ["end", "end"], "end": []})
    first, second = graph["start"].branches
    assert first.target is second.target
    assert first is not second
    assert first != second


def test_self_loop_branch_is_kept_in_graph() -> None:
    """Self-loops stay in the graph and are flagged as such."""
    graph = build_graph({"start": ["start", "end"], "end": []})
    self_branch = graph["start"].branches[0]
    assert self_branch.is_self_loop
    assert not graph["start"].branches[1].is_self_loop


def test_none_successors_mean_terminal() -> None:
    """``None`` successors build a terminal state."""
    graph = build_graph({"start": None})
    assert graph.entry.is_terminal


def test_duplicate_state_in_pairs_raises() -> None:
    """A name declared twice raises DuplicateStateError."""
    spec = [("start", ["s1"]), ("s1", []), ("start", [])]
    with pytest.raises(DuplicateStateError) as exc_info:
        build_graph(spec)
    assert exc_info.value.name == "start"
    assert "Multiple states with same name" in str(exc_info.value)


def test_unresolved_reference_raises() -> None:
    """A successor with no declaration raises UnresolvedReferenceError."""
    with pytest.raises(UnresolvedReferenceError) as exc_info:
        build_graph({"start": ["s1", "missing"], "s1": []})
    err = exc_info.value
    assert (err.source, err.target) == ("start", "missing")
    assert "missing" in str(err)


def test_missing_entry_state_raises() -> None:
    """A graph without the entry state raises MissingEntryStateError."""
    with pytest.raises(MissingEntryStateError) as exc_info:
        build_graph({"begin": ["end"], "end": []})
    assert exc_info.value.entry_state == "start"


def test_custom_entry_state() -> None:
    """``entry_state`` selects a different entry."""
    graph = build_graph({"begin": ["end"], "end": []}, entry_state="begin")
    assert graph.entry.name == "begin"


def test_build_errors_are_value_errors() -> None:
    """All build errors derive from GraphBuildError and ValueError."""
    for error_cls in (
        DuplicateStateError,
        UnresolvedReferenceError,
        MissingEntryStateError,
    ):
        assert issubclass(error_cls, GraphBuildError)
        assert issubclass(error_cls, ValueError)


def test_unresolved_reference_reported_before_missing_entry() -> None:
    """Reference errors take precedence over the entry lookup."""
    # Reference resolution runs before the entry lookup
    with pytest.raises(UnresolvedReferenceError):
        build_graph({"begin": ["nowhere"]})


@pytest.mark.parametrize(
    "spec, fragment",
    [
        ({"": []}, "non-empty string"),
        ({"start": "s1", "s1": []}, "must be a list"),
        ({"start": [1]}, "must be a state name"),
        ([("start",)], "(name, successors) pair"),
        ("start", "mapping or a sequence"),
    ],
)
def test_malformed_spec_raises_value_error(spec, fragment) -> None:
    """Malformed input raises a plain ValueError naming the problem."""
    with pytest.raises(ValueError) as exc_info:
        build_graph(spec)
    assert not isinstance(exc_info.value, GraphBuildError)
    assert fragment in str(exc_info.value)


def test_repr_does_not_recurse_on_cycles(loops_spec) -> None:
    """Reprs of cyclic graphs stay finite."""
    graph = build_graph(loops_spec)
    assert "start_loop" in repr(graph["loop_2"])
    assert "loop_2" in repr(graph["loop_2"].branches[0])
    assert "entry='start'" in repr(graph)
