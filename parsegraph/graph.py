"""Parse graph model and builder.

A parse graph is a directed graph of named states. Each state owns an ordered
list of outgoing branches; branch order drives search order and therefore the
order of enumerated paths. All states live in a single name-indexed registry on
``ParseGraph``; branches hold plain references to their source and target
states, so cycles need no special ownership handling.

``build_graph`` turns the readable adjacency form
``{"start": ["s1", "s2"], "s1": [], ...}`` into a linked ``ParseGraph``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from parsegraph.config import SEARCH_CONFIG
from parsegraph.errors import (
    DuplicateStateError,
    MissingEntryStateError,
    UnresolvedReferenceError,
)
from parsegraph.logging import get_logger

logger = get_logger(__name__)

#: Ordered successor names for one state.
Successors = Sequence[str]

#: Adjacency specification: mapping or ordered (name, successors) pairs.
GraphSpecInput = Union[
    Mapping[str, Optional[Successors]],
    Sequence[Tuple[str, Optional[Successors]]],
]


@dataclass(eq=False, repr=False)
class State:
    """Named node of the parse graph.

    Attributes:
        name: Unique state name.
        branches: Outgoing branches in declaration order.
    """

    name: str
    branches: List[Branch] = field(default_factory=list)

    @property
    def is_terminal(self) -> bool:
        """True when the state has no outgoing branches."""
        return not self.branches

    def add_branch(self, target: State) -> Branch:
        """Append a branch to ``target`` and return it."""
        branch = Branch(source=self, target=target, index=len(self.branches))
        self.branches.append(branch)
        return branch

    def __repr__(self) -> str:
        targets = [branch.target.name for branch in self.branches]
        return f"State({self.name!r}, branches={targets})"


@dataclass(eq=False, repr=False)
class Branch:
    """Directed edge between two states.

    Branches compare by identity: two branches with the same endpoints are
    still different branches.

    Attributes:
        source: State owning this branch.
        target: State the branch leads to.
        index: Position of the branch in ``source.branches``.
    """

    source: State
    target: State
    index: int

    @property
    def is_self_loop(self) -> bool:
        return self.target is self.source

    def __repr__(self) -> str:
        return (
            f"Branch({self.source.name!r} -> {self.target.name!r}, "
            f"index={self.index})"
        )


class ParseGraph:
    """Fully linked parse graph with a designated entry state.

    Attributes:
        states: Name to State registry in declaration order.
        entry: The state where path enumeration begins.
    """

    def __init__(self, states: Dict[str, State], entry: State) -> None:
        self.states = states
        self.entry = entry

    def __contains__(self, name: object) -> bool:
        return name in self.states

    def __getitem__(self, name: str) -> State:
        return self.states[name]

    def __iter__(self) -> Iterator[State]:
        return iter(self.states.values())

    def __len__(self) -> int:
        return len(self.states)

    def __repr__(self) -> str:
        return (
            f"ParseGraph(states={len(self.states)}, branches={self.branch_count()}, "
            f"entry={self.entry.name!r})"
        )

    def terminal_states(self) -> List[State]:
        """Return the states without outgoing branches, in declaration order."""
        return [state for state in self.states.values() if state.is_terminal]

    def branch_count(self) -> int:
        """Return the total number of branches in the graph."""
        return sum(len(state.branches) for state in self.states.values())

    def to_spec(self) -> Dict[str, List[str]]:
        """Return the ordered adjacency form this graph was built from."""
        return {
            name: [branch.target.name for branch in state.branches]
            for name, state in self.states.items()
        }


def _spec_items(spec: GraphSpecInput) -> List[Tuple[str, Successors]]:
    """Normalize the accepted input shapes to an ordered list of pairs.

    Raises:
        ValueError: If the input or any state entry is malformed.
    """
    if isinstance(spec, Mapping):
        raw_items = list(spec.items())
    elif isinstance(spec, (str, bytes)):
        raise ValueError(
            "Graph specification must be a mapping or a sequence of pairs"
        )
    else:
        raw_items = []
        for entry in spec:
            if not isinstance(entry, (tuple, list)) or len(entry) != 2:
                raise ValueError(
                    "Graph specification entry must be a (name, successors) pair, "
                    f"got {entry!r}"
                )
            raw_items.append((entry[0], entry[1]))

    items: List[Tuple[str, Successors]] = []
    for name, successors in raw_items:
        if not isinstance(name, str) or not name:
            raise ValueError(f"State name must be a non-empty string, got {name!r}")
        if successors is None:
            successors = []
        elif isinstance(successors, (str, bytes)) or not isinstance(
            successors, Sequence
        ):
            raise ValueError(
                f"Successors of state '{name}' must be a list of state names"
            )
        for target in successors:
            if not isinstance(target, str):
                raise ValueError(
                    f"Successor of state '{name}' must be a state name, got {target!r}"
                )
        items.append((name, successors))
    return items


def build_graph(spec: GraphSpecInput, entry_state: Optional[str] = None) -> ParseGraph:
    """Build a parse graph from its readable adjacency form.

    Args:
        spec: Mapping from state name to ordered successor names, or an
            ordered sequence of ``(name, successors)`` pairs. A ``None`` or
            empty successor list marks a terminal state.
        entry_state: Name of the entry state. Defaults to
            ``SEARCH_CONFIG.entry_state`` (``"start"``).

    Returns:
        The linked ParseGraph.

    Raises:
        DuplicateStateError: If a state name is declared twice.
        UnresolvedReferenceError: If a successor name is not declared.
        MissingEntryStateError: If the entry state is not declared.
        ValueError: If the specification is malformed.
    """
    if entry_state is None:
        SEARCH_CONFIG.validate()
        entry_state = SEARCH_CONFIG.entry_state

    items = _spec_items(spec)

    states: Dict[str, State] = {}
    for name, _successors in items:
        if name in states:
            raise DuplicateStateError(name)
        states[name] = State(name)

    for name, successors in items:
        state = states[name]
        for target_name in successors:
            target = states.get(target_name)
            if target is None:
                raise UnresolvedReferenceError(name, target_name)
            state.add_branch(target)

    entry = states.get(entry_state)
    if entry is None:
        raise MissingEntryStateError(entry_state)

    graph = ParseGraph(states, entry)
    logger.debug(
        "Built parse graph: %d states, %d branches, entry '%s'",
        len(states),
        graph.branch_count(),
        entry.name,
    )
    return graph
