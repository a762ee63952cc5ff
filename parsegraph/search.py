"""Enumeration of all paths from the entry state to terminal states.

The search is a depth-first walk in branch-declaration order. A branch is not
followed when it loops straight back to its own state or when the current path
already left that state through the same branch; each (state, branch) pair can
therefore occur at most once per path, which bounds path length and makes the
search terminate on cyclic graphs.

When a branching state has no branch left to follow, the path is a loop
without exit. The subtree is dropped and a ``LoopDiagnostic`` is reported;
the enumeration itself carries on.

Two strategies produce identical results:

- ``"recursive"``: one Python call per path element.
- ``"iterative"``: explicit stack of frames, independent of the interpreter
  recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple, Union

from parsegraph.config import SEARCH_CONFIG, check_strategy
from parsegraph.graph import ParseGraph, State
from parsegraph.logging import get_logger
from parsegraph.path import ParsePath

logger = get_logger(__name__)

LoopCallback = Callable[["LoopDiagnostic"], None]


@dataclass(frozen=True)
class LoopDiagnostic:
    """A state where the current path could not follow any branch.

    Attributes:
        state: Name of the state whose branches were all rejected.
        path: State names of the path that led into ``state``.
    """

    state: str
    path: Tuple[str, ...]

    @property
    def full_path(self) -> Tuple[str, ...]:
        """The path including the state where it got stuck."""
        return self.path + (self.state,)

    def message(self, delimiter: str = "; ") -> str:
        rendered = "".join(f"{name}{delimiter}" for name in self.full_path)
        return (
            "Loop without exit or loop whose all states and branches have already "
            f"been added to the path detected. Ignoring the parse subtree: {rendered}"
        )


@dataclass
class PathSearchResult:
    """Completed paths and loop diagnostics from one enumeration."""

    paths: List[ParsePath] = field(default_factory=list)
    loops: List[LoopDiagnostic] = field(default_factory=list)


class _Collector:
    """Accumulates results and dispatches loop diagnostics."""

    def __init__(self, on_loop: Optional[LoopCallback]) -> None:
        self.result = PathSearchResult()
        self._on_loop = on_loop

    def add_path(self, path: ParsePath) -> None:
        self.result.paths.append(path.copy())

    def add_loop(self, path: ParsePath) -> None:
        names = path.names
        diagnostic = LoopDiagnostic(state=names[-1], path=names[:-1])
        self.result.loops.append(diagnostic)
        logger.warning(diagnostic.message(SEARCH_CONFIG.delimiter))
        if self._on_loop is not None:
            self._on_loop(diagnostic)


def _search_recursive(collector: _Collector, current: ParsePath, state: State) -> None:
    current.push_state(state)

    if state.is_terminal:
        collector.add_path(current)
    else:
        branch_followed = False
        for branch in state.branches:
            if current.follow_branch(branch):
                branch_followed = True
                _search_recursive(collector, current, branch.target)

        if not branch_followed:
            collector.add_loop(current)

    current.pop_state()


@dataclass
class _Frame:
    state: State
    next_index: int = 0
    branch_followed: bool = False


def _search_iterative(collector: _Collector, entry: State) -> None:
    current = ParsePath()
    stack: List[_Frame] = []

    def enter(state: State) -> None:
        current.push_state(state)
        if state.is_terminal:
            collector.add_path(current)
            current.pop_state()
        else:
            stack.append(_Frame(state))

    enter(entry)
    while stack:
        frame = stack[-1]
        branches = frame.state.branches
        if frame.next_index < len(branches):
            branch = branches[frame.next_index]
            frame.next_index += 1
            if current.follow_branch(branch):
                frame.branch_followed = True
                enter(branch.target)
            continue

        if not frame.branch_followed:
            collector.add_loop(current)
        stack.pop()
        current.pop_state()


def search_paths(
    source: Union[ParseGraph, State],
    *,
    on_loop: Optional[LoopCallback] = None,
    strategy: Optional[str] = None,
) -> PathSearchResult:
    """Enumerate every path from ``source`` to a terminal state.

    Args:
        source: A ParseGraph (its entry state is used) or the state to start from.
        on_loop: Optional callback invoked with each LoopDiagnostic as it is found.
        strategy: ``"recursive"`` or ``"iterative"``. Defaults to
            ``SEARCH_CONFIG.strategy``.

    Returns:
        PathSearchResult with paths in depth-first, branch-declaration order and
        the loop diagnostics in the order they were found.

    Raises:
        ValueError: If the strategy is unknown, or the strategy is taken from
            an invalid ``SEARCH_CONFIG``.
    """
    if strategy is None:
        SEARCH_CONFIG.validate()
        strategy = SEARCH_CONFIG.strategy
    else:
        check_strategy(strategy)

    entry = source.entry if isinstance(source, ParseGraph) else source
    collector = _Collector(on_loop)

    if strategy == "recursive":
        _search_recursive(collector, ParsePath(), entry)
    else:
        _search_iterative(collector, entry)

    result = collector.result
    logger.debug(
        "Path search from '%s' (%s): %d paths, %d loop diagnostics",
        entry.name,
        strategy,
        len(result.paths),
        len(result.loops),
    )
    return result


def find_paths(
    source: Union[ParseGraph, State],
    *,
    on_loop: Optional[LoopCallback] = None,
    strategy: Optional[str] = None,
) -> List[ParsePath]:
    """Return the completed paths from ``source``; see ``search_paths``."""
    return search_paths(source, on_loop=on_loop, strategy=strategy).paths
