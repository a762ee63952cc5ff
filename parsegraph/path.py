"""Single path through a parse graph.

A ``ParsePath`` is an ordered list of ``Element`` objects, each pairing a state
with the branch chosen to leave it. The last element of a path under
construction has no branch yet; the last element of a completed path is a
terminal state and never has one.

Paths only reference states and branches of a ``ParseGraph``; they never
modify the graph.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple

from parsegraph.graph import Branch, State


@dataclass(eq=False)
class Element:
    """A state in a path and the branch taken out of it.

    Attributes:
        state: The state at this position.
        branch: Branch chosen to proceed to the next element, or ``None``.
    """

    state: State
    branch: Optional[Branch] = None

    def __repr__(self) -> str:
        target = self.branch.target.name if self.branch is not None else None
        return f"Element({self.state.name!r} -> {target!r})"


class ParsePath:
    """Path from the entry state through chosen branches."""

    def __init__(self, elements: Optional[List[Element]] = None) -> None:
        self._elements: List[Element] = list(elements) if elements else []

    def push_state(self, state: State) -> None:
        """Add a new state to the end of the path."""
        self._elements.append(Element(state))

    def pop_state(self) -> State:
        """Remove the last state from the path and return it.

        Raises:
            IndexError: If the path is empty.
        """
        if not self._elements:
            raise IndexError("pop_state() on an empty path")
        return self._elements.pop().state

    def can_follow(self, branch: Branch) -> bool:
        """Check whether ``branch`` may extend this path.

        The branch must belong to the last state pushed. It cannot be followed
        when it leads straight back to that state, or when this path already
        left that state through the same branch.

        Raises:
            IndexError: If the path is empty.
        """
        if not self._elements:
            raise IndexError("can_follow() on an empty path")
        last_state = self._elements[-1].state

        if branch.target is last_state:
            return False

        for elem in self._elements:
            if elem.state is last_state and elem.branch is branch:
                return False
        return True

    def follow_branch(self, branch: Branch) -> bool:
        """Register ``branch`` on the last element if it can be followed.

        Returns:
            True if the branch was recorded, False if it was rejected.
        """
        if not self.can_follow(branch):
            return False
        self._elements[-1].branch = branch
        return True

    def copy(self) -> ParsePath:
        """Return a snapshot that is unaffected by later changes to this path."""
        return ParsePath([Element(e.state, e.branch) for e in self._elements])

    @property
    def last(self) -> Element:
        return self._elements[-1]

    @property
    def states(self) -> Tuple[State, ...]:
        return tuple(e.state for e in self._elements)

    @property
    def names(self) -> Tuple[str, ...]:
        """State names in path order."""
        return tuple(e.state.name for e in self._elements)

    @property
    def branches(self) -> Tuple[Branch, ...]:
        """Chosen branches in path order, skipping elements without one."""
        return tuple(e.branch for e in self._elements if e.branch is not None)

    def render(self, delimiter: str = "; ", trailing: bool = True) -> str:
        """Join state names with ``delimiter``.

        With ``trailing`` every name is followed by the delimiter, e.g.
        ``"start; s1; accept; "``.
        """
        if trailing:
            return "".join(f"{name}{delimiter}" for name in self.names)
        return delimiter.join(self.names)

    def __getitem__(self, idx: int) -> Element:
        return self._elements[idx]

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ParsePath):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(
            a.state is b.state and a.branch is b.branch
            for a, b in zip(self._elements, other._elements)
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"ParsePath({list(self.names)})"
