"""Errors raised while building a parse graph from its adjacency specification.

All build errors derive from ``GraphBuildError`` (itself a ``ValueError``) and
are fatal for the build: no graph is returned when one is raised.
"""

from __future__ import annotations


class GraphBuildError(ValueError):
    """Base class for errors that abort graph construction."""


class DuplicateStateError(GraphBuildError):
    """A state name is declared more than once.

    Attributes:
        name: The repeated state name.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name}: Multiple states with same name in parse graph.")


class UnresolvedReferenceError(GraphBuildError):
    """A successor name has no matching state declaration.

    Attributes:
        source: Name of the state whose successor list holds the reference.
        target: The successor name that could not be resolved.
    """

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(
            f"{target}: Failed to find definition for state in parse graph "
            f"(referenced from '{source}')."
        )


class MissingEntryStateError(GraphBuildError):
    """The entry state is not declared.

    Attributes:
        entry_state: The entry state name that was looked up.
    """

    def __init__(self, entry_state: str) -> None:
        self.entry_state = entry_state
        super().__init__(f'Failed to find state "{entry_state}" in parse graph.')
