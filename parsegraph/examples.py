"""Built-in example parse graphs.

Each example is an adjacency specification in declaration order, ready for
``build_graph``.
"""

from __future__ import annotations

from typing import Dict, List

#: Two nested loops, both with exits.
LOOPS: Dict[str, List[str]] = {
    "start": ["start_loop", "s1"],
    "start_loop": ["loop_1", "s1"],
    "loop_1": ["loop_2"],
    "loop_2": ["start_loop", "accept"],
    "s1": ["accept"],
    "accept": [],
}

#: A loop without an exit next to a plain path.
DEAD_LOOP: Dict[str, List[str]] = {
    "start": ["start_loop", "s1"],
    "start_loop": ["loop_1"],
    "loop_1": ["loop_2"],
    "loop_2": ["start_loop"],
    "s1": ["accept"],
    "accept": [],
}

#: Two loops sharing the state s3.
CROSSING_LOOPS: Dict[str, List[str]] = {
    "start": ["s1", "s2"],
    "s1": ["s3"],
    "s2": ["s3"],
    "s3": ["s1", "s2", "accept"],
    "accept": [],
}

EXAMPLE_GRAPHS: Dict[str, Dict[str, List[str]]] = {
    "loops": LOOPS,
    "dead_loop": DEAD_LOOP,
    "crossing_loops": CROSSING_LOOPS,
}

DEFAULT_EXAMPLE = "loops"


def get_example(name: str) -> Dict[str, List[str]]:
    """Return a copy of the named example specification.

    Raises:
        KeyError: If no example has that name.
    """
    try:
        spec = EXAMPLE_GRAPHS[name]
    except KeyError:
        valid = ", ".join(sorted(EXAMPLE_GRAPHS))
        raise KeyError(
            f"Unknown example '{name}'. Valid examples are: {valid}"
        ) from None
    return {state: list(successors) for state, successors in spec.items()}
