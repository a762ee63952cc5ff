"""Utilities for handling YAML parsing quirks in adjacency specifications."""

from typing import Any, Iterable, List, Tuple, TypeVar

V = TypeVar("V")


def normalize_yaml_name(value: Any) -> Any:
    """Return a state name as a string when YAML typed it as a scalar.

    YAML 1.1 boolean words (e.g., true, false, yes, no, on, off) get converted
    to Python True/False, and bare numbers to int/float. State names are opaque
    labels, so such scalars are converted to their string form ("True",
    "False", "1", ...). ``None`` and container values are returned unchanged
    so schema validation can report them.

    Examples:
        >>> normalize_yaml_name(True)
        'True'
        >>> normalize_yaml_name(3)
        '3'
        >>> normalize_yaml_name("s1")
        's1'
    """
    if isinstance(value, (bool, int, float)):
        return str(value)
    return value


def normalize_yaml_pairs(pairs: Iterable[Tuple[Any, V]]) -> List[Tuple[Any, V]]:
    """Normalize keys of ordered (key, value) pairs from YAML parsing.

    Order and repeated keys are preserved.

    Args:
        pairs: Key/value pairs as produced by a pair-preserving YAML loader.

    Returns:
        List of pairs with scalar keys converted to strings.
    """
    return [(normalize_yaml_name(key), value) for key, value in pairs]
