"""YAML loader + schema validation for adjacency specifications.

Two document shapes are accepted::

    # flat: state name -> ordered successor names
    start: [s1, s2]
    s1: [accept]
    s2: [accept]
    accept: []

    # wrapped: optional entry override
    entry: begin
    states:
      begin: [end]
      end: []

Mappings are read as ordered pairs so that state order and successor order
survive loading and a repeated state name reaches ``build_graph`` (where it
raises ``DuplicateStateError``) instead of being silently overwritten.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import jsonschema
import yaml

from parsegraph.graph import ParseGraph, build_graph
from parsegraph.logging import get_logger
from parsegraph.utils.yaml_utils import normalize_yaml_name, normalize_yaml_pairs

logger = get_logger(__name__)

_WRAPPED_KEYS = {"entry", "states"}


class _Pairs(list):
    """YAML mapping kept as an ordered list of (key, value) pairs."""


class _SpecLoader(yaml.SafeLoader):
    """SafeLoader that keeps mapping order and repeated keys."""


def _construct_pairs(loader: yaml.SafeLoader, node: yaml.MappingNode) -> _Pairs:
    return _Pairs(loader.construct_pairs(node, deep=True))


_SpecLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_pairs
)


@dataclass
class GraphSpec:
    """Ordered adjacency specification read from YAML.

    Attributes:
        states: ``(name, successors)`` pairs in document order.
        entry: Entry state override, or None for the configured default.
    """

    states: List[Tuple[str, List[str]]]
    entry: Optional[str] = None

    def build(self) -> ParseGraph:
        """Build the parse graph described by this specification."""
        return build_graph(self.states, entry_state=self.entry)


def _to_plain(value: Any) -> Any:
    """Convert pair lists back to dicts so the schema sees real objects."""
    if isinstance(value, _Pairs):
        return {key: _to_plain(val) for key, val in value}
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    return value


def _is_wrapped(pairs: _Pairs) -> bool:
    keys = {key for key, _ in pairs}
    return "states" in keys and keys <= _WRAPPED_KEYS


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("parsegraph.schemas")
        .joinpath("graph_spec.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_graph_spec(yaml_str: str) -> GraphSpec:
    """Load, normalize and validate an adjacency specification YAML string.

    Args:
        yaml_str: YAML document in the flat or wrapped shape.

    Returns:
        GraphSpec with states in document order.

    Raises:
        ValueError: If the document is not a mapping at top level, or a
            wrapped document repeats its ``entry`` or ``states`` key.
        yaml.YAMLError: If the text is not valid YAML.
        jsonschema.ValidationError: If the document does not match the schema.
    """
    data = yaml.load(yaml_str, Loader=_SpecLoader)
    if not isinstance(data, _Pairs):
        raise ValueError(
            "The provided YAML must map state names to successor lists at top-level."
        )

    entry: Any = None
    if _is_wrapped(data):
        seen = set()
        for key, _ in data:
            if key in seen:
                raise ValueError(f"Repeated top-level key '{key}' in specification")
            seen.add(key)
        wrapped = dict(data)
        entry = normalize_yaml_name(wrapped.get("entry"))
        states = wrapped["states"]
        if not isinstance(states, _Pairs):
            raise ValueError("'states' must be a mapping of state names")
    else:
        states = data

    pairs = []
    for name, successors in normalize_yaml_pairs(states):
        if isinstance(successors, list) and not isinstance(successors, _Pairs):
            successors = [normalize_yaml_name(item) for item in successors]
        pairs.append((name, successors))

    document: Dict[str, Any] = {"states": _to_plain(_Pairs(pairs))}
    if entry is not None:
        document["entry"] = entry
    jsonschema.validate(document, _load_schema())

    spec = GraphSpec(
        states=[(name, list(successors or [])) for name, successors in pairs],
        entry=entry,
    )
    logger.debug("Loaded adjacency specification with %d states", len(spec.states))
    return spec


def load_graph_spec_file(path: Union[str, Path]) -> GraphSpec:
    """Read and load an adjacency specification file; see ``load_graph_spec``."""
    return load_graph_spec(Path(path).read_text(encoding="utf-8"))
