"""
Construction-time configuration for graphs.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Union


@dataclass(frozen=True)
class GraphOptions:
    """
    Options shared by every operation on a graph.

    Attributes:
        add_nodes_if_missing: Create missing endpoints when adding an edge
        directed: Store edges one way (True) or symmetrically (False)
    """
    add_nodes_if_missing: bool = True
    directed: bool = True

    def __post_init__(self):
        for option in fields(self):
            value = getattr(self, option.name)
            if not isinstance(value, bool):
                raise ValueError(f"Option '{option.name}' must be a bool, got {value!r}")

    @classmethod
    def from_value(cls, options: Optional[Union["GraphOptions", Mapping[str, Any]]] = None) -> "GraphOptions":
        """
        Build options from an instance, a mapping of overrides, or None.

        Mapping keys may use either snake_case or the camelCase names
        (``addNodesIfMissing``). Unknown keys are rejected.
        """
        if options is None:
            return DEFAULT_GRAPH_OPTIONS
        if isinstance(options, GraphOptions):
            return options

        aliases = {"addNodesIfMissing": "add_nodes_if_missing"}
        known = {option.name for option in fields(cls)}
        overrides = {}
        for key, value in options.items():
            name = aliases.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown graph option: {key!r}")
            overrides[name] = value

        return replace(DEFAULT_GRAPH_OPTIONS, **overrides)


DEFAULT_GRAPH_OPTIONS = GraphOptions()
