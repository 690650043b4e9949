"""
Edge representation.

Edges are never stored; they are derived from the adjacency table on demand
or resolved into it on insertion.
"""

from collections.abc import Mapping
from typing import Any, NamedTuple


class Edge(NamedTuple):
    """A directed pair of node values."""
    source: Any
    target: Any

    def reversed(self) -> "Edge":
        """Return the same edge pointing the other way."""
        return Edge(self.target, self.source)

    @classmethod
    def coerce(cls, edge: Any) -> "Edge":
        """
        Convert an edge-like value into an Edge.

        Accepts Edge instances, 2-item sequences, and mappings with
        ``source``/``target`` or ``from``/``to`` keys.

        Raises:
            TypeError: If the value cannot be read as a pair
        """
        if isinstance(edge, Edge):
            return edge
        if isinstance(edge, Mapping):
            if "source" in edge and "target" in edge:
                return cls(edge["source"], edge["target"])
            if "from" in edge and "to" in edge:
                return cls(edge["from"], edge["to"])
            raise TypeError(f"Edge mapping needs 'source'/'target' or 'from'/'to' keys: {edge!r}")
        try:
            source, target = edge
        except (TypeError, ValueError):
            raise TypeError(f"Cannot interpret {edge!r} as an edge") from None
        return cls(source, target)
