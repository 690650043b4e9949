"""
Exceptions raised by valuegraph.

Read operations never raise for missing nodes; they report absence through
empty or false results. Only writes that require existing nodes fail.
"""

from typing import Any, List


class ValueGraphError(Exception):
    """Base exception for valuegraph errors."""


class NodeNotFoundError(ValueGraphError, LookupError):
    """
    Raised when an edge is added between nodes that must already exist.

    Attributes:
        missing: The endpoint values that could not be resolved
    """

    def __init__(self, missing: List[Any]):
        self.missing = list(missing)
        names = ", ".join(repr(node) for node in self.missing)
        super().__init__(f"Node(s) not found: {names}")


class CycleError(ValueGraphError, ValueError):
    """Raised when an ordering is requested on a graph that contains cycles."""
