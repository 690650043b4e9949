"""
Result records returned by the analysis components.
"""

from typing import Any, Hashable, NamedTuple


class NodeMeasure(NamedTuple):
    """Similarity between a reference node and ``node``."""
    node: Any
    measure: float


class NodeLabel(NamedTuple):
    """Community label assigned to ``node`` by label propagation."""
    node: Any
    label: Hashable
