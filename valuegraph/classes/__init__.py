"""
Data classes shared across the valuegraph library.
"""

from .edge import Edge
from .results import NodeLabel, NodeMeasure

__all__ = [
    'Edge',
    'NodeMeasure',
    'NodeLabel',
]
