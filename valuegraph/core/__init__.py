"""
Core graph data structures and configuration.

This module contains the node/edge store and its options, without any of
the traversal or analysis algorithms.
"""

from .graph import GraphStore
from .options import DEFAULT_GRAPH_OPTIONS, GraphOptions

__all__ = ['GraphStore', 'GraphOptions', 'DEFAULT_GRAPH_OPTIONS']
