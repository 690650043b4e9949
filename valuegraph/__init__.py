"""
valuegraph - In-memory Graph Container Library

A Python library for building small-to-medium graphs whose nodes are plain
values. Structurally equal values collapse into one node, edges can be
directed or undirected, and the graph supports traversal, neighborhood
similarity scoring and community detection by label propagation.

Main Classes:
    Graph: Main class for graph construction and analysis (facade)
    GraphStore: Node/edge storage with value-identity resolution
    GraphOptions: Construction-time configuration
    Edge: Transient (source, target) pair

Example:
    >>> from valuegraph import Graph
    >>> graph = Graph(edges=[("a", "b"), ("c", "a"), ("b", "c")])
    >>> round(graph.jaccard("a", "b"), 4)
    0.3333
"""

__version__ = "0.1.0"

from valuegraph.classes.edge import Edge
from valuegraph.classes.results import NodeLabel, NodeMeasure
from valuegraph.core.graph import GraphStore
from valuegraph.core.options import DEFAULT_GRAPH_OPTIONS, GraphOptions
from valuegraph.core.valuegraph import Graph
from valuegraph.exceptions import CycleError, NodeNotFoundError, ValueGraphError

__all__ = [
    'Graph',
    'GraphStore',
    'GraphOptions',
    'DEFAULT_GRAPH_OPTIONS',
    'Edge',
    'NodeMeasure',
    'NodeLabel',
    'ValueGraphError',
    'NodeNotFoundError',
    'CycleError',
]
