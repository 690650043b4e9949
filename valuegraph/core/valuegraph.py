"""
Main facade class for graph analysis.

This module provides the Graph class, which owns a GraphStore and delegates
traversal, similarity, community and structure analysis to specialized
modules.
"""

import logging
from typing import Any, Callable, Hashable, Iterable, Iterator, List, Mapping, Optional, Union

from ..analysis.community import DEFAULT_ITERATIONS, LabelPropagation
from ..analysis.detection import StructureAnalyzer
from ..analysis.similarity import SimilarityAnalyzer
from ..analysis.traversal import Traverser, Visitor
from ..classes.edge import Edge
from ..classes.results import NodeLabel, NodeMeasure
from .graph import GraphStore
from .options import GraphOptions

logger = logging.getLogger(__name__)


class Graph:
    """
    In-memory graph with value-identity nodes.

    Nodes are arbitrary values; structurally equal values are the same node.
    Mutating operations return the graph so calls can be chained.

    Example:
        >>> graph = Graph(edges=[("a", "b"), ("c", "a")])
        >>> graph.has_edge("a", "b")
        True
        >>> graph.dfs("c")
        ['c', 'a', 'b']
    """

    def __init__(self, nodes: Optional[Iterable[Any]] = None, edges: Optional[Iterable[Any]] = None,
                 options: Optional[Union[GraphOptions, Mapping[str, Any]]] = None):
        """
        Initialize the graph.

        Args:
            nodes: Optional initial node values
            edges: Optional initial edges (Edge, pairs, or mappings)
            options: GraphOptions, a mapping of option overrides, or None for defaults
        """
        # Initialize core store
        self._graph = GraphStore(options)

        # Initialize analysis components
        self._traverser = Traverser(self._graph)
        self._similarity = SimilarityAnalyzer(self._graph)
        self._community = LabelPropagation(self._graph)
        self._structure = StructureAnalyzer(self._graph)

        if nodes is not None:
            self._graph.add_nodes(nodes)
        if edges is not None:
            self._graph.add_edges(edges)

        logger.debug(f"Initialized {self._graph!r}")

    @property
    def options(self) -> GraphOptions:
        return self._graph.options

    @property
    def store(self) -> GraphStore:
        """The underlying node/edge store."""
        return self._graph

    # ========================================================================
    # NODE OPERATIONS
    # ========================================================================

    def add_node(self, node: Any) -> int:
        """Add a node value and return its internal Id."""
        return self._graph.add_node(node)

    def add_nodes(self, nodes: Iterable[Any]) -> List[int]:
        """Add node values and return their Ids in input order."""
        return self._graph.add_nodes(nodes)

    def has_node(self, node: Any) -> bool:
        """Check whether a value is a node of the graph."""
        return self._graph.has_node(node)

    def has_nodes(self, nodes: Iterable[Any]) -> bool:
        """Check whether all values are nodes of the graph."""
        return self._graph.has_nodes(nodes)

    def get_node_id(self, node: Any) -> Optional[int]:
        """Get the internal Id of a node value, or None."""
        return self._graph.get_node_id(node)

    def remove_node(self, node: Any) -> "Graph":
        """Remove a node together with its edges."""
        self._graph.remove_node(node)
        return self

    @property
    def nodes(self) -> List[Any]:
        return self._graph.nodes

    # ========================================================================
    # EDGE OPERATIONS
    # ========================================================================

    def add_edge(self, source: Any, target: Any, add_nodes_if_missing: Optional[bool] = None) -> "Graph":
        """Add an edge; see GraphStore.add_edge."""
        self._graph.add_edge(source, target, add_nodes_if_missing)
        return self

    def add_edges(self, edges: Iterable[Any], add_nodes_if_missing: Optional[bool] = None) -> "Graph":
        """Add edges in order without rollback on failure."""
        self._graph.add_edges(edges, add_nodes_if_missing)
        return self

    def has_edge(self, source: Any, target: Any) -> bool:
        """Check for an edge; either direction counts on undirected graphs."""
        return self._graph.has_edge(source, target)

    def remove_edge(self, source: Any, target: Any) -> "Graph":
        """Remove an edge (both directions on undirected graphs)."""
        self._graph.remove_edge(source, target)
        return self

    @property
    def edges(self) -> List[Edge]:
        return self._graph.edges

    # ========================================================================
    # NEIGHBORHOOD QUERIES
    # ========================================================================

    def get_out_neighbours(self, node: Any) -> List[Any]:
        return self._graph.get_out_neighbours(node)

    def get_in_neighbours(self, node: Any) -> List[Any]:
        return self._graph.get_in_neighbours(node)

    def get_neighbours(self, node: Any) -> List[Any]:
        return self._graph.get_neighbours(node)

    def out_degree(self, node: Any) -> int:
        return self._graph.out_degree(node)

    def in_degree(self, node: Any) -> int:
        return self._graph.in_degree(node)

    def degree(self, node: Any) -> int:
        return self._graph.degree(node)

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def dfs(self, start: Any, visitor: Optional[Visitor] = None) -> List[Any]:
        """Traverse from ``start`` extracting pending nodes from the front."""
        return self._traverser.dfs(start, visitor)

    def bfs(self, start: Any, visitor: Optional[Visitor] = None) -> List[Any]:
        """Traverse from ``start`` extracting pending nodes from the back."""
        return self._traverser.bfs(start, visitor)

    def iter_dfs(self, start: Any) -> Iterator[Any]:
        return self._traverser.iter_dfs(start)

    def iter_bfs(self, start: Any) -> Iterator[Any]:
        return self._traverser.iter_bfs(start)

    # ========================================================================
    # SIMILARITY
    # ========================================================================

    def jaccard(self, first: Any, second: Any) -> float:
        return self._similarity.jaccard(first, second)

    def overlap(self, first: Any, second: Any) -> float:
        return self._similarity.overlap(first, second)

    def adamic_adar(self, first: Any, second: Any) -> float:
        return self._similarity.adamic_adar(first, second)

    def jaccard_all(self, node: Any) -> List[NodeMeasure]:
        return self._similarity.jaccard_all(node)

    def overlap_all(self, node: Any) -> List[NodeMeasure]:
        return self._similarity.overlap_all(node)

    def adamic_adar_all(self, node: Any) -> List[NodeMeasure]:
        return self._similarity.adamic_adar_all(node)

    # ========================================================================
    # COMMUNITY DETECTION
    # ========================================================================

    def label_propagation(self, iterations: int = DEFAULT_ITERATIONS,
                          initial_label: Optional[Callable[[Any], Hashable]] = None) -> List[NodeLabel]:
        """Run label propagation; see LabelPropagation.run."""
        return self._community.run(iterations, initial_label)

    # ========================================================================
    # STRUCTURE ANALYSIS
    # ========================================================================

    def get_sources(self) -> List[Any]:
        """Get nodes with no incoming edges."""
        return self._structure.get_sources()

    def get_sinks(self) -> List[Any]:
        """Get nodes with no outgoing edges."""
        return self._structure.get_sinks()

    def reachable(self, start: Any) -> List[Any]:
        return self._structure.reachable(start)

    def detect_cycles(self) -> List[List[Any]]:
        return self._structure.detect_cycles()

    def topological_sort(self) -> List[Any]:
        return self._structure.topological_sort()

    def strongly_connected_components(self) -> List[List[Any]]:
        return self._structure.strongly_connected_components()

    # ========================================================================
    # CONTAINER PROTOCOL
    # ========================================================================

    def __len__(self) -> int:
        return len(self._graph)

    def __contains__(self, node: Any) -> bool:
        return node in self._graph

    def __iter__(self) -> Iterator[Any]:
        return iter(self._graph)

    def __repr__(self) -> str:
        return repr(self._graph).replace(type(self._graph).__name__, type(self).__name__, 1)
