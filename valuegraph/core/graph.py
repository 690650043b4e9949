"""
Core graph data structure.

This module provides the node/edge store: node identities, the identity
index used for value deduplication, and the adjacency table. It holds no
analysis logic; traversal, similarity and community detection read it
through the neighbor queries defined here.
"""

import logging
from itertools import count
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Mapping, Optional, Union

from ..classes.edge import Edge
from ..classes.utils import canonical_key
from ..exceptions import NodeNotFoundError
from .options import GraphOptions

logger = logging.getLogger(__name__)


class GraphStore:
    """
    Node and edge storage with value-identity resolution.

    This class manages the fundamental graph representation:
    - Id minting and the Id -> value node table
    - Canonical key -> Id lookup so equal values share one node
    - The Id -> out-neighbor Ids adjacency table
    - Neighbor and degree queries by value or by Id

    Invariant: the node table and the adjacency table always have the same
    keys, and every Id inside a neighbor set is one of those keys.
    """

    def __init__(self, options: Optional[Union[GraphOptions, Mapping[str, Any]]] = None):
        """
        Initialize an empty store.

        Args:
            options: GraphOptions, a mapping of option overrides, or None for defaults
        """
        self.options = GraphOptions.from_value(options)

        # Node mappings
        self.id_to_node: Dict[int, Any] = {}
        self.key_to_id: Dict[Hashable, int] = {}

        # Graph structure
        self.adjacency_list: Dict[int, Dict[int, None]] = {}

        self._id_counter = count()

    @property
    def directed(self) -> bool:
        return self.options.directed

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def get_node_id(self, node: Any) -> Optional[int]:
        """
        Get the internal Id for a node value.

        Args:
            node: The value to look up

        Returns:
            Internal node Id, or None if the value is not in the graph
        """
        try:
            key = canonical_key(node)
        except TypeError:
            return None
        return self.key_to_id.get(key)

    def get_node_by_id(self, node_id: int) -> Any:
        """Get the node value stored under an internal Id."""
        return self.id_to_node[node_id]

    def node_ids(self) -> List[int]:
        """All node Ids in store order."""
        return list(self.id_to_node)

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def add_node(self, node: Any) -> int:
        """
        Add a node value, or resolve it if an equal value is already stored.

        Args:
            node: Node value; hashable, or a container of hashable values

        Returns:
            The node's Id (unchanged if it already existed)

        Raises:
            TypeError: If no identity key can be derived for the value
        """
        key = canonical_key(node)
        node_id = self.key_to_id.get(key)
        if node_id is not None:
            return node_id

        node_id = next(self._id_counter)
        self.key_to_id[key] = node_id
        self.id_to_node[node_id] = node
        self.adjacency_list[node_id] = {}
        return node_id

    def add_nodes(self, nodes: Iterable[Any]) -> List[int]:
        """Add several nodes; the returned Ids follow the input order."""
        return [self.add_node(node) for node in nodes]

    def has_node(self, node: Any) -> bool:
        return self.get_node_id(node) is not None

    def has_nodes(self, nodes: Iterable[Any]) -> bool:
        """True if every value in ``nodes`` is in the graph."""
        return all(self.has_node(node) for node in nodes)

    def remove_node(self, node: Any) -> "GraphStore":
        """
        Remove a node and every edge touching it.

        Does nothing if the node is not in the graph.
        """
        node_id = self.get_node_id(node)
        if node_id is None:
            return self

        del self.key_to_id[canonical_key(node)]
        del self.id_to_node[node_id]
        del self.adjacency_list[node_id]

        scrubbed = 0
        for neighbor_ids in self.adjacency_list.values():
            if node_id in neighbor_ids:
                del neighbor_ids[node_id]
                scrubbed += 1

        logger.debug(f"Removed node {node_id} and {scrubbed} incoming references")
        return self

    @property
    def nodes(self) -> List[Any]:
        """Node values in store order."""
        return list(self.id_to_node.values())

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, source: Any, target: Any, add_nodes_if_missing: Optional[bool] = None) -> "GraphStore":
        """
        Add an edge from ``source`` to ``target``.

        Undirected graphs store the edge in both directions.

        Args:
            source: Source node value
            target: Target node value
            add_nodes_if_missing: Create missing endpoints; None uses the graph option

        Returns:
            self, for chaining

        Raises:
            NodeNotFoundError: If an endpoint is missing and may not be created.
                Nothing is modified in that case.
        """
        if add_nodes_if_missing is None:
            add_nodes_if_missing = self.options.add_nodes_if_missing

        source_id = self.get_node_id(source)
        target_id = self.get_node_id(target)

        if source_id is None or target_id is None:
            if not add_nodes_if_missing:
                missing = [node for node, node_id in ((source, source_id), (target, target_id)) if node_id is None]
                raise NodeNotFoundError(missing)
            source_id = self.add_node(source)
            target_id = self.add_node(target)

        self.adjacency_list[source_id][target_id] = None
        if not self.directed:
            self.adjacency_list[target_id][source_id] = None
        return self

    def add_edges(self, edges: Iterable[Any], add_nodes_if_missing: Optional[bool] = None) -> "GraphStore":
        """
        Add edges in order.

        Edges already added stay in place if a later one fails.

        Args:
            edges: Edge instances, (source, target) pairs, or mappings
            add_nodes_if_missing: Create missing endpoints; None uses the graph option
        """
        for edge in edges:
            source, target = Edge.coerce(edge)
            self.add_edge(source, target, add_nodes_if_missing)
        return self

    def has_edge(self, source: Any, target: Any) -> bool:
        source_id = self.get_node_id(source)
        target_id = self.get_node_id(target)
        if source_id is None or target_id is None:
            return False

        if target_id in self.adjacency_list[source_id]:
            return True
        return not self.directed and source_id in self.adjacency_list[target_id]

    def remove_edge(self, source: Any, target: Any) -> "GraphStore":
        """Remove an edge; does nothing if either endpoint is unknown."""
        source_id = self.get_node_id(source)
        target_id = self.get_node_id(target)
        if source_id is None or target_id is None:
            return self

        self.adjacency_list[source_id].pop(target_id, None)
        if not self.directed:
            self.adjacency_list[target_id].pop(source_id, None)
        return self

    @property
    def edges(self) -> List[Edge]:
        """
        Materialize the edges as (source, target) pairs.

        One pair is produced per adjacency entry. Undirected graphs also
        produce the reverse pair of every entry, so each undirected edge
        appears twice in each direction.
        """
        result = []
        for source_id, target_ids in self.adjacency_list.items():
            source = self.id_to_node[source_id]
            for target_id in target_ids:
                edge = Edge(source, self.id_to_node[target_id])
                result.append(edge)
                if not self.directed:
                    result.append(edge.reversed())
        return result

    # ------------------------------------------------------------------
    # Neighbor queries by Id
    # ------------------------------------------------------------------

    def out_ids(self, node_id: int) -> List[int]:
        """Out-neighbor Ids in the order their edges were added."""
        return list(self.adjacency_list.get(node_id, ()))

    def in_ids(self, node_id: int) -> List[int]:
        """In-neighbor Ids in adjacency table order, found by a reverse scan."""
        if node_id not in self.adjacency_list:
            return []
        return [source_id for source_id, target_ids in self.adjacency_list.items() if node_id in target_ids]

    def neighbour_ids(self, node_id: int) -> List[int]:
        """
        Combined (in and out) neighborhood of a node.

        Out-neighbors come first in edge order, followed by in-neighbors not
        already listed, in adjacency table order.
        """
        if node_id not in self.adjacency_list:
            return []
        combined = dict(self.adjacency_list[node_id])
        combined.update(dict.fromkeys(self.in_ids(node_id)))
        return list(combined)

    def in_neighbour_map(self) -> Dict[int, Dict[int, None]]:
        """Reverse adjacency for every node, built in a single pass."""
        reverse: Dict[int, Dict[int, None]] = {node_id: {} for node_id in self.adjacency_list}
        for source_id, target_ids in self.adjacency_list.items():
            for target_id in target_ids:
                reverse[target_id][source_id] = None
        return reverse

    # ------------------------------------------------------------------
    # Neighbor queries by value
    # ------------------------------------------------------------------

    def _values(self, node_ids: Iterable[int]) -> List[Any]:
        return [self.id_to_node[node_id] for node_id in node_ids]

    def get_out_neighbours(self, node: Any) -> List[Any]:
        node_id = self.get_node_id(node)
        if node_id is None:
            return []
        return self._values(self.adjacency_list[node_id])

    def get_in_neighbours(self, node: Any) -> List[Any]:
        node_id = self.get_node_id(node)
        if node_id is None:
            return []
        return self._values(self.in_ids(node_id))

    def get_neighbours(self, node: Any) -> List[Any]:
        """Union of in- and out-neighbors, each node listed once."""
        node_id = self.get_node_id(node)
        if node_id is None:
            return []
        return self._values(self.neighbour_ids(node_id))

    def out_degree(self, node: Any) -> int:
        node_id = self.get_node_id(node)
        return 0 if node_id is None else len(self.adjacency_list[node_id])

    def in_degree(self, node: Any) -> int:
        node_id = self.get_node_id(node)
        return 0 if node_id is None else len(self.in_ids(node_id))

    def degree(self, node: Any) -> int:
        """Size of the combined neighborhood."""
        node_id = self.get_node_id(node)
        return 0 if node_id is None else len(self.neighbour_ids(node_id))

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.id_to_node)

    def __contains__(self, node: Any) -> bool:
        return self.has_node(node)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self.id_to_node.values()))

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        edge_count = sum(len(target_ids) for target_ids in self.adjacency_list.values())
        return f"<{type(self).__name__} {kind} nodes={len(self)} adjacency_entries={edge_count}>"
