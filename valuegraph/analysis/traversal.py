"""
Graph traversal.

This module provides the visitor-based traversals over out-edges.
"""

import logging
from collections import deque
from typing import Any, Callable, Deque, Iterator, List, Optional, Set

from ..core.graph import GraphStore

logger = logging.getLogger(__name__)

Visitor = Callable[[Any], None]


class Traverser:
    """
    Traversal algorithms over a graph store.

    Both traversals keep a pending list seeded with the start node. Each step
    extracts one pending node, skips it if already visited, marks it visited,
    reports it, then appends all of its out-neighbors to the pending list.
    They differ only in which end of the pending list is extracted:

    - ``dfs`` extracts from the front
    - ``bfs`` extracts from the back

    This is the reverse of the textbook assignment and is the documented
    visiting order of this library.
    """

    def __init__(self, graph: GraphStore):
        """
        Initialize the traverser.

        Args:
            graph: GraphStore instance to traverse
        """
        self.graph = graph

    def iter_dfs(self, start: Any) -> Iterator[Any]:
        """Yield nodes reachable from ``start``, extracting pending nodes from the front."""
        return self._walk(start, from_front=True)

    def iter_bfs(self, start: Any) -> Iterator[Any]:
        """Yield nodes reachable from ``start``, extracting pending nodes from the back."""
        return self._walk(start, from_front=False)

    def dfs(self, start: Any, visitor: Optional[Visitor] = None) -> List[Any]:
        """
        Visit every node reachable from ``start``, front extraction.

        Args:
            start: Start node value
            visitor: Optional callback invoked once per visited node

        Returns:
            Visited nodes in visiting order; empty if ``start`` is unknown
        """
        return self._collect(self.iter_dfs(start), visitor)

    def bfs(self, start: Any, visitor: Optional[Visitor] = None) -> List[Any]:
        """
        Visit every node reachable from ``start``, back extraction.

        Args:
            start: Start node value
            visitor: Optional callback invoked once per visited node

        Returns:
            Visited nodes in visiting order; empty if ``start`` is unknown
        """
        return self._collect(self.iter_bfs(start), visitor)

    @staticmethod
    def _collect(nodes: Iterator[Any], visitor: Optional[Visitor]) -> List[Any]:
        visited = []
        for node in nodes:
            if visitor is not None:
                visitor(node)
            visited.append(node)
        return visited

    def _walk(self, start: Any, from_front: bool) -> Iterator[Any]:
        start_id = self.graph.get_node_id(start)
        if start_id is None:
            logger.warning(f"Traversal start {start!r} is not in the graph")
            return

        visited: Set[int] = set()
        pending: Deque[int] = deque([start_id])

        while pending:
            current_id = pending.popleft() if from_front else pending.pop()
            if current_id in visited:
                continue

            visited.add(current_id)
            yield self.graph.get_node_by_id(current_id)

            pending.extend(self.graph.out_ids(current_id))

        logger.debug(f"Traversal from {start_id} visited {len(visited)} nodes")
