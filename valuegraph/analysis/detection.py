"""
Structural analysis of graphs.

This module provides algorithms for detecting sources, sinks, cycles and
strongly connected components, and for ordering nodes topologically.
"""

import logging
from collections import deque
from typing import Any, Dict, Iterator, List, Set, Tuple

from ..core.graph import GraphStore
from ..exceptions import CycleError

logger = logging.getLogger(__name__)


class StructureAnalyzer:
    """
    Detects structural features of a graph.

    This class provides methods for:
    - Finding sources and sinks
    - Reachability from a node
    - Detecting cycles
    - Topological ordering
    - Strongly connected components
    """

    def __init__(self, graph: GraphStore):
        """
        Initialize the structure analyzer.

        Args:
            graph: GraphStore instance to analyze
        """
        self.graph = graph

    def _values(self, node_ids: List[int]) -> List[Any]:
        return [self.graph.get_node_by_id(node_id) for node_id in node_ids]

    def get_sources(self) -> List[Any]:
        """Get nodes with no incoming edges."""
        reverse = self.graph.in_neighbour_map()
        return self._values([node_id for node_id in self.graph.node_ids() if not reverse[node_id]])

    def get_sinks(self) -> List[Any]:
        """Get nodes with no outgoing edges."""
        return self._values([node_id for node_id in self.graph.node_ids() if not self.graph.adjacency_list[node_id]])

    def reachable(self, start: Any) -> List[Any]:
        """
        Find all nodes reachable from ``start`` along out-edges.

        Args:
            start: Start node value

        Returns:
            Reachable nodes in discovery order. ``start`` itself is included
            only when it lies on a cycle. Empty if ``start`` is unknown.
        """
        start_id = self.graph.get_node_id(start)
        if start_id is None:
            return []

        reachable: List[int] = []
        seen: Set[int] = set()
        queue = deque([start_id])

        while queue:
            current_id = queue.popleft()
            for neighbor_id in self.graph.out_ids(current_id):
                if neighbor_id not in seen:
                    seen.add(neighbor_id)
                    reachable.append(neighbor_id)
                    queue.append(neighbor_id)

        return self._values(reachable)

    def detect_cycles(self) -> List[List[Any]]:
        """
        Detect cycles using DFS back edges.

        Each back edge reports one cycle, closed so that the first and last
        entries are the same node. On undirected graphs every edge shows up
        as a two-node cycle. The walk keeps its own stack of successor
        iterators, so path length is not bounded by the recursion limit.

        Returns:
            List of cycles, each a list of node values
        """
        cycles: List[List[int]] = []
        finished: Set[int] = set()

        for root_id in self.graph.node_ids():
            if root_id in finished:
                continue

            # path position of every node on the current DFS branch
            on_path: Dict[int, int] = {root_id: 0}
            path: List[int] = [root_id]
            branches: List[Iterator[int]] = [iter(self.graph.out_ids(root_id))]

            while branches:
                neighbor_id = next(branches[-1], None)
                if neighbor_id is None:
                    branches.pop()
                    done_id = path.pop()
                    del on_path[done_id]
                    finished.add(done_id)
                elif neighbor_id in on_path:
                    cycles.append(path[on_path[neighbor_id]:] + [neighbor_id])
                elif neighbor_id not in finished:
                    on_path[neighbor_id] = len(path)
                    path.append(neighbor_id)
                    branches.append(iter(self.graph.out_ids(neighbor_id)))

        logger.debug(f"Cycle detection found {len(cycles)} cycles")
        return [self._values(cycle) for cycle in cycles]

    def topological_sort(self) -> List[Any]:
        """
        Order nodes so every edge points forward.

        Nodes are released once all of their in-neighbors have been placed;
        ties keep store order.

        Returns:
            Topologically sorted node values

        Raises:
            CycleError: If the graph contains a cycle. The message names the
                nodes that could not be placed.
        """
        pending = {node_id: len(sources) for node_id, sources in self.graph.in_neighbour_map().items()}
        ready = deque(node_id for node_id, count in pending.items() if count == 0)
        order: List[int] = []

        while ready:
            node_id = ready.popleft()
            order.append(node_id)
            del pending[node_id]

            for neighbor_id in self.graph.out_ids(node_id):
                pending[neighbor_id] -= 1
                if pending[neighbor_id] == 0:
                    ready.append(neighbor_id)

        if pending:
            blocked = self._values(list(pending))
            raise CycleError(f"Cannot order {len(blocked)} node(s) lying on or behind a cycle: {blocked!r}")

        return self._values(order)

    def strongly_connected_components(self) -> List[List[Any]]:
        """
        Find strongly connected components using Tarjan's algorithm.

        The DFS is driven by an explicit work list of (node, successor
        iterator) frames instead of recursion.

        Returns:
            List of components in the order they complete, each a list of
            node values
        """
        discovery: Dict[int, int] = {}
        low: Dict[int, int] = {}
        component_stack: List[int] = []
        on_stack: Set[int] = set()
        components: List[List[int]] = []

        def open_frame(node_id: int) -> Tuple[int, Iterator[int]]:
            discovery[node_id] = low[node_id] = len(discovery)
            component_stack.append(node_id)
            on_stack.add(node_id)
            return node_id, iter(self.graph.out_ids(node_id))

        for root_id in self.graph.node_ids():
            if root_id in discovery:
                continue

            frames = [open_frame(root_id)]
            while frames:
                node_id, successors = frames[-1]
                for neighbor_id in successors:
                    if neighbor_id not in discovery:
                        frames.append(open_frame(neighbor_id))
                        break
                    if neighbor_id in on_stack:
                        low[node_id] = min(low[node_id], discovery[neighbor_id])
                else:
                    frames.pop()
                    if frames:
                        parent_id = frames[-1][0]
                        low[parent_id] = min(low[parent_id], low[node_id])

                    if low[node_id] == discovery[node_id]:
                        component = []
                        member_id = None
                        while member_id != node_id:
                            member_id = component_stack.pop()
                            on_stack.discard(member_id)
                            component.append(member_id)
                        components.append(component)

        logger.debug(f"Found {len(components)} strongly connected components")
        return [self._values(component) for component in components]
