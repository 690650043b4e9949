"""
Community detection by label propagation.
"""

import logging
from collections import Counter
from typing import Any, Callable, Dict, Hashable, List, Optional

from ..classes.results import NodeLabel
from ..core.graph import GraphStore

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 15


class LabelPropagation:
    """
    Synchronous label propagation over combined neighborhoods.

    Every round reads the labels of the previous round only, so the result
    does not depend on the order nodes are updated in. The number of rounds
    is fixed; there is no convergence check.
    """

    def __init__(self, graph: GraphStore):
        """
        Initialize label propagation.

        Args:
            graph: GraphStore instance to label
        """
        self.graph = graph

    def run(self, iterations: int = DEFAULT_ITERATIONS,
            initial_label: Optional[Callable[[Any], Hashable]] = None) -> List[NodeLabel]:
        """
        Propagate labels for a fixed number of rounds.

        Args:
            iterations: Number of rounds to run
            initial_label: Function of a node value giving its starting label.
                Defaults to the node's internal Id, which makes every label
                distinct.

        Returns:
            NodeLabel for every node in store order

        Raises:
            ValueError: If ``iterations`` is negative
        """
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}")

        node_ids = self.graph.node_ids()
        if initial_label is None:
            labels: Dict[int, Hashable] = {node_id: node_id for node_id in node_ids}
        else:
            labels = {node_id: initial_label(self.graph.get_node_by_id(node_id)) for node_id in node_ids}

        reverse = self.graph.in_neighbour_map()
        neighbourhoods = {
            node_id: set(self.graph.adjacency_list[node_id]).union(reverse[node_id])
            for node_id in node_ids
        }

        for round_index in range(iterations):
            previous = labels
            labels = {
                node_id: self._majority_label(neighbourhoods[node_id], previous, previous[node_id])
                for node_id in node_ids
            }
            changed = sum(1 for node_id in node_ids if labels[node_id] != previous[node_id])
            logger.debug(f"Label propagation round {round_index + 1}/{iterations}: {changed} labels changed")

        return [NodeLabel(self.graph.get_node_by_id(node_id), labels[node_id]) for node_id in node_ids]

    @staticmethod
    def _majority_label(neighbour_ids, labels: Dict[int, Hashable], current: Hashable) -> Hashable:
        """
        Most frequent label among the neighbors.

        Ties go to the lowest label. A node without neighbors keeps ``current``.
        """
        if not neighbour_ids:
            return current

        frequencies = Counter(labels[neighbour_id] for neighbour_id in neighbour_ids)
        highest = max(frequencies.values())
        return min(label for label, frequency in frequencies.items() if frequency == highest)
