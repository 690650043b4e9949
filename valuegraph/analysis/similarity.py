"""
Neighborhood similarity measures.

All measures compare combined neighborhoods (in- and out-neighbors), whatever
the directedness of the graph. Degenerate inputs follow IEEE float
semantics rather than raising:

- Jaccard is ``inf`` when both neighborhoods are empty
- Overlap is ``inf`` when either neighborhood is empty
- Adamic-Adar is ``inf`` when there is no common neighbor; a common neighbor
  with out-degree 1 contributes ``inf`` and one with out-degree 0
  contributes ``-0.0``
"""

import logging
from typing import Any, Callable, List, Set

import numpy as np

from ..classes.results import NodeMeasure
from ..classes.utils import set_intersection
from ..core.graph import GraphStore

logger = logging.getLogger(__name__)


def inverse_log_degree(degrees: np.ndarray) -> np.ndarray:
    """
    Compute ``1 / ln(degree)`` elementwise with IEEE semantics.

    ``ln(1) == 0`` gives ``inf`` and ``ln(0) == -inf`` gives ``-0.0``.
    """
    with np.errstate(divide="ignore"):
        return np.reciprocal(np.log(np.asarray(degrees, dtype=float)))


class SimilarityAnalyzer:
    """
    Pairwise and all-pairs similarity between nodes.

    This class provides:
    - Jaccard: shared neighbors over the union of neighbors
    - Overlap: squared shared neighbors over the smaller neighborhood
    - Adamic-Adar: shared neighbors weighted by 1 / ln(out-degree)
    - ``*_all`` variants comparing one node against every node in the graph
    """

    def __init__(self, graph: GraphStore):
        """
        Initialize the similarity analyzer.

        Args:
            graph: GraphStore instance to analyze
        """
        self.graph = graph

    def _neighbourhood(self, node: Any) -> Set[int]:
        node_id = self.graph.get_node_id(node)
        if node_id is None:
            return set()
        return set(self.graph.neighbour_ids(node_id))

    # ========================================================================
    # PAIRWISE MEASURES
    # ========================================================================

    def jaccard(self, first: Any, second: Any) -> float:
        first_neighbours = self._neighbourhood(first)
        second_neighbours = self._neighbourhood(second)
        shared = len(set_intersection(first_neighbours, second_neighbours))

        denominator = len(first_neighbours) + len(second_neighbours) - shared
        if denominator == 0:
            return float("inf")
        return shared / denominator

    def overlap(self, first: Any, second: Any) -> float:
        first_neighbours = self._neighbourhood(first)
        second_neighbours = self._neighbourhood(second)

        smaller = min(len(first_neighbours), len(second_neighbours))
        if smaller == 0:
            return float("inf")
        shared = len(set_intersection(first_neighbours, second_neighbours))
        return shared ** 2 / smaller

    def adamic_adar(self, first: Any, second: Any) -> float:
        shared = set_intersection(self._neighbourhood(first), self._neighbourhood(second))
        if not shared:
            return float("inf")

        out_degrees = [len(self.graph.adjacency_list[node_id]) for node_id in sorted(shared)]
        return float(sum(inverse_log_degree(out_degrees).tolist(), 0.0))

    # ========================================================================
    # ALL-PAIRS MEASURES
    # ========================================================================

    def _neighbourhood_matrix(self):
        """
        Build the boolean combined-neighborhood matrix.

        Returns:
            Tuple of (node_ids, matrix) where ``matrix[i, j]`` is True when
            ``node_ids[j]`` is a neighbor of ``node_ids[i]``
        """
        node_ids = self.graph.node_ids()
        index = {node_id: position for position, node_id in enumerate(node_ids)}
        matrix = np.zeros((len(node_ids), len(node_ids)), dtype=bool)

        for source_id, target_ids in self.graph.adjacency_list.items():
            row = index[source_id]
            for target_id in target_ids:
                column = index[target_id]
                matrix[row, column] = True
                matrix[column, row] = True

        return node_ids, matrix

    def _all_pairs(self, node: Any, measure: Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray],
                   name: str) -> List[NodeMeasure]:
        """
        Evaluate a vectorized measure between ``node`` and every stored node.

        Args:
            node: Reference node value
            measure: Function of (reference row, full matrix, node_ids array)
                returning one value per stored node
            name: Measure name used in log messages

        Returns:
            NodeMeasure for every node in store order, the reference included
        """
        node_ids, matrix = self._neighbourhood_matrix()
        if not node_ids:
            return []

        node_id = self.graph.get_node_id(node)
        if node_id is None:
            reference = np.zeros(len(node_ids), dtype=bool)
        else:
            reference = matrix[node_ids.index(node_id)]

        values = measure(reference, matrix, np.asarray(node_ids))
        logger.debug(f"Computed {name} for {len(node_ids)} node pairs")

        return [
            NodeMeasure(self.graph.get_node_by_id(other_id), float(value))
            for other_id, value in zip(node_ids, values.tolist())
        ]

    def jaccard_all(self, node: Any) -> List[NodeMeasure]:
        def measure(reference, matrix, _node_ids):
            shared = (matrix & reference).sum(axis=1)
            denominator = matrix.sum(axis=1) + reference.sum() - shared
            with np.errstate(divide="ignore", invalid="ignore"):
                ratio = shared / denominator
            return np.where(denominator == 0, np.inf, ratio)

        return self._all_pairs(node, measure, "Jaccard")

    def overlap_all(self, node: Any) -> List[NodeMeasure]:
        def measure(reference, matrix, _node_ids):
            shared = (matrix & reference).sum(axis=1)
            smaller = np.minimum(matrix.sum(axis=1), reference.sum())
            with np.errstate(divide="ignore", invalid="ignore"):
                ratio = shared.astype(float) ** 2 / smaller
            return np.where(smaller == 0, np.inf, ratio)

        return self._all_pairs(node, measure, "Overlap")

    def adamic_adar_all(self, node: Any) -> List[NodeMeasure]:
        graph = self.graph

        def measure(reference, matrix, node_ids):
            out_degrees = np.array([len(graph.adjacency_list[node_id]) for node_id in node_ids])
            weights = inverse_log_degree(out_degrees)
            common = matrix & reference
            scores = np.where(common, weights, 0.0).sum(axis=1)
            return np.where(common.any(axis=1), scores, np.inf)

        return self._all_pairs(node, measure, "Adamic-Adar")
