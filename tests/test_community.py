"""
Tests for label propagation.
"""

import pytest

from valuegraph import Graph, NodeLabel

TWO_TRIANGLES = [('a', 'b'), ('b', 'c'), ('c', 'a'), ('x', 'y'), ('y', 'z'), ('z', 'x')]


def labels_of(results):
    return {result.node: result.label for result in results}


class TestLabelPropagation:

    def test_two_components_get_two_labels(self):
        graph = Graph(edges=TWO_TRIANGLES)
        labels = labels_of(graph.label_propagation())

        assert labels['a'] == labels['b'] == labels['c']
        assert labels['x'] == labels['y'] == labels['z']
        assert labels['a'] != labels['x']

    def test_custom_initial_labels(self):
        graph = Graph(edges=TWO_TRIANGLES)
        labels = labels_of(graph.label_propagation(initial_label=lambda node: node))
        assert labels == {'a': 'a', 'b': 'a', 'c': 'a', 'x': 'x', 'y': 'x', 'z': 'x'}

    def test_zero_iterations_returns_initial_labels(self):
        graph = Graph(edges=TWO_TRIANGLES)
        results = graph.label_propagation(iterations=0)
        assert results == [NodeLabel(node, graph.get_node_id(node)) for node in graph.nodes]

    def test_updates_are_synchronous(self):
        graph = Graph(edges=[('a', 'b')])
        labels = labels_of(graph.label_propagation(iterations=1, initial_label=lambda node: node))
        # each node reads the other's previous label
        assert labels == {'a': 'b', 'b': 'a'}

    def test_fixed_iteration_count(self):
        graph = Graph(edges=[('a', 'b')])
        even = labels_of(graph.label_propagation(iterations=2, initial_label=lambda node: node))
        assert even == {'a': 'a', 'b': 'b'}

    def test_ties_go_to_lowest_label(self):
        graph = Graph(edges=[('hub', 'p'), ('hub', 'q')])
        labels = labels_of(graph.label_propagation(iterations=1, initial_label=lambda node: node))
        assert labels['hub'] == 'p'

    def test_isolated_node_keeps_label(self):
        graph = Graph(nodes=['alone'], edges=[('a', 'b')])
        labels = labels_of(graph.label_propagation(initial_label=lambda node: node.upper()))
        assert labels['alone'] == 'ALONE'

    def test_results_in_store_order(self):
        graph = Graph(edges=TWO_TRIANGLES)
        assert [result.node for result in graph.label_propagation()] == graph.nodes

    def test_negative_iterations_rejected(self):
        with pytest.raises(ValueError):
            Graph().label_propagation(iterations=-1)
