"""
Tests for neighbor and degree queries.
"""

import pytest

from valuegraph import Graph


@pytest.fixture
def graph():
    return Graph(edges=[('a', 'b'), ('c', 'a')])


def test_out_neighbours(graph):
    assert 'b' in graph.get_out_neighbours('a')
    assert 'a' in graph.get_out_neighbours('c')
    assert graph.get_out_neighbours('b') == []


def test_in_neighbours(graph):
    assert graph.get_in_neighbours('a') == ['c']
    assert graph.get_in_neighbours('b') == ['a']
    assert graph.get_in_neighbours('c') == []


def test_combined_neighbours(graph):
    assert graph.get_neighbours('a') == ['b', 'c']


def test_combined_is_union_of_in_and_out():
    graph = Graph(edges=[('a', 'b'), ('b', 'a'), ('c', 'a'), ('a', 'd'), ('d', 'd')])
    for node in graph:
        expected = set(graph.get_out_neighbours(node)) | set(graph.get_in_neighbours(node))
        neighbours = graph.get_neighbours(node)
        assert set(neighbours) == expected
        assert len(neighbours) == len(expected)


def test_unknown_node_has_no_neighbours(graph):
    assert graph.get_out_neighbours('zzz') == []
    assert graph.get_in_neighbours('zzz') == []
    assert graph.get_neighbours('zzz') == []


def test_degrees(graph):
    assert graph.out_degree('a') == 1
    assert graph.in_degree('a') == 1
    assert graph.degree('a') == 2
    assert graph.degree('zzz') == 0


def test_unhashable_neighbours_are_returned_as_values():
    graph = Graph(edges=[({'k': 1}, {'k': 2}), ({'k': 1}, {'k': 3})])
    assert graph.get_out_neighbours({'k': 1}) == [{'k': 2}, {'k': 3}]
