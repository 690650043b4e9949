"""
Tests for structural analysis: sources, sinks, reachability, cycles,
topological order and strongly connected components.
"""

import pytest

from valuegraph import CycleError, Graph


@pytest.fixture
def dag():
    return Graph(edges=[('a', 'b'), ('a', 'c'), ('b', 'd'), ('c', 'd')])


@pytest.fixture
def cyclic():
    return Graph(edges=[('a', 'b'), ('b', 'c'), ('c', 'a'), ('c', 'd')])


def test_sources_and_sinks(dag):
    assert dag.get_sources() == ['a']
    assert dag.get_sinks() == ['d']


def test_isolated_node_is_source_and_sink():
    graph = Graph(nodes=['solo'])
    assert graph.get_sources() == ['solo']
    assert graph.get_sinks() == ['solo']


def test_reachable(dag, cyclic):
    assert dag.reachable('a') == ['b', 'c', 'd']
    assert dag.reachable('d') == []
    assert set(cyclic.reachable('a')) == {'a', 'b', 'c', 'd'}
    assert dag.reachable('zzz') == []


def test_topological_sort(dag):
    order = dag.topological_sort()
    assert sorted(order) == ['a', 'b', 'c', 'd']
    for source, target in dag.edges:
        assert order.index(source) < order.index(target)


def test_topological_sort_rejects_cycles(cyclic):
    with pytest.raises(CycleError):
        cyclic.topological_sort()


def test_cycle_error_is_value_error(cyclic):
    with pytest.raises(ValueError):
        cyclic.topological_sort()


def test_detect_cycles(dag, cyclic):
    assert dag.detect_cycles() == []
    assert cyclic.detect_cycles() == [['a', 'b', 'c', 'a']]


def test_self_loop_is_a_cycle():
    graph = Graph(edges=[('a', 'a')])
    assert graph.detect_cycles() == [['a', 'a']]


def test_strongly_connected_components(cyclic):
    components = sorted(sorted(component) for component in cyclic.strongly_connected_components())
    assert components == [['a', 'b', 'c'], ['d']]


def test_components_of_dag_are_singletons(dag):
    assert all(len(component) == 1 for component in dag.strongly_connected_components())


class TestLongPaths:

    LENGTH = 3000

    @pytest.fixture
    def long_chain(self):
        return Graph(edges=[(i, i + 1) for i in range(self.LENGTH)])

    @pytest.fixture
    def long_cycle(self):
        return Graph(edges=[(i, (i + 1) % self.LENGTH) for i in range(self.LENGTH)])

    def test_chain_has_no_cycles(self, long_chain):
        assert long_chain.detect_cycles() == []

    def test_chain_topological_order(self, long_chain):
        assert long_chain.topological_sort() == list(range(self.LENGTH + 1))

    def test_chain_components_are_singletons(self, long_chain):
        components = long_chain.strongly_connected_components()
        assert len(components) == self.LENGTH + 1
        assert components[0] == [self.LENGTH]

    def test_cycle_found_once(self, long_cycle):
        cycles = long_cycle.detect_cycles()
        assert cycles == [list(range(self.LENGTH)) + [0]]

    def test_cycle_is_one_component(self, long_cycle):
        components = long_cycle.strongly_connected_components()
        assert len(components) == 1
        assert sorted(components[0]) == list(range(self.LENGTH))

    def test_cycle_error_names_blocked_nodes(self):
        graph = Graph(edges=[('start', 'a'), ('a', 'b'), ('b', 'a'), ('b', 'end')])
        with pytest.raises(CycleError, match="3 node"):
            graph.topological_sort()
