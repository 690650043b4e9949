"""
Tests for graph options and value canonicalisation.
"""

from dataclasses import dataclass

import pytest

from valuegraph import DEFAULT_GRAPH_OPTIONS, Edge, Graph, GraphOptions
from valuegraph.classes.utils import canonical_key, set_intersection


class TestGraphOptions:

    def test_defaults(self):
        options = Graph().options
        assert options.add_nodes_if_missing is True
        assert options.directed is True

    def test_mapping_overrides_do_not_touch_defaults(self):
        graph = Graph(options={'directed': False})
        assert graph.options.directed is False
        assert DEFAULT_GRAPH_OPTIONS.directed is True
        assert Graph().options.directed is True

    def test_camel_case_alias(self):
        assert GraphOptions.from_value({'addNodesIfMissing': False}).add_nodes_if_missing is False

    def test_instance_passthrough(self):
        options = GraphOptions(directed=False)
        assert Graph(options=options).options is options

    def test_unknown_option_rejected(self):
        with pytest.raises(ValueError):
            Graph(options={'weighted': True})

    def test_non_bool_rejected(self):
        with pytest.raises(ValueError):
            GraphOptions(directed='no')


@dataclass(frozen=True)
class FrozenPoint:
    x: int


class TestCanonicalKey:

    def test_hashable_values_are_their_own_key(self):
        assert canonical_key('a') == 'a'
        assert canonical_key(FrozenPoint(1)) == FrozenPoint(1)

    def test_nested_containers(self):
        first = {'a': [1, {'b': {2, 3}}], 'c': bytearray(b'xy')}
        second = {'c': bytearray(b'xy'), 'a': [1, {'b': {3, 2}}]}
        assert canonical_key(first) == canonical_key(second)
        hash(canonical_key(first))

    def test_tuple_with_unhashable_item_differs_from_list(self):
        assert canonical_key((1, [2])) != canonical_key([1, [2]])

    def test_set_and_frozenset_share_a_key(self):
        assert canonical_key({1, 2}) == canonical_key(frozenset({1, 2}))
        assert canonical_key((1, {2})) == canonical_key((1, frozenset({2})))

    def test_bytearray_and_bytes_share_a_key(self):
        assert canonical_key(bytearray(b'xy')) == canonical_key(b'xy')

    def test_named_tuple_keys_like_tuple(self):
        assert canonical_key(Edge('a', 'b')) == canonical_key(('a', 'b'))

    def test_equal_values_of_different_container_types_are_one_node(self):
        graph = Graph(nodes=[{1, 2}, frozenset({2, 1}), bytearray(b'q'), b'q'])
        assert len(graph) == 2
        assert graph.nodes == [{1, 2}, bytearray(b'q')]
        assert graph.has_node(frozenset({1, 2}))


def test_set_intersection():
    assert set_intersection({1, 2, 3}, {2, 3, 4}) == {2, 3}
    assert set_intersection(set(), {1}) == set()
