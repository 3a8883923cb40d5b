"""Tests for map predicates and mapper strategies."""

import pytest
from collections import ChainMap, OrderedDict, defaultdict
from types import MappingProxyType
from jmap.mappers import GeneralMapper, MinMapper
from jmap.models import TreeNode
from jmap.predicates import is_general_map, is_min_map, is_string_key_map, is_tree_node
from jmap.primap import PriMap


class BrokenKeys(dict):
    """Dict whose key iteration fails."""

    def __iter__(self):
        raise RuntimeError("cannot iterate")


class TestPredicates:
    """Tests for the map predicate functions."""

    def test_min_map_accepts_plain_dict(self):
        """Test narrow predicate on a plain string-keyed dict."""
        assert is_min_map({"a": 1, "b": {"c": 2}})
        assert is_min_map({})

    @pytest.mark.parametrize("value", [
        None, 0, "text", [1], ("a",), {1: "a"}, {"a": 1, 2: "b"},
        OrderedDict(a=1), defaultdict(int), MappingProxyType({"a": 1}),
    ])
    def test_min_map_rejects(self, value):
        """Test narrow predicate on everything that is not a plain dict."""
        assert not is_min_map(value)

    @pytest.mark.parametrize("value", [
        {"a": 1}, OrderedDict(a=1), defaultdict(int, a=1),
        MappingProxyType({"a": 1}), ChainMap({"a": 1}, {"b": 2}), PriMap({"a": 1}),
    ])
    def test_general_map_accepts_mappings(self, value):
        """Test broad predicate on string-keyed mappings."""
        assert is_general_map(value)
        assert is_string_key_map(value)

    @pytest.mark.parametrize("value", [None, 1.5, "text", [("a", 1)], {1: "a"}, {("a",): 1}])
    def test_general_map_rejects(self, value):
        """Test broad predicate on non-mappings and non-string keys."""
        assert not is_general_map(value)
        assert not is_string_key_map(value)

    def test_predicates_do_not_raise(self):
        """Test that a mapping with failing key iteration is not a map."""
        broken = BrokenKeys(a=1)

        assert not is_min_map(broken)
        assert not is_general_map(broken)

    def test_is_tree_node(self):
        """Test recognizing internal canonical nodes by tag."""
        assert is_tree_node(TreeNode.internal())
        assert not is_tree_node(TreeNode.leaf({"a": 1}))
        assert not is_tree_node({"a": 1})
        assert not is_tree_node(None)


class TestMappers:
    """Tests for MinMapper and GeneralMapper."""

    def test_min_mapper(self):
        """Test narrow mapper recognition and unpacking."""
        mapper = MinMapper()
        data = {"a": 1, "b": {"c": 2}}

        assert mapper.is_map(data)
        assert not mapper.is_map(OrderedDict(data))

        keys, values = mapper.unpack(data)
        assert keys == ["a", "b"]
        assert values == [1, {"c": 2}]
        assert values[1] is data["b"]

    def test_general_mapper(self):
        """Test broad mapper recognition and unpacking."""
        mapper = GeneralMapper()
        data = MappingProxyType({"x": 1, "y": 2})

        assert mapper.is_map(data)
        assert mapper.is_map({"x": 1})
        assert not mapper.is_map([1, 2])

        keys, values = mapper.unpack(data)
        assert dict(zip(keys, values)) == {"x": 1, "y": 2}

    def test_general_mapper_chain_map(self):
        """Test unpacking a ChainMap resolves shadowed keys."""
        keys, values = GeneralMapper().unpack(ChainMap({"a": 1}, {"a": 2, "b": 3}))

        assert dict(zip(keys, values)) == {"a": 1, "b": 3}

    def test_unpack_empty(self):
        """Test unpacking an empty map."""
        assert MinMapper().unpack({}) == ([], [])
        assert GeneralMapper().unpack({}) == ([], [])
