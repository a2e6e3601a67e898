"""Tests for structural validation: map_, every, all_, schema."""

from types import SimpleNamespace

import pytest

from checkmore.structure import Branch, Leaf, all_, build_tree, every, map_, schema
from checkmore.types import ConfigurationError


def is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_string(value):
    return isinstance(value, str)


# =============================================================================
# build_tree tests
# =============================================================================


class TestBuildTree:
    def test_resolves_leaves_and_branches(self):
        tree = build_tree({"a": is_number, "b": {"c": is_string}})

        assert tree.children["a"] == Leaf(is_number)
        assert isinstance(tree.children["b"], Branch)
        assert tree.children["b"].children["c"] == Leaf(is_string)

    def test_drops_non_predicates_by_default(self):
        tree = build_tree({"a": is_number, "b": 42})
        assert list(tree.children) == ["a"]

    def test_strict_rejects_non_predicates(self):
        with pytest.raises(ConfigurationError, match="not a predicate function for b"):
            build_tree({"a": is_number, "b": 42}, strict=True)

    def test_keeps_declaration_order(self):
        tree = build_tree({"z": is_number, "a": is_number, "m": is_number})
        assert list(tree.children) == ["z", "a", "m"]


# =============================================================================
# map_ tests
# =============================================================================


class TestMap:
    def test_flat(self):
        result = map_({"a": 1, "b": "x"}, {"a": is_number, "b": is_number})
        assert result == {"a": True, "b": False}

    def test_nested(self):
        result = map_({"a": {"b": 5}}, {"a": {"b": is_number}})
        assert result == {"a": {"b": True}}

    def test_ignores_properties_without_predicates(self):
        result = map_({"a": 1, "extra": "ignored"}, {"a": is_number})
        assert result == {"a": True}

    def test_missing_property_is_checked_as_none(self):
        seen = []

        def record(value):
            seen.append(value)
            return True

        map_({}, {"a": record})
        assert seen == [None]

    def test_missing_nested_object(self):
        result = map_({}, {"a": {"b": is_number}})
        assert result == {"a": {"b": False}}

    def test_reads_object_attributes(self):
        values = SimpleNamespace(port=8080, host="localhost")
        result = map_(values, {"port": is_number, "host": is_string})
        assert result == {"port": True, "host": True}

    def test_ignores_non_predicate_entries(self):
        result = map_({"a": 1, "b": 2}, {"a": is_number, "b": "not a predicate"})
        assert result == {"a": True}

    def test_accepts_prebuilt_tree(self):
        tree = build_tree({"a": is_number})
        assert map_({"a": 1}, tree) == {"a": True}


# =============================================================================
# every tests
# =============================================================================


class TestEvery:
    def test_empty_tree_is_true(self):
        assert every({}) is True

    def test_all_true(self):
        assert every({"a": True, "b": True}) is True

    def test_one_false(self):
        assert every({"a": True, "b": False}) is False

    def test_nested_false(self):
        assert every({"a": True, "b": {"c": {"d": False}}}) is False

    def test_nested_true(self):
        assert every({"a": {"b": True}, "c": {}}) is True

    def test_only_exact_false_fails(self):
        assert every({"a": 0, "b": None, "c": ""}) is True

    def test_visits_every_leaf(self):
        visited = []

        class Recording(dict):
            def values(self):
                for key, value in self.items():
                    visited.append(key)
                    yield value

        every(Recording(a=False, b=True, c=True))
        assert visited == ["a", "b", "c"]


# =============================================================================
# all_ / schema tests
# =============================================================================


class TestAll:
    def test_passing_object(self):
        assert all_({"a": 1, "b": "x"}, {"a": is_number, "b": is_string}) is True

    def test_failing_object(self):
        assert all_({"a": 1, "b": 2}, {"a": is_number, "b": is_string}) is False

    def test_nested_predicates(self):
        assert all_({"a": {"b": 5}}, {"a": {"b": is_number}}) is True
        assert all_({"a": {"b": "5"}}, {"a": {"b": is_number}}) is False

    def test_matches_every_of_map(self):
        obj = {"a": 1, "b": {"c": "x", "d": 3}}
        predicates = {"a": is_string, "b": {"c": is_string, "d": is_number}}
        assert all_(obj, predicates) == every(map_(obj, predicates))

    def test_rejects_non_mapping_object(self):
        with pytest.raises(ConfigurationError, match="missing object to check"):
            all_([1, 2], {"a": is_number})

    def test_rejects_non_mapping_predicates(self):
        with pytest.raises(ConfigurationError, match="missing predicates object"):
            all_({"a": 1}, is_number)

    def test_rejects_non_predicate_rule(self):
        with pytest.raises(ConfigurationError, match="not a predicate function for a"):
            all_({"a": 1}, {"a": "number"})

    def test_rejects_non_predicate_nested_rule(self):
        with pytest.raises(ConfigurationError, match="for c"):
            all_({"b": {"c": 1}}, {"b": {"c": 1}})


class TestSchema:
    def test_reversed_arguments(self):
        assert schema({"a": is_number}, {"a": 1}) is True
        assert schema({"a": is_number}, {"a": "1"}) is False
