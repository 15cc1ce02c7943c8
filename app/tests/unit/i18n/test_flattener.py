"""Tests for transkit.i18n.flattener module."""

import pytest

from tests.factories.i18n import make_tree
from transkit.i18n.flattener import flatten, join_key
from transkit.i18n.merger import merge_trees


@pytest.mark.unit
class TestFlatten:
    """Tests for flatten()."""

    def test_nested_keys_joined_with_dots(self):
        tree = make_tree({"a": {"very": {"nested": {"message": "Hi"}}}, "hello": "Hello"})
        assert flatten(tree) == {"a.very.nested.message": "Hi", "hello": "Hello"}

    def test_empty_nodes_produce_nothing(self):
        assert flatten(make_tree({"empty": {}, "deeper": {"empty": {}}})) == {}

    def test_non_string_leaves_converted(self):
        assert flatten(make_tree({"count": 3, "ratio": 0.5})) == {"count": "3", "ratio": "0.5"}

    def test_prefix(self):
        assert flatten(make_tree({"b": "x"}), prefix="a") == {"a.b": "x"}

    def test_idempotent(self):
        """Flattening the same tree twice yields identical output."""
        tree = make_tree({"a": {"b": "1", "c": {"d": "2"}}})
        assert flatten(tree) == flatten(tree)

    def test_merged_tree_flattened(self):
        """Example: merged en.yml + en.extra.yml flattens to two keys."""
        merged = merge_trees([make_tree({"a": {"b": "1"}}), make_tree({"a": {"c": "2"}})])
        assert flatten(merged) == {"a.b": "1", "a.c": "2"}


@pytest.mark.unit
def test_join_key():
    assert join_key("", "a") == "a"
    assert join_key("a", "b") == "a.b"
