"""Tests for the ready-made actions and the functional API."""

import pytest

from jsonnav import (
    JSONNavigator,
    CopyPathsAction,
    CollectValuesAction,
    ValidatePathsAction,
    PathNotFoundError,
    NestedArrayError,
    CollectErrorsPolicy,
    navigate,
    copy_paths,
    extract_values,
    missing_paths,
    has_paths,
)
from jsonnav.actions import merge_trees


class TestCopyPaths:
    """CopyPathsAction / copy_paths."""

    def test_copies_only_named_branch(self, sample_tree):
        assert copy_paths(sample_tree, ["k1.k2"]) == {"k1": {"k2": "v1"}}

    def test_overlapping_paths_merge(self):
        tree = {"a": {"b": 1, "c": 2, "d": 3}}
        assert copy_paths(tree, ["a.b", "a.c"]) == {"a": {"b": 1, "c": 2}}

    def test_array_of_objects(self):
        tree = {"a": [{"b": 1, "x": 0}, {"b": 2, "x": 9}]}
        assert copy_paths(tree, "a.b") == {"a": [{"b": 1}, {"b": 2}]}

    def test_arrays_merge_element_wise(self):
        tree = {"a": [{"b": 1, "x": 0, "y": 5}, {"b": 2, "x": 9, "y": 6}]}
        assert copy_paths(tree, ["a.b", "a.x"]) == {"a": [{"b": 1, "x": 0}, {"b": 2, "x": 9}]}

    def test_nested_fan_out(self, orders_tree):
        assert copy_paths(orders_tree, ["orders.items.sku"]) == {
            "orders": [
                {"items": [{"sku": "A"}, {"sku": "B"}]},
                {"items": [{"sku": "C"}]},
                {"items": []},
            ]
        }

    def test_container_at_path_end_is_copied_whole(self, orders_tree):
        result = copy_paths(orders_tree, ["customer.address", "tags"])
        assert result == {
            "customer": {"address": {"city": "London", "zip": "N1"}},
            "tags": ["new", "vip"],
        }
        assert result["customer"]["address"] is not orders_tree["customer"]["address"]
        assert result["tags"] is not orders_tree["tags"]

    def test_copy_is_independent_of_source(self, sample_tree):
        result = copy_paths(sample_tree, ["k1"])
        result["k1"]["k2"] = "changed"
        assert sample_tree["k1"]["k2"] == "v1"

    def test_strict_missing_path_raises(self, sample_tree):
        with pytest.raises(PathNotFoundError) as exc_info:
            copy_paths(sample_tree, ["k1.k9"])
        assert exc_info.value.path == "k1.k9"
        assert exc_info.value.branch == "k1.k9"
        assert "path not found in source: 'k1.k9'" in str(exc_info.value)

    def test_strict_missing_path_skipped_with_policy(self, sample_tree):
        policy = CollectErrorsPolicy()
        result = copy_paths(sample_tree, ["k1.k9", "k3.k4"], policy=policy)
        assert result == {"k3": {"k4": "v2"}}
        assert [e['path'] for e in policy.errors] == ["k1.k9"]

    def test_lenient_missing_path_dropped(self, sample_tree):
        """A branch that ends early leaves no empty container behind."""
        assert copy_paths(sample_tree, ["k1.k9"], strict=False) == {}
        assert copy_paths(sample_tree, ["k1.k9", "k3.k4"], strict=False) == {"k3": {"k4": "v2"}}

    def test_lenient_keeps_elements_that_matched(self):
        tree = {"a": [{"b": 1}, {"c": 2}, {"b": 3}]}
        assert copy_paths(tree, ["a.b"], strict=False) == {"a": [{"b": 1}, {"b": 3}]}
        assert copy_paths(tree, ["a.x"], strict=False) == {}

    def test_lenient_keeps_partially_matched_object(self):
        tree = {"k1": {"k2": "v1"}}
        assert copy_paths(tree, ["k1.k2", "k1.k9"], strict=False) == {"k1": {"k2": "v1"}}

    def test_lenient_keeps_empty_source_array(self, orders_tree):
        """Empty arrays that exist in the source are not dead branches."""
        result = copy_paths(orders_tree, ["orders.items.sku"], strict=False)
        assert result["orders"][2] == {"items": []}

    def test_scalar_and_object_elements_stay_aligned(self):
        tree = {"a": [5, {"b": 1}]}
        assert copy_paths(tree, ["a", "a.b"]) == {"a": [5, {"b": 1}]}
        assert copy_paths(tree, ["a.b", "a"]) == {"a": [5, {"b": 1}]}

    def test_skipped_leaves_do_not_shift_elements(self):
        tree = {"a": [1, {"b": 1, "c": 2}, 3, {"b": 4, "d": 0}]}
        assert copy_paths(tree, ["a.b", "a.c"], strict=False) == {"a": [{"b": 1, "c": 2}, {"b": 4}]}

    def test_array_leaves_merge_with_objects_by_source_index(self):
        tree = {"a": {"x": [{"b": 1, "c": 9}, 7]}}
        assert copy_paths(tree, ["a.x.b", "a.x"]) == {"a": {"x": [{"b": 1, "c": 9}, 7]}}

    def test_none_root(self):
        assert copy_paths(None, ["a"]) is None

    def test_no_paths(self, sample_tree):
        assert copy_paths(sample_tree, []) == {}

    def test_nested_arrays_rejected(self):
        with pytest.raises(NestedArrayError):
            copy_paths({"a": [[1]]}, ["a.b"])

    def test_action_reused_resets(self, sample_tree):
        action = CopyPathsAction()
        navigator = JSONNavigator(action, ["k1.k2"])
        navigator.navigate(sample_tree)
        navigator.navigate({"k1": {"k2": "other"}})
        assert action.result() == {"k1": {"k2": "other"}}


class TestMergeTrees:

    def test_objects_merge_recursively(self):
        assert merge_trees({"a": {"b": 1}}, {"a": {"c": 2}, "d": 3}) == {"a": {"b": 1, "c": 2}, "d": 3}

    def test_longer_array_extends(self):
        assert merge_trees([{"a": 1}], [{"b": 2}, {"c": 3}]) == [{"a": 1, "b": 2}, {"c": 3}]

    def test_scalars_replaced(self):
        assert merge_trees({"a": 1}, {"a": 2}) == {"a": 2}
        assert merge_trees({"a": [1]}, {"a": {"b": 1}}) == {"a": {"b": 1}}


class TestCollectValues:
    """CollectValuesAction / extract_values."""

    def test_fan_out_in_array_order(self):
        assert extract_values({"a": [{"b": 1}, {"b": 2}]}, "a.b") == {"a.b": [1, 2]}

    def test_several_paths(self, orders_tree):
        values = extract_values(orders_tree, ["customer.name", "orders.id", "orders.items.qty"])
        assert values == {
            "customer.name": ["Ada"],
            "orders.id": [1, 2, 3],
            "orders.items.qty": [2, 1, 5],
        }

    def test_array_at_path_end_yields_elements(self, orders_tree):
        assert extract_values(orders_tree, "tags") == {"tags": ["new", "vip"]}

    def test_object_at_path_end_yields_object(self, orders_tree):
        assert extract_values(orders_tree, "customer.address") == {
            "customer.address": [{"city": "London", "zip": "N1"}]
        }

    def test_objects_inside_array_at_path_end(self):
        assert extract_values({"a": [{"x": 1}, 2]}, "a") == {"a": [{"x": 1}, 2]}

    def test_missing_path_is_empty(self, sample_tree):
        assert extract_values(sample_tree, ["k1.k9", "", None]) == {"k1.k9": []}

    def test_null_values_collected(self, orders_tree):
        assert extract_values(orders_tree, "note") == {"note": [None]}

    def test_duplicate_paths_collect_twice(self, sample_tree):
        assert extract_values(sample_tree, ["k1.k2", "k1.k2"]) == {"k1.k2": ["v1", "v1"]}


class TestValidatePaths:
    """ValidatePathsAction / missing_paths / has_paths."""

    def test_missing_paths(self, sample_tree):
        assert missing_paths(sample_tree, ["k1.k2", "k1.k9", "k3", "x.y"]) == ["k1.k9", "x.y"]

    def test_has_paths(self, sample_tree):
        assert has_paths(sample_tree, ["k1.k2", "k3.k4"])
        assert not has_paths(sample_tree, ["k1.k2.k5"])

    def test_missing_records_branch(self, sample_tree):
        action = navigate(sample_tree, ValidatePathsAction(), ["k1.k9", "k1.k2.deep"])
        assert action.missing() == [("k1.k9", "k1.k9"), ("k1.k2.deep", "k1.k2")]
        assert action.found() == []
        assert not action.is_valid()

    def test_array_elements_checked_individually(self):
        action = navigate({"a": [{"b": 1}, {"c": 2}, {}]}, ValidatePathsAction(), "a.b")
        assert action.missing() == [("a.b", "a.b"), ("a.b", "a.b")]
        assert action.missing_paths() == ["a.b"]

    def test_found(self, orders_tree):
        action = navigate(orders_tree, ValidatePathsAction(), ["orders.items.sku", "tags", "customer"])
        assert action.found() == ["orders.items.sku", "tags", "customer"]
        assert action.is_valid()

    def test_leaves_in_array_are_not_found(self):
        """Scalars inside an array reach nothing, so the path is missing."""
        assert not has_paths({"a": [1, 2]}, "a.b")
        action = navigate({"a": [1, 2]}, ValidatePathsAction(), "a.b")
        assert action.missing() == [("a.b", "a")]

    def test_none_root_has_no_paths(self):
        assert not has_paths(None, ["a.b"])
        assert missing_paths(None, ["a.b", "c"]) == ["a.b", "c"]
        action = navigate(None, ValidatePathsAction(), "a.b")
        assert action.missing() == [("a.b", "")]
        assert action.found() == []

    def test_empty_array_along_path_is_missing(self):
        assert not has_paths({"a": []}, ["a.b"])
        action = navigate({"a": []}, ValidatePathsAction(), "a.b")
        assert action.missing() == [("a.b", "a")]

    def test_one_matching_element_is_enough_without_premature_end(self):
        assert has_paths({"a": [1, {"b": 2}]}, "a.b")

    def test_strict_raises_on_unreached_path(self):
        with pytest.raises(PathNotFoundError) as exc_info:
            navigate({"a": []}, ValidatePathsAction(strict=True), "a.b")
        assert exc_info.value.path == "a.b"
        assert exc_info.value.branch == "a"

    def test_strict_raises(self, sample_tree):
        with pytest.raises(PathNotFoundError) as exc_info:
            navigate(sample_tree, ValidatePathsAction(strict=True), ["k1.k2", "k3.k9"])
        assert exc_info.value.path == "k3.k9"
        assert exc_info.value.branch == "k3.k9"

    def test_strict_with_collecting_policy(self, sample_tree):
        policy = CollectErrorsPolicy()
        action = navigate(sample_tree, ValidatePathsAction(strict=True, policy=policy),
                          ["k1.k9", "k3.k4"])
        assert action.found() == ["k3.k4"]
        assert policy.failed_paths == ["k1.k9"]


class TestNavigateHelper:

    def test_returns_action(self, sample_tree):
        action = CollectValuesAction()
        assert navigate(sample_tree, action, "k1.k2") is action

    def test_custom_delimiter(self, sample_tree):
        assert extract_values(sample_tree, "k1:k2", delimiter=":") == {"k1:k2": ["v1"]}
