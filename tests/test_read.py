"""Tests for read-only queries."""

from __future__ import annotations

import pytest

from map_toolkit import (
    as_read_only,
    find_keys_for_value,
    get_keys,
    get_value_or_default,
    get_values,
    has_duplicate_values,
    to_list,
)


class TestLookups:
    """Test value lookup and snapshots."""

    def test_get_value_or_default(self, scores: dict[str, int]) -> None:
        assert get_value_or_default(scores, "a", 0) == 1
        assert get_value_or_default(scores, "missing", 0) == 0
        assert get_value_or_default(scores, "missing") is None
        assert "missing" not in scores

    def test_keys_and_values_are_snapshots(self, scores: dict[str, int]) -> None:
        """Test that later changes don't leak into returned lists."""
        keys = get_keys(scores)
        values = get_values(scores)

        scores["d"] = 4

        assert keys == ["a", "b", "c"]
        assert values == [1, 2, 3]

    def test_to_list(self, scores: dict[str, int]) -> None:
        assert to_list(scores) == [("a", 1), ("b", 2), ("c", 3)]


class TestFindKeysForValue:
    """Test lazy reverse lookup."""

    def test_finds_all_matching_keys_in_order(self) -> None:
        mapping = {"x": 1, "y": 2, "z": 1}
        assert list(find_keys_for_value(mapping, 1)) == ["x", "z"]

    def test_no_match_is_empty(self, scores: dict[str, int]) -> None:
        assert list(find_keys_for_value(scores, 42)) == []

    def test_restartable_and_lazy(self) -> None:
        """Test that each iteration rescans the current mapping."""
        mapping = {"x": 1}
        keys = find_keys_for_value(mapping, 1)

        assert list(keys) == ["x"]
        assert list(keys) == ["x"]

        mapping["y"] = 1
        assert list(keys) == ["x", "y"]


class TestHasDuplicateValues:
    def test_with_duplicates(self) -> None:
        assert has_duplicate_values({"a": 1, "b": 1, "c": 2}) is True

    def test_without_duplicates(self) -> None:
        assert has_duplicate_values({"a": 1, "b": 2}) is False

    def test_empty(self) -> None:
        assert has_duplicate_values({}) is False

    def test_same_nan_object_is_not_duplicate(self) -> None:
        """Test that values are compared by equality, not identity."""
        nan = float("nan")

        assert has_duplicate_values({"a": nan, "b": nan}) is False
        assert has_duplicate_values({"a": [nan], "b": 1}) is False

    def test_mixed_hashable_and_unhashable(self) -> None:
        assert has_duplicate_values({"a": [1], "b": 2, "c": 2}) is True
        assert has_duplicate_values({"a": [1], "b": 2, "c": (1,)}) is False

    def test_unhashable_values(self) -> None:
        """Test that list values are compared by equality."""
        assert has_duplicate_values({"a": [1], "b": [1]}) is True
        assert has_duplicate_values({"a": [1], "b": [2]}) is False


class TestAsReadOnly:
    """Test read-only views."""

    def test_view_rejects_mutation(self, scores: dict[str, int]) -> None:
        view = as_read_only(scores)

        with pytest.raises(TypeError):
            view["a"] = 10  # type: ignore[index]

        assert scores["a"] == 1

    def test_view_reflects_source_changes(self, scores: dict[str, int]) -> None:
        view = as_read_only(scores)

        scores["d"] = 4
        del scores["a"]

        assert view["d"] == 4
        assert "a" not in view
        assert len(view) == 3
