"""Unit tests for github_pulls.validation module."""

from __future__ import annotations

import pytest

from github_pulls.errors import InvalidValue, MissingArgument
from github_pulls.validation import (
    assert_presence_of,
    assert_required_keys,
    assert_valid_values,
    filter_known,
    normalize,
    normalize_key,
)


class TestNormalize:
    """Tests for key normalization."""

    def test_folds_case_whitespace_and_dashes(self) -> None:
        assert normalize_key(" Commit-Message ") == "commit_message"

    def test_normalize_does_not_mutate_input(self) -> None:
        params = {"TITLE": "Hello"}
        result = normalize(params)
        assert result == {"title": "Hello"}
        assert params == {"TITLE": "Hello"}

    def test_normalize_none(self) -> None:
        assert normalize(None) == {}


class TestFilterKnown:
    """Tests for allow-list filtering."""

    def test_unknown_keys_are_dropped_silently(self) -> None:
        result = filter_known({"title", "body"}, {"title": "t", "bogus_key": 1})
        assert result == {"title": "t"}

    def test_keeps_order(self) -> None:
        result = filter_known(["a", "b", "c"], {"c": 3, "a": 1, "b": 2})
        assert list(result) == ["c", "a", "b"]


class TestAssertions:
    """Tests for presence and value assertions."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_presence_rejects_empty(self, value: str | None) -> None:
        with pytest.raises(MissingArgument, match="owner"):
            assert_presence_of(owner=value)

    def test_presence_accepts_zero(self) -> None:
        assert_presence_of(number=0)

    def test_valid_values_rejects_unknown_state(self) -> None:
        with pytest.raises(InvalidValue) as exc_info:
            assert_valid_values({"state": ("open", "closed")}, {"state": "merged"})
        assert exc_info.value.key == "state"
        assert exc_info.value.value == "merged"

    def test_valid_values_ignores_absent_key(self) -> None:
        assert_valid_values({"state": ("open", "closed")}, {"title": "x"})

    def test_required_keys(self) -> None:
        with pytest.raises(MissingArgument, match="path, position"):
            assert_required_keys(("body", "path", "position"), {"body": "x"})
