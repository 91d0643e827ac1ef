"""Unit tests for dot-path access."""

import pytest

from intentflow.errors import StatePathError
from intentflow.paths import get_path, set_path


class TestGetPath:
    def test_nested_mapping(self):
        state = {"user": {"profile": {"name": "ada"}}}
        assert get_path(state, "user.profile.name") == "ada"

    def test_missing_segments_read_as_default(self):
        state = {"user": {}}
        assert get_path(state, "user.profile.name") is None
        assert get_path(state, "nope.deeper", default=0) == 0

    def test_through_scalar_reads_as_missing(self):
        assert get_path({"count": 3}, "count.value") is None

    def test_list_index(self):
        state = {"items": [{"id": "a"}, {"id": "b"}]}
        assert get_path(state, "items.1.id") == "b"
        assert get_path(state, "items.5.id") is None
        assert get_path(state, "items.first") is None

    def test_empty_path_is_whole_state(self):
        state = {"count": 1}
        assert get_path(state, "") is state

    def test_falsy_values_are_returned(self):
        assert get_path({"flag": False}, "flag", default=True) is False

    def test_non_ascii_digit_segment_reads_as_missing(self):
        state = {"items": [1, 2]}
        assert get_path(state, "items.\u00b2") is None
        assert get_path(state, "items.\u0661", default="x") == "x"


class TestSetPath:
    def test_replaces_leaf_without_mutating_previous(self):
        prev = {"count": 0, "other": {"keep": 1}}
        nxt = set_path(prev, "count", 5)

        assert nxt == {"count": 5, "other": {"keep": 1}}
        assert prev == {"count": 0, "other": {"keep": 1}}
        # Untouched branches are shared
        assert nxt["other"] is prev["other"]

    def test_creates_missing_intermediates(self):
        assert set_path({}, "a.b.c", 1) == {"a": {"b": {"c": 1}}}

    def test_scalar_intermediate_becomes_mapping(self):
        assert set_path({"a": 3}, "a.b", 1) == {"a": {"b": 1}}

    def test_list_index_update(self):
        prev = {"items": [1, 2, 3]}
        nxt = set_path(prev, "items.1", 20)
        assert nxt == {"items": [1, 20, 3]}
        assert prev["items"] == [1, 2, 3]

    def test_list_padded_past_end(self):
        assert set_path({"items": [1]}, "items.3", 4) == {"items": [1, None, None, 4]}

    def test_tuple_stays_tuple(self):
        assert set_path({"pair": (1, 2)}, "pair.0", 9) == {"pair": (9, 2)}

    def test_non_index_segment_on_list(self):
        with pytest.raises(StatePathError) as exc_info:
            set_path({"items": [1]}, "items.first", 1)
        assert exc_info.value.code == "STATE_PATH"
        assert exc_info.value.path == "items.first"

    def test_empty_path_replaces_state(self):
        assert set_path({"count": 1}, "", {"fresh": True}) == {"fresh": True}

    def test_non_ascii_digit_segment_on_list(self):
        with pytest.raises(StatePathError):
            set_path({"items": [1, 2]}, "items.²", 0)
