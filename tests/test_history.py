"""Tests for termline.history.HistoryStore -- bounded history with navigation."""

from __future__ import annotations

import pytest

from termline.errors import ConfigurationError
from termline.history import HistoryStore


class TestHistoryAdd:
    def test_entries_oldest_first(self) -> None:
        history = HistoryStore(5)
        history.add("a")
        history.add("b")
        assert history.entries == ("a", "b")
        assert len(history) == 2

    def test_capacity_evicts_oldest(self) -> None:
        history = HistoryStore(2)
        for line in ("a", "b", "c"):
            history.add(line)
        assert history.entries == ("b", "c")

    def test_zero_capacity_stores_nothing(self) -> None:
        history = HistoryStore(0)
        history.add("a")
        assert history.entries == ()
        assert history.previous() == ""
        assert history.next() == ""

    def test_max_history_property(self) -> None:
        assert HistoryStore(7).max_history == 7


class TestHistoryNavigation:
    """previous/next move a clamped cursor."""

    def test_previous_clamps_at_oldest(self) -> None:
        history = HistoryStore(2)
        for line in ("a", "b", "c"):
            history.add(line)
        assert history.previous() == "c"
        assert history.previous() == "b"
        assert history.previous() == "b"

    def test_next_walks_back_to_empty(self) -> None:
        history = HistoryStore(5)
        history.add("a")
        history.add("b")
        assert history.previous() == "b"
        assert history.previous() == "a"
        assert history.next() == "b"
        assert history.next() == ""
        assert history.next() == ""

    def test_previous_after_parking_past_end(self) -> None:
        history = HistoryStore(5)
        history.add("a")
        history.previous()
        assert history.next() == ""
        assert history.previous() == "a"

    def test_empty_history(self) -> None:
        history = HistoryStore(3)
        assert history.previous() == ""
        assert history.next() == ""

    def test_add_resets_cursor(self) -> None:
        history = HistoryStore(5)
        history.add("a")
        history.add("b")
        history.previous()
        history.previous()
        history.add("c")
        assert history.previous() == "c"

    def test_reset_cursor(self) -> None:
        history = HistoryStore(5)
        history.add("a")
        history.add("b")
        history.previous()
        history.previous()
        history.reset_cursor()
        assert history.previous() == "b"

    def test_clear(self) -> None:
        history = HistoryStore(5)
        history.add("a")
        history.clear()
        assert history.entries == ()
        assert history.previous() == ""


class TestHistoryValidation:
    def test_negative_capacity_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            HistoryStore(-1)

    @pytest.mark.parametrize("value", [1.5, "3", None, True])
    def test_non_integer_capacity_rejected(self, value) -> None:
        with pytest.raises(ConfigurationError):
            HistoryStore(value)

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            HistoryStore(-5)
