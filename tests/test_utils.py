"""Tests for the MM:SS formatter and resource lookup."""

import os
import sys

import pytest

from ring_timer.utils import format_time, resource_path


class TestFormatTime:
    @pytest.mark.parametrize(
        "millis, expected",
        [
            (0, "00:00"),
            (5000, "00:05"),
            (30000, "00:30"),
            (65000, "01:05"),
            (599_000, "09:59"),
        ],
    )
    def test_known_values(self, millis, expected) -> None:
        assert format_time(millis) == expected

    def test_partial_seconds_round_down(self) -> None:
        assert format_time(4999) == "00:04"
        assert format_time(1) == "00:00"

    def test_hours_are_dropped(self) -> None:
        """1h 01m 05s shows only the minutes inside the hour."""
        assert format_time(3_665_000) == "01:05"
        assert format_time(3_600_000) == "00:00"

    def test_negative_is_clamped(self) -> None:
        assert format_time(-250) == "00:00"


class TestResourcePath:
    def test_relative_to_working_directory(self) -> None:
        expected = os.path.join(os.path.abspath("."), "resources", "style.qss")
        assert resource_path("style.qss") == expected

    def test_uses_bundle_directory_when_frozen(self, monkeypatch) -> None:
        monkeypatch.setattr(sys, "_MEIPASS", "/bundle", raising=False)
        assert resource_path("icon.ico") == os.path.join("/bundle", "resources", "icon.ico")
