"""Tests for CLI formatting and log helpers."""

from __future__ import annotations

import pytest

from skin_editor.utils import (
    error,
    format_number_compact,
    format_seconds_compact,
    key_value_pairs_to_string,
    print_config_line,
    warn,
)


class TestFormatting:
    @pytest.mark.parametrize(
        "value, want",
        [(4096, "4,096"), (0.25, "0.25"), (120.0, "120"), (True, "on"), (False, "off"), ("x", "x")],
    )
    def test_number_compact(self, value: object, want: str) -> None:
        assert format_number_compact(value) == want

    @pytest.mark.parametrize(
        "seconds, want", [(0.0123, "12.3ms"), (4.5, "4.500s"), (125.0, "2m 5.0s")]
    )
    def test_seconds_compact(self, seconds: float, want: str) -> None:
        assert format_seconds_compact(seconds) == want

    def test_key_value_pairs(self) -> None:
        text = key_value_pairs_to_string([("Visible", 4096), ("Avg hue", 12.5)])
        assert text == "Visible: 4,096  Avg hue: 12.5"


class TestLogLines:
    def test_config_line_routes_by_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_config_line("filters", [("hue_shift", 120.0)], debug=False)
        print_config_line("filters", [("contrast", 10.0)], debug=True)
        out = capsys.readouterr().out.splitlines()
        assert out == ["[filters] hue_shift: 120", "[debug] [filters] contrast: 10"]

    def test_warn_and_error_streams(self, capsys: pytest.CaptureFixture[str]) -> None:
        warn("careful")
        error("broken")
        captured = capsys.readouterr()
        assert captured.out == "[warn] careful\n"
        assert captured.err == "[error] broken\n"
