"""Unit tests for console helpers (src.utils)."""

from __future__ import annotations

import pytest

from src.utils import (
    format_duration,
    print_error,
    print_success,
    print_summary_table,
)

pytestmark = pytest.mark.unit


class TestFormatDuration:
    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "0.0s"),
            (3.7, "3.7s"),
            (65.2, "1m 5s"),
            (3661.0, "1h 1m 1s"),
            (-1, "0.0s"),
        ],
    )
    def test_format(self, seconds: float, expected: str):
        assert format_duration(seconds) == expected


class TestOutput:
    def test_messages(self, capsys):
        print_success("all good")
        print_error("broken")
        out = capsys.readouterr().out
        assert "all good" in out
        assert "broken" in out

    def test_summary_table(self, capsys):
        print_summary_table({"eureka-server": "done"}, title="Projects", columns=("Project", "Result"))
        out = capsys.readouterr().out
        assert "Projects" in out
        assert "eureka-server" in out
        assert "Result" in out
