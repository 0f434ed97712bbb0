"""Tests for the preflight tool check."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from src.scaffolder.errors import MissingToolError
from src.scaffolder.preflight import check_available, tool_exists

pytestmark = pytest.mark.unit


class TestToolExists:
    def test_found(self):
        with patch("src.scaffolder.preflight.shutil.which", return_value="/usr/bin/gradle"):
            assert tool_exists("gradle") is True

    def test_not_found(self):
        with patch("src.scaffolder.preflight.shutil.which", return_value=None):
            assert tool_exists("gradle") is False

    def test_real_lookup_for_nonsense_name(self):
        assert tool_exists("definitely-not-a-real-tool-4c1b9e") is False


class TestCheckAvailable:
    def test_all_present(self, tools_available):
        check_available(["java", "gradle"])
        assert [c.args[0] for c in tools_available.call_args_list] == ["java", "gradle"]

    def test_empty_list(self, tools_missing):
        check_available([])
        tools_missing.assert_not_called()

    def test_reports_first_missing_only(self):
        present = {"java"}
        with patch(
            "src.scaffolder.preflight.shutil.which",
            side_effect=lambda name: f"/usr/bin/{name}" if name in present else None,
        ) as mock_which:
            with pytest.raises(MissingToolError) as exc_info:
                check_available(["java", "gradle", "docker"])
        assert exc_info.value.tool == "gradle"
        # Fail fast: "docker" is never probed.
        assert [c.args[0] for c in mock_which.call_args_list] == ["java", "gradle"]

    def test_message(self, tools_missing):
        with pytest.raises(MissingToolError, match="gradle is not installed"):
            check_available(["gradle"])
