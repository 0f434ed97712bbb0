"""Tests for the command-line entry point (src.cli)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.cli import build_parser, load_config, main

pytestmark = pytest.mark.unit


class TestLoadConfig:
    def test_defaults(self, monkeypatch):
        for var in ("SCAFFOLD_OUTPUT_DIR", "SCAFFOLD_CATALOG", "SCAFFOLD_DB_URL"):
            monkeypatch.delenv(var, raising=False)
        config = load_config(build_parser().parse_args([]))
        assert config.output_dir == Path("./microservices-demo")
        assert config.catalog == "microservices"

    def test_flag_overrides(self, tmp_path: Path):
        args = build_parser().parse_args([
            "--catalog", "gateway",
            "--output", str(tmp_path),
            "--git-config-repo", "https://github.com/acme/config.git",
            "--db-username", "svc",
        ])
        config = load_config(args)
        assert config.catalog == "gateway"
        assert config.output_dir == tmp_path
        assert config.git_config_repo_url == "https://github.com/acme/config.git"
        assert config.database.username == "svc"
        assert config.database.password == "admin@123"

    def test_config_file_then_flags(self, tmp_path: Path):
        config_file = tmp_path / "scaffold.json"
        config_file.write_text(
            json.dumps({"catalog": "cloud-basic", "output_dir": "from-file"}), encoding="utf-8"
        )
        args = build_parser().parse_args(["--config", str(config_file), "-o", "from-flag"])
        config = load_config(args)
        assert config.catalog == "cloud-basic"
        assert config.output_dir == Path("from-flag")


class TestMain:
    def test_success(self, tmp_path: Path, tools_available, capsys):
        out = tmp_path / "demo"
        main(["--output", str(out)])
        assert (out / "eureka-server" / "build.gradle").exists()
        assert (out / "gateway-service" / "settings.gradle").exists()
        output = capsys.readouterr().out
        assert "gradle bootRun" in output
        assert "3 project(s) generated" in output

    def test_missing_tool_exits_1_without_writing(self, tmp_path: Path, tools_missing, capsys):
        out = tmp_path / "demo"
        with pytest.raises(SystemExit) as exc_info:
            main(["--output", str(out)])
        assert exc_info.value.code == 1
        assert not out.exists()
        assert "gradle is not installed" in capsys.readouterr().out

    def test_unknown_catalog_exits_1(self, tmp_path: Path, tools_available, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--catalog", "monolith", "--output", str(tmp_path / "x")])
        assert exc_info.value.code == 1
        assert "Unknown catalog" in capsys.readouterr().out

    def test_missing_config_file_exits_1(self, tmp_path: Path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(tmp_path / "absent.yml")])
        assert exc_info.value.code == 1

    def test_malformed_yaml_config_exits_1(self, tmp_path: Path, capsys):
        config_file = tmp_path / "scaffold.yml"
        config_file.write_text("output_dir: [unclosed\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(config_file)])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().out

    def test_non_utf8_config_exits_1(self, tmp_path: Path, capsys):
        config_file = tmp_path / "scaffold.json"
        config_file.write_bytes(b'{"catalog": "\xff\xfe"}')
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(config_file)])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().out

    def test_list_catalogs(self, capsys, tools_missing):
        main(["--list-catalogs"])
        output = capsys.readouterr().out
        assert "microservices-postgres" in output
        assert "cloud-basic" in output
        tools_missing.assert_not_called()
