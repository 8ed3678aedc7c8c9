"""Integration tests for config commands."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import httpx
import respx
from typer.testing import CliRunner

from portfolio_cli.app import app
from portfolio_cli.config.manager import ConfigManager

runner = CliRunner()


def _patch_manager(tmp_path: Path):
    """Patch ConfigManager to use a temp config file."""
    config_path = tmp_path / "config.toml"
    return patch(
        "portfolio_cli.commands.config_cmd._get_manager",
        side_effect=lambda: ConfigManager(config_path=config_path),
    )


class TestConfigCommands:
    def test_list_empty(self, tmp_path: Path):
        with _patch_manager(tmp_path):
            result = runner.invoke(app, ["config", "list"])
            assert result.exit_code == 0
            assert "No profiles configured" in result.output

    def test_add_and_list(self, tmp_path: Path):
        with _patch_manager(tmp_path):
            result = runner.invoke(app, ["config", "add", "home", "--url", "https://me.example.com"])
            assert result.exit_code == 0
            assert "added" in result.output

            result = runner.invoke(app, ["config", "list"])
            assert result.exit_code == 0
            assert "home" in result.output
            assert "me.example.com" in result.output

    def test_add_bad_url(self, tmp_path: Path):
        with _patch_manager(tmp_path):
            result = runner.invoke(app, ["config", "add", "home", "--url", "me.example.com"])
            assert result.exit_code == 1
            assert "URL must start with http" in result.output

    def test_show_profile(self, tmp_path: Path):
        with _patch_manager(tmp_path):
            runner.invoke(app, ["config", "add", "home", "--url", "https://me.example.com", "--timeout", "5"])
            result = runner.invoke(app, ["config", "show", "home"])
            assert result.exit_code == 0
            assert "https://me.example.com" in result.output
            assert "5.0" in result.output

    def test_show_missing(self, tmp_path: Path):
        with _patch_manager(tmp_path):
            result = runner.invoke(app, ["config", "show", "nope"])
            assert result.exit_code == 1
            assert "not found" in result.output

    def test_set_default(self, tmp_path: Path):
        with _patch_manager(tmp_path):
            runner.invoke(app, ["config", "add", "a", "--url", "https://a.test"])
            runner.invoke(app, ["config", "add", "b", "--url", "https://b.test"])
            result = runner.invoke(app, ["config", "set-default", "b"])
            assert result.exit_code == 0
            assert ConfigManager(config_path=tmp_path / "config.toml").config.default_profile == "b"

    def test_remove_force(self, tmp_path: Path):
        with _patch_manager(tmp_path):
            runner.invoke(app, ["config", "add", "home", "--url", "https://me.example.com"])
            result = runner.invoke(app, ["config", "remove", "home", "--force"])
            assert result.exit_code == 0
            assert "removed" in result.output

    def test_remove_cancelled(self, tmp_path: Path):
        with _patch_manager(tmp_path):
            runner.invoke(app, ["config", "add", "home", "--url", "https://me.example.com"])
            result = runner.invoke(app, ["config", "remove", "home"], input="n\n")
            assert result.exit_code == 0
            assert "Cancelled." in result.output

    @respx.mock
    def test_test_connection(self, tmp_path: Path, projects_data):
        respx.get("https://me.example.com/api/projects").mock(
            return_value=httpx.Response(200, json=projects_data)
        )
        with _patch_manager(tmp_path):
            runner.invoke(app, ["config", "add", "home", "--url", "https://me.example.com"])
            result = runner.invoke(app, ["config", "test", "home"])
            assert result.exit_code == 0
            assert "2 project(s)" in result.output
