"""Tests for ``jpiconfig info``."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from jpiconfig.cli.main import cli


class TestInfo:

    def test_json_output(self, runner: CliRunner, plugin_dir: Path) -> None:
        result = runner.invoke(cli, ["info", str(plugin_dir), "-f", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["short_name"] == "git"
        assert data["display_name"] == "Git plugin"
        assert data["file_extension"] == "hpi"
        assert data["github_scm_dev_connection"] == (
            "scm:git:ssh://git@github.com/jenkinsci/git-plugin.git"
        )
        assert data["repo_url"] != data["snapshot_repo_url"]

    def test_text_output(self, runner: CliRunner, plugin_dir: Path) -> None:
        result = runner.invoke(cli, ["info", str(plugin_dir)])
        assert result.exit_code == 0
        assert "Plugin Configuration" in result.output
        assert "short_name" in result.output
