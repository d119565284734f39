"""Tests for ``jpiconfig resolve``."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from jpiconfig.cli.main import cli


class TestResolve:

    def test_json_output(self, runner: CliRunner, plugin_dir: Path) -> None:
        result = runner.invoke(cli, ["resolve", str(plugin_dir), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["core_version"] == "1.533"
        assert data["companion_version"] == "2.0"
        assert [r["name"] for r in data["repositories"]] == ["MavenRepo", "MavenLocal", "jenkins"]
        test_names = [c["name"] for c in data["dependencies"]["test"]]
        assert test_names == [
            "jenkins-test-harness", "ui-samples-plugin", "maven-plugin", "jenkins-war", "junit-dep",
        ]
        assert data["dependencies"]["test"][3]["classifier"] == "war-for-test"

    def test_text_output(self, runner: CliRunner, plugin_dir: Path) -> None:
        result = runner.invoke(cli, ["resolve", str(plugin_dir)])
        assert result.exit_code == 0
        assert "Repositories" in result.output
        assert "Dependency Sets" in result.output
        assert "jenkins" in result.output

    def test_no_core_version(self, runner: CliRunner, write_config) -> None:
        path = write_config("project: {name: x}\n")
        result = runner.invoke(cli, ["resolve", str(path)])
        assert result.exit_code == 0
        assert "No core version" in result.output

    def test_rejected_core_version(self, runner: CliRunner, write_config) -> None:
        path = write_config("jpi:\n  core_version: '1.419.99'\n")
        result = runner.invoke(cli, ["resolve", str(path)])
        assert result.exit_code == 1
        assert "1.420 or later" in result.output
