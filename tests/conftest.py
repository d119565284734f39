"""Shared fixtures for jpiconfig tests."""

from __future__ import annotations

import pathlib

import pytest

SAMPLE_CONFIG = """\
project:
  name: git-plugin
  build_dir: out
  properties:
    jpi.deploy.user: bob
  configurations:
    runtimeClasspath: [git-client.jar, jenkins-core.jar, groovy-all.jar, jgit.jar]
    providedRuntime: [jenkins-core.jar]
    groovy: [groovy-all.jar]
jpi:
  coreVersion: "1.533"
  displayName: Git plugin
  githubUrl: https://github.com/jenkinsci/git-plugin
  developers:
    - id: alice
      name: Alice
      email: alice@example.com
      roles: [maintainer]
    - id: bob
      name: Bob
    - id: alice
      name: Alice Again
"""


@pytest.fixture
def plugin_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create a plugin directory with a complete jpi.yaml."""
    directory = tmp_path / "git-plugin"
    directory.mkdir()
    (directory / "jpi.yaml").write_text(SAMPLE_CONFIG)
    return directory


@pytest.fixture
def write_config(tmp_path: pathlib.Path):
    """Return a helper that writes YAML text to a config file and returns its path."""

    def _write(text: str, name: str = "jpi.yaml") -> pathlib.Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
