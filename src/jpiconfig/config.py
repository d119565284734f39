"""Load a ``PluginExtension`` from a YAML build description.

File layout::

    project:
      name: git-plugin
      build_dir: build
      properties: {jpi.deploy.user: bob}
      configurations:
        runtimeClasspath: [a.jar, b.jar]
        providedRuntime: [a.jar]
        groovy: []
    jpi:
      core_version: "1.532"
      display_name: Git plugin
      developers:
        - {id: alice, name: Alice, roles: [maintainer]}

A relative ``root_dir`` resolves against the file's directory and a
relative ``build_dir`` against ``root_dir``. Keys under ``jpi`` may be
written in snake_case or camelCase; acronyms such as ``organizationURL``
or ``ID`` become ``organization_url`` and ``id``.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from jpiconfig.extension import PluginExtension, ProjectContext
from jpiconfig.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAMES = ("jpi.yaml", "jpi.yml")

# Plain attributes and properties a config file may assign, in apply order.
_SETTABLE_FIELDS = (
    "short_name",
    "display_name",
    "file_extension",
    "url",
    "compatible_since_version",
    "sandbox_status",
    "mask_classes",
    "stapler_stub_dir",
    "localizer_dest_dir",
    "work_dir",
    "repo_url",
    "snapshot_repo_url",
    "github_url",
)

_ACRONYM_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_RE = re.compile(r"([a-z0-9])([A-Z])")

_ALIASES = {"git_hub_url": "github_url"}


def _snake(key: str) -> str:
    """``coreVersion`` -> ``core_version``; snake_case passes through."""
    snake = _CAMEL_RE.sub(r"\1_\2", _ACRONYM_RE.sub(r"\1_\2", str(key))).lower()
    return _ALIASES.get(snake, snake)


def safe_load_yaml(path: Path) -> dict[str, Any]:
    """Read *path* as a YAML mapping.

    Raises:
        ConfigError: If the file is missing, unreadable, not valid YAML,
            or its top level is not a mapping.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at top level")
    return data


def find_config(directory: Path) -> Path:
    """Locate the default config file in *directory*.

    Raises:
        ConfigError: If none of the default filenames exists.
    """
    for filename in DEFAULT_CONFIG_FILENAMES:
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    raise ConfigError(
        f"No {' or '.join(DEFAULT_CONFIG_FILENAMES)} found in {directory}"
    )


def _section(data: dict[str, Any], name: str, path: Path) -> dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Section {name!r} in {path} must be a mapping")
    return value


def _path_value(section: dict[str, Any], key: str, default: str | None) -> str | None:
    if key not in section:
        return default
    value = section[key]
    if not isinstance(value, str) or not value:
        raise ConfigError(f"project.{key} must be a non-empty string, got {value!r}")
    return value


def _classpath_entries(name: str, value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"project.configurations.{name} must be a list")
    return [str(entry) for entry in value]


def _project_from(section: dict[str, Any], base_dir: Path) -> ProjectContext:
    name = section.get("name") or base_dir.resolve().name
    root_dir = base_dir / _path_value(section, "root_dir", ".")
    build_dir = _path_value(section, "build_dir", None)
    properties = section.get("properties") or {}
    if not isinstance(properties, dict):
        raise ConfigError("project.properties must be a mapping")
    configurations = section.get("configurations") or {}
    if not isinstance(configurations, dict):
        raise ConfigError("project.configurations must map names to lists")
    return ProjectContext(
        name=str(name),
        root_dir=root_dir,
        build_dir=root_dir / build_dir if build_dir else None,
        properties=dict(properties),
        configurations={
            str(k): _classpath_entries(str(k), v) for k, v in configurations.items()
        },
    )


def apply_settings(extension: PluginExtension, settings: dict[str, Any]) -> PluginExtension:
    """Apply a ``jpi`` mapping to *extension*.

    ``core_version`` is applied last among the scalar fields so a rejected
    version fails only after everything else was configured. Developers
    are added in list order.

    Raises:
        MalformedVersionError: If ``core_version`` cannot be parsed.
        UnsupportedPlatformVersionError: If ``core_version`` is too old.
        InvalidDeveloperError: If a developer entry has no id.
        ConfigError: If ``developers`` is not a list of mappings.
    """
    normalized = {_snake(k): v for k, v in settings.items()}

    for key in normalized:
        if key not in _SETTABLE_FIELDS and key not in ("core_version", "developers"):
            logger.warning("Ignoring unknown jpi setting %r", key)

    for key in _SETTABLE_FIELDS:
        if key in normalized:
            setattr(extension, key, normalized[key])

    core_version = normalized.get("core_version")
    if isinstance(core_version, float):
        raise ConfigError(
            f"core_version must be quoted; YAML read it as the number {core_version!r}"
        )
    if core_version is not None:
        extension.core_version = str(core_version)

    developers = normalized.get("developers") or []
    if not isinstance(developers, list):
        raise ConfigError("jpi.developers must be a list")
    for entry in developers:
        if not isinstance(entry, dict):
            raise ConfigError(f"Developer entry must be a mapping, got {entry!r}")
        values = {_snake(k): v for k, v in entry.items()}
        extension.developer(lambda dev, values=values: dev.update(values))

    return extension


def load_config(path: str | Path) -> PluginExtension:
    """Build a configured ``PluginExtension`` from a YAML file.

    Args:
        path: A config file, or a directory holding ``jpi.yaml``.

    Returns:
        The configured extension. Its ``graph`` holds every declaration
        made while applying the file.
    """
    path = Path(path)
    if path.is_dir():
        path = find_config(path)
    data = safe_load_yaml(path)
    project = _project_from(_section(data, "project", path), path.parent)
    extension = PluginExtension(project)
    apply_settings(extension, _section(data, "jpi", path))
    logger.debug("Loaded plugin configuration for %s from %s", project.name, path)
    return extension
