"""The ``jpi`` extension: per-project configuration for a plugin build.

``PluginExtension`` is the object build scripts configure. Most fields are
plain values with defaults derived from the project. Three entry points
carry real decisions:

- Assigning ``core_version`` runs the version gate and registers the
  resulting dependency sets against the extension's ``BuildGraph``.
- ``runtime_classpath()`` subtracts the provided and groovy runtimes from
  the main runtime classpath.
- ``developer(...)`` adds one record to the developer registry.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jpiconfig.core.classpath import ClasspathComposer, ClasspathSet
from jpiconfig.core.dependency import BuildGraph, DependencySet, DependencySetResolver
from jpiconfig.core.developers import Developer, DeveloperBuilder, DeveloperRegistry
from jpiconfig.core.version import GateResult, VersionGate
from jpiconfig.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Configuration names the runtime classpath is derived from.
RUNTIME_CLASSPATH_CONFIGURATION = "runtimeClasspath"
PROVIDED_RUNTIME_CONFIGURATION = "providedRuntime"
GROOVY_CONFIGURATION = "groovy"

DEFAULT_FILE_EXTENSION = "hpi"
DEFAULT_STAPLER_STUB_DIR = "generated-src/stubs"
DEFAULT_LOCALIZER_DEST_DIR = "generated-src/localizer"
DEFAULT_REPO_URL = "http://maven.jenkins-ci.org:8081/content/repositories/releases"
DEFAULT_SNAPSHOT_REPO_URL = "http://maven.jenkins-ci.org:8081/content/repositories/snapshots"

DEPLOY_USER_PROPERTY = "jpi.deploy.user"
DEPLOY_PASSWORD_PROPERTY = "jpi.deploy.password"

_GITHUB_URL_RE = re.compile(r"^https://github\.com")


@dataclass
class ProjectContext:
    """What the extension needs to know about the surrounding project.

    Attributes:
        name: Project name; the default short name is derived from it.
        root_dir: Root directory of the (multi-)project build.
        build_dir: Output directory for generated files.
        properties: Declared project properties (deploy credentials etc).
        configurations: Already-resolved configurations, by name.
        logger: Logger handed to developer builders.
    """

    name: str
    root_dir: Path = field(default_factory=Path.cwd)
    build_dir: Path | None = None
    properties: dict[str, Any] = field(default_factory=dict)
    configurations: dict[str, ClasspathSet] = field(default_factory=dict)
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("jpiconfig.project"))

    def __post_init__(self) -> None:
        self.root_dir = Path(self.root_dir)
        self.build_dir = Path(self.build_dir) if self.build_dir else self.root_dir / "build"
        self.configurations = {
            name: entries if isinstance(entries, ClasspathSet) else ClasspathSet(entries)
            for name, entries in self.configurations.items()
        }

    def configuration(self, name: str) -> ClasspathSet:
        """Return the resolved configuration called *name*.

        Raises:
            ConfigError: If the project does not define it.
        """
        try:
            return self.configurations[name]
        except KeyError:
            raise ConfigError(f"Configuration {name!r} not found in project {self.name!r}") from None


class PluginExtension:
    """Plugin build configuration exposed to build scripts as ``jpi``.

    Args:
        project: The project this extension configures.
        graph: Sink for repository and dependency declarations. A fresh
            ``BuildGraph`` is created when omitted.
    """

    def __init__(self, project: ProjectContext, graph: BuildGraph | None = None) -> None:
        self.project = project
        self.graph = graph if graph is not None else BuildGraph()
        self.developers = DeveloperRegistry(project.logger)

        self.url: str | None = None
        self.compatible_since_version: str | None = None
        self.sandbox_status: bool = False
        self.mask_classes: str | None = None
        self.github_url: str | None = None

        self._short_name: str | None = None
        self._display_name: str | None = None
        self._file_extension: str | None = None
        self._core_version: str | None = None
        self._gate_result: GateResult | None = None
        self._dependency_sets: list[DependencySet] = []
        self._stapler_stub_dir: str | None = None
        self._localizer_dest_dir: str | None = None
        self._work_dir: Path | None = None
        self._repo_url: str | None = None
        self._snapshot_repo_url: str | None = None

        self._gate = VersionGate()
        self._resolver = DependencySetResolver()
        self._composer = ClasspathComposer()

    # -- Names ---------------------------------------------------------------

    @property
    def short_name(self) -> str:
        """Id that uniquely identifies the plugin.

        Defaults to the project name without a trailing ``-plugin``.
        """
        if self._short_name:
            return self._short_name
        name = self.project.name
        if name.endswith("-plugin"):
            name = name[: -len("-plugin")]
        return name

    @short_name.setter
    def short_name(self, value: str | None) -> None:
        self._short_name = value

    @property
    def display_name(self) -> str:
        """One-line human readable name, e.g. "Git plugin"."""
        return self._display_name or self.short_name

    @display_name.setter
    def display_name(self, value: str | None) -> None:
        self._display_name = value

    @property
    def file_extension(self) -> str:
        """Extension of the plugin archive."""
        return self._file_extension or DEFAULT_FILE_EXTENSION

    @file_extension.setter
    def file_extension(self, value: str | None) -> None:
        self._file_extension = value

    # -- Core version ----------------------------------------------------------

    @property
    def core_version(self) -> str | None:
        """Version of Jenkins core the plugin depends on.

        Assigning a value validates it and registers repositories and
        dependency sets against ``graph``. A rejected version raises and
        leaves the previous value and the graph untouched. Assigning
        twice registers the dependencies twice.
        """
        return self._core_version

    @core_version.setter
    def core_version(self, value: str) -> None:
        result = self._gate.validate(value, sink=self.graph)
        self._dependency_sets = self._resolver.register(
            self.graph, result.platform_version, result.companion_version
        )
        self._core_version = result.version
        self._gate_result = result

    @property
    def companion_version(self) -> str | None:
        """ui-samples version derived from the last accepted core version."""
        return self._gate_result.companion_version if self._gate_result else None

    @property
    def dependency_sets(self) -> list[DependencySet]:
        """Dependency sets registered for the last accepted core version."""
        return list(self._dependency_sets)

    # -- Output directories ----------------------------------------------------

    @property
    def stapler_stub_dir(self) -> Path:
        """Directory for generated Stapler stubs, under the build dir."""
        return self.project.build_dir / (self._stapler_stub_dir or DEFAULT_STAPLER_STUB_DIR)

    @stapler_stub_dir.setter
    def stapler_stub_dir(self, value: str | None) -> None:
        self._stapler_stub_dir = value

    @property
    def localizer_dest_dir(self) -> Path:
        """Directory for generated localizer sources, under the build dir."""
        return self.project.build_dir / (self._localizer_dest_dir or DEFAULT_LOCALIZER_DEST_DIR)

    @localizer_dest_dir.setter
    def localizer_dest_dir(self, value: str | None) -> None:
        self._localizer_dest_dir = value

    @property
    def work_dir(self) -> Path:
        """Work directory to run jenkins.war with."""
        return self._work_dir or self.project.root_dir / "work"

    @work_dir.setter
    def work_dir(self, value: str | Path | None) -> None:
        self._work_dir = Path(value) if value else None

    # -- Deployment --------------------------------------------------------------

    @property
    def repo_url(self) -> str:
        """Maven repository the released plugin is deployed to."""
        return self._repo_url or DEFAULT_REPO_URL

    @repo_url.setter
    def repo_url(self, value: str | None) -> None:
        self._repo_url = value

    @property
    def snapshot_repo_url(self) -> str:
        """Maven repository snapshot builds are deployed to."""
        return self._snapshot_repo_url or DEFAULT_SNAPSHOT_REPO_URL

    @snapshot_repo_url.setter
    def snapshot_repo_url(self, value: str | None) -> None:
        self._snapshot_repo_url = value

    @property
    def deploy_user(self) -> str:
        return str(self.project.properties.get(DEPLOY_USER_PROPERTY, ""))

    @property
    def deploy_password(self) -> str:
        return str(self.project.properties.get(DEPLOY_PASSWORD_PROPERTY, ""))

    # -- SCM -----------------------------------------------------------------------

    @property
    def github_scm_connection(self) -> str:
        """POM ``<connection>`` derived from ``github_url``, or ''."""
        if self.github_url and _GITHUB_URL_RE.match(self.github_url):
            return self.github_url.replace("https:", "scm:git:git:", 1) + ".git"
        return ""

    @property
    def github_scm_dev_connection(self) -> str:
        """POM ``<developerConnection>`` derived from ``github_url``, or ''."""
        if self.github_url and _GITHUB_URL_RE.match(self.github_url):
            return self.github_url.replace("https://", "scm:git:ssh://git@", 1) + ".git"
        return ""

    # -- Developers ------------------------------------------------------------------

    def configure_developers(self, configure: Callable[[DeveloperRegistry], object]) -> None:
        """Run *configure* against the developer registry."""
        configure(self.developers)

    def developer(self, configure: Callable[[DeveloperBuilder], object]) -> Developer:
        """Add one developer; see ``DeveloperRegistry.developer``."""
        return self.developers.developer(configure)

    # -- Classpath ---------------------------------------------------------------------

    def get_runtime_classpath(
        self,
        base: Iterable[Hashable],
        provided: Iterable[Hashable],
        secondary_runtime: Iterable[Hashable],
    ) -> ClasspathSet:
        """Compose the runtime classpath from explicitly supplied sets."""
        return self._composer.runtime_classpath(base, provided, secondary_runtime)

    def runtime_classpath(self) -> ClasspathSet:
        """Runtime dependencies of the plugin.

        The main runtime classpath minus ``providedRuntime`` and ``groovy``,
        all looked up in the project's configurations.

        Raises:
            ConfigError: If any of the three configurations is missing.
        """
        base = self.project.configuration(RUNTIME_CLASSPATH_CONFIGURATION)
        result = self.get_runtime_classpath(
            base,
            self.project.configuration(PROVIDED_RUNTIME_CONFIGURATION),
            self.project.configuration(GROOVY_CONFIGURATION),
        )
        logger.debug(
            "Runtime classpath for %s: %d of %d entries kept",
            self.project.name, len(result), len(base),
        )
        return result

    def to_dict(self) -> dict[str, Any]:
        """Resolved field values, for reporting."""
        return {
            "short_name": self.short_name,
            "display_name": self.display_name,
            "file_extension": self.file_extension,
            "url": self.url,
            "compatible_since_version": self.compatible_since_version,
            "sandbox_status": self.sandbox_status,
            "mask_classes": self.mask_classes,
            "core_version": self.core_version,
            "companion_version": self.companion_version,
            "stapler_stub_dir": str(self.stapler_stub_dir),
            "localizer_dest_dir": str(self.localizer_dest_dir),
            "work_dir": str(self.work_dir),
            "repo_url": self.repo_url,
            "snapshot_repo_url": self.snapshot_repo_url,
            "github_url": self.github_url,
            "github_scm_connection": self.github_scm_connection,
            "github_scm_dev_connection": self.github_scm_dev_connection,
            "deploy_user": self.deploy_user,
        }

