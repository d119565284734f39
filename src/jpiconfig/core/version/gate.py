"""Platform version gate.

Validates the Jenkins core version a plugin is built against and derives
the ``ui-samples-plugin`` (companion) version from it:

- Anything at or below ``1.419.99`` is rejected; the build needs 1.420+.
- From ``1.533`` on, ui-samples was released independently as ``2.0``.
  Below that it tracks the core version string exactly.

The threshold checks are pure functions. ``validate`` adds the single side
effect of declaring the repositories needed for resolution, and only when
the caller hands it a sink.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from jpiconfig.core.dependency.models import Repository
from jpiconfig.core.dependency.sink import DeclarationSink
from jpiconfig.core.version.models import PlatformVersion
from jpiconfig.exceptions import UnsupportedPlatformVersionError

logger = logging.getLogger(__name__)

# Highest rejected version: 1.420 is the first supported release.
MAX_UNSUPPORTED_VERSION = PlatformVersion.parse("1.419.99")

# First core version whose ui-samples companion is pinned to 2.0.
COMPANION_SWITCH_VERSION = PlatformVersion.parse("1.533")
SWITCHED_COMPANION_VERSION = "2.0"

JENKINS_REPOSITORY_URL = "http://repo.jenkins-ci.org/public/"
MAVEN_CENTRAL_URL = "https://repo.maven.apache.org/maven2/"


@dataclass(frozen=True)
class GateResult:
    """Outcome of a successful version check.

    Attributes:
        platform_version: The parsed, accepted core version.
        companion_version: Version to use for the ui-samples companion.
    """

    platform_version: PlatformVersion
    companion_version: str

    @property
    def version(self) -> str:
        """The accepted version string as the user wrote it."""
        return str(self.platform_version)


def is_supported(version: str | PlatformVersion) -> bool:
    """Return True if *version* is newer than ``1.419.99``."""
    return PlatformVersion.coerce(version) > MAX_UNSUPPORTED_VERSION


def companion_version_for(version: str | PlatformVersion) -> str:
    """Derive the companion artifact version for a core version."""
    parsed = PlatformVersion.coerce(version)
    if parsed >= COMPANION_SWITCH_VERSION:
        return SWITCHED_COMPANION_VERSION
    return str(parsed)


def default_repositories() -> tuple[Repository, ...]:
    """Repositories every plugin build resolves against, in search order."""
    return (
        Repository(name="MavenRepo", url=MAVEN_CENTRAL_URL),
        Repository(name="MavenLocal", url=(Path.home() / ".m2" / "repository").as_uri()),
        Repository(name="jenkins", url=JENKINS_REPOSITORY_URL),
    )


class VersionGate:
    """Accept or reject a declared platform version.

    Usage::

        result = VersionGate().validate("1.532.1", sink=graph)
        result.companion_version   # "1.532.1"
    """

    def validate(
        self,
        version: str | PlatformVersion,
        sink: DeclarationSink | None = None,
    ) -> GateResult:
        """Validate *version* and compute its companion version.

        Args:
            version: The declared core version.
            sink: If given, receives the repository declarations once the
                version is accepted. Nothing is declared on rejection.

        Returns:
            A ``GateResult`` with the parsed version and companion version.

        Raises:
            MalformedVersionError: If *version* cannot be parsed.
            UnsupportedPlatformVersionError: If *version* <= 1.419.99.
        """
        parsed = PlatformVersion.coerce(version)
        if not is_supported(parsed):
            raise UnsupportedPlatformVersionError(
                f"The plugin build requires Jenkins 1.420 or later (got {parsed})"
            )

        result = GateResult(
            platform_version=parsed,
            companion_version=companion_version_for(parsed),
        )
        logger.info(
            "Accepted core version %s (ui-samples %s)",
            result.version, result.companion_version,
        )

        if sink is not None:
            for repository in default_repositories():
                sink.declare_repository(repository)
        return result
