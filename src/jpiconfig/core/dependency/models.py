"""Dependency declaration data models.

Pure data holders (frozen dataclasses) describing what a plugin build
depends on: artifact coordinates, named dependency sets, and the
repositories they are resolved from. Nothing here fetches artifacts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

# ---------------------------------------------------------------------------
# Configuration buckets
# ---------------------------------------------------------------------------


class ConfigurationBucket(str, Enum):
    """Named configuration a dependency set is registered under."""

    CORE = "core"
    WAR = "war"
    TEST = "test"


# ---------------------------------------------------------------------------
# ArtifactCoordinate
# ---------------------------------------------------------------------------

# group:name:version[:classifier][@extension]
_NOTATION_RE = re.compile(
    r"^(?P<group>[^:@\s]+):(?P<name>[^:@\s]+):(?P<version>[^:@\s]+)"
    r"(?::(?P<classifier>[^:@\s]+))?"
    r"(?:@(?P<extension>[^:@\s]+))?$"
)


@dataclass(frozen=True)
class ArtifactCoordinate:
    """A single artifact in a dependency set.

    Attributes:
        group: Group id (e.g. ``"org.jenkins-ci.main"``).
        name: Artifact id (e.g. ``"jenkins-core"``).
        version: Version string, copied verbatim from the declaration.
        extension: Packaging type of the file to fetch (``"jar"``, ``"war"``).
        classifier: Optional classifier (e.g. ``"war-for-test"``).
        transitive: Whether the artifact's own dependencies are pulled in.
            Artifact-only declarations (``@ext`` notation) are not.
    """

    group: str
    name: str
    version: str
    extension: str = "jar"
    classifier: str | None = None
    transitive: bool = True

    @property
    def notation(self) -> str:
        """Gradle-style string notation, e.g. ``g:n:1.0:cls@jar``."""
        text = f"{self.group}:{self.name}:{self.version}"
        if self.classifier:
            text += f":{self.classifier}"
        return f"{text}@{self.extension}"

    @property
    def module(self) -> str:
        """``group:name`` without the version."""
        return f"{self.group}:{self.name}"

    @classmethod
    def from_notation(cls, notation: str, transitive: bool | None = None) -> ArtifactCoordinate:
        """Parse a ``group:name:version[:classifier][@extension]`` string.

        An explicit ``@extension`` makes the declaration artifact-only, so
        ``transitive`` defaults to False in that case and True otherwise.

        Raises:
            ValueError: If the notation is malformed.
        """
        m = _NOTATION_RE.match(notation.strip())
        if not m:
            raise ValueError(f"Invalid artifact notation: {notation!r}")
        artifact_only = m.group("extension") is not None
        if transitive is None:
            transitive = not artifact_only
        return cls(
            group=m.group("group"),
            name=m.group("name"),
            version=m.group("version"),
            extension=m.group("extension") or "jar",
            classifier=m.group("classifier"),
            transitive=transitive,
        )

    def to_dict(self) -> dict[str, object]:
        entry: dict[str, object] = {
            "group": self.group,
            "name": self.name,
            "version": self.version,
            "extension": self.extension,
            "transitive": self.transitive,
        }
        if self.classifier:
            entry["classifier"] = self.classifier
        return entry


# ---------------------------------------------------------------------------
# DependencySet
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DependencySet:
    """A named bundle of artifact coordinates for one configuration bucket.

    Produced once per accepted platform version and never mutated.

    Attributes:
        bucket: The configuration the coordinates are registered under.
        coordinates: Coordinates in declaration order.
    """

    bucket: ConfigurationBucket
    coordinates: tuple[ArtifactCoordinate, ...]

    def __len__(self) -> int:
        return len(self.coordinates)

    def to_dict(self) -> dict[str, object]:
        return {
            "bucket": self.bucket.value,
            "coordinates": [c.to_dict() for c in self.coordinates],
        }


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Repository:
    """A repository endpoint declared to the build graph.

    Attributes:
        name: Repository name as the build tool reports it.
        url: Location of the repository; a URL or a local path.
    """

    name: str
    url: str
