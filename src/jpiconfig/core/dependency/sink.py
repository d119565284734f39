"""Declaration sinks: where repositories and dependency sets are registered.

The version gate and the dependency-set resolver never talk to a build
tool directly. They write to a ``DeclarationSink`` passed in by the caller,
so their decision logic stays testable without a real build graph.

``BuildGraph`` is the recording sink used by ``PluginExtension`` and the CLI.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import defaultdict

from jpiconfig.core.dependency.models import (
    ArtifactCoordinate,
    ConfigurationBucket,
    DependencySet,
    Repository,
)

logger = logging.getLogger(__name__)


class DeclarationSink(ABC):
    """Receiver for repository and dependency declarations."""

    @abstractmethod
    def declare_repository(self, repository: Repository) -> None:
        """Declare a repository endpoint for later resolution."""

    @abstractmethod
    def add_dependencies(self, dependency_set: DependencySet) -> None:
        """Append a dependency set under its configuration bucket."""


class BuildGraph(DeclarationSink):
    """In-memory sink recording every declaration in arrival order.

    Declarations are appended, never replaced: registering the same
    version twice declares its dependencies twice, as a real build graph
    would.

    Thread safety: This class is NOT thread-safe.
    """

    def __init__(self) -> None:
        self._repositories: list[Repository] = []
        self._dependencies: dict[ConfigurationBucket, list[ArtifactCoordinate]] = (
            defaultdict(list)
        )

    def declare_repository(self, repository: Repository) -> None:
        logger.debug("Declaring repository %s (%s)", repository.name, repository.url)
        self._repositories.append(repository)

    def add_dependencies(self, dependency_set: DependencySet) -> None:
        logger.debug(
            "Adding %d dependencies to %s",
            len(dependency_set), dependency_set.bucket.value,
        )
        self._dependencies[dependency_set.bucket].extend(dependency_set.coordinates)

    @property
    def repositories(self) -> list[Repository]:
        """Declared repositories, in declaration order."""
        return list(self._repositories)

    def dependencies(self, bucket: ConfigurationBucket | str) -> list[ArtifactCoordinate]:
        """Return the coordinates registered under *bucket*.

        Args:
            bucket: A ``ConfigurationBucket`` or its string value.

        Returns:
            Coordinates in registration order. Empty for an unused bucket.
        """
        return list(self._dependencies.get(ConfigurationBucket(bucket), []))

    @property
    def is_empty(self) -> bool:
        """True if nothing has been declared yet."""
        return not self._repositories and not any(self._dependencies.values())

    def to_dict(self) -> dict[str, object]:
        """Serialize the recorded declarations for JSON output."""
        return {
            "repositories": [
                {"name": r.name, "url": r.url} for r in self._repositories
            ],
            "dependencies": {
                bucket.value: [c.to_dict() for c in self._dependencies.get(bucket, [])]
                for bucket in ConfigurationBucket
            },
        }
