"""Dependency declarations for plugin builds.

The resolver turns an accepted core version into named dependency sets and
registers them against an explicit ``DeclarationSink``. ``BuildGraph`` is
the in-memory sink that records what was declared.
"""

from jpiconfig.core.dependency.models import (
    ArtifactCoordinate,
    ConfigurationBucket,
    DependencySet,
    Repository,
)
from jpiconfig.core.dependency.sink import BuildGraph, DeclarationSink
from jpiconfig.core.dependency.resolver import DependencySetResolver

__all__ = [
    "ArtifactCoordinate",
    "ConfigurationBucket",
    "DependencySet",
    "Repository",
    "DeclarationSink",
    "BuildGraph",
    "DependencySetResolver",
]
