"""Tests for DependencySetResolver.

Validates the exact coordinates selected for the core, war and test
buckets, and registration against a BuildGraph sink.
"""

from __future__ import annotations

import pytest

from jpiconfig.core.dependency import (
    BuildGraph,
    ConfigurationBucket,
    DependencySetResolver,
)
from jpiconfig.core.version import PlatformVersion


@pytest.fixture
def resolver() -> DependencySetResolver:
    return DependencySetResolver()


def _notations(dependency_set) -> list[str]:
    return [c.notation for c in dependency_set.coordinates]


class TestResolve:
    """Tests for the pure ``resolve`` method."""

    def test_bucket_order(self, resolver: DependencySetResolver) -> None:
        sets = resolver.resolve("1.500", "1.500")
        assert [s.bucket for s in sets] == [
            ConfigurationBucket.CORE,
            ConfigurationBucket.WAR,
            ConfigurationBucket.TEST,
        ]

    def test_core_set(self, resolver: DependencySetResolver) -> None:
        core = resolver.resolve("1.500", "1.500")[0]
        assert _notations(core) == [
            "org.jenkins-ci.main:jenkins-core:1.500@jar",
            "javax.servlet:servlet-api:2.4@jar",
        ]
        assert all(c.transitive for c in core.coordinates)

    def test_war_set(self, resolver: DependencySetResolver) -> None:
        war = resolver.resolve("1.500", "1.500")[1]
        assert _notations(war) == ["org.jenkins-ci.main:jenkins-war:1.500@war"]
        assert war.coordinates[0].transitive is False

    def test_test_set(self, resolver: DependencySetResolver) -> None:
        test = resolver.resolve("1.533", "2.0")[2]
        assert _notations(test) == [
            "org.jenkins-ci.main:jenkins-test-harness:1.533@jar",
            "org.jenkins-ci.main:ui-samples-plugin:2.0@jar",
            "org.jenkins-ci.main:maven-plugin:1.533@jar",
            "org.jenkins-ci.main:jenkins-war:1.533:war-for-test@jar",
            "junit:junit-dep:4.10@jar",
        ]

    def test_only_harness_is_transitive_in_test_set(self, resolver: DependencySetResolver) -> None:
        test = resolver.resolve("1.533", "2.0")[2]
        assert [c.transitive for c in test.coordinates] == [True, False, False, False, False]

    def test_companion_version_only_affects_ui_samples(self, resolver: DependencySetResolver) -> None:
        a = resolver.resolve("1.520", "1.520")
        b = resolver.resolve("1.520", "9.9")
        assert a[0] == b[0]
        assert a[1] == b[1]
        changed = [
            (x.name, x.version, y.version)
            for x, y in zip(a[2].coordinates, b[2].coordinates)
            if x != y
        ]
        assert changed == [("ui-samples-plugin", "1.520", "9.9")]

    def test_accepts_platform_version(self, resolver: DependencySetResolver) -> None:
        sets = resolver.resolve(PlatformVersion.parse("1.532.1"), "1.532.1")
        assert sets[0].coordinates[0].version == "1.532.1"

    def test_deterministic(self, resolver: DependencySetResolver) -> None:
        assert resolver.resolve("1.500", "1.500") == resolver.resolve("1.500", "1.500")


class TestRegister:
    """Tests for ``register`` against a BuildGraph."""

    def test_register_appends_under_buckets(self, resolver: DependencySetResolver) -> None:
        graph = BuildGraph()
        resolver.register(graph, "1.500", "1.500")
        assert len(graph.dependencies(ConfigurationBucket.CORE)) == 2
        assert len(graph.dependencies("war")) == 1
        assert len(graph.dependencies("test")) == 5

    def test_register_returns_resolved_sets(self, resolver: DependencySetResolver) -> None:
        graph = BuildGraph()
        sets = resolver.register(graph, "1.500", "1.500")
        assert sets == resolver.resolve("1.500", "1.500")

    def test_register_twice_redeclares(self, resolver: DependencySetResolver) -> None:
        graph = BuildGraph()
        resolver.register(graph, "1.500", "1.500")
        resolver.register(graph, "1.510", "1.510")
        core = graph.dependencies("core")
        assert [c.version for c in core if c.name == "jenkins-core"] == ["1.500", "1.510"]

    def test_register_does_not_declare_repositories(self, resolver: DependencySetResolver) -> None:
        graph = BuildGraph()
        resolver.register(graph, "1.500", "1.500")
        assert graph.repositories == []
