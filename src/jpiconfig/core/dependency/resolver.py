"""Dependency-set selection for an accepted core version.

Given a core version that passed the version gate, produces the three
dependency sets a plugin build needs:

- ``core``: jenkins-core and the legacy servlet API, both transitive.
- ``war``: the jenkins.war distribution, artifact-only.
- ``test``: the test harness (transitive) plus artifact-only extras:
  ui-samples at the companion version, maven-plugin, the test flavour of
  jenkins.war, and JUnit.

The resolver decides *what* to declare. Fetching is the build tool's job.
"""

from __future__ import annotations

import logging

from jpiconfig.core.dependency.models import (
    ArtifactCoordinate,
    ConfigurationBucket,
    DependencySet,
)
from jpiconfig.core.dependency.sink import DeclarationSink
from jpiconfig.core.version.models import PlatformVersion

logger = logging.getLogger(__name__)

JENKINS_GROUP = "org.jenkins-ci.main"
SERVLET_API_VERSION = "2.4"
JUNIT_VERSION = "4.10"
WAR_FOR_TEST_CLASSIFIER = "war-for-test"


class DependencySetResolver:
    """Build the dependency declarations for a core/companion version pair.

    ``resolve`` is pure and deterministic. ``register`` resolves and then
    appends every set to the given sink.
    """

    def resolve(
        self,
        version: str | PlatformVersion,
        companion_version: str,
    ) -> list[DependencySet]:
        """Produce the dependency sets for *version*.

        Args:
            version: Accepted core version. Only its string form is used.
            companion_version: ui-samples version from the version gate.

        Returns:
            Dependency sets for the ``core``, ``war`` and ``test`` buckets,
            in that order.
        """
        v = str(version)
        core = DependencySet(
            bucket=ConfigurationBucket.CORE,
            coordinates=(
                ArtifactCoordinate(JENKINS_GROUP, "jenkins-core", v, "jar", transitive=True),
                ArtifactCoordinate("javax.servlet", "servlet-api", SERVLET_API_VERSION),
            ),
        )
        war = DependencySet(
            bucket=ConfigurationBucket.WAR,
            coordinates=(
                ArtifactCoordinate(JENKINS_GROUP, "jenkins-war", v, "war", transitive=False),
            ),
        )
        test = DependencySet(
            bucket=ConfigurationBucket.TEST,
            coordinates=(
                ArtifactCoordinate.from_notation(
                    f"{JENKINS_GROUP}:jenkins-test-harness:{v}@jar", transitive=True
                ),
                ArtifactCoordinate.from_notation(
                    f"{JENKINS_GROUP}:ui-samples-plugin:{companion_version}@jar"
                ),
                ArtifactCoordinate.from_notation(f"{JENKINS_GROUP}:maven-plugin:{v}@jar"),
                ArtifactCoordinate.from_notation(
                    f"{JENKINS_GROUP}:jenkins-war:{v}:{WAR_FOR_TEST_CLASSIFIER}@jar"
                ),
                ArtifactCoordinate.from_notation(f"junit:junit-dep:{JUNIT_VERSION}@jar"),
            ),
        )
        return [core, war, test]

    def register(
        self,
        sink: DeclarationSink,
        version: str | PlatformVersion,
        companion_version: str,
    ) -> list[DependencySet]:
        """Resolve and append every dependency set to *sink*.

        Calling this twice declares the dependencies twice; the sink does
        not deduplicate.

        Returns:
            The dependency sets that were registered.
        """
        sets = self.resolve(version, companion_version)
        for dependency_set in sets:
            sink.add_dependencies(dependency_set)
        logger.debug("Registered %d dependency sets for core %s", len(sets), version)
        return sets
