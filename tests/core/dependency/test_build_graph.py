"""Tests for the BuildGraph declaration sink."""

from __future__ import annotations

import pytest

from jpiconfig.core.dependency import (
    ArtifactCoordinate,
    BuildGraph,
    ConfigurationBucket,
    DeclarationSink,
    DependencySet,
    Repository,
)


class TestBuildGraph:
    """Tests for recording and reporting declarations."""

    def test_new_graph_is_empty(self) -> None:
        graph = BuildGraph()
        assert graph.is_empty
        assert graph.repositories == []
        assert graph.dependencies("test") == []

    def test_is_a_declaration_sink(self) -> None:
        assert isinstance(BuildGraph(), DeclarationSink)

    def test_abstract_sink_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            DeclarationSink()  # type: ignore[abstract]

    def test_repositories_kept_in_order(self) -> None:
        graph = BuildGraph()
        graph.declare_repository(Repository("a", "http://a"))
        graph.declare_repository(Repository("b", "http://b"))
        assert [r.name for r in graph.repositories] == ["a", "b"]
        assert not graph.is_empty

    def test_repositories_returns_copy(self) -> None:
        graph = BuildGraph()
        graph.declare_repository(Repository("a", "http://a"))
        graph.repositories.clear()
        assert len(graph.repositories) == 1

    def test_unknown_bucket_rejected(self) -> None:
        with pytest.raises(ValueError):
            BuildGraph().dependencies("compile")

    def test_to_dict_lists_every_bucket(self) -> None:
        graph = BuildGraph()
        graph.add_dependencies(
            DependencySet(ConfigurationBucket.CORE, (ArtifactCoordinate("g", "n", "1.0"),))
        )
        data = graph.to_dict()
        assert set(data["dependencies"]) == {"core", "war", "test"}
        assert data["dependencies"]["core"][0]["name"] == "n"
        assert data["dependencies"]["test"] == []
