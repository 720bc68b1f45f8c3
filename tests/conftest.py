"""Shared pytest fixtures and test helpers for roadmap tests."""

from __future__ import annotations

import pytest

from roadmap.domain.models import Arc, KnowledgeVertex, NodeVertex, Technology
from roadmap.domain.types import RequirementLevel
from roadmap.graph import DirectedGraph, Roadmap


@pytest.fixture
def a() -> NodeVertex:
    return NodeVertex(name="A", description="Start here")


@pytest.fixture
def b() -> NodeVertex:
    return NodeVertex(name="B", description="Core skills")


@pytest.fixture
def c() -> KnowledgeVertex:
    return KnowledgeVertex(
        technologies=[
            Technology(
                name="Python",
                description="General-purpose language",
                requirement_level=RequirementLevel.REQUIRED,
                application=["scripting", "web"],
                knowledge_sources=["https://docs.python.org"],
            )
        ]
    )


@pytest.fixture
def primary() -> Arc:
    return Arc.primary()


@pytest.fixture
def secondary() -> Arc:
    return Arc.secondary()


@pytest.fixture
def roadmap(a: NodeVertex, b: NodeVertex, c: KnowledgeVertex) -> Roadmap:
    """Roadmap seeded with vertices A, B, C and no arcs."""
    return Roadmap([a, b, c])


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def assert_consistent(graph: DirectedGraph) -> None:
    """Assert the adjacency matrix is square and the registry duplicate-free."""
    n = len(graph.vertices)
    assert len(graph._rows) == n
    for row in graph._rows:
        assert len(row) == n
    vertices = list(graph.vertices)
    for i, v in enumerate(vertices):
        assert v not in vertices[i + 1 :]
