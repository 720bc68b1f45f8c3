"""Roadmap — the DirectedGraph specialised to roadmap vertices and arcs."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Self

from roadmap.config.logging import configure_from_config
from roadmap.config.settings import RoadmapSettings
from roadmap.domain.models import Arc, Vertex
from roadmap.graph.directed import DirectedGraph


class Roadmap(DirectedGraph[Vertex, Arc]):
    """A learning roadmap: node and knowledge vertices joined by typed arcs.

    Behaves exactly like :class:`DirectedGraph`; the subclass only pins
    the vertex and arc types for type checkers and readers.
    """

    @classmethod
    def from_settings(
        cls,
        settings: RoadmapSettings | None = None,
        vertices: Iterable[Vertex] = (),
    ) -> Self:
        """Build a roadmap from resolved settings.

        Loads settings from the environment and ``roadmap.toml`` when none
        are given, installs the ``[logging]`` section, and applies the
        ``[graph]`` write policy.
        """
        if settings is None:
            settings = RoadmapSettings.load()
        configure_from_config(settings.logging)
        return cls.from_config(settings.graph, vertices)

    def __repr__(self) -> str:
        return f"Roadmap(vertices={len(self)}, arcs={len(self.arcs)})"
