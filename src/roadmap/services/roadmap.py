"""RoadmapService — roadmap editing operations with structured results.

Wraps a :class:`~roadmap.graph.Roadmap` and reports unknown vertices and
missing arcs as ``ServiceError`` payloads instead of silently ignoring
them the way the graph core does.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

from roadmap.domain.models import Arc, Vertex
from roadmap.domain.types import ArcType
from roadmap.graph import Roadmap, VertexNotFoundError
from roadmap.services.result import ServiceResult

logger = logging.getLogger(__name__)


class RoadmapService:
    """Handles vertex and arc edits on a single roadmap."""

    def __init__(self, roadmap: Roadmap) -> None:
        self._roadmap = roadmap

    @property
    def roadmap(self) -> Roadmap:
        return self._roadmap

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _not_found(op: str, vertex: Vertex) -> ServiceResult:
        return ServiceResult.failure(
            op, "NOT_FOUND", f"Vertex not found: {vertex!r}", vertex=repr(vertex)
        )

    def _position(self, vertex: Vertex) -> int:
        return self._roadmap.vertices.index(vertex)

    def _arcs_removed_by(self, op: str, mutate: Any) -> ServiceResult:
        before = len(self._roadmap.arcs)
        mutate()
        return ServiceResult.success(op, {"arcs_removed": before - len(self._roadmap.arcs)})

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def add_vertex(self, vertex: Vertex) -> ServiceResult:
        """Register *vertex*; reports whether it was new."""
        added = vertex not in self._roadmap
        self._roadmap.add_vertex(vertex)
        return ServiceResult.success(
            "add_vertex",
            {"added": added, "position": self._position(vertex)},
            warnings=[] if added else ["Vertex already registered"],
        )

    def remove_vertex(self, vertex: Vertex) -> ServiceResult:
        """Remove *vertex* and every arc touching it."""
        op = "remove_vertex"
        if vertex not in self._roadmap:
            return self._not_found(op, vertex)
        return self._arcs_removed_by(op, lambda: self._roadmap.remove_vertex(vertex))

    # ------------------------------------------------------------------
    # Arcs
    # ------------------------------------------------------------------

    def link(
        self,
        output_vertex: Vertex,
        input_vertex: Vertex,
        arc_type: ArcType = ArcType.PRIMARY,
    ) -> ServiceResult:
        """Set an arc of *arc_type* from *output_vertex* to *input_vertex*.

        Replaces any existing arc on the same ordered pair. Whether unknown
        endpoints are registered follows the roadmap's ``auto_register``.
        """
        op = "link"
        previous = self._roadmap.get(output_vertex, input_vertex)
        try:
            self._roadmap.set(output_vertex, input_vertex, Arc(type=arc_type))
        except VertexNotFoundError as exc:
            logger.debug("link rejected: %s", exc)
            return self._not_found(op, exc.vertex)

        warnings: list[str] = []
        if previous is not None and previous.type != arc_type:
            warnings.append(f"Replaced {previous.type} arc with {arc_type} arc")
        return ServiceResult.success(
            op,
            {
                "arc_type": str(arc_type),
                "replaced": str(previous.type) if previous is not None else None,
            },
            warnings=warnings,
        )

    def unlink(self, output_vertex: Vertex, input_vertex: Vertex) -> ServiceResult:
        """Remove the arc from *output_vertex* to *input_vertex*."""
        op = "unlink"
        for vertex in (output_vertex, input_vertex):
            if vertex not in self._roadmap:
                return self._not_found(op, vertex)

        previous = self._roadmap.get(output_vertex, input_vertex)
        if previous is None:
            return ServiceResult.failure(op, "NO_ARC", "No arc between the given vertices")
        self._roadmap.unset(output_vertex, input_vertex)
        return ServiceResult.success(op, {"arc_type": str(previous.type)})

    def outgoing(self, vertex: Vertex) -> ServiceResult:
        """List the arcs leaving *vertex* with their destinations."""
        op = "outgoing"
        if vertex not in self._roadmap:
            return self._not_found(op, vertex)

        items: list[dict[str, Any]] = []
        for target in self._roadmap.vertices:
            arc = self._roadmap.get(vertex, target)
            if arc is not None:
                items.append({"target": target, "arc_type": str(arc.type)})
        return ServiceResult.success(op, {"count": len(items), "items": items})

    def clear_arcs(self, vertex: Vertex) -> ServiceResult:
        """Drop every arc touching *vertex* but keep the vertex."""
        op = "clear_arcs"
        if vertex not in self._roadmap:
            return self._not_found(op, vertex)
        return self._arcs_removed_by(op, lambda: self._roadmap.clear_arcs_of(vertex))

    def summary(self) -> ServiceResult:
        """Count vertices and arcs, with arcs broken down by type."""
        arcs = self._roadmap.arcs
        by_type = Counter(str(arc.type) for arc in arcs)
        return ServiceResult.success(
            "summary",
            {
                "vertex_count": len(self._roadmap),
                "arc_count": len(arcs),
                "by_type": {str(t): by_type.get(str(t), 0) for t in ArcType},
            },
        )
