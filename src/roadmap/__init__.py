"""roadmap — learning roadmaps as directed graphs of typed vertices and arcs."""

from roadmap.domain.models import Arc, KnowledgeVertex, NodeVertex, Technology, Vertex
from roadmap.domain.types import ArcType, RequirementLevel
from roadmap.graph import DirectedGraph, Roadmap, VertexNotFoundError

__all__ = [
    "Arc",
    "ArcType",
    "DirectedGraph",
    "KnowledgeVertex",
    "NodeVertex",
    "RequirementLevel",
    "Roadmap",
    "Technology",
    "Vertex",
    "VertexNotFoundError",
]
__version__ = "0.1.0"
