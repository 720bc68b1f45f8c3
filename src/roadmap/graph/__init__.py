"""Graph layer — the roadmap container and its adapters."""

from roadmap.graph.directed import DirectedGraph, VertexNotFoundError
from roadmap.graph.roadmap import Roadmap

__all__ = ["DirectedGraph", "Roadmap", "VertexNotFoundError"]
