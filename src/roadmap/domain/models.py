"""Roadmap payload models — vertices, arcs, and technologies.

All models are frozen so they can serve as graph vertices: identity in a
roadmap is value equality, and hashing lets the graph keep a reverse index.
Sequence fields are stored as tuples for the same reason; lists passed in
are coerced on validation.

The graph core never inspects these fields. Any payload validation beyond
field presence and enum membership belongs to the caller.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from roadmap.domain.types import ArcType, RequirementLevel


class Technology(BaseModel):
    """A skill or tool a knowledge vertex asks the learner to study."""

    model_config = {"frozen": True}

    name: str
    description: str
    requirement_level: RequirementLevel
    application: tuple[str, ...]
    knowledge_sources: tuple[str, ...]


class NodeVertex(BaseModel):
    """A descriptive milestone on the roadmap."""

    model_config = {"frozen": True}

    name: str
    description: str


class KnowledgeVertex(BaseModel):
    """A vertex grouping the technologies to learn at one step."""

    model_config = {"frozen": True}

    technologies: tuple[Technology, ...] = Field(default_factory=tuple)


class Arc(BaseModel):
    """A directed dependency between two vertices."""

    model_config = {"frozen": True}

    type: ArcType = ArcType.PRIMARY

    @classmethod
    def primary(cls) -> Arc:
        return cls(type=ArcType.PRIMARY)

    @classmethod
    def secondary(cls) -> Arc:
        return cls(type=ArcType.SECONDARY)


type Vertex = NodeVertex | KnowledgeVertex
