"""Service layer — ServiceResult-returning operations over a roadmap."""

from roadmap.services.result import ServiceError, ServiceResult
from roadmap.services.roadmap import RoadmapService

__all__ = ["RoadmapService", "ServiceError", "ServiceResult"]
