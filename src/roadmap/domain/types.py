"""Classification enums for arcs and technologies."""

from __future__ import annotations

from enum import StrEnum


class ArcType(StrEnum):
    """Kind of dependency an arc expresses."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


class RequirementLevel(StrEnum):
    """How strongly a technology is recommended for study."""

    REQUIRED = "required"
    DESIRABLE = "desirable"
    OPTIONAL = "optional"
    NOT_RECOMMENDED = "not_recommended"
