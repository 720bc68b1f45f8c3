"""Tests for domain type enums — parametrized."""

import pytest

from roadmap.domain.types import ArcType, RequirementLevel

ENUM_CASES = [
    (
        ArcType,
        {"primary", "secondary"},
    ),
    (
        RequirementLevel,
        {"required", "desirable", "optional", "not_recommended"},
    ),
]


@pytest.mark.parametrize(
    "enum_cls,expected_values",
    ENUM_CASES,
    ids=[cls.__name__ for cls, _ in ENUM_CASES],
)
def test_enum_members_and_values(enum_cls: type, expected_values: set[str]) -> None:
    """Each StrEnum has the expected members with matching string values."""
    actual_values = {e.value for e in enum_cls}
    assert actual_values == expected_values
    for member in enum_cls:
        assert member == member.value
        assert isinstance(member, str)
