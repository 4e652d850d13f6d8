"""Serialize enum members by description inside pydantic models.

Usage::

    class Employee(BaseModel):
        personality: described(PersonalityType) | None = None

    Employee(personality=PersonalityType.CHOLERIC).model_dump_json()
    # '{"personality":":()"}'

Validation accepts members, member values, and description or name strings.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from enumtags.domain.tags import require_enum_type
from enumtags.resolver import get_description, resolve_by_description


def described(enum_cls: type[Enum]) -> Any:
    """Return an annotated *enum_cls* type that dumps members as descriptions."""
    require_enum_type(enum_cls)

    def _coerce(value: Any) -> Any:
        if isinstance(value, enum_cls) or not isinstance(value, str):
            return value
        try:
            return enum_cls(value)
        except ValueError:
            member = resolve_by_description(enum_cls, value)
            # Unresolved strings fall through to pydantic's enum error.
            return member if member is not None else value

    return Annotated[
        enum_cls,
        BeforeValidator(_coerce),
        PlainSerializer(get_description, return_type=str),
    ]
