"""Projection of enum members into caller-shaped records.

A :class:`Projector` is parameterized by the target type and the names of
its three slots (value, description, code). It builds each record directly
from keyword arguments; pydantic models go through ``model_validate`` so
field aliases are honoured.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from enumtags.domain.tags import tags_of

T = TypeVar("T")


class EnumOption(BaseModel):
    """Default projection target: one selectable option per enum member."""

    model_config = {"frozen": True}

    value: Any
    description: str
    code: str | None = None


@dataclass(frozen=True)
class Projector(Generic[T]):
    """Builds one *target* instance per enum member.

    Attributes:
        target: Class or factory accepting the slot names as keywords.
        value_field: Slot receiving the member value.
        description_field: Slot receiving the description (or member name).
        code_field: Optional slot receiving the code tag, None when untagged.
    """

    target: type[T] | Callable[..., T]
    value_field: str = "value"
    description_field: str = "description"
    code_field: str | None = None

    def record(self, member: Enum) -> dict[str, Any]:
        """Return the slot map for *member* without building the target."""
        tags = tags_of(member)
        description = tags.description if tags else None
        fields: dict[str, Any] = {
            self.value_field: member.value,
            self.description_field: description if description is not None else member.name,
        }
        if self.code_field is not None:
            fields[self.code_field] = tags.code if tags else None
        return fields

    def build(self, fields: dict[str, Any]) -> T:
        """Instantiate the target from a slot map.

        Construction errors from the target (``TypeError``,
        ``pydantic.ValidationError``) propagate unchanged.
        """
        if isinstance(self.target, type) and issubclass(self.target, BaseModel):
            return self.target.model_validate(fields)
        return self.target(**fields)

    def __call__(self, member: Enum) -> T:
        return self.build(self.record(member))
