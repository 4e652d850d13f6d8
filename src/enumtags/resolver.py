"""Enum metadata resolver — members to and from their tags.

Every function here is pure: it reads the enum declaration and the
registration-time tag table, and allocates fresh output.

INVARIANT: Type checks run before any work. A non-enum type argument raises
:class:`InvalidEnumTypeError`; a missing member raises
:class:`InvalidArgumentError`. A lookup that finds nothing is not an error
and returns the caller's default.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

from enumtags.domain.errors import EmptyEnumError
from enumtags.domain.tags import require_enum_type, tags_of
from enumtags.projection import EnumOption, Projector

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)
T = TypeVar("T")

_MISSING: Any = object()


# --- Single-member lookups ---


def get_tag(member: Enum, kind: str) -> str | None:
    """Return the *kind* tag of *member*, or None if it has no such tag.

    *kind* is ``"code"``, ``"description"``, or any extra tag name.
    """
    tags = tags_of(member)
    if tags is None:
        return None
    return tags.get(kind)


def get_code(member: Enum) -> str:
    """Return the code tag of *member*, falling back to its name."""
    code = get_tag(member, "code")
    return code if code is not None else member.name


def get_description(member: Enum) -> str:
    """Return the description tag of *member*, falling back to its name."""
    description = get_tag(member, "description")
    return description if description is not None else member.name


# --- Type-level lookups ---


def resolve_by_description(
    enum_cls: type[E],
    description: str | None,
    default: E | None = None,
) -> E | None:
    """Find the first member whose description tag or name matches.

    Members are scanned in declaration order; each one matches on its
    description tag or its name. Alias names are tried last.
    """
    require_enum_type(enum_cls)
    if description is None:
        return default

    for member in enum_cls:
        if get_tag(member, "description") == description or member.name == description:
            return member

    by_name = enum_cls.__members__.get(description)
    if by_name is not None:
        return by_name

    logger.debug("No %s member described as %r", enum_cls.__qualname__, description)
    return default


def _member_for_value(enum_cls: type[E], value: Any) -> E | None:
    for member in enum_cls:
        # Exact type match: True is not 1, 4.0 is not 4.
        if type(member.value) is type(value) and member.value == value:
            return member
    return None


def get_code_by_value(
    enum_cls: type[Enum],
    value: Any,
    default: str | None = None,
) -> str | None:
    """Return the code of the member with *value*, or *default* if undefined."""
    require_enum_type(enum_cls)
    member = _member_for_value(enum_cls, value)
    if member is None:
        logger.debug("%r is not a %s value", value, enum_cls.__qualname__)
        return default
    return get_code(member)


def get_description_by_value(
    enum_cls: type[Enum],
    value: Any,
    default: str | None = None,
) -> str | None:
    """Return the description of the member with *value*, or *default* if undefined."""
    require_enum_type(enum_cls)
    member = _member_for_value(enum_cls, value)
    if member is None:
        logger.debug("%r is not a %s value", value, enum_cls.__qualname__)
        return default
    return get_description(member)


def _bound(enum_cls: type[Enum], pick: Callable[..., Any], default: Any) -> Any:
    require_enum_type(enum_cls)
    values = [member.value for member in enum_cls]
    if not values:
        if default is _MISSING:
            raise EmptyEnumError(enum_cls)
        return default
    return pick(values)


def get_min(enum_cls: type[Enum], *, default: Any = _MISSING) -> Any:
    """Return the smallest member value.

    Raises:
        EmptyEnumError: *enum_cls* has no members and no *default* was given.
    """
    return _bound(enum_cls, min, default)


def get_max(enum_cls: type[Enum], *, default: Any = _MISSING) -> Any:
    """Return the largest member value.

    Raises:
        EmptyEnumError: *enum_cls* has no members and no *default* was given.
    """
    return _bound(enum_cls, max, default)


# --- Bulk projections ---


def to_description_list(enum_cls: type[Enum]) -> list[str]:
    """Return one description (or name) per member, in declaration order."""
    require_enum_type(enum_cls)
    return [get_description(member) for member in enum_cls]


def to_projection_list(
    enum_cls: type[Enum],
    target: type[T] | Callable[..., T] = EnumOption,
    value_field: str = "value",
    description_field: str = "description",
    code_field: str | None = None,
) -> list[T]:
    """Project every member into a *target* record, sorted by value ascending.

    The value slot gets the member value, the description slot gets
    :func:`get_description`, and the code slot (if named) gets the code tag
    or None. Sorting is by value, not declaration order.
    """
    require_enum_type(enum_cls)
    projector: Projector[T] = Projector(target, value_field, description_field, code_field)
    records = sorted(
        (projector.record(member) for member in enum_cls),
        key=lambda fields: fields[value_field],
    )
    return [projector.build(fields) for fields in records]
