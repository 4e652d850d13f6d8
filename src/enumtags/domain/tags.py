"""Per-member metadata tags and the registration-time tag table.

Tags are attached once, when the enum is defined or registered, and only
read afterwards. Two ways to attach them:

- Declare members of a :class:`TaggedIntEnum` as ``NAME = value, tag(...)``.
- Call :func:`register_tags` (or decorate with :func:`tagged`) for any
  existing ``enum.Enum`` subclass.

Usage::

    class Character(TaggedIntEnum):
        CARTMAN = 1, tag(code="EC", description="Eric Cartman", category="Cool")
        CHEF = 5

    @tagged(RED=tag(code="R", description="Bright red"))
    class Color(IntEnum):
        RED = 1
        BLUE = 2
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum, IntEnum
from typing import Any, TypeVar

from pydantic import BaseModel

from enumtags.domain.errors import InvalidArgumentError, InvalidEnumTypeError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=type[Enum])

# INVARIANT: written only at registration time, keyed by canonical member name.
_TAG_TABLE: dict[type[Enum], dict[str, EnumTags]] = {}


class EnumTags(BaseModel):
    """Metadata attached to a single enum member.

    ``code`` and ``description`` are the well-known kinds. Any other keyword
    passed to :func:`tag` is kept as an extra tag (e.g. ``category``).
    """

    model_config = {"frozen": True, "extra": "allow"}

    code: str | None = None
    description: str | None = None

    def get(self, kind: str) -> str | None:
        """Return the tag named *kind*, or None if it was never set."""
        if kind in ("code", "description"):
            return getattr(self, kind)
        return (self.model_extra or {}).get(kind)


def tag(code: str | None = None, description: str | None = None, **extra: str) -> EnumTags:
    """Build an :class:`EnumTags` for a member declaration."""
    return EnumTags(code=code, description=description, **extra)


class TaggedIntEnum(IntEnum):
    """IntEnum whose members may carry an :class:`EnumTags` after the value."""

    def __new__(cls, value: int, tags: EnumTags | None = None) -> TaggedIntEnum:
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj._tags = tags
        return obj


def require_enum_type(obj: Any) -> type[Enum]:
    """Return *obj* unchanged if it is an Enum subclass, else raise."""
    if not (isinstance(obj, type) and issubclass(obj, Enum)):
        raise InvalidEnumTypeError(obj)
    return obj


def register_tags(
    enum_cls: type[Enum],
    tags: Mapping[str | Enum, EnumTags | Mapping[str, str]],
) -> type[Enum]:
    """Attach tags to members of an existing enum.

    Keys are member names (aliases allowed) or members. Values are
    :class:`EnumTags` or plain mappings. Registered tags take precedence
    over tags declared on :class:`TaggedIntEnum` members.

    Raises:
        InvalidEnumTypeError: *enum_cls* is not an enum.
        InvalidArgumentError: A key does not name a member of *enum_cls*.
    """
    require_enum_type(enum_cls)
    resolved: dict[str, EnumTags] = {}
    for key, value in tags.items():
        if isinstance(key, Enum):
            if type(key) is not enum_cls:
                msg = f"{key!r} is not a member of {enum_cls.__qualname__}"
                raise InvalidArgumentError(msg)
            member = key
        else:
            member = enum_cls.__members__.get(key)
            if member is None:
                msg = f"{enum_cls.__qualname__} has no member named {key!r}"
                raise InvalidArgumentError(msg)
        resolved[member.name] = (
            value if isinstance(value, EnumTags) else EnumTags.model_validate(value)
        )

    _TAG_TABLE.setdefault(enum_cls, {}).update(resolved)
    logger.debug("Registered tags for %s: %s", enum_cls.__qualname__, sorted(resolved))
    return enum_cls


def tagged(**tags: EnumTags | Mapping[str, str]) -> Callable[[E], E]:
    """Class decorator form of :func:`register_tags`."""

    def decorator(enum_cls: E) -> E:
        register_tags(enum_cls, tags)
        return enum_cls

    return decorator


def tags_of(member: Any) -> EnumTags | None:
    """Return the tags attached to *member*, or None if it has none.

    Raises:
        InvalidArgumentError: *member* is None or not an enum member.
    """
    if member is None:
        raise InvalidArgumentError("Enum member must not be None")
    if not isinstance(member, Enum):
        msg = f"{member!r} is not an enum member"
        raise InvalidArgumentError(msg)

    registered = _TAG_TABLE.get(type(member))
    if registered and member.name in registered:
        return registered[member.name]
    return getattr(member, "_tags", None)
