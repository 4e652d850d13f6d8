"""Error types raised by enumtags.

Two failure families only:
- Configuration errors (wrong type, missing argument) raise immediately.
- Missing data (no member matches a description or value) is never an error;
  lookups return the caller-supplied default instead.
"""

from __future__ import annotations


class EnumTagsError(Exception):
    """Base class for all enumtags errors."""


class InvalidEnumTypeError(EnumTagsError, TypeError):
    """A type argument is not an ``enum.Enum`` subclass."""

    def __init__(self, obj: object) -> None:
        self.obj = obj
        name = obj.__qualname__ if isinstance(obj, type) else repr(obj)
        super().__init__(f"{name} is not an enum type")


class InvalidArgumentError(EnumTagsError, ValueError):
    """A required argument is missing or of the wrong kind."""


class EmptyEnumError(EnumTagsError, ValueError):
    """An aggregate was requested over an enum with no members."""

    def __init__(self, enum_cls: type) -> None:
        self.enum_cls = enum_cls
        super().__init__(f"{enum_cls.__qualname__} has no members")
