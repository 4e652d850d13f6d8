"""Tests for tag declaration, registration, and lookup."""

from enum import IntEnum

import pytest

from enumtags.domain.errors import InvalidArgumentError, InvalidEnumTypeError
from enumtags.domain.tags import (
    EnumTags,
    TaggedIntEnum,
    register_tags,
    require_enum_type,
    tag,
    tagged,
    tags_of,
)
from tests.samples import Color, Planet, SouthParkCharacterType


class TestEnumTags:
    def test_well_known_kinds(self) -> None:
        tags = tag(code="EC", description="Eric Cartman")
        assert tags.get("code") == "EC"
        assert tags.get("description") == "Eric Cartman"

    def test_extra_kinds_are_kept(self) -> None:
        tags = tag(code="EC", category="Cool")
        assert tags.get("category") == "Cool"

    def test_missing_kind_is_none(self) -> None:
        assert tag().get("code") is None
        assert tag().get("category") is None

    def test_frozen(self) -> None:
        tags = tag(code="EC")
        with pytest.raises(Exception):
            tags.code = "XX"  # type: ignore[misc]


class TestTaggedIntEnum:
    def test_values_are_plain_ints(self) -> None:
        assert SouthParkCharacterType.Kyle == 3
        assert SouthParkCharacterType(3) is SouthParkCharacterType.Kyle
        assert isinstance(SouthParkCharacterType.Kyle, int)

    def test_declared_tags(self) -> None:
        tags = tags_of(SouthParkCharacterType.Kenny)
        assert tags is not None
        assert tags.code == "KM"
        assert tags.get("category") == "Poor"

    def test_untagged_member(self) -> None:
        assert tags_of(SouthParkCharacterType.Chef) is None

    def test_declaration_order_preserved(self) -> None:
        assert [m.name for m in SouthParkCharacterType] == [
            "Cartman",
            "Kenny",
            "Kyle",
            "Stan",
            "Chef",
        ]


class TestRegisterTags:
    def test_decorator_registers_by_name(self) -> None:
        tags = tags_of(Color.RED)
        assert tags is not None
        assert tags.code == "R"

    def test_mapping_values_are_validated(self) -> None:
        tags = tags_of(Color.BLUE)
        assert isinstance(tags, EnumTags)
        assert tags.description == "Deep blue"
        assert tags.code is None

    def test_alias_shares_canonical_tags(self) -> None:
        assert Color.CRIMSON is Color.RED
        assert tags_of(Color.CRIMSON) == tags_of(Color.RED)

    def test_member_keys(self) -> None:
        tags = tags_of(Planet.VENUS)
        assert tags is not None
        assert tags.description == "Morning star"
        assert tags_of(Planet.MERCURY) is None

    def test_registered_tags_override_declared(self) -> None:
        class Size(TaggedIntEnum):
            SMALL = 1, tag(code="S")
            LARGE = 2

        register_tags(Size, {"SMALL": tag(code="SM")})
        assert tags_of(Size.SMALL).code == "SM"  # type: ignore[union-attr]

    def test_register_by_alias_name(self) -> None:
        class Shade(IntEnum):
            DARK = 1
            BLACK = 1

        register_tags(Shade, {"BLACK": tag(description="Very dark")})
        assert tags_of(Shade.DARK).description == "Very dark"  # type: ignore[union-attr]

    def test_unknown_name_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="no member named 'PURPLE'"):
            register_tags(Color, {"PURPLE": tag(code="P")})

    def test_foreign_member_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            register_tags(Color, {Planet.VENUS: tag(code="V")})

    def test_non_enum_rejected(self) -> None:
        with pytest.raises(InvalidEnumTypeError):
            register_tags(int, {"x": tag()})  # type: ignore[arg-type]

    def test_tagged_returns_class(self) -> None:
        @tagged(ON=tag(code="1"))
        class Switch(IntEnum):
            ON = 1
            OFF = 0

        assert Switch.ON == 1
        assert tags_of(Switch.ON).code == "1"  # type: ignore[union-attr]


class TestTagsOf:
    def test_none_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            tags_of(None)

    def test_non_member_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="not an enum member"):
            tags_of(3)


class TestRequireEnumType:
    def test_returns_enum_class(self) -> None:
        assert require_enum_type(Color) is Color

    @pytest.mark.parametrize("obj", [int, str, None, Color.RED, 3, "Color"])
    def test_rejects_non_enums(self, obj: object) -> None:
        with pytest.raises(InvalidEnumTypeError) as exc_info:
            require_enum_type(obj)
        assert exc_info.value.obj is obj
