"""enumtags — code and description tags for enum members.

Public API re-exported from the domain, resolver, projection, and
serialization modules.
"""

from enumtags.domain.errors import (
    EmptyEnumError,
    EnumTagsError,
    InvalidArgumentError,
    InvalidEnumTypeError,
)
from enumtags.domain.tags import (
    EnumTags,
    TaggedIntEnum,
    register_tags,
    tag,
    tagged,
    tags_of,
)
from enumtags.projection import EnumOption, Projector
from enumtags.resolver import (
    get_code,
    get_code_by_value,
    get_description,
    get_description_by_value,
    get_max,
    get_min,
    get_tag,
    resolve_by_description,
    to_description_list,
    to_projection_list,
)
from enumtags.serialization import described

__all__ = [
    "EmptyEnumError",
    "EnumOption",
    "EnumTags",
    "EnumTagsError",
    "InvalidArgumentError",
    "InvalidEnumTypeError",
    "Projector",
    "TaggedIntEnum",
    "described",
    "get_code",
    "get_code_by_value",
    "get_description",
    "get_description_by_value",
    "get_max",
    "get_min",
    "get_tag",
    "register_tags",
    "resolve_by_description",
    "tag",
    "tagged",
    "tags_of",
    "to_description_list",
    "to_projection_list",
]
