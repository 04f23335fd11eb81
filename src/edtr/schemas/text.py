"""Inline rich text models.

A text fragment is one of three shapes, told apart by their fields rather
than an explicit tag:

- ``PlainText``: a run of characters with optional styling flags.
- ``MarkupText``: an element with a ``type`` tag and child fragments.
- ``EmptyText``: an empty record meaning "no content".

The wire form of each model is produced by ``model_dump(mode="json",
by_alias=True)``; the serializers below add the ``type`` tag and drop unset
styling flags.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    StrictBool,
    StrictInt,
    StrictStr,
    model_serializer,
)
from pydantic_core import PydanticCustomError

_STYLE_FLAGS: tuple[str, ...] = ("strong", "em", "code")


def _reject_lone_surrogates(value: str) -> str:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise PydanticCustomError(
            "lone_surrogate",
            "string holds an unpaired surrogate at index {index}",
            {"index": exc.start},
        ) from exc
    return value


# Strings that can be written as UTF-8 JSON.
WireStr = Annotated[StrictStr, AfterValidator(_reject_lone_surrogates)]

NonNegativeStrictInt = Annotated[StrictInt, Field(ge=0)]


class EdtrModel(BaseModel):
    """Base model: immutable, no undeclared fields.

    Fields with a camelCase wire name declare it as an alias; either name is
    accepted at construction.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class PlainText(EdtrModel):
    """A run of text with styling flags.

    Attributes:
        text: The characters of the run.
        strong: Bold. Omitted from the wire form when false.
        em: Emphasis. Omitted from the wire form when false.
        code: Inline code (schema revision v2). Omitted when false.
    """

    text: WireStr
    strong: StrictBool = False
    em: StrictBool = False
    code: StrictBool = False

    @classmethod
    def of(cls, text: str) -> PlainText:
        """Build an unstyled run."""
        return cls(text=text)

    @model_serializer(mode="wrap")
    def _omit_unset_flags(self, handler: SerializerFunctionWrapHandler) -> Any:
        data = handler(self)
        for flag in _STYLE_FLAGS:
            if not data.get(flag):
                data.pop(flag, None)
        return data


class EmptyText(EdtrModel):
    """Empty fragment."""


class MarkupText(EdtrModel):
    """Base for markup elements; ``tag`` is the wire ``type`` value."""

    tag: ClassVar[str]

    children: tuple[TextFragment, ...]

    @model_serializer(mode="wrap")
    def _tagged(self, handler: SerializerFunctionWrapHandler) -> Any:
        data = handler(self)
        children = data.pop("children")
        return {"type": self.tag, **data, "children": children}


class Paragraph(MarkupText):
    tag = "p"


class Hyperlink(MarkupText):
    tag = "a"

    href: WireStr


class UnorderedList(MarkupText):
    tag = "unordered-list"


class OrderedList(MarkupText):
    """Numbered list (schema revision v2)."""

    tag = "ordered-list"


class ListItem(MarkupText):
    tag = "list-item"


class ListItemChild(MarkupText):
    tag = "list-item-child"


class Heading(MarkupText):
    tag = "h"

    level: NonNegativeStrictInt


class Math(MarkupText):
    """Formula source; ``inline`` selects inline versus display rendering."""

    tag = "math"

    src: WireStr
    inline: StrictBool


MARKUP_TYPES: tuple[type[MarkupText], ...] = (
    Paragraph,
    Hyperlink,
    UnorderedList,
    OrderedList,
    ListItem,
    ListItemChild,
    Heading,
    Math,
)

TextFragment = Union[
    PlainText,
    Paragraph,
    Hyperlink,
    UnorderedList,
    OrderedList,
    ListItem,
    ListItemChild,
    Heading,
    Math,
    EmptyText,
]

for _markup in (MarkupText, *MARKUP_TYPES):
    _markup.model_rebuild()
