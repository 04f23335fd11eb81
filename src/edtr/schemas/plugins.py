"""Document node ("plugin") models.

Every node class declares its wire tag in ``plugin``; the payload fields are
validated when the node is constructed, so a node always matches its tag.
"""

from __future__ import annotations

from enum import Enum
from pathlib import PurePosixPath
from typing import Any, ClassVar, Union

from pydantic import Field, SerializerFunctionWrapHandler, StrictBool, model_serializer

from edtr.schemas.text import EdtrModel, NonNegativeStrictInt, PlainText, TextFragment, WireStr


class Reference(EdtrModel):
    """Link to another piece of content."""

    id: WireStr
    title: WireStr


class Source(EdtrModel):
    """External source cited by an article."""

    href: WireStr
    title: WireStr


class RelatedContent(EdtrModel):
    """Related articles, courses and videos of an article."""

    articles: tuple[Reference, ...]
    courses: tuple[Reference, ...]
    videos: tuple[Reference, ...]


class BoxType(str, Enum):
    """Enumeration of box styles."""

    BLANK = "blank"
    EXAMPLE = "example"
    QUOTE = "quote"
    APPROACH = "approach"
    REMEMBER = "remember"
    ATTENTION = "attention"
    NOTE = "note"
    DEFINITION = "definition"
    THEOREM = "theorem"
    PROOF = "proof"


class Plugin(EdtrModel):
    """Base for document nodes.

    ``inline_field`` names the single field whose value is the whole wire
    payload (a bare array or string) rather than an object of fields.
    """

    plugin: ClassVar[str]
    inline_field: ClassVar[str | None] = None

    @model_serializer(mode="wrap")
    def _envelope(self, handler: SerializerFunctionWrapHandler) -> Any:
        state = handler(self)
        if self.inline_field is not None:
            state = state[self.inline_field]
        return {"plugin": self.plugin, "state": state}


class Article(Plugin):
    """Top-level article.

    Attributes:
        introduction: Lead-in node, usually an ``ArticleIntroduction``.
        content: Body of the article.
        exercises: Exercise nodes in display order.
        exercise_folder: Folder holding further exercises.
        related_content: Related articles, courses and videos.
        sources: Cited sources in display order.
    """

    plugin = "article"

    introduction: Node
    content: Node
    exercises: tuple[Node, ...]
    exercise_folder: Reference = Field(alias="exerciseFolder")
    related_content: RelatedContent = Field(alias="relatedContent")
    sources: tuple[Source, ...]


class _ExplainedMultimedia(Plugin):
    explanation: Node
    multimedia: Node
    illustrating: StrictBool
    width: NonNegativeStrictInt


class ArticleIntroduction(_ExplainedMultimedia):
    plugin = "articleIntroduction"


class Multimedia(_ExplainedMultimedia):
    plugin = "multimedia"


class Text(Plugin):
    """Inline rich text."""

    plugin = "text"
    inline_field = "fragments"

    fragments: tuple[TextFragment, ...]

    @classmethod
    def of(cls, *texts: str) -> Text:
        """Build a text node of unstyled runs."""
        return cls(fragments=tuple(PlainText.of(text) for text in texts))


class Image(Plugin):
    plugin = "image"

    src: WireStr
    alt: WireStr | None = None
    caption: Node


class Rows(Plugin):
    """Vertical layout container."""

    plugin = "rows"
    inline_field = "children"

    children: tuple[Node, ...]


class Table(Plugin):
    """Table in its legacy encoding; ``raw`` is kept unparsed."""

    plugin = "table"
    inline_field = "raw"

    raw: WireStr


class Spoiler(Plugin):
    plugin = "spoiler"

    title: WireStr
    content: Node


class Injection(Plugin):
    """Content pulled in from elsewhere.

    Schema revision v1 treats ``reference`` as an opaque key, v2 as a
    filesystem-style path. Both share the same string wire form.
    """

    plugin = "injection"
    inline_field = "reference"

    reference: WireStr

    @property
    def path(self) -> PurePosixPath:
        return PurePosixPath(self.reference)


class Box(Plugin):
    """Highlighted box (schema revision v2)."""

    plugin = "box"

    box_type: BoxType = Field(alias="type")
    title: Node
    anchor_id: WireStr = Field(alias="anchorId")
    content: Node


PLUGIN_TYPES: tuple[type[Plugin], ...] = (
    Article,
    ArticleIntroduction,
    Text,
    Image,
    Rows,
    Table,
    Multimedia,
    Spoiler,
    Injection,
    Box,
)

Node = Union[
    Article,
    ArticleIntroduction,
    Text,
    Image,
    Rows,
    Table,
    Multimedia,
    Spoiler,
    Injection,
    Box,
]

for _plugin in (_ExplainedMultimedia, *PLUGIN_TYPES):
    _plugin.model_rebuild()
