"""Document models for edtr."""

from edtr.schemas.plugins import (
    PLUGIN_TYPES,
    Article,
    ArticleIntroduction,
    Box,
    BoxType,
    Image,
    Injection,
    Multimedia,
    Node,
    Plugin,
    Reference,
    RelatedContent,
    Rows,
    Source,
    Spoiler,
    Table,
    Text,
)
from edtr.schemas.text import (
    MARKUP_TYPES,
    EmptyText,
    Heading,
    Hyperlink,
    ListItem,
    ListItemChild,
    MarkupText,
    Math,
    OrderedList,
    Paragraph,
    PlainText,
    TextFragment,
    UnorderedList,
)

__all__ = [
    "MARKUP_TYPES",
    "PLUGIN_TYPES",
    "Article",
    "ArticleIntroduction",
    "Box",
    "BoxType",
    "EmptyText",
    "Heading",
    "Hyperlink",
    "Image",
    "Injection",
    "ListItem",
    "ListItemChild",
    "MarkupText",
    "Math",
    "Multimedia",
    "Node",
    "OrderedList",
    "Paragraph",
    "PlainText",
    "Plugin",
    "Reference",
    "RelatedContent",
    "Rows",
    "Source",
    "Spoiler",
    "Table",
    "Text",
    "TextFragment",
    "UnorderedList",
]
