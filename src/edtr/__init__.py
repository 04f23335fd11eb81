"""edtr: the EDTR educational document model and its JSON codec."""

from edtr.decoder import CodecOptions, decode, from_wire
from edtr.encoder import encode, to_wire
from edtr.exceptions import (
    AmbiguousTextFragmentError,
    DepthExceededError,
    EdtrError,
    ErrorKind,
    InvalidValueError,
    MalformedJsonError,
    MissingFieldError,
    SchemaError,
    TypeMismatchError,
    UnexpectedFieldError,
    UnknownDiscriminantError,
)
from edtr.revisions import SchemaRevision
from edtr.schemas import (
    Article,
    ArticleIntroduction,
    Box,
    BoxType,
    EmptyText,
    Heading,
    Hyperlink,
    Image,
    Injection,
    ListItem,
    ListItemChild,
    MarkupText,
    Math,
    Multimedia,
    Node,
    OrderedList,
    Paragraph,
    PlainText,
    Reference,
    RelatedContent,
    Rows,
    Source,
    Spoiler,
    Table,
    Text,
    TextFragment,
    UnorderedList,
)

__all__ = [
    "AmbiguousTextFragmentError",
    "Article",
    "ArticleIntroduction",
    "Box",
    "BoxType",
    "CodecOptions",
    "DepthExceededError",
    "EdtrError",
    "EmptyText",
    "ErrorKind",
    "Heading",
    "Hyperlink",
    "Image",
    "Injection",
    "InvalidValueError",
    "ListItem",
    "ListItemChild",
    "MalformedJsonError",
    "MarkupText",
    "Math",
    "MissingFieldError",
    "Multimedia",
    "Node",
    "OrderedList",
    "Paragraph",
    "PlainText",
    "Reference",
    "RelatedContent",
    "Rows",
    "SchemaError",
    "SchemaRevision",
    "Source",
    "Spoiler",
    "Table",
    "Text",
    "TextFragment",
    "TypeMismatchError",
    "UnexpectedFieldError",
    "UnknownDiscriminantError",
    "UnorderedList",
    "decode",
    "encode",
    "from_wire",
    "to_wire",
]
