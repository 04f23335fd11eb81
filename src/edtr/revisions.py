"""Schema revisions and the tags each one recognizes."""

from __future__ import annotations

from enum import Enum
from typing import Final


class SchemaRevision(str, Enum):
    """Enumeration of the EDTR schema revisions."""

    V1 = "v1"
    V2 = "v2"


_V1_PLUGINS: Final[frozenset[str]] = frozenset(
    {
        "article",
        "articleIntroduction",
        "text",
        "image",
        "rows",
        "table",
        "multimedia",
        "spoiler",
        "injection",
    }
)
_V1_MARKUP: Final[frozenset[str]] = frozenset(
    {"p", "a", "unordered-list", "list-item", "list-item-child", "h", "math"}
)

PLUGIN_TAGS: Final[dict[SchemaRevision, frozenset[str]]] = {
    SchemaRevision.V1: _V1_PLUGINS,
    SchemaRevision.V2: _V1_PLUGINS | {"box"},
}

MARKUP_TAGS: Final[dict[SchemaRevision, frozenset[str]]] = {
    SchemaRevision.V1: _V1_MARKUP,
    SchemaRevision.V2: _V1_MARKUP | {"ordered-list"},
}

# Optional boolean flags on plain text runs, in wire order.
TEXT_FLAGS: Final[dict[SchemaRevision, tuple[str, ...]]] = {
    SchemaRevision.V1: ("strong", "em"),
    SchemaRevision.V2: ("strong", "em", "code"),
}
