"""Decode EDTR JSON into document trees."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, TypeVar

from pydantic import ValidationError

from edtr.config import EDTR_MAX_DEPTH, EDTR_SCHEMA_REVISION
from edtr.exceptions import (
    AmbiguousTextFragmentError,
    DepthExceededError,
    InvalidValueError,
    MalformedJsonError,
    MissingFieldError,
    PathSegment,
    SchemaError,
    TypeMismatchError,
    UnexpectedFieldError,
    UnknownDiscriminantError,
)
from edtr.revisions import MARKUP_TAGS, PLUGIN_TAGS, TEXT_FLAGS, SchemaRevision
from edtr.schemas import (
    MARKUP_TYPES,
    Article,
    ArticleIntroduction,
    Box,
    EmptyText,
    Image,
    Injection,
    MarkupText,
    Multimedia,
    Node,
    PlainText,
    Reference,
    RelatedContent,
    Rows,
    Source,
    Spoiler,
    Table,
    Text,
    TextFragment,
)
from edtr.schemas.text import EdtrModel

logger = logging.getLogger(__name__)

Path = tuple[PathSegment, ...]
ModelT = TypeVar("ModelT", bound=EdtrModel)


_INVALID_VALUE_ERRORS = frozenset(
    {"greater_than_equal", "greater_than", "less_than_equal", "less_than", "enum", "literal_error"}
)

_JSON_TYPE_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "integer",
    float: "number",
    type(None): "null",
}


@dataclass(frozen=True)
class CodecOptions:
    """Options for decoding.

    Attributes:
        schema_revision: Which variant and optional-field set is recognized.
        max_depth: Deepest allowed nesting of nodes and markup elements; the
            root node sits at depth 1.
    """

    schema_revision: SchemaRevision = field(
        default_factory=lambda: SchemaRevision(EDTR_SCHEMA_REVISION)
    )
    max_depth: int = EDTR_MAX_DEPTH

    def __post_init__(self) -> None:
        # Accept plain strings such as "v1".
        object.__setattr__(self, "schema_revision", SchemaRevision(self.schema_revision))
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)


def decode(data: bytes | bytearray | str, options: CodecOptions | None = None) -> Node:
    """Parse one JSON document into a node tree.

    Args:
        data: The encoded document.
        options: Decoding options. Uses defaults from configuration if None.

    Returns:
        The root node.

    Raises:
        SchemaError: If the input is not JSON or does not match the grammar
            of the selected schema revision. The error carries its kind and
            the path to the offending value.
    """
    opts = options or CodecOptions()
    node = _decode_value(_load_json(data), opts)
    size = len(data.encode("utf-8")) if isinstance(data, str) else len(data)
    logger.debug(
        "Decoded %s document (%d bytes, schema %s)",
        node.plugin,
        size,
        opts.schema_revision.value,
    )
    return node


def from_wire(value: Any, options: CodecOptions | None = None) -> Node:
    """Decode an already parsed JSON value into a node tree."""
    return _decode_value(value, options or CodecOptions())


def _decode_value(value: Any, options: CodecOptions) -> Node:
    try:
        return _Decoder(options).node(value, (), 1)
    except RecursionError as exc:
        raise DepthExceededError(
            f"document nesting exhausted the interpreter stack before reaching max_depth={options.max_depth}"
        ) from exc


def _load_json(data: bytes | bytearray | str) -> Any:
    try:
        return json.loads(data, object_pairs_hook=_object_from_pairs, parse_constant=_reject_constant)
    except RecursionError as exc:
        raise DepthExceededError("document nesting exceeds what the JSON parser can hold") from exc
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        raise MalformedJsonError(f"invalid JSON: {exc}") from exc


class _DuplicateKeyObject(dict):
    """A parsed JSON object in which ``key`` appeared more than once.

    The parser hook has no path, so the duplicate is reported when the
    decoder reaches the object.
    """

    def __init__(self, pairs: list[tuple[str, Any]], key: str) -> None:
        super().__init__(pairs)
        self.key = key


def _object_from_pairs(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    obj = dict(pairs)
    if len(obj) == len(pairs):
        return obj
    seen = set()
    for key, _ in pairs:
        if key in seen:
            return _DuplicateKeyObject(pairs, key)
        seen.add(key)
    return obj


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _json_type(value: Any) -> str:
    if isinstance(value, dict):
        return "object"
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def _expect_object(value: Any, path: Path) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeMismatchError(f"expected object, found {_json_type(value)}", path)
    if isinstance(value, _DuplicateKeyObject):
        raise UnexpectedFieldError(f"duplicate field {value.key!r}", path + (value.key,))
    return value


def _expect_array(value: Any, path: Path) -> list[Any]:
    if not isinstance(value, list):
        raise TypeMismatchError(f"expected array, found {_json_type(value)}", path)
    return value


def _expect_string(value: Any, path: Path) -> str:
    if not isinstance(value, str):
        raise TypeMismatchError(f"expected string, found {_json_type(value)}", path)
    return value


def _wire_fields(model: type[EdtrModel]) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Required and optional wire names of a model's fields, in declaration order."""
    required: list[str] = []
    optional: list[str] = []
    for name, info in model.model_fields.items():
        (required if info.is_required() else optional).append(info.alias or name)
    return tuple(required), tuple(optional)


def _check_fields(
    obj: dict[str, Any],
    path: Path,
    required: Iterable[str],
    optional: Iterable[str] = (),
) -> None:
    """Enforce an exact field set: nothing undeclared, nothing required missing."""
    required = tuple(required)
    allowed = set(required).union(optional)
    for name in obj:
        if name not in allowed:
            raise UnexpectedFieldError(f"unexpected field {name!r}", path + (name,))
    for name in required:
        if name not in obj:
            raise MissingFieldError(f"missing field {name!r}", path + (name,))


def _record(value: Any, path: Path, model: type[EdtrModel]) -> dict[str, Any]:
    """Check that ``value`` is an object holding exactly the wire fields of ``model``."""
    obj = _expect_object(value, path)
    _check_fields(obj, path, *_wire_fields(model))
    return obj


def _build(model: type[ModelT], path: Path, /, **fields: Any) -> ModelT:
    """Construct a model from wire-named fields, translating validation failures."""
    try:
        return model(**fields)
    except ValidationError as exc:
        raise _translate(exc, model, path) from exc


def _translate(exc: ValidationError, model: type[EdtrModel], path: Path) -> SchemaError:
    error = exc.errors(include_url=False)[0]
    loc = error["loc"]
    where = path
    if loc:
        head = loc[0]
        # Bare-array and bare-string payloads have no field name on the wire.
        if head != getattr(model, "inline_field", None):
            info = model.model_fields.get(head)
            where += ((info.alias or head) if info is not None else head,)
        where += tuple(segment for segment in loc[1:] if isinstance(segment, int))
    error_type = error["type"]
    value = error.get("input")
    if error_type == "lone_surrogate":
        return MalformedJsonError(error["msg"], where)
    if error_type == "missing":
        return MissingFieldError(error["msg"], where)
    if error_type == "extra_forbidden":
        return UnexpectedFieldError(error["msg"], where)
    if error_type in _INVALID_VALUE_ERRORS and not (error_type == "enum" and not isinstance(value, str)):
        return InvalidValueError(f"{error['msg']}, found {value!r}", where)
    return TypeMismatchError(f"{error['msg']}, found {_json_type(value)}", where)


def _reference(value: Any, path: Path) -> Reference:
    obj = _record(value, path, Reference)
    return _build(Reference, path, **obj)


def _source(value: Any, path: Path) -> Source:
    obj = _record(value, path, Source)
    return _build(Source, path, **obj)


def _related_content(value: Any, path: Path) -> RelatedContent:
    obj = _record(value, path, RelatedContent)
    lists = {}
    for name in obj:
        items = _expect_array(obj[name], path + (name,))
        lists[name] = [_reference(item, path + (name, index)) for index, item in enumerate(items)]
    return _build(RelatedContent, path, **lists)


class _Decoder:
    """Recursive descent over the parsed JSON value for one decode call."""

    def __init__(self, options: CodecOptions) -> None:
        self._max_depth = options.max_depth
        self._revision = options.schema_revision
        self._text_flags = TEXT_FLAGS[self._revision]
        handlers: dict[str, Callable[[Any, Path, int], Node]] = {
            "article": self._article,
            "articleIntroduction": self._article_introduction,
            "text": self._text,
            "image": self._image,
            "rows": self._rows,
            "table": self._table,
            "multimedia": self._multimedia,
            "spoiler": self._spoiler,
            "injection": self._injection,
            "box": self._box,
        }
        self._plugins = {tag: handlers[tag] for tag in PLUGIN_TAGS[self._revision]}
        allowed_markup = MARKUP_TAGS[self._revision]
        self._markup = {cls.tag: cls for cls in MARKUP_TYPES if cls.tag in allowed_markup}

    def _check_depth(self, path: Path, depth: int) -> None:
        if depth > self._max_depth:
            raise DepthExceededError(f"nesting deeper than {self._max_depth} levels", path)

    # Nodes

    def node(self, value: Any, path: Path, depth: int) -> Node:
        self._check_depth(path, depth)
        envelope = _expect_object(value, path)
        _check_fields(envelope, path, ("plugin", "state"))
        tag = _expect_string(envelope["plugin"], path + ("plugin",))
        handler = self._plugins.get(tag)
        if handler is None:
            raise UnknownDiscriminantError(
                f"unknown plugin {tag!r} for schema revision {self._revision.value}",
                path + ("plugin",),
            )
        return handler(envelope["state"], path + ("state",), depth)

    def _nodes(self, value: Any, path: Path, depth: int) -> list[Node]:
        items = _expect_array(value, path)
        nodes = []
        for index, item in enumerate(items):
            nodes.append(self.node(item, path + (index,), depth))
        return nodes

    def _article(self, state: Any, path: Path, depth: int) -> Article:
        obj = _record(state, path, Article)
        sources = _expect_array(obj["sources"], path + ("sources",))
        return _build(
            Article,
            path,
            introduction=self.node(obj["introduction"], path + ("introduction",), depth + 1),
            content=self.node(obj["content"], path + ("content",), depth + 1),
            exercises=self._nodes(obj["exercises"], path + ("exercises",), depth + 1),
            exerciseFolder=_reference(obj["exerciseFolder"], path + ("exerciseFolder",)),
            relatedContent=_related_content(obj["relatedContent"], path + ("relatedContent",)),
            sources=[_source(item, path + ("sources", index)) for index, item in enumerate(sources)],
        )

    def _explained_multimedia(
        self, model: type[ArticleIntroduction] | type[Multimedia], state: Any, path: Path, depth: int
    ) -> ArticleIntroduction | Multimedia:
        obj = _record(state, path, model)
        return _build(
            model,
            path,
            explanation=self.node(obj["explanation"], path + ("explanation",), depth + 1),
            multimedia=self.node(obj["multimedia"], path + ("multimedia",), depth + 1),
            illustrating=obj["illustrating"],
            width=obj["width"],
        )

    def _article_introduction(self, state: Any, path: Path, depth: int) -> ArticleIntroduction:
        return self._explained_multimedia(ArticleIntroduction, state, path, depth)

    def _multimedia(self, state: Any, path: Path, depth: int) -> Multimedia:
        return self._explained_multimedia(Multimedia, state, path, depth)

    def _text(self, state: Any, path: Path, depth: int) -> Text:
        return _build(Text, path, fragments=self._fragments(state, path, depth + 1))

    def _image(self, state: Any, path: Path, depth: int) -> Image:
        obj = _record(state, path, Image)
        return _build(
            Image,
            path,
            src=obj["src"],
            alt=obj.get("alt"),
            caption=self.node(obj["caption"], path + ("caption",), depth + 1),
        )

    def _rows(self, state: Any, path: Path, depth: int) -> Rows:
        return _build(Rows, path, children=self._nodes(state, path, depth + 1))

    def _table(self, state: Any, path: Path, depth: int) -> Table:
        return _build(Table, path, raw=_expect_string(state, path))

    def _spoiler(self, state: Any, path: Path, depth: int) -> Spoiler:
        obj = _record(state, path, Spoiler)
        return _build(
            Spoiler,
            path,
            title=obj["title"],
            content=self.node(obj["content"], path + ("content",), depth + 1),
        )

    def _injection(self, state: Any, path: Path, depth: int) -> Injection:
        return _build(Injection, path, reference=_expect_string(state, path))

    def _box(self, state: Any, path: Path, depth: int) -> Box:
        obj = _record(state, path, Box)
        return _build(
            Box,
            path,
            type=_expect_string(obj["type"], path + ("type",)),
            title=self.node(obj["title"], path + ("title",), depth + 1),
            anchorId=obj["anchorId"],
            content=self.node(obj["content"], path + ("content",), depth + 1),
        )

    # Text fragments

    def _fragments(self, value: Any, path: Path, depth: int) -> list[TextFragment]:
        items = _expect_array(value, path)
        fragments = []
        for index, item in enumerate(items):
            fragments.append(self._fragment(item, path + (index,), depth))
        return fragments

    def _fragment(self, value: Any, path: Path, depth: int) -> TextFragment:
        """Decode one fragment, trying its shapes in a fixed order.

        1. ``{}`` is the empty marker.
        2. Without ``type`` but with ``text`` it is a plain run.
        3. With both ``type`` and ``text`` it is ambiguous.
        4. With ``type`` it is a markup element.
        5. Anything else matches no shape.
        """
        obj = _expect_object(value, path)
        if not obj:
            return EmptyText()
        has_type = "type" in obj
        has_text = "text" in obj
        if has_text and not has_type:
            _check_fields(obj, path, ("text",), self._text_flags)
            return _build(PlainText, path, **obj)
        if has_text:
            raise AmbiguousTextFragmentError(
                "fragment has both 'type' and 'text' fields", path
            )
        if has_type:
            return self._markup_element(obj, path, depth)
        raise AmbiguousTextFragmentError(
            f"fragment matches no known shape (fields: {', '.join(sorted(obj))})", path
        )

    def _markup_element(self, obj: dict[str, Any], path: Path, depth: int) -> MarkupText:
        self._check_depth(path, depth)
        tag = _expect_string(obj["type"], path + ("type",))
        model = self._markup.get(tag)
        if model is None:
            raise UnknownDiscriminantError(
                f"unknown markup type {tag!r} for schema revision {self._revision.value}",
                path + ("type",),
            )
        names, _ = _wire_fields(model)
        _check_fields(obj, path, ("type", *names))
        fields = {name: obj[name] for name in names if name != "children"}
        children = self._fragments(obj["children"], path + ("children",), depth + 1)
        return _build(model, path, children=children, **fields)
