"""Custom exceptions for edtr."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Iterable

PathSegment = str | int


class ErrorKind(str, Enum):
    """Kinds of decode failure."""

    MALFORMED_JSON = "MalformedJson"
    UNKNOWN_DISCRIMINANT = "UnknownDiscriminant"
    MISSING_FIELD = "MissingField"
    UNEXPECTED_FIELD = "UnexpectedField"
    TYPE_MISMATCH = "TypeMismatch"
    INVALID_VALUE = "InvalidValue"
    DEPTH_EXCEEDED = "DepthExceeded"
    AMBIGUOUS_TEXT_FRAGMENT = "AmbiguousTextFragment"


def format_path(path: Iterable[PathSegment]) -> str:
    """Render a field path as a JSON Pointer (RFC 6901)."""
    parts = [str(segment).replace("~", "~0").replace("/", "~1") for segment in path]
    return "".join(f"/{part}" for part in parts)


class EdtrError(Exception):
    """Base exception for edtr operations."""


class SchemaError(EdtrError):
    """A document does not conform to the EDTR grammar.

    Attributes:
        kind: Which rule was violated.
        path: Field names and list indices leading from the root to the
            offending value.
        message: Human readable description without the location.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, path: Iterable[PathSegment] = ()) -> None:
        self.message = message
        self.path: tuple[PathSegment, ...] = tuple(path)
        location = format_path(self.path) or "document root"
        super().__init__(f"{message} (at {location})")


class MalformedJsonError(SchemaError):
    """Input is not valid JSON."""

    kind = ErrorKind.MALFORMED_JSON


class UnknownDiscriminantError(SchemaError):
    """Tag not recognized for the active schema revision."""

    kind = ErrorKind.UNKNOWN_DISCRIMINANT


class MissingFieldError(SchemaError):
    """A required field is absent."""

    kind = ErrorKind.MISSING_FIELD


class UnexpectedFieldError(SchemaError):
    """A field is present that the schema does not declare."""

    kind = ErrorKind.UNEXPECTED_FIELD


class TypeMismatchError(SchemaError):
    """A field is present but has the wrong JSON type."""

    kind = ErrorKind.TYPE_MISMATCH


class InvalidValueError(SchemaError):
    """A field has the right type but an out-of-range value."""

    kind = ErrorKind.INVALID_VALUE


class DepthExceededError(SchemaError):
    """Nesting exceeds the configured depth bound."""

    kind = ErrorKind.DEPTH_EXCEEDED


class AmbiguousTextFragmentError(SchemaError):
    """A text fragment matches none, or more than one, of its shapes."""

    kind = ErrorKind.AMBIGUOUS_TEXT_FRAGMENT
