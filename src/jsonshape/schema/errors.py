"""Construction-time errors raised by schema node setters."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from jsonshape.models.errors import SourceSpan


class ConstructionErrorKind(StrEnum):
    TYPE_CONFLICT = "TypeConflict"
    INVALID_KEYWORD_VALUE = "InvalidKeywordValue"
    INVALID_PATTERN = "InvalidPattern"
    VALUE_VIOLATES_OWN_CONSTRAINT = "ValueViolatesOwnConstraint"


class SchemaConstructionError(Exception):
    """Raised when a keyword assignment would leave a schema node inconsistent.

    The node keeps its previous state. ``location`` is filled in by the
    reader with the JSON Pointer of the schema position being built, and
    ``span`` with its source position when the schema came from text.
    """

    kind: ConstructionErrorKind

    def __init__(
        self,
        message: str,
        keyword: str | None = None,
        *,
        location: str | None = None,
        span: SourceSpan | None = None,
    ) -> None:
        self.keyword = keyword
        self.location = location
        self.span = span
        self.reason = message
        super().__init__(message)

    def at(self, location: str, span: SourceSpan | None = None) -> SchemaConstructionError:
        """Attach schema location info (innermost location wins)."""
        if self.location is None:
            self.location = location
            self.span = span
        return self

    def __str__(self) -> str:
        text = self.reason
        if self.location is not None:
            text = f"{text} (at schema location '{self.location}')"
        if self.span is not None:
            text = f"{text} [{self.span.file}:{self.span.line}:{self.span.column}]"
        return text


class TypeConflictError(SchemaConstructionError):
    """Attempted to change a fixed-kind node's type or use another kind's keyword."""

    kind = ConstructionErrorKind.TYPE_CONFLICT


class InvalidKeywordValueError(SchemaConstructionError):
    """Out-of-domain keyword value (negative bound, empty list, bad shape...)."""

    kind = ConstructionErrorKind.INVALID_KEYWORD_VALUE


class InvalidPatternError(SchemaConstructionError):
    """A ``pattern``/``patternProperties`` regex failed to compile."""

    kind = ConstructionErrorKind.INVALID_PATTERN

    def __init__(
        self,
        message: str,
        keyword: str | None = None,
        *,
        pattern: str = "",
        **kwargs: Any,
    ) -> None:
        self.pattern = pattern
        super().__init__(message, keyword, **kwargs)


class ValueViolatesOwnConstraintError(SchemaConstructionError):
    """A default/const/enum value does not satisfy the node's own constraints."""

    kind = ConstructionErrorKind.VALUE_VIOLATES_OWN_CONSTRAINT
