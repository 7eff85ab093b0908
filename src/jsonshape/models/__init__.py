"""Value models shared by the schema model and the validation engine."""

from jsonshape.models.errors import SchemaIssue, SourceSpan, ValidationError, ValidationResult
from jsonshape.models.json_types import (
    JsonType,
    StringFormat,
    deep_equal,
    json_type_of,
    matches_type,
)

__all__ = [
    "JsonType",
    "SchemaIssue",
    "SourceSpan",
    "StringFormat",
    "ValidationError",
    "ValidationResult",
    "deep_equal",
    "json_type_of",
    "matches_type",
]
