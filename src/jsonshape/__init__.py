"""jsonshape: JSON Schema (draft-07) document model and validation engine."""

from jsonshape.engine.adapters import SchemaValidationError, is_valid, validate_or_raise
from jsonshape.engine.formats import FormatRegistry, UnknownFormatError
from jsonshape.engine.validator import InstanceValidator, validate
from jsonshape.models.errors import SchemaIssue, SourceSpan, ValidationError, ValidationResult
from jsonshape.models.json_types import JsonType, StringFormat, deep_equal, json_type_of
from jsonshape.parser.loader import SchemaLoader, SchemaLoadError, load_schema
from jsonshape.schema.document import DRAFT_07, JsonSchemaDocument
from jsonshape.schema.errors import (
    ConstructionErrorKind,
    InvalidKeywordValueError,
    InvalidPatternError,
    SchemaConstructionError,
    TypeConflictError,
    ValueViolatesOwnConstraintError,
)
from jsonshape.schema.linter import SchemaLinter
from jsonshape.schema.nodes import (
    ArraySchema,
    BooleanLiteralSchema,
    BooleanSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    SchemaKind,
    SchemaNode,
    StringSchema,
)
from jsonshape.schema.reader import SchemaReader, read_schema
from jsonshape.settings import Settings, configure_logging, get_settings

__version__ = "0.1.0"

__all__ = [
    "DRAFT_07",
    "ArraySchema",
    "BooleanLiteralSchema",
    "BooleanSchema",
    "ConstructionErrorKind",
    "FormatRegistry",
    "InstanceValidator",
    "InvalidKeywordValueError",
    "InvalidPatternError",
    "JsonSchemaDocument",
    "JsonType",
    "NullSchema",
    "NumberSchema",
    "ObjectSchema",
    "SchemaConstructionError",
    "SchemaIssue",
    "SchemaKind",
    "SchemaLinter",
    "SchemaLoadError",
    "SchemaLoader",
    "SchemaNode",
    "SchemaReader",
    "SchemaValidationError",
    "Settings",
    "SourceSpan",
    "StringFormat",
    "StringSchema",
    "TypeConflictError",
    "UnknownFormatError",
    "ValidationError",
    "ValidationResult",
    "ValueViolatesOwnConstraintError",
    "configure_logging",
    "deep_equal",
    "get_settings",
    "is_valid",
    "json_type_of",
    "load_schema",
    "read_schema",
    "validate",
    "validate_or_raise",
]
