"""Schema text loading with source positions for error reporting."""

from jsonshape.parser.loader import SchemaLoader, SchemaLoadError, SourceMap, load_schema

__all__ = [
    "SchemaLoadError",
    "SchemaLoader",
    "SourceMap",
    "load_schema",
]
