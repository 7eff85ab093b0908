"""Build schema node trees from JSON-compatible mappings (inverse of ``to_json``)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from jsonshape.models.errors import SourceSpan
from jsonshape.models.json_types import JsonType, describe, is_json_array
from jsonshape.schema.document import DRAFT_07, JsonSchemaDocument
from jsonshape.schema.errors import InvalidKeywordValueError, SchemaConstructionError
from jsonshape.schema.nodes import (
    NODE_CLASSES,
    BooleanLiteralSchema,
    NumberSchema,
    SchemaNode,
    escape_pointer_token,
)

if TYPE_CHECKING:
    from jsonshape.parser.loader import SourceMap

logger = logging.getLogger("jsonshape.reader")

# Keywords holding one sub-schema.
_SCHEMA_KEYWORDS = frozenset({"not", "if", "then", "else", "contains", "propertyNames"})
# Keywords holding a list of sub-schemas.
_SCHEMA_LIST_KEYWORDS = frozenset({"allOf", "anyOf", "oneOf"})
# Keywords holding a name -> sub-schema mapping.
_SCHEMA_MAP_KEYWORDS = frozenset({"properties", "patternProperties"})
# Keywords holding a sub-schema or a boolean kept as-is.
_SCHEMA_OR_FLAG_KEYWORDS = frozenset({"additionalProperties", "additionalItems"})
_UNSUPPORTED = frozenset({"$ref", "definitions", "$defs"})
_DOCUMENT_KEYWORDS = ("$schema", "$id", "$comment")


class SchemaReader:
    """Reads schema mappings into ``SchemaNode`` trees.

    The node class is chosen from a single ``type`` (``integer`` selects a
    number node with the integer type); a list of types or no type gives an
    Any-kind node. Unknown keywords are skipped, ``$ref`` and
    ``definitions`` are not supported and only logged. Construction errors
    are re-raised with the JSON Pointer of the offending keyword and, when a
    source map is given, its position in the source text.
    """

    def __init__(self, source_map: SourceMap | None = None) -> None:
        self._source_map = source_map

    def read(self, data: Any) -> SchemaNode:
        return self._read(data, "")

    def read_document(self, data: Any) -> JsonSchemaDocument:
        """Read a root schema, taking ``$schema``/``$id``/``$comment`` for the document."""
        if isinstance(data, bool) or not isinstance(data, Mapping):
            return JsonSchemaDocument(root=self._read(data, ""))
        for keyword in _DOCUMENT_KEYWORDS:
            value = data.get(keyword)
            if keyword in data and not isinstance(value, str):
                location = f"/{keyword}"
                raise InvalidKeywordValueError(
                    f"'{keyword}' must be a string, got {describe(value)}", keyword
                ).at(location, self._span(location))
        body = {k: v for k, v in data.items() if k not in _DOCUMENT_KEYWORDS}
        root = self._read(body, "")
        try:
            return JsonSchemaDocument(
                root=root,
                id=data.get("$id"),
                dialect=data.get("$schema", DRAFT_07),
                comment=data.get("$comment"),
            )
        except SchemaConstructionError as exc:
            location = f"/{exc.keyword}" if exc.keyword else ""
            raise exc.at(location, self._span(location)) from None

    # -- internals -------------------------------------------------------------

    def _span(self, pointer: str) -> SourceSpan | None:
        if self._source_map is None:
            return None
        return self._source_map.get(pointer)

    def _read(self, data: Any, pointer: str) -> SchemaNode:
        if isinstance(data, bool):
            return BooleanLiteralSchema(data)
        if not isinstance(data, Mapping):
            raise InvalidKeywordValueError(
                f"A schema must be an object or a boolean, got {type(data).__name__}"
            ).at(pointer, self._span(pointer))

        node = self._new_node(data, pointer)
        slots = type(node).keyword_slots()
        for name, raw in data.items():
            location = f"{pointer}/{escape_pointer_token(str(name))}"
            if name in _UNSUPPORTED:
                logger.warning("Unsupported keyword '%s' at '%s' ignored", name, location)
                continue
            if name not in slots:
                logger.debug("Unknown keyword '%s' at '%s' ignored", name, location)
                continue
            if name == "type" and _single_type(raw) is not None:
                continue
            if not node.accepts(slots[name]):
                logger.debug(
                    "Keyword '%s' at '%s' does not apply to %s schemas; ignored",
                    name,
                    location,
                    node.kind.value,
                )
                continue
            value = self._read_value(name, raw, location)
            try:
                setattr(node, slots[name].attr, value)
            except SchemaConstructionError as exc:
                raise exc.at(location, self._span(location)) from None
        return node

    def _new_node(self, data: Mapping[str, Any], pointer: str) -> SchemaNode:
        single = _single_type(data.get("type"))
        if single is None:
            return SchemaNode()
        try:
            json_type = JsonType(single)
        except ValueError:
            raise InvalidKeywordValueError(f"Unknown type '{single}'", "type").at(
                f"{pointer}/type", self._span(f"{pointer}/type")
            ) from None
        if json_type == JsonType.INTEGER:
            return NumberSchema(integer=True)
        return NODE_CLASSES[json_type]()

    def _read_value(self, name: str, raw: Any, location: str) -> Any:
        if name in _SCHEMA_KEYWORDS:
            return self._read(raw, location)
        if name in _SCHEMA_OR_FLAG_KEYWORDS:
            return raw if isinstance(raw, bool) else self._read(raw, location)
        if name in _SCHEMA_LIST_KEYWORDS:
            return self._read_list(raw, location)
        if name in _SCHEMA_MAP_KEYWORDS:
            return self._read_map(raw, location)
        if name == "items":
            if is_json_array(raw):
                return self._read_list(raw, location)
            return self._read(raw, location)
        if name == "dependencies" and isinstance(raw, Mapping):
            return {
                key: value if is_json_array(value) else self._read(value, _join(location, key))
                for key, value in raw.items()
            }
        return raw

    def _read_list(self, raw: Any, location: str) -> Any:
        if not is_json_array(raw):
            return raw
        return [self._read(item, f"{location}/{i}") for i, item in enumerate(raw)]

    def _read_map(self, raw: Any, location: str) -> Any:
        if not isinstance(raw, Mapping):
            return raw
        return {key: self._read(value, _join(location, key)) for key, value in raw.items()}


def _join(pointer: str, key: Any) -> str:
    return f"{pointer}/{escape_pointer_token(str(key))}"


def _single_type(raw: Any) -> str | None:
    if isinstance(raw, str):
        return raw
    if is_json_array(raw) and len(raw) == 1 and isinstance(raw[0], str):
        return raw[0]
    return None


def read_schema(data: Any) -> SchemaNode:
    """Shorthand for ``SchemaReader().read(data)``."""
    return SchemaReader().read(data)
