"""Tests for SchemaReader: mapping -> schema node tree."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from jsonshape.engine.validator import validate
from jsonshape.models.json_types import JsonType
from jsonshape.schema.document import DRAFT_07
from jsonshape.schema.errors import (
    InvalidKeywordValueError,
    InvalidPatternError,
    ValueViolatesOwnConstraintError,
)
from jsonshape.schema.nodes import (
    ArraySchema,
    BooleanLiteralSchema,
    NumberSchema,
    ObjectSchema,
    SchemaKind,
    SchemaNode,
    StringSchema,
)
from jsonshape.schema.reader import SchemaReader, read_schema


class TestNodeSelection:
    @pytest.mark.parametrize(
        ("data", "node_cls"),
        [
            ({"type": "string"}, StringSchema),
            ({"type": "number"}, NumberSchema),
            ({"type": "object"}, ObjectSchema),
            ({"type": ["array"]}, ArraySchema),
            ({"type": ["string", "null"]}, SchemaNode),
            ({}, SchemaNode),
        ],
    )
    def test_class_from_type(
        self, reader: SchemaReader, data: dict[str, Any], node_cls: type
    ) -> None:
        assert type(reader.read(data)) is node_cls

    def test_integer_type(self, reader: SchemaReader) -> None:
        node = reader.read({"type": "integer", "minimum": 1})
        assert isinstance(node, NumberSchema)
        assert node.type == (JsonType.INTEGER,)

    def test_boolean_schema(self, reader: SchemaReader) -> None:
        node = reader.read(False)
        assert isinstance(node, BooleanLiteralSchema)
        assert node.kind == SchemaKind.LITERAL

    def test_non_schema_value_rejected(self, reader: SchemaReader) -> None:
        with pytest.raises(InvalidKeywordValueError, match="must be an object or a boolean"):
            reader.read(["string"])


class TestRoundTrip:
    def test_nested_schema_round_trips(self, reader: SchemaReader) -> None:
        data = {
            "type": "object",
            "title": "Order",
            "required": ["id", "lines"],
            "properties": {
                "id": {"type": "string", "pattern": "^ORD-"},
                "lines": {
                    "type": "array",
                    "minItems": 1,
                    "items": {"type": "object", "additionalProperties": False},
                },
                "meta": True,
            },
            "patternProperties": {"^x-": {}},
            "additionalProperties": {"type": "string"},
            "dependencies": {"coupon": ["discount"], "gift": {"required": ["to"]}},
            "allOf": [{"minProperties": 1}],
            "if": {"required": ["express"]},
            "then": {"required": ["phone"]},
            "else": False,
        }
        assert reader.read(data).to_json() == data

    def test_tuple_items_round_trip(self) -> None:
        data = {
            "type": "array",
            "items": [{"type": "string"}, {"type": "number"}],
            "additionalItems": False,
            "contains": {"const": "x"},
        }
        assert read_schema(data).to_json() == data

    def test_read_schema_validates(self) -> None:
        node = read_schema({"type": "string", "enum": ["a", "b"]})
        assert validate(node, "a").valid
        assert not validate(node, "c").valid


class TestIgnoredKeywords:
    def test_unknown_keyword_logged_and_skipped(
        self, reader: SchemaReader, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="jsonshape.reader")
        node = reader.read({"type": "string", "x-vendor": 1})
        assert node.to_json() == {"type": "string"}
        assert "Unknown keyword 'x-vendor'" in caplog.text

    def test_ref_is_unsupported(
        self, reader: SchemaReader, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING, logger="jsonshape.reader")
        node = reader.read({"definitions": {"a": {}}, "$ref": "#/definitions/a"})
        assert node.to_json() == {}
        assert "Unsupported keyword '$ref'" in caplog.text
        assert "Unsupported keyword 'definitions'" in caplog.text

    def test_keyword_of_other_kind_skipped(self, reader: SchemaReader) -> None:
        node = reader.read({"type": "string", "minimum": 3, "maxLength": 4})
        assert node.to_json() == {"type": "string", "maxLength": 4}


class TestConstructionErrors:
    def test_error_located_at_keyword(self, reader: SchemaReader) -> None:
        with pytest.raises(InvalidKeywordValueError) as exc_info:
            reader.read({"properties": {"n": {"type": "number", "multipleOf": 0}}})
        assert exc_info.value.location == "/properties/n/multipleOf"
        assert "at schema location '/properties/n/multipleOf'" in str(exc_info.value)

    def test_pattern_error_located(self, reader: SchemaReader) -> None:
        with pytest.raises(InvalidPatternError) as exc_info:
            reader.read({"items": [{"pattern": "("}]})
        assert exc_info.value.location == "/items/0/pattern"

    def test_default_error_located(self, reader: SchemaReader) -> None:
        with pytest.raises(ValueViolatesOwnConstraintError) as exc_info:
            reader.read({"type": "string", "maxLength": 1, "default": "long"})
        assert exc_info.value.location == "/default"

    def test_unknown_type_located(self, reader: SchemaReader) -> None:
        with pytest.raises(InvalidKeywordValueError, match="Unknown type 'float'") as exc_info:
            reader.read({"properties": {"a": {"type": "float"}}})
        assert exc_info.value.location == "/properties/a/type"


class TestReadDocument:
    def test_document_header(self, reader: SchemaReader) -> None:
        document = reader.read_document(
            {
                "$schema": DRAFT_07,
                "$id": "https://example.com/s.json",
                "$comment": "hand-written",
                "type": "string",
            }
        )
        assert document.id == "https://example.com/s.json"
        assert document.comment == "hand-written"
        assert document.root.to_json() == {"type": "string"}
        assert document.to_json()["$id"] == "https://example.com/s.json"

    def test_default_dialect(self, reader: SchemaReader) -> None:
        assert reader.read_document({}).dialect == DRAFT_07

    def test_boolean_document(self, reader: SchemaReader) -> None:
        assert reader.read_document(True).to_json() is True

    @pytest.mark.parametrize(
        ("data", "location"),
        [
            ({"$schema": 7}, "/$schema"),
            ({"$id": ["https://example.com"]}, "/$id"),
            ({"$comment": None}, "/$comment"),
        ],
    )
    def test_non_string_header_located(
        self, reader: SchemaReader, data: dict[str, Any], location: str
    ) -> None:
        with pytest.raises(InvalidKeywordValueError, match="must be a string") as exc_info:
            reader.read_document(data)
        assert exc_info.value.location == location

    def test_bad_dialect_located(self, reader: SchemaReader) -> None:
        with pytest.raises(InvalidKeywordValueError) as exc_info:
            reader.read_document({"$schema": "draft7"})
        assert exc_info.value.location == "/$schema"
