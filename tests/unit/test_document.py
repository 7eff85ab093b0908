"""Tests for JsonSchemaDocument."""

from __future__ import annotations

import pytest

from jsonshape.schema.document import DRAFT_07, JsonSchemaDocument
from jsonshape.schema.errors import InvalidKeywordValueError
from jsonshape.schema.nodes import (
    BooleanLiteralSchema,
    ObjectSchema,
    StringSchema,
)


class TestJsonSchemaDocument:
    def test_to_json_adds_header(self) -> None:
        document = JsonSchemaDocument(
            root=ObjectSchema(required=["a"]),
            id="https://example.com/a.json",
            comment="generated",
        )
        assert document.to_json() == {
            "$schema": DRAFT_07,
            "$id": "https://example.com/a.json",
            "$comment": "generated",
            "type": "object",
            "required": ["a"],
        }

    def test_optional_header_fields_omitted(self) -> None:
        document = JsonSchemaDocument(root=StringSchema())
        assert document.to_json() == {"$schema": DRAFT_07, "type": "string"}

    def test_boolean_root_projects_to_bool(self) -> None:
        assert JsonSchemaDocument(root=BooleanLiteralSchema(False)).to_json() is False

    def test_validate_delegates_at_root(self) -> None:
        document = JsonSchemaDocument(root=ObjectSchema(required=["a"]))
        assert document.validate({"a": 1}).valid
        result = document.validate({})
        assert result.errors[0].path == ""
        assert result.errors[0].keyword == "required"

    def test_document_owns_root(self) -> None:
        root = StringSchema()
        document = JsonSchemaDocument(root=root)
        assert root.owner is document
        with pytest.raises(InvalidKeywordValueError, match="already attached"):
            ObjectSchema(properties={"a": root})

    def test_owned_node_cannot_become_root(self) -> None:
        child = StringSchema()
        ObjectSchema(properties={"a": child})
        with pytest.raises(InvalidKeywordValueError, match="already attached"):
            JsonSchemaDocument(root=child)

    def test_release_frees_root(self) -> None:
        root = StringSchema()
        document = JsonSchemaDocument(root=root)
        assert document.release() is root
        assert root.owner is None

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(InvalidKeywordValueError, match="must not be empty"):
            JsonSchemaDocument(root=StringSchema(), id="")

    def test_dialect_must_be_absolute(self) -> None:
        with pytest.raises(InvalidKeywordValueError, match="absolute URI"):
            JsonSchemaDocument(root=StringSchema(), dialect="draft-07")

    def test_custom_dialect_kept(self) -> None:
        document = JsonSchemaDocument(root=StringSchema(), dialect="https://example.com/meta")
        assert document.to_json()["$schema"] == "https://example.com/meta"
