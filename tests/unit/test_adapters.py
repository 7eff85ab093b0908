"""Tests for the boolean and raising validation adapters."""

from __future__ import annotations

import pytest

from jsonshape.engine.adapters import SchemaValidationError, is_valid, validate_or_raise
from jsonshape.schema.nodes import ObjectSchema, StringSchema


class TestIsValid:
    def test_true_and_false(self, user_schema: ObjectSchema) -> None:
        assert is_valid(user_schema, {"id": "u1", "email": "a@example.org"})
        assert not is_valid(user_schema, {"id": "u1"})


class TestValidateOrRaise:
    def test_valid_instance_returns_none(self) -> None:
        assert validate_or_raise(StringSchema(max_length=3), "abc") is None

    def test_raises_with_all_errors(self) -> None:
        node = ObjectSchema(required=["a", "b"])
        with pytest.raises(SchemaValidationError, match='Required property "a"') as exc_info:
            validate_or_raise(node, {})
        assert [e.keyword for e in exc_info.value.errors] == ["required", "required"]

    def test_first_error_only(self) -> None:
        node = ObjectSchema(required=["a", "b"])
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_or_raise(node, {}, all_errors=False)
        assert len(exc_info.value.errors) == 1

    def test_summary_is_truncated(self) -> None:
        node = ObjectSchema(required=["a", "b", "c", "d", "e"])
        with pytest.raises(SchemaValidationError, match=r"\.\.\. and 2 more"):
            validate_or_raise(node, {})

    def test_path_prefix(self) -> None:
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_or_raise(StringSchema(), 1, path="/payload")
        assert exc_info.value.errors[0].path == "/payload"
