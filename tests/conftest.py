"""Shared test fixtures for jsonshape."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from jsonshape.engine.formats import FormatRegistry
from jsonshape.engine.validator import InstanceValidator
from jsonshape.parser.loader import SchemaLoader
from jsonshape.schema.linter import SchemaLinter
from jsonshape.schema.nodes import (
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    SchemaNode,
    StringSchema,
)
from jsonshape.schema.reader import SchemaReader
from jsonshape.settings import get_settings


@pytest.fixture
def validator() -> InstanceValidator:
    return InstanceValidator()


@pytest.fixture
def reader() -> SchemaReader:
    return SchemaReader()


@pytest.fixture
def loader() -> SchemaLoader:
    return SchemaLoader()


@pytest.fixture
def linter() -> SchemaLinter:
    return SchemaLinter()


@pytest.fixture(autouse=True)
def _restore_formats() -> Iterator[None]:
    """Custom format registrations never leak between tests."""
    yield
    FormatRegistry.reset()


@pytest.fixture
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Clear the cached settings so JSONSHAPE_* env overrides take effect."""
    get_settings.cache_clear()
    yield monkeypatch
    monkeypatch.undo()
    get_settings.cache_clear()


@pytest.fixture
def user_schema() -> ObjectSchema:
    """A closed user object: id, email, optional age and tags."""
    return ObjectSchema(
        properties={
            "id": StringSchema(min_length=1),
            "email": StringSchema(format="email"),
            "age": NumberSchema(integer=True, minimum=0),
            "tags": ArraySchema(items=StringSchema(), unique_items=True),
        },
        required=["id", "email"],
        additional_properties=False,
    )


@pytest.fixture
def tuple_schema() -> ArraySchema:
    """``[string, number, boolean]`` with no extra items allowed."""
    return ArraySchema(
        items=[StringSchema(), NumberSchema(), BooleanSchema()],
        additional_items=False,
    )


@pytest.fixture
def driver_schema() -> ObjectSchema:
    """Adults must carry a driver licence number."""
    return ObjectSchema(
        properties={"age": NumberSchema(integer=True)},
        if_schema=SchemaNode(properties={"age": NumberSchema(minimum=18)}, required=["age"]),
        then_schema=SchemaNode(required=["driverLicense"]),
    )


SAMPLE_SCHEMA_YAML = """\
$schema: "http://json-schema.org/draft-07/schema#"
$id: "https://example.com/schemas/order.json"
title: Order
type: object
required: [orderId, lines]
properties:
  orderId:
    type: string
    pattern: "^ORD-[0-9]{6}$"
  status:
    enum: [open, shipped, cancelled]
    default: open
  lines:
    type: array
    minItems: 1
    items:
      type: object
      required: [sku, quantity]
      properties:
        sku:
          type: string
        quantity:
          type: integer
          minimum: 1
additionalProperties: false
"""

SAMPLE_SCHEMA_JSON = """\
{
  "$schema": "http://json-schema.org/draft-07/schema#",
  "type": "object",
  "properties": {
    "name": {"type": "string", "minLength": 1},
    "price": {"type": "number", "exclusiveMinimum": 0}
  },
  "required": ["name"]
}
"""
