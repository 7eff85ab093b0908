"""JSON value typing: the seven draft-07 type names and deep equality."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Any


class JsonType(StrEnum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"


class StringFormat(StrEnum):
    """Standard ``format`` names from draft-07 plus the common extras."""

    DATE_TIME = "date-time"
    DATE = "date"
    TIME = "time"
    DURATION = "duration"
    EMAIL = "email"
    IDN_EMAIL = "idn-email"
    HOSTNAME = "hostname"
    IDN_HOSTNAME = "idn-hostname"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    URI = "uri"
    URI_REFERENCE = "uri-reference"
    IRI = "iri"
    IRI_REFERENCE = "iri-reference"
    URI_TEMPLATE = "uri-template"
    UUID = "uuid"
    JSON_POINTER = "json-pointer"
    RELATIVE_JSON_POINTER = "relative-json-pointer"
    REGEX = "regex"
    JSON = "json"


def is_json_number(value: Any) -> bool:
    """True for int/float values that are not bools (bool subclasses int)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_json_array(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def json_type_of(value: Any) -> JsonType:
    """Return the most specific JSON type of ``value``.

    Integral floats (``2.0``) classify as ``integer``. Raises ``TypeError``
    for values that cannot appear in a parsed JSON document.
    """
    if value is None:
        return JsonType.NULL
    if isinstance(value, bool):
        return JsonType.BOOLEAN
    if isinstance(value, int):
        return JsonType.INTEGER
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return JsonType.INTEGER
        return JsonType.NUMBER
    if isinstance(value, str):
        return JsonType.STRING
    if isinstance(value, Mapping):
        return JsonType.OBJECT
    if is_json_array(value):
        return JsonType.ARRAY
    raise TypeError(f"{type(value).__name__} is not a JSON value")


def matches_type(value: Any, json_type: JsonType) -> bool:
    """Check ``value`` against a single declared type (integer ⊂ number)."""
    actual = json_type_of(value)
    if actual == json_type:
        return True
    return json_type == JsonType.NUMBER and actual == JsonType.INTEGER


def deep_equal(a: Any, b: Any) -> bool:
    """Structural JSON equality.

    Numbers compare by value regardless of int/float representation, but a
    bool never equals a number. Mapping comparison ignores key order.
    """
    if is_json_number(a) and is_json_number(b):
        return a == b
    type_a = json_type_of(a)
    type_b = json_type_of(b)
    if type_a != type_b:
        return False
    if type_a == JsonType.ARRAY:
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))
    if type_a == JsonType.OBJECT:
        if a.keys() != b.keys():
            return False
        return all(deep_equal(a[key], b[key]) for key in a)
    return a == b


def describe(value: Any) -> str:
    """Short JSON type name of a value for messages."""
    try:
        return json_type_of(value).value
    except TypeError:
        return type(value).__name__
