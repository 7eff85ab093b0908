"""Tests for JSON type classification and structural equality."""

from __future__ import annotations

import pytest

from jsonshape.models.json_types import (
    JsonType,
    deep_equal,
    describe,
    json_type_of,
    matches_type,
)


class TestJsonTypeOf:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, JsonType.NULL),
            (True, JsonType.BOOLEAN),
            (False, JsonType.BOOLEAN),
            (0, JsonType.INTEGER),
            (-7, JsonType.INTEGER),
            (2.0, JsonType.INTEGER),
            (2.5, JsonType.NUMBER),
            ("x", JsonType.STRING),
            ([1, 2], JsonType.ARRAY),
            ((1, 2), JsonType.ARRAY),
            ({"a": 1}, JsonType.OBJECT),
        ],
    )
    def test_classification(self, value: object, expected: JsonType) -> None:
        assert json_type_of(value) == expected

    def test_non_json_value_rejected(self) -> None:
        with pytest.raises(TypeError, match="not a JSON value"):
            json_type_of({1, 2})

    def test_infinity_is_number_not_integer(self) -> None:
        assert json_type_of(float("inf")) == JsonType.NUMBER


class TestMatchesType:
    def test_integer_satisfies_number(self) -> None:
        assert matches_type(3, JsonType.NUMBER)

    def test_integral_float_satisfies_integer(self) -> None:
        assert matches_type(2.0, JsonType.INTEGER)

    def test_fraction_does_not_satisfy_integer(self) -> None:
        assert not matches_type(2.5, JsonType.INTEGER)

    def test_bool_is_not_a_number(self) -> None:
        assert not matches_type(True, JsonType.NUMBER)
        assert not matches_type(False, JsonType.INTEGER)


class TestDeepEqual:
    def test_numbers_compare_by_value(self) -> None:
        assert deep_equal(1, 1.0)

    def test_bool_never_equals_number(self) -> None:
        assert not deep_equal(True, 1)
        assert not deep_equal(0, False)

    def test_arrays_are_ordered(self) -> None:
        assert deep_equal([1, "a"], [1, "a"])
        assert not deep_equal([1, "a"], ["a", 1])
        assert not deep_equal([1], [1, 1])

    def test_objects_ignore_key_order(self) -> None:
        assert deep_equal({"a": 1, "b": [2]}, {"b": [2], "a": 1})

    def test_objects_need_same_keys(self) -> None:
        assert not deep_equal({"a": 1}, {"a": 1, "b": None})

    def test_null_only_equals_null(self) -> None:
        assert deep_equal(None, None)
        assert not deep_equal(None, 0)
        assert not deep_equal(None, "")


def test_describe_falls_back_to_python_type_name() -> None:
    assert describe([1]) == "array"
    assert describe(object()) == "object"
    assert describe(b"x") == "bytes"
