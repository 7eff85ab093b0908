"""Validation engine: match a JSON value against a schema node tree."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from fractions import Fraction
from typing import Any

from jsonshape.engine.formats import FormatRegistry
from jsonshape.engine.patterns import pattern_matches
from jsonshape.models.errors import ValidationError, ValidationResult
from jsonshape.models.json_types import (
    JsonType,
    deep_equal,
    json_type_of,
    matches_type,
)
from jsonshape.schema.nodes import (
    BooleanLiteralSchema,
    SchemaKind,
    SchemaNode,
    escape_pointer_token,
    thaw,
)
from jsonshape.settings import Settings, get_settings

logger = logging.getLogger("jsonshape.engine")

_GROUP_BY_TYPE: dict[JsonType, SchemaKind] = {
    JsonType.STRING: SchemaKind.STRING,
    JsonType.NUMBER: SchemaKind.NUMBER,
    JsonType.INTEGER: SchemaKind.NUMBER,
    JsonType.OBJECT: SchemaKind.OBJECT,
    JsonType.ARRAY: SchemaKind.ARRAY,
}


def child_path(path: str, token: str | int) -> str:
    """Extend a JSON Pointer by one reference token."""
    return f"{path}/{escape_pointer_token(str(token))}"


class InstanceValidator:
    """Validates JSON instances against schema nodes.

    Per node the checks run in a fixed order: declared type, const/enum,
    kind-specific keywords (only when the type check passed), composition,
    then the conditional. Errors from every step are accumulated; nothing
    short-circuits except the kind-specific step.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self._epsilon = settings.multiple_of_epsilon

    def validate(self, node: SchemaNode, value: Any, path: str = "") -> ValidationResult:
        return ValidationResult(errors=self._check(node, value, path))

    def _check(self, node: SchemaNode, value: Any, path: str) -> list[ValidationError]:
        if isinstance(node, BooleanLiteralSchema):
            if node.verdict:
                return []
            return [
                ValidationError(
                    path=path,
                    keyword="false",
                    message="Schema 'false' does not allow any value",
                    expected=False,
                )
            ]

        keywords = node.keywords
        errors: list[ValidationError] = []

        type_errors = self._check_type(keywords, value, path)
        errors.extend(type_errors)
        errors.extend(self._check_const_enum(keywords, value, path))
        if not type_errors:
            group = node.kind
            if group == SchemaKind.ANY:
                group = _GROUP_BY_TYPE.get(json_type_of(value), SchemaKind.ANY)
            if group == SchemaKind.STRING:
                errors.extend(self._check_string(keywords, value, path))
            elif group == SchemaKind.NUMBER:
                errors.extend(self._check_number(keywords, value, path))
            elif group == SchemaKind.OBJECT:
                errors.extend(self._check_object(keywords, value, path))
            elif group == SchemaKind.ARRAY:
                errors.extend(self._check_array(keywords, value, path))
        errors.extend(self._check_composition(keywords, value, path))
        errors.extend(self._check_conditional(keywords, value, path))
        return errors

    def _matches(self, node: SchemaNode, value: Any, path: str) -> bool:
        return not self._check(node, value, path)

    # -- generic -------------------------------------------------------------

    def _check_type(
        self, keywords: Mapping[str, Any], value: Any, path: str
    ) -> list[ValidationError]:
        types = keywords.get("type")
        if not types or any(matches_type(value, t) for t in types):
            return []
        names = [t.value for t in types]
        expected = names[0] if len(names) == 1 else names
        actual = json_type_of(value).value
        return [
            ValidationError(
                path=path,
                keyword="type",
                message=f"Expected {' or '.join(names)} but got {actual}",
                expected=expected,
                actual=actual,
            )
        ]

    def _check_const_enum(
        self, keywords: Mapping[str, Any], value: Any, path: str
    ) -> list[ValidationError]:
        errors: list[ValidationError] = []
        if "const" in keywords and not deep_equal(value, keywords["const"]):
            const = thaw(keywords["const"])
            errors.append(
                ValidationError(
                    path=path,
                    keyword="const",
                    message=f"Value must be equal to: {const!r}",
                    expected=const,
                    actual=value,
                )
            )
        if "enum" in keywords and not any(deep_equal(value, m) for m in keywords["enum"]):
            members = thaw(keywords["enum"])
            errors.append(
                ValidationError(
                    path=path,
                    keyword="enum",
                    message=f"Value must be one of: {members!r}",
                    expected=members,
                    actual=value,
                )
            )
        return errors

    # -- kind-specific -------------------------------------------------------

    def _check_string(
        self, keywords: Mapping[str, Any], value: str, path: str
    ) -> list[ValidationError]:
        errors: list[ValidationError] = []
        length = len(value)

        min_length = keywords.get("minLength")
        if min_length is not None and length < min_length:
            errors.append(
                ValidationError(
                    path=path,
                    keyword="minLength",
                    message=f"String length {length} is less than minimum length {min_length}",
                    expected=min_length,
                    actual=length,
                )
            )
        max_length = keywords.get("maxLength")
        if max_length is not None and length > max_length:
            errors.append(
                ValidationError(
                    path=path,
                    keyword="maxLength",
                    message=f"String length {length} exceeds maximum length {max_length}",
                    expected=max_length,
                    actual=length,
                )
            )

        pattern = keywords.get("pattern")
        if pattern is not None and not pattern_matches(pattern, value):
            errors.append(
                ValidationError(
                    path=path,
                    keyword="pattern",
                    message=f"String does not match pattern: {pattern}",
                    expected=pattern,
                    actual=value,
                )
            )

        fmt = keywords.get("format")
        if fmt is not None:
            predicate = FormatRegistry.lookup(fmt)
            if predicate is None:
                logger.debug("Ignoring unknown format '%s' at '%s'", fmt, path)
            elif not predicate(value):
                errors.append(
                    ValidationError(
                        path=path,
                        keyword="format",
                        message=f"Invalid {fmt} format: '{value}'",
                        expected=fmt,
                        actual=value,
                    )
                )
        return errors

    def _check_number(
        self, keywords: Mapping[str, Any], value: int | float, path: str
    ) -> list[ValidationError]:
        errors: list[ValidationError] = []

        minimum = keywords.get("minimum")
        if minimum is not None and value < minimum:
            errors.append(
                ValidationError(
                    path=path,
                    keyword="minimum",
                    message=f"Value {value} must be greater than or equal to {minimum}",
                    expected=minimum,
                    actual=value,
                )
            )
        maximum = keywords.get("maximum")
        if maximum is not None and value > maximum:
            errors.append(
                ValidationError(
                    path=path,
                    keyword="maximum",
                    message=f"Value {value} must be less than or equal to {maximum}",
                    expected=maximum,
                    actual=value,
                )
            )
        exclusive_minimum = keywords.get("exclusiveMinimum")
        if exclusive_minimum is not None and value <= exclusive_minimum:
            errors.append(
                ValidationError(
                    path=path,
                    keyword="exclusiveMinimum",
                    message=f"Value {value} must be greater than {exclusive_minimum}",
                    expected=exclusive_minimum,
                    actual=value,
                )
            )
        exclusive_maximum = keywords.get("exclusiveMaximum")
        if exclusive_maximum is not None and value >= exclusive_maximum:
            errors.append(
                ValidationError(
                    path=path,
                    keyword="exclusiveMaximum",
                    message=f"Value {value} must be less than {exclusive_maximum}",
                    expected=exclusive_maximum,
                    actual=value,
                )
            )

        divisor = keywords.get("multipleOf")
        if divisor is not None and not self._is_multiple(value, divisor):
            errors.append(
                ValidationError(
                    path=path,
                    keyword="multipleOf",
                    message=f"Value {value} must be a multiple of {divisor}",
                    expected=divisor,
                    actual=value,
                )
            )
        return errors

    def _is_multiple(self, value: int | float, divisor: int | float) -> bool:
        if isinstance(value, int) and isinstance(divisor, int):
            return value % divisor == 0
        if isinstance(value, float) and not math.isfinite(value):
            return False
        try:
            quotient = value / divisor
        except OverflowError:
            quotient = math.inf
        if not math.isfinite(quotient):
            # Beyond float range: decide exactly on rationals.
            return Fraction(value) % Fraction(divisor) == 0
        return abs(quotient - round(quotient)) <= self._epsilon

    def _check_object(
        self, keywords: Mapping[str, Any], obj: Mapping[str, Any], path: str
    ) -> list[ValidationError]:
        errors: list[ValidationError] = []

        for name in keywords.get("required", ()):
            if name not in obj:
                errors.append(
                    ValidationError(
                        path=path,
                        keyword="required",
                        message=f'Required property "{name}" is missing',
                        expected=name,
                    )
                )

        count = len(obj)
        min_properties = keywords.get("minProperties")
        if min_properties is not None and count < min_properties:
            errors.append(
                ValidationError(
                    path=path,
                    keyword="minProperties",
                    message=(
                        f"Object has {count} properties, which is less than "
                        f"the required minimum of {min_properties}"
                    ),
                    expected=min_properties,
                    actual=count,
                )
            )
        max_properties = keywords.get("maxProperties")
        if max_properties is not None and count > max_properties:
            errors.append(
                ValidationError(
                    path=path,
                    keyword="maxProperties",
                    message=(
                        f"Object has {count} properties, which exceeds "
                        f"the maximum of {max_properties}"
                    ),
                    expected=max_properties,
                    actual=count,
                )
            )

        properties: Mapping[str, SchemaNode] = keywords.get("properties", {})
        pattern_properties: Mapping[str, SchemaNode] = keywords.get("patternProperties", {})
        additional = keywords.get("additionalProperties")
        for key, item in obj.items():
            key_path = child_path(path, key)
            if key in properties:
                errors.extend(self._check(properties[key], item, key_path))
                continue
            matched = False
            for source, schema in pattern_properties.items():
                if pattern_matches(source, key):
                    matched = True
                    errors.extend(self._check(schema, item, key_path))
            if matched or additional is None or additional is True:
                continue
            if additional is False:
                errors.append(
                    ValidationError(
                        path=key_path,
                        keyword="additionalProperties",
                        message=f'Additional property "{key}" is not allowed',
                        expected=False,
                        actual=key,
                    )
                )
            else:
                errors.extend(self._check(additional, item, key_path))

        property_names = keywords.get("propertyNames")
        if property_names is not None:
            for key in obj:
                key_path = child_path(path, key)
                name_errors = self._check(property_names, key, key_path)
                if name_errors:
                    errors.append(
                        ValidationError(
                            path=key_path,
                            keyword="propertyNames",
                            message=f'Property name "{key}" is not valid',
                            actual=key,
                            details=name_errors,
                        )
                    )

        for trigger, dependency in keywords.get("dependencies", {}).items():
            if trigger not in obj:
                continue
            if isinstance(dependency, SchemaNode):
                errors.extend(self._check(dependency, obj, path))
                continue
            for name in dependency:
                if name not in obj:
                    errors.append(
                        ValidationError(
                            path=path,
                            keyword="dependencies",
                            message=(
                                f'Property "{name}" is required when property '
                                f'"{trigger}" is present'
                            ),
                            expected=name,
                            actual=trigger,
                        )
                    )
        return errors

    def _check_array(
        self, keywords: Mapping[str, Any], array: Sequence[Any], path: str
    ) -> list[ValidationError]:
        errors: list[ValidationError] = []
        count = len(array)

        min_items = keywords.get("minItems")
        if min_items is not None and count < min_items:
            errors.append(
                ValidationError(
                    path=path,
                    keyword="minItems",
                    message=f"Array length {count} is less than minimum length {min_items}",
                    expected=min_items,
                    actual=count,
                )
            )
        max_items = keywords.get("maxItems")
        if max_items is not None and count > max_items:
            errors.append(
                ValidationError(
                    path=path,
                    keyword="maxItems",
                    message=f"Array length {count} exceeds maximum length {max_items}",
                    expected=max_items,
                    actual=count,
                )
            )

        if keywords.get("uniqueItems"):
            duplicate = _first_duplicate(array)
            if duplicate is not None:
                first, second = duplicate
                errors.append(
                    ValidationError(
                        path=child_path(path, second),
                        keyword="uniqueItems",
                        message=f"Array items at positions {first} and {second} are duplicates",
                        expected=first,
                        actual=second,
                    )
                )

        items = keywords.get("items")
        if isinstance(items, SchemaNode):
            for i, item in enumerate(array):
                errors.extend(self._check(items, item, child_path(path, i)))
        elif isinstance(items, tuple):
            for i, (schema, item) in enumerate(zip(items, array)):
                errors.extend(self._check(schema, item, child_path(path, i)))
            additional = keywords.get("additionalItems")
            if count > len(items) and additional is False:
                errors.append(
                    ValidationError(
                        path=child_path(path, len(items)),
                        keyword="additionalItems",
                        message=(
                            f"Array has {count} items but the schema only allows "
                            f"{len(items)}"
                        ),
                        expected=len(items),
                        actual=count,
                    )
                )
            elif isinstance(additional, SchemaNode):
                for i in range(len(items), count):
                    errors.extend(self._check(additional, array[i], child_path(path, i)))

        contains = keywords.get("contains")
        if contains is not None and not any(
            self._matches(contains, item, child_path(path, i)) for i, item in enumerate(array)
        ):
            errors.append(
                ValidationError(
                    path=path,
                    keyword="contains",
                    message="Array does not contain any items matching the schema",
                )
            )
        return errors

    # -- composition & conditionals -----------------------------------------

    def _check_composition(
        self, keywords: Mapping[str, Any], value: Any, path: str
    ) -> list[ValidationError]:
        errors: list[ValidationError] = []

        for branch in keywords.get("allOf", ()):
            errors.extend(self._check(branch, value, path))

        any_of = keywords.get("anyOf")
        if any_of is not None:
            branch_errors = [self._check(branch, value, path) for branch in any_of]
            if all(branch_errors):
                errors.append(
                    ValidationError(
                        path=path,
                        keyword="anyOf",
                        message="Value does not match any of the anyOf schemas",
                        details=[e for branch in branch_errors for e in branch],
                    )
                )

        one_of = keywords.get("oneOf")
        if one_of is not None:
            branch_errors = [self._check(branch, value, path) for branch in one_of]
            matching = [i for i, branch in enumerate(branch_errors) if not branch]
            if not matching:
                errors.append(
                    ValidationError(
                        path=path,
                        keyword="oneOf",
                        message="Value must match exactly one oneOf schema (no match)",
                        expected=1,
                        actual=0,
                        details=[e for branch in branch_errors for e in branch],
                    )
                )
            elif len(matching) > 1:
                errors.append(
                    ValidationError(
                        path=path,
                        keyword="oneOf",
                        message=(
                            "Value must match exactly one oneOf schema "
                            f"(multiple matches: {matching})"
                        ),
                        expected=1,
                        actual=matching,
                    )
                )

        not_schema = keywords.get("not")
        if not_schema is not None and self._matches(not_schema, value, path):
            errors.append(
                ValidationError(
                    path=path,
                    keyword="not",
                    message="Value must not match the 'not' schema",
                )
            )
        return errors

    def _check_conditional(
        self, keywords: Mapping[str, Any], value: Any, path: str
    ) -> list[ValidationError]:
        condition = keywords.get("if")
        if condition is None:
            return []
        matched = self._matches(condition, value, path)
        branch = keywords.get("then") if matched else keywords.get("else")
        if branch is None:
            return []
        return self._check(branch, value, path)


def _first_duplicate(array: Sequence[Any]) -> tuple[int, int] | None:
    for second in range(1, len(array)):
        for first in range(second):
            if deep_equal(array[first], array[second]):
                return first, second
    return None


def validate(node: SchemaNode, value: Any, path: str = "") -> ValidationResult:
    """Validate ``value`` against ``node``; ``path`` is the root JSON Pointer."""
    return InstanceValidator().validate(node, value, path)


