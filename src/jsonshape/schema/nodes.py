"""Self-validating schema nodes.

Every keyword is a ``Keyword`` descriptor. Assigning one builds a candidate
keyword snapshot, checks it (kind, value domain, bound ordering, and the
node's own ``default``/``const``/``enum`` against the new constraint set) and
only then replaces the node's snapshot, so a failed assignment leaves the
node untouched.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterator, Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Any, ClassVar
from urllib.parse import urlsplit

from jsonshape.engine.patterns import compile_pattern
from jsonshape.models.json_types import (
    JsonType,
    deep_equal,
    describe,
    is_json_array,
    is_json_number,
    json_type_of,
)
from jsonshape.schema.errors import (
    InvalidKeywordValueError,
    InvalidPatternError,
    TypeConflictError,
    ValueViolatesOwnConstraintError,
)


class SchemaKind(StrEnum):
    ANY = "any"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    OBJECT = "object"
    ARRAY = "array"
    LITERAL = "literal"


class KeywordGroup(StrEnum):
    GENERIC = "generic"
    STRING = "string"
    NUMBER = "number"
    OBJECT = "object"
    ARRAY = "array"


# Keywords that do not take part in the self-consistency check.
_SELF_CHECK_EXCLUDED = frozenset(
    {"default", "examples", "allOf", "anyOf", "oneOf", "not", "if", "then", "else"}
)
_OWN_VALUE_KEYWORDS = ("const", "enum", "default")
_SIBLING_VALUE_KEYWORD = {"const": "enum", "enum": "const"}
_BOUND_PAIRS = (
    ("minLength", "maxLength"),
    ("minimum", "maximum"),
    ("minItems", "maxItems"),
    ("minProperties", "maxProperties"),
)
_CONTENT_ENCODINGS = ("7bit", "8bit", "binary", "quoted-printable", "base16", "base32", "base64")
_MEDIA_TYPE_RE = re.compile(r"^[\w.+-]+/[\w.+-]+(\s*;.*)?$")

Coercer = Callable[["SchemaNode", str, Any], Any]


# ---------------------------------------------------------------------------
# JSON value snapshots
# ---------------------------------------------------------------------------


def _freeze(value: Any, keyword: str) -> Any:
    """Copy a JSON value into an immutable snapshot (tuples / read-only maps)."""
    try:
        json_type = json_type_of(value)
    except TypeError as exc:
        raise InvalidKeywordValueError(f"'{keyword}' must be a JSON value: {exc}", keyword) from exc
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidKeywordValueError(f"'{keyword}' must not contain NaN or infinity", keyword)
    if json_type == JsonType.ARRAY:
        return tuple(_freeze(item, keyword) for item in value)
    if json_type == JsonType.OBJECT:
        frozen: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise InvalidKeywordValueError(
                    f"'{keyword}' object keys must be strings, got {key!r}", keyword
                )
            frozen[key] = _freeze(item, keyword)
        return MappingProxyType(frozen)
    return value


def thaw(value: Any) -> Any:
    """Inverse of ``_freeze``: plain lists and dicts."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if is_json_array(value):
        return [thaw(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# Keyword value coercers
# ---------------------------------------------------------------------------


def _text(node: SchemaNode, keyword: str, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidKeywordValueError(
            f"'{keyword}' must be a string, got {describe(value)}", keyword
        )
    return value


def _uri(node: SchemaNode, keyword: str, value: Any) -> str:
    text = _text(node, keyword, value)
    if not text:
        raise InvalidKeywordValueError(f"'{keyword}' must not be empty", keyword)
    try:
        urlsplit(text)
    except ValueError as exc:
        raise InvalidKeywordValueError(
            f"'{keyword}' is not a URI reference: {exc}", keyword
        ) from exc
    return text


def _flag(node: SchemaNode, keyword: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise InvalidKeywordValueError(
            f"'{keyword}' must be a boolean, got {describe(value)}", keyword
        )
    return value


def _content_encoding(node: SchemaNode, keyword: str, value: Any) -> str:
    text = _text(node, keyword, value)
    if text.lower() not in _CONTENT_ENCODINGS:
        raise InvalidKeywordValueError(
            f"Invalid '{keyword}' {text!r}: must be one of {', '.join(_CONTENT_ENCODINGS)}",
            keyword,
        )
    return text


def _media_type(node: SchemaNode, keyword: str, value: Any) -> str:
    text = _text(node, keyword, value)
    if _MEDIA_TYPE_RE.match(text) is None:
        raise InvalidKeywordValueError(
            f"Invalid '{keyword}' {text!r}: must be in the form 'type/subtype'", keyword
        )
    return text


def _json_value(node: SchemaNode, keyword: str, value: Any) -> Any:
    return _freeze(value, keyword)


def _json_values(node: SchemaNode, keyword: str, value: Any) -> tuple[Any, ...]:
    if not is_json_array(value):
        raise InvalidKeywordValueError(f"'{keyword}' must be an array", keyword)
    return tuple(_freeze(item, keyword) for item in value)


def _enum_values(node: SchemaNode, keyword: str, value: Any) -> tuple[Any, ...]:
    members = _json_values(node, keyword, value)
    if not members:
        raise InvalidKeywordValueError("'enum' must have at least one value", keyword)
    for i, member in enumerate(members):
        for j in range(i):
            if deep_equal(members[j], member):
                raise InvalidKeywordValueError(
                    f"Duplicate enum value at indices {j} and {i}", keyword
                )
    return members


def _non_negative_int(node: SchemaNode, keyword: str, value: Any) -> int:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise InvalidKeywordValueError(
            f"'{keyword}' must be a non-negative integer, got {value!r}", keyword
        )
    return value


def _number(node: SchemaNode, keyword: str, value: Any) -> int | float:
    if not is_json_number(value) or not math.isfinite(value):
        raise InvalidKeywordValueError(
            f"'{keyword}' must be a finite number, got {value!r}", keyword
        )
    return value


def _positive_number(node: SchemaNode, keyword: str, value: Any) -> int | float:
    number = _number(node, keyword, value)
    if number <= 0:
        raise InvalidKeywordValueError(
            f"'{keyword}' must be strictly greater than 0, got {value!r}", keyword
        )
    return number


def _pattern(node: SchemaNode, keyword: str, value: Any) -> str:
    source = _text(node, keyword, value)
    try:
        compile_pattern(source)
    except InvalidPatternError as exc:
        raise InvalidPatternError(exc.reason, keyword, pattern=source) from exc
    return source


def _names(
    node: SchemaNode, keyword: str, value: Any, *, allow_empty: bool = False
) -> tuple[str, ...]:
    if not is_json_array(value):
        raise InvalidKeywordValueError(f"'{keyword}' must be an array of strings", keyword)
    names = tuple(value)
    if not names and not allow_empty:
        raise InvalidKeywordValueError(f"'{keyword}' must not be empty", keyword)
    seen: set[str] = set()
    for name in names:
        if not isinstance(name, str):
            raise InvalidKeywordValueError(
                f"'{keyword}' entries must be strings, got {describe(name)}", keyword
            )
        if name in seen:
            raise InvalidKeywordValueError(f"Duplicate name '{name}' in '{keyword}'", keyword)
        seen.add(name)
    return names


def _required(node: SchemaNode, keyword: str, value: Any) -> tuple[str, ...]:
    return _names(node, keyword, value)


def _type_set(node: SchemaNode, keyword: str, value: Any) -> tuple[JsonType, ...]:
    raw = [value] if isinstance(value, str) else value
    if not is_json_array(raw):
        raise InvalidKeywordValueError("'type' must be a type name or a list of them", keyword)
    types: list[JsonType] = []
    for item in raw:
        try:
            json_type = JsonType(item)
        except ValueError as exc:
            raise InvalidKeywordValueError(f"Unknown type '{item}'", keyword) from exc
        if json_type in types:
            raise InvalidKeywordValueError(f"Duplicate type: {json_type.value}", keyword)
        types.append(json_type)
    if not types:
        raise InvalidKeywordValueError("Type array must not be empty", keyword)
    allowed = type(node).fixed_types
    if allowed and not set(types) <= allowed:
        names = ", ".join(t.value for t in types)
        raise TypeConflictError(
            f"{type(node).__name__} only supports type "
            f"{' or '.join(sorted(t.value for t in allowed))}, not {names}",
            keyword,
        )
    return tuple(types)


def _schema(node: SchemaNode, keyword: str, value: Any) -> SchemaNode:
    if isinstance(value, bool):
        return BooleanLiteralSchema(value)
    if not isinstance(value, SchemaNode):
        raise InvalidKeywordValueError(
            f"'{keyword}' must be a schema node or boolean, got {describe(value)}", keyword
        )
    return value


def _schema_or_flag(node: SchemaNode, keyword: str, value: Any) -> SchemaNode | bool:
    if isinstance(value, bool):
        return value
    return _schema(node, keyword, value)


def _schema_list(node: SchemaNode, keyword: str, value: Any) -> tuple[SchemaNode, ...]:
    if isinstance(value, (SchemaNode, bool)):
        value = [value]
    if not is_json_array(value):
        raise InvalidKeywordValueError(f"'{keyword}' must be a list of schemas", keyword)
    schemas = tuple(_schema(node, keyword, item) for item in value)
    if not schemas:
        raise InvalidKeywordValueError(f"'{keyword}' array must not be empty", keyword)
    return schemas


def _schema_map(node: SchemaNode, keyword: str, value: Any) -> Mapping[str, SchemaNode]:
    if not isinstance(value, Mapping):
        raise InvalidKeywordValueError(f"'{keyword}' must be a mapping of schemas", keyword)
    schemas: dict[str, SchemaNode] = {}
    for name, item in value.items():
        if not isinstance(name, str):
            raise InvalidKeywordValueError(f"'{keyword}' keys must be strings", keyword)
        schemas[name] = _schema(node, keyword, item)
    return MappingProxyType(schemas)


def _pattern_schema_map(node: SchemaNode, keyword: str, value: Any) -> Mapping[str, SchemaNode]:
    schemas = _schema_map(node, keyword, value)
    for source in schemas:
        _pattern(node, keyword, source)
    return schemas


def _items(node: SchemaNode, keyword: str, value: Any) -> SchemaNode | tuple[SchemaNode, ...]:
    if isinstance(value, (SchemaNode, bool)):
        return _schema(node, keyword, value)
    return _schema_list(node, keyword, value)


def _dependencies(
    node: SchemaNode, keyword: str, value: Any
) -> Mapping[str, SchemaNode | tuple[str, ...]]:
    if not isinstance(value, Mapping):
        raise InvalidKeywordValueError("'dependencies' must be a mapping", keyword)
    entries: dict[str, SchemaNode | tuple[str, ...]] = {}
    for name, item in value.items():
        if not isinstance(name, str):
            raise InvalidKeywordValueError("'dependencies' keys must be strings", keyword)
        if isinstance(item, (SchemaNode, bool)):
            entries[name] = _schema(node, keyword, item)
        else:
            entries[name] = _names(node, f"{keyword}/{name}", item, allow_empty=True)
    return MappingProxyType(entries)


# ---------------------------------------------------------------------------
# Keyword descriptor
# ---------------------------------------------------------------------------


class Keyword:
    """Descriptor for one schema keyword slot.

    Reading an unset slot returns ``None``; use ``SchemaNode.has`` to tell an
    unset slot from a JSON ``null`` value. ``del node.<slot>`` unsets it.
    """

    def __init__(
        self, name: str, coerce: Coercer, group: KeywordGroup = KeywordGroup.GENERIC
    ) -> None:
        self.name = name
        self.coerce = coerce
        self.group = group
        self.attr = name

    def __set_name__(self, owner: type, attr: str) -> None:
        self.attr = attr

    def __get__(self, instance: SchemaNode | None, owner: type) -> Any:
        if instance is None:
            return self
        if self.name not in instance._keywords:
            return None
        value = instance._keywords[self.name]
        if self.coerce in (_json_value, _json_values, _enum_values):
            return _thaw_slot(value, self.coerce)
        return value

    def __set__(self, instance: SchemaNode, value: Any) -> None:
        instance._assign(self, value)

    def __delete__(self, instance: SchemaNode) -> None:
        instance._unset(self)


def _thaw_slot(value: Any, coerce: Coercer) -> Any:
    if coerce is _json_value:
        return thaw(value)
    return tuple(thaw(item) for item in value)


def _child_nodes(value: Any) -> Iterator[SchemaNode]:
    """Schema nodes held directly by a keyword value."""
    if isinstance(value, SchemaNode):
        yield value
    elif isinstance(value, tuple):
        for item in value:
            if isinstance(item, SchemaNode):
                yield item
    elif isinstance(value, Mapping):
        for item in value.values():
            if isinstance(item, SchemaNode):
                yield item


# ---------------------------------------------------------------------------
# Schema nodes
# ---------------------------------------------------------------------------


class SchemaNode:
    """A schema node of the Any kind; base class for the kind-specific nodes.

    Any-kind nodes accept every keyword group. Kind-specific subclasses pin
    the ``type`` keyword and reject keywords belonging to other kinds.
    Keyword arguments to the constructor are applied through the same
    setters, in order::

        StringSchema(min_length=2, pattern="^[a-z]+$", default="abc")
    """

    kind: ClassVar[SchemaKind] = SchemaKind.ANY
    fixed_types: ClassVar[frozenset[JsonType]] = frozenset()
    initial_type: ClassVar[JsonType | None] = None

    # --- Core & metadata ---
    schema_id = Keyword("$id", _uri)
    comment = Keyword("$comment", _text)
    title = Keyword("title", _text)
    description = Keyword("description", _text)
    default = Keyword("default", _json_value)
    examples = Keyword("examples", _json_values)
    read_only = Keyword("readOnly", _flag)
    write_only = Keyword("writeOnly", _flag)

    # --- Any instance type ---
    type = Keyword("type", _type_set)
    enum = Keyword("enum", _enum_values)
    const = Keyword("const", _json_value)

    # --- Composition & conditionals ---
    all_of = Keyword("allOf", _schema_list)
    any_of = Keyword("anyOf", _schema_list)
    one_of = Keyword("oneOf", _schema_list)
    not_schema = Keyword("not", _schema)
    if_schema = Keyword("if", _schema)
    then_schema = Keyword("then", _schema)
    else_schema = Keyword("else", _schema)

    # --- Strings ---
    min_length = Keyword("minLength", _non_negative_int, KeywordGroup.STRING)
    max_length = Keyword("maxLength", _non_negative_int, KeywordGroup.STRING)
    pattern = Keyword("pattern", _pattern, KeywordGroup.STRING)
    format = Keyword("format", _text, KeywordGroup.STRING)
    content_encoding = Keyword("contentEncoding", _content_encoding, KeywordGroup.STRING)
    content_media_type = Keyword("contentMediaType", _media_type, KeywordGroup.STRING)

    # --- Numbers ---
    minimum = Keyword("minimum", _number, KeywordGroup.NUMBER)
    maximum = Keyword("maximum", _number, KeywordGroup.NUMBER)
    exclusive_minimum = Keyword("exclusiveMinimum", _number, KeywordGroup.NUMBER)
    exclusive_maximum = Keyword("exclusiveMaximum", _number, KeywordGroup.NUMBER)
    multiple_of = Keyword("multipleOf", _positive_number, KeywordGroup.NUMBER)

    # --- Objects ---
    properties = Keyword("properties", _schema_map, KeywordGroup.OBJECT)
    pattern_properties = Keyword("patternProperties", _pattern_schema_map, KeywordGroup.OBJECT)
    additional_properties = Keyword("additionalProperties", _schema_or_flag, KeywordGroup.OBJECT)
    required = Keyword("required", _required, KeywordGroup.OBJECT)
    min_properties = Keyword("minProperties", _non_negative_int, KeywordGroup.OBJECT)
    max_properties = Keyword("maxProperties", _non_negative_int, KeywordGroup.OBJECT)
    dependencies = Keyword("dependencies", _dependencies, KeywordGroup.OBJECT)
    property_names = Keyword("propertyNames", _schema, KeywordGroup.OBJECT)

    # --- Arrays ---
    items = Keyword("items", _items, KeywordGroup.ARRAY)
    additional_items = Keyword("additionalItems", _schema_or_flag, KeywordGroup.ARRAY)
    contains = Keyword("contains", _schema, KeywordGroup.ARRAY)
    min_items = Keyword("minItems", _non_negative_int, KeywordGroup.ARRAY)
    max_items = Keyword("maxItems", _non_negative_int, KeywordGroup.ARRAY)
    unique_items = Keyword("uniqueItems", _flag, KeywordGroup.ARRAY)

    def __init__(self, **keywords: Any) -> None:
        self._keywords: dict[str, Any] = {}
        self._owner: object | None = None
        if self.initial_type is not None:
            self._keywords["type"] = (self.initial_type,)
        for attr, value in keywords.items():
            if not isinstance(getattr(type(self), attr, None), Keyword):
                raise TypeError(f"{type(self).__name__}() got an unknown keyword '{attr}'")
            setattr(self, attr, value)

    # -- introspection -------------------------------------------------------

    @classmethod
    def keyword_slots(cls) -> dict[str, Keyword]:
        """Canonical keyword name -> descriptor, for every slot of the class."""
        slots: dict[str, Keyword] = {}
        for klass in reversed(cls.__mro__):
            for value in vars(klass).values():
                if isinstance(value, Keyword):
                    slots[value.name] = value
        return slots

    @property
    def keywords(self) -> Mapping[str, Any]:
        """Read-only view of the set keywords, keyed by canonical name."""
        return MappingProxyType(self._keywords)

    def has(self, name: str) -> bool:
        """Whether the keyword with canonical ``name`` is set."""
        return name in self._keywords

    @property
    def owner(self) -> object | None:
        """The parent node (or document) this node is attached to."""
        return self._owner

    @property
    def is_tuple_items(self) -> bool:
        return isinstance(self._keywords.get("items"), tuple)

    def children(self) -> Iterator[tuple[str, SchemaNode]]:
        """Directly nested nodes with their schema-relative pointer paths."""
        for name, value in self._keywords.items():
            if isinstance(value, SchemaNode):
                yield f"/{name}", value
            elif isinstance(value, tuple):
                for i, item in enumerate(value):
                    if isinstance(item, SchemaNode):
                        yield f"/{name}/{i}", item
            elif isinstance(value, Mapping):
                for key, item in value.items():
                    if isinstance(item, SchemaNode):
                        yield f"/{name}/{escape_pointer_token(key)}", item

    # -- mutation --------------------------------------------------------------

    def _assign(self, keyword: Keyword, raw: Any) -> None:
        self._check_group(keyword)
        value = keyword.coerce(self, keyword.name, raw)
        self._check_adoptable(keyword.name, value)
        candidate = dict(self._keywords)
        candidate[keyword.name] = value
        self._check_consistency(candidate)
        self._commit(candidate)

    def _unset(self, keyword: Keyword) -> None:
        if keyword.name not in self._keywords:
            return
        if keyword.name == "type" and type(self).fixed_types:
            raise TypeConflictError(
                f"{type(self).__name__} cannot drop its fixed type", keyword.name
            )
        candidate = dict(self._keywords)
        del candidate[keyword.name]
        self._check_consistency(candidate)
        self._commit(candidate)

    def accepts(self, keyword: Keyword) -> bool:
        """Whether ``keyword`` may be set on a node of this kind."""
        if keyword.group == KeywordGroup.GENERIC or self.kind == SchemaKind.ANY:
            return True
        return keyword.group.value == self.kind.value

    def _check_group(self, keyword: Keyword) -> None:
        if not self.accepts(keyword):
            raise TypeConflictError(
                f"'{keyword.name}' is a {keyword.group.value} keyword and does not "
                f"apply to {type(self).__name__}",
                keyword.name,
            )

    def _check_adoptable(self, name: str, value: Any) -> None:
        """Enforce the strict tree: no shared nodes, no cycles."""
        replaced = {id(child) for child in _child_nodes(self._keywords.get(name))}
        seen: set[int] = set()
        for child in _child_nodes(value):
            if id(child) in seen:
                raise InvalidKeywordValueError(
                    f"The same schema node appears twice in '{name}'", name
                )
            seen.add(id(child))
            if child._owner is not None and not (
                child._owner is self and id(child) in replaced
            ):
                raise InvalidKeywordValueError(
                    f"Schema node in '{name}' is already attached to another schema", name
                )
            ancestor: object | None = self
            while isinstance(ancestor, SchemaNode):
                if ancestor is child:
                    raise InvalidKeywordValueError(
                        f"Attaching this node to '{name}' would create a cycle", name
                    )
                ancestor = ancestor._owner

    def _check_consistency(self, candidate: dict[str, Any]) -> None:
        for low_name, high_name in _BOUND_PAIRS:
            low, high = candidate.get(low_name), candidate.get(high_name)
            if low is not None and high is not None and low > high:
                raise InvalidKeywordValueError(
                    f"'{high_name}' ({high}) must be greater than or equal to "
                    f"'{low_name}' ({low})",
                    high_name,
                )
        low, high = candidate.get("exclusiveMinimum"), candidate.get("exclusiveMaximum")
        if low is not None and high is not None and high <= low:
            raise InvalidKeywordValueError(
                f"'exclusiveMaximum' ({high}) must be greater than 'exclusiveMinimum' ({low})",
                "exclusiveMaximum",
            )
        own_values = [name for name in _OWN_VALUE_KEYWORDS if name in candidate]
        if not own_values:
            return

        from jsonshape.engine.validator import validate

        base = {k: v for k, v in candidate.items() if k not in _SELF_CHECK_EXCLUDED}
        for name in own_values:
            # const and enum are not checked against each other.
            sibling = _SIBLING_VALUE_KEYWORD.get(name)
            shadow = object.__new__(type(self))
            shadow._keywords = {k: v for k, v in base.items() if k != sibling}
            shadow._owner = None
            values = candidate[name] if name == "enum" else (candidate[name],)
            for value in values:
                result = validate(shadow, value)
                if not result.valid:
                    label = "enum value" if name == "enum" else f"{name} value"
                    raise ValueViolatesOwnConstraintError(
                        f"{label} {thaw(value)!r} violates the schema's own constraints: "
                        f"{result.errors[0].message}",
                        name,
                    )

    def _commit(self, candidate: dict[str, Any]) -> None:
        kept = {id(child) for value in candidate.values() for child in _child_nodes(value)}
        for value in self._keywords.values():
            for child in _child_nodes(value):
                if id(child) not in kept:
                    child._owner = None
        for value in candidate.values():
            for child in _child_nodes(value):
                child._owner = self
        self._keywords = candidate

    # -- projection ------------------------------------------------------------

    def to_json(self) -> dict[str, Any] | bool:
        """JSON-compatible projection using canonical keyword names."""
        return {name: _project(name, value) for name, value in self._keywords.items()}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_json()!r})"


def _project(name: str, value: Any) -> Any:
    if name == "type":
        names = [t.value for t in value]
        return names[0] if len(names) == 1 else names
    return _project_value(value)


def _project_value(value: Any) -> Any:
    if isinstance(value, SchemaNode):
        return value.to_json()
    if isinstance(value, Mapping):
        return {key: _project_value(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_project_value(item) for item in value]
    return value


def escape_pointer_token(token: str) -> str:
    """RFC 6901 escaping of a single JSON Pointer reference token."""
    return token.replace("~", "~0").replace("/", "~1")


class StringSchema(SchemaNode):
    kind = SchemaKind.STRING
    fixed_types = frozenset({JsonType.STRING})
    initial_type = JsonType.STRING


class NumberSchema(SchemaNode):
    """Number-kind node; ``integer=True`` declares the ``integer`` type."""

    kind = SchemaKind.NUMBER
    fixed_types = frozenset({JsonType.NUMBER, JsonType.INTEGER})
    initial_type = JsonType.NUMBER

    def __init__(self, *, integer: bool = False, **keywords: Any) -> None:
        if integer:
            keywords = {"type": JsonType.INTEGER, **keywords}
        super().__init__(**keywords)


class BooleanSchema(SchemaNode):
    kind = SchemaKind.BOOLEAN
    fixed_types = frozenset({JsonType.BOOLEAN})
    initial_type = JsonType.BOOLEAN


class NullSchema(SchemaNode):
    kind = SchemaKind.NULL
    fixed_types = frozenset({JsonType.NULL})
    initial_type = JsonType.NULL


class ObjectSchema(SchemaNode):
    kind = SchemaKind.OBJECT
    fixed_types = frozenset({JsonType.OBJECT})
    initial_type = JsonType.OBJECT


class ArraySchema(SchemaNode):
    kind = SchemaKind.ARRAY
    fixed_types = frozenset({JsonType.ARRAY})
    initial_type = JsonType.ARRAY


class BooleanLiteralSchema(SchemaNode):
    """The ``true``/``false`` schema: accepts everything or nothing."""

    kind = SchemaKind.LITERAL

    def __init__(self, verdict: bool) -> None:
        if not isinstance(verdict, bool):
            raise InvalidKeywordValueError("A boolean schema must be true or false")
        self.verdict = verdict
        super().__init__()

    def _assign(self, keyword: Keyword, raw: Any) -> None:
        raise TypeConflictError(
            f"A boolean schema cannot carry keywords (tried '{keyword.name}')", keyword.name
        )

    def to_json(self) -> bool:  # type: ignore[override]
        return self.verdict

    def __repr__(self) -> str:
        return f"BooleanLiteralSchema({self.verdict})"


NODE_CLASSES: dict[JsonType, type[SchemaNode]] = {
    JsonType.STRING: StringSchema,
    JsonType.NUMBER: NumberSchema,
    JsonType.INTEGER: NumberSchema,
    JsonType.BOOLEAN: BooleanSchema,
    JsonType.NULL: NullSchema,
    JsonType.OBJECT: ObjectSchema,
    JsonType.ARRAY: ArraySchema,
}
