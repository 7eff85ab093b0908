"""String ``format`` registry: named predicates over strings."""

from __future__ import annotations

import ipaddress
import json
import re
from collections.abc import Callable
from datetime import date
from urllib.parse import urlsplit

from jsonshape.models.json_types import StringFormat

FormatPredicate = Callable[[str], bool]

_DATE_RE = re.compile(r"^(\d{4})-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$")
_TIME_RE = re.compile(
    r"^([01]\d|2[0-3]):([0-5]\d):([0-5]\d|60)(\.\d+)?([Zz]|[+-]([01]\d|2[0-3]):([0-5]\d))$"
)
_DURATION_RE = re.compile(
    r"^P(?!$)(\d+Y)?(\d+M)?(\d+D)?(T(?=\d)(\d+H)?(\d+M)?(\d+S)?)?$|^P\d+W$"
)
_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_HOSTNAME_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
_HOSTNAME_RE = re.compile(rf"^{_HOSTNAME_LABEL}(?:\.{_HOSTNAME_LABEL})*$")
_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)
_URI_TEMPLATE_RE = re.compile(
    r"^(?:[^{}]|\{[+#./;?&=,!@|]?"
    r"(?:[a-zA-Z0-9_]|%[0-9a-fA-F]{2})+(?::[1-9]\d{0,3}|\*)?"
    r"(?:,(?:[a-zA-Z0-9_]|%[0-9a-fA-F]{2})+(?::[1-9]\d{0,3}|\*)?)*\})*$"
)
_URI_CHARS_RE = re.compile(r"^[^\s<>\"{}|\\^`]*$")
_POINTER_TOKEN_RE = re.compile(r"^(?:[^~]|~[01])*$")
_RELATIVE_POINTER_RE = re.compile(r"^(0|[1-9]\d*)(#|(/.*)?)$")


class UnknownFormatError(Exception):
    """Raised when a format name is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.format_name = name
        self.available = available
        super().__init__(f"Unknown format '{name}'. Available: {', '.join(available)}")


class FormatRegistry:
    """Registry for ``format`` predicates.

    The engine looks formats up by name; a missing name is treated as an
    unknown (annotation-only) format, never as a failure.
    """

    _formats: dict[str, FormatPredicate] = {}
    _builtins: dict[str, FormatPredicate] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[FormatPredicate], FormatPredicate]:
        """Register a predicate under ``name``. Used as a decorator."""

        def decorator(predicate: FormatPredicate) -> FormatPredicate:
            cls._formats[name] = predicate
            return predicate

        return decorator

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._formats.pop(name, None)

    @classmethod
    def get(cls, name: str) -> FormatPredicate:
        if name not in cls._formats:
            raise UnknownFormatError(name, available=cls.available())
        return cls._formats[name]

    @classmethod
    def lookup(cls, name: str) -> FormatPredicate | None:
        return cls._formats.get(name)

    @classmethod
    def is_known(cls, name: str) -> bool:
        return name in cls._formats

    @classmethod
    def available(cls) -> list[str]:
        """List registered format names."""
        return sorted(cls._formats.keys())

    @classmethod
    def reset(cls) -> None:
        """Drop custom registrations and restore the built-in formats (for testing)."""
        cls._formats = dict(cls._builtins)


def _builtin(name: StringFormat) -> Callable[[FormatPredicate], FormatPredicate]:
    def decorator(predicate: FormatPredicate) -> FormatPredicate:
        FormatRegistry._builtins[name.value] = predicate
        return FormatRegistry.register(name.value)(predicate)

    return decorator


def _is_calendar_date(value: str) -> bool:
    if not _DATE_RE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


@_builtin(StringFormat.DATE)
def is_date(value: str) -> bool:
    return _is_calendar_date(value)


@_builtin(StringFormat.TIME)
def is_time(value: str) -> bool:
    return _TIME_RE.match(value) is not None


@_builtin(StringFormat.DATE_TIME)
def is_date_time(value: str) -> bool:
    """RFC 3339 ``date-time``: full-date, ``T``, full-time."""
    parts = re.split(r"[Tt ]", value, maxsplit=1)
    if len(parts) != 2:
        return False
    return _is_calendar_date(parts[0]) and is_time(parts[1])


@_builtin(StringFormat.DURATION)
def is_duration(value: str) -> bool:
    return _DURATION_RE.match(value) is not None


@_builtin(StringFormat.EMAIL)
def is_email(value: str) -> bool:
    return _EMAIL_RE.match(value) is not None


@_builtin(StringFormat.HOSTNAME)
def is_hostname(value: str) -> bool:
    return len(value) <= 253 and _HOSTNAME_RE.match(value) is not None


@_builtin(StringFormat.IPV4)
def is_ipv4(value: str) -> bool:
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


@_builtin(StringFormat.IPV6)
def is_ipv6(value: str) -> bool:
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


@_builtin(StringFormat.URI_REFERENCE)
def is_uri_reference(value: str) -> bool:
    if not _URI_CHARS_RE.match(value):
        return False
    try:
        urlsplit(value)
    except ValueError:
        return False
    return True


@_builtin(StringFormat.URI)
def is_uri(value: str) -> bool:
    """Absolute URI: a reference with a scheme."""
    if not is_uri_reference(value):
        return False
    return bool(urlsplit(value).scheme)


@_builtin(StringFormat.URI_TEMPLATE)
def is_uri_template(value: str) -> bool:
    return _URI_TEMPLATE_RE.match(value) is not None


@_builtin(StringFormat.UUID)
def is_uuid(value: str) -> bool:
    return _UUID_RE.match(value) is not None


@_builtin(StringFormat.JSON_POINTER)
def is_json_pointer(value: str) -> bool:
    if value == "":
        return True
    if not value.startswith("/"):
        return False
    return all(_POINTER_TOKEN_RE.match(token) for token in value.split("/")[1:])


@_builtin(StringFormat.RELATIVE_JSON_POINTER)
def is_relative_json_pointer(value: str) -> bool:
    match = _RELATIVE_POINTER_RE.match(value)
    if match is None:
        return False
    tail = match.group(3)
    return tail is None or is_json_pointer(tail)


@_builtin(StringFormat.REGEX)
def is_regex(value: str) -> bool:
    try:
        re.compile(value)
    except re.error:
        return False
    return True


@_builtin(StringFormat.JSON)
def is_json_text(value: str) -> bool:
    try:
        json.loads(value)
    except ValueError:
        return False
    return True
