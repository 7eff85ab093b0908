"""Boolean and exception-raising adapters over ``validate``."""

from __future__ import annotations

from typing import Any

from jsonshape.engine.validator import validate
from jsonshape.models.errors import ValidationError
from jsonshape.schema.nodes import SchemaNode


class SchemaValidationError(Exception):
    """Raised by ``validate_or_raise`` when an instance does not conform."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = errors
        summary = "; ".join(str(e) for e in errors[:3])
        if len(errors) > 3:
            summary += f"; ... and {len(errors) - 3} more"
        super().__init__(f"Instance is not valid against the schema: {summary}")


def is_valid(node: SchemaNode, value: Any) -> bool:
    return validate(node, value).valid


def validate_or_raise(
    node: SchemaNode, value: Any, path: str = "", all_errors: bool = True
) -> None:
    """Validate and raise ``SchemaValidationError`` on any violation.

    With ``all_errors=False`` the exception carries only the first error.
    """
    result = validate(node, value, path)
    if result.valid:
        return
    errors = result.errors if all_errors else result.errors[:1]
    raise SchemaValidationError(list(errors))
