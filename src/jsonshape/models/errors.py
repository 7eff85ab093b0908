"""Structured validation outcomes: errors, results and schema lint issues."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, computed_field


class SourceSpan(BaseModel):
    """Points to exact location in schema source text for error reporting."""

    file: str
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None


class ValidationError(BaseModel):
    """One keyword violation found while validating an instance.

    ``path`` is a JSON Pointer into the instance (``""`` is the root).
    ``details`` carries nested diagnostics, e.g. the per-branch errors of a
    failed ``anyOf``.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    keyword: str
    message: str
    expected: Any = None
    actual: Any = None
    details: list[ValidationError] = []

    def __str__(self) -> str:
        return f"{self.message} (at '{self.path}', keyword '{self.keyword}')"


class ValidationResult(BaseModel):
    """Ordered errors of a single validation call; valid iff there are none."""

    model_config = ConfigDict(frozen=True)

    errors: list[ValidationError] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.valid

    def __len__(self) -> int:
        return len(self.errors)

    @classmethod
    def success(cls) -> Self:
        return cls()

    @classmethod
    def failure(cls, errors: Iterable[ValidationError]) -> Self:
        return cls(errors=list(errors))

    @classmethod
    def combine(cls, results: Iterable[ValidationResult]) -> Self:
        """Concatenate errors, keeping input order and each input's own order."""
        errors: list[ValidationError] = []
        for result in results:
            errors.extend(result.errors)
        return cls(errors=errors)

    def where(self, predicate: Callable[[ValidationError], bool]) -> Self:
        return type(self)(errors=[e for e in self.errors if predicate(e)])

    def for_keyword(self, keyword: str) -> Self:
        return self.where(lambda e: e.keyword == keyword)

    def at_path(self, path: str) -> Self:
        return self.where(lambda e: e.path == path)

    def under_path(self, prefix: str) -> Self:
        """Errors at ``prefix`` or anywhere below it in the instance."""
        if not prefix:
            return self.where(lambda e: True)
        return self.where(lambda e: e.path == prefix or e.path.startswith(prefix + "/"))

    def keywords(self) -> list[str]:
        """Distinct violated keywords in first-seen order."""
        return list(dict.fromkeys(e.keyword for e in self.errors))

    def to_output(self) -> dict[str, Any]:
        """JSON-compatible report document."""
        return self.model_dump(mode="json")

    def __str__(self) -> str:
        if self.valid:
            return "ValidationResult: valid"
        lines = "\n".join(f"  - {e}" for e in self.errors)
        return f"ValidationResult: {len(self.errors)} error(s)\n{lines}"


class SchemaIssue(BaseModel):
    """A non-fatal problem found by statically inspecting a schema."""

    code: str
    message: str
    path: str = ""
    span: SourceSpan | None = None
