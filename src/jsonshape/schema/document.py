"""JSON Schema document: a root node plus document-level metadata."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, Field

from jsonshape.engine.validator import validate
from jsonshape.models.errors import ValidationResult
from jsonshape.schema.errors import InvalidKeywordValueError
from jsonshape.schema.nodes import SchemaNode

DRAFT_07 = "http://json-schema.org/draft-07/schema#"


class JsonSchemaDocument(BaseModel):
    """A root schema node with its ``$schema``, ``$id`` and ``$comment``.

    The document owns its root: a node that is already attached somewhere
    else cannot become a document root.
    """

    root: SchemaNode
    id: str | None = None
    dialect: str = Field(DRAFT_07)
    comment: str | None = None

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    def model_post_init(self, __context: Any) -> None:
        if self.id is not None:
            if not self.id:
                raise InvalidKeywordValueError("Document '$id' must not be empty", "$id")
            try:
                urlsplit(self.id)
            except ValueError as exc:
                raise InvalidKeywordValueError(
                    f"Document '$id' is not a URI reference: {exc}", "$id"
                ) from exc
        if not self.dialect or not urlsplit(self.dialect).scheme:
            raise InvalidKeywordValueError(
                f"Dialect '{self.dialect}' must be an absolute URI", "$schema"
            )
        if self.root.owner is not None and self.root.owner is not self:
            raise InvalidKeywordValueError(
                "The root node is already attached to another schema"
            )
        self.root._owner = self

    def to_json(self) -> dict[str, Any] | bool:
        """Root projection with ``$schema``/``$id``/``$comment`` added.

        A boolean root projects to the bare boolean.
        """
        body = self.root.to_json()
        if isinstance(body, bool):
            return body
        header: dict[str, Any] = {"$schema": self.dialect}
        if self.id is not None:
            header["$id"] = self.id
        if self.comment is not None:
            header["$comment"] = self.comment
        return {**header, **body}

    def validate(self, instance: Any) -> ValidationResult:  # type: ignore[override]
        return validate(self.root, instance, "")

    def release(self) -> SchemaNode:
        """Detach and return the root so it can be attached elsewhere."""
        if self.root.owner is self:
            self.root._owner = None
        return self.root
