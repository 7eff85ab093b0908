"""Schema text loader (YAML or JSON) with position tracking for error reporting."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.error import YAMLError

from jsonshape.models.errors import SourceSpan
from jsonshape.schema.document import JsonSchemaDocument
from jsonshape.schema.nodes import escape_pointer_token
from jsonshape.schema.reader import SchemaReader
from jsonshape.settings import Settings, get_settings

logger = logging.getLogger("jsonshape.loader")

# Anchor definitions (&name) at line start or after whitespace/indicators.
# Good-enough heuristic: quoted strings containing " &x" are rejected too.
_ANCHOR_RE = re.compile(r"(?:^|[\s\-:])&(\w+)", re.MULTILINE)


class SchemaLoadError(Exception):
    """Raised when schema text is unsafe, malformed or not a schema.

    Covers oversized documents, anchors/aliases, excessive nesting or node
    counts, and YAML/JSON syntax errors.
    """

    def __init__(self, message: str, span: SourceSpan | None = None) -> None:
        self.span = span
        super().__init__(message)


@dataclass
class SourceMap:
    """Maps schema JSON Pointers to their source positions."""

    _positions: dict[str, SourceSpan] = field(default_factory=dict)

    def add(self, path: str, span: SourceSpan) -> None:
        self._positions[path] = span

    def get(self, path: str) -> SourceSpan | None:
        return self._positions.get(path)

    @property
    def paths(self) -> list[str]:
        return list(self._positions.keys())


class SchemaLoader:
    """Loads schema documents from YAML/JSON text (JSON is a YAML subset).

    Uses ruamel.yaml, which keeps line/column info on every parsed
    container, so construction errors raised while reading the schema carry
    a ``SourceSpan`` pointing at the offending keyword.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._yaml = YAML()

    # -- safety checks -------------------------------------------------------

    def _check_text_safety(self, content: str) -> None:
        limit = self._settings.max_document_size
        if len(content) > limit:
            raise SchemaLoadError(
                f"Schema document exceeds maximum size "
                f"({len(content):,} chars > {limit:,} limit)"
            )
        if _ANCHOR_RE.search(content):
            raise SchemaLoadError("YAML anchors/aliases are not supported in schema documents")

    def _check_shape(self, data: Any) -> None:
        """Post-parse limits on total node count and nesting depth."""
        max_nodes = self._settings.max_node_count
        max_depth = self._settings.max_depth
        count = 0
        stack: list[tuple[Any, int]] = [(data, 1)]
        while stack:
            node, depth = stack.pop()
            count += 1
            if count > max_nodes:
                raise SchemaLoadError(
                    f"Schema document exceeds maximum node count ({max_nodes:,})"
                )
            if depth > max_depth:
                raise SchemaLoadError(
                    f"Schema document exceeds maximum nesting depth ({max_depth})"
                )
            if isinstance(node, dict):
                stack.extend((value, depth + 1) for value in node.values())
            elif isinstance(node, list):
                stack.extend((item, depth + 1) for item in node)

    # -- public loading API --------------------------------------------------

    def parse(self, content: str, filename: str = "<string>") -> tuple[Any, SourceMap]:
        """Parse schema text into plain Python values plus a source position map."""
        self._check_text_safety(content)
        try:
            data = self._yaml.load(content)
        except YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            span = None
            if mark is not None:
                span = _span(filename, mark.line, mark.column)
            raise SchemaLoadError(f"Cannot parse schema text: {exc}", span) from exc
        if data is None:
            raise SchemaLoadError(f"Schema document '{filename}' is empty")
        self._check_shape(data)
        source_map = SourceMap()
        self._extract_positions(data, filename, "", source_map)
        plain = self._to_plain_value(data)
        if not isinstance(plain, (dict, bool)):
            raise SchemaLoadError(
                f"Schema document '{filename}' must be an object or a boolean, "
                f"got {type(plain).__name__}"
            )
        return plain, source_map

    def load_string(self, content: str, filename: str = "<string>") -> JsonSchemaDocument:
        data, source_map = self.parse(content, filename)
        logger.debug("Loaded schema text '%s' (%d positions)", filename, len(source_map.paths))
        return SchemaReader(source_map).read_document(data)

    def load(self, path: Path) -> JsonSchemaDocument:
        """Load a schema file (``.json``, ``.yaml`` or ``.yml``)."""
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.load_string(content, str(path))

    def _extract_positions(
        self,
        data: Any,
        filename: str,
        prefix: str,
        source_map: SourceMap,
    ) -> None:
        """Recursively record the position of every key and sequence item."""
        if isinstance(data, CommentedMap):
            for key in data:
                key_path = f"{prefix}/{escape_pointer_token(str(key))}"
                try:
                    position = data.lc.key(key)
                except (AttributeError, KeyError, TypeError):
                    position = None
                if position:
                    line, col = position
                    source_map.add(key_path, _span(filename, line, col))
                self._extract_positions(data[key], filename, key_path, source_map)
        elif isinstance(data, CommentedSeq):
            for i, item in enumerate(data):
                item_path = f"{prefix}/{i}"
                try:
                    position = data.lc.item(i)
                except (AttributeError, KeyError, TypeError):
                    position = None
                if position:
                    line, col = position
                    source_map.add(item_path, _span(filename, line, col))
                self._extract_positions(item, filename, item_path, source_map)

    def _to_plain_value(self, data: Any) -> Any:
        """Convert ruamel.yaml containers and scalar subclasses to plain values."""
        if isinstance(data, dict):
            return {str(k): self._to_plain_value(v) for k, v in data.items()}
        if isinstance(data, list):
            return [self._to_plain_value(item) for item in data]
        if isinstance(data, bool):
            return bool(data)
        if isinstance(data, int):
            return int(data)
        if isinstance(data, float):
            return float(data)
        if isinstance(data, (date, datetime)):
            return data.isoformat()
        if isinstance(data, str):
            return str(data)
        return data


def load_schema(path: Path | str) -> JsonSchemaDocument:
    """Shorthand for ``SchemaLoader().load(Path(path))``."""
    return SchemaLoader().load(Path(path))


def _span(filename: str, line: int, column: int) -> SourceSpan:
    """Build a 1-based span from ruamel.yaml's 0-based line/column."""
    return SourceSpan(file=filename, line=line + 1, column=column + 1)
