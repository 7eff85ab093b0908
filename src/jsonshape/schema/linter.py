"""Static schema lint: keyword combinations that are legal but suspicious."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from jsonshape.engine.patterns import pattern_matches
from jsonshape.models.errors import SchemaIssue
from jsonshape.schema.document import JsonSchemaDocument
from jsonshape.schema.nodes import BooleanLiteralSchema, SchemaNode

if TYPE_CHECKING:
    from jsonshape.parser.loader import SourceMap


def _is_false(schema: object) -> bool:
    return schema is False or (isinstance(schema, BooleanLiteralSchema) and not schema.verdict)


class SchemaLinter:
    """Reports non-fatal issues in a schema tree.

    Construction already rejects contradictory keyword values; the linter
    finds combinations that are accepted but almost certainly unintended,
    such as ``then`` without ``if`` or a ``required`` property that
    ``additionalProperties: false`` forbids.
    """

    def __init__(self, source_map: SourceMap | None = None) -> None:
        self._source_map = source_map

    def lint(self, node: SchemaNode) -> list[SchemaIssue]:
        issues: list[SchemaIssue] = []
        stack: list[tuple[str, SchemaNode]] = [("", node)]
        while stack:
            path, current = stack.pop()
            issues.extend(self._check_node(current, path))
            children = list(current.children())
            for child_path, child in reversed(children):
                stack.append((path + child_path, child))
        return issues

    def lint_document(self, document: JsonSchemaDocument) -> list[SchemaIssue]:
        issues = self._check_dialect(document.dialect)
        issues.extend(self.lint(document.root))
        return issues

    def _check_node(self, node: SchemaNode, path: str) -> list[SchemaIssue]:
        issues: list[SchemaIssue] = []
        issues.extend(self._check_conditional(node, path))
        issues.extend(self._check_additional_items(node, path))
        issues.extend(self._check_required_reachable(node, path))
        issues.extend(self._check_contains(node, path))
        return issues

    def _issue(self, code: str, message: str, path: str) -> SchemaIssue:
        span = self._source_map.get(path) if self._source_map is not None else None
        return SchemaIssue(code=code, message=message, path=path, span=span)

    def _check_conditional(self, node: SchemaNode, path: str) -> list[SchemaIssue]:
        if node.has("if"):
            return []
        issues: list[SchemaIssue] = []
        for name in ("then", "else"):
            if node.has(name):
                issues.append(
                    self._issue(
                        "CONDITIONAL_WITHOUT_IF",
                        f"'{name}' has no effect without 'if'",
                        f"{path}/{name}",
                    )
                )
        return issues

    def _check_additional_items(self, node: SchemaNode, path: str) -> list[SchemaIssue]:
        if not node.has("additionalItems") or node.is_tuple_items:
            return []
        return [
            self._issue(
                "ADDITIONAL_ITEMS_WITHOUT_TUPLE",
                "'additionalItems' only applies when 'items' is a list of schemas",
                f"{path}/additionalItems",
            )
        ]

    def _check_required_reachable(self, node: SchemaNode, path: str) -> list[SchemaIssue]:
        """Required names that no property, pattern or additional schema admits."""
        issues: list[SchemaIssue] = []
        properties = node.properties or {}
        patterns = node.pattern_properties or {}
        for name in node.required or ():
            if name in properties:
                blocked = _is_false(properties[name])
            else:
                matching = [s for source, s in patterns.items() if pattern_matches(source, name)]
                if matching:
                    blocked = any(_is_false(s) for s in matching)
                else:
                    blocked = _is_false(node.additional_properties)
            if blocked:
                issues.append(
                    self._issue(
                        "UNSATISFIABLE_REQUIRED",
                        f"Required property '{name}' can never be present",
                        f"{path}/required",
                    )
                )
        return issues

    def _check_contains(self, node: SchemaNode, path: str) -> list[SchemaIssue]:
        if node.has("contains") and node.max_items == 0:
            return [
                self._issue(
                    "CONTAINS_WITH_EMPTY_ARRAY",
                    "'contains' can never be satisfied when 'maxItems' is 0",
                    f"{path}/contains",
                )
            ]
        return []

    def _check_dialect(self, dialect: str) -> list[SchemaIssue]:
        host = urlsplit(dialect).hostname or ""
        if host == "json-schema.org" or host.endswith(".json-schema.org"):
            return []
        return [
            self._issue(
                "NON_STANDARD_DIALECT",
                f"Dialect '{dialect}' is not a json-schema.org meta-schema",
                "/$schema",
            )
        ]
