"""
Playground Kernel — Body Extractor

Isolates the statements after the import block and strips the
`export default` marker, capturing the name the assembled program returns.

    export default Foo;                 → (statement removed)          name "Foo"
    export default class Foo extends …  → class Foo extends …           name "Foo"
    export default () => <div/>         → const _defaultExport = () => … name "_defaultExport"

Uses the same tree-sitter parse as the transpiler, so only a real top-level
`export default` counts (not one inside a string or comment).
"""

from __future__ import annotations

from typing import Any

from playground.kernel.parser import node_text, parse
from playground.kernel.types import ExtractedBody

DEFAULT_EXPORT_NAME = "_defaultExport"

# Top-level statements that open the body; anything before the first one
# (stray expressions, comments) is dropped.
BODY_START_TYPES = {
    "export_statement",
    "lexical_declaration",
    "variable_declaration",
    "function_declaration",
    "class_declaration",
    "abstract_class_declaration",
}

# `export default <token>` forms whose token is returned as-is.
TOKEN_EXPORT_TYPES = {"identifier", "number", "string", "true", "false", "null", "undefined"}

# Anonymous declarations: the name comes from the declaration itself, if any.
DECLARATION_EXPORT_TYPES = {"class", "function", "function_expression"}


def extract_body(source: str, start: int = 0) -> ExtractedBody:
    """
    Extract the body of a snippet, starting the search at offset start
    (the end of the import block).
    """
    data = source[start:].encode("utf-8")
    root = parse(source[start:]).root_node

    # A broken remainder is kept whole so the transpiler reports where it breaks
    if root.has_error:
        body_start = 0
    else:
        first = next((c for c in root.children if c.type in BODY_START_TYPES), None)
        if first is None:
            return ExtractedBody(body="", default_export=None)
        body_start = first.start_byte
    export = next((c for c in root.children if _is_default_export(c)), None)
    if export is None:
        return ExtractedBody(body=data[body_start:].decode("utf-8"), default_export=None)

    cut_start, cut_end, replacement, name = _strip_default_export(export)
    cut_start = max(cut_start, body_start)
    body = data[body_start:cut_start] + replacement + data[cut_end:]
    return ExtractedBody(body=body.decode("utf-8"), default_export=name)


def _is_default_export(node: Any) -> bool:
    return node.type == "export_statement" and any(c.type == "default" for c in node.children)


def _strip_default_export(node: Any) -> tuple[int, int, bytes, str | None]:
    """Return (cut_start, cut_end, replacement, name) for an export default statement."""
    keyword = next(c for c in node.children if c.type == "export")
    declaration = node.child_by_field_name("declaration")
    if declaration is not None:
        return keyword.start_byte, declaration.start_byte, b"", _declared_name(declaration)

    value = node.child_by_field_name("value")
    if value is None:
        return keyword.start_byte, node.end_byte, b"", None

    if value.type in TOKEN_EXPORT_TYPES:
        return keyword.start_byte, node.end_byte, b"", node_text(value)

    if value.type in DECLARATION_EXPORT_TYPES:
        return keyword.start_byte, value.start_byte, b"", _declared_name(value)

    replacement = f"const {DEFAULT_EXPORT_NAME} = ".encode("utf-8")
    return keyword.start_byte, value.start_byte, replacement, DEFAULT_EXPORT_NAME


def _declared_name(node: Any) -> str | None:
    name = node.child_by_field_name("name")
    return node_text(name) if name is not None else None
