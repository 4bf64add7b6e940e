"""
Playground Kernel — Snippet parser

Uses tree-sitter (TSX grammar) to parse example source. TSX is a superset of
the JSX dialect examples are written in, so type annotations parse too.

Syntax errors are reported the way a transpiler reports them: the first
ERROR or MISSING node, with a 1-based line and 0-based column.
"""

from __future__ import annotations

from typing import Any

import tree_sitter_typescript as _ts_mod
from tree_sitter import Language, Parser, Tree

from playground.kernel.errors import SnippetSyntaxError

_LANG = Language(_ts_mod.language_tsx())
_PARSER = Parser(_LANG)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse(source: str) -> Tree:
    """Parse source text. Never raises; check has_error / first_error()."""
    return _PARSER.parse(source.encode("utf-8"))


def node_text(node: Any) -> str:
    return node.text.decode("utf-8")


def position(node: Any) -> tuple[int, int]:
    """(line, column) of a node, line 1-based."""
    point = node.start_point
    return point[0] + 1, point[1]


def first_error(node: Any) -> Any | None:
    """Depth-first search for the first ERROR or MISSING node."""
    if node.type == "ERROR" or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = first_error(child)
        if found is not None:
            return found
    return node


def code_frame(source: str, line: int, column: int) -> str:
    """Two lines of context around line, with a caret under column."""
    lines = source.split("\n")
    first = max(line - 2, 1)
    last = min(line + 1, len(lines))
    width = len(str(last))
    out: list[str] = []
    for number in range(first, last + 1):
        marker = ">" if number == line else " "
        text = lines[number - 1] if number - 1 < len(lines) else ""
        out.append(f"{marker} {number:>{width}} | {text}".rstrip())
        if number == line:
            out.append(f"  {' ' * width} | {' ' * column}^")
    return "\n".join(out)


def syntax_error_at(node: Any, source: str, reason: str | None = None) -> SnippetSyntaxError:
    """Build a SnippetSyntaxError pointing at node."""
    line, column = position(node)
    if reason is None:
        if node.is_missing:
            reason = f"Missing {node.type!r}"
        else:
            snippet = node_text(node).strip().split("\n")[0][:20]
            reason = f"Unexpected token {snippet!r}" if snippet else "Unexpected token"
    message = f"{reason} ({line}:{column})\n\n{code_frame(source, line, column)}"
    return SnippetSyntaxError(message, line=line, column=column)


def check_syntax(tree: Tree, source: str) -> None:
    """Raise SnippetSyntaxError when the tree has any error node."""
    if not tree.root_node.has_error:
        return
    node = first_error(tree.root_node)
    raise syntax_error_at(node if node is not None else tree.root_node, source)
