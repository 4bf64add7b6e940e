"""
Playground Kernel — HTML pretty-printer

Pure function: markup text → indented text, used by the "show HTML" view.
Text and attributes are re-emitted exactly as they appear in the input
(entities stay escaped); only whitespace between tags changes.
"""

from __future__ import annotations

from html.parser import HTMLParser

from playground.kernel.renderer import VOID_ELEMENTS

INLINE_ELEMENTS: set[str] = {
    "a",
    "abbr",
    "b",
    "br",
    "code",
    "em",
    "i",
    "img",
    "kbd",
    "label",
    "small",
    "span",
    "strong",
    "sub",
    "sup",
}

DEFAULT_INDENT = 2


class _Node:
    __slots__ = ("tag", "start", "children")

    def __init__(self, tag: str | None, start: str = "") -> None:
        self.tag = tag
        self.start = start
        self.children: list[_Node | str] = []


class _TreeBuilder(HTMLParser):
    """Builds a loose tree; unmatched end tags close back to the nearest match."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.root = _Node(None)
        self.stack = [self.root]

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        node = _Node(tag, self.get_starttag_text() or f"<{tag}>")
        self.stack[-1].children.append(node)
        if tag not in VOID_ELEMENTS:
            self.stack.append(node)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self.stack[-1].children.append(_Node(tag, self.get_starttag_text() or f"<{tag}/>"))

    def handle_endtag(self, tag: str) -> None:
        for depth in range(len(self.stack) - 1, 0, -1):
            if self.stack[depth].tag == tag:
                del self.stack[depth:]
                return

    def handle_data(self, data: str) -> None:
        self.stack[-1].children.append(data)

    def handle_entityref(self, name: str) -> None:
        self.stack[-1].children.append(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self.stack[-1].children.append(f"&#{name};")


def pretty_html(markup: str, indent: int = DEFAULT_INDENT) -> str:
    """
    Indent markup one element per line.

    Elements whose content is only text and inline elements stay on one line.
    """
    builder = _TreeBuilder()
    builder.feed(markup)
    builder.close()

    lines: list[str] = []
    for child in builder.root.children:
        _format(child, 0, indent, lines)
    return "\n".join(lines)


def _is_inline(node: _Node | str) -> bool:
    if isinstance(node, str):
        return True
    return node.tag in INLINE_ELEMENTS and all(_is_inline(c) for c in node.children)


def _inline_text(node: _Node | str) -> str:
    if isinstance(node, str):
        return " ".join(node.split()) if node.strip() else (" " if node else "")
    if node.tag in VOID_ELEMENTS:
        return node.start
    inner = "".join(_inline_text(c) for c in node.children)
    return f"{node.start}{inner}</{node.tag}>"


def _format(node: _Node | str, depth: int, indent: int, lines: list[str]) -> None:
    pad = " " * (depth * indent)

    if isinstance(node, str):
        text = " ".join(node.split())
        if text:
            lines.append(pad + text)
        return

    if node.tag in VOID_ELEMENTS:
        lines.append(pad + node.start)
        return

    if all(_is_inline(c) for c in node.children):
        lines.append(pad + _inline_text(node).strip())
        return

    lines.append(pad + node.start)
    for child in node.children:
        _format(child, depth + 1, indent, lines)
    lines.append(f"{pad}</{node.tag}>")
