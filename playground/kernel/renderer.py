"""
Playground Kernel — Markup serializer

Pure function: element → static HTML string.
No IO. Deterministic: same element tree → same output, always.

Follows the static markup React produces for the same tree:
- class components are constructed with props and render()ed
- function components are called with props
- fragments and arrays flatten, null/undefined/booleans render nothing
- className → class, htmlFor → for, style objects → "font-size:12px"
- event handlers and functions are dropped
- void elements self-close ("<br/>")
"""

from __future__ import annotations

import re
from html import escape as _html_escape
from typing import Any

from playground.kernel.elements import (
    Element,
    Fragment,
    display_name,
    is_component_class,
)
from playground.kernel.runtime import (
    JSObject,
    JSTypeError,
    is_nullish,
    is_number,
    to_string,
    truthy,
    undefined,
)

# ---------------------------------------------------------------------------
# Attribute tables
# ---------------------------------------------------------------------------

VOID_ELEMENTS: set[str] = {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "keygen",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
}

ATTRIBUTE_ALIASES: dict[str, str] = {
    "className": "class",
    "htmlFor": "for",
    "tabIndex": "tabindex",
    "readOnly": "readonly",
    "maxLength": "maxlength",
    "colSpan": "colspan",
    "rowSpan": "rowspan",
    "autoComplete": "autocomplete",
    "autoFocus": "autofocus",
    "acceptCharset": "accept-charset",
    "httpEquiv": "http-equiv",
    "crossOrigin": "crossorigin",
    "srcSet": "srcset",
    "encType": "enctype",
    "spellCheck": "spellcheck",
}

BOOLEAN_ATTRIBUTES: set[str] = {
    "allowFullScreen",
    "async",
    "autoFocus",
    "autoPlay",
    "checked",
    "controls",
    "default",
    "defer",
    "disabled",
    "formNoValidate",
    "hidden",
    "loop",
    "multiple",
    "muted",
    "noValidate",
    "open",
    "readOnly",
    "required",
    "reversed",
    "selected",
}

# CSS properties that take plain numbers (no "px" suffix)
UNITLESS_STYLES: set[str] = {
    "animationIterationCount",
    "columnCount",
    "flex",
    "flexGrow",
    "flexShrink",
    "fontWeight",
    "lineHeight",
    "opacity",
    "order",
    "orphans",
    "widows",
    "zIndex",
    "zoom",
}

INTERNAL_PROPS: set[str] = {
    "children",
    "dangerouslySetInnerHTML",
    "key",
    "ref",
    "suppressContentEditableWarning",
    "suppressHydrationWarning",
    "defaultValue",
    "defaultChecked",
}

_EVENT_HANDLER_RE = re.compile(r"^on[A-Z]")
_UPPERCASE_RE = re.compile(r"([A-Z])")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render_to_static_markup(node: Any) -> str:
    """
    Render an element tree to an HTML string.
    Pure function. No side effects. No IO.
    """
    parts: list[str] = []
    _render_node(node, parts)
    return "".join(parts)


def escape(text: str) -> str:
    """HTML-escape text and attribute values (quotes included)."""
    return _html_escape(text, quote=True)


def style_to_css(style: Any) -> str:
    """Serialize a style object: {fontSize: 12, color: 'red'} → "font-size:12px;color:red"."""
    if not isinstance(style, dict):
        return to_string(style)
    declarations = []
    for name, value in style.items():
        if is_nullish(value) or isinstance(value, bool) or value == "":
            continue
        if name.startswith("--"):
            prop = name
        else:
            prop = _UPPERCASE_RE.sub(r"-\1", name).lower()
            if prop.startswith("ms-"):
                prop = "-" + prop
        if is_number(value) and value != 0 and name not in UNITLESS_STYLES:
            css_value = f"{to_string(value)}px"
        else:
            css_value = to_string(value).strip()
        declarations.append(f"{prop}:{css_value}")
    return ";".join(declarations)


# ---------------------------------------------------------------------------
# Tree walk
# ---------------------------------------------------------------------------


def _render_node(node: Any, parts: list[str]) -> None:
    if is_nullish(node) or isinstance(node, bool):
        return

    if isinstance(node, str):
        parts.append(escape(node))
        return

    if isinstance(node, (int, float)):
        parts.append(escape(to_string(node)))
        return

    if isinstance(node, (list, tuple)):
        for child in node:
            _render_node(child, parts)
        return

    if isinstance(node, Element):
        _render_element(node, parts)
        return

    raise JSTypeError(
        f"Objects are not valid as a React child (found: {_describe(node)}). "
        "If you meant to render a collection of children, use an array instead."
    )


def _render_element(element: Element, parts: list[str]) -> None:
    type_ = element.type

    if isinstance(type_, str):
        _render_host(type_, element.props, parts)
        return

    if type_ is Fragment:
        _render_node(element.props.get("children", undefined), parts)
        return

    if is_component_class(type_):
        instance = type_(element.props)
        instance.props = element.props
        if getattr(instance, "state", None) is undefined:
            instance.state = None
        for hook in ("UNSAFE_componentWillMount", "componentWillMount"):
            method = getattr(instance, hook, None)
            if callable(method):
                method()
        _render_node(instance.render(), parts)
        return

    if callable(type_):
        _render_node(type_(element.props), parts)
        return

    raise JSTypeError(
        "Element type is invalid: expected a string (for built-in components) or a class/function "
        f"(for composite components) but got: {_describe(type_)}."
    )


def _render_host(tag: str, props: JSObject, parts: list[str]) -> None:
    parts.append(f"<{tag}")
    for name, value in props.items():
        attribute = _render_attribute(name, value)
        if attribute:
            parts.append(" ")
            parts.append(attribute)

    if tag in VOID_ELEMENTS:
        parts.append("/>")
        return

    parts.append(">")
    inner = props.get("dangerouslySetInnerHTML", undefined)
    if isinstance(inner, dict) and not is_nullish(inner.get("__html", undefined)):
        parts.append(to_string(inner["__html"]))
    elif tag == "textarea" and not is_nullish(props.get("value", undefined)):
        parts.append(escape(to_string(props["value"])))
    else:
        _render_node(props.get("children", undefined), parts)
    parts.append(f"</{tag}>")


def _render_attribute(name: str, value: Any) -> str:
    if name in INTERNAL_PROPS or _EVENT_HANDLER_RE.match(name):
        return ""
    if is_nullish(value) or (callable(value) and not isinstance(value, dict)):
        return ""

    attr = ATTRIBUTE_ALIASES.get(name, name)

    if name == "style":
        css = style_to_css(value)
        return f'style="{escape(css)}"' if css else ""

    if name in BOOLEAN_ATTRIBUTES:
        return f'{attr}=""' if truthy(value) else ""

    if isinstance(value, bool):
        if name.startswith(("data-", "aria-")):
            return f'{attr}="{to_string(value)}"'
        return ""

    return f'{attr}="{escape(to_string(value))}"'


def _describe(value: Any) -> str:
    if isinstance(value, dict):
        return "object with keys {" + ", ".join(str(k) for k in value.keys()) + "}"
    if isinstance(value, type) or callable(value):
        return display_name(value)
    return repr(value)
