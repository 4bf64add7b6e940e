"""
Component kit exposed to examples as SEMANTIC_UI_REACT.

Each component turns its props into Semantic UI class names
(`<Button primary size='small'>` → `<button class="ui small primary button">`)
and passes every prop it does not consume through to the rendered element.
Sub-components hang off their parent (`Button.Group`, `Grid.Column`).
Props that accept shorthand (`icon='user'`, `items={['a', 'b']}`) take a
string, a props object or a ready element.
"""

from __future__ import annotations

from types import MappingProxyType, SimpleNamespace
from typing import Any, Callable

import pydash

from playground.kernel.elements import Component, create_element, is_valid_element
from playground.kernel.runtime import JSObject, is_nullish, is_number, to_string, truthy, undefined

# Props every kit component consumes.
BASE_HANDLED = frozenset({"as", "children", "className", "content"})

NUMBER_WORDS = (
    "",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
)


# ---------------------------------------------------------------------------
# Class name helpers
# ---------------------------------------------------------------------------


def cx(*parts: Any) -> str:
    return " ".join(to_string(p) for p in parts if truthy(p) and p is not True)


def key_only(value: Any, key: str) -> str | None:
    return key if truthy(value) else None


def value_and_key(value: Any, key: str) -> str | None:
    if not truthy(value) or value is True:
        return None
    return f"{to_string(value)} {key}"


def key_or_value_and_key(value: Any, key: str) -> str | None:
    if value is True:
        return key
    return value_and_key(value, key)


def text_align(value: Any) -> str | None:
    if not truthy(value):
        return None
    return "justified" if value == "justified" else f"{to_string(value)} aligned"


def vertical_align(value: Any) -> str | None:
    return f"{to_string(value)} aligned" if truthy(value) else None


def number_to_word(value: Any) -> str:
    if is_number(value) or (isinstance(value, str) and value.isdigit()):
        return NUMBER_WORDS[int(value)]
    return to_string(value)


def width_prop(value: Any, suffix: str = "", can_equal: bool = False) -> str | None:
    if not truthy(value):
        return None
    if can_equal and value == "equal":
        return "equal width"
    return f"{number_to_word(value)} {suffix}".strip()


def create_shorthand(component: Any, value: Any, to_props: Callable[[Any], dict[str, Any]]) -> Any:
    """Element for a shorthand prop value, or None when there is nothing to render."""
    if is_nullish(value) or isinstance(value, bool):
        return None
    if is_valid_element(value):
        return value
    if isinstance(value, dict):
        return create_element(component, value)
    return create_element(component, to_props(value))


def _content_props(value: Any) -> dict[str, Any]:
    return {"content": value}


# ---------------------------------------------------------------------------
# Base component
# ---------------------------------------------------------------------------


class KitComponent(Component):
    """
    Renders `<as {...unhandled} className={classes}>{children or content}</as>`.
    Subclasses declare the props they consume and the class names they add.
    """

    as_ = "div"
    handled: frozenset[str] = frozenset()
    extra_props: MappingProxyType[str, Any] = MappingProxyType({})

    def prop(self, name: str) -> Any:
        return self.props.get(name, undefined)

    def classes(self) -> list[Any]:
        return []

    def element_type(self) -> Any:
        override = self.prop("as")
        return self.as_ if is_nullish(override) else override

    def render_content(self) -> Any:
        children = self.prop("children")
        if not is_nullish(children):
            return children
        return self.prop("content")

    def render(self) -> Any:
        rest = JSObject(
            (name, value)
            for name, value in self.props.items()
            if name not in BASE_HANDLED and name not in self.handled
        )
        rest.update(self.extra_props)
        class_name = cx(*self.classes(), self.prop("className"))
        if class_name:
            rest["className"] = class_name
        content = self.render_content()
        if is_nullish(content):
            return create_element(self.element_type(), rest)
        if isinstance(content, list):
            return create_element(self.element_type(), rest, *content)
        return create_element(self.element_type(), rest, content)

    @classmethod
    def create(cls, value: Any, *_: Any) -> Any:
        return create_shorthand(cls, value, _content_props)


# ---------------------------------------------------------------------------
# Icon
# ---------------------------------------------------------------------------


class Icon(KitComponent):
    as_ = "i"
    handled = frozenset(
        {"name", "color", "size", "bordered", "circular", "disabled", "fitted", "flipped",
         "inverted", "link", "loading", "corner", "rotated"}
    )
    extra_props = MappingProxyType({"aria-hidden": True})

    def classes(self) -> list[Any]:
        p = self.prop
        return [
            p("color"),
            p("name"),
            p("size"),
            key_only(p("bordered"), "bordered"),
            key_only(p("circular"), "circular"),
            key_only(p("disabled"), "disabled"),
            key_only(p("fitted"), "fitted"),
            key_only(p("inverted"), "inverted"),
            key_only(p("link"), "link"),
            key_only(p("loading"), "loading"),
            key_or_value_and_key(p("corner"), "corner"),
            value_and_key(p("flipped"), "flipped"),
            value_and_key(p("rotated"), "rotated"),
            "icon",
        ]

    @classmethod
    def create(cls, value: Any, *_: Any) -> Any:
        return create_shorthand(cls, value, lambda name: {"name": name})


class IconGroup(KitComponent):
    as_ = "i"
    handled = frozenset({"size"})

    def classes(self) -> list[Any]:
        return [self.prop("size"), "icons"]


Icon.Group = IconGroup


# ---------------------------------------------------------------------------
# Button
# ---------------------------------------------------------------------------


class Button(KitComponent):
    as_ = "button"
    handled = frozenset(
        {"active", "basic", "circular", "color", "compact", "disabled", "floated", "fluid", "icon",
         "inverted", "labelPosition", "loading", "negative", "positive", "primary", "secondary",
         "size", "toggle"}
    )

    def classes(self) -> list[Any]:
        p = self.prop
        icon = p("icon")
        icon_only = icon is True or (truthy(icon) and is_nullish(p("children")) and is_nullish(p("content")))
        return [
            "ui",
            p("color"),
            p("size"),
            key_only(p("active"), "active"),
            key_only(p("basic"), "basic"),
            key_only(p("circular"), "circular"),
            key_only(p("compact"), "compact"),
            key_only(p("fluid"), "fluid"),
            key_only(icon_only, "icon"),
            key_only(p("inverted"), "inverted"),
            key_only(p("loading"), "loading"),
            key_only(p("negative"), "negative"),
            key_only(p("positive"), "positive"),
            key_only(p("primary"), "primary"),
            key_only(p("secondary"), "secondary"),
            key_only(p("toggle"), "toggle"),
            key_only(p("disabled"), "disabled"),
            key_or_value_and_key(p("labelPosition"), "labeled"),
            value_and_key(p("floated"), "floated"),
            "button",
        ]

    def render_content(self) -> Any:
        children = self.prop("children")
        if not is_nullish(children):
            return children
        icon = Icon.create(self.prop("icon"))
        content = self.prop("content")
        parts = [part for part in (icon, content) if not is_nullish(part)]
        return parts or None

    def render(self) -> Any:
        element = super().render()
        if truthy(self.prop("disabled")) and self.element_type() == "button":
            element.props["disabled"] = True
        return element


class ButtonGroup(KitComponent):
    handled = frozenset({"basic", "color", "compact", "fluid", "icon", "labeled", "size", "vertical", "widths"})

    def classes(self) -> list[Any]:
        p = self.prop
        return [
            "ui",
            p("color"),
            p("size"),
            key_only(p("basic"), "basic"),
            key_only(p("compact"), "compact"),
            key_only(p("fluid"), "fluid"),
            key_only(p("icon"), "icon"),
            key_only(p("labeled"), "labeled"),
            key_only(p("vertical"), "vertical"),
            width_prop(p("widths")),
            "buttons",
        ]


class ButtonOr(KitComponent):
    handled = frozenset({"text"})

    def classes(self) -> list[Any]:
        return ["or"]

    def render(self) -> Any:
        element = super().render()
        if not is_nullish(self.prop("text")):
            element.props["data-text"] = self.prop("text")
        return element


Button.Group = ButtonGroup
Button.Or = ButtonOr


# ---------------------------------------------------------------------------
# Containers and layout
# ---------------------------------------------------------------------------


class Segment(KitComponent):
    handled = frozenset(
        {"attached", "basic", "circular", "clearing", "color", "compact", "disabled", "floated",
         "inverted", "loading", "padded", "piled", "raised", "secondary", "size", "stacked",
         "tertiary", "textAlign", "vertical"}
    )

    def classes(self) -> list[Any]:
        p = self.prop
        return [
            "ui",
            p("color"),
            p("size"),
            key_only(p("basic"), "basic"),
            key_only(p("circular"), "circular"),
            key_only(p("clearing"), "clearing"),
            key_only(p("compact"), "compact"),
            key_only(p("disabled"), "disabled"),
            key_only(p("inverted"), "inverted"),
            key_only(p("loading"), "loading"),
            key_only(p("piled"), "piled"),
            key_only(p("raised"), "raised"),
            key_only(p("secondary"), "secondary"),
            key_only(p("stacked"), "stacked"),
            key_only(p("tertiary"), "tertiary"),
            key_only(p("vertical"), "vertical"),
            key_or_value_and_key(p("attached"), "attached"),
            key_or_value_and_key(p("padded"), "padded"),
            text_align(p("textAlign")),
            value_and_key(p("floated"), "floated"),
            "segment",
        ]


class SegmentGroup(KitComponent):
    handled = frozenset({"compact", "horizontal", "piled", "raised", "size", "stacked"})

    def classes(self) -> list[Any]:
        p = self.prop
        return [
            "ui",
            p("size"),
            key_only(p("compact"), "compact"),
            key_only(p("horizontal"), "horizontal"),
            key_only(p("piled"), "piled"),
            key_only(p("raised"), "raised"),
            key_only(p("stacked"), "stacked"),
            "segments",
        ]


Segment.Group = SegmentGroup


class Container(KitComponent):
    handled = frozenset({"fluid", "text", "textAlign"})

    def classes(self) -> list[Any]:
        p = self.prop
        return ["ui", key_only(p("text"), "text"), key_only(p("fluid"), "fluid"), text_align(p("textAlign")), "container"]


class Divider(KitComponent):
    handled = frozenset({"clearing", "fitted", "hidden", "horizontal", "inverted", "section", "vertical"})

    def classes(self) -> list[Any]:
        p = self.prop
        return [
            "ui",
            key_only(p("clearing"), "clearing"),
            key_only(p("fitted"), "fitted"),
            key_only(p("hidden"), "hidden"),
            key_only(p("horizontal"), "horizontal"),
            key_only(p("inverted"), "inverted"),
            key_only(p("section"), "section"),
            key_only(p("vertical"), "vertical"),
            "divider",
        ]


class Grid(KitComponent):
    handled = frozenset(
        {"celled", "centered", "columns", "container", "divided", "doubling", "inverted", "padded",
         "relaxed", "reversed", "stackable", "stretched", "textAlign", "verticalAlign"}
    )

    def classes(self) -> list[Any]:
        p = self.prop
        return [
            "ui",
            key_only(p("centered"), "centered"),
            key_only(p("container"), "container"),
            key_only(p("doubling"), "doubling"),
            key_only(p("inverted"), "inverted"),
            key_only(p("stackable"), "stackable"),
            key_only(p("stretched"), "stretched"),
            key_or_value_and_key(p("celled"), "celled"),
            key_or_value_and_key(p("divided"), "divided"),
            key_or_value_and_key(p("padded"), "padded"),
            key_or_value_and_key(p("relaxed"), "relaxed"),
            value_and_key(p("reversed"), "reversed"),
            text_align(p("textAlign")),
            vertical_align(p("verticalAlign")),
            width_prop(p("columns"), "column", can_equal=True),
            "grid",
        ]


class GridRow(KitComponent):
    handled = frozenset({"centered", "color", "columns", "divided", "only", "stretched", "textAlign", "verticalAlign"})

    def classes(self) -> list[Any]:
        p = self.prop
        return [
            p("color"),
            key_only(p("centered"), "centered"),
            key_only(p("divided"), "divided"),
            key_only(p("stretched"), "stretched"),
            value_and_key(p("only"), "only"),
            text_align(p("textAlign")),
            vertical_align(p("verticalAlign")),
            width_prop(p("columns"), "column", can_equal=True),
            "row",
        ]


class GridColumn(KitComponent):
    handled = frozenset(
        {"color", "computer", "floated", "largeScreen", "mobile", "only", "stretched", "tablet",
         "textAlign", "verticalAlign", "widescreen", "width"}
    )

    def classes(self) -> list[Any]:
        p = self.prop
        return [
            p("color"),
            key_only(p("stretched"), "stretched"),
            value_and_key(p("only"), "only"),
            text_align(p("textAlign")),
            value_and_key(p("floated"), "floated"),
            vertical_align(p("verticalAlign")),
            width_prop(p("computer"), "wide computer"),
            width_prop(p("largeScreen"), "wide large screen"),
            width_prop(p("mobile"), "wide mobile"),
            width_prop(p("tablet"), "wide tablet"),
            width_prop(p("widescreen"), "wide widescreen"),
            width_prop(p("width"), "wide"),
            "column",
        ]


Grid.Row = GridRow
Grid.Column = GridColumn


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------


class HeaderContent(KitComponent):
    def classes(self) -> list[Any]:
        return ["content"]


class HeaderSubheader(KitComponent):
    def classes(self) -> list[Any]:
        return ["sub", "header"]


class Header(KitComponent):
    handled = frozenset(
        {"attached", "block", "color", "disabled", "dividing", "floated", "icon", "image", "inverted",
         "size", "sub", "subheader", "textAlign"}
    )

    def classes(self) -> list[Any]:
        p = self.prop
        return [
            "ui",
            p("color"),
            p("size"),
            key_only(p("block"), "block"),
            key_only(p("disabled"), "disabled"),
            key_only(p("dividing"), "dividing"),
            value_and_key(p("floated"), "floated"),
            key_only(p("icon") is True, "icon"),
            key_only(p("image") is True, "image"),
            key_only(p("inverted"), "inverted"),
            key_only(p("sub"), "sub"),
            key_or_value_and_key(p("attached"), "attached"),
            text_align(p("textAlign")),
            "header",
        ]

    def render_content(self) -> Any:
        children = self.prop("children")
        if not is_nullish(children):
            return children
        icon = Icon.create(self.prop("icon"))
        subheader = HeaderSubheader.create(self.prop("subheader"))
        content = self.prop("content")
        if icon is None:
            parts = [part for part in (content, subheader) if not is_nullish(part)]
            return parts or None
        inner = [part for part in (content, subheader) if not is_nullish(part)]
        if not inner:
            return icon
        return [icon, create_element(HeaderContent, None, *inner)]


Header.Content = HeaderContent
Header.Subheader = HeaderSubheader


# ---------------------------------------------------------------------------
# Label
# ---------------------------------------------------------------------------


class LabelDetail(KitComponent):
    def classes(self) -> list[Any]:
        return ["detail"]


class Label(KitComponent):
    handled = frozenset(
        {"active", "attached", "basic", "circular", "color", "corner", "detail", "empty", "floating",
         "horizontal", "icon", "image", "pointing", "prompt", "ribbon", "size", "tag"}
    )

    def classes(self) -> list[Any]:
        p = self.prop
        pointing = p("pointing")
        pointing_class = None
        if pointing is True:
            pointing_class = "pointing"
        elif pointing in ("left", "right"):
            pointing_class = f"{pointing} pointing"
        elif pointing in ("above", "below"):
            pointing_class = f"pointing {pointing}"
        return [
            "ui",
            p("color"),
            pointing_class,
            p("size"),
            key_only(p("active"), "active"),
            key_only(p("basic"), "basic"),
            key_only(p("circular"), "circular"),
            key_only(p("empty"), "empty"),
            key_only(p("floating"), "floating"),
            key_only(p("horizontal"), "horizontal"),
            key_only(p("image") is True, "image"),
            key_only(p("prompt"), "prompt"),
            key_only(p("tag"), "tag"),
            key_or_value_and_key(p("corner"), "corner"),
            key_or_value_and_key(p("ribbon"), "ribbon"),
            value_and_key(p("attached"), "attached"),
            "label",
        ]

    def render_content(self) -> Any:
        children = self.prop("children")
        if not is_nullish(children):
            return children
        parts = [
            Icon.create(self.prop("icon")),
            self.prop("content"),
            LabelDetail.create(self.prop("detail")),
        ]
        parts = [part for part in parts if not is_nullish(part)]
        return parts or None


class LabelGroup(KitComponent):
    handled = frozenset({"circular", "color", "size", "tag"})

    def classes(self) -> list[Any]:
        p = self.prop
        return ["ui", p("color"), p("size"), key_only(p("circular"), "circular"), key_only(p("tag"), "tag"), "labels"]


Label.Detail = LabelDetail
Label.Group = LabelGroup


# ---------------------------------------------------------------------------
# List
# ---------------------------------------------------------------------------


class ListContent(KitComponent):
    handled = frozenset({"description", "floated", "header", "verticalAlign"})

    def classes(self) -> list[Any]:
        p = self.prop
        return [value_and_key(p("floated"), "floated"), vertical_align(p("verticalAlign")), "content"]

    def render_content(self) -> Any:
        children = self.prop("children")
        if not is_nullish(children):
            return children
        parts = [
            ListHeader.create(self.prop("header")),
            ListDescription.create(self.prop("description")),
            self.prop("content"),
        ]
        parts = [part for part in parts if not is_nullish(part)]
        return parts or None


class ListHeader(KitComponent):
    def classes(self) -> list[Any]:
        return ["header"]


class ListDescription(KitComponent):
    def classes(self) -> list[Any]:
        return ["description"]


class ListIcon(Icon):
    handled = Icon.handled | {"verticalAlign"}

    def classes(self) -> list[Any]:
        return [*super().classes()[:-1], vertical_align(self.prop("verticalAlign")), "icon"]


class ListItem(KitComponent):
    handled = frozenset({"active", "description", "disabled", "header", "icon", "image", "value"})
    extra_props = MappingProxyType({"role": "listitem"})

    def element_type(self) -> Any:
        override = self.prop("as")
        if not is_nullish(override):
            return override
        return "a" if truthy(self.prop("href")) else "div"

    def classes(self) -> list[Any]:
        p = self.prop
        return [key_only(p("active"), "active"), key_only(p("disabled"), "disabled"), "item"]

    def render_content(self) -> Any:
        children = self.prop("children")
        if not is_nullish(children):
            return children
        icon = ListIcon.create(self.prop("icon"))
        header = self.prop("header")
        description = self.prop("description")
        content = self.prop("content")
        if icon is None and is_nullish(header) and is_nullish(description):
            return content
        if is_nullish(header) and is_nullish(description):
            return [icon, content] if not is_nullish(content) else icon
        body = create_element(ListContent, {"header": header, "description": description, "content": content})
        return [part for part in (icon, body) if part is not None]


class List(KitComponent):
    handled = frozenset(
        {"animated", "bulleted", "celled", "divided", "floated", "horizontal", "inverted", "items",
         "link", "ordered", "relaxed", "selection", "size", "verticalAlign"}
    )
    extra_props = MappingProxyType({"role": "list"})

    def classes(self) -> list[Any]:
        p = self.prop
        return [
            "ui",
            p("size"),
            key_only(p("animated"), "animated"),
            key_only(p("bulleted"), "bulleted"),
            key_only(p("celled"), "celled"),
            key_only(p("divided"), "divided"),
            key_only(p("horizontal"), "horizontal"),
            key_only(p("inverted"), "inverted"),
            key_only(p("link"), "link"),
            key_only(p("ordered"), "ordered"),
            key_only(p("selection"), "selection"),
            key_or_value_and_key(p("relaxed"), "relaxed"),
            value_and_key(p("floated"), "floated"),
            vertical_align(p("verticalAlign")),
            "list",
        ]

    def render_content(self) -> Any:
        children = self.prop("children")
        if not is_nullish(children):
            return children
        items = self.prop("items")
        if isinstance(items, list):
            return [ListItem.create(item) for item in items]
        return self.prop("content")


List.Content = ListContent
List.Description = ListDescription
List.Header = ListHeader
List.Icon = ListIcon
List.Item = ListItem


# ---------------------------------------------------------------------------
# Menu
# ---------------------------------------------------------------------------


class MenuItem(KitComponent):
    handled = frozenset({"active", "color", "disabled", "fitted", "header", "icon", "index", "link", "name", "position"})

    def element_type(self) -> Any:
        override = self.prop("as")
        if not is_nullish(override):
            return override
        return "a" if callable(self.prop("onClick")) or truthy(self.prop("href")) else "div"

    def classes(self) -> list[Any]:
        p = self.prop
        icon = p("icon")
        icon_only = icon is True or (truthy(icon) and is_nullish(p("content")) and is_nullish(p("name")) and is_nullish(p("children")))
        return [
            p("color"),
            p("position"),
            key_only(p("active"), "active"),
            key_only(p("disabled"), "disabled"),
            key_only(icon_only, "icon"),
            key_only(p("header"), "header"),
            key_only(p("link"), "link"),
            key_or_value_and_key(p("fitted"), "fitted"),
            "item",
        ]

    def render_content(self) -> Any:
        children = self.prop("children")
        if not is_nullish(children):
            return children
        icon = Icon.create(self.prop("icon"))
        content = self.prop("content")
        if is_nullish(content) and not is_nullish(self.prop("name")):
            content = pydash.start_case(to_string(self.prop("name")))
        parts = [part for part in (icon, content) if not is_nullish(part)]
        return parts or None

    @classmethod
    def create(cls, value: Any, *_: Any) -> Any:
        return create_shorthand(cls, value, lambda name: {"content": name, "name": name})


class MenuMenu(KitComponent):
    handled = frozenset({"position"})

    def classes(self) -> list[Any]:
        return [self.prop("position"), "menu"]


class MenuHeader(KitComponent):
    def classes(self) -> list[Any]:
        return ["header"]


class Menu(KitComponent):
    handled = frozenset(
        {"activeIndex", "attached", "borderless", "color", "compact", "fixed", "floated", "fluid",
         "icon", "inverted", "items", "pagination", "pointing", "secondary", "size", "stackable",
         "tabular", "text", "vertical", "widths"}
    )

    def classes(self) -> list[Any]:
        p = self.prop
        return [
            "ui",
            p("color"),
            p("size"),
            key_only(p("borderless"), "borderless"),
            key_only(p("compact"), "compact"),
            key_only(p("fluid"), "fluid"),
            key_only(p("inverted"), "inverted"),
            key_only(p("pagination"), "pagination"),
            key_only(p("pointing"), "pointing"),
            key_only(p("secondary"), "secondary"),
            key_only(p("stackable"), "stackable"),
            key_only(p("text"), "text"),
            key_only(p("vertical"), "vertical"),
            key_or_value_and_key(p("attached"), "attached"),
            key_or_value_and_key(p("floated"), "floated"),
            key_or_value_and_key(p("icon"), "icon"),
            key_or_value_and_key(p("tabular"), "tabular"),
            value_and_key(p("fixed"), "fixed"),
            width_prop(p("widths"), "item"),
            "menu",
        ]

    def render_content(self) -> Any:
        children = self.prop("children")
        if not is_nullish(children):
            return children
        items = self.prop("items")
        if not isinstance(items, list):
            return self.prop("content")
        active = self.prop("activeIndex")
        out = []
        for position, item in enumerate(items):
            element = MenuItem.create(item)
            if element is not None and active == position:
                element.props["active"] = True
            out.append(element)
        return out


Menu.Item = MenuItem
Menu.Menu = MenuMenu
Menu.Header = MenuHeader


# ---------------------------------------------------------------------------
# Message
# ---------------------------------------------------------------------------


class MessageHeader(KitComponent):
    def classes(self) -> list[Any]:
        return ["header"]


class MessageContent(KitComponent):
    def classes(self) -> list[Any]:
        return ["content"]


class MessageItem(KitComponent):
    as_ = "li"

    def classes(self) -> list[Any]:
        return ["content"]


class MessageList(KitComponent):
    as_ = "ul"
    handled = frozenset({"items"})

    def classes(self) -> list[Any]:
        return ["list"]

    def render_content(self) -> Any:
        children = self.prop("children")
        if not is_nullish(children):
            return children
        items = self.prop("items")
        return [MessageItem.create(item) for item in items] if isinstance(items, list) else None

    @classmethod
    def create(cls, value: Any, *_: Any) -> Any:
        return create_shorthand(cls, value, lambda items: {"items": items})


class Message(KitComponent):
    handled = frozenset(
        {"attached", "color", "compact", "error", "floating", "header", "hidden", "icon", "info",
         "list", "negative", "positive", "size", "success", "visible", "warning"}
    )

    def classes(self) -> list[Any]:
        p = self.prop
        return [
            "ui",
            p("color"),
            p("size"),
            key_only(p("compact"), "compact"),
            key_only(p("error"), "error"),
            key_only(p("floating"), "floating"),
            key_only(p("hidden"), "hidden"),
            key_only(p("icon"), "icon"),
            key_only(p("info"), "info"),
            key_only(p("negative"), "negative"),
            key_only(p("positive"), "positive"),
            key_only(p("success"), "success"),
            key_only(p("visible"), "visible"),
            key_only(p("warning"), "warning"),
            key_or_value_and_key(p("attached"), "attached"),
            "message",
        ]

    def render_content(self) -> Any:
        children = self.prop("children")
        if not is_nullish(children):
            return children
        icon = Icon.create(self.prop("icon")) if self.prop("icon") is not True else None
        inner = [
            MessageHeader.create(self.prop("header")),
            MessageList.create(self.prop("list")),
            create_shorthand("p", self.prop("content"), lambda text: {"children": text}),
        ]
        inner = [part for part in inner if part is not None]
        body = create_element(MessageContent, None, *inner) if inner else None
        parts = [part for part in (icon, body) if part is not None]
        return parts or None


Message.Header = MessageHeader
Message.Content = MessageContent
Message.List = MessageList
Message.Item = MessageItem


# ---------------------------------------------------------------------------
# Image
# ---------------------------------------------------------------------------


class Image(KitComponent):
    as_ = "img"
    handled = frozenset(
        {"avatar", "bordered", "centered", "circular", "disabled", "floated", "fluid", "hidden",
         "inline", "rounded", "size", "spaced", "verticalAlign", "wrapped"}
    )

    def element_type(self) -> Any:
        override = self.prop("as")
        if not is_nullish(override):
            return override
        if truthy(self.prop("wrapped")) or not is_nullish(self.prop("children")):
            return "div"
        return "img"

    def classes(self) -> list[Any]:
        p = self.prop
        return [
            "ui",
            p("size"),
            key_only(p("avatar"), "avatar"),
            key_only(p("bordered"), "bordered"),
            key_only(p("circular"), "circular"),
            key_only(p("centered"), "centered"),
            key_only(p("disabled"), "disabled"),
            key_only(p("fluid"), "fluid"),
            key_only(p("hidden"), "hidden"),
            key_only(p("inline"), "inline"),
            key_only(p("rounded"), "rounded"),
            key_or_value_and_key(p("spaced"), "spaced"),
            value_and_key(p("floated"), "floated"),
            vertical_align(p("verticalAlign")),
            "image",
        ]

    def render(self) -> Any:
        if self.element_type() != "div" or not is_nullish(self.prop("children")):
            return super().render()
        # Wrapped image: the <img> keeps the image attributes, the wrapper the classes
        image_props = JSObject(
            (name, value) for name, value in self.props.items() if name in ("src", "alt", "width", "height")
        )
        wrapper = JSObject(
            (name, value)
            for name, value in self.props.items()
            if name not in BASE_HANDLED and name not in self.handled and name not in image_props
        )
        class_name = cx(*self.classes(), self.prop("className"))
        if class_name:
            wrapper["className"] = class_name
        return create_element("div", wrapper, create_element("img", image_props))

    @classmethod
    def create(cls, value: Any, *_: Any) -> Any:
        return create_shorthand(cls, value, lambda src: {"src": src})


class ImageGroup(KitComponent):
    handled = frozenset({"size"})

    def classes(self) -> list[Any]:
        return ["ui", self.prop("size"), "images"]


Image.Group = ImageGroup


# ---------------------------------------------------------------------------
# Visibility
# ---------------------------------------------------------------------------


class Visibility(KitComponent):
    """Scroll-tracking wrapper; statically it is just its children in a div."""

    handled = frozenset(
        {"context", "continuous", "fireOnMount", "offset", "once", "onBottomPassed", "onBottomVisible",
         "onOnScreen", "onPassing", "onTopPassed", "onTopVisible", "onUpdate", "updateOn"}
    )


COMPONENTS: dict[str, type[KitComponent]] = {
    "Button": Button,
    "Container": Container,
    "Divider": Divider,
    "Grid": Grid,
    "Header": Header,
    "Icon": Icon,
    "Image": Image,
    "Label": Label,
    "List": List,
    "Menu": Menu,
    "Message": Message,
    "Segment": Segment,
    "Visibility": Visibility,
}

semantic_ui = SimpleNamespace(**COMPONENTS, Component=Component)
