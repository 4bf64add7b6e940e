"""
Playground Component Kit -- Markup Tests

Props become Semantic UI class names; unconsumed props pass through to the
rendered element; shorthand props build sub-components.
"""

from playground.kernel.elements import Component, create_element
from playground.kernel.renderer import render_to_static_markup
from playground.kernel.runtime import JSObject
from playground.library.react import react
from playground.library.ui import Button, Header, Icon, Image, Label, Menu, Message, Segment, cx, semantic_ui
from playground.library.wireframe import Wireframe


def markup(type_, props=None, *children):
    return render_to_static_markup(create_element(type_, JSObject(props or {}), *children))


class TestClassNames:
    def test_cx_skips_falsy_and_true(self):
        assert cx("ui", None, "", False, True, "button") == "ui button"

    def test_button_variations(self):
        assert markup(Button, {"primary": True, "size": "small"}, "Go") == (
            '<button class="ui small primary button">Go</button>'
        )

    def test_button_group_widths(self):
        assert markup(Button.Group, {"widths": 3}) == '<div class="ui three buttons"></div>'

    def test_user_class_name_is_appended(self):
        assert markup(Segment, {"className": "extra"}) == '<div class="ui segment extra"></div>'


class TestShorthand:
    def test_icon_only_button(self):
        assert markup(Button, {"icon": "user"}) == (
            '<button class="ui icon button"><i aria-hidden="true" class="user icon"></i></button>'
        )

    def test_message_header_and_list(self):
        assert markup(Message, {"header": "New", "list": ["a"]}) == (
            '<div class="ui message"><div class="content"><div class="header">New</div>'
            '<ul class="list"><li class="content">a</li></ul></div></div>'
        )

    def test_menu_items_from_names(self):
        result = markup(Menu, {"items": ["home", "messages"], "activeIndex": 1})
        assert result == (
            '<div class="ui menu"><div class="item">home</div><div class="active item">messages</div></div>'
        )

    def test_icon_create_accepts_elements(self):
        element = create_element(Icon, JSObject(name="mail"))
        assert Icon.create(element) is element


class TestPassThrough:
    def test_disabled_button_sets_attribute(self):
        assert markup(Button, {"disabled": True}, "x") == '<button class="ui disabled button" disabled="">x</button>'

    def test_unhandled_props_reach_the_element(self):
        assert markup(Image, {"src": "/a.png"}) == '<img src="/a.png" class="ui image"/>'

    def test_as_overrides_element_type(self):
        assert markup(Label, {"as": "a"}, "tag") == '<a class="ui label">tag</a>'

    def test_header_renders_as_div(self):
        assert markup(Header, None, "Title") == '<div class="ui header">Title</div>'


class TestNamespaces:
    def test_ui_namespace_exposes_component_base(self):
        assert semantic_ui.Component is Component
        assert semantic_ui.Button is Button
        assert semantic_ui.Menu.Item is Menu.Item

    def test_react_namespace(self):
        element = react.createElement("div", None, "x")
        assert react.isValidElement(element)
        assert react.Children.count(["a", None, ["b"]]) == 2

    def test_wireframe(self):
        result = render_to_static_markup(create_element(Wireframe, None))
        assert result.count("<img") == 6
        assert result.count("divider") == 5
        assert result.startswith('<div class="ui segment">')
