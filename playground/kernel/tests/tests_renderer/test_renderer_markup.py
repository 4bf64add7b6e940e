"""
Playground Renderer -- Static Markup Tests

Element trees serialize the way a static React render does: attribute
aliases, style objects, void elements, dropped handlers, escaped text.
"""

import pytest

from playground.kernel.elements import Component, Fragment, create_element
from playground.kernel.renderer import render_to_static_markup, style_to_css
from playground.kernel.runtime import JSObject, JSTypeError, undefined


def h(type_, props=None, *children):
    return create_element(type_, JSObject(props or {}), *children)


class TestHostElements:
    def test_empty_div(self):
        assert render_to_static_markup(h("div")) == "<div></div>"

    def test_class_name_and_html_for(self):
        markup = render_to_static_markup(h("label", {"className": "ui", "htmlFor": "name"}, "Name"))
        assert markup == '<label class="ui" for="name">Name</label>'

    def test_void_elements_self_close(self):
        assert render_to_static_markup(h("img", {"src": "/a.png"})) == '<img src="/a.png"/>'

    def test_text_is_escaped(self):
        assert render_to_static_markup(h("p", None, "<b> & \"q\"")) == "<p>&lt;b&gt; &amp; &quot;q&quot;</p>"

    def test_event_handlers_and_functions_are_dropped(self):
        markup = render_to_static_markup(h("button", {"onClick": lambda: None, "type": "button"}))
        assert markup == '<button type="button"></button>'

    def test_boolean_attributes(self):
        assert render_to_static_markup(h("input", {"disabled": True, "checked": False})) == '<input disabled=""/>'

    def test_non_boolean_attribute_with_bool_value_is_dropped(self):
        assert render_to_static_markup(h("div", {"active": True})) == "<div></div>"

    def test_aria_booleans_are_stringified(self):
        assert render_to_static_markup(h("i", {"aria-hidden": True})) == '<i aria-hidden="true"></i>'

    def test_null_undefined_and_booleans_render_nothing(self):
        assert render_to_static_markup(h("div", None, None, undefined, False, "x")) == "<div>x</div>"

    def test_numbers_render_as_text(self):
        assert render_to_static_markup(h("span", None, 2.0)) == "<span>2</span>"


class TestStyles:
    def test_style_object(self):
        assert style_to_css({"fontSize": 12, "color": "red"}) == "font-size:12px;color:red"

    def test_unitless_and_zero(self):
        assert style_to_css({"opacity": 0.5, "margin": 0}) == "opacity:0.5;margin:0"

    def test_style_attribute(self):
        markup = render_to_static_markup(h("div", {"style": {"marginTop": 4}}))
        assert markup == '<div style="margin-top:4px"></div>'


class TestComposites:
    def test_function_component_receives_props(self):
        def Greeting(props):
            return h("p", None, "Hello ", props["name"])

        assert render_to_static_markup(h(Greeting, {"name": "Ada"})) == "<p>Hello Ada</p>"

    def test_class_component_with_state(self):
        class Counter(Component):
            def __init__(self, props=undefined, *args):
                super().__init__(props)
                self.state = JSObject(count=3)

            def render(self):
                return h("span", None, self.state["count"])

        assert render_to_static_markup(h(Counter)) == "<span>3</span>"

    def test_fragment_and_arrays_flatten(self):
        tree = h(Fragment, None, h("a"), [h("b"), h("i")])
        assert render_to_static_markup(tree) == "<a></a><b></b><i></i>"

    def test_default_props(self):
        class Tag(Component):
            defaultProps = JSObject(label="default")

            def render(self):
                return h("em", None, self.props["label"])

        assert render_to_static_markup(h(Tag)) == "<em>default</em>"

    def test_object_child_raises(self):
        with pytest.raises(JSTypeError, match="Objects are not valid as a React child"):
            render_to_static_markup(h("div", None, JSObject(a=1)))


class TestDeterminism:
    def test_same_tree_same_markup(self):
        tree = h("ul", {"className": "list"}, *[h("li", {"key": i}, f"item {i}") for i in range(5)])
        assert render_to_static_markup(tree) == render_to_static_markup(tree)
