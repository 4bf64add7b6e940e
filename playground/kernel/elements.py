"""
Playground Kernel — Element model

The component framework examples are written against: immutable elements
describing what to render, class components with props/state, function
components, fragments. Mirrors the parts of React that static rendering
needs; there is no reconciliation or lifecycle beyond construction and
`componentWillMount`.
"""

from __future__ import annotations

from typing import Any, Callable

from playground.kernel.runtime import (
    JSObject,
    JSTypeError,
    call_callback,
    is_nullish,
    undefined,
)

# Props the element itself consumes; never passed to the component.
RESERVED_PROPS = ("key", "ref")


class _FragmentType:
    """Type marker for `<>...</>`."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "Fragment"


Fragment = _FragmentType()


class Element:
    """A description of one node of UI: type + props (+ key)."""

    __slots__ = ("type", "props", "key", "ref")

    def __init__(self, type_: Any, props: JSObject, key: Any = None, ref: Any = None) -> None:
        self.type = type_
        self.props = props
        self.key = key
        self.ref = ref

    def __repr__(self) -> str:
        return f"Element({display_name(self.type)!r}, props={list(self.props.keys())})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.type is other.type and self.key == other.key and self.props == other.props

    __hash__ = object.__hash__


class Component:
    """
    Base class for class components.

    Subclasses implement render(). Constructed with the element's props at
    render time; setState merges into state immediately (there is no update
    cycle in static rendering).
    """

    defaultProps: JSObject | None = None

    def __init__(self, props: Any = undefined, *_args: Any) -> None:
        self.props = JSObject() if is_nullish(props) else props
        self.state: Any = None

    def setState(self, update: Any, callback: Any = undefined) -> Any:
        if callable(update):
            update = call_callback(update, self.state, self.props)
        if not is_nullish(update):
            merged = JSObject(self.state or {})
            merged.update(update)
            self.state = merged
        if callable(callback):
            callback()
        return undefined

    def forceUpdate(self, callback: Any = undefined) -> Any:
        if callable(callback):
            callback()
        return undefined

    def render(self) -> Any:
        raise JSTypeError(f"{type(self).__name__}(...): No `render` method found on the returned component instance")


class PureComponent(Component):
    """Same as Component for static rendering."""


def display_name(type_: Any) -> str:
    if isinstance(type_, str):
        return type_
    if type_ is Fragment:
        return "Fragment"
    return getattr(type_, "displayName", None) or getattr(type_, "__name__", type(type_).__name__)


def is_valid_element(value: Any) -> bool:
    return isinstance(value, Element)


def is_component_class(type_: Any) -> bool:
    return isinstance(type_, type) and callable(getattr(type_, "render", None))


def create_element(type_: Any, props: dict[str, Any] | None = None, *children: Any) -> Element:
    """
    Build an element.

    `key` and `ref` are lifted out of props, children land in props.children
    (a single child unwrapped), and the type's defaultProps fill in any prop
    that is undefined.
    """
    if is_nullish(type_) or isinstance(type_, (bool, int, float)):
        raise JSTypeError(
            f"Element type is invalid: expected a string (for built-in components) or a class/function "
            f"(for composite components) but got: {type_!r}."
        )

    resolved = JSObject()
    key: Any = None
    ref: Any = None
    if not is_nullish(props):
        for name, value in props.items():
            if name == "key":
                key = None if is_nullish(value) else str(value)
            elif name == "ref":
                ref = value
            else:
                resolved[name] = value

    if len(children) == 1:
        resolved["children"] = children[0]
    elif len(children) > 1:
        resolved["children"] = list(children)

    defaults = getattr(type_, "defaultProps", None)
    if isinstance(defaults, dict):
        for name, value in defaults.items():
            if resolved.get(name, undefined) is undefined:
                resolved[name] = value

    return Element(type_, resolved, key=key, ref=ref)


def clone_element(element: Element, props: dict[str, Any] | None = None, *children: Any) -> Element:
    """Copy an element, merging new props over the old ones."""
    if not is_valid_element(element):
        raise JSTypeError(f"React.cloneElement(...): The argument must be a React element, but you passed {element!r}.")
    merged = JSObject(element.props)
    key = element.key
    ref = element.ref
    if not is_nullish(props):
        for name, value in props.items():
            if name == "key":
                key = None if is_nullish(value) else str(value)
            elif name == "ref":
                ref = value
            else:
                merged[name] = value
    if len(children) == 1:
        merged["children"] = children[0]
    elif len(children) > 1:
        merged["children"] = list(children)
    return Element(element.type, merged, key=key, ref=ref)


# ---------------------------------------------------------------------------
# Children helpers
# ---------------------------------------------------------------------------


def _flatten(children: Any) -> list[Any]:
    if isinstance(children, (list, tuple)):
        out: list[Any] = []
        for child in children:
            out.extend(_flatten(child))
        return out
    if is_nullish(children) or isinstance(children, bool):
        return []
    return [children]


class Children:
    """`React.Children` utilities over the opaque props.children value."""

    @staticmethod
    def toArray(children: Any, *_: Any) -> list[Any]:
        return _flatten(children)

    @staticmethod
    def count(children: Any, *_: Any) -> int:
        return len(_flatten(children))

    @staticmethod
    def map(children: Any, fn: Callable[..., Any], *_: Any) -> Any:
        if is_nullish(children):
            return children
        return [call_callback(fn, child, i) for i, child in enumerate(_flatten(children))]

    @staticmethod
    def forEach(children: Any, fn: Callable[..., Any], *_: Any) -> Any:
        for i, child in enumerate(_flatten(children)):
            call_callback(fn, child, i)
        return undefined

    @staticmethod
    def only(children: Any, *_: Any) -> Element:
        if not is_valid_element(children):
            raise JSTypeError("React.Children.only expected to receive a single React element child.")
        return children
