"""
Playground Kernel — JS runtime semantics

Transpiled example code runs as plain Python, but it still has to behave like
the JavaScript it was written in: `undefined` next to `null`, JS truthiness,
`+` that concatenates strings, `.map()` on arrays, `.length` on strings,
property reads that yield `undefined` instead of raising.

The transpiler emits calls into this module through the `__rt__` name, so
everything public here is reachable from generated code. Snippets themselves
cannot name `__rt__`.

Also defines the JS intrinsics (`Math`, `JSON`, `Object`, `console`, ...)
that every sandbox scope receives.
"""

from __future__ import annotations

import inspect
import json
import logging
import math
import random
import time
from contextlib import contextmanager
from contextvars import ContextVar
from functools import partial
from types import ModuleType, SimpleNamespace
from typing import Any, Callable, Iterator

logger = logging.getLogger(__name__)
console_logger = logging.getLogger("playground.example")


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


class Undefined:
    """The JS `undefined` value. Falsy, distinct from None (`null`)."""

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "undefined"

    def __reduce__(self) -> str:
        return "undefined"


undefined = Undefined()
NaN = float("nan")
Infinity = float("inf")


class JSObject(dict):
    """
    A plain JS object literal.

    Keys are strings, insertion-ordered. Attribute access falls through to
    keys so Python-side code (renderer, component kit) can read `props.children`.
    """

    __slots__ = ()

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        return self.get(name, undefined)

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value

    def __delattr__(self, name: str) -> None:
        self.pop(name, None)

    def __repr__(self) -> str:
        return f"JSObject({dict.__repr__(self)})"


class JSError(Exception):
    """The JS `Error` constructor. `new Error(msg)` builds one of these."""

    name = "Error"

    def __init__(self, message: Any = undefined, *_args: Any) -> None:
        self.message = "" if message is undefined else to_string(message)
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class JSTypeError(JSError, TypeError):
    """JS `TypeError`; also raised for bad property reads on null/undefined."""

    name = "TypeError"


class JSThrow(Exception):
    """Carries a non-Error value thrown with `throw`."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(to_string(value))


# ---------------------------------------------------------------------------
# Time budget
# ---------------------------------------------------------------------------


class ScriptTimeout(BaseException):
    """
    Raised by tick() once a run is past its deadline.

    A BaseException so that a snippet's own try/catch (compiled to
    `except Exception`) cannot swallow it.
    """


_deadline: ContextVar[float | None] = ContextVar("playground_deadline", default=None)


@contextmanager
def time_budget(seconds: float | None) -> Iterator[None]:
    """Bound everything generated code runs inside the block to seconds."""
    token = _deadline.set(None if seconds is None else time.monotonic() + seconds)
    try:
        yield
    finally:
        _deadline.reset(token)


def tick() -> None:
    """Emitted at every loop iteration and function entry."""
    deadline = _deadline.get()
    if deadline is not None and time.monotonic() > deadline:
        raise ScriptTimeout("Script timed out")


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_nullish(value: Any) -> bool:
    return value is None or value is undefined


def _is_primitive(value: Any) -> bool:
    return value is None or value is undefined or isinstance(value, (bool, int, float, str))


def truthy(value: Any) -> bool:
    """JS ToBoolean. Empty arrays and objects are truthy."""
    if value is None or value is undefined or value is False:
        return False
    if value is True:
        return True
    if isinstance(value, (int, float)):
        return value == value and value != 0
    if isinstance(value, str):
        return value != ""
    return True


def number_to_string(value: float | int) -> str:
    if isinstance(value, int):
        return str(value)
    if value != value:
        return "NaN"
    if value in (Infinity, -Infinity):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def to_string(value: Any) -> str:
    """JS ToString."""
    if isinstance(value, str):
        return value
    if value is undefined:
        return "undefined"
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, (int, float)):
        return number_to_string(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if is_nullish(v) else to_string(v) for v in value)
    if isinstance(value, BaseException):
        name = getattr(value, "name", type(value).__name__)
        message = str(value)
        return f"{name}: {message}" if message else name
    if isinstance(value, dict):
        return "[object Object]"
    if callable(value):
        return f"function {getattr(value, '__name__', 'anonymous')}() {{ [native code] }}"
    return str(value)


def to_number(value: Any) -> float | int:
    """JS ToNumber."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if value is None:
        return 0
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return int(text, 0) if text.lower().startswith(("0x", "0o", "0b")) else int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            return NaN
    if isinstance(value, (list, tuple)):
        if not value:
            return 0
        if len(value) == 1:
            return to_number(value[0])
    return NaN


def to_property_key(key: Any) -> str:
    return key if isinstance(key, str) else to_string(key)


def _array_index(key: Any) -> int | None:
    """Return key as a list index when it is a canonical non-negative integer."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    if isinstance(key, float) and key.is_integer() and key >= 0:
        return int(key)
    if isinstance(key, str) and key.isdigit() and (key == "0" or not key.startswith("0")):
        return int(key)
    return None


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


def not_(value: Any) -> bool:
    return not truthy(value)


def add(left: Any, right: Any) -> Any:
    """JS `+`: string concatenation as soon as either side is not a number."""
    if isinstance(left, str) or isinstance(right, str) or not _is_primitive(left) or not _is_primitive(right):
        return to_string(left) + to_string(right)
    return to_number(left) + to_number(right)


def sub(left: Any, right: Any) -> Any:
    return to_number(left) - to_number(right)


def mul(left: Any, right: Any) -> Any:
    return to_number(left) * to_number(right)


def div(left: Any, right: Any) -> float:
    a = to_number(left)
    b = to_number(right)
    if b == 0:
        if a == 0 or a != a:
            return NaN
        return math.copysign(Infinity, a) * math.copysign(1.0, b)
    return a / b


def mod(left: Any, right: Any) -> float | int:
    a = to_number(left)
    b = to_number(right)
    if b == 0 or a != a or b != b:
        return NaN
    result = math.fmod(a, b)
    if isinstance(a, int) and isinstance(b, int):
        return int(result)
    return result


def neg(value: Any) -> float | int:
    return -to_number(value)


def pos(value: Any) -> float | int:
    return to_number(value)


def inc(value: Any, delta: int = 1) -> float | int:
    return to_number(value) + delta


def power(left: Any, right: Any) -> float | int:
    base = to_number(left)
    exponent = to_number(right)
    try:
        result = base**exponent
    except (OverflowError, ZeroDivisionError):
        return Infinity
    return NaN if isinstance(result, complex) else result


def _to_int32(value: Any) -> int:
    n = to_number(value)
    if n != n or n in (Infinity, -Infinity):
        return 0
    n = int(n) & 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def bitop(op: str, left: Any, right: Any) -> int:
    """JS bitwise operators on 32-bit integers."""
    a = _to_int32(left)
    b = _to_int32(right)
    if op == "&":
        return a & b
    if op == "|":
        return a | b
    if op == "^":
        return a ^ b
    if op == "<<":
        return _to_int32(a << (b & 31))
    if op == ">>":
        return a >> (b & 31)
    if op == ">>>":
        return (a & 0xFFFFFFFF) >> (b & 31)
    raise JSTypeError(f"Unknown bitwise operator {op!r}")


def bit_not(value: Any) -> int:
    return ~_to_int32(value)


def _relational(left: Any, right: Any) -> tuple[Any, Any]:
    if isinstance(left, str) and isinstance(right, str):
        return left, right
    return to_number(left), to_number(right)


def lt(left: Any, right: Any) -> bool:
    a, b = _relational(left, right)
    return a < b


def le(left: Any, right: Any) -> bool:
    a, b = _relational(left, right)
    return a <= b


def gt(left: Any, right: Any) -> bool:
    a, b = _relational(left, right)
    return a > b


def ge(left: Any, right: Any) -> bool:
    a, b = _relational(left, right)
    return a >= b


def strict_eq(left: Any, right: Any) -> bool:
    """JS `===`."""
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if is_number(left) and is_number(right):
        return left == right
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    return left is right


def strict_ne(left: Any, right: Any) -> bool:
    return not strict_eq(left, right)


def loose_eq(left: Any, right: Any) -> bool:
    """JS `==` for the primitive cases examples actually hit."""
    if is_nullish(left) and is_nullish(right):
        return True
    if is_nullish(left) or is_nullish(right):
        return False
    if _is_primitive(left) and _is_primitive(right) and type(left) is not type(right):
        return to_number(left) == to_number(right)
    return strict_eq(left, right)


def loose_ne(left: Any, right: Any) -> bool:
    return not loose_eq(left, right)


def typeof(value: Any) -> str:
    if value is undefined:
        return "undefined"
    if value is None:
        return "object"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value) and not isinstance(value, dict):
        return "function"
    return "object"


def type_tag(value: Any) -> str:
    """`Object.prototype.toString.call(value)`, e.g. "[object Number]"."""
    if value is undefined:
        name = "Undefined"
    elif value is None:
        name = "Null"
    elif isinstance(value, bool):
        name = "Boolean"
    elif isinstance(value, (int, float)):
        name = "Number"
    elif isinstance(value, str):
        name = "String"
    elif isinstance(value, (list, tuple)):
        name = "Array"
    elif isinstance(value, BaseException):
        name = "Error"
    elif callable(value) and not isinstance(value, dict):
        name = "Function"
    else:
        name = "Object"
    return f"[object {name}]"


def instanceof(value: Any, constructor: Any) -> bool:
    if not isinstance(constructor, type):
        raise JSTypeError("Right-hand side of 'instanceof' is not callable")
    return isinstance(value, constructor)


def in_(key: Any, container: Any) -> bool:
    if isinstance(container, dict):
        return to_property_key(key) in container or key in container
    if isinstance(container, (list, tuple)):
        index = _array_index(key)
        return (index is not None and index < len(container)) or key == "length"
    if _is_primitive(container):
        raise JSTypeError(f"Cannot use 'in' operator to search for '{to_string(key)}' in {to_string(container)}")
    return hasattr(container, to_property_key(key))


def void(_value: Any) -> Undefined:
    return undefined


def seq(*values: Any) -> Any:
    return values[-1]


def template(*parts: Any) -> str:
    return "".join(to_string(p) for p in parts)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


def throw(value: Any) -> BaseException:
    """Turn a thrown JS value into something `raise` accepts."""
    if isinstance(value, BaseException):
        return value
    return JSThrow(value)


def caught(exc: BaseException) -> Any:
    """The value a `catch (e)` clause binds."""
    if isinstance(exc, JSThrow):
        return exc.value
    return exc


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


def call_callback(fn: Any, *args: Any) -> Any:
    """
    Call a JS-style callback with as many of args as it accepts.

    Transpiled functions take any number of arguments, but callbacks can also
    be plain Python callables from the registry that reject extras.
    """
    if not callable(fn):
        raise JSTypeError(f"{to_string(fn)} is not a function")
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return fn(*args)
    positional = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return fn(*args)
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            positional += 1
    return fn(*args[:positional])


# ---------------------------------------------------------------------------
# Property access
# ---------------------------------------------------------------------------

# `__name__` of the namespace snippets run in; classes and functions they
# define carry it as `__module__`.
SNIPPET_MODULE = "example"

# Attributes that lead from a value back to interpreter internals.
INTERNAL_ATTRIBUTES = frozenset(
    {
        "gi_frame",
        "gi_code",
        "cr_frame",
        "cr_code",
        "ag_frame",
        "ag_code",
        "tb_frame",
        "tb_next",
        "f_back",
        "f_code",
        "f_globals",
        "f_builtins",
        "f_locals",
    }
)


def _internal(name: str) -> bool:
    return (name.startswith("__") and name.endswith("__")) or name in INTERNAL_ATTRIBUTES


def defined_by_snippet(value: Any) -> bool:
    """True for classes and functions the snippet defined, and their instances."""
    owner = value if isinstance(value, type) or inspect.isfunction(value) else type(value)
    return getattr(owner, "__module__", None) == SNIPPET_MODULE


def _readable(obj: Any, name: str) -> bool:
    if _internal(name):
        return False
    return not name.startswith("_") or defined_by_snippet(obj)


def _writable(obj: Any, name: str) -> bool:
    # Registry values are shared by every run, so only the snippet's own
    # objects and thrown errors take new attributes
    if _internal(name):
        return False
    return defined_by_snippet(obj) or isinstance(obj, BaseException)


def _read_only(obj: Any, name: str) -> JSTypeError:
    return JSTypeError(f"Cannot assign to read only property '{name}' of {typeof(obj)} '{to_string(obj)}'")


def member(obj: Any, name: str) -> Any:
    """`obj.name`."""
    if obj is None or obj is undefined:
        raise JSTypeError(f"Cannot read properties of {to_string(obj)} (reading '{name}')")
    if isinstance(obj, dict):
        if name in obj:
            return obj[name]
        method = _OBJECT_METHODS.get(name)
        if method is not None:
            return partial(method, obj)
        return undefined
    if isinstance(obj, str):
        return _string_member(obj, name)
    if isinstance(obj, (list, tuple)):
        return _array_member(obj, name)
    if isinstance(obj, bool):
        return partial(_bool_to_string, obj) if name == "toString" else undefined
    if isinstance(obj, (int, float)):
        method = _NUMBER_METHODS.get(name)
        return partial(method, obj) if method is not None else undefined
    if isinstance(obj, BaseException):
        if name == "message":
            return getattr(obj, "message", str(obj))
        if name == "name":
            return getattr(obj, "name", type(obj).__name__)
    if not _readable(obj, name):
        return undefined
    value = getattr(obj, name, undefined)
    if isinstance(value, ModuleType):
        return undefined
    if value is undefined and callable(obj):
        method = _FUNCTION_METHODS.get(name)
        if method is not None:
            return partial(method, obj)
    return value


def member_opt(obj: Any, name: str) -> Any:
    """`obj?.name`."""
    if is_nullish(obj):
        return undefined
    return member(obj, name)


def index(obj: Any, key: Any) -> Any:
    """`obj[key]`."""
    if obj is None or obj is undefined:
        raise JSTypeError(f"Cannot read properties of {to_string(obj)} (reading '{to_string(key)}')")
    if isinstance(obj, (list, tuple, str)):
        position = _array_index(key)
        if position is not None:
            return obj[position] if position < len(obj) else undefined
        return member(obj, to_property_key(key))
    if isinstance(obj, dict):
        if key in obj:
            return obj[key]
        return member(obj, to_property_key(key))
    return member(obj, to_property_key(key))


def index_opt(obj: Any, key: Any) -> Any:
    if is_nullish(obj):
        return undefined
    return index(obj, key)


def set_member(obj: Any, name: str, value: Any) -> Any:
    """`obj.name = value`; returns value like a JS assignment expression."""
    if obj is None or obj is undefined:
        raise JSTypeError(f"Cannot set properties of {to_string(obj)} (setting '{name}')")
    if isinstance(obj, dict):
        obj[name] = value
    elif isinstance(obj, list) and name == "length":
        length = int(to_number(value))
        del obj[length:]
        obj.extend([undefined] * (length - len(obj)))
    elif _writable(obj, name):
        setattr(obj, name, value)
    else:
        raise _read_only(obj, name)
    return value


def set_index(obj: Any, key: Any, value: Any) -> Any:
    """`obj[key] = value`."""
    if isinstance(obj, list):
        position = _array_index(key)
        if position is not None:
            if position >= len(obj):
                obj.extend([undefined] * (position + 1 - len(obj)))
            obj[position] = value
            return value
    return set_member(obj, to_property_key(key), value)


def delete(obj: Any, key: Any) -> bool:
    name = to_property_key(key)
    if isinstance(obj, dict):
        obj.pop(name, None)
    elif _is_primitive(obj) or not _readable(obj, name) or not hasattr(obj, name):
        return True
    elif _writable(obj, name):
        delattr(obj, name)
    else:
        raise JSTypeError(f"Cannot delete property '{name}' of {to_string(obj)}")
    return True


def call_opt(fn: Any, *args: Any) -> Any:
    """`fn?.(...args)`."""
    if is_nullish(fn):
        return undefined
    return fn(*args)


# ---------------------------------------------------------------------------
# Literals, spread and destructuring
# ---------------------------------------------------------------------------


def obj(mapping: dict[str, Any] | None = None) -> JSObject:
    return JSObject(mapping or {})


def spread_props(value: Any) -> dict[Any, Any]:
    """Source for `{...value}`; non-objects contribute nothing."""
    if isinstance(value, dict):
        return value
    if isinstance(value, (list, tuple, str)):
        return {str(i): v for i, v in enumerate(value)}
    return {}


def iterate(value: Any) -> Any:
    """Source for `for...of` and `[...value]`."""
    if isinstance(value, (list, tuple, str)):
        return value
    if is_nullish(value) or isinstance(value, (dict, bool, int, float)):
        raise JSTypeError(f"{to_string(value)} is not iterable")
    try:
        return iter(value)
    except TypeError:
        raise JSTypeError(f"{to_string(value)} is not iterable") from None


def keys(value: Any) -> list[str]:
    """Keys visited by `for...in`."""
    if isinstance(value, dict):
        return [to_property_key(k) for k in value]
    if isinstance(value, (list, tuple, str)):
        return [str(i) for i in range(len(value))]
    return []


def object_rest(source: Any, excluded: list[str]) -> JSObject:
    """`const { a, ...rest } = source` → rest."""
    if is_nullish(source):
        raise JSTypeError(f"Cannot destructure '{to_string(source)}' as it is {to_string(source)}.")
    return JSObject({k: v for k, v in spread_props(source).items() if to_property_key(k) not in excluded})


def array_rest(source: Any, start: int) -> list[Any]:
    """`const [a, ...rest] = source` → rest."""
    return list(iterate(source))[start:]


def destructure(source: Any) -> Any:
    """Guard for object patterns: JS refuses to destructure null/undefined."""
    if is_nullish(source):
        raise JSTypeError(f"Cannot destructure '{to_string(source)}' as it is {to_string(source)}.")
    return source


def jsx(type_: Any, props: dict[str, Any] | None = None, *children: Any) -> Any:
    """Automatic JSX runtime entry point."""
    from playground.kernel.elements import create_element

    return create_element(type_, props, *children)


def jsx_fragment(props: dict[str, Any] | None = None, *children: Any) -> Any:
    """`<>...</>`."""
    from playground.kernel.elements import Fragment, create_element

    return create_element(Fragment, props, *children)


# ---------------------------------------------------------------------------
# Built-in methods of primitives and arrays
# ---------------------------------------------------------------------------


def _slice_bounds(length: int, start: Any, end: Any) -> tuple[int, int]:
    def clamp(value: Any, fallback: int) -> int:
        if value is undefined:
            return fallback
        n = int(to_number(value))
        if n < 0:
            return max(length + n, 0)
        return min(n, length)

    return clamp(start, 0), clamp(end, length)


def _array_member(arr: list[Any] | tuple[Any, ...], name: str) -> Any:
    if name == "length":
        return len(arr)
    method = _ARRAY_METHODS.get(name)
    if method is None:
        return undefined
    return partial(method, arr)


def _array_map(arr: list[Any], fn: Any, *_: Any) -> list[Any]:
    return [call_callback(fn, v, i, arr) for i, v in enumerate(arr)]


def _array_filter(arr: list[Any], fn: Any, *_: Any) -> list[Any]:
    return [v for i, v in enumerate(arr) if truthy(call_callback(fn, v, i, arr))]


def _array_for_each(arr: list[Any], fn: Any, *_: Any) -> Undefined:
    for i, v in enumerate(list(arr)):
        call_callback(fn, v, i, arr)
    return undefined


def _array_reduce(arr: list[Any], fn: Any, *initial: Any) -> Any:
    items = list(enumerate(arr))
    if initial:
        acc = initial[0]
    elif items:
        acc = items.pop(0)[1]
    else:
        raise JSTypeError("Reduce of empty array with no initial value")
    for i, v in items:
        acc = call_callback(fn, acc, v, i, arr)
    return acc


def _array_find(arr: list[Any], fn: Any, *_: Any) -> Any:
    for i, v in enumerate(arr):
        if truthy(call_callback(fn, v, i, arr)):
            return v
    return undefined


def _array_find_index(arr: list[Any], fn: Any, *_: Any) -> int:
    for i, v in enumerate(arr):
        if truthy(call_callback(fn, v, i, arr)):
            return i
    return -1


def _array_some(arr: list[Any], fn: Any, *_: Any) -> bool:
    return any(truthy(call_callback(fn, v, i, arr)) for i, v in enumerate(arr))


def _array_every(arr: list[Any], fn: Any, *_: Any) -> bool:
    return all(truthy(call_callback(fn, v, i, arr)) for i, v in enumerate(arr))


def _array_index_of(arr: list[Any], target: Any, *_: Any) -> int:
    for i, v in enumerate(arr):
        if strict_eq(v, target):
            return i
    return -1


def _array_includes(arr: list[Any], target: Any, *_: Any) -> bool:
    for v in arr:
        if strict_eq(v, target) or (is_number(v) and is_number(target) and v != v and target != target):
            return True
    return False


def _array_join(arr: list[Any], separator: Any = undefined, *_: Any) -> str:
    sep = "," if separator is undefined else to_string(separator)
    return sep.join("" if is_nullish(v) else to_string(v) for v in arr)


def _array_concat(arr: list[Any], *others: Any) -> list[Any]:
    result = list(arr)
    for other in others:
        if isinstance(other, (list, tuple)):
            result.extend(other)
        else:
            result.append(other)
    return result


def _array_slice(arr: list[Any], start: Any = undefined, end: Any = undefined, *_: Any) -> list[Any]:
    lo, hi = _slice_bounds(len(arr), start, end)
    return list(arr[lo:hi])


def _array_push(arr: list[Any], *items: Any) -> int:
    arr.extend(items)
    return len(arr)


def _array_pop(arr: list[Any], *_: Any) -> Any:
    return arr.pop() if arr else undefined


def _array_shift(arr: list[Any], *_: Any) -> Any:
    return arr.pop(0) if arr else undefined


def _array_unshift(arr: list[Any], *items: Any) -> int:
    arr[0:0] = items
    return len(arr)


def _array_reverse(arr: list[Any], *_: Any) -> list[Any]:
    arr.reverse()
    return arr


def _array_sort(arr: list[Any], compare: Any = undefined, *_: Any) -> list[Any]:
    from functools import cmp_to_key

    if compare is undefined:
        arr.sort(key=to_string)
    else:
        arr.sort(key=cmp_to_key(lambda a, b: to_number(call_callback(compare, a, b))))
    return arr


def _array_fill(arr: list[Any], value: Any, start: Any = undefined, end: Any = undefined, *_: Any) -> list[Any]:
    lo, hi = _slice_bounds(len(arr), start, end)
    for i in range(lo, hi):
        arr[i] = value
    return arr


def _array_flat(arr: list[Any], *_: Any) -> list[Any]:
    result: list[Any] = []
    for v in arr:
        if isinstance(v, (list, tuple)):
            result.extend(v)
        else:
            result.append(v)
    return result


_ARRAY_METHODS: dict[str, Callable[..., Any]] = {
    "map": _array_map,
    "filter": _array_filter,
    "forEach": _array_for_each,
    "reduce": _array_reduce,
    "find": _array_find,
    "findIndex": _array_find_index,
    "some": _array_some,
    "every": _array_every,
    "indexOf": _array_index_of,
    "includes": _array_includes,
    "join": _array_join,
    "concat": _array_concat,
    "slice": _array_slice,
    "push": _array_push,
    "pop": _array_pop,
    "shift": _array_shift,
    "unshift": _array_unshift,
    "reverse": _array_reverse,
    "sort": _array_sort,
    "fill": _array_fill,
    "flat": _array_flat,
    "toString": _array_join,
}


def _string_member(text: str, name: str) -> Any:
    if name == "length":
        return len(text)
    method = _STRING_METHODS.get(name)
    if method is None:
        return undefined
    return partial(method, text)


def _string_split(text: str, separator: Any = undefined, limit: Any = undefined, *_: Any) -> list[str]:
    if separator is undefined:
        parts = [text]
    elif separator == "":
        parts = list(text)
    else:
        parts = text.split(to_string(separator))
    if limit is not undefined:
        parts = parts[: int(to_number(limit))]
    return parts


def _string_slice(text: str, start: Any = undefined, end: Any = undefined, *_: Any) -> str:
    lo, hi = _slice_bounds(len(text), start, end)
    return text[lo:hi]


def _string_substring(text: str, start: Any = undefined, end: Any = undefined, *_: Any) -> str:
    def clamp(value: Any, fallback: int) -> int:
        if value is undefined:
            return fallback
        n = to_number(value)
        if n != n:
            return 0
        return max(0, min(int(n), len(text)))

    lo, hi = clamp(start, 0), clamp(end, len(text))
    if lo > hi:
        lo, hi = hi, lo
    return text[lo:hi]


def _string_replace(text: str, pattern: Any, replacement: Any, *_: Any) -> str:
    needle = to_string(pattern)
    position = text.find(needle)
    if position < 0:
        return text
    if callable(replacement):
        value = to_string(call_callback(replacement, needle, position, text))
    else:
        value = to_string(replacement)
    return text[:position] + value + text[position + len(needle) :]


def _string_pad(text: str, length: Any, fill: Any, at_start: bool) -> str:
    target = int(to_number(length))
    filler = " " if fill is undefined else to_string(fill)
    if target <= len(text) or not filler:
        return text
    padding = (filler * target)[: target - len(text)]
    return padding + text if at_start else text + padding


_STRING_METHODS: dict[str, Callable[..., Any]] = {
    "toUpperCase": lambda s, *_: s.upper(),
    "toLowerCase": lambda s, *_: s.lower(),
    "trim": lambda s, *_: s.strip(),
    "trimStart": lambda s, *_: s.lstrip(),
    "trimEnd": lambda s, *_: s.rstrip(),
    "split": _string_split,
    "slice": _string_slice,
    "substring": _string_substring,
    "includes": lambda s, sub, *_: to_string(sub) in s,
    "startsWith": lambda s, sub, *_: s.startswith(to_string(sub)),
    "endsWith": lambda s, sub, *_: s.endswith(to_string(sub)),
    "indexOf": lambda s, sub, *_: s.find(to_string(sub)),
    "lastIndexOf": lambda s, sub, *_: s.rfind(to_string(sub)),
    "charAt": lambda s, i=0, *_: s[int(to_number(i))] if 0 <= int(to_number(i)) < len(s) else "",
    "charCodeAt": lambda s, i=0, *_: ord(s[int(to_number(i))]) if 0 <= int(to_number(i)) < len(s) else NaN,
    "replace": _string_replace,
    "repeat": lambda s, n, *_: s * int(to_number(n)),
    "padStart": lambda s, n, fill=undefined, *_: _string_pad(s, n, fill, True),
    "padEnd": lambda s, n, fill=undefined, *_: _string_pad(s, n, fill, False),
    "concat": lambda s, *others: s + "".join(to_string(o) for o in others),
    "toString": lambda s, *_: s,
}


def _bool_to_string(value: bool, *_: Any) -> str:
    return to_string(value)


def _number_to_fixed(value: float | int, digits: Any = 0, *_: Any) -> str:
    return f"{to_number(value):.{int(to_number(digits))}f}"


def _number_to_string(value: float | int, radix: Any = undefined, *_: Any) -> str:
    if radix is undefined or int(to_number(radix)) == 10:
        return number_to_string(value)
    base = int(to_number(radix))
    n = int(value)
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    if n == 0:
        return "0"
    sign = "-" if n < 0 else ""
    n = abs(n)
    out = []
    while n:
        n, r = divmod(n, base)
        out.append(digits[r])
    return sign + "".join(reversed(out))


_NUMBER_METHODS: dict[str, Callable[..., Any]] = {
    "toFixed": _number_to_fixed,
    "toString": _number_to_string,
    "toLocaleString": lambda v, *_: number_to_string(v),
}


def _object_has_own_property(target: dict[str, Any], key: Any, *_: Any) -> bool:
    return to_property_key(key) in target


_OBJECT_METHODS: dict[str, Callable[..., Any]] = {
    "hasOwnProperty": _object_has_own_property,
    "toString": lambda target, *_: "[object Object]",
}


def _function_bind(fn: Any, _this: Any = undefined, *bound: Any) -> Any:
    return partial(fn, *bound) if bound else fn


def _function_call(fn: Any, _this: Any = undefined, *args: Any) -> Any:
    return fn(*args)


def _function_apply(fn: Any, _this: Any = undefined, args: Any = undefined, *_: Any) -> Any:
    return fn(*([] if is_nullish(args) else list(args)))


_FUNCTION_METHODS: dict[str, Callable[..., Any]] = {
    "bind": _function_bind,
    "call": _function_call,
    "apply": _function_apply,
}


# ---------------------------------------------------------------------------
# Intrinsics
# ---------------------------------------------------------------------------


def _math_round(value: Any, *_: Any) -> float | int:
    n = to_number(value)
    if n != n or n in (Infinity, -Infinity):
        return n
    return math.floor(n + 0.5)


def _math_max(*values: Any) -> float | int:
    numbers = [to_number(v) for v in values]
    if any(n != n for n in numbers):
        return NaN
    return max(numbers, default=-Infinity)


def _math_min(*values: Any) -> float | int:
    numbers = [to_number(v) for v in values]
    if any(n != n for n in numbers):
        return NaN
    return min(numbers, default=Infinity)


Math = SimpleNamespace(
    PI=math.pi,
    E=math.e,
    floor=lambda v, *_: math.floor(to_number(v)),
    ceil=lambda v, *_: math.ceil(to_number(v)),
    round=_math_round,
    trunc=lambda v, *_: math.trunc(to_number(v)),
    abs=lambda v, *_: abs(to_number(v)),
    sign=lambda v, *_: (to_number(v) > 0) - (to_number(v) < 0),
    sqrt=lambda v, *_: math.sqrt(to_number(v)),
    pow=lambda a, b, *_: to_number(a) ** to_number(b),
    max=_math_max,
    min=_math_min,
    random=lambda *_: random.random(),
)


def _to_json_value(value: Any) -> Any:
    if value is undefined or callable(value) and not isinstance(value, dict):
        return undefined
    if isinstance(value, dict):
        out = {}
        for k, v in value.items():
            converted = _to_json_value(v)
            if converted is not undefined:
                out[to_property_key(k)] = converted
        return out
    if isinstance(value, (list, tuple)):
        return [None if (c := _to_json_value(v)) is undefined else c for v in value]
    if isinstance(value, float) and (value != value or value in (Infinity, -Infinity)):
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _json_stringify(value: Any, _replacer: Any = undefined, space: Any = undefined, *_: Any) -> Any:
    converted = _to_json_value(value)
    if converted is undefined:
        return undefined
    if is_nullish(space) or not truthy(space):
        return json.dumps(converted, separators=(",", ":"), ensure_ascii=False)
    indent = int(to_number(space)) if is_number(space) else to_string(space)
    return json.dumps(converted, indent=indent, ensure_ascii=False)


def _json_parse(text: Any, *_: Any) -> Any:
    try:
        return json.loads(to_string(text), object_hook=JSObject)
    except json.JSONDecodeError as e:
        raise JSError(f"Unexpected token in JSON at position {e.pos}") from e


JSON = SimpleNamespace(stringify=_json_stringify, parse=_json_parse)


def _object_assign(target: Any, *sources: Any) -> Any:
    for source in sources:
        for k, v in spread_props(source).items():
            set_member(target, to_property_key(k), v)
    return target


Object = SimpleNamespace(
    keys=lambda v, *_: keys(v),
    values=lambda v, *_: list(spread_props(v).values()),
    entries=lambda v, *_: [[to_property_key(k), x] for k, x in spread_props(v).items()],
    assign=_object_assign,
    freeze=lambda v, *_: v,
)


def _array_from(value: Any, fn: Any = undefined, *_: Any) -> list[Any]:
    if isinstance(value, dict) and "length" in value:
        items = [value.get(str(i), undefined) for i in range(int(to_number(value["length"])))]
    else:
        items = list(iterate(value))
    if fn is undefined:
        return items
    return [call_callback(fn, v, i) for i, v in enumerate(items)]


Array = SimpleNamespace(**{"isArray": lambda v, *_: isinstance(v, list), "from": _array_from})


def String(value: Any = "", *_: Any) -> str:
    return to_string(value)


def Number(value: Any = 0, *_: Any) -> float | int:
    return to_number(value)


def Boolean(value: Any = False, *_: Any) -> bool:
    return truthy(value)


def parseInt(value: Any, radix: Any = undefined, *_: Any) -> float | int:
    text = to_string(value).strip()
    base = 10 if radix is undefined else int(to_number(radix))
    digits = ""
    for ch in text.lstrip("+-"):
        if ch.isalnum() and int(ch, 36) < base:
            digits += ch
        else:
            break
    if not digits:
        return NaN
    n = int(digits, base)
    return -n if text.startswith("-") else n


def parseFloat(value: Any, *_: Any) -> float | int:
    text = to_string(value).strip()
    for end in range(len(text), 0, -1):
        try:
            return float(text[:end]) if "." in text[:end] or "e" in text[:end].lower() else int(text[:end])
        except ValueError:
            continue
    return NaN


def isNaN(value: Any, *_: Any) -> bool:
    n = to_number(value)
    return n != n


def _console_method(level: int) -> Callable[..., Undefined]:
    def log(*args: Any) -> Undefined:
        console_logger.log(level, " ".join(to_string(a) for a in args))
        return undefined

    return log


console = SimpleNamespace(
    log=_console_method(logging.INFO),
    info=_console_method(logging.INFO),
    warn=_console_method(logging.WARNING),
    error=_console_method(logging.ERROR),
    debug=_console_method(logging.DEBUG),
)


GLOBALS: dict[str, Any] = {
    "Math": Math,
    "JSON": JSON,
    "Object": Object,
    "Array": Array,
    "String": String,
    "Number": Number,
    "Boolean": Boolean,
    "Error": JSError,
    "TypeError": JSTypeError,
    "console": console,
    "parseInt": parseInt,
    "parseFloat": parseFloat,
    "isNaN": isNaN,
    "NaN": NaN,
    "Infinity": Infinity,
}
