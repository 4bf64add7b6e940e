"""
Playground Runtime -- JS Value Semantics Tests

The helpers generated code calls through `__rt__`: coercion, operators,
property access and type tags.
"""

import math

import pytest

from playground.kernel import runtime
from playground.kernel.runtime import JSObject, JSTypeError, undefined


class TestTruthiness:
    @pytest.mark.parametrize("value", [0, 0.0, "", None, undefined, False, runtime.NaN])
    def test_falsy(self, value):
        assert runtime.truthy(value) is False

    @pytest.mark.parametrize("value", ["0", [], JSObject(), 1, -1, True, "false"])
    def test_truthy(self, value):
        assert runtime.truthy(value) is True

    def test_undefined_is_singleton_and_distinct_from_null(self):
        assert runtime.Undefined() is undefined
        assert undefined is not None


class TestToString:
    def test_primitives(self):
        assert runtime.to_string(None) == "null"
        assert runtime.to_string(undefined) == "undefined"
        assert runtime.to_string(True) == "true"
        assert runtime.to_string(2.0) == "2"
        assert runtime.to_string(0.5) == "0.5"

    def test_arrays_join_with_commas(self):
        assert runtime.to_string([1, None, "a"]) == "1,,a"

    def test_objects(self):
        assert runtime.to_string(JSObject(a=1)) == "[object Object]"


class TestToNumber:
    def test_strings(self):
        assert runtime.to_number(" 42 ") == 42
        assert runtime.to_number("") == 0
        assert runtime.to_number("0x10") == 16
        assert math.isnan(runtime.to_number("abc"))

    def test_null_and_undefined(self):
        assert runtime.to_number(None) == 0
        assert math.isnan(runtime.to_number(undefined))


class TestOperators:
    def test_division_by_zero(self):
        assert runtime.div(1, 0) == math.inf
        assert runtime.div(-1, 0) == -math.inf
        assert math.isnan(runtime.div(0, 0))

    def test_mod_keeps_sign_of_dividend(self):
        assert runtime.mod(-7, 3) == -1

    def test_strict_eq(self):
        assert runtime.strict_eq(1, 1.0) is True
        assert runtime.strict_eq("1", 1) is False
        assert runtime.strict_eq(runtime.NaN, runtime.NaN) is False

    def test_bitwise_uses_int32(self):
        assert runtime.bitop("|", 2**32 + 5, 0) == 5


class TestTypeTags:
    @pytest.mark.parametrize(
        ("value", "tag"),
        [
            (42, "[object Number]"),
            ("x", "[object String]"),
            (None, "[object Null]"),
            (undefined, "[object Undefined]"),
            ([], "[object Array]"),
            (JSObject(), "[object Object]"),
            (len, "[object Function]"),
        ],
    )
    def test_type_tag(self, value, tag):
        assert runtime.type_tag(value) == tag

    def test_typeof_null_is_object(self):
        assert runtime.typeof(None) == "object"


class TestPropertyAccess:
    def test_missing_key_is_undefined(self):
        assert runtime.member(JSObject(a=1), "b") is undefined

    def test_read_from_null_raises_type_error(self):
        with pytest.raises(JSTypeError, match="Cannot read properties of null"):
            runtime.member(None, "x")

    def test_length_of_string_and_array(self):
        assert runtime.member("abc", "length") == 3
        assert runtime.member([1, 2], "length") == 2

    def test_index_past_end_is_undefined(self):
        assert runtime.index([1], 5) is undefined

    def test_set_index_grows_array(self):
        items = [1]
        runtime.set_index(items, 2, "c")
        assert items == [1, undefined, "c"]

    def test_destructure_null_raises(self):
        with pytest.raises(JSTypeError):
            runtime.destructure(None)


class TestHostBoundary:
    @pytest.mark.parametrize("name", ["__globals__", "__class__", "__dict__", "__code__", "f_globals", "gi_frame"])
    def test_internal_attributes_read_as_undefined(self, name):
        def helper():
            return 1

        assert runtime.member(helper, name) is undefined
        assert runtime.index(helper, name) is undefined

    def test_private_attributes_of_host_objects_are_hidden(self):
        assert runtime.member(runtime.JSError("x"), "_hidden") is undefined

    def test_modules_are_never_handed_out(self):
        holder = type("Holder", (), {"mod": math})
        assert runtime.member(holder, "mod") is undefined

    def test_host_objects_are_read_only(self):
        holder = type("Holder", (), {"value": 1})
        with pytest.raises(JSTypeError, match="Cannot assign to read only property 'value'"):
            runtime.set_member(holder, "value", 2)
        assert holder.value == 1

    def test_snippet_objects_take_new_attributes(self):
        box_type = type("Box", (), {"__module__": runtime.SNIPPET_MODULE})
        box = box_type()
        runtime.set_member(box, "_count", 3)
        assert runtime.member(box, "_count") == 3
        with pytest.raises(JSTypeError):
            runtime.set_member(box, "__class__", object)

    def test_thrown_errors_take_new_attributes(self):
        err = runtime.JSError("bad")
        runtime.set_member(err, "code", 42)
        assert runtime.member(err, "code") == 42

    def test_delete_on_host_object_raises(self):
        holder = type("Holder", (), {"value": 1})
        with pytest.raises(JSTypeError, match="Cannot delete property"):
            runtime.delete(holder, "value")


class TestCallbacks:
    def test_extra_arguments_are_dropped_for_strict_callables(self):
        assert runtime.call_callback(lambda x: x * 2, 3, 0, [3]) == 6

    def test_non_callable_raises(self):
        with pytest.raises(JSTypeError, match="is not a function"):
            runtime.call_callback(5)


class TestExceptions:
    def test_throw_wraps_plain_values(self):
        exc = runtime.throw("oops")
        assert isinstance(exc, runtime.JSThrow)
        assert runtime.caught(exc) == "oops"

    def test_errors_pass_through(self):
        err = runtime.JSError("bad")
        assert runtime.throw(err) is err
        assert runtime.to_string(err) == "Error: bad"
