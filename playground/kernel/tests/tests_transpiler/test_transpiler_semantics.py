"""
Playground Transpiler -- JavaScript Semantics Tests

Programs are transpiled and executed in a bare sandbox; the value of the
last expression statement is what the program evaluates to. Each test pins
one piece of JS behaviour the generated Python has to keep.
"""

import pytest

from playground.kernel.elements import Element
from playground.kernel.runtime import JSObject, ScriptTimeout, time_budget, undefined

# ============================================================================
# Operators
# ============================================================================


class TestOperators:
    def test_plus_concatenates_strings(self, run_js):
        assert run_js("1 + '2'") == "12"

    def test_arithmetic_coerces_strings(self, run_js):
        assert run_js("'3' * '4'") == 12

    def test_logical_operators_return_operands(self, run_js):
        assert run_js("0 || 'fallback'") == "fallback"
        assert run_js("'' && 1") == ""
        assert run_js("null ?? 'default'") == "default"
        assert run_js("0 ?? 'default'") == 0

    def test_strict_and_loose_equality(self, run_js):
        assert run_js("1 == '1'") is True
        assert run_js("1 === '1'") is False
        assert run_js("null == undefined") is True

    def test_void_is_undefined(self, run_js):
        assert run_js("void 0") is undefined

    def test_ternary(self, run_js):
        assert run_js("const n = 5\nn > 3 ? 'big' : 'small'") == "big"

    def test_typeof(self, run_js):
        assert run_js("typeof 'x'") == "string"
        assert run_js("typeof (() => 1)") == "function"


# ============================================================================
# Bindings and scope
# ============================================================================


class TestScope:
    def test_closure_counter(self, run_js):
        source = "function make() {\n  let c = 0\n  return () => ++c\n}\nconst f = make()\nf()\nf()"
        assert run_js(source) == 2

    def test_assignment_to_outer_variable(self, run_js):
        source = "let x = 1\nconst set = () => { x = 5 }\nset()\nx"
        assert run_js(source) == 5

    def test_function_declarations_are_hoisted(self, run_js):
        assert run_js("const v = twice(4)\nfunction twice(n) { return n * 2 }\nv") == 8

    def test_python_keywords_are_valid_names(self, run_js):
        assert run_js("const pass = 1\nconst lambda = 2\npass + lambda") == 3

    def test_object_destructuring_with_rest(self, run_js):
        result = run_js("const o = { a: 1, b: 2, c: 3 }\nconst { a, ...rest } = o\nrest")
        assert result == JSObject({"b": 2, "c": 3})

    def test_array_destructuring_with_default(self, run_js):
        assert run_js("const [first, second = 'two'] = [1]\nfirst + second") == "1two"

    def test_missing_destructured_property_is_undefined(self, run_js):
        assert run_js("const { missing } = {}\nmissing") is undefined


# ============================================================================
# Control flow
# ============================================================================


class TestControlFlow:
    def test_for_loop_with_continue(self, run_js):
        source = "let s = 0\nfor (let i = 0; i < 5; i++) {\n  if (i === 3) continue\n  s += i\n}\ns"
        assert run_js(source) == 7

    def test_for_of(self, run_js):
        assert run_js("let out = ''\nfor (const ch of ['a', 'b']) { out += ch }\nout") == "ab"

    def test_while_with_break(self, run_js):
        assert run_js("let n = 0\nwhile (true) { n++\n if (n > 2) break }\nn") == 3

    def test_switch_falls_through(self, run_js):
        source = (
            "function size(n) {\n"
            "  let out = ''\n"
            "  switch (n) {\n"
            "    case 1:\n"
            "      out += 'one'\n"
            "    case 2:\n"
            "      out += 'two'\n"
            "      break\n"
            "    default:\n"
            "      out += 'many'\n"
            "  }\n"
            "  return out\n"
            "}\n"
            "size(1) + '|' + size(3)"
        )
        assert run_js(source) == "onetwo|many"

    def test_try_catch_binds_error(self, run_js):
        source = "let m\ntry {\n  throw new Error('boom')\n} catch (e) {\n  m = e.message\n}\nm"
        assert run_js(source) == "boom"

    def test_thrown_plain_value_is_caught_as_is(self, run_js):
        assert run_js("let v\ntry { throw 42 } catch (e) { v = e }\nv") == 42


# ============================================================================
# Block scope
# ============================================================================


class TestBlockScope:
    def test_closures_capture_each_for_let_iteration(self, run_js):
        source = "const fs = []\nfor (let i = 0; i < 3; i++) {\n  fs.push(() => i)\n}\nfs.map(f => f()).join('')"
        assert run_js(source) == "012"

    def test_closures_capture_each_for_of_binding(self, run_js):
        source = "const fs = []\nfor (const x of [1, 2, 3]) fs.push(() => x)\nfs.map(f => f()).join(',')"
        assert run_js(source) == "1,2,3"

    def test_body_declarations_are_fresh_per_iteration(self, run_js):
        source = (
            "const fs = []\n"
            "let n = 0\n"
            "while (n < 3) {\n"
            "  const v = n * 2\n"
            "  fs.push(() => v)\n"
            "  n++\n"
            "}\n"
            "fs.map(f => f()).join(',')"
        )
        assert run_js(source) == "0,2,4"

    def test_inner_block_const_does_not_overwrite_outer(self, run_js):
        assert run_js("const x = 'outer'\n{\n  const x = 'inner'\n}\nx") == "outer"

    def test_closure_sees_the_block_binding(self, run_js):
        source = "let x = 1\nlet get\nif (true) {\n  let x = 2\n  get = () => x\n}\nx + '|' + get()"
        assert run_js(source) == "1|2"

    def test_catch_parameter_shadows_outer_name(self, run_js):
        assert run_js("const e = 'outer'\ntry { throw 1 } catch (e) {}\ne") == "outer"

    def test_continue_break_and_outer_updates_with_closures(self, run_js):
        source = (
            "let total = 0\n"
            "const fs = []\n"
            "for (let i = 0; i < 4; i++) {\n"
            "  if (i === 2) continue\n"
            "  if (i === 3) break\n"
            "  total += i\n"
            "  fs.push(() => i * 10)\n"
            "}\n"
            "total + ':' + fs.map(f => f()).join(',')"
        )
        assert run_js(source) == "1:0,10"

    def test_return_from_loop_with_closure(self, run_js):
        source = (
            "function find(xs) {\n"
            "  for (const x of xs) {\n"
            "    const check = () => x > 1\n"
            "    if (check()) return x\n"
            "  }\n"
            "  return -1\n"
            "}\n"
            "find([0, 5, 7]) + '|' + find([])"
        )
        assert run_js(source) == "5|-1"

    def test_loop_variable_changed_in_body_carries_over(self, run_js):
        source = "const fs = []\nfor (let i = 0; i < 6; i++) {\n  i++\n  fs.push(() => i)\n}\nfs.map(f => f()).join(',')"
        assert run_js(source) == "1,3,5"


# ============================================================================
# Time budget
# ============================================================================


class TestTimeBudget:
    def test_endless_loop_times_out(self, run_js):
        with time_budget(0.05), pytest.raises(ScriptTimeout, match="Script timed out"):
            run_js("while (true) {}")

    def test_snippet_catch_cannot_swallow_timeout(self, run_js):
        with time_budget(0.05), pytest.raises(ScriptTimeout):
            run_js("try {\n  for (;;) {}\n} catch (e) {}\n1")

    def test_loop_inside_called_function_times_out(self, run_js):
        with time_budget(0.05), pytest.raises(ScriptTimeout):
            run_js("function spin() { while (true) {} }\nspin()")

    def test_no_budget_outside_a_run(self, run_js):
        assert run_js("let n = 0\nwhile (n < 1000) n++\nn") == 1000


# ============================================================================
# Values
# ============================================================================


class TestValues:
    def test_template_literal(self, run_js):
        assert run_js("const n = 3;\n`n=${n}!`") == "n=3!"

    def test_array_methods(self, run_js):
        assert run_js("[1, 2, 3].map(x => x * 2)") == [2, 4, 6]
        assert run_js("[1, 2, 3].filter(x => x > 1).length") == 2
        assert run_js("['a', 'b'].join('-')") == "a-b"

    def test_spread(self, run_js):
        assert run_js("const a = [1, 2];\n[0, ...a, 3]") == [0, 1, 2, 3]
        assert run_js("const o = { a: 1 };\n({ ...o, b: 2 })") == JSObject({"a": 1, "b": 2})

    def test_optional_chaining(self, run_js):
        assert run_js("const o = null\no?.name") is undefined

    def test_string_methods(self, run_js):
        assert run_js("'Hello'.toUpperCase()") == "HELLO"
        assert run_js("'a,b'.split(',')") == ["a", "b"]

    def test_math_global(self, run_js):
        assert run_js("Math.max(1, 7, 3)") == 7


# ============================================================================
# Classes
# ============================================================================


class TestClasses:
    def test_super_constructor_and_getter(self, run_js):
        source = (
            "class A {\n"
            "  constructor(x) { this.x = x }\n"
            "  get double() { return this.x * 2 }\n"
            "}\n"
            "class B extends A {\n"
            "  constructor() { super(21) }\n"
            "}\n"
            "new B().double"
        )
        assert run_js(source) == 42

    def test_underscore_names_on_own_classes(self, run_js):
        source = (
            "class Vault {\n"
            "  constructor() { this._code = 4 }\n"
            "  __secret() { return this._code + 3 }\n"
            "}\n"
            "new Vault().__secret()"
        )
        assert run_js(source) == 7

    def test_class_fields_and_arrow_methods_bind_this(self, run_js):
        source = (
            "class Counter {\n"
            "  count = 10\n"
            "  bump = () => { this.count += 1 }\n"
            "}\n"
            "const c = new Counter()\n"
            "const bump = c.bump\n"
            "bump()\n"
            "c.count"
        )
        assert run_js(source) == 11

    def test_static_method(self, run_js):
        assert run_js("class U {\n  static twice(n) { return n * 2 }\n}\nU.twice(3)") == 6

    def test_super_method_call(self, run_js):
        source = (
            "class A { name() { return 'a' } }\n"
            "class B extends A { name() { return super.name() + 'b' } }\n"
            "new B().name()"
        )
        assert run_js(source) == "ab"


# ============================================================================
# JSX
# ============================================================================


class TestJsx:
    def test_host_element(self, run_js):
        element = run_js("<div className='a'>hi {1 + 1}</div>")
        assert isinstance(element, Element)
        assert element.type == "div"
        assert element.props["className"] == "a"
        assert element.props["children"] == ["hi ", 2]

    def test_component_reference_and_key(self, run_js):
        element = run_js("const Foo = () => null;\n<Foo key={1} on />")
        assert element.key == "1"
        assert element.props["on"] is True

    def test_multiline_text_collapses(self, run_js):
        element = run_js("<p>\n  Hello\n  world\n</p>")
        assert element.props["children"] == "Hello world"

    def test_spread_attributes(self, run_js):
        element = run_js("const extra = { id: 'x' };\n<span {...extra} title='t' />")
        assert element.props == JSObject({"id": "x", "title": "t"})

    def test_member_expression_tag(self, run_js):
        element = run_js("const Ns = { Item: () => null };\n<Ns.Item />")
        assert callable(element.type)
