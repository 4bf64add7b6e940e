"""
Playground Sandbox Assembler -- Program Shape Tests

Bindings, body and `return <name>` inside one self-invoking closure.
"""

from playground.kernel.assembly import assemble, wrap_iife
from playground.kernel.types import Snippet


class TestWrapIife:
    def test_shape(self):
        text = wrap_iife(["const React = REACT"], "const Foo = 1\n", "Foo")
        assert text == "(function() {\nconst React = REACT\nconst Foo = 1\nreturn Foo\n}())"

    def test_missing_name_returns_undefined(self):
        assert wrap_iife([], "", None) == "(function() {\nreturn undefined\n}())"


class TestAssemble:
    def test_trailing_statement_returns_default_export(self):
        program = assemble("const Foo = () => null\nexport default Foo;\nconst other = 2\n")
        assert program.default_export == "Foo"
        lines = program.text.split("\n")
        assert lines[-2] == "return Foo"
        assert lines[-1] == "}())"

    def test_bindings_come_first(self):
        source = "import React from 'react'\nimport { Button } from 'semantic-ui-react'\n\nconst A = 1\nexport default A\n"
        program = assemble(Snippet("elements/Button/Types/A", source))
        lines = program.text.split("\n")
        assert lines[0] == "(function() {"
        assert lines[1] == "const React = REACT"
        assert lines[2] == "const { Button } = SEMANTIC_UI_REACT"
        assert program.symbols == {"REACT", "SEMANTIC_UI_REACT"}

    def test_constant_export(self):
        program = assemble("export default 42")
        assert program.text == "(function() {\nreturn 42\n}())"

    def test_plain_string_is_accepted(self):
        assert assemble("const a = 1\nexport default a").default_export == "a"
