"""
Playground Import Rewriter -- Rewrite Tests

The leading import block becomes `const` bindings against uppercase
registry symbols, one line per clause, in source order. Anything the parser
does not understand is dropped, never fatal.
"""

from playground.kernel.imports import module_key_of, rewrite_imports, scan_imports, symbol_name

# ============================================================================
# Bindings
# ============================================================================


class TestBindings:
    def test_default_import(self):
        result = rewrite_imports("import React from 'react'\n\nconst x = 1\n")
        assert result.bindings == ["const React = REACT"]

    def test_destructured_import(self):
        result = rewrite_imports("import { Button, Icon } from 'semantic-ui-react'\n")
        assert result.bindings == ["const { Button, Icon } = SEMANTIC_UI_REACT"]

    def test_default_and_destructured_emit_two_lines(self):
        result = rewrite_imports("import React, { Component } from 'react'\n")
        assert result.bindings == ["const React = REACT", "const { Component } = REACT"]

    def test_alias_becomes_object_pattern_rename(self):
        result = rewrite_imports("import { Button as Btn } from 'semantic-ui-react'\n")
        assert result.bindings == ["const { Button: Btn } = SEMANTIC_UI_REACT"]

    def test_one_binding_per_default_import_in_source_order(self):
        source = "import faker from 'faker'\nimport _ from 'lodash'\nimport React from 'react'\n"
        result = rewrite_imports(source)
        assert result.bindings == [
            "const faker = FAKER",
            "const _ = LODASH",
            "const React = REACT",
        ]

    def test_repeated_name_keeps_both_bindings_in_order(self):
        source = "import x from 'faker'\nimport x from 'lodash'\n"
        result = rewrite_imports(source)
        assert result.bindings == ["const x = FAKER", "const x = LODASH"]

    def test_relative_specifier_uses_last_segment(self):
        result = rewrite_imports("import { colors } from '../common'\nimport Wireframe from '../Wireframe'\n")
        assert result.bindings == ["const { colors } = COMMON", "const Wireframe = WIREFRAME"]
        assert result.symbols == {"COMMON", "WIREFRAME"}

    def test_semicolons_and_double_quotes(self):
        result = rewrite_imports('import React from "react";\nimport { List } from "semantic-ui-react";\n')
        assert result.bindings == ["const React = REACT", "const { List } = SEMANTIC_UI_REACT"]

    def test_multiline_destructured_clause(self):
        source = "import {\n  Button,\n  Segment,\n} from 'semantic-ui-react'\n\nconst a = 1\n"
        result = rewrite_imports(source)
        assert result.bindings == ["const { Button, Segment } = SEMANTIC_UI_REACT"]


# ============================================================================
# Dropped statements
# ============================================================================


class TestSkipped:
    def test_side_effect_import_is_dropped(self):
        result = rewrite_imports("import 'semantic-ui-css/semantic.min.css'\nimport React from 'react'\n")
        assert result.bindings == ["const React = REACT"]
        assert len(result.skipped) == 1

    def test_namespace_import_is_dropped(self):
        result = rewrite_imports("import * as R from 'react'\n")
        assert result.bindings == []
        assert result.skipped == ["import * as R from 'react'"]

    def test_type_only_import_is_dropped(self):
        result = rewrite_imports("import type { Props } from 'react'\n")
        assert result.bindings == []

    def test_no_imports(self):
        result = rewrite_imports("const x = 1\nexport default x\n")
        assert result.records == []
        assert result.end == 0


# ============================================================================
# Scanner
# ============================================================================


class TestScanner:
    def test_block_stops_at_first_non_import(self):
        source = "import React from 'react'\nconst a = 1\nimport _ from 'lodash'\n"
        block = scan_imports(source)
        assert block.statements == ["import React from 'react'"]
        assert source[block.end :].lstrip().startswith("const a")

    def test_comments_between_imports_are_skipped(self):
        source = "// header\nimport React from 'react'\n/* block */\nimport _ from 'lodash'\n"
        assert len(scan_imports(source).statements) == 2

    def test_identifier_starting_with_import_is_not_an_import(self):
        block = scan_imports("importantThing()\n")
        assert block.statements == []


class TestNames:
    def test_symbol_name_is_word_boundary_uppercase(self):
        assert symbol_name("faker") == "FAKER"
        assert symbol_name("semantic-ui-react") == "SEMANTIC_UI_REACT"
        assert symbol_name("Wireframe") == "WIREFRAME"

    def test_module_key_is_last_segment(self):
        assert module_key_of("docs/src/examples/common") == "common"
        assert module_key_of("react") == "react"
