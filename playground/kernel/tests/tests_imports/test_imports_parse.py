"""
Playground Import Rewriter -- Statement Parser Tests

parse_import() either returns a typed record or raises ParseSkipError.
"""

import pytest

from playground.kernel.errors import ParseSkipError
from playground.kernel.imports import parse_import
from playground.kernel.types import ImportName


class TestParseImport:
    def test_record_fields(self):
        record = parse_import("import React, { Component as C } from 'react'")
        assert record.module == "react"
        assert record.module_key == "react"
        assert record.symbol == "REACT"
        assert record.default_name == "React"
        assert record.destructured == (ImportName(imported="Component", local="C"),)

    def test_empty_destructured_clause(self):
        record = parse_import("import {} from 'react'")
        assert record.default_name is None
        assert record.destructured == ()

    @pytest.mark.parametrize(
        "statement",
        [
            "import 'side-effect'",
            "import * as ns from 'react'",
            "import React from react",
            "import { A B } from 'x'",
            "import React from 'react' extra",
            "import React from './some.file'",
        ],
    )
    def test_unsupported_shapes_raise_parse_skip(self, statement):
        with pytest.raises(ParseSkipError):
            parse_import(statement)
