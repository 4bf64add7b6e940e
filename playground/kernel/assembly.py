"""
Playground Kernel — Sandbox Assembler

Glues the import rewrite and the extracted body into one self-invoking
expression:

    (function() {
    const React = REACT
    const { Button } = SEMANTIC_UI_REACT
    class Example extends React.Component { ... }
    return Example
    }())

The closure keeps the snippet's declarations out of the evaluation scope;
the only free names left are the registry symbols and the JS intrinsics.
"""

from __future__ import annotations

from playground.kernel.body import extract_body
from playground.kernel.imports import rewrite_imports
from playground.kernel.types import RewrittenProgram, Snippet


def wrap_iife(bindings: list[str], body: str, default_export: str | None) -> str:
    """Concatenate bindings, body and the return statement inside a closure."""
    returned = default_export if default_export is not None else "undefined"
    lines = [*bindings, body.strip("\n"), f"return {returned}"]
    inner = "\n".join(line for line in lines if line)
    return f"(function() {{\n{inner}\n}}())"


def assemble(snippet: Snippet | str) -> RewrittenProgram:
    """Rewrite a snippet into its self-invoking program."""
    source = snippet.source if isinstance(snippet, Snippet) else snippet
    imports = rewrite_imports(source)
    body = extract_body(source, imports.end)
    text = wrap_iife(imports.bindings, body.body, body.default_export)
    return RewrittenProgram(imports=imports, body=body, text=text)
