"""
Playground Kernel — the live edit-and-preview pipeline.

Stages:
  imports     — leading import block → const bindings against registry symbols
  body        — statements after the imports, `export default` stripped
  assembly    — bindings + body + return wrapped in a self-invoking closure
  transpiler  — program text → Python source
  sandbox     — exec against the registry scope
  engine      — run_pipeline: all of the above + classification + markup

Around them:
  debounce, panel  — per-example live state with debounced recompute/errors
  renderer, pretty — element → static HTML → indented HTML
  registry, store  — where symbol values and example sources come from
"""

from playground.kernel.assembly import assemble, wrap_iife
from playground.kernel.body import extract_body
from playground.kernel.debounce import ERROR_DEBOUNCE_MS, RENDER_DEBOUNCE_MS, Debouncer
from playground.kernel.elements import Component, Fragment, PureComponent, create_element, is_valid_element
from playground.kernel.engine import run_pipeline
from playground.kernel.errors import (
    EvaluationError,
    InvalidExportError,
    ParseSkipError,
    PlaygroundError,
    SnippetSyntaxError,
)
from playground.kernel.imports import parse_import, rewrite_imports, scan_imports
from playground.kernel.panel import ExamplePanel
from playground.kernel.pretty import pretty_html
from playground.kernel.registry import RegistrySource, SymbolRegistry, default_registry_source
from playground.kernel.renderer import render_to_static_markup
from playground.kernel.sandbox import Sandbox
from playground.kernel.store import ExampleNotFound, ExampleStore, FileExampleStore, MemoryExampleStore
from playground.kernel.transpiler import transpile
from playground.kernel.types import PanelState, PanelStatus, PipelineResult, Snippet

__all__ = [
    "assemble",
    "wrap_iife",
    "extract_body",
    "parse_import",
    "rewrite_imports",
    "scan_imports",
    "transpile",
    "Sandbox",
    "run_pipeline",
    "Debouncer",
    "ERROR_DEBOUNCE_MS",
    "RENDER_DEBOUNCE_MS",
    "ExamplePanel",
    "render_to_static_markup",
    "pretty_html",
    "Component",
    "PureComponent",
    "Fragment",
    "create_element",
    "is_valid_element",
    "RegistrySource",
    "SymbolRegistry",
    "default_registry_source",
    "ExampleStore",
    "FileExampleStore",
    "MemoryExampleStore",
    "ExampleNotFound",
    "Snippet",
    "PipelineResult",
    "PanelState",
    "PanelStatus",
    "PlaygroundError",
    "ParseSkipError",
    "SnippetSyntaxError",
    "InvalidExportError",
    "EvaluationError",
]
