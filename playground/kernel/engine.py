"""
Playground Kernel — Transpile-and-Execute Engine

One pipeline run:

    snippet → assemble (imports + body + closure) → transpile → sandbox exec
            → classify default export → serialize markup

Every failure becomes a PipelineResult with ok=False and the error message;
run_pipeline never raises.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from playground.kernel.assembly import assemble
from playground.kernel.elements import Element, create_element, is_valid_element
from playground.kernel.errors import EvaluationError, InvalidExportError, PlaygroundError
from playground.kernel.registry import RegistrySource
from playground.kernel.renderer import render_to_static_markup
from playground.kernel.runtime import ScriptTimeout, time_budget, type_tag
from playground.kernel.sandbox import Sandbox, error_message
from playground.kernel.transpiler import transpile
from playground.kernel.types import DEFAULT_TRANSFORM, PipelineResult, RewrittenProgram, Snippet, TransformOptions

logger = logging.getLogger(__name__)

_default_sandbox = Sandbox()

# Seconds a run may spend executing and rendering snippet code
TIME_LIMIT = 2.0


def classify(value: Any) -> Element:
    """
    Turn the evaluated default export into the artifact.
    Callables become an element with no props. Raises InvalidExportError.
    """
    if callable(value):
        try:
            value = create_element(value)
        except Exception as e:
            raise EvaluationError(error_message(e), cause=e) from e
    if not is_valid_element(value):
        tag = type_tag(value)
        raise InvalidExportError(f"Default export is not a valid element. Type:{tag}", type_tag=tag)
    return value


def render_markup(element: Element) -> str:
    """Serialize an element; anything raised while rendering is an EvaluationError."""
    try:
        return render_to_static_markup(element)
    except PlaygroundError:
        raise
    except Exception as e:
        raise EvaluationError(error_message(e), cause=e) from e


def run_pipeline(
    snippet: Snippet,
    registry_source: RegistrySource,
    *,
    sandbox: Sandbox | None = None,
    options: TransformOptions = DEFAULT_TRANSFORM,
    time_limit: float | None = TIME_LIMIT,
) -> PipelineResult:
    """Rewrite, transpile, execute and render one snippet."""
    started = time.perf_counter()
    program: RewrittenProgram | None = None
    compiled: str | None = None
    try:
        program = assemble(snippet)
        compiled = transpile(program.text, options)
        if program.default_export is None:
            raise InvalidExportError("Default export is not a valid example")

        registry = registry_source.build(snippet.component_path, program.symbols)
        with time_budget(time_limit):
            try:
                value = (sandbox or _default_sandbox).evaluate(compiled, registry)
                element = classify(value)
                markup = render_markup(element)
            except ScriptTimeout as e:
                raise EvaluationError(str(e)) from None
    except PlaygroundError as e:
        logger.debug("Pipeline failed for %s (%s): %s", snippet.path, e.kind, e.message)
        return PipelineResult(
            ok=False,
            error=e.message,
            error_kind=e.kind,
            program=program,
            compiled=compiled,
        )
    except Exception as e:
        logger.exception("Unexpected pipeline failure for %s", snippet.path)
        return PipelineResult(
            ok=False,
            error=error_message(e),
            error_kind=EvaluationError.kind,
            program=program,
            compiled=compiled,
        )

    logger.debug("Pipeline ran for %s in %.1fms", snippet.path, (time.perf_counter() - started) * 1000)
    return PipelineResult(
        ok=True,
        element=element,
        markup=markup,
        program=program,
        compiled=compiled,
    )
