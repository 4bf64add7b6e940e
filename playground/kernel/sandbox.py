"""
Playground Kernel — Sandbox

Executes transpiled example code against an explicit scope: the registry
bindings, the JS intrinsics, the `__rt__` runtime helper and a reduced set
of builtins. Nothing else from the host module namespace is reachable by
name.

This isolates scope, it is not a security boundary.
"""

from __future__ import annotations

import builtins
from typing import Any, Mapping

from playground.kernel import runtime
from playground.kernel.errors import EvaluationError, PlaygroundError
from playground.kernel.transpiler import RESULT_NAME

MODULE_NAME = runtime.SNIPPET_MODULE
FILENAME = "<example>"

# What generated code needs from builtins: class statements, super() in
# methods, static methods and getters, and `except Exception`.
ALLOWED_BUILTINS = ("__build_class__", "super", "classmethod", "property", "Exception")


def error_message(exc: BaseException) -> str:
    """The message a JS engine would show for exc."""
    if isinstance(exc, PlaygroundError):
        return exc.message
    if isinstance(exc, RecursionError):
        return "Maximum call stack size exceeded"
    if isinstance(exc, NameError) and getattr(exc, "name", None):
        return f"{exc.name} is not defined"
    message = str(exc)
    return message or type(exc).__name__


class Sandbox:
    """Evaluates compiled example source. One instance can serve many runs."""

    def __init__(self, allowed_builtins: tuple[str, ...] = ALLOWED_BUILTINS) -> None:
        self.builtins = {name: getattr(builtins, name) for name in allowed_builtins}

    def globals_for(self, scope: Mapping[str, Any]) -> dict[str, Any]:
        namespace: dict[str, Any] = dict(runtime.GLOBALS)
        namespace.update(scope)
        namespace["__rt__"] = runtime
        namespace["__name__"] = MODULE_NAME
        namespace["__builtins__"] = dict(self.builtins)
        return namespace

    def evaluate(self, code: str, scope: Mapping[str, Any]) -> Any:
        """
        Run code and return the value it leaves in `__result__`.
        Raises EvaluationError for anything the code raises.
        """
        namespace = self.globals_for(scope)
        try:
            exec(compile(code, FILENAME, "exec"), namespace)
        except EvaluationError:
            raise
        except Exception as e:
            raise EvaluationError(error_message(e), cause=e) from e
        return namespace.get(RESULT_NAME, runtime.undefined)
