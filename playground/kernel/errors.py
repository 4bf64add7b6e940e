"""
Playground Kernel — Error taxonomy

Every failure of a pipeline run is one of these. Only ParseSkipError stays
inside the kernel (a dropped import line); the other three are turned into a
message string and routed through the panel's debounced error channel.
"""

from __future__ import annotations


class PlaygroundError(Exception):
    """Base class for pipeline failures."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParseSkipError(PlaygroundError):
    """An import statement does not have a supported shape. Never surfaced."""

    kind = "parse_skip"


class SnippetSyntaxError(PlaygroundError):
    """The transform stage rejected the assembled program."""

    kind = "syntax"

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


class InvalidExportError(PlaygroundError):
    """The evaluated default export is not a renderable element."""

    kind = "invalid_export"

    def __init__(self, message: str, type_tag: str | None = None) -> None:
        super().__init__(message)
        self.type_tag = type_tag


class EvaluationError(PlaygroundError):
    """An exception was raised while running or rendering the example."""

    kind = "evaluation"

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
