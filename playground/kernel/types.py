"""
Playground Kernel — Shared Types

Data classes used across the import rewriter, body extractor, assembler,
engine and panel. These are the contracts that bind the kernel together.

Lifecycle of one pipeline run:
  Snippet → ImportRewrite + ExtractedBody → RewrittenProgram
          → compiled Python source → artifact → PipelineResult
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Any

# ---------------------------------------------------------------------------
# Regex patterns
# ---------------------------------------------------------------------------

# Example paths are slash-separated segments, e.g. "elements/Button/Types/ButtonExampleButton"
EXAMPLE_PATH_PATTERN = re.compile(r"^[A-Za-z0-9_\-]+(/[A-Za-z0-9_\-]+)*$")
IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][\w$]*$")


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Snippet:
    """Example source text plus the stable identity key it was loaded from."""

    path: str
    source: str

    @property
    def component_path(self) -> str:
        """First two path segments, e.g. "elements/Button"."""
        return "/".join(self.path.split("/")[:2])


@dataclass(frozen=True)
class ImportName:
    """One name in a destructured import clause: `{ imported as local }`."""

    imported: str
    local: str

    def to_pattern(self) -> str:
        if self.imported == self.local:
            return self.local
        return f"{self.imported}: {self.local}"


@dataclass(frozen=True)
class ImportRecord:
    """
    A parsed `import ... from '...'` statement.

    symbol is the uppercase registry name the bindings resolve against
    (module_key "semantic-ui-react" → "SEMANTIC_UI_REACT").
    """

    module: str
    module_key: str
    symbol: str
    default_name: str | None = None
    destructured: tuple[ImportName, ...] | None = None


@dataclass
class ImportRewrite:
    """Output of the import rewriter."""

    records: list[ImportRecord]
    bindings: list[str]
    end: int  # offset of the first character after the import block
    skipped: list[str] = field(default_factory=list)

    @property
    def symbols(self) -> set[str]:
        return {r.symbol for r in self.records}


@dataclass
class ExtractedBody:
    """Output of the body extractor."""

    body: str
    default_export: str | None


@dataclass
class RewrittenProgram:
    """The synthesized self-invoking expression that replaces a snippet."""

    imports: ImportRewrite
    body: ExtractedBody
    text: str

    @property
    def default_export(self) -> str | None:
        return self.body.default_export

    @property
    def symbols(self) -> set[str]:
        return self.imports.symbols


@dataclass(frozen=True)
class TransformOptions:
    """
    Fixed transform configuration of the transpiler.

    target names the output baseline; jsx and decorators_legacy enable the
    two dialect extensions on top of the plain ES syntax.
    """

    target: str = "python3"
    jsx: bool = True
    decorators_legacy: bool = True


DEFAULT_TRANSFORM = TransformOptions()


@dataclass
class PipelineResult:
    """
    Result of one rewrite → transpile → execute run.
    The engine never throws — it always returns one of these.
    """

    ok: bool
    element: Any = None
    markup: str | None = None
    error: str | None = None
    error_kind: str | None = None
    program: RewrittenProgram | None = None
    compiled: str | None = None


class PanelStatus(enum.Enum):
    """States of one example panel."""

    IDLE = "idle"
    PENDING_RECOMPUTE = "pending_recompute"
    PENDING_ERROR_REPORT = "pending_error_report"
    ERROR_SHOWN = "error_shown"
    CLOSED = "closed"


@dataclass
class PanelState:
    """What a panel publishes to its listeners after every change."""

    path: str
    source: str
    error: str | None
    markup: str | None
    formatted_markup: str | None
    show_code: bool
    show_html: bool
    changed: bool
    anchor: str
    editor_id: str
    status: PanelStatus = PanelStatus.IDLE
    copied: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "source": self.source,
            "error": self.error,
            "markup": self.markup,
            "formatted_markup": self.formatted_markup,
            "show_code": self.show_code,
            "show_html": self.show_html,
            "changed": self.changed,
            "anchor": self.anchor,
            "editor_id": self.editor_id,
            "status": self.status.value,
            "copied": self.copied,
        }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_valid_example_path(path: str) -> bool:
    """Return True if path is a slash-separated example key without extension."""
    return bool(EXAMPLE_PATH_PATTERN.match(path))


def is_identifier(value: str) -> bool:
    """Return True if value is a plain JS identifier."""
    return bool(IDENTIFIER_PATTERN.match(value))
