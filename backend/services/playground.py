"""
Playground service — the kernel wired to the configured example store.

Routes call into this module; it owns the store, the registry source and
the sandbox shared by every request.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from backend.config import settings
from backend.models.example import ExampleResponse, RenderRequest, RenderResponse
from playground.kernel.engine import run_pipeline
from playground.kernel.panel import ExamplePanel, example_path_to_hash
from playground.kernel.pretty import pretty_html
from playground.kernel.registry import RegistrySource, default_registry_source
from playground.kernel.sandbox import Sandbox
from playground.kernel.store import ExampleNotFound, ExampleStore, FileExampleStore
from playground.kernel.types import PanelState, Snippet, is_valid_example_path

logger = logging.getLogger(__name__)


class PlaygroundService:
    """Runs examples for the HTTP and WebSocket routes."""

    def __init__(
        self,
        store: ExampleStore | None = None,
        registry_source: RegistrySource | None = None,
    ) -> None:
        self.store = store if store is not None else FileExampleStore(settings.EXAMPLES_DIR)
        self.registry_source = registry_source or default_registry_source(self.store, settings.FAKER_SEED)
        self.sandbox = Sandbox()

    def list_examples(self) -> list[str]:
        return self.store.list_paths()

    def get_source(self, path: str) -> str:
        source = self.store.get(path) if is_valid_example_path(path) else None
        if source is None:
            raise ExampleNotFound(f"Example not found: {path}")
        return source

    def render(self, req: RenderRequest) -> RenderResponse:
        result = run_pipeline(
            Snippet(req.path, req.source),
            self.registry_source,
            sandbox=self.sandbox,
            time_limit=settings.EVAL_TIMEOUT_MS / 1000,
        )
        formatted = None
        if req.formatted and result.markup is not None:
            formatted = pretty_html(result.markup, settings.HTML_INDENT)
        return RenderResponse.from_result(result, formatted)

    def get_example(self, path: str) -> ExampleResponse:
        source = self.get_source(path)
        panel = self.open_panel(path)
        return ExampleResponse(
            path=path,
            source=source,
            anchor=example_path_to_hash(path),
            editor_id=panel.editor_id,
            edit_url=panel.edit_url(),
            render=self.render(RenderRequest(path=path, source=source)),
        )

    def open_panel(
        self,
        path: str,
        on_update: Callable[[PanelState], Any] | None = None,
    ) -> ExamplePanel:
        return ExamplePanel(
            path,
            self.store,
            self.registry_source,
            render_wait=settings.RENDER_DEBOUNCE_MS,
            error_wait=settings.ERROR_DEBOUNCE_MS,
            repo_url=settings.REPO_URL,
            on_update=on_update,
            sandbox=self.sandbox,
            html_indent=settings.HTML_INDENT,
            time_limit=settings.EVAL_TIMEOUT_MS / 1000,
        )


# Singleton instance
playground_service = PlaygroundService()
