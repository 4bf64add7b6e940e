"""
Playground Kernel — Example panel

One live example: its original and edited source, the rendered artifact
and markup, the displayed error, and the view toggles. Owns three debouncers:

  recompute  — reruns the pipeline once typing pauses (RENDER_DEBOUNCE_MS)
  error      — publishes only the last error of a burst (ERROR_DEBOUNCE_MS)
  copied     — drops the "copied" flag after the last copy (COPIED_RESET_MS)

A successful run clears the error at once and also pushes None through the
error debouncer, so an error scheduled by an earlier run cannot surface
afterwards. A failed run never touches the artifact or markup.

    Idle → (edit) → PendingRecompute → (run) → Success → Idle
                                             → Failure → PendingErrorReport → (settle) → ErrorShown
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import pydash

from playground.kernel.debounce import COPIED_RESET_MS, ERROR_DEBOUNCE_MS, RENDER_DEBOUNCE_MS, Debouncer
from playground.kernel.elements import Element
from playground.kernel.engine import TIME_LIMIT, run_pipeline
from playground.kernel.pretty import DEFAULT_INDENT, pretty_html
from playground.kernel.registry import RegistrySource
from playground.kernel.sandbox import Sandbox
from playground.kernel.store import ExampleNotFound, ExampleStore
from playground.kernel.types import PanelState, PanelStatus, PipelineResult, Snippet

logger = logging.getLogger(__name__)

DEFAULT_REPO_URL = "https://github.com/Semantic-Org/Semantic-UI-React"
EXAMPLES_PREFIX = "docs/src/examples"


def example_path_to_hash(path: str) -> str:
    """URL hash of an example: the kebab-cased example name."""
    return pydash.kebab_case(path.split("/")[-1])


class ExamplePanel:
    """A live edit-and-preview panel for one example path."""

    def __init__(
        self,
        path: str,
        store: ExampleStore,
        registry_source: RegistrySource,
        *,
        render_wait: float = RENDER_DEBOUNCE_MS,
        error_wait: float = ERROR_DEBOUNCE_MS,
        copied_wait: float = COPIED_RESET_MS,
        repo_url: str = DEFAULT_REPO_URL,
        clipboard: Callable[[str], Any] | None = None,
        on_update: Callable[[PanelState], Any] | None = None,
        sandbox: Sandbox | None = None,
        html_indent: int = DEFAULT_INDENT,
        time_limit: float | None = TIME_LIMIT,
    ) -> None:
        self.path = path
        self.store = store
        self.registry_source = registry_source
        self.repo_url = repo_url.rstrip("/")
        self.clipboard = clipboard
        self.on_update = on_update
        self.sandbox = sandbox
        self.html_indent = html_indent
        self.time_limit = time_limit

        self.source = ""
        self.element: Element | None = None
        self.markup: str | None = None
        self.error: str | None = None
        self.show_code = False
        self.show_html = False
        self.copied = False
        self.status = PanelStatus.IDLE
        self.last_result: PipelineResult | None = None

        self._original: str | None = None
        self._closed = False
        self._recompute_timer = Debouncer(render_wait, self._recompute)
        self._error_timer = Debouncer(error_wait, self._publish_error)
        self._copied_timer = Debouncer(copied_wait, self._clear_copied)

    # -- source --------------------------------------------------------------

    @property
    def original_source(self) -> str:
        """Source as stored; the store is queried once per panel."""
        if self._original is None:
            source = self.store.get(self.path)
            if source is None:
                raise ExampleNotFound(f"Example not found: {self.path}")
            self._original = source
        return self._original

    @property
    def has_changed(self) -> bool:
        return self.source != self.original_source

    def mount(self) -> PanelState:
        """Load the original source and render it synchronously."""
        self.source = self.original_source
        result = self._run()
        if not result.ok:
            # Nothing has been shown yet, so there is no burst to debounce
            self.error = result.error
            self.status = PanelStatus.ERROR_SHOWN
        logger.info("Mounted example panel %s (ok=%s)", self.path, result.ok)
        self._publish()
        return self.state

    def change_source(self, text: str) -> None:
        if self._closed:
            return
        self.source = text
        self.status = PanelStatus.PENDING_RECOMPUTE
        self._recompute_timer()
        self._publish()

    def reset(self) -> bool:
        """Restore the original source. Returns False when nothing was edited."""
        if self._closed or not self.has_changed:
            return False
        self.change_source(self.original_source)
        return True

    def copy_source(self) -> str:
        """Hand the source to the clipboard; `copied` stays set until copies stop for a while."""
        if self.clipboard is not None:
            self.clipboard(self.source)
        if not self._closed:
            self.copied = True
            self._copied_timer()
            self._publish()
        return self.source

    def _clear_copied(self) -> None:
        if self._closed:
            return
        self.copied = False
        self._publish()

    # -- views -------------------------------------------------------------

    def toggle_code(self) -> None:
        self.show_code = not self.show_code
        self._publish()

    def toggle_html(self) -> None:
        self.show_html = not self.show_html
        self._publish()

    def clear_active(self) -> None:
        self.show_code = False
        self.show_html = False
        self._publish()

    @property
    def formatted_markup(self) -> str | None:
        if not self.show_html or self.markup is None:
            return None
        return pretty_html(self.markup, self.html_indent)

    # -- links -------------------------------------------------------------

    @property
    def anchor(self) -> str:
        return example_path_to_hash(self.path)

    @property
    def editor_id(self) -> str:
        return f"{pydash.kebab_case(self.path)}-jsx"

    def edit_url(self) -> str:
        filename = self.path.split("/")[-1]
        return f"{self.repo_url}/edit/master/{EXAMPLES_PREFIX}/{self.path}.js?message=docs({filename}): your description"

    def direct_link(self, base_url: str) -> str:
        link = f"{base_url.split('#')[0]}#{self.anchor}"
        if self.clipboard is not None:
            self.clipboard(link)
        return link

    # -- state -------------------------------------------------------------

    @property
    def state(self) -> PanelState:
        return PanelState(
            path=self.path,
            source=self.source,
            error=self.error,
            markup=self.markup,
            formatted_markup=self.formatted_markup,
            show_code=self.show_code,
            show_html=self.show_html,
            copied=self.copied,
            changed=self.has_changed,
            anchor=self.anchor,
            editor_id=self.editor_id,
            status=self.status,
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._recompute_timer.cancel()
        self._error_timer.cancel()
        self._copied_timer.cancel()
        self._closed = True
        self.status = PanelStatus.CLOSED
        logger.info("Closed example panel %s", self.path)

    # -- pipeline ----------------------------------------------------------

    def _run(self) -> PipelineResult:
        result = run_pipeline(
            Snippet(self.path, self.source),
            self.registry_source,
            sandbox=self.sandbox,
            time_limit=self.time_limit,
        )
        self.last_result = result
        if result.ok:
            self.element = result.element
            self.markup = result.markup
            self.error = None
            self.status = PanelStatus.IDLE
        return result

    def _recompute(self) -> None:
        if self._closed:
            return
        result = self._run()
        if result.ok:
            self._error_timer(None)
        else:
            self.status = PanelStatus.PENDING_ERROR_REPORT
            self._error_timer(result.error)
        self._publish()

    def _publish_error(self, message: str | None) -> None:
        if self._closed:
            return
        self.error = message
        if self.status is not PanelStatus.PENDING_RECOMPUTE:
            self.status = PanelStatus.ERROR_SHOWN if message is not None else PanelStatus.IDLE
        self._publish()

    def _publish(self) -> None:
        if self.on_update is not None and not self._closed:
            self.on_update(self.state)
