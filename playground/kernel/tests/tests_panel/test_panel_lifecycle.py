"""
Playground Example Panel -- Lifecycle Tests

The panel state machine under real (short) timers:

    Idle → edit → PendingRecompute → run → Success → Idle
                                         → Failure → PendingErrorReport → ErrorShown

Windows are shrunk to RENDER=10ms and ERROR=50ms so bursts are easy to
produce; sleeps leave a wide margin around each window.
"""

import asyncio

import pytest

from playground.kernel import panel as panel_module
from playground.kernel.panel import ExamplePanel
from playground.kernel.store import ExampleNotFound
from playground.kernel.types import PanelStatus

PATH = "elements/Button/Types/ButtonExampleButton"
RENDER_WAIT = 10
ERROR_WAIT = 50

GOOD = """import React from 'react'
import { Button } from 'semantic-ui-react'

const ButtonExampleButton = () => <Button primary>Save</Button>

export default ButtonExampleButton
"""


def failing(message):
    return f"const X = () => {{ throw new Error('{message}') }}\nexport default X\n"


# ============================================================================
# Helpers
# ============================================================================


@pytest.fixture
def updates():
    return []


@pytest.fixture
def panel(store, registry_source, updates):
    return ExamplePanel(
        PATH,
        store,
        registry_source,
        render_wait=RENDER_WAIT,
        error_wait=ERROR_WAIT,
        on_update=updates.append,
    )


async def settle(ms):
    await asyncio.sleep(ms / 1000)


# ============================================================================
# Mount
# ============================================================================


class TestMount:
    def test_mount_renders_original(self, panel, store):
        state = panel.mount()
        assert state.markup == '<button class="ui button">Click Here</button>'
        assert state.error is None
        assert state.status is PanelStatus.IDLE
        assert not state.changed

    def test_store_is_queried_once(self, panel, store):
        panel.mount()
        panel.reset()
        assert panel.original_source
        assert store.get_calls == 1

    def test_mount_failure_is_shown_at_once(self, store, registry_source):
        store.put("elements/Button/Types/Broken", failing("bad original"))
        panel = ExamplePanel("elements/Button/Types/Broken", store, registry_source)
        state = panel.mount()
        assert state.error == "bad original"
        assert state.status is PanelStatus.ERROR_SHOWN
        assert state.markup is None

    def test_missing_example(self, store, registry_source):
        panel = ExamplePanel("elements/Button/Types/Nope", store, registry_source)
        with pytest.raises(ExampleNotFound):
            panel.mount()


# ============================================================================
# Edits
# ============================================================================


class TestEdits:
    async def test_edit_recomputes_after_pause(self, panel):
        panel.mount()
        panel.change_source(GOOD)
        assert panel.status is PanelStatus.PENDING_RECOMPUTE
        await settle(RENDER_WAIT * 4)
        assert panel.markup == '<button class="ui primary button">Save</button>'
        assert panel.status is PanelStatus.IDLE
        assert panel.state.changed

    async def test_typing_burst_runs_pipeline_once(self, panel, monkeypatch):
        runs = []
        original = panel_module.run_pipeline

        def counting(snippet, *args, **kwargs):
            runs.append(snippet.source)
            return original(snippet, *args, **kwargs)

        monkeypatch.setattr(panel_module, "run_pipeline", counting)
        panel.mount()
        runs.clear()
        for i in range(5):
            panel.change_source(GOOD + "\n" * i)
        await settle(RENDER_WAIT * 4)
        assert runs == [GOOD + "\n" * 4]

    async def test_failure_keeps_previous_markup(self, panel):
        panel.mount()
        previous = panel.markup
        panel.change_source(failing("boom"))
        await settle(RENDER_WAIT * 3)
        assert panel.status is PanelStatus.PENDING_ERROR_REPORT
        assert panel.error is None
        await settle(ERROR_WAIT * 2)
        assert panel.error == "boom"
        assert panel.status is PanelStatus.ERROR_SHOWN
        assert panel.markup == previous

    async def test_two_errors_in_window_publish_only_the_last(self, panel, updates):
        panel.mount()
        panel.change_source(failing("first"))
        await settle(RENDER_WAIT * 2)
        panel.change_source(failing("second"))
        await settle(RENDER_WAIT * 2 + ERROR_WAIT * 2)
        published = [u.error for u in updates if u.error is not None]
        assert set(published) == {"second"}
        assert panel.error == "second"

    async def test_success_cancels_pending_error(self, panel):
        panel.mount()
        panel.change_source(failing("stale"))
        await settle(RENDER_WAIT * 2)
        assert panel.status is PanelStatus.PENDING_ERROR_REPORT
        panel.change_source(GOOD)
        await settle(RENDER_WAIT * 2 + ERROR_WAIT * 2)
        assert panel.error is None
        assert panel.status is PanelStatus.IDLE
        assert "Save" in panel.markup

    async def test_success_clears_shown_error(self, panel):
        panel.mount()
        panel.change_source(failing("shown"))
        await settle(RENDER_WAIT * 2 + ERROR_WAIT * 2)
        assert panel.error == "shown"
        panel.change_source(GOOD)
        await settle(RENDER_WAIT * 3)
        assert panel.error is None

    async def test_reset_restores_original(self, panel):
        panel.mount()
        assert panel.reset() is False
        panel.change_source(GOOD)
        assert panel.reset() is True
        await settle(RENDER_WAIT * 3)
        assert panel.markup == '<button class="ui button">Click Here</button>'
        assert not panel.has_changed


# ============================================================================
# Teardown
# ============================================================================


class TestClose:
    async def test_close_cancels_timers(self, panel, updates):
        panel.mount()
        mounted = panel.last_result
        panel.change_source(failing("late"))
        panel.close()
        published = len(updates)
        await settle(RENDER_WAIT * 2 + ERROR_WAIT * 2)
        assert panel.last_result is mounted
        assert panel.error is None
        assert panel.status is PanelStatus.CLOSED
        assert len(updates) == published

    async def test_edits_after_close_are_ignored(self, panel):
        panel.mount()
        panel.close()
        panel.change_source(GOOD)
        assert panel.source != GOOD
        assert panel.closed


# ============================================================================
# Views and links
# ============================================================================


class TestViews:
    def test_toggles(self, panel):
        panel.mount()
        assert panel.formatted_markup is None
        panel.toggle_html()
        assert panel.formatted_markup == '<button class="ui button">Click Here</button>'
        panel.toggle_code()
        assert panel.state.show_code and panel.state.show_html
        panel.clear_active()
        assert not panel.show_code and not panel.show_html

    def test_links(self, panel):
        assert panel.anchor == "button-example-button"
        assert panel.editor_id == "elements-button-types-button-example-button-jsx"
        assert panel.edit_url() == (
            "https://github.com/Semantic-Org/Semantic-UI-React/edit/master/docs/src/examples/"
            "elements/Button/Types/ButtonExampleButton.js?message=docs(ButtonExampleButton): your description"
        )

    async def test_direct_link_and_copy_use_clipboard(self, panel):
        copied = []
        panel.clipboard = copied.append
        panel.mount()
        assert panel.direct_link("https://react.semantic-ui.com/elements/button#old") == (
            "https://react.semantic-ui.com/elements/button#button-example-button"
        )
        assert panel.copy_source() == panel.source
        assert copied == [
            "https://react.semantic-ui.com/elements/button#button-example-button",
            panel.source,
        ]

    async def test_copied_flag_clears_after_copies_stop(self, store, registry_source, updates):
        panel = ExamplePanel(PATH, store, registry_source, copied_wait=60, on_update=updates.append)
        panel.mount()
        panel.copy_source()
        assert panel.copied is True
        assert updates[-1].copied is True
        await settle(20)
        panel.copy_source()
        await settle(30)
        assert panel.copied is True
        await settle(70)
        assert panel.copied is False
        assert updates[-1].copied is False
        assert updates[-1].to_dict()["copied"] is False

    async def test_closed_panel_keeps_no_copy_timer(self, panel):
        panel.mount()
        panel.copy_source()
        panel.close()
        await settle(10)
        assert not panel._copied_timer.pending
