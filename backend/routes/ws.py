"""
WebSocket endpoint for live example editing.

Accepts connections at /ws/examples/{path}, mounts an ExamplePanel for the
example and streams its state back after every change.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from backend.models.example import ClientMessage, PanelStateMessage
from backend.routes.examples import get_playground
from backend.services.playground import PlaygroundService
from playground.kernel.panel import ExamplePanel
from playground.kernel.store import ExampleNotFound
from playground.kernel.types import PanelState

logger = logging.getLogger(__name__)

router = APIRouter(tags=["websocket"])


def _state_message(state: PanelState) -> str:
    return PanelStateMessage.from_state(state).model_dump_json()


def _error_message(detail: str) -> str:
    return json.dumps({"type": "error", "detail": detail})


def _apply(panel: ExamplePanel, msg: ClientMessage) -> None:
    if msg.type == "edit":
        panel.change_source(msg.source or "")
    elif msg.type == "reset":
        panel.reset()
    elif msg.type == "toggle_code":
        panel.toggle_code()
    elif msg.type == "toggle_html":
        panel.toggle_html()
    elif msg.type == "clear_active":
        panel.clear_active()
    elif msg.type == "copy":
        panel.copy_source()


@router.websocket("/ws/examples/{path:path}")
async def example_websocket(
    websocket: WebSocket,
    path: str,
    service: PlaygroundService = Depends(get_playground),
) -> None:
    """
    Live panel for one example.

    Protocol:
      Client → Server:  {"type": "edit", "source": "..."}
                        {"type": "reset"} | {"type": "toggle_code"} | {"type": "toggle_html"}
                        {"type": "clear_active"} | {"type": "copy"}
      Server → Client:  {"type": "state", ...PanelState}
                        {"type": "clipboard", "text": "..."}
                        {"type": "error", "detail": "..."}

    An unknown example gets an error message and close code 4404.
    """
    await websocket.accept()
    logger.info("WebSocket accepted: example=%s", path)

    outbox: asyncio.Queue[str] = asyncio.Queue()
    panel = service.open_panel(path, on_update=lambda state: outbox.put_nowait(_state_message(state)))
    panel.clipboard = lambda text: outbox.put_nowait(json.dumps({"type": "clipboard", "text": text}))

    try:
        panel.mount()
    except ExampleNotFound:
        await websocket.send_text(_error_message("Example not found."))
        await websocket.close(code=4404)
        return

    sender = asyncio.create_task(_drain(websocket, outbox))
    try:
        while True:
            raw = await websocket.receive_text()
            try:
                payload: Any = json.loads(raw)
                msg = ClientMessage.model_validate(payload)
            except (json.JSONDecodeError, ValidationError) as e:
                logger.warning("ws: malformed message from client: %r", raw[:200])
                outbox.put_nowait(_error_message(f"Malformed message: {e.__class__.__name__}"))
                continue
            _apply(panel, msg)
    except WebSocketDisconnect:
        logger.info("WebSocket disconnected: example=%s", path)
    finally:
        panel.close()
        sender.cancel()
        try:
            await sender
        except asyncio.CancelledError:
            pass


async def _drain(websocket: WebSocket, outbox: asyncio.Queue[str]) -> None:
    """Forward queued messages to the socket in order."""
    while True:
        text = await outbox.get()
        await websocket.send_text(text)
