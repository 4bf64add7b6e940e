"""
Integration tests for the example WebSocket endpoint.

Tests /ws/examples/{path} — initial state, view toggles, debounced edits,
malformed messages.
"""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from backend.main import app

BUTTON = "elements/Button/Types/ButtonExampleButton"
URL = f"/ws/examples/{BUTTON}"


@pytest.fixture
def client():
    """Return a synchronous TestClient for WS testing."""
    return TestClient(app)


def receive(ws):
    return json.loads(ws.receive_text())


def receive_until(ws, predicate, limit=10):
    for _ in range(limit):
        msg = receive(ws)
        if predicate(msg):
            return msg
    pytest.fail("expected message never received")


class TestConnect:
    def test_initial_state(self, client):
        with client.websocket_connect(URL) as ws:
            state = receive(ws)
            assert state["type"] == "state"
            assert state["path"] == BUTTON
            assert state["markup"] == '<button class="ui button">Click Here</button>'
            assert state["status"] == "idle"
            assert state["changed"] is False

    def test_unknown_example_closes(self, client):
        with client.websocket_connect("/ws/examples/elements/Nope/Types/Nope") as ws:
            msg = receive(ws)
            assert msg == {"type": "error", "detail": "Example not found."}
            with pytest.raises(WebSocketDisconnect):
                ws.receive_text()


class TestMessages:
    def test_toggle_html(self, client):
        with client.websocket_connect(URL) as ws:
            receive(ws)
            ws.send_text(json.dumps({"type": "toggle_html"}))
            state = receive(ws)
            assert state["show_html"] is True
            assert state["formatted_markup"] == '<button class="ui button">Click Here</button>'

    def test_edit_is_rendered_after_pause(self, client):
        source = "import React from 'react'\nconst X = () => <em>live</em>\nexport default X\n"
        with client.websocket_connect(URL) as ws:
            receive(ws)
            ws.send_text(json.dumps({"type": "edit", "source": source}))
            pending = receive(ws)
            assert pending["status"] == "pending_recompute"
            assert pending["changed"] is True
            done = receive_until(ws, lambda m: m.get("markup") == "<em>live</em>")
            assert done["status"] == "idle"

    def test_copy_sends_source(self, client):
        with client.websocket_connect(URL) as ws:
            initial = receive(ws)
            ws.send_text(json.dumps({"type": "copy"}))
            msg = receive(ws)
            assert msg == {"type": "clipboard", "text": initial["source"]}
            assert initial["copied"] is False
            assert receive(ws)["copied"] is True

    def test_invalid_json(self, client):
        with client.websocket_connect(URL) as ws:
            receive(ws)
            ws.send_text("not json")
            msg = receive(ws)
            assert msg["type"] == "error"
            assert "Malformed message" in msg["detail"]

    def test_unknown_message_type(self, client):
        with client.websocket_connect(URL) as ws:
            receive(ws)
            ws.send_text(json.dumps({"type": "explode"}))
            assert receive(ws)["type"] == "error"
