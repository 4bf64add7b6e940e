"""Example models for the live playground."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from playground.kernel.types import PanelState, PipelineResult

ErrorKind = Literal["syntax", "invalid_export", "evaluation"]


class RenderRequest(BaseModel):
    """What the client sends to POST /api/render."""

    model_config = {"extra": "forbid"}

    path: str = Field(min_length=1, max_length=500, pattern=r"^[A-Za-z0-9_\-]+(/[A-Za-z0-9_\-]+)*$")
    source: str = Field(max_length=100_000)
    formatted: bool = False


class RenderResponse(BaseModel):
    """Result of one pipeline run."""

    ok: bool
    markup: str | None = None
    formatted_markup: str | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def from_result(cls, result: PipelineResult, formatted_markup: str | None = None) -> RenderResponse:
        return cls(
            ok=result.ok,
            markup=result.markup,
            formatted_markup=formatted_markup,
            error=result.error,
            error_kind=result.error_kind,
        )


class ExampleResponse(BaseModel):
    """An example's original source and its render."""

    path: str
    source: str
    anchor: str
    editor_id: str
    edit_url: str
    render: RenderResponse


class ExampleListResponse(BaseModel):
    """Every example path the store knows."""

    paths: list[str]


class PanelStateMessage(BaseModel):
    """What the server sends over the example WebSocket after every change."""

    type: Literal["state"] = "state"
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
    status: str
    copied: bool = False

    @classmethod
    def from_state(cls, state: PanelState) -> PanelStateMessage:
        return cls(**state.to_dict())


class ClientMessage(BaseModel):
    """What the client sends over the example WebSocket."""

    model_config = {"extra": "forbid"}

    type: Literal["edit", "reset", "toggle_code", "toggle_html", "clear_active", "copy"]
    source: str | None = Field(default=None, max_length=100_000)
