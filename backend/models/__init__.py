"""
Pydantic models for the playground service.

All data shapes defined here. No imports from routes or services.
"""

from backend.models.example import (
    ClientMessage,
    ExampleListResponse,
    ExampleResponse,
    PanelStateMessage,
    RenderRequest,
    RenderResponse,
)

__all__ = [
    "ClientMessage",
    "ExampleListResponse",
    "ExampleResponse",
    "PanelStateMessage",
    "RenderRequest",
    "RenderResponse",
]
