"""Example routes — list, fetch with render, render edited source."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from backend.models.example import ExampleListResponse, ExampleResponse, RenderRequest, RenderResponse
from backend.services.playground import PlaygroundService, playground_service
from playground.kernel.store import ExampleNotFound

router = APIRouter(prefix="/api", tags=["examples"])


def get_playground() -> PlaygroundService:
    return playground_service


@router.get("/examples", status_code=200)
async def list_examples(service: PlaygroundService = Depends(get_playground)) -> ExampleListResponse:
    """List every example path."""
    return ExampleListResponse(paths=service.list_examples())


@router.get("/examples/{path:path}", status_code=200)
async def get_example(path: str, service: PlaygroundService = Depends(get_playground)) -> ExampleResponse:
    """Original source of an example and its render."""
    try:
        return service.get_example(path)
    except ExampleNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Example not found.") from None


@router.post("/render", status_code=200)
async def render_example(req: RenderRequest, service: PlaygroundService = Depends(get_playground)) -> RenderResponse:
    """
    Run the pipeline once on the given source.
    Pipeline failures are regular responses with ok=false.
    """
    return service.render(req)
