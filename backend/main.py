"""
Playground FastAPI application.

Entry point for the API server.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from backend.config import settings
from backend.routes import examples as example_routes
from backend.routes import ws as ws_routes
from backend.services.playground import playground_service

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.

    Startup logs where examples are served from; nothing to tear down.
    """
    logger.info(
        "Serving %d examples from %s",
        len(playground_service.list_examples()),
        settings.EXAMPLES_DIR,
    )
    yield
    logger.info("Playground shutting down")


app = FastAPI(
    title="Playground",
    docs_url=None,
    redoc_url=None,
    lifespan=lifespan,
)

# Register routes
app.include_router(example_routes.router)
app.include_router(ws_routes.router)


@app.get("/health")
async def health():
    """Health check endpoint for uptime monitoring."""
    return {"status": "ok"}
