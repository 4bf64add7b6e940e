"""
Pytest configuration and fixtures for the playground API tests.
"""

from __future__ import annotations

import os

# Set test environment variables before importing config
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from backend.main import app  # noqa: E402
from backend.routes.examples import get_playground  # noqa: E402
from backend.services.playground import PlaygroundService  # noqa: E402
from playground.kernel.store import MemoryExampleStore  # noqa: E402

MEMORY_EXAMPLES = {
    "elements/Label/Types/LabelExampleTag": (
        "import React from 'react'\n"
        "import { Label } from 'semantic-ui-react'\n\n"
        "const LabelExampleTag = () => <Label tag>New</Label>\n\n"
        "export default LabelExampleTag\n"
    ),
    "elements/Label/Types/LabelExampleBroken": "export default 42\n",
}


@pytest_asyncio.fixture
async def async_client():
    """Async HTTP client against the ASGI app."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def memory_service():
    """Swap the bundled examples for an in-memory store for one test."""
    service = PlaygroundService(store=MemoryExampleStore(MEMORY_EXAMPLES))
    app.dependency_overrides[get_playground] = lambda: service
    yield service
    app.dependency_overrides.pop(get_playground, None)
