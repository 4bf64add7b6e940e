"""
Playground configuration — all environment variables in one place.

Read from environment at runtime.
"""

from __future__ import annotations

import os

from playground.kernel.store import BUNDLED_EXAMPLES


class Settings:
    """Application settings from environment variables."""

    # Examples
    EXAMPLES_DIR: str = os.environ.get("EXAMPLES_DIR", str(BUNDLED_EXAMPLES))
    REPO_URL: str = os.environ.get("REPO_URL", "https://github.com/Semantic-Org/Semantic-UI-React")

    # Debounce windows (milliseconds)
    RENDER_DEBOUNCE_MS: int = int(os.environ.get("RENDER_DEBOUNCE_MS", "100"))
    ERROR_DEBOUNCE_MS: int = int(os.environ.get("ERROR_DEBOUNCE_MS", "800"))

    # Execution budget per run (milliseconds)
    EVAL_TIMEOUT_MS: int = int(os.environ.get("EVAL_TIMEOUT_MS", "2000"))

    # Rendering
    FAKER_SEED: int = int(os.environ.get("FAKER_SEED", "1234"))
    HTML_INDENT: int = int(os.environ.get("HTML_INDENT", "2"))

    # Application
    ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    @property
    def PUBLIC_URL(self) -> str:
        url = os.environ.get("PUBLIC_URL")
        if url:
            return url
        return "http://localhost:8000" if self.ENVIRONMENT == "development" else "https://react.semantic-ui.com"


# Singleton instance
settings = Settings()

if settings.RENDER_DEBOUNCE_MS < 0 or settings.ERROR_DEBOUNCE_MS < 0:
    raise RuntimeError("Debounce windows must not be negative")

if settings.EVAL_TIMEOUT_MS <= 0:
    raise RuntimeError("EVAL_TIMEOUT_MS must be positive")
