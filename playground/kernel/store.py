"""
Playground Kernel — Example store

Where example sources (and their per-component "common" helper modules)
come from. Implement with files on disk for the service, or in memory for
tests.

Layout of a file store:

    <root>/elements/Button/Types/ButtonExampleButton.js   ← example source
    <root>/elements/Button/common.py                        ← COMMON for elements/Button/*
"""

from __future__ import annotations

import importlib.util
import logging
from pathlib import Path
from types import ModuleType, SimpleNamespace
from typing import Any

from playground.kernel.types import is_valid_example_path

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".js"
BUNDLED_EXAMPLES = Path(__file__).resolve().parent.parent / "examples"
COMMON_MODULE = "common.py"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ExampleNotFound(Exception):
    """No example source exists at a path."""

    pass


class CommonNotFound(Exception):
    """No common helpers module exists for a component path."""

    pass


# ---------------------------------------------------------------------------
# Storage protocol
# ---------------------------------------------------------------------------


class ExampleStore:
    """
    Abstract example store.
    get() is queried once per panel; load_common() once per run that needs it.
    """

    def get(self, path: str) -> str | None:
        """Fetch the source of an example. Returns None if not found."""
        raise NotImplementedError

    def load_common(self, component_path: str) -> Any:
        """Return the common helpers of a component. Raises CommonNotFound."""
        raise NotImplementedError

    def list_paths(self) -> list[str]:
        """All example paths, sorted."""
        raise NotImplementedError


class MemoryExampleStore(ExampleStore):
    """In-memory store for testing."""

    def __init__(
        self,
        sources: dict[str, str] | None = None,
        commons: dict[str, dict[str, Any]] | None = None,
    ) -> None:
        self.sources: dict[str, str] = dict(sources or {})
        self.commons: dict[str, dict[str, Any]] = dict(commons or {})
        self.get_calls = 0

    def get(self, path: str) -> str | None:
        self.get_calls += 1
        return self.sources.get(path)

    def put(self, path: str, source: str) -> None:
        self.sources[path] = source

    def load_common(self, component_path: str) -> Any:
        if component_path not in self.commons:
            raise CommonNotFound(f"No common helpers for {component_path}")
        return SimpleNamespace(**self.commons[component_path])

    def list_paths(self) -> list[str]:
        return sorted(self.sources)


class FileExampleStore(ExampleStore):
    """Examples read from a directory tree."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)
        self._commons: dict[str, ModuleType] = {}

    def _resolve(self, relative: str) -> Path | None:
        target = (self.root / relative).resolve()
        if self.root.resolve() not in target.parents:
            return None
        return target

    def get(self, path: str) -> str | None:
        if not is_valid_example_path(path):
            return None
        target = self._resolve(path + SOURCE_SUFFIX)
        if target is None or not target.is_file():
            return None
        return target.read_text(encoding="utf-8")

    def load_common(self, component_path: str) -> Any:
        if component_path in self._commons:
            return self._commons[component_path]
        target = self._resolve(f"{component_path}/{COMMON_MODULE}") if is_valid_example_path(component_path) else None
        if target is None or not target.is_file():
            raise CommonNotFound(f"No common helpers for {component_path}")

        name = "playground_common_" + component_path.replace("/", "_").replace("-", "_")
        spec = importlib.util.spec_from_file_location(name, target)
        if spec is None or spec.loader is None:
            raise CommonNotFound(f"Cannot load common helpers for {component_path}")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        logger.debug("Loaded common helpers %s", target)
        self._commons[component_path] = module
        return module

    def list_paths(self) -> list[str]:
        return sorted(
            str(p.relative_to(self.root).with_suffix("")).replace("\\", "/")
            for p in self.root.rglob("*" + SOURCE_SUFFIX)
        )
