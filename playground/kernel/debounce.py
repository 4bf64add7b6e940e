"""
Playground Kernel — Debouncer

Trailing-edge debounce on the asyncio event loop: every call reschedules
the callback `wait` milliseconds out, so only the last call of a burst runs,
once the burst has settled.

    errors = Debouncer(800, publish_error)
    errors("first")     # scheduled
    errors("second")    # rescheduled; only publish_error("second") runs
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable

ERROR_DEBOUNCE_MS = 800
RENDER_DEBOUNCE_MS = 100
COPIED_RESET_MS = 1000


class Debouncer:
    """Runs callback with the arguments of the last call once calls stop for wait ms."""

    def __init__(
        self,
        wait: float,
        callback: Callable[..., Any],
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self.wait = wait
        self.callback = callback
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._args: tuple[Any, ...] = ()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def __call__(self, *args: Any) -> None:
        self.cancel()
        loop = self._loop or asyncio.get_running_loop()
        self._args = args
        self._handle = loop.call_later(self.wait / 1000, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def flush(self) -> None:
        """Run the pending call now, if there is one."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._fire()

    def _fire(self) -> None:
        self._handle = None
        args, self._args = self._args, ()
        self.callback(*args)
