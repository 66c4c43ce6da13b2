"""Debounced search state.

The search box only re-filters once typing settles: each update cancels the
pending one and reschedules it on the running event loop (trailing edge).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Debouncer:
    """Delay ``callback`` until ``wait_seconds`` pass without a new call."""

    def __init__(self, callback: Callable[..., Any], wait_seconds: float) -> None:
        if wait_seconds < 0:
            raise ValueError("wait_seconds must be >= 0")
        self._callback = callback
        self._wait = wait_seconds
        self._handle: asyncio.TimerHandle | None = None
        self._args: tuple[Any, ...] = ()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def __call__(self, *args: Any) -> None:
        loop = asyncio.get_running_loop()
        self.cancel()
        self._args = args
        self._handle = loop.call_later(self._wait, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def flush(self) -> None:
        """Run the pending call immediately, if any."""

        if self._handle is None:
            return
        self._handle.cancel()
        self._fire()

    def _fire(self) -> None:
        self._handle = None
        args, self._args = self._args, ()
        self._callback(*args)


class SearchState:
    """Current search query with a debounced setter.

    `on_change` runs once per effective change, after the debounce settles.
    """

    def __init__(
        self,
        *,
        wait_seconds: float = 0.05,
        on_change: Callable[[str], None] | None = None,
    ) -> None:
        self.query = ""
        self._on_change = on_change
        self._debounced = Debouncer(self._apply, wait_seconds)

    @property
    def pending(self) -> bool:
        return self._debounced.pending

    def update(self, query: str) -> None:
        self._debounced(query)

    def flush(self) -> None:
        self._debounced.flush()

    def cancel(self) -> None:
        self._debounced.cancel()

    def _apply(self, query: str) -> None:
        if query == self.query:
            return
        logger.debug("search query changed: %r -> %r", self.query, query)
        self.query = query
        if self._on_change is not None:
            self._on_change(query)
