"""Async yes/no confirmation gate used before destructive edits.

The editor only needs an async callable returning ``bool``. ``ConfirmationGate``
is the in-process implementation a UI drives: each ``confirm()`` call queues
a single-shot future and the UI answers the oldest one with ``accept``,
``reject`` or ``dismiss``. Requests made while another is open wait their turn
instead of replacing it, so every caller is resolved exactly once.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[], Awaitable[bool]]


class ConfirmationGate:
    def __init__(self, on_open: Callable[[], None] | None = None):
        """
        Args:
            on_open: called whenever a request becomes the one shown to the
                user (the UI opens its dialog here).
        """
        self._queue: deque[asyncio.Future[bool]] = deque()
        self._on_open = on_open

    @property
    def is_open(self) -> bool:
        return bool(self._queue)

    @property
    def pending(self) -> int:
        return len(self._queue)

    async def confirm(self) -> bool:
        future: asyncio.Future[bool] = asyncio.get_running_loop().create_future()
        future.add_done_callback(self._discard_cancelled)
        self._queue.append(future)
        logger.debug("Confirmation requested (%d pending)", len(self._queue))
        if len(self._queue) == 1:
            self._notify_open()
        return await future

    __call__ = confirm

    def accept(self) -> bool:
        return self._resolve(True)

    def reject(self) -> bool:
        return self._resolve(False)

    def dismiss(self) -> bool:
        """Abandon the open request; its command never runs."""
        return self._resolve(False)

    def _resolve(self, answer: bool) -> bool:
        """Answer the oldest open request. Returns False if nothing was pending."""
        while self._queue:
            future = self._queue.popleft()
            if future.done():  # awaiting task was cancelled
                continue
            future.set_result(answer)
            logger.debug("Confirmation resolved: %s", answer)
            if self._queue:
                self._notify_open()
            return True
        return False

    def _discard_cancelled(self, future: asyncio.Future[bool]) -> None:
        """Drop a request whose caller went away; re-open the dialog if it was shown."""
        if not future.cancelled():
            return
        was_open = bool(self._queue) and self._queue[0] is future
        try:
            self._queue.remove(future)
        except ValueError:
            return
        logger.debug("Confirmation abandoned (%d pending)", len(self._queue))
        if was_open and self._queue:
            self._notify_open()

    def _notify_open(self) -> None:
        if self._on_open is not None:
            self._on_open()


class AutoConfirm:
    """Non-interactive gate that always gives the same answer."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.calls = 0

    async def __call__(self) -> bool:
        self.calls += 1
        return self.answer


__all__ = ["ConfirmationGate", "AutoConfirm", "ConfirmFn"]
