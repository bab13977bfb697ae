"""Quiet-period timer for search input."""
import asyncio
import logging
from typing import Awaitable, Callable, Generic, Optional, Set, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Debouncer(Generic[T]):
    """
    Runs ``callback`` with the latest value once input has been quiet for
    ``delay`` seconds.

    A new ``trigger`` cancels the pending timer and reschedules it. Callbacks
    that already started are never cancelled; callers that must ignore
    superseded work do so themselves.
    """

    def __init__(self, delay: float, callback: Callable[[T], Awaitable[None]]):
        self.delay = delay
        self._callback = callback
        self._handle: Optional[asyncio.TimerHandle] = None
        self._pending_value: Optional[T] = None
        self._tasks: Set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        """True while a value is waiting for the quiet period to end."""
        return self._handle is not None

    def trigger(self, value: T) -> None:
        """Schedule ``value``, replacing any value still waiting."""
        self.cancel()
        loop = asyncio.get_running_loop()
        self._pending_value = value
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> bool:
        """Drop the waiting value. Returns False when nothing was pending."""
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        self._pending_value = None
        return True

    async def flush(self) -> None:
        """Run the waiting value now instead of at the end of the quiet period."""
        if self._handle is None:
            return
        value = self._pending_value
        self.cancel()
        await self._callback(value)

    async def drain(self) -> None:
        """Wait until no value is pending and every started callback has finished."""
        loop = asyncio.get_running_loop()
        while self._handle is not None or self._tasks:
            if self._handle is not None:
                await asyncio.sleep(max(0.0, self._handle.when() - loop.time()))
            else:
                await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def _fire(self) -> None:
        value = self._pending_value
        self._handle = None
        self._pending_value = None
        task = asyncio.ensure_future(self._callback(value))
        self._tasks.add(task)
        task.add_done_callback(self._finished)

    def _finished(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Debounced callback failed", exc_info=exc)
