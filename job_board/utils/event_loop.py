"""A long-lived asyncio loop on a daemon thread, one per browser session.

Streamlit reruns the page script on every interaction, so timers and in-flight
requests cannot live inside a single script run. They live on this loop instead;
the script thread only schedules work onto it and reads the resulting state.
"""

import asyncio
import threading
from typing import Any, Awaitable, Callable, Optional, TypeVar

from job_board.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class BackgroundLoop:
    """Run coroutines and callbacks on a private event loop thread."""

    def __init__(self, name: str = "job-board-loop") -> None:
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        asyncio.set_event_loop(self._loop)
        self._loop.run_forever()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def run(self, coro: Awaitable[T], timeout: Optional[float] = None) -> T:
        """Block the calling thread until coro finishes on the loop; exceptions propagate."""
        future = asyncio.run_coroutine_threadsafe(coro, self._loop)
        return future.result(timeout)

    def run_callable(self, fn: Callable[..., T], *args: Any, timeout: Optional[float] = None) -> T:
        """Run a plain function on the loop thread and wait for its result."""

        async def _invoke() -> T:
            return fn(*args)

        return self.run(_invoke(), timeout)

    def call(self, fn: Callable[..., Any], *args: Any) -> None:
        """Schedule a plain callback on the loop without waiting for it."""
        self._loop.call_soon_threadsafe(fn, *args)

    def stop(self) -> None:
        if self._loop.is_running():
            self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=2.0)
        logger.debug("Background loop %s stopped", self._thread.name)
