"""Debounce a rapidly changing value on the running asyncio loop."""

import asyncio
from typing import Callable, Generic, Optional, TypeVar

from job_board.config import SEARCH_DEBOUNCE_SECONDS

T = TypeVar("T")


class Debouncer(Generic[T]):
    """
    push() (re)starts a timer; callback receives the last pushed value once no push
    has happened for `delay` seconds. cancel() drops the pending value.
    """

    def __init__(self, callback: Callable[[T], None], delay: float = SEARCH_DEBOUNCE_SECONDS) -> None:
        self._callback = callback
        self._delay = delay
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def push(self, value: T) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._delay, self._fire, value)

    def _fire(self, value: T) -> None:
        self._handle = None
        self._callback(value)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
