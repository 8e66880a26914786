"""Confirmation / notification capability injected into the admin controllers."""

import threading
from typing import List, Optional, Protocol, Tuple

# Levels understood by the views: success, info, warning, error
Notification = Tuple[str, str]


class Notifier(Protocol):
    def confirm(self, message: str) -> bool:
        ...

    def notify(self, message: str, level: str = "info") -> None:
        ...


class QueuedNotifier:
    """
    Notifier that defers all UI work to the page script.

    notify() queues messages for drain(). confirm() is two-step: the first call records
    the prompt and answers False; once the user approves the prompt, the next confirm()
    with the same message answers True exactly once.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._queue: List[Notification] = []
        self._approved: set = set()
        self._pending_confirm: Optional[str] = None

    def notify(self, message: str, level: str = "info") -> None:
        with self._lock:
            self._queue.append((message, level))

    def drain(self) -> List[Notification]:
        with self._lock:
            items, self._queue = self._queue, []
        return items

    def confirm(self, message: str) -> bool:
        with self._lock:
            if message in self._approved:
                self._approved.discard(message)
                self._pending_confirm = None
                return True
            self._pending_confirm = message
            return False

    @property
    def pending_confirm(self) -> Optional[str]:
        return self._pending_confirm

    def approve(self, message: str) -> None:
        with self._lock:
            self._approved.add(message)

    def dismiss(self) -> None:
        with self._lock:
            self._pending_confirm = None
            self._approved.clear()
