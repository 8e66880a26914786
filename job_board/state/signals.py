"""Reactive values with explicit subscribe/unsubscribe, and the viewport layout signal."""

from typing import Callable, Generic, List, TypeVar

from job_board.config import DESKTOP_DEFAULT_WIDTH, MOBILE_MAX_WIDTH

T = TypeVar("T")
Subscriber = Callable[[T], None]


class Signal(Generic[T]):
    """Holds a value and notifies subscribers when it changes."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: List[Subscriber] = []

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        if value == self._value:
            return
        self._value = value
        for callback in list(self._subscribers):
            callback(value)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register callback; returns the matching unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)


class ViewportSignal(Signal[int]):
    """Viewport width; widths up to MOBILE_MAX_WIDTH are laid out as mobile."""

    def __init__(self, width: int = DESKTOP_DEFAULT_WIDTH, mobile_max_width: int = MOBILE_MAX_WIDTH) -> None:
        super().__init__(width)
        self._mobile_max_width = mobile_max_width

    @property
    def is_mobile(self) -> bool:
        return self.value <= self._mobile_max_width

    def resize(self, width: int) -> None:
        self.set(int(width))
