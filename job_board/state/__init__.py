"""UI state primitives: signals, debouncing, URL-synchronised filters."""

from .debounce import Debouncer
from .search_sync import SearchStateSynchronizer
from .signals import Signal, ViewportSignal

__all__ = ["Debouncer", "SearchStateSynchronizer", "Signal", "ViewportSignal"]
