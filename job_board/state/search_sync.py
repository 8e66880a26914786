"""Two-way binding between the filter controls and the URL query string."""

from typing import Any, MutableMapping

from job_board.schemas.filters import PAGE_KEY, FilterState


class SearchStateSynchronizer:
    """
    The query params are the single source of truth: `filters` is re-derived on every
    read, and control changes are written straight back. Works over any mutable
    str->str mapping; the app passes st.query_params.
    """

    def __init__(self, params: MutableMapping[str, Any]) -> None:
        self._params = params

    @property
    def filters(self) -> FilterState:
        return FilterState.from_query_params(self._params)

    def update_param(self, key: str, value: Any) -> bool:
        """
        Set a filter (empty removes it) and reset page to 1.
        Setting a filter to its current value changes nothing. Returns True if params changed.
        """
        new_value = "" if value is None else str(value)
        current = self._params.get(key) or ""
        if str(current) == new_value:
            return False
        if new_value:
            self._params[key] = new_value
        elif key in self._params:
            del self._params[key]
        self._params[PAGE_KEY] = "1"
        return True

    def go_to_page(self, page: int) -> bool:
        """Only the page param changes; other filters are untouched."""
        page = max(1, int(page))
        if str(self._params.get(PAGE_KEY) or "1") == str(page):
            return False
        self._params[PAGE_KEY] = str(page)
        return True
