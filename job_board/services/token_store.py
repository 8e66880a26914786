"""Persisted admin session: a single bearer token under a fixed storage key."""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, MutableMapping, Optional

from job_board.config import TOKEN_FILE, TOKEN_STORAGE_KEY
from job_board.utils.logger import get_logger

logger = get_logger(__name__)


class JsonFileStorage(MutableMapping):
    """String key/value storage backed by a JSON file; survives browser sessions and restarts."""

    def __init__(self, path: str) -> None:
        self._path = Path(path).expanduser()

    def _read(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable token file %s", self._path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data), encoding="utf-8")

    def __getitem__(self, key: str) -> Any:
        return self._read()[key]

    def __setitem__(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def __delitem__(self, key: str) -> None:
        data = self._read()
        del data[key]
        self._write(data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._read())

    def __len__(self) -> int:
        return len(self._read())


class TokenStore:
    """Get/set/clear the admin token in any mutable mapping (session state, JSON file, dict)."""

    def __init__(self, storage: MutableMapping, key: str = TOKEN_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key

    def get(self) -> Optional[str]:
        token = self._storage.get(self._key)
        return token if isinstance(token, str) and token else None

    def set(self, token: str) -> None:
        self._storage[self._key] = token

    def clear(self) -> None:
        if self._key in self._storage:
            del self._storage[self._key]


def default_token_store(session_storage: MutableMapping) -> TokenStore:
    """Use the JSON file when JOB_BOARD_TOKEN_FILE is set, else the per-browser session storage."""
    if TOKEN_FILE:
        return TokenStore(JsonFileStorage(TOKEN_FILE))
    return TokenStore(session_storage)
