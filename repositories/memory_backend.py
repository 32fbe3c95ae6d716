"""
In-memory backend - for tests and throwaway sessions.
"""

import threading
from typing import Optional

from .base import KeyValueStorage


class MemoryStorage(KeyValueStorage):
    """Dict-backed storage slot. Nothing survives the process."""

    def __init__(self, initial: dict = None):
        self._data: dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None

    def exists(self, key: str) -> bool:
        return key in self._data

    def copy(self, key: str, new_key: str) -> bool:
        with self._lock:
            if key not in self._data:
                return False
            self._data[new_key] = self._data[key]
            return True
