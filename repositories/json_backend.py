"""
JSON file backend - stores each key as a file.

Directory structure:
    data/
        vibe_entries.json          - Entry catalog snapshot
        vibe_entries.corrupt.json  - Unreadable snapshot kept after recovery
"""

import re
import shutil
import threading
from pathlib import Path
from typing import Optional

from config import DATA_DIR
from .base import KeyValueStorage

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class WriteQueue:
    """Thread-safe write serialization."""

    def __init__(self):
        self._lock = threading.Lock()

    def write_text(self, path: Path, text: str) -> None:
        """Atomic text write."""
        with self._lock:
            temp = path.with_suffix(path.suffix + ".tmp")
            with open(temp, "w", encoding="utf-8") as f:
                f.write(text)
            temp.replace(path)

    def copy_file(self, source: Path, path: Path) -> None:
        """Atomic byte-for-byte copy. Undecodable content survives unchanged."""
        with self._lock:
            temp = path.with_suffix(path.suffix + ".tmp")
            shutil.copyfile(source, temp)
            temp.replace(path)


_write_queue = WriteQueue()


class JsonFileStorage(KeyValueStorage):
    """File-per-key implementation of the storage slot."""

    def __init__(self, base_path: Path = None):
        self._base_path = Path(base_path) if base_path else DATA_DIR

    def _key_file(self, key: str) -> Path:
        if not _SAFE_KEY.match(key) or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._base_path / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        """Raises UnicodeDecodeError if the file is not valid UTF-8."""
        path = self._key_file(key)
        if not path.exists():
            return None
        with open(path, encoding="utf-8") as f:
            return f.read()

    def set(self, key: str, value: str) -> None:
        self._base_path.mkdir(parents=True, exist_ok=True)
        _write_queue.write_text(self._key_file(key), value)

    def delete(self, key: str) -> bool:
        path = self._key_file(key)
        if not path.exists():
            return False
        path.unlink()
        return True

    def exists(self, key: str) -> bool:
        return self._key_file(key).exists()

    def copy(self, key: str, new_key: str) -> bool:
        path = self._key_file(key)
        if not path.exists():
            return False
        _write_queue.copy_file(path, self._key_file(new_key))
        return True
