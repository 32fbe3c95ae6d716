"""
Entry store - the ordered catalog and its snapshot persistence.

The whole collection is serialized and written on every append. There are no
partial or merge writes, so a write either lands the complete new catalog or
leaves the previous one in place.
"""

import json
import threading
from typing import Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from config import STORAGE_KEY
from models import CatalogEntry
from repositories import KeyValueStorage
from .errors import DataCorruption, ValidationError

CORRUPT_SUFFIX = ".corrupt"


def serialize_entries(entries: Sequence[CatalogEntry]) -> str:
    """Catalog as a JSON array of camelCase objects."""
    return json.dumps([entry.to_json_dict() for entry in entries], ensure_ascii=False)


def deserialize_entries(raw: str, key: str = STORAGE_KEY) -> list[CatalogEntry]:
    """Parse a stored catalog. Raises DataCorruption on anything unreadable."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DataCorruption(key, f"invalid JSON ({e})") from e

    if not isinstance(data, list):
        raise DataCorruption(key, f"expected a JSON array, got {type(data).__name__}")

    entries = []
    for index, item in enumerate(data):
        try:
            entries.append(CatalogEntry.model_validate(item))
        except PydanticValidationError as e:
            raise DataCorruption(key, f"entry {index} is invalid: {e.error_count()} error(s)") from e

    ids = [entry.id for entry in entries]
    if len(ids) != len(set(ids)):
        raise DataCorruption(key, "duplicate entry ids")

    return entries


class EntryStore:
    """
    Holds the catalog, most recent first, and keeps it durable.

    Storage is injected so tests can run against MemoryStorage.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        seed: Sequence[CatalogEntry] = (),
        key: str = STORAGE_KEY,
    ):
        self._storage = storage
        self._seed = list(seed)
        self._key = key
        self._entries: Optional[list[CatalogEntry]] = None
        self._lock = threading.Lock()

    @property
    def key(self) -> str:
        return self._key

    @property
    def seed(self) -> list[CatalogEntry]:
        return list(self._seed)

    def _read(self) -> Optional[str]:
        try:
            return self._storage.get(self._key)
        except UnicodeDecodeError as e:
            raise DataCorruption(self._key, "invalid UTF-8") from e

    def load(self) -> list[CatalogEntry]:
        """
        Read the catalog from storage.

        Absent slot returns the seed collection (not written until the first
        append). Unreadable slot raises DataCorruption; the caller decides
        whether to recover.
        """
        raw = self._read()
        if raw is None:
            entries = list(self._seed)
        else:
            entries = deserialize_entries(raw, self._key)

        self._entries = entries
        return list(entries)

    def entries(self) -> list[CatalogEntry]:
        """Current collection, loading on first use."""
        if self._entries is None:
            return self.load()
        return list(self._entries)

    def get(self, entry_id: str) -> Optional[CatalogEntry]:
        """Get entry by ID."""
        for entry in self.entries():
            if entry.id == entry_id:
                return entry
        return None

    def ids(self) -> set[str]:
        return {entry.id for entry in self.entries()}

    def append(self, entry: CatalogEntry) -> list[CatalogEntry]:
        """Insert at the front and persist the full snapshot before returning."""
        with self._lock:
            current = self.entries()
            if any(existing.id == entry.id for existing in current):
                raise ValidationError(["id"], f"Entry id already exists: {entry.id}")

            updated = [entry] + current
            self._storage.set(self._key, serialize_entries(updated))
            self._entries = updated

        return list(updated)

    def recover(self, entries: Sequence[CatalogEntry]) -> list[CatalogEntry]:
        """
        Adopt ``entries`` after a DataCorruption.

        The unreadable payload is copied to ``<key>.corrupt`` first so the next
        snapshot write can't destroy it.
        """
        with self._lock:
            self._storage.copy(self._key, self._key + CORRUPT_SUFFIX)
            self._entries = list(entries)

        return list(self._entries)
