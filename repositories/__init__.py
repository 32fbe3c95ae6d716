"""
Storage layer - abstracts the durable key-value slot.

Usage:
    from repositories import get_storage

    storage = get_storage()  # Returns configured backend
    raw = storage.get("vibe_entries")
    storage.set("vibe_entries", raw)

Backends are swappable via config.
"""

from config import STORAGE_BACKEND
from .base import KeyValueStorage
from .json_backend import JsonFileStorage
from .memory_backend import MemoryStorage

# Default backend - can be changed via config
_backend: str = STORAGE_BACKEND
_options: dict = {}
_instance: KeyValueStorage = None


def get_storage() -> KeyValueStorage:
    """Get the configured storage instance."""
    global _instance

    if _instance is None:
        if _backend == "json":
            _instance = JsonFileStorage(**_options)
        elif _backend == "memory":
            _instance = MemoryStorage(**_options)
        else:
            raise ValueError(f"Unknown backend: {_backend}")

    return _instance


def configure_backend(backend: str, **kwargs) -> None:
    """Configure the storage backend."""
    global _backend, _options, _instance
    _backend = backend
    _options = kwargs
    _instance = None  # Force re-initialization


__all__ = [
    "get_storage",
    "configure_backend",
    "KeyValueStorage",
    "JsonFileStorage",
    "MemoryStorage",
]
