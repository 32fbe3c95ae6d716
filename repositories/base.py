"""
Storage base class - defines the durable key-value slot interface.
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStorage(ABC):
    """
    Abstract durable key-value slot.

    Values are opaque text. Callers own the serialization format.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the value stored under key, or None if absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Overwrite the value under key. Durable before returning."""
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete key. Returns True if deleted."""
        pass

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if key holds a value."""
        pass

    @abstractmethod
    def copy(self, key: str, new_key: str) -> bool:
        """Copy the raw value under key to new_key. Returns False if key is absent."""
        pass
