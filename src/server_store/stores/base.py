"""Store protocol — a synchronous key-value cache for one logical store."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Store(ABC):
    """Abstract base for all storage backends.

    A store holds JSON-serializable values keyed by string.  Expiry and
    size limits apply to the store as a whole, never to single keys.
    """

    @abstractmethod
    def get_item(self, key: str) -> Any | None:
        """Return the stored value, or ``None`` if missing or expired."""
        ...

    @abstractmethod
    def has_item(self, key: str) -> bool:
        """Return ``True`` if the key is present and the store is not expired."""
        ...

    @abstractmethod
    def set_item(self, key: str, value: Any) -> bool:
        """Store a value.  Return ``False`` if the store is now over its size limit."""
        ...

    @abstractmethod
    def clear_cache(self) -> None:
        """Discard every key."""
        ...
