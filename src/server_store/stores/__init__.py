"""Storage backends for cached response data."""

from server_store.stores.base import Store
from server_store.stores.file import FileStore

__all__ = ["FileStore", "Store"]
