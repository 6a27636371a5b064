"""server_store — a small persistent key-value cache in a single JSON file.

Each store is one file, ``<directory>/<namespace>-<store>.json``.  The
whole store expires at once, and the file is kept under a size ceiling by
resetting it when a handle is opened.
"""

from server_store.exceptions import (
    DirectoryCreateError,
    InvalidArgumentError,
    ReadError,
    StoreError,
    StoreInitError,
    WriteError,
)
from server_store.factory import open_store, open_store_from_config
from server_store.result import OpenResult
from server_store.schema import (
    DEFAULT_EXPIRY_WINDOW_MS,
    DEFAULT_MAX_FILE_SIZE_BYTES,
    DEFAULT_STORE_DIRECTORY,
    StoreConfigSchema,
)
from server_store.stores import FileStore, Store
from server_store.stores.file import TIMESTAMP_KEY

__all__ = [
    "DEFAULT_EXPIRY_WINDOW_MS",
    "DEFAULT_MAX_FILE_SIZE_BYTES",
    "DEFAULT_STORE_DIRECTORY",
    "TIMESTAMP_KEY",
    "DirectoryCreateError",
    "FileStore",
    "InvalidArgumentError",
    "OpenResult",
    "ReadError",
    "Store",
    "StoreConfigSchema",
    "StoreError",
    "StoreInitError",
    "WriteError",
    "open_store",
    "open_store_from_config",
]
