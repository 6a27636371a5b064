"""Non-raising construction of file stores."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from server_store.exceptions import StoreError
from server_store.result import OpenResult
from server_store.stores.file import FileStore

if TYPE_CHECKING:
    from server_store._internal.clock import Clock
    from server_store.schema import StoreConfigSchema


def open_store(
    namespace: str | None = None,
    store_name: str | None = None,
    store_directory: str | os.PathLike[str] | None = None,
    expiry_window_ms: float | None = None,
    max_file_size_bytes: float | None = None,
    *,
    clock: Clock | None = None,
) -> OpenResult:
    """Open a :class:`FileStore`, returning failures instead of raising them.

    Takes the same arguments as :class:`FileStore`.  Missing names are
    rejected like any other invalid argument, and every
    :class:`~server_store.exceptions.StoreError` raised during construction
    is captured in the returned :class:`OpenResult`.

    Example:
        result = open_store("suppliercenter", "taxonomy")
        if not result.ok:
            log.error("cache unavailable: %s", result.error)
        else:
            result.store.set_item("categories", [{"id": 123}])
    """
    try:
        store = FileStore(
            namespace,  # type: ignore[arg-type]
            store_name,  # type: ignore[arg-type]
            store_directory,
            expiry_window_ms,
            max_file_size_bytes,
            clock=clock,
        )
    except StoreError as e:
        return OpenResult.failure(e)
    return OpenResult.success(store)


def open_store_from_config(config: StoreConfigSchema, *, clock: Clock | None = None) -> OpenResult:
    """Open a store from an already validated configuration."""
    return open_store(
        config.namespace,
        config.store_name,
        config.store_directory,
        config.expiry_window_ms,
        config.max_file_size_bytes,
        clock=clock,
    )
