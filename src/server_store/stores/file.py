"""FileStore — a bounded, expiring key-value cache kept in one JSON file.

All file operations are synchronous and re-read the file on every call, so
use it sparingly and never as a database.  Intended for small responses that
do not depend on the user (taxonomy lookups and the like).
"""

from __future__ import annotations

import json
import logging
import math
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from server_store._internal.clock import SystemClock, epoch_ms
from server_store.exceptions import (
    DirectoryCreateError,
    InvalidArgumentError,
    ReadError,
    StoreInitError,
    WriteError,
)
from server_store.schema import StoreConfigSchema
from server_store.stores.base import Store

if TYPE_CHECKING:
    from server_store._internal.clock import Clock

logger = logging.getLogger(__name__)

TIMESTAMP_KEY = "_timestamp"


class FileStore(Store):
    """Store backed by ``<store_directory>/<namespace>-<store_name>.json``.

    The whole store expires together: once the file is older than
    ``expiry_window_ms`` every read sees an empty store, and the next write
    starts a fresh file.  The size ceiling is enforced by resetting an
    oversized file at construction; writes only *report* whether they left
    the file over the ceiling.  The data is kept either way.

    There is no locking.  Handles pointing at the same file see each other's
    writes but concurrent writers can overwrite each other.

    Parameters:
        namespace:           Application namespace.
        store_name:          Name of this store within the namespace.
        store_directory:     Directory for the file.  Defaults to
                             :data:`~server_store.schema.DEFAULT_STORE_DIRECTORY`.
        expiry_window_ms:    Store lifetime in milliseconds.  Default 1 hour.
        max_file_size_bytes: Size ceiling in bytes.  Default 1 MB.
        clock:               Time source.  Inject a fake in tests.

    Raises:
        InvalidArgumentError: An argument has the wrong type or value.
        DirectoryCreateError: ``store_directory`` cannot be created.
        StoreInitError:       The file cannot be inspected or created.
    """

    def __init__(
        self,
        namespace: str,
        store_name: str,
        store_directory: str | os.PathLike[str] | None = None,
        expiry_window_ms: float | None = None,
        max_file_size_bytes: float | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._config = _build_config(
            namespace=namespace,
            store_name=store_name,
            store_directory=store_directory,
            expiry_window_ms=expiry_window_ms,
            max_file_size_bytes=max_file_size_bytes,
        )
        self._clock: Clock = clock or SystemClock()
        self._file_path = self._config.file_path

        self._ensure_directory()
        self._initialize_file()

    # ── properties ───────────────────────────────────────────

    @property
    def config(self) -> StoreConfigSchema:
        return self._config

    @property
    def namespace(self) -> str:
        return self._config.namespace

    @property
    def store_name(self) -> str:
        return self._config.store_name

    @property
    def store_directory(self) -> Path:
        return self._config.store_directory

    @property
    def expiry_window_ms(self) -> float:
        return self._config.expiry_window_ms

    @property
    def max_file_size_bytes(self) -> float:
        return self._config.max_file_size_bytes

    @property
    def file_path(self) -> Path:
        return self._file_path

    def __repr__(self) -> str:
        return f"FileStore(file_path={str(self._file_path)!r})"

    # ── Store protocol ───────────────────────────────────────

    def get_item(self, key: str) -> Any | None:
        _check_key(key)
        return self._load().get(key)

    def has_item(self, key: str) -> bool:
        _check_key(key)
        return key != TIMESTAMP_KEY and key in self._load()

    def set_item(self, key: str, value: Any) -> bool:
        """Merge ``key`` into the store and rewrite the whole file.

        Returns ``True`` if the file is within ``max_file_size_bytes``
        afterwards.  An oversized write is still persisted.
        """
        _check_key(key)
        if key == TIMESTAMP_KEY:
            raise InvalidArgumentError("key", f"'{TIMESTAMP_KEY}' is reserved")

        try:
            contents = self._load()
        except ReadError as exc:
            raise WriteError(self._file_path, str(exc)) from exc

        contents[key] = value
        try:
            self._dump(contents)
            size = self._file_path.stat().st_size
        except (TypeError, ValueError) as exc:
            raise WriteError(self._file_path, f"value is not JSON-serializable: {exc}") from exc
        except OSError as exc:
            raise WriteError(self._file_path, str(exc)) from exc

        within_limit = size <= self._config.max_file_size_bytes
        if not within_limit:
            logger.warning(
                "%s is %d bytes after writing %r, over the %d byte limit",
                self._file_path,
                size,
                key,
                self._config.max_file_size_bytes,
            )
        return within_limit

    def clear_cache(self) -> None:
        try:
            self._dump(self._blank())
        except OSError as exc:
            raise WriteError(self._file_path, str(exc)) from exc
        logger.debug("Cleared %s", self._file_path)

    # ── lifecycle ────────────────────────────────────────────

    def _ensure_directory(self) -> None:
        directory = self._config.store_directory
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreateError(directory, str(exc)) from exc

    def _initialize_file(self) -> None:
        """Create the file if missing; reset it if already at the size ceiling."""
        try:
            size: int | None = self._file_path.stat().st_size
        except FileNotFoundError:
            size = None
        except OSError as exc:
            raise StoreInitError(self._file_path, str(exc)) from exc

        if size is not None and size < self._config.max_file_size_bytes:
            return

        try:
            self._dump(self._blank())
        except OSError as exc:
            raise StoreInitError(self._file_path, str(exc)) from exc

        if size is None:
            logger.debug("Created %s", self._file_path)
        else:
            logger.debug("Reset oversized %s (%d bytes)", self._file_path, size)

    # ── file access ──────────────────────────────────────────

    def _blank(self) -> dict[str, Any]:
        return {TIMESTAMP_KEY: epoch_ms(self._clock)}

    def _load(self) -> dict[str, Any]:
        """Read the file, returning a blank store if it has expired."""
        try:
            contents = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ReadError(self._file_path, str(exc)) from exc
        except ValueError as exc:
            raise ReadError(self._file_path, f"invalid JSON: {exc}") from exc

        timestamp = contents.get(TIMESTAMP_KEY) if isinstance(contents, dict) else None
        if isinstance(timestamp, bool) or not isinstance(timestamp, int | float):
            raise ReadError(self._file_path, f"missing numeric '{TIMESTAMP_KEY}'")
        if not math.isfinite(timestamp):
            raise ReadError(self._file_path, f"non-finite '{TIMESTAMP_KEY}': {timestamp}")

        age = epoch_ms(self._clock) - timestamp
        if age > self._config.expiry_window_ms:
            logger.debug("%s expired %d ms ago", self._file_path, age - self._config.expiry_window_ms)
            return self._blank()
        return contents

    def _dump(self, contents: dict[str, Any]) -> None:
        data = json.dumps(contents, separators=(",", ":"), allow_nan=False)
        self._file_path.write_text(data, encoding="utf-8")


def _check_key(key: Any) -> None:
    if not isinstance(key, str):
        raise InvalidArgumentError("key", "must be a string")


def _build_config(**arguments: Any) -> StoreConfigSchema:
    """Validate constructor arguments.  ``None`` selects a field's default."""
    supplied = {
        name: value
        for name, value in arguments.items()
        if value is not None or name in ("namespace", "store_name")
    }
    try:
        return StoreConfigSchema(**supplied)
    except ValidationError as exc:
        error = exc.errors()[0]
        argument = str(error["loc"][0]) if error["loc"] else "config"
        raise InvalidArgumentError(argument, error["msg"]) from exc
