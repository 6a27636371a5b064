"""Validated configuration for a single file-backed store.

``StoreConfigSchema`` is the immutable identity of a Store Handle.  It is
built from the constructor arguments of :class:`~server_store.stores.FileStore`
and from the ``store`` block of the runner's JSON input.
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

DEFAULT_STORE_DIRECTORY = Path(tempfile.gettempdir()) / "store"
DEFAULT_EXPIRY_WINDOW_MS = 3_600_000  # 1 hour
DEFAULT_MAX_FILE_SIZE_BYTES = 1_000_000


class StoreConfigSchema(BaseModel):
    """Configuration for one backing file.

    Attributes:
        namespace: Application namespace, first half of the file name
        store_name: Store name, second half of the file name
        store_directory: Directory holding the file (created if missing)
        expiry_window_ms: Age after which the whole store is stale
        max_file_size_bytes: Size ceiling for the backing file
    """

    model_config = ConfigDict(frozen=True)

    namespace: StrictStr = Field(min_length=1)
    store_name: StrictStr = Field(min_length=1)
    store_directory: Path = DEFAULT_STORE_DIRECTORY
    expiry_window_ms: float = Field(default=DEFAULT_EXPIRY_WINDOW_MS, gt=0)
    max_file_size_bytes: float = Field(default=DEFAULT_MAX_FILE_SIZE_BYTES, gt=0)

    @field_validator("store_directory", mode="before")
    @classmethod
    def default_directory(cls, value: Any) -> Any:
        return DEFAULT_STORE_DIRECTORY if value is None or value == "" else value

    @field_validator("expiry_window_ms", "max_file_size_bytes", mode="before")
    @classmethod
    def require_number(cls, value: Any) -> Any:
        # bool is an int subclass and numeric strings would be coerced otherwise
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ValueError("must be a number")
        return value

    @property
    def file_name(self) -> str:
        return f"{self.namespace}-{self.store_name}.json"

    @property
    def file_path(self) -> Path:
        return self.store_directory / self.file_name
