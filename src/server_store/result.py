"""OpenResult — the outcome of opening a store without raising."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from server_store.exceptions import StoreError
    from server_store.stores.file import FileStore


@dataclass(frozen=True)
class OpenResult:
    """Immutable result returned by :func:`server_store.open_store`.

    Exactly one of ``store`` and ``error`` is set.  Callers must check
    ``ok`` (or call ``unwrap``) before using the handle.

    Attributes:
        store: The opened handle on success, else ``None``.
        error: The construction failure, else ``None``.
    """

    store: FileStore | None = None
    error: StoreError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> FileStore:
        """Return the handle, or raise the captured error."""
        if self.error is not None:
            raise self.error
        return cast("FileStore", self.store)

    # ── Factory helpers ──────────────────────────────────────

    @staticmethod
    def success(store: FileStore) -> OpenResult:
        return OpenResult(store=store)

    @staticmethod
    def failure(error: StoreError) -> OpenResult:
        return OpenResult(error=error)
