"""Custom exceptions for the server_store package."""

from __future__ import annotations

import os


class StoreError(Exception):
    """Base exception for all store-related errors."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Store error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class InvalidArgumentError(StoreError, ValueError):
    """Raised when a constructor or key argument is rejected."""

    def __init__(self, argument: str, detail: str) -> None:
        self.argument = argument
        super().__init__("validate", f"invalid argument '{argument}': {detail}")


class _PathError(StoreError):
    def __init__(self, operation: str, path: str | os.PathLike[str], detail: str = "") -> None:
        self.path = os.fspath(path)
        super().__init__(operation, f"{self.path}: {detail}" if detail else self.path)


class DirectoryCreateError(_PathError):
    """Raised when the store directory cannot be created or used."""

    def __init__(self, path: str | os.PathLike[str], detail: str = "") -> None:
        super().__init__("create_directory", path, detail)


class StoreInitError(_PathError):
    """Raised when the backing file cannot be inspected or created at construction."""

    def __init__(self, path: str | os.PathLike[str], detail: str = "") -> None:
        super().__init__("init", path, detail)


class ReadError(_PathError):
    """Raised when the backing file cannot be read or parsed."""

    def __init__(self, path: str | os.PathLike[str], detail: str = "") -> None:
        super().__init__("read", path, detail)


class WriteError(_PathError):
    """Raised when the backing file cannot be serialized or written."""

    def __init__(self, path: str | os.PathLike[str], detail: str = "") -> None:
        super().__init__("write", path, detail)
