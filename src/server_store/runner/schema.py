# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models define the JSON documents the runner reads from
stdin and writes to stdout.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from server_store.schema import StoreConfigSchema


class OperationSchema(BaseModel):
    """Single store operation.

    Attributes:
        op: Operation name ("get", "has", "set" or "clear")
        key: Cache key (required for every op except "clear")
        value: Value to store (only used by "set")
    """

    op: Literal["get", "has", "set", "clear"]
    key: str | None = None
    value: Any = None

    @model_validator(mode="after")
    def require_key(self) -> OperationSchema:
        if self.op != "clear" and self.key is None:
            raise ValueError(f"'{self.op}' operation requires a 'key'")
        return self


class RunnerInput(BaseModel):
    """Complete input read from stdin.

    Attributes:
        store: Configuration of the store to open
        operations: Operations to run in order against the store
    """

    store: StoreConfigSchema
    operations: list[OperationSchema] = Field(default_factory=list)


class RunnerOutput(BaseModel):
    """Complete output written to stdout.

    The runner always outputs valid JSON matching this schema,
    even on errors.

    Attributes:
        success: Whether every operation completed
        results: One result per completed operation
        error: Error message (on failure)
        error_type: Error class name (on failure)
    """

    success: bool
    results: list[Any] = Field(default_factory=list)
    error: str = ""
    error_type: str = ""
