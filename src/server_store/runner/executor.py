# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for running a batch of operations against one store.

Orchestrates the full execution flow:
1. Open the store from configuration
2. Run each operation in order
3. Return structured result
"""

from __future__ import annotations

from typing import Any

from server_store.factory import open_store_from_config
from server_store.stores import Store

from .schema import OperationSchema, RunnerInput, RunnerOutput


class Executor:
    """Executes store operations described by a :class:`RunnerInput`.

    Execution stops at the first failing operation; results of the
    operations that completed before it are still returned.

    The executor is designed for dependency injection to support testing.
    Pass a store to the constructor to skip opening one from config.

    Example:
        executor = Executor()
        output = executor.execute(input_data)
    """

    def __init__(self, store: Store | None = None) -> None:
        """Initialize executor with optional injected store.

        Args:
            store: Optional store to use instead of opening one from config.
        """
        self._injected_store = store

    def execute(self, input_data: RunnerInput) -> RunnerOutput:
        """Run every operation and collect the results.

        Args:
            input_data: Complete runner input

        Returns:
            RunnerOutput with success/failure and results/error details

        Note:
            This method catches all exceptions and returns them as
            RunnerOutput errors, ensuring valid JSON is always returned.
        """
        results: list[Any] = []
        try:
            store = self._injected_store or open_store_from_config(input_data.store).unwrap()
            for operation in input_data.operations:
                results.append(self._run(store, operation))
        except Exception as e:
            return RunnerOutput(
                success=False,
                results=results,
                error=str(e),
                error_type=type(e).__name__,
            )
        return RunnerOutput(success=True, results=results)

    def _run(self, store: Store, operation: OperationSchema) -> Any:
        """Dispatch a single operation.

        Args:
            store: Open store
            operation: Operation to run

        Returns:
            The operation's result (``None`` for "clear")
        """
        if operation.op == "clear":
            store.clear_cache()
            return None

        key = operation.key
        if key is None:
            raise ValueError(f"'{operation.op}' operation requires a 'key'")
        if operation.op == "get":
            return store.get_item(key)
        if operation.op == "has":
            return store.has_item(key)
        return store.set_item(key, operation.value)
