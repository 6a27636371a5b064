# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule for executing store operations from JSON.

Usage:
    python -m server_store.runner < input.json > output.json

Exports:
    Executor: Runs a batch of operations against one store
    OperationSchema: Single operation in the input
    RunnerInput: Input schema read from stdin
    RunnerOutput: Output schema written to stdout
"""

from .executor import Executor
from .schema import OperationSchema, RunnerInput, RunnerOutput

__all__ = [
    "Executor",
    "OperationSchema",
    "RunnerInput",
    "RunnerOutput",
]
