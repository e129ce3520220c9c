# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Task contract, registry and built-in task handlers."""

from __future__ import annotations

from .base import ReportSink, Task, TaskHandler
from .defaults import BUILTIN_TASKS, BuiltinTask, build_default_registry, builtin_task_names
from .registry import TaskRegistry

__all__ = [
    "BUILTIN_TASKS",
    "BuiltinTask",
    "ReportSink",
    "Task",
    "TaskHandler",
    "TaskRegistry",
    "build_default_registry",
    "builtin_task_names",
]
