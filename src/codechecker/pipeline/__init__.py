# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Task pipeline execution."""

from __future__ import annotations

from .runner import AggregateResult, FileRecord, PipelineRunner, RunnerHooks, RunState
from .sink import FileReportSink

__all__ = [
    "AggregateResult",
    "FileRecord",
    "FileReportSink",
    "PipelineRunner",
    "RunState",
    "RunnerHooks",
]
