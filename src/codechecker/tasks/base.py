# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Task contract shared by the registry, the pipeline and task handlers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, TypeAlias, runtime_checkable


@runtime_checkable
class ReportSink(Protocol):
    """Per-file reporting interface handed to every task invocation."""

    @property
    def path(self) -> str:
        """Return the path of the current file relative to the scan root."""
        raise NotImplementedError

    @property
    def read_only(self) -> bool:
        """Return whether fixes are suppressed for this run."""
        raise NotImplementedError

    def fix(self, message: str, line: int | None = None) -> None:
        """Report a correctable finding; fails the file only in read-only mode."""
        raise NotImplementedError

    def warning(self, message: str, line: int | None = None) -> None:
        """Report an informational finding that never fails the file."""
        raise NotImplementedError

    def error(self, message: str, line: int | None = None) -> None:
        """Report a finding that always fails the file."""
        raise NotImplementedError


TaskHandler: TypeAlias = Callable[[str, ReportSink], str]


@dataclass(frozen=True, slots=True)
class Task:
    """Registered handler together with its optional file name pattern.

    Attributes:
        handler: Callable receiving the file content and a sink and returning
            the (possibly modified) content.
        pattern: Comma separated glob list restricting the files the task
            runs on; ``None`` runs the task on every file.
        name: Display name, defaulting to the handler's ``__name__``.
    """

    handler: TaskHandler
    pattern: str | None = None
    name: str = field(default="")

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", getattr(self.handler, "__name__", repr(self.handler)))

    def __call__(self, content: str, sink: ReportSink) -> str:
        return self.handler(content, sink)


__all__ = ["ReportSink", "Task", "TaskHandler"]
