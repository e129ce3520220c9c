# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-file reporting sink bound to a single run state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..reporting.reporter import Reporter

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .runner import RunState


@dataclass(slots=True)
class FileReportSink:
    """Forward findings for one file to the reporter and track its error state.

    ``fix`` fails the file only in read-only mode, ``error`` always fails it
    and ``warning`` never does. The error state is sticky: nothing here can
    clear it.
    """

    relative_path: str
    state: RunState
    reporter: Reporter
    is_read_only: bool

    @property
    def path(self) -> str:
        """Return the file path relative to the scan root."""

        return self.relative_path

    @property
    def read_only(self) -> bool:
        """Return whether fixes are reported without being written."""

        return self.is_read_only

    def fix(self, message: str, line: int | None = None) -> None:
        """Report a correction; in read-only mode the file fails.

        Args:
            message: Description of the correction.
            line: Optional 1-based line number.
        """

        self.reporter.fix(self.relative_path, message, line, applied=not self.is_read_only)
        if self.is_read_only:
            self.state.has_error = True

    def warning(self, message: str, line: int | None = None) -> None:
        """Report an informational finding."""

        self.reporter.warning(self.relative_path, message, line)

    def error(self, message: str, line: int | None = None) -> None:
        """Report a finding that fails the file."""

        self.reporter.error(self.relative_path, message, line)
        self.state.has_error = True


__all__ = ["FileReportSink"]
