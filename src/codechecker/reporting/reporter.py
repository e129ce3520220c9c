# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render fix, warning and error findings with file and line context."""

from __future__ import annotations

import os
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Final

from rich.console import Console
from rich.text import Text

TAG_WIDTH: Final[int] = 10
MESSAGE_GAP: Final[str] = "    "
DIRECTORY_STYLE: Final[str] = "white"
FILE_STYLE: Final[str] = "bold bright_white"


class FindingLevel(str, Enum):
    """Report levels understood by the reporter."""

    FIX = "fix"
    WARNING = "warning"
    ERROR = "error"

    @property
    def style(self) -> str:
        """Return the Rich style used for the tag and message."""

        return _LEVEL_STYLES[self]

    def tag(self, *, applied: bool = True) -> str:
        """Return the bracketed tag, ``FOUND`` for fixes that will not be written.

        Args:
            applied: Whether a fix-class finding is written back.

        Returns:
            str: Tag text such as ``[FIX]``.
        """

        if self is FindingLevel.FIX:
            return "[FIX]" if applied else "[FOUND]"
        return f"[{self.name}]"


_LEVEL_STYLES: Final[dict[FindingLevel, str]] = {
    FindingLevel.FIX: "bold bright_cyan",
    FindingLevel.WARNING: "bold bright_yellow",
    FindingLevel.ERROR: "bold bright_red",
}
_LEVEL_NOUNS: Final[dict[FindingLevel, str]] = {
    FindingLevel.FIX: "fix(es)",
    FindingLevel.WARNING: "warning(s)",
    FindingLevel.ERROR: "error(s)",
}


@dataclass(frozen=True, slots=True)
class Finding:
    """Single reported finding.

    Attributes:
        level: Report level.
        path: File path relative to the scan root.
        message: Human readable description.
        line: Optional 1-based line number.
        applied: For fixes, whether the correction is written back.
    """

    level: FindingLevel
    path: str
    message: str
    line: int | None = None
    applied: bool = True


class Reporter:
    """Format findings for the console and keep per-level counts.

    Colour is a construction-time decision: the reporter never checks the
    terminal itself.
    """

    def __init__(self, console: Console, *, use_color: bool = False) -> None:
        """Create a reporter writing to ``console``.

        Args:
            console: Rich console receiving the rendered lines.
            use_color: Whether level colours and path highlighting are applied.
        """

        self.console = console
        self.use_color = use_color
        self.counts: Counter[FindingLevel] = Counter()

    def report(self, finding: Finding) -> None:
        """Render ``finding`` and count it.

        Args:
            finding: Finding to display.
        """

        self.counts[finding.level] += 1
        self.console.print(self.format(finding))

    def fix(self, path: str, message: str, line: int | None = None, *, applied: bool = True) -> None:
        """Report a fix-class finding.

        Args:
            path: File path relative to the scan root.
            message: Description of the correction.
            line: Optional 1-based line number.
            applied: ``False`` when the correction will not be written back.
        """

        self.report(Finding(FindingLevel.FIX, path, message, line, applied))

    def warning(self, path: str, message: str, line: int | None = None) -> None:
        """Report a warning that never fails the file."""

        self.report(Finding(FindingLevel.WARNING, path, message, line))

    def error(self, path: str, message: str, line: int | None = None) -> None:
        """Report an error-class finding."""

        self.report(Finding(FindingLevel.ERROR, path, message, line))

    def format(self, finding: Finding) -> Text:
        """Return the styled line for ``finding``.

        The line reads: padded level tag, the file's directory (dimmed), the
        base name with an optional ``:line`` suffix, then the message.

        Args:
            finding: Finding to format.

        Returns:
            Text: Rich text ready for printing.
        """

        level_style = finding.level.style if self.use_color else ""
        directory, base = os.path.split(finding.path)
        location = base if finding.line is None else f"{base}:{finding.line}"

        text = Text(no_wrap=False)
        text.append(finding.level.tag(applied=finding.applied).ljust(TAG_WIDTH), style=level_style)
        if directory:
            text.append(f"{directory}{os.sep}", style=DIRECTORY_STYLE if self.use_color else "")
        text.append(location, style=FILE_STYLE if self.use_color else "")
        text.append(MESSAGE_GAP)
        text.append(finding.message, style=level_style)
        return text

    @property
    def total(self) -> int:
        """Return the number of findings reported so far."""

        return sum(self.counts.values())

    def summary(self) -> str:
        """Return the non-zero per-level counts, e.g. ``2 fix(es), 1 error(s)``.

        Returns:
            str: Comma separated counts in level order, empty when nothing
            was reported.
        """

        return ", ".join(
            f"{count} {_LEVEL_NOUNS[level]}" for level in FindingLevel if (count := self.counts[level])
        )


__all__ = ["Finding", "FindingLevel", "Reporter"]
