# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Format-agnostic text checks and fixers."""

from __future__ import annotations

import os
import re
from typing import Final

from .base import ReportSink

BYTE_ORDER_MARK: Final[str] = "\ufeff"

_CONTROL_CHARACTERS: Final[re.Pattern[str]] = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")
# Undecodable bytes surface as lone surrogates under ``surrogateescape``.
_UNDECODABLE_BYTES: Final[re.Pattern[str]] = re.compile(r"[\udc80-\udcff]")
_TRAILING_LINE_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"[\t ]+(\r?\n)")
_NEWLINE: Final[re.Pattern[str]] = re.compile(r"\r?\n")
_SPACE_INDENTATION: Final[re.Pattern[str]] = re.compile(r"^(?!\t*(?:\S|\r?$)|\s+\*)", re.MULTILINE)
_TAB_INDENTATION: Final[re.Pattern[str]] = re.compile(r"^\t", re.MULTILINE)
_INNER_TAB: Final[re.Pattern[str]] = re.compile(r"^(?!//)\t*[^\t\r\n]+\t", re.MULTILINE)
_END_OF_FILE_WHITESPACE: Final[str] = " \t\r\n\0\x0b"


def offset_to_line(content: str, offset: int) -> int:
    """Return the 1-based line number holding ``offset``.

    Args:
        content: File content.
        offset: Character offset into ``content``.

    Returns:
        int: Line number of the offset.
    """

    return content.count("\n", 0, offset) + 1


def space_indentation_offset(content: str) -> int | None:
    """Return the offset of the first line indented with spaces, if any.

    Blank lines and block comment continuation lines (`` * ...``) are allowed.
    """

    match = _SPACE_INDENTATION.search(content)
    return match.start() if match else None


def control_characters_checker(content: str, sink: ReportSink) -> str:
    """Flag C0 control characters other than tab, line feed and carriage return."""

    if match := _CONTROL_CHARACTERS.search(content):
        sink.error("Contains control characters", offset_to_line(content, match.start()))
    return content


def bom_fixer(content: str, sink: ReportSink) -> str:
    """Strip a leading UTF-8 byte order mark."""

    if content.startswith(BYTE_ORDER_MARK):
        sink.fix("contains BOM")
        return content[len(BYTE_ORDER_MARK) :]
    return content


def utf8_checker(content: str, sink: ReportSink) -> str:
    """Flag content that is not valid UTF-8."""

    if match := _UNDECODABLE_BYTES.search(content):
        sink.error("Is not valid UTF-8 file", offset_to_line(content, match.start()))
    return content


def newline_normalizer(content: str, sink: ReportSink) -> str:
    """Convert every line ending to the platform newline."""

    normalised = content.replace("\r\n", "\n").replace("\r", "\n")
    if os.linesep != "\n":
        normalised = normalised.replace("\n", os.linesep)
    if normalised != content:
        sink.fix("contains non-system line-endings")
    return normalised


def trailing_whitespace_fixer(content: str, sink: ReportSink) -> str:
    """Strip trailing whitespace and terminate non-empty files with one newline.

    The newline style of the first line break in the file is reused for the
    final newline; files without any line break get the platform newline.
    """

    stripped = _TRAILING_LINE_WHITESPACE.sub(r"\1", content)
    eol_match = _NEWLINE.search(stripped)
    eol = eol_match.group(0) if eol_match else os.linesep
    stripped = stripped.rstrip(_END_OF_FILE_WHITESPACE)
    if stripped:
        stripped += eol
    if stripped == content:
        return content
    removed = len(content) - len(stripped)
    if removed > 0:
        sink.fix(f"{removed} bytes of whitespaces")
    else:
        sink.fix("missing newline at end of file")
    return stripped


def tab_indentation_checker(content: str, sink: ReportSink) -> str:
    """Require tab indentation; block comment continuation lines are allowed."""

    offset = space_indentation_offset(content)
    if offset is not None:
        sink.error("Used space to indentate instead of tab", offset_to_line(content, offset))
    return content


def yaml_indentation_checker(content: str, sink: ReportSink) -> str:
    """Forbid tab indentation, which YAML does not allow."""

    if match := _TAB_INDENTATION.search(content):
        sink.error("Used tabs to indentate instead of spaces", offset_to_line(content, match.start()))
    return content


def unexpected_tabs_checker(content: str, sink: ReportSink) -> str:
    """Flag tabs that appear after the first non-tab character of a line."""

    if match := _INNER_TAB.search(content):
        sink.error("Found unexpected tabulator", offset_to_line(content, match.start()))
    return content


__all__ = [
    "BYTE_ORDER_MARK",
    "bom_fixer",
    "control_characters_checker",
    "newline_normalizer",
    "offset_to_line",
    "space_indentation_offset",
    "tab_indentation_checker",
    "trailing_whitespace_fixer",
    "unexpected_tabs_checker",
    "utf8_checker",
    "yaml_indentation_checker",
]
