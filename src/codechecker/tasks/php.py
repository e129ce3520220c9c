# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Checks and fixers for PHP sources.

Token-aware tasks run the Pygments PHP lexer over the file content. The
lexer never rejects input, and every token carries its character offset, so
findings can be mapped back to lines and fixes can splice the original text.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from functools import cache
from typing import Final, TypeAlias

from pygments.lexers.php import PhpLexer
from pygments.token import Comment, Keyword, Name, Other, Punctuation, String, Text, _TokenType

from .base import ReportSink
from .text import offset_to_line, space_indentation_offset

_STRICT_TYPES_DECLARATION: Final[re.Pattern[str]] = re.compile(r"\bdeclare\(\s*strict_types\s*=\s*1\s*\)")
_CLOSING_PHP_TAG: Final[str] = "?>"
_PHP_TRAILING_WHITESPACE: Final[str] = " \t\r\n\0\x0b"

_NON_NEWLINE: Final[re.Pattern[str]] = re.compile(r"[^\r\n]")
_ESCAPE_SEQUENCE: Final[re.Pattern[str]] = re.compile(r"\\(.?)", re.DOTALL)
_VALID_ESCAPES: Final[frozenset[str]] = frozenset("nrtvef\\$\"01234567xu{")
_PHPDOC_TAG_IN_COMMENT: Final[re.Pattern[str]] = re.compile(r"/\*(?!\*).*(?<!\w)@[a-z]", re.IGNORECASE | re.DOTALL)
_PHPDOC_WITHOUT_SPACE: Final[re.Pattern[str]] = re.compile(r"/\*\*(?!\s)")
_MEMBER_ACCESS: Final[frozenset[str]] = frozenset({"->", "?->", "::", "function"})

LexedToken: TypeAlias = tuple[int, _TokenType, str]


@cache
def _lexer() -> PhpLexer:
    return PhpLexer(startinline=False, funcnamehighlighting=False)


def tokenize(content: str) -> Iterator[LexedToken]:
    """Yield ``(offset, token type, text)`` triples covering ``content``."""

    return _lexer().get_tokens_unprocessed(content)


def _is_literal(token_type: _TokenType) -> bool:
    """Return whether the token is string data or inline HTML rather than code."""

    return (token_type in String and token_type not in String.Doc) or token_type in Other


def _is_trivia(token_type: _TokenType) -> bool:
    return token_type in Text or token_type in Comment or token_type in String.Doc


def _is_array_keyword(token_type: _TokenType, value: str) -> bool:
    return value.lower() == "array" and (token_type in Keyword or token_type in Name)


def strict_types_declaration_checker(content: str, sink: ReportSink) -> str:
    """Require ``declare(strict_types=1)`` in PHP sources."""

    if not _STRICT_TYPES_DECLARATION.search(content):
        sink.error("Missing declare(strict_types=1)")
    return content


def trailing_php_tag_remover(content: str, sink: ReportSink) -> str:
    """Drop a closing ``?>`` tag that ends a PHP file.

    Whitespace left behind is handled by the trailing whitespace fixer, which
    runs later in the default pipeline.
    """

    trimmed = content.rstrip(_PHP_TRAILING_WHITESPACE)
    if not trimmed.endswith(_CLOSING_PHP_TAG):
        return content
    sink.fix("contains closing PHP tag ?>")
    return trimmed[: -len(_CLOSING_PHP_TAG)]


def invalid_php_doc_checker(content: str, sink: ReportSink) -> str:
    """Warn about annotations in ``/*`` comments and ``/**`` without a space."""

    for offset, token_type, value in tokenize(content):
        if token_type in Comment.Multiline and _PHPDOC_TAG_IN_COMMENT.match(value):
            sink.warning("Missing /** in phpDoc comment", offset_to_line(content, offset))
        elif token_type in String.Doc and _PHPDOC_WITHOUT_SPACE.match(value):
            sink.warning("Missing space after /**", offset_to_line(content, offset))
    return content


def invalid_double_quoted_string_checker(content: str, sink: ReportSink) -> str:
    """Warn about backslash sequences PHP leaves untouched in ``"..."`` strings."""

    chunk: list[str] = []
    start = 0
    for offset, token_type, value in (*tokenize(content), (len(content), Text, "")):
        if token_type in String.Double or token_type in String.Escape:
            if not chunk:
                start = offset
            chunk.append(value)
            continue
        if chunk:
            _check_escapes("".join(chunk), start, content, sink)
            chunk = []
    return content


def _check_escapes(literal: str, start: int, content: str, sink: ReportSink) -> None:
    for match in _ESCAPE_SEQUENCE.finditer(literal):
        escaped = match.group(1)
        if escaped and escaped not in _VALID_ESCAPES:
            sink.warning(
                f"Invalid escape sequence {match.group(0)} in double quoted string",
                offset_to_line(content, start + match.start()),
            )


def short_array_syntax_fixer(content: str, sink: ReportSink) -> str:
    """Rewrite ``array(...)`` literals to the ``[...]`` short syntax."""

    edits: list[tuple[int, int, str]] = []
    open_arrays: list[int | None] = []
    pending: int | None = None
    previous = ""
    for offset, token_type, value in tokenize(content):
        if not value or _is_trivia(token_type):
            continue
        if token_type in Punctuation:
            for position, char in enumerate(value, start=offset):
                if char == "(":
                    open_arrays.append(pending)
                    if pending is not None:
                        edits.append((pending, position + 1, "["))
                elif char == ")" and open_arrays and open_arrays.pop() is not None:
                    edits.append((position, position + 1, "]"))
                pending = None
        elif _is_array_keyword(token_type, value) and previous not in _MEMBER_ACCESS:
            pending = offset
        else:
            pending = None
        previous = value.lower()

    if not edits:
        return content
    edits.sort()
    for begin, _, replacement in edits:
        if replacement == "[":
            sink.fix("uses old array() syntax", offset_to_line(content, begin))
    fixed = content
    for begin, end, replacement in reversed(edits):
        fixed = fixed[:begin] + replacement + fixed[end:]
    return fixed


def tab_indentation_php_checker(content: str, sink: ReportSink) -> str:
    """Require tab indentation in PHP code, ignoring string data and inline HTML."""

    masked = "".join(
        _NON_NEWLINE.sub("x", value) if _is_literal(token_type) else value
        for _, token_type, value in tokenize(content)
    )
    offset = space_indentation_offset(masked)
    if offset is not None:
        sink.error("Used space to indentate instead of tab", offset_to_line(content, offset))
    return content


__all__ = [
    "invalid_double_quoted_string_checker",
    "invalid_php_doc_checker",
    "short_array_syntax_fixer",
    "strict_types_declaration_checker",
    "tab_indentation_php_checker",
    "tokenize",
    "trailing_php_tag_remover",
]
