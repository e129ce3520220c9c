# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Syntax checks for structured data files."""

from __future__ import annotations

import json

from .base import ReportSink


class InvalidJsonConstantError(ValueError):
    """Raised for ``NaN`` and ``Infinity``, which the JSON grammar does not allow."""


def _reject_constant(name: str) -> float:
    raise InvalidJsonConstantError(f"Invalid constant {name}")


def json_syntax_checker(content: str, sink: ReportSink) -> str:
    """Report JSON documents that do not follow the JSON grammar."""

    try:
        json.loads(content, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        sink.error(f"Syntax error: {exc.msg}", exc.lineno)
    except InvalidJsonConstantError as exc:
        sink.error(f"Syntax error: {exc}")
    return content


__all__ = ["InvalidJsonConstantError", "json_syntax_checker"]
