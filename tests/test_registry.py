# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the task registry and the default pipeline."""

from __future__ import annotations

from codechecker.config import TaskOptions
from codechecker.tasks import TaskRegistry, build_default_registry, builtin_task_names
from codechecker.tasks.base import ReportSink


def _noop(content: str, sink: ReportSink) -> str:
    return content


def test_register_preserves_order_and_duplicates() -> None:
    registry = TaskRegistry()
    first = registry.register(_noop, "*.php")
    registry.register(_noop, name="again")
    registry.register(lambda content, sink: content, "")

    assert len(registry) == 3
    assert registry[0] is first
    assert first.name == "_noop"
    assert first.pattern == "*.php"
    assert registry.names() == ("_noop", "again", "<lambda>")
    assert registry[2].pattern is None
    assert registry.all() == tuple(registry)


def test_default_registry_order() -> None:
    registry = build_default_registry()

    assert registry.names() == (
        "control_characters_checker",
        "bom_fixer",
        "utf8_checker",
        "invalid_php_doc_checker",
        "invalid_double_quoted_string_checker",
        "trailing_php_tag_remover",
        "json_syntax_checker",
        "yaml_indentation_checker",
        "trailing_whitespace_fixer",
        "tab_indentation_checker",
        "tab_indentation_php_checker",
        "unexpected_tabs_checker",
    )


def test_optional_tasks_are_enabled_by_options() -> None:
    registry = build_default_registry(TaskOptions(eol=True, strict_types=True, short_arrays=True))
    names = registry.names()

    assert names.index("short_array_syntax_fixer") == 4
    assert names.index("strict_types_declaration_checker") == 5
    assert names.index("newline_normalizer") == 6
    assert registry[4].pattern == registry[5].pattern
    assert registry[6].pattern == "!*.sh"
    assert set(names) == set(builtin_task_names())


def test_skipped_tasks_are_left_out() -> None:
    registry = build_default_registry(TaskOptions(skip=["bom_fixer", "json_syntax_checker"]))

    assert "bom_fixer" not in registry.names()
    assert "json_syntax_checker" not in registry.names()
    assert "utf8_checker" in registry.names()
