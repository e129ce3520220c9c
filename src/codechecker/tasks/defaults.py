# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Default task pipeline assembled from the built-in handlers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from ..config import TaskOptions
from ..constants import PHP_PATTERN
from . import php, syntax, text
from .base import TaskHandler
from .registry import TaskRegistry


@dataclass(frozen=True, slots=True)
class BuiltinTask:
    """Describe a built-in task and the option enabling it."""

    handler: TaskHandler
    pattern: str | None = None
    option: str | None = None

    @property
    def name(self) -> str:
        """Return the handler name used for display and ``skip`` lists."""

        return self.handler.__name__


BUILTIN_TASKS: Final[tuple[BuiltinTask, ...]] = (
    BuiltinTask(text.control_characters_checker),
    BuiltinTask(text.bom_fixer),
    BuiltinTask(text.utf8_checker),
    BuiltinTask(php.invalid_php_doc_checker, PHP_PATTERN),
    BuiltinTask(php.short_array_syntax_fixer, PHP_PATTERN, option="short_arrays"),
    BuiltinTask(php.strict_types_declaration_checker, PHP_PATTERN, option="strict_types"),
    BuiltinTask(text.newline_normalizer, "!*.sh", option="eol"),
    BuiltinTask(php.invalid_double_quoted_string_checker, PHP_PATTERN),
    BuiltinTask(php.trailing_php_tag_remover, PHP_PATTERN),
    BuiltinTask(syntax.json_syntax_checker, "*.json"),
    BuiltinTask(text.yaml_indentation_checker, "*.yml"),
    BuiltinTask(text.trailing_whitespace_fixer),
    BuiltinTask(text.tab_indentation_checker, "*.css,*.less,*.js,*.json,*.neon"),
    BuiltinTask(php.tab_indentation_php_checker, PHP_PATTERN),
    BuiltinTask(text.unexpected_tabs_checker, "*.yml"),
)


def builtin_task_names() -> tuple[str, ...]:
    """Return the names of every built-in task in pipeline order."""

    return tuple(task.name for task in BUILTIN_TASKS)


def build_default_registry(
    options: TaskOptions | None = None,
    *,
    builtins: Sequence[BuiltinTask] = BUILTIN_TASKS,
) -> TaskRegistry:
    """Register the built-in tasks selected by ``options``.

    Args:
        options: Optional task selection; defaults enable every mandatory task.
        builtins: Task catalogue to choose from.

    Returns:
        TaskRegistry: Registry holding the selected tasks in pipeline order.
    """

    selected = options or TaskOptions()
    skipped = set(selected.skip)
    registry = TaskRegistry()
    for task in builtins:
        if task.name in skipped:
            continue
        if task.option is not None and not getattr(selected, task.option):
            continue
        registry.register(task.handler, task.pattern)
    return registry


__all__ = ["BUILTIN_TASKS", "BuiltinTask", "build_default_registry", "builtin_task_names"]
