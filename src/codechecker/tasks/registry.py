# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Ordered registry of pipeline tasks."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .base import Task, TaskHandler


class TaskRegistry(Sequence[Task]):
    """Append-only, ordered list of tasks.

    Registration order is execution order: later tasks see the committed
    edits of earlier ones. Tasks are never removed, reordered or
    de-duplicated.
    """

    def __init__(self) -> None:
        """Initialise an empty task registry."""

        self._tasks: list[Task] = []

    def register(self, handler: TaskHandler, pattern: str | None = None, *, name: str | None = None) -> Task:
        """Append ``handler`` to the registry.

        Args:
            handler: Task handler honouring the ``(content, sink) -> content``
                contract.
            pattern: Optional comma separated glob list gating the task.
            name: Optional display name overriding the handler's name.

        Returns:
            Task: The registered task value.
        """

        task = Task(handler=handler, pattern=pattern or None, name=name or "")
        self._tasks.append(task)
        return task

    def all(self) -> tuple[Task, ...]:
        """Return the registered tasks in execution order."""

        return tuple(self._tasks)

    def names(self) -> tuple[str, ...]:
        """Return the task names in execution order."""

        return tuple(task.name for task in self._tasks)

    def __getitem__(self, index):  # type: ignore[override]
        return self._tasks[index]

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)


__all__ = ["TaskRegistry"]
