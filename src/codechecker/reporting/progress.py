# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Progress rendering helpers for pipeline runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import TracebackType
from typing import TYPE_CHECKING

from rich.progress import Progress, SpinnerColumn, TaskID, TextColumn, TimeElapsedColumn

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from rich.console import Console

    from ..pipeline.runner import FileRecord, RunnerHooks


@dataclass(slots=True)
class ProgressController:
    """Show a transient spinner advancing once per processed file.

    The display is only enabled when requested and the console is an
    interactive terminal; otherwise every method is a no-op.
    """

    console: Console
    requested: bool = True
    progress_factory: type[Progress] = Progress
    enabled: bool = field(init=False, default=False)
    completed: int = field(init=False, default=0)
    _progress: Progress | None = field(init=False, default=None)
    _task_id: TaskID | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        self.enabled = self.requested and self.console.is_terminal
        if not self.enabled:
            return
        self._progress = self.progress_factory(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TextColumn("{task.completed} files"),
            TimeElapsedColumn(),
            TextColumn("{task.fields[current]}", style="dim"),
            console=self.console,
            transient=True,
        )
        self._task_id = self._progress.add_task("Checking", total=None, current="")

    def install(self, hooks: RunnerHooks) -> None:
        """Attach the per-file callback to ``hooks`` when progress is enabled."""

        if self.enabled:
            hooks.before_file = self.advance

    def advance(self, record: FileRecord) -> None:
        """Advance the display by one file.

        Args:
            record: File about to be processed.
        """

        self.completed += 1
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(self._task_id, advance=1, current=record.relative)

    def __enter__(self) -> ProgressController:
        if self._progress is not None:
            self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if self._progress is not None:
            self._progress.stop()


__all__ = ["ProgressController"]
