# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the ordered task pipeline over every discovered file."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..discovery.filesystem import FileWalker
from ..filesystem.paths import read_content, relative_to_root, write_content_atomic
from ..matching import GlobSet, match_file_name
from ..reporting.reporter import Reporter
from ..tasks.base import Task
from .sink import FileReportSink

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileRecord:
    """File scheduled for processing."""

    path: Path
    relative: str

    @classmethod
    def from_root(cls, path: Path, root: Path) -> FileRecord:
        """Build a record for ``path`` discovered under ``root``."""

        return cls(path=path, relative=relative_to_root(path, root))


@dataclass(slots=True)
class RunState:
    """Content and error bookkeeping for a single file's pass."""

    original: str
    current: str
    has_error: bool = False

    @property
    def changed(self) -> bool:
        """Return whether committed edits differ from the original content."""

        return self.current != self.original


@dataclass(slots=True)
class AggregateResult:
    """Outcome accumulated across every processed file."""

    success: bool = True
    files: int = 0
    failed: list[str] = field(default_factory=list)
    rewritten: list[str] = field(default_factory=list)

    def record(self, record: FileRecord, *, ok: bool, rewritten: bool) -> None:
        """Fold the outcome of one file into the aggregate.

        Args:
            record: File that finished processing.
            ok: ``True`` when the file ended without error state.
            rewritten: ``True`` when the file was written back.
        """

        self.files += 1
        self.success = self.success and ok
        if not ok:
            self.failed.append(record.relative)
        if rewritten:
            self.rewritten.append(record.relative)


@dataclass(slots=True)
class RunnerHooks:
    """Optional callbacks invoked around each file."""

    before_file: Callable[[FileRecord], None] | None = None
    after_file: Callable[[FileRecord, bool], None] | None = None


class PipelineRunner:
    """Coordinate discovery, task execution and conditional writeback."""

    def __init__(
        self,
        reporter: Reporter,
        *,
        walker: FileWalker | None = None,
        hooks: RunnerHooks | None = None,
    ) -> None:
        """Create a runner reporting through ``reporter``.

        Args:
            reporter: Reporter receiving every finding.
            walker: File walker used for discovery.
            hooks: Optional per-file lifecycle callbacks.
        """

        self._reporter = reporter
        self._walker = walker or FileWalker()
        self._hooks = hooks or RunnerHooks()

    @property
    def hooks(self) -> RunnerHooks:
        """Return the lifecycle hooks so callers can attach callbacks."""

        return self._hooks

    def run(
        self,
        root: Path,
        accept: GlobSet,
        ignore: GlobSet,
        registry: Iterable[Task],
        *,
        read_only: bool,
    ) -> AggregateResult:
        """Process every file under ``root`` and aggregate the outcome.

        Args:
            root: Directory to walk or a single file.
            accept: Accept patterns for directory walks.
            ignore: Ignore patterns for directory walks.
            registry: Tasks in execution order.
            read_only: When ``True`` nothing is written and fixes fail files.

        Returns:
            AggregateResult: ``success`` is ``True`` when no file ended in
            error state, including when no file matched.
        """

        tasks = tuple(registry)
        result = AggregateResult()
        for path in self._walker.scan(root, accept.frozen(), ignore.frozen()):
            record = FileRecord.from_root(path, root)
            if self._hooks.before_file:
                self._hooks.before_file(record)
            ok, rewritten = self.process_file(record, tasks, read_only=read_only)
            result.record(record, ok=ok, rewritten=rewritten)
            if self._hooks.after_file:
                self._hooks.after_file(record, ok)
        return result

    def process_file(self, record: FileRecord, tasks: Iterable[Task], *, read_only: bool) -> tuple[bool, bool]:
        """Run ``tasks`` over one file and write it back when appropriate.

        Args:
            record: File to process.
            tasks: Tasks in execution order.
            read_only: Whether writes are suppressed.

        Returns:
            tuple[bool, bool]: Whether the file ended without error state and
            whether it was rewritten.
        """

        try:
            original = read_content(record.path)
        except OSError as exc:
            self._reporter.error(record.relative, f"Unable to read file: {exc.strerror or exc}")
            return False, False

        state = RunState(original=original, current=original)
        sink = FileReportSink(
            relative_path=record.relative,
            state=state,
            reporter=self._reporter,
            is_read_only=read_only,
        )
        for task in tasks:
            if task.pattern and not match_file_name(task.pattern, record.path.name):
                continue
            self._run_task(task, state, sink)

        if not state.changed or read_only:
            return not state.has_error, False
        try:
            write_content_atomic(record.path, state.current)
        except OSError as exc:
            sink.error(f"Unable to write file: {exc.strerror or exc}")
            return False, False
        LOGGER.debug("rewrote %s", record.path)
        return not state.has_error, True

    def _run_task(self, task: Task, state: RunState, sink: FileReportSink) -> None:
        """Invoke ``task`` and commit its output unless the file is in error.

        Args:
            task: Task to execute.
            state: Run state of the current file.
            sink: Reporting sink bound to the current file.
        """

        working = state.current
        try:
            output = task(working, sink)
        except Exception as exc:  # task handlers are third-party code
            LOGGER.debug("task %s failed on %s", task.name, sink.path, exc_info=True)
            sink.error(f"Task {task.name} failed: {exc}")
            return
        if not isinstance(output, str):
            sink.error(f"Task {task.name} returned {type(output).__name__} instead of text")
            return
        if not state.has_error:
            state.current = output


__all__ = [
    "AggregateResult",
    "FileRecord",
    "PipelineRunner",
    "RunState",
    "RunnerHooks",
]
