# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer
from rich.table import Table

from .. import __version__
from ..config import CheckerConfig
from ..console import get_console_manager, supports_color
from ..logging import configure_debug_logging
from ..pipeline import AggregateResult, PipelineRunner
from ..reporting import FindingLevel, ProgressController, Reporter
from ..tasks import build_default_registry
from .options import (
    CONFIG_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    EOL_OPTION,
    FIX_OPTION,
    IGNORE_OPTION,
    NO_COLOR_OPTION,
    NO_PROGRESS_OPTION,
    PATH_OPTION,
    SHORT_ARRAYS_OPTION,
    SKIP_OPTION,
    STRICT_TYPES_OPTION,
    CheckCLIOptions,
    build_check_options,
    resolve_config,
)
from .shared import EXIT_FINDINGS, EXIT_OK, CLIError, CLILogger, build_cli_logger

app = typer.Typer(
    name="codechecker",
    help="Source code checker: scans a tree and fixes or reports text-level problems.",
    no_args_is_help=True,
    add_completion=False,
)


@app.command("check")
def check(
    path: PATH_OPTION = None,
    ignore: IGNORE_OPTION = None,
    fix: FIX_OPTION = False,
    eol: EOL_OPTION = False,
    no_progress: NO_PROGRESS_OPTION = False,
    strict_types: STRICT_TYPES_OPTION = False,
    short_arrays: SHORT_ARRAYS_OPTION = False,
    skip: SKIP_OPTION = None,
    no_color: NO_COLOR_OPTION = False,
    emoji: EMOJI_OPTION = False,
    config_file: CONFIG_OPTION = None,
    debug: DEBUG_OPTION = False,
) -> None:
    """Scan a folder or file, reporting findings and optionally fixing them.

    Raises:
        typer.Exit: Always raised with ``0`` when no unresolved findings
            remain, ``1`` otherwise and ``2`` on start-up failures.
    """

    configure_debug_logging(debug)
    options, config = _prepare(
        path,
        ignore=ignore,
        skip=skip,
        fix=fix,
        eol=eol,
        strict_types=strict_types,
        short_arrays=short_arrays,
        no_progress=no_progress,
        no_color=no_color,
        emoji=emoji,
        config_file=config_file,
        debug=debug,
    )
    use_color = supports_color(config.output.color)
    logger = build_cli_logger(emoji=config.output.emoji, color=use_color)

    logger.section(f"CodeChecker version {__version__}")
    if config.read_only:
        logger.info("Running in read-only mode")
    logger.info(f"Scanning {options.path}")

    result, reporter = run_checks(options, config, use_color=use_color)

    logger.info("Done.")
    raise typer.Exit(code=_report_outcome(result, reporter, config, logger))


@app.command("tasks")
def list_tasks(
    path: PATH_OPTION = None,
    eol: EOL_OPTION = False,
    strict_types: STRICT_TYPES_OPTION = False,
    short_arrays: SHORT_ARRAYS_OPTION = False,
    skip: SKIP_OPTION = None,
    config_file: CONFIG_OPTION = None,
) -> None:
    """List the tasks that ``check`` would run, in execution order."""

    _, config = _prepare(
        path,
        eol=eol,
        strict_types=strict_types,
        short_arrays=short_arrays,
        skip=skip,
        config_file=config_file,
    )
    registry = build_default_registry(config.tasks)
    table = Table(title="Pipeline tasks")
    table.add_column("#", justify="right")
    table.add_column("Task")
    table.add_column("Files")
    for index, task in enumerate(registry, start=1):
        table.add_row(str(index), task.name, task.pattern or "*")
    console = get_console_manager().get(color=supports_color(), emoji=False)
    console.print(table)


def run_checks(
    options: CheckCLIOptions,
    config: CheckerConfig,
    *,
    use_color: bool,
) -> tuple[AggregateResult, Reporter]:
    """Run the task pipeline described by ``config`` over ``options.path``.

    Args:
        options: Parsed CLI options holding the resolved scan path.
        config: Effective configuration.
        use_color: Colour decision made once at start-up.

    Returns:
        tuple[AggregateResult, Reporter]: Aggregated outcome of the run and
        the reporter holding the per-level finding counts.
    """

    console = get_console_manager().get(color=use_color, emoji=config.output.emoji)
    reporter = Reporter(console, use_color=use_color)
    runner = PipelineRunner(reporter)
    progress = ProgressController(console, requested=config.output.progress)
    progress.install(runner.hooks)
    with progress:
        result = runner.run(
            options.path,
            config.discovery.accept_set(),
            config.discovery.ignore_set(),
            build_default_registry(config.tasks),
            read_only=config.read_only,
        )
    return result, reporter


def _prepare(path: Path | None, **overrides: Any) -> tuple[CheckCLIOptions, CheckerConfig]:
    """Build CLI options and the effective configuration, exiting on failure."""

    try:
        options = build_check_options(path, **overrides)
        config = resolve_config(options)
    except CLIError as exc:
        build_cli_logger(emoji=False, color=supports_color()).fail(f"Error: {exc}")
        raise typer.Exit(code=exc.exit_code) from exc
    return options, config


def _report_outcome(result: AggregateResult, reporter: Reporter, config: CheckerConfig, logger: CLILogger) -> int:
    """Print the run summary and return the exit status."""

    if reporter.total:
        logger.info(f"Reported {reporter.summary()}")
    warnings = reporter.counts[FindingLevel.WARNING]
    if warnings:
        logger.warn(f"{warnings} warning(s) reported, review them even though they do not fail the run")
    if result.rewritten:
        logger.info(f"Fixed {len(result.rewritten)} file(s)")
    if result.success:
        logger.ok(f"Checked {result.files} file(s), no problems left")
        return EXIT_OK
    hint = " (run with --fix to correct fixable findings)" if config.read_only else ""
    logger.fail(f"{len(result.failed)} of {result.files} file(s) have unresolved findings{hint}")
    return EXIT_FINDINGS


__all__ = ["app", "run_checks"]
