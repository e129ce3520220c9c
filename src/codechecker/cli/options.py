# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared option declarations and data structures for the CLI."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..config import CheckerConfig, ConfigError
from ..config_loader import load_config
from ..tasks.defaults import builtin_task_names
from .shared import CLIError

PATH_OPTION = Annotated[
    Path | None,
    typer.Option("-d", "--path", help="Folder or file to scan (default: current directory)."),
]
IGNORE_OPTION = Annotated[
    list[str] | None,
    typer.Option("-i", "--ignore", help="Files to ignore (repeatable)."),
]
FIX_OPTION = Annotated[bool, typer.Option("-f", "--fix", help="Fixes files.")]
EOL_OPTION = Annotated[bool, typer.Option("-l", "--eol", help="Convert newline characters.")]
NO_PROGRESS_OPTION = Annotated[bool, typer.Option("--no-progress", help="Do not show progress.")]
STRICT_TYPES_OPTION = Annotated[
    bool,
    typer.Option("--strict-types", help="Checks whether PHP directive strict_types is enabled."),
]
SHORT_ARRAYS_OPTION = Annotated[bool, typer.Option("--short-arrays", help="Enforces PHP 5.4 short array syntax.")]
SKIP_OPTION = Annotated[
    list[str] | None,
    typer.Option("--skip", help="Name of a built-in task to leave out (repeatable)."),
]
NO_COLOR_OPTION = Annotated[bool, typer.Option("--no-color", help="Disable coloured output.")]
EMOJI_OPTION = Annotated[bool, typer.Option("--emoji", help="Decorate status messages with emoji.")]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Configuration file overriding project settings."),
]
DEBUG_OPTION = Annotated[bool, typer.Option("--debug", help="Log internal diagnostics to stderr.")]


def normalize_cli_values(values: Sequence[str] | None) -> tuple[str, ...]:
    """Return sanitized CLI values preserving order."""

    if not values:
        return ()
    return tuple(stripped for entry in values if (stripped := entry.strip()))


@dataclass(slots=True)
class CheckCLIOptions:
    """Capture CLI overrides supplied to the ``check`` and ``tasks`` commands."""

    path: Path
    ignore: tuple[str, ...] = ()
    skip: tuple[str, ...] = ()
    fix: bool = False
    eol: bool = False
    strict_types: bool = False
    short_arrays: bool = False
    no_progress: bool = False
    no_color: bool = False
    emoji: bool = False
    config_file: Path | None = None
    debug: bool = False


def build_check_options(
    path: Path | None,
    *,
    ignore: Sequence[str] | None = None,
    skip: Sequence[str] | None = None,
    fix: bool = False,
    eol: bool = False,
    strict_types: bool = False,
    short_arrays: bool = False,
    no_progress: bool = False,
    no_color: bool = False,
    emoji: bool = False,
    config_file: Path | None = None,
    debug: bool = False,
) -> CheckCLIOptions:
    """Construct ``CheckCLIOptions`` from Typer callback parameters.

    Raises:
        CLIError: If the scan path does not exist.
    """

    target = (path or Path.cwd()).expanduser().resolve()
    if not target.exists():
        raise CLIError(f"Path '{target}' does not exist")
    return CheckCLIOptions(
        path=target,
        ignore=normalize_cli_values(ignore),
        skip=normalize_cli_values(skip),
        fix=fix,
        eol=eol,
        strict_types=strict_types,
        short_arrays=short_arrays,
        no_progress=no_progress,
        no_color=no_color,
        emoji=emoji,
        config_file=config_file.expanduser().resolve() if config_file else None,
        debug=debug,
    )


def resolve_config(options: CheckCLIOptions) -> CheckerConfig:
    """Load project configuration and apply CLI overrides on top.

    Flags only switch behaviour on; they never turn off something the
    configuration enabled. Ignore masks are appended.

    Args:
        options: Parsed CLI options.

    Returns:
        CheckerConfig: Effective configuration for the run.

    Raises:
        CLIError: If the configuration cannot be loaded or names unknown
            tasks.
    """

    try:
        config = load_config(options.path, explicit=options.config_file).config
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc

    if options.ignore:
        config.discovery.ignore = [*config.discovery.ignore, *options.ignore]
    if options.skip:
        config.tasks.skip = [*config.tasks.skip, *options.skip]
    config.fix = config.fix or options.fix
    config.tasks.eol = config.tasks.eol or options.eol
    config.tasks.strict_types = config.tasks.strict_types or options.strict_types
    config.tasks.short_arrays = config.tasks.short_arrays or options.short_arrays
    if options.no_progress:
        config.output.progress = False
    if options.no_color:
        config.output.color = False
    config.output.emoji = config.output.emoji or options.emoji
    unknown = sorted(set(config.tasks.skip) - set(builtin_task_names()))
    if unknown:
        raise CLIError(f"Unknown task(s) to skip: {', '.join(unknown)}")
    return config


__all__ = [
    "CONFIG_OPTION",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "EOL_OPTION",
    "FIX_OPTION",
    "IGNORE_OPTION",
    "NO_COLOR_OPTION",
    "NO_PROGRESS_OPTION",
    "PATH_OPTION",
    "SHORT_ARRAYS_OPTION",
    "SKIP_OPTION",
    "STRICT_TYPES_OPTION",
    "CheckCLIOptions",
    "build_check_options",
    "normalize_cli_values",
    "resolve_config",
]
