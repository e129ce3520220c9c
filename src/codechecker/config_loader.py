# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration sources (defaults, TOML, pyproject) and layered loading."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final, Protocol

from pydantic import ValidationError

from .config import CheckerConfig, ConfigError
from .constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_SECTION_KEY

LOGGER = logging.getLogger(__name__)

PYPROJECT_TOOL_KEY: Final[str] = "tool"


class ConfigSource(Protocol):
    """Source of a configuration fragment."""

    name: str

    def load(self) -> Mapping[str, Any]:
        """Return the configuration fragment provided by the source."""
        raise NotImplementedError

    def describe(self) -> str:
        """Return a human readable description of the source."""
        raise NotImplementedError


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        """Bind the source to ``path``.

        Args:
            path: TOML document to read; a missing file yields no data.
            name: Optional display name, defaulting to ``path``.
        """

        self._path = path
        self.name = name or str(path)

    def load(self) -> Mapping[str, Any]:
        """Return the parsed document, or an empty mapping when it is absent.

        Raises:
            ConfigError: If the file is unreadable or not valid TOML.
        """

        if not self._path.exists():
            return {}
        try:
            with self._path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {self._path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Unable to read {self._path}: {exc}") from exc
        return data

    def describe(self) -> str:
        """Return a human readable description of the source."""

        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.codechecker]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        """Return the ``[tool.codechecker]`` table, or an empty mapping.

        Raises:
            ConfigError: If the file is invalid or the section is not a table.
        """

        data = super().load()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if section is None:
            return {}
        if not isinstance(section, Mapping):
            raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {self.name} must be a table")
        return dict(section)

    def describe(self) -> str:
        """Return a human readable description of the source."""

        return f"pyproject.toml ({self.name})"


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated recursively with ``override``; tables merge, other values replace."""

    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


@dataclass(slots=True)
class ConfigLoadResult:
    """Resolved configuration together with the sources that contributed."""

    config: CheckerConfig
    sources: list[str] = field(default_factory=list)


def config_directory(target: Path) -> Path:
    """Return the directory searched for configuration files for ``target``."""

    return target.parent if target.is_file() else target


def default_sources(target: Path, *, explicit: Path | None = None) -> list[ConfigSource]:
    """Return configuration sources for ``target`` in ascending precedence.

    Args:
        target: Scan root (directory or single file).
        explicit: Optional configuration file supplied on the command line.

    Returns:
        list[ConfigSource]: Sources from lowest to highest precedence.

    Raises:
        ConfigError: If ``explicit`` does not exist.
    """

    directory = config_directory(target)
    sources: list[ConfigSource] = [
        PyProjectConfigSource(directory / PYPROJECT_FILE_NAME),
        TomlConfigSource(directory / CONFIG_FILE_NAME),
    ]
    if explicit is not None:
        if not explicit.is_file():
            raise ConfigError(f"Configuration file '{explicit}' does not exist")
        if explicit.name == PYPROJECT_FILE_NAME:
            sources.append(PyProjectConfigSource(explicit))
        else:
            sources.append(TomlConfigSource(explicit))
    return sources


def load_config(
    target: Path,
    *,
    explicit: Path | None = None,
    sources: Sequence[ConfigSource] | None = None,
) -> ConfigLoadResult:
    """Load the layered configuration for ``target``.

    Args:
        target: Scan root (directory or single file).
        explicit: Optional configuration file given on the command line.
        sources: Optional explicit source list replacing the defaults.

    Returns:
        ConfigLoadResult: Validated configuration and contributing sources.

    Raises:
        ConfigError: If a source is unreadable or the merged payload is invalid.
    """

    active_sources = list(sources) if sources is not None else default_sources(target, explicit=explicit)
    merged: dict[str, Any] = {}
    used: list[str] = []
    for source in active_sources:
        fragment = source.load()
        if not fragment:
            continue
        LOGGER.debug("loaded configuration fragment from %s", source.describe())
        merged = _deep_merge(merged, fragment)
        used.append(source.describe())
    try:
        config = CheckerConfig.model_validate(merged)
    except ValidationError as exc:
        origin = ", ".join(used) or "defaults"
        raise ConfigError(f"Invalid configuration ({origin}): {exc}") from exc
    return ConfigLoadResult(config=config, sources=used)


__all__ = [
    "ConfigLoadResult",
    "ConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "config_directory",
    "default_sources",
    "load_config",
]
