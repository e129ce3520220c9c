# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the code checker."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import DEFAULT_ACCEPT_PATTERNS, DEFAULT_IGNORE_PATTERNS
from .matching import GlobSet


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


def _merge_extensions(data: Any, field_name: str) -> Any:
    """Fold an ``extend_<field_name>`` key into ``field_name``.

    Args:
        data: Raw payload handed to the model validator.
        field_name: Name of the list field that may be extended.

    Returns:
        Any: Payload with the extension applied.
    """

    if not isinstance(data, dict):
        return data
    extend_key = f"extend_{field_name}"
    if extend_key not in data:
        return data
    payload = dict(data)
    extras = payload.pop(extend_key) or []
    if isinstance(extras, str):
        extras = [extras]
    base = payload.get(field_name)
    if base is None:
        base = DEFAULT_ACCEPT_PATTERNS if field_name == "accept" else DEFAULT_IGNORE_PATTERNS
    payload[field_name] = [*base, *extras]
    return payload


class DiscoveryConfig(BaseModel):
    """Accept and ignore patterns used to select files."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    accept: list[str] = Field(default_factory=lambda: list(DEFAULT_ACCEPT_PATTERNS))
    ignore: list[str] = Field(default_factory=lambda: list(DEFAULT_IGNORE_PATTERNS))

    @model_validator(mode="before")
    @classmethod
    def _apply_extensions(cls, data: Any) -> Any:
        data = _merge_extensions(data, "accept")
        return _merge_extensions(data, "ignore")

    def accept_set(self) -> GlobSet:
        """Return the accept patterns as a mutable :class:`GlobSet`."""

        return GlobSet(self.accept)

    def ignore_set(self) -> GlobSet:
        """Return the ignore patterns as a mutable :class:`GlobSet`."""

        return GlobSet(self.ignore)


class TaskOptions(BaseModel):
    """Selection of optional built-in tasks."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    eol: bool = False
    strict_types: bool = False
    short_arrays: bool = False
    skip: list[str] = Field(default_factory=list)


class OutputConfig(BaseModel):
    """Console presentation preferences."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    progress: bool = True
    color: bool = True
    emoji: bool = False


class CheckerConfig(BaseModel):
    """Primary configuration container used by the driver."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    tasks: TaskOptions = Field(default_factory=TaskOptions)
    output: OutputConfig = Field(default_factory=OutputConfig)
    fix: bool = False

    @property
    def read_only(self) -> bool:
        """Return ``True`` when fixes must not be written back."""

        return not self.fix


__all__ = [
    "CheckerConfig",
    "ConfigError",
    "DiscoveryConfig",
    "OutputConfig",
    "TaskOptions",
]
