# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for layered configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from codechecker.config import CheckerConfig, ConfigError
from codechecker.config_loader import config_directory, load_config
from codechecker.constants import DEFAULT_ACCEPT_PATTERNS, DEFAULT_IGNORE_PATTERNS


def test_defaults_without_files(tmp_path: Path) -> None:
    result = load_config(tmp_path)

    assert result.sources == []
    assert result.config.discovery.accept == list(DEFAULT_ACCEPT_PATTERNS)
    assert result.config.discovery.ignore == list(DEFAULT_IGNORE_PATTERNS)
    assert result.config.read_only
    assert result.config.output.progress


def test_pyproject_then_standalone_file(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
[project]
name = "demo"

[tool.codechecker]
fix = true

[tool.codechecker.tasks]
eol = true
short_arrays = true
skip = ["json_syntax_checker"]
""".strip(),
        encoding="utf-8",
    )
    (tmp_path / ".codechecker.toml").write_text(
        """
[tasks]
eol = false

[discovery]
extend_ignore = ["build"]
""".strip(),
        encoding="utf-8",
    )

    result = load_config(tmp_path)
    config = result.config

    assert len(result.sources) == 2
    assert config.fix
    assert not config.tasks.eol
    assert config.tasks.short_arrays
    assert config.tasks.skip == ["json_syntax_checker"]
    assert config.discovery.ignore == [*DEFAULT_IGNORE_PATTERNS, "build"]


def test_explicit_file_has_highest_precedence(tmp_path: Path) -> None:
    (tmp_path / ".codechecker.toml").write_text('[discovery]\naccept = ["*.php"]\n', encoding="utf-8")
    explicit = tmp_path / "ci.toml"
    explicit.write_text('[discovery]\naccept = ["*.js"]\n[output]\nprogress = false\n', encoding="utf-8")

    config = load_config(tmp_path, explicit=explicit).config

    assert config.discovery.accept == ["*.js"]
    assert not config.output.progress


def test_missing_explicit_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        load_config(tmp_path, explicit=tmp_path / "nope.toml")


def test_invalid_toml_raises(tmp_path: Path) -> None:
    (tmp_path / ".codechecker.toml").write_text("[discovery\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


def test_unknown_key_raises(tmp_path: Path) -> None:
    (tmp_path / ".codechecker.toml").write_text("[output]\nverbose = true\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config(tmp_path)


def test_file_target_reads_parent_directory(tmp_path: Path) -> None:
    target = tmp_path / "a.php"
    target.write_text("<?php\n", encoding="utf-8")
    (tmp_path / ".codechecker.toml").write_text("fix = true\n", encoding="utf-8")

    assert config_directory(target) == tmp_path
    assert load_config(target).config.fix


def test_extend_accept_appends_to_explicit_list() -> None:
    config = CheckerConfig.model_validate({"discovery": {"accept": ["*.php"], "extend_accept": "*.twig"}})

    assert config.discovery.accept == ["*.php", "*.twig"]
    assert list(config.discovery.accept_set()) == ["*.php", "*.twig"]
