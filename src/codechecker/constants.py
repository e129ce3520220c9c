# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Default discovery patterns and configuration file names."""

from __future__ import annotations

from typing import Final

DEFAULT_ACCEPT_PATTERNS: Final[tuple[str, ...]] = (
    "*.php",
    "*.phpt",
    "*.inc",
    "*.txt",
    "*.texy",
    "*.md",
    "*.css",
    "*.less",
    "*.sass",
    "*.scss",
    "*.js",
    "*.json",
    "*.latte",
    "*.htm",
    "*.html",
    "*.phtml",
    "*.xml",
    "*.ini",
    "*.neon",
    "*.yml",
    "*.sh",
    "*.bat",
    "*.sql",
    ".htaccess",
    ".gitignore",
)

DEFAULT_IGNORE_PATTERNS: Final[tuple[str, ...]] = (
    ".git",
    ".svn",
    ".idea",
    "*.tmp",
    "tmp",
    "temp",
    "log",
    "vendor",
    "node_modules",
    "bower_components",
    "*.min.js",
    "package.json",
    "package-lock.json",
)

CONFIG_FILE_NAME: Final[str] = ".codechecker.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION_KEY: Final[str] = "codechecker"

PHP_PATTERN: Final[str] = "*.php,*.phpt"

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_ACCEPT_PATTERNS",
    "DEFAULT_IGNORE_PATTERNS",
    "PHP_PATTERN",
    "PYPROJECT_FILE_NAME",
    "PYPROJECT_SECTION_KEY",
]
