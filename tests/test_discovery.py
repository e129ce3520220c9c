# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for filesystem discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from codechecker.discovery import FileWalker, scan_files
from codechecker.matching import GlobSet


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("x\n", encoding="utf-8")
    return path


def test_ignored_directories_are_pruned(tmp_path: Path) -> None:
    _touch(tmp_path / "a.php")
    _touch(tmp_path / "b.txt")
    _touch(tmp_path / "vendor" / "c.php")

    found = list(scan_files(tmp_path, GlobSet(["*.php"]), GlobSet(["vendor"])))

    assert found == [tmp_path / "a.php"]


def test_walk_order_is_lexical_per_directory(tmp_path: Path) -> None:
    for name in ("z.php", "a.php", "m/b.php", "b/c.php", "M.php"):
        _touch(tmp_path / name)

    found = [path.relative_to(tmp_path).as_posix() for path in scan_files(tmp_path, GlobSet(["*.php"]), GlobSet())]

    assert found == ["M.php", "a.php", "z.php", "b/c.php", "m/b.php"]


def test_ignore_applies_to_file_names(tmp_path: Path) -> None:
    _touch(tmp_path / "app.js")
    _touch(tmp_path / "app.min.js")

    found = list(scan_files(tmp_path, GlobSet(["*.js"]), GlobSet(["*.min.js"])))

    assert found == [tmp_path / "app.js"]


def test_single_file_root_bypasses_patterns(tmp_path: Path) -> None:
    target = _touch(tmp_path / "vendor.bin")

    found = list(FileWalker().scan(target, GlobSet(["*.php"]), GlobSet(["vendor.bin"])))

    assert found == [target]


def test_missing_root_raises(tmp_path: Path) -> None:
    walker = FileWalker()

    with pytest.raises(FileNotFoundError):
        list(walker.scan(tmp_path / "missing", GlobSet(["*"]), GlobSet()))


def test_scan_is_lazy(tmp_path: Path) -> None:
    _touch(tmp_path / "a.php")
    _touch(tmp_path / "b.php")

    iterator = scan_files(tmp_path, GlobSet(["*.php"]), GlobSet())

    assert next(iterator) == tmp_path / "a.php"
    (tmp_path / "a.php").unlink()
    assert next(iterator) == tmp_path / "b.php"
