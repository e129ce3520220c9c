# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for file name pattern matching."""

from __future__ import annotations

import pytest

from codechecker.matching import GlobSet, GlobSetFrozenError, match_file_name


@pytest.mark.parametrize(
    ("pattern", "name", "expected"),
    [
        ("*.php,*.phpt", "Foo.PHP", True),
        ("*.php,*.phpt", "case.phpt", True),
        ("*.php,*.phpt", "notes.txt", False),
        ("!*.sh", "run.sh", False),
        ("!*.sh", "run.bat", True),
        ("!*.sh,*.bat", "run.bat", False),
        (".htaccess", ".HTACCESS", True),
        ("vendor", "vendors", False),
    ],
)
def test_match_file_name(pattern: str, name: str, expected: bool) -> None:
    assert match_file_name(pattern, name) is expected


def test_glob_set_preserves_order_and_skips_duplicates() -> None:
    globs = GlobSet(["*.php", " *.js ", "*.php", ""])
    globs.add("*.css")

    assert globs.patterns == ("*.php", "*.js", "*.css")
    assert len(globs) == 3
    assert "*.js" in globs


def test_glob_set_matches_any_member() -> None:
    globs = GlobSet(["*.php", "*.json"])

    assert globs.matches("composer.JSON")
    assert not globs.matches("readme.md")
    assert not GlobSet().matches("anything")


def test_frozen_snapshot_rejects_changes_and_is_detached() -> None:
    globs = GlobSet(["*.php"])
    snapshot = globs.frozen()

    with pytest.raises(GlobSetFrozenError):
        snapshot.add("*.js")

    globs.add("*.js")
    assert snapshot.patterns == ("*.php",)
    assert snapshot.is_frozen
    assert snapshot.frozen() is snapshot
    assert not globs.is_frozen
