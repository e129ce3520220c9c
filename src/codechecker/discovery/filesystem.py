# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem discovery of files eligible for checking."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from ..matching import GlobSet

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WalkContext:
    """Parameters required to walk the filesystem hierarchy."""

    base: Path
    accept: GlobSet
    ignore: GlobSet
    follow_symlinks: bool


class FileWalker:
    """Traverse a directory tree yielding files accepted by the glob sets."""

    def __init__(self, *, follow_symlinks: bool = False) -> None:
        """Create a walker optionally following symlinked directories.

        Args:
            follow_symlinks: When ``True`` walk directories pointed to by
                symlinks instead of skipping them.
        """

        self.follow_symlinks = follow_symlinks

    def scan(self, root: Path, accept: GlobSet, ignore: GlobSet) -> Iterator[Path]:
        """Yield files under ``root`` that should enter the pipeline.

        A regular file passed as ``root`` is yielded as is: explicit targets
        bypass the accept and ignore sets.

        Args:
            root: Directory to walk or a single file to check.
            accept: Patterns a file name must match at least once.
            ignore: Patterns excluding files and pruning whole directories.

        Yields:
            Path: Files in deterministic, lexical per-directory order.

        Raises:
            FileNotFoundError: If ``root`` does not exist.
        """

        if root.is_file():
            yield root
            return
        if not root.is_dir():
            raise FileNotFoundError(f"Path '{root}' does not exist")
        context = WalkContext(
            base=root,
            accept=accept.frozen(),
            ignore=ignore.frozen(),
            follow_symlinks=self.follow_symlinks,
        )
        yield from self._walk(context)

    def _walk(self, context: WalkContext) -> Iterator[Path]:
        """Walk ``context.base`` yielding accepted files.

        Args:
            context: Immutable walk context containing traversal settings.

        Yields:
            Path: Files that satisfy the accept and ignore rules.
        """

        for dirpath, dirnames, filenames in os.walk(context.base, followlinks=context.follow_symlinks):
            current = Path(dirpath)
            dirnames[:] = sorted(name for name in dirnames if not self._should_skip_directory(current / name, context))
            for filename in sorted(filenames):
                candidate = current / filename
                if self._is_accepted(candidate, context):
                    yield candidate

    def _should_skip_directory(self, path: Path, context: WalkContext) -> bool:
        """Return whether traversal must not descend into ``path``."""

        if context.ignore.matches(path.name):
            LOGGER.debug("pruning ignored directory %s", path)
            return True
        return False

    def _is_accepted(self, candidate: Path, context: WalkContext) -> bool:
        """Return whether ``candidate`` is a regular file selected for checking.

        Args:
            candidate: File candidate discovered during walking.
            context: Traversal context containing the glob sets.

        Returns:
            bool: ``True`` when accepted and not ignored.
        """

        name = candidate.name
        if not context.accept.matches(name) or context.ignore.matches(name):
            return False
        return candidate.is_file()


def scan_files(
    root: Path,
    accept: GlobSet,
    ignore: GlobSet,
    *,
    follow_symlinks: bool = False,
) -> Iterator[Path]:
    """Return a lazy iterator of files under ``root``.

    Args:
        root: Directory to walk or a single file.
        accept: Accept patterns.
        ignore: Ignore patterns.
        follow_symlinks: Whether symlinked directories are traversed.

    Returns:
        Iterator[Path]: Single-pass iterator over discovered files.
    """

    return FileWalker(follow_symlinks=follow_symlinks).scan(root, accept, ignore)


__all__ = ["FileWalker", "WalkContext", "scan_files"]
