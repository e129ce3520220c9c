# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Case-insensitive shell-style matching of file names."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from fnmatch import fnmatchcase
from functools import lru_cache
from typing import Final

NEGATION_PREFIX: Final[str] = "!"
ALTERNATIVE_SEPARATOR: Final[str] = ","


@lru_cache(maxsize=256)
def _split_pattern(pattern: str) -> tuple[bool, tuple[str, ...]]:
    """Return the negation flag and the lower-cased alternatives of ``pattern``.

    Args:
        pattern: Comma separated glob list, optionally prefixed with ``!``.

    Returns:
        tuple[bool, tuple[str, ...]]: Negation flag and alternatives.
    """

    negated = pattern.startswith(NEGATION_PREFIX)
    body = pattern.lstrip(NEGATION_PREFIX)
    alternatives = tuple(part.casefold() for part in body.split(ALTERNATIVE_SEPARATOR))
    return negated, alternatives


def match_file_name(pattern: str, name: str) -> bool:
    """Return whether ``name`` satisfies the task ``pattern``.

    A pattern is a comma separated list of shell wildcards. When it starts
    with ``!`` the whole list is negated, so a name that matches none of the
    alternatives is a positive result.

    Args:
        pattern: Comma separated glob list, optionally prefixed with ``!``.
        name: Base name of the file under consideration.

    Returns:
        bool: ``True`` when the pattern accepts ``name``.
    """

    negated, alternatives = _split_pattern(pattern)
    folded = name.casefold()
    for alternative in alternatives:
        if fnmatchcase(folded, alternative):
            return not negated
    return negated


class GlobSetFrozenError(RuntimeError):
    """Raised when a frozen :class:`GlobSet` is modified."""


class GlobSet:
    """Ordered, de-duplicated collection of file name patterns.

    Sets stay mutable while a run is being configured; :meth:`frozen` hands
    out an immutable snapshot that the walker and runner operate on.
    """

    __slots__ = ("_patterns", "_frozen")

    def __init__(self, patterns: Iterable[str] = (), *, frozen: bool = False) -> None:
        self._patterns: list[str] = []
        self._frozen = False
        self.extend(patterns)
        self._frozen = frozen

    @property
    def is_frozen(self) -> bool:
        """Return whether the set rejects further modification."""

        return self._frozen

    @property
    def patterns(self) -> tuple[str, ...]:
        """Return the patterns in insertion order."""

        return tuple(self._patterns)

    def add(self, pattern: str) -> None:
        """Append ``pattern`` unless it is blank or already present.

        Args:
            pattern: Glob pattern to append.

        Raises:
            GlobSetFrozenError: If the set has been frozen.
        """

        if self._frozen:
            raise GlobSetFrozenError(f"cannot add {pattern!r} to a frozen pattern set")
        candidate = pattern.strip()
        if candidate and candidate not in self._patterns:
            self._patterns.append(candidate)

    def extend(self, patterns: Iterable[str]) -> None:
        """Append every entry of ``patterns`` in order."""

        for pattern in patterns:
            self.add(pattern)

    def frozen(self) -> GlobSet:
        """Return an immutable snapshot of the current patterns."""

        if self._frozen:
            return self
        return GlobSet(self._patterns, frozen=True)

    def matches(self, name: str) -> bool:
        """Return whether any member pattern matches ``name``.

        Args:
            name: Base name of a file or directory.

        Returns:
            bool: ``True`` when at least one pattern matches.
        """

        return any(match_file_name(pattern, name) for pattern in self._patterns)

    def __iter__(self) -> Iterator[str]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._patterns

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "mutable"
        return f"GlobSet({self._patterns!r}, {state})"


__all__ = ["GlobSet", "GlobSetFrozenError", "match_file_name"]
