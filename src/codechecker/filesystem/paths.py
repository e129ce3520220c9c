# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for reading, rewriting and naming checked files."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import Final

ENCODING: Final[str] = "utf-8"
# Undecodable bytes round-trip unchanged through ``surrogateescape``.
ENCODING_ERRORS: Final[str] = "surrogateescape"


def read_content(path: Path) -> str:
    """Return the content of ``path`` without altering bytes or newlines.

    Args:
        path: File to read.

    Returns:
        str: Decoded content; invalid UTF-8 bytes become lone surrogates.
    """

    return path.read_bytes().decode(ENCODING, ENCODING_ERRORS)


def encode_content(content: str) -> bytes:
    """Return the bytes that :func:`read_content` decoded into ``content``."""

    return content.encode(ENCODING, ENCODING_ERRORS)


def write_content_atomic(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` without exposing a partial file.

    Symlinks are written through: the data goes to a temporary sibling of
    the link target that is flushed, synced and then renamed over the
    target, keeping its permission bits. The temporary file is removed if
    anything fails before the rename.

    Args:
        path: File to overwrite.
        content: New file content.

    Raises:
        OSError: If the temporary file cannot be written or renamed.
    """

    payload = encode_content(content)
    destination = path.resolve()
    descriptor, temp_name = tempfile.mkstemp(prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(descriptor, "wb") as handle:
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        shutil.copymode(destination, temp_path)
        os.replace(temp_path, destination)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise


def relative_to_root(path: Path, root: Path) -> str:
    """Return ``path`` relative to the scan ``root`` for display.

    A single-file root is displayed by its base name.

    Args:
        path: File inside ``root`` (or ``root`` itself).
        root: Scan root.

    Returns:
        str: Path relative to ``root``, or ``path`` itself when it lies
        outside the root.
    """

    if path == root:
        return path.name
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


__all__ = [
    "ENCODING",
    "ENCODING_ERRORS",
    "encode_content",
    "read_content",
    "relative_to_root",
    "write_content_atomic",
]
