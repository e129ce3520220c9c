# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discovery helpers for the codechecker package."""

from __future__ import annotations

from .filesystem import FileWalker, WalkContext, scan_files

__all__ = ["FileWalker", "WalkContext", "scan_files"]
