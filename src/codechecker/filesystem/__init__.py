# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem helpers shared across the code checker."""

from __future__ import annotations

from .paths import encode_content, read_content, relative_to_root, write_content_atomic

__all__ = ["encode_content", "read_content", "relative_to_root", "write_content_atomic"]
