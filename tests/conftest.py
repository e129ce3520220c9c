# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from codechecker.reporting import Reporter


@pytest.fixture
def console_buffer() -> io.StringIO:
    """Return the in-memory stream backing :func:`console`."""
    return io.StringIO()


@pytest.fixture
def console(console_buffer: io.StringIO) -> Console:
    """Return a colourless console writing into ``console_buffer``."""
    return Console(file=console_buffer, color_system=None, no_color=True, highlight=False, soft_wrap=True)


@pytest.fixture
def reporter(console: Console) -> Reporter:
    """Return a reporter bound to the in-memory console."""
    return Reporter(console)
