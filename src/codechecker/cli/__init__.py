# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line interface for the code checker."""

from __future__ import annotations

from .app import app


def main() -> None:
    """Run the Typer application."""

    app()


__all__ = ["app", "main"]
