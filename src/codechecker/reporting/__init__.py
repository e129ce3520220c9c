# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting helpers for findings and run progress."""

from __future__ import annotations

from .progress import ProgressController
from .reporter import Finding, FindingLevel, Reporter

__all__ = ["Finding", "FindingLevel", "ProgressController", "Reporter"]
