# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for methodwizard."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(levelname)s [%(threadName)s] %(name)s: %(message)s"


def resolve_log_level(level: str | None = None) -> int:
    """Map a level name (or ``METHODWIZARD_LOG_LEVEL``) to a logging level, WARNING when unknown."""
    name = (level or os.getenv("METHODWIZARD_LOG_LEVEL") or "WARNING").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use; probe threads show up by name."""
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)


__all__ = ["LOG_FORMAT", "resolve_log_level", "setup_logging"]
