# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for methodwizard."""

from .batch import ProbeBatch
from .probe import ProbeOutcome, ProbeResult, WorkItem

__all__ = [
    "ProbeBatch",
    "ProbeOutcome",
    "ProbeResult",
    "WorkItem",
]
