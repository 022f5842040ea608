# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Aggregate of one fan-out run."""

from __future__ import annotations

from dataclasses import dataclass, field

from .probe import ProbeResult


@dataclass
class ProbeBatch:
    """
    Results collected by a single coordinator run.

    ``results`` keeps completion order. ``failures`` counts probes that
    errored and ``filtered`` counts successful probes rejected by the accept
    policy; neither appears in ``results``.
    """

    total: int = 0
    results: list[ProbeResult] = field(default_factory=list)
    failures: int = 0
    filtered: int = 0

    @property
    def completed(self) -> int:
        return len(self.results) + self.failures + self.filtered
