# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe work-item/result models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..errors import ProbeError


@dataclass(frozen=True)
class WorkItem:
    url: str
    method: str


@dataclass(frozen=True)
class ProbeResult:
    """Status and body length observed for one (url, method) pair."""

    url: str
    method: str
    status: int
    length: int

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "method": self.method, "status": self.status, "length": self.length}


@dataclass(frozen=True)
class ProbeOutcome:
    """Tagged outcome of one probe: exactly one of ``result`` and ``error`` is set."""

    item: WorkItem
    result: ProbeResult | None = None
    error: ProbeError | None = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError("ProbeOutcome requires exactly one of result or error")

    @property
    def ok(self) -> bool:
        return self.result is not None

    @classmethod
    def success(cls, item: WorkItem, result: ProbeResult) -> ProbeOutcome:
        return cls(item=item, result=result)

    @classmethod
    def failure(cls, item: WorkItem, error: ProbeError) -> ProbeOutcome:
        return cls(item=item, error=error)
