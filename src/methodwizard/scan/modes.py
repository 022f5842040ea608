# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""The three probing modes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from ..catalog import HTTP_METHODS
from ..models import ProbeBatch, ProbeResult, WorkItem
from .coordinator import FanOutCoordinator
from .report import format_result_line

METHOD_NOT_ALLOWED = 405


def build_work_items(targets: Iterable[str], methods: Sequence[str]) -> list[WorkItem]:
    """Target-major cross product of targets and methods."""
    return [WorkItem(url=url, method=method) for url in targets for method in methods]


def is_reportable(result: ProbeResult) -> bool:
    """Multi-target runs drop 405 Method Not Allowed responses."""
    return result.status != METHOD_NOT_ALLOWED


def probe_single_target(
    coordinator: FanOutCoordinator,
    url: str,
    *,
    out: Callable[[str], None] = print,
) -> ProbeBatch:
    """Probe every catalog method against ``url``, printing each result as it lands."""
    out(f"[*] Testing HTTP methods on: {url}")
    return coordinator.run(
        build_work_items([url], HTTP_METHODS),
        on_result=lambda result: out(format_result_line(result)),
    )


def probe_targets(
    coordinator: FanOutCoordinator,
    urls: Sequence[str],
    method: str = "GET",
    *,
    out: Callable[[str], None] = print,
) -> ProbeBatch:
    """Probe a single ``method`` against every URL."""
    out(f"[*] Testing {method} on multiple targets...")
    return coordinator.run(build_work_items(urls, [method]), accept=is_reportable)


def probe_targets_all_methods(
    coordinator: FanOutCoordinator,
    urls: Sequence[str],
    *,
    out: Callable[[str], None] = print,
) -> ProbeBatch:
    """Probe every catalog method against every URL."""
    out("[*] Testing multiple HTTP methods on multiple targets...")
    return coordinator.run(build_work_items(urls, HTTP_METHODS), accept=is_reportable)
