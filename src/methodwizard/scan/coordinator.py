# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fan-out/fan-in over (url, method) work items."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed

from ..errors import ProbeError
from ..models import ProbeBatch, ProbeOutcome, ProbeResult, WorkItem
from ..probe.executor import ProbeExecutor

logger = logging.getLogger(__name__)

AcceptPolicy = Callable[[ProbeResult], bool]
ResultCallback = Callable[[ProbeResult], None]


class FanOutCoordinator:
    """
    Runs one probe task per work item and joins on all of them.

    Each task returns a ProbeOutcome through its future; the calling thread is
    the only collector, so the result list is never touched concurrently.
    With ``max_workers=None`` the pool is as wide as the batch.
    """

    def __init__(self, executor: ProbeExecutor, max_workers: int | None = None):
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be a positive integer or None")
        self.executor = executor
        self.max_workers = max_workers

    def _run_one(self, item: WorkItem) -> ProbeOutcome:
        try:
            result = self.executor.probe(item.url, item.method)
        except ProbeError as exc:
            return ProbeOutcome.failure(item, exc)
        return ProbeOutcome.success(item, result)

    def _pool_size(self, count: int) -> int:
        if self.max_workers is None:
            return count
        return min(self.max_workers, count)

    def run(
        self,
        items: Sequence[WorkItem],
        *,
        accept: AcceptPolicy | None = None,
        on_result: ResultCallback | None = None,
    ) -> ProbeBatch:
        batch = ProbeBatch(total=len(items))
        if not items:
            return batch

        with ThreadPoolExecutor(max_workers=self._pool_size(len(items)), thread_name_prefix="probe") as pool:
            futures = [pool.submit(self._run_one, item) for item in items]
            for future in as_completed(futures):
                self._collect(batch, future.result(), accept, on_result)

        if batch.failures:
            logger.info("%d of %d probes failed and were dropped", batch.failures, batch.total)
        return batch

    @staticmethod
    def _collect(
        batch: ProbeBatch,
        outcome: ProbeOutcome,
        accept: AcceptPolicy | None,
        on_result: ResultCallback | None,
    ) -> None:
        if outcome.error is not None:
            batch.failures += 1
            logger.debug("probe dropped [%s]: %s", outcome.error.category.value, outcome.error)
            return
        result = outcome.result
        if accept is not None and not accept(result):
            batch.filtered += 1
            return
        batch.results.append(result)
        if on_result is not None:
            on_result(result)
