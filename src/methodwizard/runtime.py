# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level methodwizard facade for the probing modes."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from contextlib import suppress

from .config import HttpSettings, load_http_settings
from .http.client import HttpClient, create_default_http_client
from .models import ProbeBatch
from .probe.executor import ProbeExecutor
from .scan.coordinator import FanOutCoordinator
from .scan.modes import probe_single_target, probe_targets, probe_targets_all_methods


class MethodWizard:
    """
    Convenience wrapper that wires a shared HTTP client into the executor and coordinator.

    Every mode reuses the same connection pool; the client is closed when the
    wrapper is closed or leaves a ``with`` block.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        settings: HttpSettings | None = None,
        *,
        out: Callable[[str], None] = print,
    ):
        self.http_settings = settings or load_http_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)
        self.executor = ProbeExecutor(self.http_client)
        self.coordinator = FanOutCoordinator(self.executor, max_workers=self.http_settings.max_workers)
        self.out = out

    def single_target(self, url: str) -> ProbeBatch:
        return probe_single_target(self.coordinator, url, out=self.out)

    def multi_target(self, urls: Sequence[str], method: str = "GET") -> ProbeBatch:
        return probe_targets(self.coordinator, urls, method, out=self.out)

    def multi_target_all_methods(self, urls: Sequence[str]) -> ProbeBatch:
        return probe_targets_all_methods(self.coordinator, urls, out=self.out)

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> MethodWizard:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
