# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process HttpClient implementations."""

from __future__ import annotations

import threading
from collections.abc import Callable

from .client import HttpClient
from .models import STAGE_SEND, HttpRequest, HttpResponse

Responder = Callable[[HttpRequest], HttpResponse]


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests.

    Responses are looked up by ``(method, url)`` first, then by ``url``, then
    handed to ``default`` when one is configured. Anything else is reported
    as a transport failure. Safe to call from probe threads.
    """

    def __init__(
        self,
        responses: dict[str | tuple[str, str], HttpResponse] | None = None,
        default: Responder | None = None,
    ):
        self._responses = dict(responses or {})
        self._default = default
        self._lock = threading.Lock()
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse, *, method: str | None = None) -> None:
        key: str | tuple[str, str] = (method, url) if method else url
        self._responses[key] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        with self._lock:
            self.requests.append(request)
        keyed = self._responses.get((request.method, request.url))
        if keyed is not None:
            return keyed
        if request.url in self._responses:
            return self._responses[request.url]
        if self._default is not None:
            return self._default(request)
        return HttpResponse.failure(ConnectionError(f"no stubbed response for {request.url!r}"), stage=STAGE_SEND)

    def close(self) -> None:
        self.closed = True
