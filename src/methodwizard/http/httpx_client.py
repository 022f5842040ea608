# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging

import httpx

from ..config import HttpSettings, load_http_settings
from .client import HttpClient
from .models import STAGE_BUILD, STAGE_SEND, HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


def _build_limits(settings: HttpSettings) -> httpx.Limits:
    # connection cap tracks the fan-out cap; None means unlimited
    return httpx.Limits(max_connections=settings.max_workers, max_keepalive_connections=20)


class HttpxClient(HttpClient):
    """Synchronous, connection-pooled httpx client wrapper shared across probe threads."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=httpx.Timeout(self.settings.timeout),
            verify=self.settings.verify_ssl,
            limits=_build_limits(self.settings),
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)

        try:
            built = self._client.build_request(
                request.method,
                request.url,
                headers=headers,
                content=request.body,
                timeout=httpx.Timeout(request.timeout) if request.timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )
            # httpx upper-cases the method; the token goes on the wire as given
            built.method = request.method
        except Exception as exc:  # noqa: BLE001
            return HttpResponse.failure(exc, stage=STAGE_BUILD)

        follow = self.settings.allow_redirects if request.allow_redirects is None else request.allow_redirects
        try:
            resp = self._client.send(built, stream=True, follow_redirects=follow)
        except Exception as exc:  # noqa: BLE001
            return HttpResponse.failure(exc, stage=STAGE_SEND)

        body_length = 0
        try:
            for chunk in resp.iter_bytes():
                body_length += len(chunk)
        except httpx.HTTPError as exc:
            # status already received: keep it with the bytes read so far
            logger.debug("body read for %s %s stopped after %d bytes: %s", request.method, request.url, body_length, exc)
        finally:
            resp.close()

        return HttpResponse(
            ok=True,
            status_code=resp.status_code,
            body_length=body_length,
            url=str(resp.url),
        )

    def close(self) -> None:
        self._client.close()
