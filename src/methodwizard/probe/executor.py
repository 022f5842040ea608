# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single (url, method) probe."""

from __future__ import annotations

import re

from ..errors import ErrorCategory, ProbeError, RequestConstructionError, TransportError, categorize_exception
from ..http.client import HttpClient, create_default_http_client
from ..http.models import STAGE_BUILD, HttpRequest, HttpResponse
from ..models import ProbeResult

# RFC 9110 token characters
_METHOD_TOKEN_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


class ProbeExecutor:
    """Issues one request per call and reduces the response to a ProbeResult."""

    def __init__(self, http_client: HttpClient):
        self.http_client = http_client

    def probe(self, url: str, method: str) -> ProbeResult:
        """
        Send ``method`` to ``url`` with an empty body.

        Raises RequestConstructionError when the request cannot be built and
        TransportError when it fails on the wire. Never returns a partial result.
        """
        if not method or not _METHOD_TOKEN_RE.fullmatch(method):
            raise RequestConstructionError(
                url,
                method,
                f"invalid method token {method!r}",
                error_type="ValueError",
                category=ErrorCategory.INVALID_REQUEST,
            )

        response = self.http_client.request(HttpRequest(url=url, method=method, body=b""))
        if not response.ok or response.status_code is None:
            raise _probe_error(url, method, response)

        return ProbeResult(url=url, method=method, status=response.status_code, length=max(0, response.body_length))


def _probe_error(url: str, method: str, response: HttpResponse) -> ProbeError:
    error_cls = RequestConstructionError if response.error_stage == STAGE_BUILD else TransportError
    error = error_cls(
        url,
        method,
        response.error_message or "no response",
        error_type=response.error_type,
        category=categorize_exception(response.exception),
    )
    error.__cause__ = response.exception
    return error


def probe(url: str, method: str, *, http_client: HttpClient | None = None) -> ProbeResult:
    """One-shot probe; creates and closes a default client when none is given."""
    if http_client is not None:
        return ProbeExecutor(http_client).probe(url, method)
    client = create_default_http_client()
    try:
        return ProbeExecutor(client).probe(url, method)
    finally:
        client.close()
