# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response models shared across clients."""

from __future__ import annotations

from dataclasses import dataclass, field

Headers = dict[str, str]

STAGE_BUILD = "build"
STAGE_SEND = "send"


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes = b""
    timeout: float | None = None
    allow_redirects: bool | None = None


@dataclass
class HttpResponse:
    """
    Normalized HTTP response.

    Only the status line and the body length are kept; the body itself is
    drained and discarded by the client. When ``ok`` is False the request
    never produced a response and ``error_stage`` tells whether it failed
    while being built or while on the wire.
    """

    ok: bool
    status_code: int | None = None
    body_length: int = 0
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    error_stage: str | None = None
    exception: BaseException | None = field(default=None, repr=False, compare=False)

    @classmethod
    def failure(cls, exc: BaseException, *, stage: str) -> HttpResponse:
        return cls(
            ok=False,
            error_message=str(exc),
            error_type=type(exc).__name__,
            error_stage=stage,
            exception=exc,
        )
