# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client abstraction used by the probe executor."""

from ..config import DEFAULT_USER_AGENT
from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .httpx_client import HttpxClient
from .models import STAGE_BUILD, STAGE_SEND, Headers, HttpRequest, HttpResponse

__all__ = [
    "DEFAULT_USER_AGENT",
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "STAGE_BUILD",
    "STAGE_SEND",
    "StubHttpClient",
    "create_default_http_client",
]
