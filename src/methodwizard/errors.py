# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def categorize_exception(exc: BaseException | None) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.

    The exception chain is walked so wrapped ssl/socket errors raised below
    httpx are still recognised.
    """
    seen: set[int] = set()
    current = exc
    category = ErrorCategory.UNKNOWN_ERROR
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, (ssl_module.SSLError, ssl_module.CertificateError)):
            return ErrorCategory.SSL_ERROR
        if isinstance(current, (socket.gaierror, socket.herror)):
            return ErrorCategory.DNS_ERROR
        if category is ErrorCategory.UNKNOWN_ERROR:
            category = _categorize_single(current)
        current = current.__cause__ or current.__context__
    return category


def _categorize_single(exc: BaseException) -> ErrorCategory:
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT
    if isinstance(exc, (httpx.UnsupportedProtocol, httpx.InvalidURL, httpx.LocalProtocolError)):
        return ErrorCategory.INVALID_REQUEST
    if isinstance(exc, (httpx.RemoteProtocolError, httpx.DecodingError, httpx.TooManyRedirects)):
        return ErrorCategory.PROTOCOL_ERROR
    if isinstance(exc, (httpx.ConnectError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR
    if isinstance(exc, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR
    if isinstance(exc, (ValueError, TypeError)):
        return ErrorCategory.INVALID_REQUEST
    return ErrorCategory.UNKNOWN_ERROR


class MethodWizardError(Exception):
    """Base class for methodwizard errors."""


class ProbeError(MethodWizardError):
    """A single (url, method) probe produced no result."""

    def __init__(
        self,
        url: str,
        method: str,
        message: str | None = None,
        *,
        error_type: str | None = None,
        category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR,
    ):
        self.url = url
        self.method = method
        self.error_type = error_type
        self.category = category
        super().__init__(f"{method} {url!r}: {message or 'probe failed'}")


class RequestConstructionError(ProbeError):
    """The request could not be built (malformed method or URL)."""


class TransportError(ProbeError):
    """The request was built but failed on the wire (DNS, connect, TLS, timeout)."""


class FileReadError(MethodWizardError):
    """The target list could not be read."""


class ReportWriteError(MethodWizardError):
    """Serializing or persisting results failed."""


__all__ = [
    "ErrorCategory",
    "FileReadError",
    "MethodWizardError",
    "ProbeError",
    "ReportWriteError",
    "RequestConstructionError",
    "TransportError",
    "categorize_exception",
]
