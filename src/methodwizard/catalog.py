# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Catalog of HTTP methods probed against every target."""

HTTP_METHODS: tuple[str, ...] = (
    # RFC 9110 / RFC 5789
    "GET",
    "POST",
    "PUT",
    "DELETE",
    "PATCH",
    "OPTIONS",
    "HEAD",
    "TRACE",
    "CONNECT",
    # WebDAV and DeltaV
    "PROPFIND",
    "PROPPATCH",
    "MKCOL",
    "COPY",
    "MOVE",
    "LOCK",
    "UNLOCK",
    "CHECKOUT",
    "UNCHECKOUT",
    "MERGE",
    "REPORT",
    "SEARCH",
    # cache purge, SSDP and GENA extensions
    "PURGE",
    "M-SEARCH",
    "NOTIFY",
    "SUBSCRIBE",
    "UNSUBSCRIBE",
)


def is_known_method(name: str) -> bool:
    return name in HTTP_METHODS


__all__ = ["HTTP_METHODS", "is_known_method"]
