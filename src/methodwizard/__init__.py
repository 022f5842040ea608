# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
methodwizard package entrypoint.

Concurrent HTTP method enumeration: every (target, method) pair is probed in
parallel and the status code and body length of each response are reported.
HTTP behavior is abstracted behind an injectable client interface, and domain
objects are modeled with typed dataclasses.
"""

from .catalog import HTTP_METHODS
from .config import HttpSettings, load_http_settings
from .errors import (
    ErrorCategory,
    FileReadError,
    ProbeError,
    ReportWriteError,
    RequestConstructionError,
    TransportError,
)
from .http import HttpClient, HttpRequest, HttpResponse, HttpxClient, StubHttpClient, create_default_http_client
from .log import setup_logging
from .models import ProbeBatch, ProbeOutcome, ProbeResult, WorkItem
from .probe import ProbeExecutor, probe
from .runtime import MethodWizard
from .scan import FanOutCoordinator, write_results
from .targets import load_targets
from .version import __version__

__all__ = [
    "ErrorCategory",
    "FanOutCoordinator",
    "FileReadError",
    "HTTP_METHODS",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "MethodWizard",
    "ProbeBatch",
    "ProbeError",
    "ProbeExecutor",
    "ProbeOutcome",
    "ProbeResult",
    "ReportWriteError",
    "RequestConstructionError",
    "StubHttpClient",
    "TransportError",
    "WorkItem",
    "__version__",
    "create_default_http_client",
    "load_http_settings",
    "load_targets",
    "probe",
    "setup_logging",
    "write_results",
]
