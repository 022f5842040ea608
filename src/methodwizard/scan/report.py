# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Console and JSON rendering of probe results."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Sequence

from ..errors import ReportWriteError
from ..models import ProbeResult

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_FILE = "results.json"


def format_result_line(result: ProbeResult) -> str:
    return f"[{result.method}] {result.status} ({result.length} bytes)"


def serialize_results(results: Sequence[ProbeResult]) -> str:
    """JSON array of ``{url, method, status, length}`` objects in accumulation order."""
    return json.dumps([result.to_dict() for result in results], indent=2, ensure_ascii=False)


def write_results(
    results: Sequence[ProbeResult],
    destination: str | os.PathLike[str] = DEFAULT_OUTPUT_FILE,
    *,
    out: Callable[[str], None] = print,
) -> bool:
    """
    Persist ``results`` to ``destination``, overwriting it.

    Failures are logged and reported through the return value; they never
    propagate to the caller.
    """
    try:
        payload = serialize_results(results)
        with open(destination, "w", encoding="utf-8") as handle:
            handle.write(payload)
    except (OSError, TypeError, ValueError) as exc:
        error = ReportWriteError(f"could not write results to {os.fspath(destination)}: {exc}")
        logger.error("%s", error)
        return False
    out(f"[+] Results saved to {os.fspath(destination)}")
    return True
