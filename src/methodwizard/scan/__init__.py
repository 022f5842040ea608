# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fan-out orchestration, probing modes and reporting."""

from .coordinator import FanOutCoordinator
from .modes import (
    METHOD_NOT_ALLOWED,
    build_work_items,
    is_reportable,
    probe_single_target,
    probe_targets,
    probe_targets_all_methods,
)
from .report import DEFAULT_OUTPUT_FILE, format_result_line, serialize_results, write_results

__all__ = [
    "DEFAULT_OUTPUT_FILE",
    "FanOutCoordinator",
    "METHOD_NOT_ALLOWED",
    "build_work_items",
    "format_result_line",
    "is_reportable",
    "probe_single_target",
    "probe_targets",
    "probe_targets_all_methods",
    "serialize_results",
    "write_results",
]
