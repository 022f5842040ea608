# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from .executor import ProbeExecutor, probe

__all__ = ["ProbeExecutor", "probe"]
