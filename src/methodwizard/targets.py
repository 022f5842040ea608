# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Target list loading."""

from __future__ import annotations

import os

from .errors import FileReadError


def split_targets(content: str) -> list[str]:
    """
    Split raw file content into one target per line.

    Blank lines, including the empty entry after a final newline, are kept:
    they fail at probe time instead of being filtered here.
    """
    return [line[:-1] if line.endswith("\r") else line for line in content.split("\n")]


def load_targets(path: str | os.PathLike[str]) -> list[str]:
    try:
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(str(exc)) from exc
    return split_targets(content)


__all__ = ["load_targets", "split_targets"]
