"""Unified diff parsing."""

from __future__ import annotations

import re

from ..models.diff import DiffLine

_WORD_RE = re.compile(r"\w")


def parse_diff_lines(text: str) -> list[DiffLine]:
    """Return the added and removed lines of a unified diff.

    File headers (``+++``/``---``) and lines with no word character after the
    marker are skipped.
    """
    changed: list[DiffLine] = []
    for line in text.splitlines():
        if line.startswith(("+++", "---")):
            continue
        if line.startswith("+"):
            kind = "added"
        elif line.startswith("-"):
            kind = "removed"
        else:
            continue

        body = line[1:]
        if not _WORD_RE.search(body):
            continue
        changed.append(DiffLine(kind=kind, text=body))
    return changed
