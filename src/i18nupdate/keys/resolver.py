"""Resolve dotted key paths from the raw text of an indented locale file.

The resolver never parses YAML.  It walks the lines top to bottom keeping a
stack of enclosing keys and assumes two-space indentation throughout; use
:func:`find_irregular_indentation` to report files that break that
assumption.

Lines are matched by trimmed text only, so two keys at different paths that
share the exact same ``key: value`` text both match.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

ROOT_LOCALE_RE = re.compile(r"^[a-z]{2}:\s*$")
KEY_LINE_RE = re.compile(r"^(\s*)([a-z_][a-z0-9_]*):(.*)$", re.IGNORECASE)
# A column-0 mapping key with no value that is not an identifier, e.g. ``en-US:``.
LOCALE_HEADER_RE = re.compile(r"^[^\s#:\-][^:]*:\s*$")

INDENT_WIDTH = 2
BLOCK_SCALAR_MARKERS = ("|", ">")


def is_root_locale_line(line: str) -> bool:
    """Return ``True`` for a bare two-letter locale root such as ``en:``."""
    return ROOT_LOCALE_RE.match(line) is not None


def is_locale_header(line: str) -> bool:
    """Return ``True`` for the line opening a locale document (``en:``, ``en-US:``).

    Identifier-like roots such as ``pt_BR:`` are ordinary keys unless they are
    two letters long.
    """
    line = line.rstrip("\r\n")
    if is_root_locale_line(line):
        return True
    return LOCALE_HEADER_RE.match(line) is not None and KEY_LINE_RE.match(line) is None


def is_key_line(line: str) -> bool:
    """Return ``True`` if *line* looks like ``key: value`` (any indentation)."""
    return KEY_LINE_RE.match(line.rstrip("\r\n")) is not None


def has_children(value: str) -> bool:
    """A key opens a nested block when its inline value is empty or ``|``/``>``."""
    stripped = value.strip()
    return not stripped or stripped in BLOCK_SCALAR_MARKERS


def resolve_key_paths(file_lines: Iterable[str], target_line: str) -> list[str]:
    """Return every dotted key path whose line equals *target_line*.

    The result is ordered by position in the file and has no duplicates.
    An empty list means the line was not found.
    """
    target = target_line.strip()
    stack: list[str] = []
    depth_offset = 0
    matches: list[str] = []

    for raw in file_lines:
        line = raw.rstrip("\r\n")
        if is_locale_header(line):
            # Keys under the locale root start at depth zero.
            depth_offset = 1
            continue

        match = KEY_LINE_RE.match(line)
        if match is None:
            continue

        indent, key, value = match.groups()
        indent_level = len(indent) // INDENT_WIDTH
        del stack[max(indent_level - depth_offset, 0) :]

        if line.strip() == target:
            path = ".".join([*stack, key])
            if path not in matches:
                matches.append(path)

        if has_children(value):
            stack.append(key)

    return matches


def find_irregular_indentation(file_lines: Sequence[str]) -> list[int]:
    """Return 1-based numbers of key lines not indented in two-space steps."""
    irregular: list[int] = []
    for number, raw in enumerate(file_lines, start=1):
        match = KEY_LINE_RE.match(raw.rstrip("\r\n"))
        if match is None:
            continue
        indent = match.group(1)
        if "\t" in indent or len(indent) % INDENT_WIDTH:
            irregular.append(number)
    return irregular


def is_parent_key_line(line: str) -> bool:
    """Return ``True`` for ``key:`` with no inline value (a nested mapping)."""
    match = KEY_LINE_RE.match(line.rstrip("\r\n"))
    return match is not None and not match.group(3).strip()
