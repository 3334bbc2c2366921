"""Locale file revisions with dulwich (no git binary required)."""

from .diff import parse_diff_lines
from .repository import LocaleRepository, render_patch

__all__ = [
    "LocaleRepository",
    "parse_diff_lines",
    "render_patch",
]
