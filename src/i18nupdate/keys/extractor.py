"""Map the changed lines of the base locale file to dotted key paths."""

from __future__ import annotations

import logging
from typing import Protocol

from ..exceptions import GitError, YAMLParseError
from ..git.diff import parse_diff_lines
from ..git.repository import LocaleRepository
from ..models.diff import LocaleDiff
from ..models.options import DiffSource, UpdateOptions
from .resolver import (
    find_irregular_indentation,
    is_key_line,
    is_parent_key_line,
    resolve_key_paths,
)
from .tree import flatten_locale_keys

logger = logging.getLogger(__name__)


class LocaleSource(Protocol):
    def compare(self, source: DiffSource) -> LocaleDiff: ...


class DiffKeyExtractor:
    """Find the key paths whose lines changed for the configured diff source."""

    def __init__(self, options: UpdateOptions, repository: LocaleSource | None = None) -> None:
        self.options = options
        self.repository = repository or LocaleRepository(options.base_locale_file)

    def _load_diff(self) -> LocaleDiff:
        try:
            return self.repository.compare(self.options.diff_source)
        except GitError as exc:
            logger.warning("Could not diff %s: %s", self.options.base_locale_file, exc)
            return LocaleDiff()

    def _warn_irregular_indentation(self, label: str, lines: list[str]) -> None:
        irregular = find_irregular_indentation(lines)
        if irregular:
            logger.warning(
                "%s snapshot of %s is not indented in two-space steps (lines %s); "
                "resolved keys may be wrong",
                label,
                self.options.base_locale_file,
                ", ".join(str(n) for n in irregular),
            )

    def _warn_unknown_keys(self, keys: list[str], content: str) -> None:
        try:
            known = flatten_locale_keys(content)
        except YAMLParseError as exc:
            logger.warning("Could not cross-check keys: %s", exc)
            return
        for key in keys:
            if key not in known:
                logger.warning("Resolved key %s is not a leaf of the parsed locale file", key)

    def extract(self) -> list[str]:
        """Return the ordered, duplicate-free list of changed key paths.

        Keys that resolve against the new snapshot come first.  Removed lines
        are also resolved against the old snapshot; keys found only there
        (deleted keys) are appended after them.
        """
        diff = self._load_diff()
        changed = [
            line
            for line in parse_diff_lines(diff.patch)
            if is_key_line(line.content) and not is_parent_key_line(line.content)
        ]
        if not changed:
            return []

        old_lines, new_lines = diff.old_lines, diff.new_lines
        self._warn_irregular_indentation("Current", new_lines)
        if any(line.kind == "removed" for line in changed):
            self._warn_irregular_indentation("Previous", old_lines)

        current: list[str] = []
        removed_only: list[str] = []
        for line in changed:
            paths = resolve_key_paths(new_lines, line.content)
            for path in paths:
                if path not in current:
                    current.append(path)
                if path in removed_only:
                    removed_only.remove(path)

            if line.kind == "removed":
                for path in resolve_key_paths(old_lines, line.content):
                    if path not in paths:
                        paths.append(path)
                    if path not in current and path not in removed_only:
                        removed_only.append(path)

            if len(paths) > 1:
                logger.warning(
                    "Changed line %r matches %d keys (%s); all will be retranslated",
                    line.content,
                    len(paths),
                    ", ".join(paths),
                )

        self._warn_unknown_keys(current, diff.new)
        if removed_only:
            logger.info("Keys only present before the change: %s", ", ".join(removed_only))

        keys = current + removed_only
        logger.info("Found %d changed key(s)", len(keys))
        return keys
