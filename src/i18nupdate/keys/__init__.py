"""Key-path resolution and changed-key extraction."""

from .extractor import DiffKeyExtractor, LocaleSource
from .resolver import (
    find_irregular_indentation,
    is_key_line,
    is_locale_header,
    is_parent_key_line,
    is_root_locale_line,
    resolve_key_paths,
)
from .tree import flatten_locale_keys

__all__ = [
    "DiffKeyExtractor",
    "LocaleSource",
    "find_irregular_indentation",
    "flatten_locale_keys",
    "is_key_line",
    "is_locale_header",
    "is_parent_key_line",
    "is_root_locale_line",
    "resolve_key_paths",
]
