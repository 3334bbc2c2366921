"""Flatten a parsed locale document into dotted key paths."""

from __future__ import annotations

from typing import Any

import yaml

from ..exceptions import YAMLParseError
from .resolver import is_locale_header


def _walk(node: Any, prefix: list[str], out: set[str]) -> None:
    if isinstance(node, dict):
        for key, value in node.items():
            _walk(value, [*prefix, str(key)], out)
        return
    if prefix:
        out.add(".".join(prefix))


def flatten_locale_keys(content: str) -> set[str]:
    """Return every leaf key path in *content*.

    A single locale root key (``en:``, ``en-US:``) is treated as the locale and left
    out of the paths, matching :func:`~i18nupdate.keys.resolver.resolve_key_paths`.

    Raises :class:`YAMLParseError` if *content* is not valid YAML.
    """
    try:
        data = yaml.safe_load(content) if content.strip() else {}
    except yaml.YAMLError as exc:
        raise YAMLParseError(f"Invalid YAML: {exc}") from exc

    if not isinstance(data, dict):
        return set()

    if len(data) == 1:
        (root,) = data
        if isinstance(root, str) and is_locale_header(f"{root}:"):
            data = data[root]

    keys: set[str] = set()
    _walk(data, [], keys)
    return keys
