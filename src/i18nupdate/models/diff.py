"""Diff-related models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class DiffLine(BaseModel):
    """One changed line of a unified diff, without its ``+``/``-`` marker."""

    kind: Literal["added", "removed"]
    text: str

    @property
    def content(self) -> str:
        return self.text.strip()


class LocaleDiff(BaseModel):
    """Two snapshots of the base locale file and the patch between them."""

    old: str = ""
    new: str = ""
    patch: str = ""

    @property
    def old_lines(self) -> list[str]:
        return self.old.splitlines()

    @property
    def new_lines(self) -> list[str]:
        return self.new.splitlines()
