"""External command models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CommandResult(BaseModel):
    """Outcome of one external command invocation."""

    argv: list[str] = Field(default_factory=list)
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0
