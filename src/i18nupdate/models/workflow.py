"""Workflow state models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class WorkflowState(str, Enum):
    """Stages of a retranslation run."""

    IDLE = "idle"
    DIFF_EXTRACTED = "diff_extracted"
    CONFIRMED = "confirmed"
    BACKED_UP = "backed_up"
    KEYS_REMOVED = "keys_removed"
    RESTORED = "restored"
    TRANSLATED = "translated"
    CLEANED_UP = "cleaned_up"
    ABORTED = "aborted"
    FAILED = "failed"


class RetranslationResult(BaseModel):
    """Final outcome of :class:`~i18nupdate.workflow.RetranslationWorkflow`."""

    state: WorkflowState
    exit_code: int = 0
    keys: list[str] = Field(default_factory=list)
    failed_removals: list[str] = Field(default_factory=list)
    error: str | None = None
