"""Pydantic models for i18nupdate."""

from .commands import CommandResult
from .diff import DiffLine, LocaleDiff
from .options import DEFAULT_BASE_LOCALE, DEFAULT_I18N_TASKS_COMMAND, DiffSource, UpdateOptions
from .workflow import RetranslationResult, WorkflowState

__all__ = [
    "DEFAULT_BASE_LOCALE",
    "DEFAULT_I18N_TASKS_COMMAND",
    "CommandResult",
    "DiffLine",
    "DiffSource",
    "LocaleDiff",
    "RetranslationResult",
    "UpdateOptions",
    "WorkflowState",
]
