"""Run configuration, built once from the command line."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_LOCALE = Path("config/locales/en.yml")
DEFAULT_I18N_TASKS_COMMAND = ("bundle", "exec", "i18n-tasks")


class DiffSource(str, Enum):
    """Which pair of revisions of the base locale file is compared."""

    WORKING_TREE = "working-tree"
    """Working copy against HEAD (staged and unstaged edits)."""

    STAGED = "staged"
    """Index against HEAD."""

    LAST_COMMIT = "last-commit"
    """HEAD against its first parent."""


class UpdateOptions(BaseModel):
    """Immutable options threaded through every component."""

    model_config = ConfigDict(frozen=True)

    base_locale_file: Path = DEFAULT_BASE_LOCALE
    diff_source: DiffSource = DiffSource.WORKING_TREE
    auto_confirm: bool = False
    verbose: bool = False
    i18n_tasks_command: tuple[str, ...] = Field(
        default=DEFAULT_I18N_TASKS_COMMAND, min_length=1
    )
