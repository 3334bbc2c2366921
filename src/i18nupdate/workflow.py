"""Sequence extraction, confirmation, backup and retranslation.

The base locale file is backed up before any destructive step.  ``i18n-tasks
rm`` also strips keys from the base file, so the backup is copied back
before ``translate-missing`` runs; this reinstates the edited values (and any
other unstaged edits) that the other locales are regenerated from.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.console import Console

from .files.backup import BackupManager
from .keys.extractor import DiffKeyExtractor
from .models.options import UpdateOptions
from .models.workflow import RetranslationResult, WorkflowState
from .translation.driver import TranslationDriver

logger = logging.getLogger(__name__)

ACCEPTED_ANSWERS = frozenset({"y", "yes"})

# States in which a backup taken by this run may be on disk.
_BACKUP_STATES = frozenset(
    {
        WorkflowState.BACKED_UP,
        WorkflowState.KEYS_REMOVED,
        WorkflowState.RESTORED,
        WorkflowState.TRANSLATED,
    }
)


def prompt_confirmation(console: Console, message: str) -> bool:
    """Ask *message* on the console; only ``y``/``yes`` proceeds."""
    try:
        answer = console.input(message + " ", markup=False)
    except EOFError:
        return False
    return answer.rstrip("\r\n").lower() in ACCEPTED_ANSWERS


class RetranslationWorkflow:
    """One retranslation run over the base locale file."""

    def __init__(
        self,
        options: UpdateOptions,
        *,
        extractor: DiffKeyExtractor | None = None,
        backups: BackupManager | None = None,
        driver: TranslationDriver | None = None,
        confirm: Callable[[str], bool] | None = None,
        console: Console | None = None,
    ) -> None:
        self.options = options
        self.console = console or Console()
        self.extractor = extractor or DiffKeyExtractor(options)
        self.backups = backups or BackupManager(options.base_locale_file)
        self.driver = driver or TranslationDriver(options)
        self.confirm = confirm or (lambda message: prompt_confirmation(self.console, message))
        self.state = WorkflowState.IDLE

    def _advance(self, state: WorkflowState) -> None:
        logger.debug("State %s -> %s", self.state.value, state.value)
        self.state = state

    def _finish(self, state: WorkflowState, **fields: object) -> RetranslationResult:
        self._advance(state)
        return RetranslationResult(state=state, **fields)

    def _recover(self) -> None:
        if self.state not in _BACKUP_STATES or not self.backups.exists():
            return
        logger.info("Attempting to restore backup...")
        try:
            self.backups.restore()
        except Exception as exc:
            logger.error("Failed to restore backup %s: %s", self.backups.backup_path, exc)
            return
        logger.info("Backup restored due to error")

    def _print_keys(self, keys: list[str]) -> None:
        for key in keys:
            self.console.print(f"  - {key}", markup=False, highlight=False)

    def _run_steps(self) -> RetranslationResult:
        base_file = self.options.base_locale_file

        keys = self.extractor.extract()
        self._advance(WorkflowState.DIFF_EXTRACTED)
        if not keys:
            self.console.print(f"\nNo changes detected in {base_file}. Exiting.", markup=False)
            return self._finish(WorkflowState.ABORTED)

        self.console.print("\n=== Locale keys to update ===", markup=False)
        self._print_keys(keys)

        if not self.options.auto_confirm and not self.confirm("\nContinue? [y/N]"):
            self.console.print("Aborted.")
            return self._finish(WorkflowState.ABORTED, keys=keys)
        self._advance(WorkflowState.CONFIRMED)

        self.backups.backup()
        self._advance(WorkflowState.BACKED_UP)

        failed = self.driver.remove_keys(keys)
        self._advance(WorkflowState.KEYS_REMOVED)

        self.backups.restore()
        self._advance(WorkflowState.RESTORED)

        self.driver.translate_missing()
        self._advance(WorkflowState.TRANSLATED)

        self.backups.cleanup()

        self.console.print("\n=== Translation complete! ===", markup=False)
        if self.options.verbose:
            self.console.print("The following keys have been updated:")
            self._print_keys(keys)

        return self._finish(WorkflowState.CLEANED_UP, keys=keys, failed_removals=failed)

    def run(self) -> RetranslationResult:
        """Run every step.

        Exit code 0 covers success, no changes, and a declined prompt.  Any
        error restores the backup taken by this run and yields exit code 1.
        Interrupts such as ``KeyboardInterrupt`` also restore the backup, then
        propagate.
        """
        try:
            return self._run_steps()
        except Exception as exc:
            self.console.print(f"\nError: {exc}", markup=False)
            self.console.print_exception()
            logger.error("Retranslation failed in state %s: %s", self.state.value, exc)
            self._recover()
            return self._finish(WorkflowState.FAILED, exit_code=1, error=str(exc))
        except BaseException:
            logger.error("Retranslation interrupted in state %s", self.state.value)
            self._recover()
            self._advance(WorkflowState.FAILED)
            raise
