"""Drive ``i18n-tasks`` to drop and regenerate translations."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..models.commands import CommandResult
from ..models.options import UpdateOptions
from .runner import CommandRunner, SubprocessRunner

logger = logging.getLogger(__name__)


class TranslationDriver:
    """Remove keys from every locale, then translate what is missing.

    Both steps change locale files on disk outside this tool's control and
    are not transactional.  Failures are logged and never raised.
    """

    def __init__(self, options: UpdateOptions, runner: CommandRunner | None = None) -> None:
        self.command = list(options.i18n_tasks_command)
        self.runner = runner or SubprocessRunner()

    def remove_keys(self, keys: Iterable[str]) -> list[str]:
        """Remove each key from all locale files.  Returns the keys that failed."""
        logger.info("Removing keys from all locale files so we can retranslate")
        failed: list[str] = []
        for key in keys:
            logger.info("  Removing key: %s", key)
            result = self.runner.run([*self.command, "rm", key])
            if not result.success:
                logger.warning(
                    "Failed to remove %s (exit status %d): %s",
                    key,
                    result.returncode,
                    result.stderr.strip(),
                )
                failed.append(key)
        return failed

    def translate_missing(self) -> CommandResult:
        """Fill every non-base locale from the base locale."""
        logger.info("Translating the updated locale keys")
        result = self.runner.run([*self.command, "translate-missing"])
        if not result.success:
            logger.warning(
                "translate-missing failed (exit status %d): %s",
                result.returncode,
                result.stderr.strip(),
            )
        return result
