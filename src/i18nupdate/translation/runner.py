"""Run external commands as argv lists."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from ..exceptions import CommandError
from ..models.commands import CommandResult

logger = logging.getLogger(__name__)

COMMAND_NOT_FOUND = 127


class CommandRunner(Protocol):
    def run(self, argv: Sequence[str]) -> CommandResult: ...


class SubprocessRunner:
    """Run commands with :func:`subprocess.run`, capturing text output.

    There is no timeout: a hanging command blocks the run.
    """

    def __init__(self, cwd: Path | None = None) -> None:
        self.cwd = cwd

    def run(self, argv: Sequence[str]) -> CommandResult:
        args = list(argv)
        logger.info("Running: %s", " ".join(args))
        try:
            completed = subprocess.run(
                args,
                cwd=str(self.cwd) if self.cwd is not None else None,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            logger.warning("Command not found: %s", args[0])
            return CommandResult(argv=args, returncode=COMMAND_NOT_FOUND, stderr=str(exc))
        except OSError as exc:
            raise CommandError(f"Failed to run {args[0]}: {exc}") from exc

        if completed.returncode != 0:
            logger.info("Command failed with status %d", completed.returncode)
        return CommandResult(
            argv=args,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
