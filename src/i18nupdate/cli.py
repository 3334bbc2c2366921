"""Command line entry point: ``i18n-update``."""

from __future__ import annotations

import argparse
import logging
import shlex
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from ._version import __version__
from .models.options import (
    DEFAULT_BASE_LOCALE,
    DEFAULT_I18N_TASKS_COMMAND,
    DiffSource,
    UpdateOptions,
)
from .workflow import RetranslationWorkflow

EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i18n-update",
        description="Retranslate only the locale keys that changed in the base locale file.",
    )
    parser.add_argument(
        "-b",
        "--base-locale",
        type=Path,
        default=DEFAULT_BASE_LOCALE,
        metavar="PATH",
        help=f"Use a different base locale (default: {DEFAULT_BASE_LOCALE})",
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-s",
        "--staged",
        dest="diff_source",
        action="store_const",
        const=DiffSource.STAGED,
        help="Translate staged changes (index vs HEAD)",
    )
    source.add_argument(
        "-u",
        "--unstaged",
        dest="diff_source",
        action="store_const",
        const=DiffSource.WORKING_TREE,
        help="Translate working tree changes (working copy vs HEAD, the default)",
    )
    source.add_argument(
        "-c",
        "--last-commit",
        dest="diff_source",
        action="store_const",
        const=DiffSource.LAST_COMMIT,
        help="Translate changes made by the last commit",
    )
    source.add_argument(
        "--source",
        dest="diff_source",
        type=DiffSource,
        choices=list(DiffSource),
        metavar="{" + ",".join(s.value for s in DiffSource) + "}",
        help="Diff source by name",
    )

    parser.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose mode")
    parser.add_argument(
        "--i18n-tasks",
        default=" ".join(DEFAULT_I18N_TASKS_COMMAND),
        metavar="CMD",
        help="Command used to run i18n-tasks (default: %(default)s)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.set_defaults(diff_source=DiffSource.WORKING_TREE)
    return parser


def parse_options(argv: Sequence[str] | None = None) -> UpdateOptions:
    """Parse *argv* into an immutable :class:`UpdateOptions`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    command = tuple(shlex.split(args.i18n_tasks))
    if not command:
        parser.error("--i18n-tasks must not be empty")
    return UpdateOptions(
        base_locale_file=args.base_locale,
        diff_source=args.diff_source,
        auto_confirm=args.yes,
        verbose=args.verbose,
        i18n_tasks_command=command,
    )


def configure_logging(verbose: bool, console: Console | None = None) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
        force=True,
    )


def main(argv: Sequence[str] | None = None) -> int:
    options = parse_options(argv)
    console = Console()
    configure_logging(options.verbose, Console(stderr=True))
    try:
        result = RetranslationWorkflow(options, console=console).run()
    except KeyboardInterrupt:
        console.print("\nInterrupted.")
        return EXIT_INTERRUPTED
    return result.exit_code
