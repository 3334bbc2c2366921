"""i18nupdate — retranslate only the locale keys that changed."""

from ._version import __version__
from .exceptions import (
    CommandError,
    FileError,
    GitError,
    I18nUpdateError,
    YAMLParseError,
)
from .files import BackupManager
from .git import LocaleRepository, parse_diff_lines
from .keys import DiffKeyExtractor, flatten_locale_keys, resolve_key_paths
from .models import (
    CommandResult,
    DiffLine,
    DiffSource,
    LocaleDiff,
    RetranslationResult,
    UpdateOptions,
    WorkflowState,
)
from .translation import CommandRunner, SubprocessRunner, TranslationDriver
from .workflow import RetranslationWorkflow

__all__ = [
    "BackupManager",
    "CommandError",
    "CommandResult",
    "CommandRunner",
    "DiffKeyExtractor",
    "DiffLine",
    "DiffSource",
    "FileError",
    "GitError",
    "I18nUpdateError",
    "LocaleDiff",
    "LocaleRepository",
    "RetranslationResult",
    "RetranslationWorkflow",
    "SubprocessRunner",
    "TranslationDriver",
    "UpdateOptions",
    "WorkflowState",
    "YAMLParseError",
    "__version__",
    "flatten_locale_keys",
    "parse_diff_lines",
    "resolve_key_paths",
]
