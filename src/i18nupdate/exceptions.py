"""Exception hierarchy for i18nupdate."""


class I18nUpdateError(Exception):
    """Base exception for all i18nupdate errors."""


class GitError(I18nUpdateError):
    """Error while reading a revision of the locale file."""


class FileError(I18nUpdateError):
    """Error during a file operation."""


class YAMLParseError(FileError):
    """Failed to parse a YAML locale file."""


class CommandError(I18nUpdateError):
    """An external command could not be run."""
