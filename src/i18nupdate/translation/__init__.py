"""External translation pipeline."""

from .driver import TranslationDriver
from .runner import CommandRunner, SubprocessRunner

__all__ = [
    "CommandRunner",
    "SubprocessRunner",
    "TranslationDriver",
]
