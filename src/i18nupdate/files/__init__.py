"""File helpers."""

from .backup import BackupManager

__all__ = ["BackupManager"]
