"""Backup and restore of the base locale file around destructive steps.

Backups live next to the file as ``<file>.old`` and only for the lifetime of
one run.  Copies are content-only ``shutil.copyfile`` copies and are not atomic; a
restore gives the base file a fresh modification time.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..exceptions import FileError

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".old"


class BackupManager:
    """Snapshot *path* to ``path + ".old"`` and copy it back."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.backup_path = path.with_name(path.name + BACKUP_SUFFIX)

    def exists(self) -> bool:
        return self.backup_path.exists()

    def backup(self) -> Path:
        """Copy the file to its backup location and return the backup path."""
        logger.info("Creating backup of unstaged changed locale values")
        try:
            shutil.copyfile(self.path, self.backup_path)
        except OSError as exc:
            raise FileError(f"Failed to back up {self.path}: {exc}") from exc
        logger.info("Created backup: %s", self.backup_path)
        return self.backup_path

    def restore(self) -> None:
        """Copy the backup over the file.

        Raises :class:`FileError` if there is no backup.
        """
        if not self.exists():
            raise FileError(f"No backup to restore: {self.backup_path}")
        logger.info("Restoring unstaged changes to base locale")
        try:
            shutil.copyfile(self.backup_path, self.path)
        except OSError as exc:
            raise FileError(f"Failed to restore {self.path}: {exc}") from exc
        logger.info("Restored %s from backup", self.path)

    def cleanup(self) -> bool:
        """Delete the backup if present.  Returns ``True`` if a file was removed."""
        if not self.exists():
            return False
        try:
            self.backup_path.unlink()
        except OSError as exc:
            raise FileError(f"Failed to delete {self.backup_path}: {exc}") from exc
        logger.info("Deleted %s", self.backup_path)
        return True
