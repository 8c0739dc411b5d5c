"""
BackupManager: timestamped sibling snapshots taken before destructive writes.
"""

import shutil
import time
from pathlib import Path

from scalpel.exceptions import BackupError
from scalpel.logging_config import logger
from scalpel.schemas import BackupRecord
from .config import BACKUP_SUFFIX


class BackupManager:
    """
    Copy a file to ``<path>.backup-<epoch millis>`` next to the original.

    Backups are append-only: an existing backup path is never reused, the
    timestamp is bumped until the name is free. Cleanup is left to the
    caller.
    """

    def backup_path_for(self, file_path: str, millis: int) -> str:
        return f"{file_path}{BACKUP_SUFFIX}{millis}"

    def create_backup(self, file_path: str) -> BackupRecord:
        """
        Snapshot the current on-disk content of a file.

        Args:
            file_path: Path to file to backup

        Returns:
            BackupRecord for the new snapshot

        Raises:
            BackupError: If the file is missing or cannot be copied
        """
        path = Path(file_path)
        if not path.is_file():
            raise BackupError(file_path, "file does not exist")

        millis = int(time.time() * 1000)
        backup_path = self.backup_path_for(file_path, millis)
        while Path(backup_path).exists():
            millis += 1
            backup_path = self.backup_path_for(file_path, millis)

        try:
            shutil.copy2(str(path), backup_path)
        except OSError as e:
            raise BackupError(file_path, str(e)) from e

        logger.debug(f"Created backup: {backup_path}")
        return BackupRecord(
            original_path=file_path,
            backup_path=backup_path,
            created_at=millis / 1000,
        )

    def restore(self, record: BackupRecord) -> None:
        """
        Copy a backup over its original file.

        Raises:
            BackupError: If the backup cannot be copied back
        """
        try:
            shutil.copy2(record.backup_path, record.original_path)
        except OSError as e:
            raise BackupError(record.original_path, f"restore failed: {e}") from e
        logger.info(f"Restored {record.original_path} from backup")

    def record_for(self, backup_path: str) -> BackupRecord:
        """
        Rebuild the BackupRecord of an existing backup from its file name.

        Raises:
            BackupError: If the name does not carry a backup timestamp
        """
        original, sep, stamp = backup_path.rpartition(BACKUP_SUFFIX)
        if not sep or not original or not stamp.isdigit():
            raise BackupError(backup_path, "not a backup file name")
        if not Path(backup_path).is_file():
            raise BackupError(backup_path, "backup file does not exist")
        return BackupRecord(
            original_path=original,
            backup_path=backup_path,
            created_at=int(stamp) / 1000,
        )
