"""
Unit tests for BackupManager snapshots.
"""

import re
from pathlib import Path

import pytest

from scalpel.editing import BackupManager
from scalpel.exceptions import BackupError


class TestBackupManager:

    def test_backup_is_timestamped_sibling(self, temp_dir):
        target = temp_dir / "notes.txt"
        target.write_text("original")

        record = BackupManager().create_backup(str(target))

        assert re.fullmatch(re.escape(str(target)) + r"\.backup-\d+", record.backup_path)
        assert Path(record.backup_path).read_text() == "original"
        assert record.original_path == str(target)
        assert record.created_at > 0

    def test_backups_are_never_overwritten(self, temp_dir):
        target = temp_dir / "notes.txt"
        target.write_text("v1")
        manager = BackupManager()

        first = manager.create_backup(str(target))
        target.write_text("v2")
        second = manager.create_backup(str(target))

        assert first.backup_path != second.backup_path
        assert Path(first.backup_path).read_text() == "v1"
        assert Path(second.backup_path).read_text() == "v2"

    def test_missing_file_raises(self, temp_dir):
        with pytest.raises(BackupError):
            BackupManager().create_backup(str(temp_dir / "missing.txt"))

    def test_restore(self, temp_dir):
        target = temp_dir / "notes.txt"
        target.write_text("keep me")
        manager = BackupManager()
        record = manager.create_backup(str(target))

        target.write_text("oops")
        manager.restore(manager.record_for(record.backup_path))

        assert target.read_text() == "keep me"

    def test_record_for_rejects_other_names(self, temp_dir):
        other = temp_dir / "plain.txt"
        other.write_text("x")
        with pytest.raises(BackupError):
            BackupManager().record_for(str(other))
