"""
EditFacade: orchestrate exact-match edits and whole-file writes.

Main entry point for the edit protocol.
"""

from pathlib import Path
from typing import Optional

from scalpel.diff import character_diff, unified_diff
from scalpel.exceptions import AccessDeniedError, BackupError, InvalidPatternError
from scalpel.logging_config import logger
from scalpel.schemas import (
    BackupRecord,
    EditErrorCode,
    EditOutcome,
    EditRequest,
    EditorConfig,
    WriteOutcome,
)

from .backup import BackupManager
from .formatter import ExternalFormatter, Formatter, language_for_path
from .guard import PathGuard
from .matcher import LiteralMatcher
from .similarity import SimilarityFinder
from .storage import FileStore


class EditFacade:
    """
    Main facade for exact-match editing.

    Orchestrates the edit pipeline:
    1. Check pattern and path (LiteralMatcher, PathGuard), before any I/O
    2. Read the file (FileStore)
    3. Validate the occurrence count; on zero, look for a near miss (SimilarityFinder)
    4. Snapshot the file (BackupManager), best effort
    5. Replace every occurrence (LiteralMatcher)
    6. Format the result (Formatter), best effort
    7. Write atomically (FileStore)
    8. Describe the change (character diff of the patterns, unified diff of the file)

    A rejected request never touches the file. Read and write failures raise
    StorageError; backup and formatter failures only drop the optional
    fields of the outcome.
    """

    def __init__(
        self,
        config: EditorConfig,
        formatter: Optional[Formatter] = None,
        store: Optional[FileStore] = None,
        backups: Optional[BackupManager] = None,
        similarity: Optional[SimilarityFinder] = None,
    ):
        """
        Initialize edit facade.

        Args:
            config: Editor configuration (allow-list, diff settings, formatter table)
            formatter: Formatter used when a request asks for formatting.
                Defaults to ExternalFormatter built from config.
            store: File reader/writer
            backups: Backup manager
            similarity: Near-miss finder for NO_MATCH diagnostics
        """
        self.config = config
        self.guard = PathGuard(config.allowed_directories)
        self.formatter = formatter or ExternalFormatter(
            config.formatters,
            timeout=config.formatter_timeout,
        )
        self.store = store or FileStore()
        self.backups = backups or BackupManager()
        self.similarity = similarity or SimilarityFinder()

        logger.debug(f"EditFacade initialized ({len(self.guard.allowed_directories)} allowed dir(s))")

    def edit(self, request: EditRequest) -> EditOutcome:
        """
        Replace every occurrence of request.old_pattern in request.path.

        Args:
            request: Edit request

        Returns:
            EditOutcome; success is False for INVALID_PATTERN, ACCESS_DENIED,
            NO_MATCH and COUNT_MISMATCH rejections

        Raises:
            StorageError: If the file cannot be read or written
        """
        logger.info(f"Editing {request.path} (expecting {request.expected_replacements} occurrence(s))")

        try:
            matcher = LiteralMatcher(request.old_pattern)
        except InvalidPatternError as e:
            return self._rejected(request, EditErrorCode.INVALID_PATTERN, e.message)

        try:
            target = str(self.guard.check(request.path))
        except AccessDeniedError as e:
            return self._rejected(request, EditErrorCode.ACCESS_DENIED, str(e))

        # Reading
        original = self.store.read(target)

        # Validating
        count = matcher.count(original).count
        if count == 0:
            suggestion = self.similarity.find(original, request.old_pattern)
            logger.info(
                f"No match in {request.path}"
                + (f", closest at offset {suggestion.window_start}" if suggestion else "")
            )
            outcome = self._rejected(
                request,
                EditErrorCode.NO_MATCH,
                "No matches found for the specified old pattern",
            )
            outcome.suggestion = suggestion
            return outcome

        if count != request.expected_replacements:
            logger.info(f"Count mismatch in {request.path}: found {count}, expected {request.expected_replacements}")
            outcome = self._rejected(
                request,
                EditErrorCode.COUNT_MISMATCH,
                f"Found {count} occurrences of the specified pattern, "
                f"but expected {request.expected_replacements}",
            )
            outcome.actual_replacements = count
            return outcome

        # Backing up
        backup = None
        if request.create_backup:
            backup = self._try_backup(target)

        # Replacing
        modified, replaced = matcher.replace(original, request.new_pattern)

        # Formatting
        formatted = False
        if request.format_after_edit:
            modified, formatted = self._try_format(target, modified)

        # Writing
        self.store.write(target, modified)

        # Diffing
        outcome = EditOutcome(
            success=True,
            path=request.path,
            replacement_count=replaced,
            expected_replacements=request.expected_replacements,
            backup_path=backup.backup_path if backup else None,
            formatted=formatted,
            diff=character_diff(request.old_pattern, request.new_pattern),
        )
        if self.config.include_file_diff:
            outcome.unified_diff = unified_diff(
                original,
                modified,
                context_lines=self.config.context_lines,
                from_file=f"a/{request.path}",
                to_file=f"b/{request.path}",
            ).render()

        logger.info(f"Replaced {replaced} occurrence(s) in {request.path}")
        return outcome

    def write_file(self, file_path: str, content: str, create_backup: bool = True) -> WriteOutcome:
        """
        Replace a file's whole content, creating the file if needed.

        Args:
            file_path: Target path
            content: New content
            create_backup: Snapshot an existing file first

        Returns:
            WriteOutcome; for an existing file it carries the character diff
            between the old and new content

        Raises:
            StorageError: If the file cannot be read or written
        """
        try:
            target = str(self.guard.check(file_path))
        except AccessDeniedError as e:
            return WriteOutcome(
                success=False,
                path=file_path,
                new_file=False,
                error_code=EditErrorCode.ACCESS_DENIED,
                error=str(e),
            )

        existed = Path(target).is_file()
        original = self.store.read(target) if existed else None

        backup = None
        if existed and create_backup:
            backup = self._try_backup(target)

        self.store.write(target, content)

        diff = character_diff(original, content) if original is not None else None
        logger.info(f"Wrote {len(content)} chars to {file_path}" + ("" if existed else " (new file)"))

        return WriteOutcome(
            success=True,
            path=file_path,
            new_file=not existed,
            backup_path=backup.backup_path if backup else None,
            changes_count=diff.change_magnitude if diff else len(content),
            diff=diff,
        )

    def restore_backup(self, backup_path: str) -> BackupRecord:
        """
        Copy a backup over the file it was taken from.

        Raises:
            AccessDeniedError: If either path is outside the allow-list
            BackupError: If the backup is unknown or cannot be copied
        """
        record = self.backups.record_for(str(self.guard.check(backup_path)))
        self.guard.check(record.original_path)
        self.backups.restore(record)
        return record

    def _try_backup(self, target: str) -> Optional[BackupRecord]:
        try:
            return self.backups.create_backup(target)
        except BackupError as e:
            logger.warning(f"Continuing without backup: {e}")
            return None

    def _try_format(self, target: str, content: str):
        """Returns (content, formatted)."""
        language = language_for_path(target)
        if language is None:
            logger.debug(f"No formatter mapping for {target}, skipping format")
            return content, False
        try:
            return self.formatter.format(content, language), True
        except Exception as e:
            # Any Formatter implementation may be plugged in here
            logger.warning(f"Writing unformatted content: {e}")
            return content, False

    def _rejected(self, request: EditRequest, code: EditErrorCode, message: str) -> EditOutcome:
        return EditOutcome(
            success=False,
            path=request.path,
            expected_replacements=request.expected_replacements,
            error_code=code,
            error=message,
        )
