from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class MatchResult(BaseModel):
    """
    Number of non-overlapping literal occurrences of a pattern in a buffer.
    """
    count: int = Field(ge=0)


class CharDiff(BaseModel):
    """
    Character-level change description around a single differing span.

    `old == common_prefix + removed_span + common_suffix` and
    `new == common_prefix + added_span + common_suffix` always hold.
    """
    common_prefix: str
    common_suffix: str
    common_prefix_length: int
    common_suffix_length: int
    removed_span: str
    added_span: str
    change_magnitude: int  # max(len(removed_span), len(added_span))
    rendered: str  # prefix{-removed-}{+added+}suffix


class SimilarityMatch(BaseModel):
    """
    Closest approximate match for a pattern that was not found verbatim.
    """
    window_start: int  # Offset of the window in the searched buffer
    window: str
    score: float = Field(ge=0.0, le=1.0)
    diff: CharDiff  # window -> pattern


class LineChangeKind(str, Enum):
    ADD = "add"
    REMOVE = "remove"


class LineDiffEntry(BaseModel):
    """
    A single added or removed line.
    """
    kind: LineChangeKind
    line_number: int  # 1-indexed, in the sequence the line belongs to
    content: str


class DiffHunk(BaseModel):
    """
    Contiguous block of context/removed/added lines in a unified diff.
    """
    old_start: int
    old_count: int
    new_start: int
    new_count: int
    lines: List[str] = Field(default_factory=list)  # Prefixed with " ", "-" or "+"

    @property
    def header(self) -> str:
        return f"@@ -{self.old_start},{self.old_count} +{self.new_start},{self.new_count} @@"


class UnifiedDiff(BaseModel):
    """
    Ordered hunks describing the line changes between two texts.
    """
    from_file: Optional[str] = None
    to_file: Optional[str] = None
    hunks: List[DiffHunk] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.hunks

    def render(self) -> str:
        """Render as unified diff text (empty string when nothing changed)."""
        if not self.hunks:
            return ""
        out = []
        if self.from_file is not None or self.to_file is not None:
            out.append(f"--- {self.from_file or ''}")
            out.append(f"+++ {self.to_file or ''}")
        for hunk in self.hunks:
            out.append(hunk.header)
            out.extend(hunk.lines)
        return "\n".join(out) + "\n"


class BackupRecord(BaseModel):
    """
    Snapshot of a file taken before a destructive write.
    Never overwritten; cleanup belongs to the caller.
    """
    original_path: str
    backup_path: str  # original_path + ".backup-" + epoch millis
    created_at: float  # Epoch seconds


class EditRequest(BaseModel):
    """
    Replace every occurrence of old_pattern with new_pattern in one file.
    """
    path: str
    old_pattern: str
    new_pattern: str = ""  # Empty means deletion
    expected_replacements: int = Field(default=1, ge=1)
    create_backup: bool = True
    format_after_edit: bool = False


class EditErrorCode(str, Enum):
    INVALID_PATTERN = "INVALID_PATTERN"
    ACCESS_DENIED = "ACCESS_DENIED"
    NO_MATCH = "NO_MATCH"
    COUNT_MISMATCH = "COUNT_MISMATCH"


class EditOutcome(BaseModel):
    """
    Result of an edit request.

    On rejection `success` is False, `error_code` tells NO_MATCH from
    COUNT_MISMATCH, and the file on disk is untouched.
    """
    success: bool
    path: str
    replacement_count: int = 0
    expected_replacements: int = 1
    backup_path: Optional[str] = None
    formatted: bool = False
    diff: Optional[CharDiff] = None  # old_pattern -> new_pattern
    unified_diff: Optional[str] = None  # Whole file, before -> after
    error_code: Optional[EditErrorCode] = None
    error: Optional[str] = None
    actual_replacements: Optional[int] = None  # Set on COUNT_MISMATCH
    suggestion: Optional[SimilarityMatch] = None  # Set on NO_MATCH when found


class WriteOutcome(BaseModel):
    """
    Result of a whole-file write.
    """
    success: bool
    path: str
    new_file: bool
    backup_path: Optional[str] = None
    changes_count: int = 0
    diff: Optional[CharDiff] = None  # None for new files
    error_code: Optional[EditErrorCode] = None
    error: Optional[str] = None


class EditorConfig(BaseModel):
    """
    Explicit editor configuration handed to the orchestrator at construction.
    """
    allowed_directories: List[str] = Field(default_factory=list)
    context_lines: int = Field(default=3, ge=0)
    include_file_diff: bool = True
    formatter_timeout: float = Field(default=30.0, gt=0)
    formatters: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
