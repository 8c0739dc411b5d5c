"""
Editing package: exact-match replacement with backups and diagnostics.

Patterns are matched as literal text, the occurrence count is verified
before anything is written, and a timestamped backup is taken before the
file is replaced.
"""

from .facade import EditFacade
from .matcher import LiteralMatcher, count_occurrences
from .similarity import SimilarityFinder, positional_similarity
from .backup import BackupManager
from .guard import PathGuard
from .formatter import ExternalFormatter, Formatter, language_for_path
from .storage import FileStore
from .config import (
    BACKUP_SUFFIX,
    SIMILARITY_THRESHOLDS,
    EXTENSION_LANGUAGES,
    FORMATTERS,
)

__all__ = [
    # Main facade
    "EditFacade",

    # Components
    "LiteralMatcher",
    "count_occurrences",
    "SimilarityFinder",
    "positional_similarity",
    "BackupManager",
    "PathGuard",
    "ExternalFormatter",
    "Formatter",
    "language_for_path",
    "FileStore",

    # Configuration
    "BACKUP_SUFFIX",
    "SIMILARITY_THRESHOLDS",
    "EXTENSION_LANGUAGES",
    "FORMATTERS",
]
