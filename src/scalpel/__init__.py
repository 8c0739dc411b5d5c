"""
Scalpel - exact-match file editing

Literal pattern replacement with occurrence-count verification, near-miss
diagnostics, backup-before-write and diff rendering.
"""

__version__ = "1.0.0"

from scalpel.diff import character_diff, line_diff, unified_diff
from scalpel.editing import EditFacade
from scalpel.schemas import EditOutcome, EditRequest, EditorConfig
from scalpel.user_config import UserConfig

__all__ = [
    "__version__",
    "EditFacade",
    "EditRequest",
    "EditOutcome",
    "EditorConfig",
    "UserConfig",
    "character_diff",
    "line_diff",
    "unified_diff",
]
