"""
Diff engine: character-level and line-level change descriptions.
"""

from .character import character_diff
from .lines import (
    DEFAULT_CONTEXT_LINES,
    LOOKAHEAD_WINDOW,
    diff_lines,
    line_diff,
    unified_diff,
)

__all__ = [
    "character_diff",
    "diff_lines",
    "line_diff",
    "unified_diff",
    "DEFAULT_CONTEXT_LINES",
    "LOOKAHEAD_WINDOW",
]
