"""
LiteralMatcher: count and replace exact, non-overlapping occurrences.
"""

import re
from typing import Tuple

from scalpel.exceptions import InvalidPatternError
from scalpel.schemas import MatchResult


class LiteralMatcher:
    """
    Match a pattern as literal text.

    The pattern is escaped before compiling, so regular-expression
    metacharacters in caller text (". * + ? ^ $ { } ( ) [ ] | \\") only ever
    match themselves. Counting and replacing share the same compiled
    expression, so a replacement touches exactly the occurrences counted.
    """

    def __init__(self, pattern: str):
        if not pattern:
            raise InvalidPatternError()
        self.pattern = pattern
        self._regex = re.compile(re.escape(pattern))

    def count(self, buffer: str) -> MatchResult:
        """Count occurrences scanning left to right; matches consume their span."""
        return MatchResult(count=sum(1 for _ in self._regex.finditer(buffer)))

    def replace(self, buffer: str, replacement: str) -> Tuple[str, int]:
        """
        Replace every occurrence with replacement text.

        Returns:
            (new_buffer, replacement_count)
        """
        # A callable keeps backslashes and group references in the
        # replacement literal
        return self._regex.subn(lambda _match: replacement, buffer)


def count_occurrences(buffer: str, pattern: str) -> int:
    """Number of non-overlapping literal occurrences of pattern in buffer."""
    return LiteralMatcher(pattern).count(buffer).count
