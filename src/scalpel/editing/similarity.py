"""
SimilarityFinder: near-miss suggestions for patterns that were not found.
"""

import math
from typing import Optional

from scalpel.diff import character_diff
from scalpel.logging_config import logger
from scalpel.schemas import SimilarityMatch
from .config import SIMILARITY_THRESHOLDS


def positional_similarity(window: str, pattern: str) -> float:
    """
    Share of aligned positions holding the same character, ignoring case.

    Characters are compared index by index with no alignment search, and
    the count is divided by the longer of the two lengths.
    """
    longest = max(len(window), len(pattern))
    if longest == 0:
        return 0.0
    matches = sum(
        1 for a, b in zip(window, pattern) if a == b or a.casefold() == b.casefold()
    )
    return matches / longest


class SimilarityFinder:
    """
    Scan a buffer for the first window resembling a pattern.

    Windows are len(pattern) characters wide and start at every offset while
    at least half the pattern length remains. The first window scoring above
    the threshold wins; there is no best-of-all search.
    """

    def __init__(
        self,
        min_score: float = SIMILARITY_THRESHOLDS["min_score"],
        min_window_ratio: float = SIMILARITY_THRESHOLDS["min_window_ratio"],
    ):
        self.min_score = min_score
        self.min_window_ratio = min_window_ratio

    def find(self, buffer: str, pattern: str) -> Optional[SimilarityMatch]:
        """
        Find the first approximate match for pattern in buffer.

        Args:
            buffer: Text to scan
            pattern: Pattern that had no exact occurrence

        Returns:
            SimilarityMatch with the window diffed against the pattern, or None
        """
        if not pattern:
            return None

        width = len(pattern)
        min_remaining = math.floor(width * self.min_window_ratio)

        for start in range(len(buffer) - min_remaining):
            window = buffer[start:start + width]
            score = positional_similarity(window, pattern)
            if score > self.min_score:
                logger.debug(f"Closest match at offset {start} (score {score:.2f})")
                return SimilarityMatch(
                    window_start=start,
                    window=window,
                    score=score,
                    diff=character_diff(window, pattern),
                )

        return None
