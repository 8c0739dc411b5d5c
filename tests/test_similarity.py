"""
Unit tests for SimilarityFinder near-miss suggestions.
"""

from scalpel.editing import SimilarityFinder, positional_similarity


class TestPositionalSimilarity:

    def test_identical(self):
        assert positional_similarity("abcd", "abcd") == 1.0

    def test_divides_by_longer_length(self):
        assert positional_similarity("ab", "abcd") == 0.5

    def test_no_alignment_search(self):
        # Shifted by one, nothing lines up
        assert positional_similarity("xabc", "abcx") == 0.0

    def test_case_differences_still_align(self):
        assert positional_similarity("oldName", "oldname") == 1.0

    def test_empty(self):
        assert positional_similarity("", "") == 0.0


class TestSimilarityFinder:

    def test_finds_near_miss(self):
        buffer = "function oldName() {}"
        pattern = "function oldnam() {}"

        match = SimilarityFinder().find(buffer, pattern)

        assert match is not None
        assert match.score > 0.7
        assert match.window_start == 0
        assert "oldName" in match.window

    def test_suggestion_diff_is_window_against_pattern(self):
        buffer = "let total = compute(a, b);"
        pattern = "let total = compute(a, c);"

        match = SimilarityFinder().find(buffer, pattern)

        assert match is not None
        assert match.window == buffer
        assert match.diff.removed_span == "b"
        assert match.diff.added_span == "c"
        assert match.diff.rendered == "let total = compute(a, {-b-}{+c+});"

    def test_first_window_above_threshold_wins(self):
        # Both windows clear the threshold; the earlier one is returned
        buffer = "abcdefghiX abcdefghij"
        match = SimilarityFinder().find(buffer, "abcdefghij")
        assert match.window_start == 0

    def test_no_suggestion_below_threshold(self):
        assert SimilarityFinder().find("completely unrelated text", "zzzzzz") is None

    def test_threshold_is_strict(self):
        # 7 of 10 positions match: exactly 0.7 does not qualify
        assert SimilarityFinder().find("abcdefgXYZ", "abcdefghij") is None

    def test_short_buffer(self):
        assert SimilarityFinder().find("ab", "abcdefgh") is None

    def test_custom_threshold(self):
        finder = SimilarityFinder(min_score=0.5)
        match = finder.find("abcdefgXYZ", "abcdefghij")
        assert match is not None
        assert match.score == 0.7
