"""
Unit tests for LiteralMatcher: literal counting and replacement.
"""

import pytest

from scalpel.editing import LiteralMatcher, count_occurrences
from scalpel.exceptions import InvalidPatternError


class TestLiteralMatcher:
    """Test occurrence counting."""

    def test_counts_non_overlapping_occurrences(self):
        assert count_occurrences("foo bar foo baz foo", "foo") == 3

    def test_overlapping_occurrences_are_not_double_counted(self):
        assert count_occurrences("aaaa", "aa") == 2
        assert count_occurrences("aaa", "aa") == 1

    def test_zero_occurrences(self):
        assert count_occurrences("hello", "world") == 0

    def test_regex_metacharacters_match_literally(self):
        buffer = "x = a.b*c\ny = axbbbc\n"
        assert count_occurrences(buffer, "a.b*c") == 1

    @pytest.mark.parametrize("pattern", [
        "(x)", "[0-9]", "a+b", "end$", "^start", "{1,2}", "a|b", "back\\slash", "why?",
    ])
    def test_metacharacter_patterns(self, pattern):
        buffer = f"before {pattern} middle {pattern} after"
        assert count_occurrences(buffer, pattern) == 2

    def test_empty_pattern_is_invalid(self):
        with pytest.raises(InvalidPatternError):
            LiteralMatcher("")

    def test_count_returns_match_result(self):
        result = LiteralMatcher("ab").count("abab")
        assert result.count == 2


class TestLiteralReplace:
    """Test replacement uses the same occurrences as counting."""

    def test_replace_all(self):
        text, n = LiteralMatcher("foo").replace("foo foo", "bar")
        assert text == "bar bar"
        assert n == 2

    def test_replacement_backslashes_are_literal(self):
        text, n = LiteralMatcher("path").replace("path", r"C:\new\1")
        assert text == r"C:\new\1"
        assert n == 1

    def test_replace_count_matches_count(self):
        buffer = "aaaaa"
        matcher = LiteralMatcher("aa")
        _, n = matcher.replace(buffer, "b")
        assert n == matcher.count(buffer).count == 2

    def test_identity_replacement_is_idempotent(self):
        buffer = "one two one"
        text, n = LiteralMatcher("one").replace(buffer, "one")
        assert text == buffer
        assert n == 2

    def test_deletion(self):
        text, _ = LiteralMatcher(" world").replace("hello world", "")
        assert text == "hello"
